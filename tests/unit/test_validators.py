from __future__ import annotations

import pytest

from eonet_client.core.errors import EonetValidationError
from eonet_client.tracker.validators import is_valid_date, validate_date_range


@pytest.mark.parametrize("value", ["2021-03-01", "2020-02-29", "1999-12-31"])
def test_is_valid_date_accepts_iso_calendar_dates(value):
    assert is_valid_date(value) is True


@pytest.mark.parametrize(
    "value",
    ["", "2021-13-40", "2021-02-29", "2021-3-1", "20210301", "2021-03-01T00:00:00Z", " 2021-03-01", "bad-date"],
)
def test_is_valid_date_rejects_everything_else(value):
    assert is_valid_date(value) is False


def test_validate_date_range_rejects_bad_start():
    with pytest.raises(EonetValidationError, match="starting date"):
        validate_date_range("", "")


def test_validate_date_range_rejects_bad_end():
    with pytest.raises(EonetValidationError, match="ending date"):
        validate_date_range("2021-03-01", "bad-date")


def test_validate_date_range_allows_open_end():
    validate_date_range("2021-03-01", "")
    validate_date_range("2021-03-01", "2021-03-31")
