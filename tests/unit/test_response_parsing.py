from __future__ import annotations

import pytest

from eonet_client.core.errors import EonetDecodeError
from eonet_client.core.response_parsing import parse_json_body


def test_parse_json_body_returns_object_payload():
    assert parse_json_body(b'{"title": "EONET Events"}') == {"title": "EONET Events"}


def test_parse_json_body_chains_underlying_error_for_invalid_json():
    with pytest.raises(EonetDecodeError, match="not valid JSON") as excinfo:
        parse_json_body(b"<html>503 Service Unavailable</html>")
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_parse_json_body_rejects_non_object_root():
    with pytest.raises(EonetDecodeError, match="root must be an object"):
        parse_json_body(b"[1, 2, 3]")


def test_parse_json_body_rejects_empty_body():
    with pytest.raises(EonetDecodeError):
        parse_json_body(b"")


def test_parse_json_body_maps_excessive_nesting_to_decode_error():
    with pytest.raises(EonetDecodeError, match="not valid JSON"):
        parse_json_body(b"[" * 100_000 + b"]" * 100_000)
