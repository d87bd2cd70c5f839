"""Query models."""

from __future__ import annotations

from dataclasses import dataclass


def _check_count(value: object, *, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int")
    if value < 0:
        raise ValueError(f"{name} must be >= 0")


@dataclass(slots=True, frozen=True)
class QueryParameters:
    """Filters for the events endpoints.

    Empty strings and zero counts mean "not set". ``end`` only takes effect
    together with ``start``. See https://eonet.gsfc.nasa.gov/docs/v3 for the
    meaning of each filter.
    """

    source: str = ""
    status: str = ""
    limit: int = 0
    days: int = 0
    start: str = ""
    end: str = ""
    mag_id: str = ""
    mag_min: str = ""
    mag_max: str = ""
    bbox: str = ""

    def __post_init__(self) -> None:
        _check_count(self.limit, name="limit")
        _check_count(self.days, name="days")

    def to_api_fields(self) -> dict[str, str | int]:
        return {
            "source": self.source,
            "status": self.status,
            "limit": self.limit,
            "days": self.days,
            "start": self.start,
            "end": self.end,
            "magID": self.mag_id,
            "magMin": self.mag_min,
            "magMax": self.mag_max,
            "bbox": self.bbox,
        }


@dataclass(slots=True, frozen=True)
class CategoryQuery:
    """Filters for category-scoped event listings."""

    source: str = ""
    status: str = ""
    limit: str = ""
    days: str = ""

    def to_api_fields(self) -> dict[str, str | int]:
        return {
            "source": self.source,
            "status": self.status,
            "limit": self.limit,
            "days": self.days,
        }


__all__ = [
    "QueryParameters",
    "CategoryQuery",
]
