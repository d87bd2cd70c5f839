"""Request parameter builders for tracker endpoints."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .queries import CategoryQuery, QueryParameters

EVENTS_PARAM_NAMES: tuple[str, ...] = (
    "source",
    "status",
    "limit",
    "days",
    "start",
    "end",
    "magID",
    "magMin",
    "magMax",
    "bbox",
)
CATEGORY_PARAM_NAMES: tuple[str, ...] = ("source", "status", "limit", "days")

# Only sent when "start" is set.
_DATE_RANGE_NAMES = frozenset({"start", "end"})


def _to_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        raise TypeError("query values must be str or int, not bool")
    if isinstance(value, int):
        return str(value) if value > 0 else ""
    return str(value)


def build_query_params(
    values: Mapping[str, object],
    names: Sequence[str],
    *,
    omit_empty: bool,
) -> dict[str, str]:
    """Serialize ``values`` for the known ``names``.

    With ``omit_empty`` unset, every name is emitted and unset ones become
    explicit empty parameters (``limit=``).
    """

    has_start = _to_text(values.get("start")) != ""
    params: dict[str, str] = {}
    for name in names:
        if name in _DATE_RANGE_NAMES and not has_start:
            continue
        text = _to_text(values.get(name))
        if omit_empty and not text:
            continue
        params[name] = text
    return params


def build_events_params(query: QueryParameters) -> dict[str, str]:
    return build_query_params(query.to_api_fields(), EVENTS_PARAM_NAMES, omit_empty=True)


def build_simple_events_params(**fields: str) -> dict[str, str]:
    unknown = set(fields) - set(EVENTS_PARAM_NAMES)
    if unknown:
        raise TypeError(f"unknown events parameters: {', '.join(sorted(unknown))}")
    return build_query_params(fields, EVENTS_PARAM_NAMES, omit_empty=False)


def build_category_params(query: CategoryQuery) -> dict[str, str]:
    return build_query_params(query.to_api_fields(), CATEGORY_PARAM_NAMES, omit_empty=False)


__all__ = [
    "EVENTS_PARAM_NAMES",
    "CATEGORY_PARAM_NAMES",
    "build_query_params",
    "build_events_params",
    "build_simple_events_params",
    "build_category_params",
]
