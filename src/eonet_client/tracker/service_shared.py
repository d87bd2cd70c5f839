"""Shared URL preparation and decoding for sync/async tracker services."""

from __future__ import annotations

from ..core.response_parsing import parse_json_body
from ..core.urls import build_url, path_segment
from .models import Collection
from .params import build_category_params, build_events_params, build_simple_events_params
from .parser import parse_collection
from .queries import CategoryQuery, QueryParameters
from .validators import validate_date_range


def events_url(base_url: str, query: QueryParameters) -> str:
    return build_url(base_url, "events", build_events_params(query))


def geojson_events_url(base_url: str, query: QueryParameters) -> str:
    return build_url(base_url, "events/geojson", build_events_params(query))


def recent_open_events_url(base_url: str, limit: str) -> str:
    return build_url(base_url, "events", build_simple_events_params(limit=limit))


def events_by_date_url(base_url: str, start_date: str, end_date: str) -> str:
    validate_date_range(start_date, end_date)
    return build_url(
        base_url,
        "events",
        build_simple_events_params(start=start_date, end=end_date),
    )


def events_by_source_url(base_url: str, source_id: str) -> str:
    return build_url(base_url, "events", build_simple_events_params(source=source_id))


def sources_url(base_url: str) -> str:
    return build_url(base_url, "sources")


def categories_url(base_url: str) -> str:
    return build_url(base_url, "categories")


def category_events_url(
    base_url: str,
    category_id: str,
    query: CategoryQuery | None = None,
) -> str:
    return build_url(
        base_url,
        "categories/" + path_segment(category_id),
        build_category_params(query or CategoryQuery()),
    )


def layers_url(base_url: str) -> str:
    return build_url(base_url, "layers")


def category_layers_url(base_url: str, category_id: str) -> str:
    return build_url(base_url, "layers/" + path_segment(category_id))


def decode_collection(body: bytes) -> Collection:
    return parse_collection(parse_json_body(body))


__all__ = [
    "events_url",
    "geojson_events_url",
    "recent_open_events_url",
    "events_by_date_url",
    "events_by_source_url",
    "sources_url",
    "categories_url",
    "category_events_url",
    "layers_url",
    "category_layers_url",
    "decode_collection",
]
