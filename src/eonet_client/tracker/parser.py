"""Parsers from EONET JSON payload into typed response objects."""

from __future__ import annotations

from collections.abc import Mapping

from ..core.errors import EonetDecodeError
from .coordinates import decode_coordinates
from .models import (
    Category,
    Collection,
    Event,
    EventSource,
    Geometry,
    Layer,
    Source,
    SourcesCollection,
)

JsonObject = dict[str, object]


def _text(container: Mapping[str, object], key: str, *, numeric: bool = False) -> str | None:
    value = container.get(key)
    if value is None or isinstance(value, str):
        return value
    if numeric and isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise EonetDecodeError(f"{key} must be a string")


def _optional_float(container: Mapping[str, object], key: str) -> float | None:
    value = container.get(key)
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError as exc:
            raise EonetDecodeError(f"{key} must be a number") from exc
    raise EonetDecodeError(f"{key} must be a number")


def _as_object_list(container: Mapping[str, object], key: str) -> list[JsonObject]:
    raw = container.get(key, [])
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise EonetDecodeError(f"{key} must be a list")
    for item in raw:
        if not isinstance(item, dict):
            raise EonetDecodeError(f"{key} element must be an object")
    return raw


def _layer_from_item(item: JsonObject) -> Layer:
    return Layer(
        name=_text(item, "name") or "",
        service_url=_text(item, "serviceUrl"),
        service_type_id=_text(item, "serviceTypeId"),
        parameters=tuple(_as_object_list(item, "parameters")),
    )


def _category_from_item(item: JsonObject) -> Category:
    raw_layers = item.get("layers")
    layers_link: str | None = None
    layers: tuple[Layer, ...] = ()
    if isinstance(raw_layers, list):
        layers = tuple(_layer_from_item(layer) for layer in _as_object_list(item, "layers"))
    elif raw_layers is not None:
        layers_link = _text(item, "layers")

    return Category(
        id=_text(item, "id", numeric=True) or "",
        title=_text(item, "title") or "",
        link=_text(item, "link"),
        description=_text(item, "description"),
        layers_link=layers_link,
        layers=layers,
    )


def _source_from_item(item: JsonObject) -> Source:
    return Source(
        id=_text(item, "id", numeric=True) or "",
        title=_text(item, "title") or "",
        source=_text(item, "source") or "",
        link=_text(item, "link") or "",
    )


def _event_source_from_item(item: JsonObject) -> EventSource:
    return EventSource(
        id=_text(item, "id", numeric=True) or "",
        url=_text(item, "url") or "",
    )


def _geometry_from_item(item: JsonObject) -> Geometry:
    raw_coordinates = item.get("coordinates")
    return Geometry(
        magnitude_value=_optional_float(item, "magnitudeValue"),
        magnitude_unit=_text(item, "magnitudeUnit"),
        date=_text(item, "date") or "",
        type=_text(item, "type") or "",
        coordinates=decode_coordinates(raw_coordinates) if raw_coordinates is not None else (),
    )


def _event_from_item(item: JsonObject) -> Event:
    return Event(
        id=_text(item, "id", numeric=True) or "",
        title=_text(item, "title") or "",
        description=_text(item, "description"),
        link=_text(item, "link") or "",
        closed=_text(item, "closed"),
        categories=tuple(_category_from_item(c) for c in _as_object_list(item, "categories")),
        sources=tuple(_event_source_from_item(s) for s in _as_object_list(item, "sources")),
        geometries=tuple(_geometry_from_item(g) for g in _as_object_list(item, "geometry")),
    )


def parse_collection(payload: JsonObject) -> Collection:
    return Collection(
        title=_text(payload, "title") or "",
        description=_text(payload, "description") or "",
        link=_text(payload, "link") or "",
        events=tuple(_event_from_item(item) for item in _as_object_list(payload, "events")),
        categories=tuple(
            _category_from_item(item) for item in _as_object_list(payload, "categories")
        ),
        sources=tuple(_source_from_item(item) for item in _as_object_list(payload, "sources")),
    )


def parse_sources_collection(payload: JsonObject) -> SourcesCollection:
    return SourcesCollection(
        title=_text(payload, "title") or "",
        description=_text(payload, "description") or "",
        link=_text(payload, "link") or "",
        sources=tuple(_source_from_item(item) for item in _as_object_list(payload, "sources")),
    )


__all__ = [
    "parse_collection",
    "parse_sources_collection",
]
