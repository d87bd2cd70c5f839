"""Tracker domain and response models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

Coordinate = tuple[float, float]
Coordinates = tuple[Coordinate, ...]


def _freeze(instance: object, *names: str) -> None:
    for name in names:
        value = getattr(instance, name)
        if not isinstance(value, tuple):
            object.__setattr__(instance, name, tuple(value))


@dataclass(slots=True, frozen=True)
class Layer:
    name: str
    service_url: str | None
    service_type_id: str | None
    parameters: tuple[Mapping[str, object], ...] | list[Mapping[str, object]] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "parameters",
            tuple(MappingProxyType(dict(item)) for item in self.parameters),
        )


@dataclass(slots=True, frozen=True)
class Category:
    id: str
    title: str
    link: str | None = None
    description: str | None = None
    layers_link: str | None = None
    layers: tuple[Layer, ...] | list[Layer] = ()

    def __post_init__(self) -> None:
        _freeze(self, "layers")


@dataclass(slots=True, frozen=True)
class Source:
    id: str
    title: str
    source: str
    link: str


@dataclass(slots=True, frozen=True)
class SourcesCollection:
    title: str
    description: str
    link: str
    sources: tuple[Source, ...] | list[Source] = ()

    def __post_init__(self) -> None:
        _freeze(self, "sources")


@dataclass(slots=True, frozen=True)
class EventSource:
    id: str
    url: str


@dataclass(slots=True, frozen=True)
class Geometry:
    magnitude_value: float | None
    magnitude_unit: str | None
    date: str
    type: str
    coordinates: Coordinates | list[Coordinate] = ()

    def __post_init__(self) -> None:
        _freeze(self, "coordinates")


@dataclass(slots=True, frozen=True)
class Event:
    id: str
    title: str
    description: str | None
    link: str
    closed: str | None
    categories: tuple[Category, ...] | list[Category] = ()
    sources: tuple[EventSource, ...] | list[EventSource] = ()
    geometries: tuple[Geometry, ...] | list[Geometry] = ()

    def __post_init__(self) -> None:
        _freeze(self, "categories", "sources", "geometries")


@dataclass(slots=True, frozen=True)
class Collection:
    """Response envelope shared by the events, categories, layers and sources endpoints."""

    title: str
    description: str
    link: str
    events: tuple[Event, ...] | list[Event] = ()
    categories: tuple[Category, ...] | list[Category] = ()
    sources: tuple[Source, ...] | list[Source] = ()

    def __post_init__(self) -> None:
        _freeze(self, "events", "categories", "sources")


__all__ = [
    "Coordinate",
    "Coordinates",
    "Layer",
    "Category",
    "Source",
    "SourcesCollection",
    "EventSource",
    "Geometry",
    "Event",
    "Collection",
]
