"""Natural event tracker package."""

from .coordinates import decode_coordinates
from .models import (
    Category,
    Collection,
    Coordinates,
    Event,
    EventSource,
    Geometry,
    Layer,
    Source,
    SourcesCollection,
)
from .parser import parse_collection, parse_sources_collection
from .queries import CategoryQuery, QueryParameters
from .validators import is_valid_date

__all__ = [
    "QueryParameters",
    "CategoryQuery",
    "Category",
    "Collection",
    "Coordinates",
    "Event",
    "EventSource",
    "Geometry",
    "Layer",
    "Source",
    "SourcesCollection",
    "decode_coordinates",
    "parse_collection",
    "parse_sources_collection",
    "is_valid_date",
]
