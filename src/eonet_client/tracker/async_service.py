"""Tracker operations over an async transport (single request per call)."""

from __future__ import annotations

from typing import Protocol

from ..config import DEFAULT_BASE_URL
from .models import Collection
from .queries import CategoryQuery, QueryParameters
from .service_shared import (
    categories_url,
    category_events_url,
    category_layers_url,
    decode_collection,
    events_by_date_url,
    events_by_source_url,
    events_url,
    geojson_events_url,
    layers_url,
    recent_open_events_url,
    sources_url,
)


class AsyncFetcher(Protocol):
    async def fetch(self, url: str) -> bytes: ...


class AsyncTrackerService:
    """Async counterpart of TrackerService."""

    def __init__(self, transport: AsyncFetcher, *, base_url: str = DEFAULT_BASE_URL) -> None:
        self._transport = transport
        self._base_url = base_url

    async def _collection(self, url: str) -> Collection:
        return decode_collection(await self._transport.fetch(url))

    async def get_events(self, query: QueryParameters | None = None) -> bytes:
        return await self._transport.fetch(events_url(self._base_url, query or QueryParameters()))

    async def get_geojson_events(self, query: QueryParameters | None = None) -> bytes:
        return await self._transport.fetch(
            geojson_events_url(self._base_url, query or QueryParameters())
        )

    async def get_recent_open_events(self, limit: str = "") -> Collection:
        return await self._collection(recent_open_events_url(self._base_url, limit))

    async def get_events_by_date(self, start_date: str, end_date: str = "") -> Collection:
        return await self._collection(events_by_date_url(self._base_url, start_date, end_date))

    async def get_events_by_source_id(self, source_id: str) -> Collection:
        return await self._collection(events_by_source_url(self._base_url, source_id))

    async def get_sources(self) -> Collection:
        return await self._collection(sources_url(self._base_url))

    async def get_categories(self) -> Collection:
        return await self._collection(categories_url(self._base_url))

    async def get_events_by_category_id(
        self,
        category_id: str,
        query: CategoryQuery | None = None,
    ) -> Collection:
        return await self._collection(category_events_url(self._base_url, category_id, query))

    async def get_layers(self) -> Collection:
        return await self._collection(layers_url(self._base_url))

    async def get_layers_by_category_id(self, category_id: str) -> Collection:
        return await self._collection(category_layers_url(self._base_url, category_id))


__all__ = [
    "AsyncTrackerService",
]
