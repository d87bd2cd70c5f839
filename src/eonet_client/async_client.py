"""Public async client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .client_shared import validate_client_config
from .config import EonetClientConfig
from .core.async_transport import AsyncTransport
from .core.errors import EonetClientClosedError
from .tracker.async_service import AsyncTrackerService
from .tracker.models import Collection
from .tracker.queries import CategoryQuery, QueryParameters


class _GuardedAsyncTrackerService:
    """Guard wrapper to block usage after async client close."""

    def __init__(self, owner: "AsyncEonetClient", delegate: AsyncTrackerService) -> None:
        self._owner = owner
        self._delegate = delegate

    async def get_events(self, query: QueryParameters | None = None) -> bytes:
        self._owner._ensure_open()
        return await self._delegate.get_events(query)

    async def get_geojson_events(self, query: QueryParameters | None = None) -> bytes:
        self._owner._ensure_open()
        return await self._delegate.get_geojson_events(query)

    async def get_recent_open_events(self, limit: str = "") -> Collection:
        self._owner._ensure_open()
        return await self._delegate.get_recent_open_events(limit)

    async def get_events_by_date(self, start_date: str, end_date: str = "") -> Collection:
        self._owner._ensure_open()
        return await self._delegate.get_events_by_date(start_date, end_date)

    async def get_events_by_source_id(self, source_id: str) -> Collection:
        self._owner._ensure_open()
        return await self._delegate.get_events_by_source_id(source_id)

    async def get_sources(self) -> Collection:
        self._owner._ensure_open()
        return await self._delegate.get_sources()

    async def get_categories(self) -> Collection:
        self._owner._ensure_open()
        return await self._delegate.get_categories()

    async def get_events_by_category_id(
        self,
        category_id: str,
        query: CategoryQuery | None = None,
    ) -> Collection:
        self._owner._ensure_open()
        return await self._delegate.get_events_by_category_id(category_id, query)

    async def get_layers(self) -> Collection:
        self._owner._ensure_open()
        return await self._delegate.get_layers()

    async def get_layers_by_category_id(self, category_id: str) -> Collection:
        self._owner._ensure_open()
        return await self._delegate.get_layers_by_category_id(category_id)


class AsyncEonetClient:
    """Public async EONET API client."""

    def __init__(
        self,
        *,
        config: EonetClientConfig | None = None,
        transport: AsyncTransport | None = None,
        tracker_service: AsyncTrackerService | None = None,
    ) -> None:
        self._config = config or EonetClientConfig()
        validate_client_config(self._config)

        self._transport = transport or AsyncTransport(self._config)
        internal_tracker = tracker_service or AsyncTrackerService(
            self._transport,
            base_url=self._config.base_url,
        )
        self._closed = False
        self.tracker = _GuardedAsyncTrackerService(self, internal_tracker)

    def _ensure_open(self) -> None:
        if self._closed:
            raise EonetClientClosedError("AsyncEonetClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncEonetClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncEonetClient",
]
