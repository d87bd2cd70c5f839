"""Public client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .client_shared import validate_client_config
from .config import EonetClientConfig
from .core.errors import EonetClientClosedError
from .core.transport import SyncTransport
from .tracker.models import Collection
from .tracker.queries import CategoryQuery, QueryParameters
from .tracker.service import TrackerService


class _GuardedTrackerService:
    """Guard wrapper to block usage after client close."""

    def __init__(self, owner: "EonetClient", delegate: TrackerService) -> None:
        self._owner = owner
        self._delegate = delegate

    def get_events(self, query: QueryParameters | None = None) -> bytes:
        self._owner._ensure_open()
        return self._delegate.get_events(query)

    def get_geojson_events(self, query: QueryParameters | None = None) -> bytes:
        self._owner._ensure_open()
        return self._delegate.get_geojson_events(query)

    def get_recent_open_events(self, limit: str = "") -> Collection:
        self._owner._ensure_open()
        return self._delegate.get_recent_open_events(limit)

    def get_events_by_date(self, start_date: str, end_date: str = "") -> Collection:
        self._owner._ensure_open()
        return self._delegate.get_events_by_date(start_date, end_date)

    def get_events_by_source_id(self, source_id: str) -> Collection:
        self._owner._ensure_open()
        return self._delegate.get_events_by_source_id(source_id)

    def get_sources(self) -> Collection:
        self._owner._ensure_open()
        return self._delegate.get_sources()

    def get_categories(self) -> Collection:
        self._owner._ensure_open()
        return self._delegate.get_categories()

    def get_events_by_category_id(
        self,
        category_id: str,
        query: CategoryQuery | None = None,
    ) -> Collection:
        self._owner._ensure_open()
        return self._delegate.get_events_by_category_id(category_id, query)

    def get_layers(self) -> Collection:
        self._owner._ensure_open()
        return self._delegate.get_layers()

    def get_layers_by_category_id(self, category_id: str) -> Collection:
        self._owner._ensure_open()
        return self._delegate.get_layers_by_category_id(category_id)


class EonetClient:
    """Public EONET API client."""

    def __init__(
        self,
        *,
        config: EonetClientConfig | None = None,
        transport: SyncTransport | None = None,
        tracker_service: TrackerService | None = None,
    ) -> None:
        self._config = config or EonetClientConfig()
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config)
        internal_tracker = tracker_service or TrackerService(
            self._transport,
            base_url=self._config.base_url,
        )
        self._closed = False
        self.tracker = _GuardedTrackerService(self, internal_tracker)

    def _ensure_open(self) -> None:
        if self._closed:
            raise EonetClientClosedError("EonetClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "EonetClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "EonetClient",
]
