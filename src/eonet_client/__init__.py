"""Public package exports for EONET API client."""

from .async_client import AsyncEonetClient
from .client import EonetClient
from .config import EonetClientConfig, TransportConfig
from .core.errors import (
    EonetClientClosedError,
    EonetDecodeError,
    EonetError,
    EonetTransportError,
    EonetValidationError,
)
from .tracker import CategoryQuery, Collection, QueryParameters, is_valid_date

__all__ = [
    "EonetClient",
    "AsyncEonetClient",
    "EonetClientConfig",
    "TransportConfig",
    "EonetError",
    "EonetTransportError",
    "EonetValidationError",
    "EonetDecodeError",
    "EonetClientClosedError",
    "QueryParameters",
    "CategoryQuery",
    "Collection",
    "is_valid_date",
]
