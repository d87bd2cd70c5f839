"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_BASE_URL = "https://eonet.sci.gsfc.nasa.gov/api/v3"
DEFAULT_TIMEOUT_SECONDS = 5.0


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = DEFAULT_TIMEOUT_SECONDS
    timeout_read_seconds: float = DEFAULT_TIMEOUT_SECONDS
    timeout_write_seconds: float = DEFAULT_TIMEOUT_SECONDS
    timeout_pool_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class EonetClientConfig:
    """Runtime configuration for EONET client."""

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = "eonet-client/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError("base_url must be an absolute http(s) URL")
        self.transport.validate()


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "TransportConfig",
    "EonetClientConfig",
]
