"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .config import EonetClientConfig
from .core.errors import EonetValidationError


def validate_client_config(config: EonetClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise EonetValidationError(str(exc)) from exc


__all__ = [
    "validate_client_config",
]
