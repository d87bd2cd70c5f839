"""Shared response parsing helpers."""

from __future__ import annotations

import json

from .errors import EonetDecodeError


def parse_json_body(body: bytes) -> dict[str, object]:
    """Parse a response body and map parse failures to domain errors."""

    try:
        payload = json.loads(body)
    except (ValueError, TypeError, RecursionError) as exc:
        raise EonetDecodeError("response body is not valid JSON") from exc

    if not isinstance(payload, dict):
        raise EonetDecodeError("response JSON root must be an object")
    return payload


__all__ = [
    "parse_json_body",
]
