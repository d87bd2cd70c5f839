"""Decoder for geometry coordinate arrays.

Points arrive as a single ``[lon, lat]`` pair and polygons as nested rings,
sometimes as JSON array text instead of a decoded array. Every shape is
normalized to a flat tuple of ``(lon, lat)`` pairs in document order.

Numeric members that cannot be read as numbers decode to ``0.0``.
"""

from __future__ import annotations

import json
import logging

from ..core.errors import EonetDecodeError
from .models import Coordinate, Coordinates

logger = logging.getLogger("eonet_client")

_FALLBACK = 0.0
_TOKEN_END = ",[]"


def _skip_ws(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _parse_string(text: str, pos: int) -> tuple[str, int]:
    end = pos + 1
    while end < len(text):
        if text[end] == "\\":
            end += 2
            continue
        if text[end] == '"':
            try:
                return json.loads(text[pos : end + 1]), end + 1
            except ValueError as exc:
                raise EonetDecodeError("invalid string in coordinates") from exc
        end += 1
    raise EonetDecodeError("unterminated string in coordinates")


def _parse_value(text: str, pos: int) -> tuple[object, int]:
    if text[pos] == "[":
        return _parse_array(text, pos + 1)
    if text[pos] == '"':
        return _parse_string(text, pos)
    end = pos
    while end < len(text) and text[end] not in _TOKEN_END:
        end += 1
    return text[pos:end].strip(), end


def _parse_array(text: str, pos: int) -> tuple[list[object], int]:
    items: list[object] = []
    pos = _skip_ws(text, pos)
    if pos < len(text) and text[pos] == "]":
        return items, pos + 1
    while True:
        if pos >= len(text):
            raise EonetDecodeError("unbalanced brackets in coordinates")
        item, pos = _parse_value(text, pos)
        items.append(item)
        pos = _skip_ws(text, pos)
        if pos >= len(text):
            raise EonetDecodeError("unbalanced brackets in coordinates")
        if text[pos] == ",":
            pos = _skip_ws(text, pos + 1)
            continue
        if text[pos] == "]":
            return items, pos + 1
        raise EonetDecodeError(f"unexpected character {text[pos]!r} in coordinates")


def _parse_text(text: str) -> object:
    pos = _skip_ws(text, 0)
    if pos >= len(text):
        raise EonetDecodeError("coordinates text is empty")
    value, pos = _parse_value(text, pos)
    if _skip_ws(text, pos) != len(text):
        raise EonetDecodeError("unexpected trailing characters in coordinates")
    return value


def _to_float(value: object) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            pass
    logger.debug("coordinate member %r is not numeric; using %s", value, _FALLBACK)
    return _FALLBACK


def _to_pair(members: list[object]) -> Coordinate:
    lon = _to_float(members[0]) if len(members) > 0 else _FALLBACK
    lat = _to_float(members[1]) if len(members) > 1 else _FALLBACK
    return (lon, lat)


def _collect_pairs(node: list[object], out: list[Coordinate]) -> None:
    nested = [isinstance(item, list) for item in node]
    if not any(nested):
        if node:
            out.append(_to_pair(node))
        return
    if not all(nested):
        raise EonetDecodeError("coordinates mix numbers and arrays at one level")
    for item in node:
        _collect_pairs(item, out)  # type: ignore[arg-type]


def decode_coordinates(raw: object) -> Coordinates:
    """Decode a coordinates value, either decoded JSON or JSON array text."""

    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = bytes(raw).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EonetDecodeError("coordinates text is not valid UTF-8") from exc
    pairs: list[Coordinate] = []
    try:
        if isinstance(raw, str):
            raw = _parse_text(raw)
        if not isinstance(raw, list):
            raise EonetDecodeError("coordinates must be an array")
        _collect_pairs(raw, pairs)
    except RecursionError as exc:
        raise EonetDecodeError("coordinates are nested too deeply") from exc
    return tuple(pairs)


__all__ = [
    "decode_coordinates",
]
