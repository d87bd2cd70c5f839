"""URL assembly for API endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import quote, urlencode


def path_segment(value: str) -> str:
    return quote(value, safe="")


def build_url(base_url: str, path: str, params: Mapping[str, str] | None = None) -> str:
    """Join ``path`` onto ``base_url`` and append ``params`` sorted by key.

    Key order is fixed so identical parameter sets always produce identical URLs.
    """

    url = base_url.rstrip("/") + "/" + path.lstrip("/")
    if not params:
        return url
    return url + "?" + urlencode(sorted(params.items()))


__all__ = [
    "path_segment",
    "build_url",
]
