from __future__ import annotations

import json

import pytest


@pytest.mark.parametrize(
    ("filename", "list_key"),
    [
        ("events.json", "events"),
        ("categories.json", "categories"),
        ("layers_wildfires.json", "categories"),
        ("sources.json", "sources"),
    ],
)
def test_fixture_has_collection_envelope(fixture_loader, filename, list_key):
    payload = json.loads(fixture_loader(filename))
    assert {"title", "description", "link"}.issubset(set(payload.keys()))
    assert isinstance(payload[list_key], list)
    assert payload[list_key]
