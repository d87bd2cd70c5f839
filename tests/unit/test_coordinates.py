from __future__ import annotations

import logging

import pytest

from eonet_client.core.errors import EonetDecodeError
from eonet_client.tracker.coordinates import decode_coordinates


def test_nested_pair_text_decodes_to_single_pair():
    assert decode_coordinates("[[10.5, 20.1]]") == ((10.5, 20.1),)


def test_single_pair_text_is_normalized_to_one_element_sequence():
    assert decode_coordinates("[10.5, 20.1]") == decode_coordinates("[[10.5, 20.1]]")


def test_decoded_point_is_normalized():
    assert decode_coordinates([-120.4921, 43.1873]) == ((-120.4921, 43.1873),)


def test_list_of_pairs_is_kept_in_order():
    assert decode_coordinates([[1, 2], [3, 4], [5, 6]]) == ((1.0, 2.0), (3.0, 4.0), (5.0, 6.0))


def test_polygon_rings_are_flattened_in_document_order():
    polygon = [[[1, 2], [3, 4]], [[5, 6], [7, 8]]]
    assert decode_coordinates(polygon) == ((1.0, 2.0), (3.0, 4.0), (5.0, 6.0), (7.0, 8.0))


def test_polygon_text_and_bytes_are_accepted():
    text = "[[[77.1, -66.2], [77.9, -66.2]]]"
    expected = ((77.1, -66.2), (77.9, -66.2))
    assert decode_coordinates(text) == expected
    assert decode_coordinates(text.encode("utf-8")) == expected


def test_empty_array_decodes_to_empty_tuple():
    assert decode_coordinates("[]") == ()
    assert decode_coordinates([[]]) == ()


def test_result_is_immutable_tuple_of_tuples():
    result = decode_coordinates([[1, 2]])
    assert isinstance(result, tuple)
    assert isinstance(result[0], tuple)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("[abc, 20.1]", ((0.0, 20.1),)),
        ('[["x", "y"]]', ((0.0, 0.0),)),
        ([None, 3], ((0.0, 3.0),)),
        ([True, 3], ((0.0, 3.0),)),
        ([7], ((7.0, 0.0),)),
        (["1.5", "2.5"], ((1.5, 2.5),)),
    ],
)
def test_malformed_numeric_members_fall_back_to_zero(raw, expected):
    assert decode_coordinates(raw) == expected


def test_fallback_is_logged_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="eonet_client")
    decode_coordinates("[abc, 1]")
    assert any("not numeric" in record.getMessage() for record in caplog.records)


def test_extra_members_are_ignored():
    assert decode_coordinates([1, 2, 300]) == ((1.0, 2.0),)


@pytest.mark.parametrize(
    "raw",
    [
        "[[1, 2]",
        "[1, 2",
        "5",
        "",
        "[1, 2] x",
        "[1 2]]",
        '["1, 2]',
        '["\\q", 1]',
        5,
        {"lon": 1},
        [1, [2, 3]],
    ],
)
def test_structurally_broken_input_raises_decode_error(raw):
    with pytest.raises(EonetDecodeError):
        decode_coordinates(raw)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ('["1.5", "2.5"]', ((1.5, 2.5),)),
        ('["1,5", "a]"]', ((0.0, 0.0),)),
        ('[["1", "[2"], [3, 4]]', ((1.0, 0.0), (3.0, 4.0))),
        ('["\\"]", 7]', ((0.0, 7.0),)),
    ],
)
def test_quoted_members_are_read_as_single_tokens(raw, expected):
    assert decode_coordinates(raw) == expected


def _deeply_nested(depth: int) -> list[object]:
    node: list[object] = [1, 2]
    for _ in range(depth):
        node = [node]
    return node


@pytest.mark.parametrize(
    "raw",
    ["[" * 5000 + "1, 2" + "]" * 5000, _deeply_nested(100_000)],
    ids=["text", "decoded"],
)
def test_deeply_nested_input_raises_decode_error(raw):
    with pytest.raises(EonetDecodeError, match="nested too deeply"):
        decode_coordinates(raw)
