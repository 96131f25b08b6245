import dataclasses

import pytest

from state import Coordinates, FetchState, ImageRef, Place, dedupe_by_id, place_ids


def test_place_from_backend_wire_format_round_trips():
    raw = {
        "id": "p3",
        "title": "Wild Beach",
        "description": "Sand and waves",
        "image": {"src": "wild-beach.jpg", "alt": "A beach"},
        "lat": 10.5,
        "lon": -3.25,
    }
    p = Place.from_dict(raw)
    assert p.coordinates == Coordinates(lat=10.5, lng=-3.25)
    assert p.image == ImageRef(src="wild-beach.jpg", alt="A beach")
    assert p.to_dict() == raw


def test_place_from_nested_coordinates_and_string_image():
    p = Place.from_dict({"id": "x", "title": "X", "image": "x.png", "coordinates": {"lat": "1.5", "lng": 2}})
    assert p.coordinates == Coordinates(lat=1.5, lng=2.0)
    assert p.image.src == "x.png"
    assert p.image.alt == "X"
    assert p.description == ""


@pytest.mark.parametrize("raw", [
    {"title": "no id", "lat": 0, "lon": 0},
    {"id": "  ", "lat": 0, "lon": 0},
    {"id": 7, "lat": 0, "lon": 0},
    {"id": "p", "lat": "north", "lon": 0},
    {"id": "p"},
    ["not", "a", "dict"],
])
def test_place_from_dict_rejects_malformed(raw):
    with pytest.raises(ValueError):
        Place.from_dict(raw)


def test_place_is_immutable():
    p = Place.from_dict({"id": "p", "lat": 0, "lon": 0})
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.title = "changed"


def test_fetch_state_lifecycle():
    fs = FetchState()
    fs.start()
    assert fs.is_loading and fs.data is None and fs.error is None
    fs.succeed([])
    assert not fs.is_loading and fs.data == []

    fs2 = FetchState()
    fs2.start()
    fs2.fail("nope")
    assert not fs2.is_loading
    assert fs2.error.message == "nope"
    assert fs2.data is None


def test_dedupe_keeps_first_occurrence_in_order():
    a = Place.from_dict({"id": "a", "title": "first", "lat": 0, "lon": 0})
    b = Place.from_dict({"id": "b", "lat": 0, "lon": 0})
    a2 = Place.from_dict({"id": "a", "title": "second", "lat": 0, "lon": 0})
    out = dedupe_by_id([a, b, a2])
    assert place_ids(out) == ["a", "b"]
    assert out[0].title == "first"
