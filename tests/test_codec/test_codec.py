"""Tests for coloring JSON import and export."""

from __future__ import annotations

import json

import pytest

from trilattice.codec.parser import parse_coloring
from trilattice.codec.serializer import coloring_to_payload, dump_coloring
from trilattice.errors import MalformedPayload
from trilattice.lattice.colors import Color
from trilattice.lattice.geometry import Cell
from tests.conftest import B, G, W


def test_export_canonical_order():
    coloring = {
        Cell(0, 0, True): W,
        Cell(-1, 1, True): B,
        Cell(0, 0, False): G,
        Cell(-2, 0, True): B,
    }
    payload = coloring_to_payload(coloring)
    assert [(p["coord"]["x"], p["coord"]["y"], p["coord"]["isUp"]) for p in payload] == [
        (-1, 1, True),
        (-2, 0, True),
        (0, 0, True),
        (0, 0, False),
    ]
    assert payload[0] == {"coord": {"x": -1, "y": 1, "isUp": True}, "color": "black"}


def test_export_skips_uncolored():
    assert coloring_to_payload({Cell(0, 0, True): None}) == []


def test_export_is_indented():
    text = dump_coloring({Cell(1, 2, False): G})
    assert text.startswith("[\n  {\n")
    assert json.loads(text) == [{"coord": {"x": 1, "y": 2, "isUp": False}, "color": "gray"}]


def test_import_round_trips_export():
    coloring = {Cell(0, 0, True): W, Cell(1, 0, False): B, Cell(2, 0, True): G}
    assert parse_coloring(dump_coloring(coloring)) == coloring


def test_import_drops_unknown_colors():
    text = json.dumps([
        {"coord": {"x": 0, "y": 0, "isUp": True}, "color": "white"},
        {"coord": {"x": 1, "y": 0, "isUp": False}, "color": "transparent"},
        {"coord": {"x": 2, "y": 0, "isUp": True}, "color": "purple"},
    ])
    assert parse_coloring(text) == {Cell(0, 0, True): Color.WHITE}


@pytest.mark.parametrize("text", [
    "not json",
    '{"coord": {"x": 0, "y": 0, "isUp": true}, "color": "white"}',
    '[{"coord": {"x": 0, "y": 0}, "color": "white"}]',
    '[{"coord": {"x": "a", "y": 0, "isUp": true}, "color": "white"}]',
    '[{"coord": {"x": 0, "y": 0, "isUp": true}, "color": "white"}, {"color": "black"}]',
])
def test_import_malformed_rejected(text):
    with pytest.raises(MalformedPayload):
        parse_coloring(text)


@pytest.mark.parametrize("entry", [
    {"coord": {"x": 1, "y": 0, "isUp": False}, "color": 5},
    {"coord": {"x": 1, "y": 0, "isUp": False}, "color": None},
    {"coord": {"x": 1, "y": 0, "isUp": False}, "color": ["white"]},
    {"coord": {"x": 1, "y": 0, "isUp": False}},
])
def test_import_drops_non_string_colors(entry):
    text = json.dumps([{"coord": {"x": 0, "y": 0, "isUp": True}, "color": "white"}, entry])
    assert parse_coloring(text) == {Cell(0, 0, True): Color.WHITE}
