from __future__ import annotations

import pytest

from easymetro import LineNetwork, parse_line_declaration, parse_lines_spec


def _neighbor_names(station):
    return sorted(n.get_name() for n in station.get_neighbor_stations())


@pytest.mark.parametrize("text", [None, "", "    ", "\n\n\n\n", " \t\n  \n"])
def test_blank_specification_yields_none(text):
    assert parse_lines_spec(text) is None


def test_blank_specification_is_distinct_from_empty_network():
    assert parse_lines_spec("") is None
    assert LineNetwork().get_line_count() == 0


def test_single_line_specification():
    network = parse_lines_spec("LineName: Station1, Station2, Station3")

    assert network.get_line_count() == 1
    assert network.get_line_name(0) == "LineName"
    assert sorted(network.get_line_station_names(0)) == [
        "Station1",
        "Station2",
        "Station3",
    ]


def test_single_line_neighbors():
    network = parse_lines_spec("LineName: Station1, Station2, Station3")

    assert _neighbor_names(network.get_station_info("Station1")) == ["Station2"]
    assert _neighbor_names(network.get_station_info("Station2")) == [
        "Station1",
        "Station3",
    ]
    assert _neighbor_names(network.get_station_info("Station3")) == ["Station2"]


def test_independent_lines_have_no_cross_neighbors():
    network = parse_lines_spec("A: S1,S2,S3\nB: S4,S5,S6")

    assert network.get_line_count() == 2
    assert network.get_line_names() == ["A", "B"]
    assert _neighbor_names(network.get_station_info("S3")) == ["S2"]
    assert _neighbor_names(network.get_station_info("S4")) == ["S5"]
    assert network.get_station_info("S4").get_lines() == ["B"]


def test_whitespace_and_empty_pieces_are_dropped():
    network = parse_lines_spec("   Red  :  R1 ,  , R2,,R3 ,  \n\n  Blue:B1  ")

    assert network.get_line_names() == ["Red", "Blue"]
    assert network.get_line_station_names(0) == ["R1", "R2", "R3"]
    assert network.get_line_station_names(1) == ["B1"]


def test_windows_line_endings():
    network = parse_lines_spec("A: S1, S2\r\nB: S3")

    assert network.get_line_names() == ["A", "B"]
    assert network.get_line_station_names(1) == ["S3"]


def test_line_without_colon_has_no_stations():
    network = parse_lines_spec("Solo")

    assert network.get_line_count() == 1
    assert network.get_line_name(0) == "Solo"
    assert network.get_line_station_names(0) == []


def test_only_first_colon_separates_name():
    assert parse_line_declaration("Night: A:1, B") == ("Night", ["A:1", "B"])


def test_repeated_line_continues_from_last_station():
    network = parse_lines_spec("L: A, B\nM: X, Y\nL: C, D")

    assert network.get_line_count() == 2
    assert network.get_line_names() == ["L", "M"]
    assert network.get_line_station_names(0) == ["A", "B", "C", "D"]
    assert _neighbor_names(network.get_station_info("B")) == ["A", "C"]
    assert _neighbor_names(network.get_station_info("C")) == ["B", "D"]


def test_repeated_line_after_single_station():
    network = parse_lines_spec("L: A\nL: B")

    assert network.get_line_station_names(0) == ["A", "B"]
    assert _neighbor_names(network.get_station_info("A")) == ["B"]


def test_line_declared_without_stations_then_continued():
    network = parse_lines_spec("Solo\nSolo: A, B")

    assert network.get_line_count() == 1
    assert network.get_line_station_names(0) == ["A", "B"]
    assert _neighbor_names(network.get_station_info("A")) == ["B"]


def test_parsed_lines_match_declarations(sample_network):
    declared = {
        "A": {"A1", "A2", "A3", "AB", "A5", "AC", "A7"},
        "B": {"B1", "B2", "AB", "B4", "B5", "BC", "B7"},
        "C": {"C1", "C2", "BC", "C4", "C5", "C6", "C7", "AC", "C9"},
    }

    assert sample_network.get_line_names() == ["A", "B", "C"]
    for index, name in enumerate(sample_network.get_line_names()):
        assert set(sample_network.get_line_station_names(index)) == declared[name]


@pytest.mark.parametrize("separator", ["\x0c", "\x0b", "\x1e", "\x85", "\u2028", " "])
def test_only_newlines_end_a_declaration(separator):
    network = parse_lines_spec(f"A: S1{separator}B: S2")

    assert network.get_line_names() == ["A"]
    assert network.get_line_station_names(0) == [f"S1{separator}B: S2"]
