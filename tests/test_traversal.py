from __future__ import annotations

import pytest

from easymetro import Path, parse_lines_spec
from easymetro.graph.traversal import count_line_switches, find_shortest_paths


@pytest.mark.parametrize(
    "arrival, expected_path, expected_cost",
    [
        ("A1", ["A1"], 0),
        ("A2", ["A1", "A2"], 1),
        ("A3", ["A1", "A2", "A3"], 2),
        ("AB", ["A1", "A2", "A3", "AB"], 3),
        ("A5", ["A1", "A2", "A3", "AB", "A5"], 4),
        ("AC", ["A1", "A2", "A3", "AB", "A5", "AC"], 5),
    ],
)
def test_paths_along_line_a(sample_network, arrival, expected_path, expected_cost):
    paths = sample_network.get_shortest_paths("A1", arrival, 1, 1)

    assert len(paths) == 1
    assert paths[0].get_path() == expected_path
    assert paths[0].get_total_cost() == expected_cost


def test_line_switch_is_charged(sample_network):
    paths = sample_network.get_shortest_paths("A1", "B4", 1, 1)

    assert paths[0].get_path() == ["A1", "A2", "A3", "AB", "B4"]
    assert paths[0].get_total_cost() == 5


def test_shorter_path_replaces_first_found(sample_network):
    # The depth-first sweep reaches B4 through line C before trying AB -> B4.
    paths = sample_network.get_shortest_paths("A1", "B4", 2, 0)

    assert paths[0].get_path() == ["A1", "A2", "A3", "AB", "B4"]
    assert paths[0].get_total_cost() == 8


def test_path_to_itself_costs_nothing(sample_network):
    paths = sample_network.get_shortest_paths("AB", "AB", 10, 10)

    assert len(paths) == 1
    assert paths[0].get_path() == ["AB"]
    assert paths[0].get_total_cost() == 0


def test_unknown_departure_returns_empty(sample_network):
    assert sample_network.get_shortest_paths("Nowhere", "A1", 1, 1) == []


def test_unknown_arrival_returns_empty(sample_network):
    assert sample_network.get_shortest_paths("A1", "Nowhere", 1, 1) == []


def test_disconnected_lines_return_empty():
    network = parse_lines_spec("A: S1,S2,S3\nB: S4,S5,S6")

    assert network.get_shortest_paths("S1", "S6", 1, 1) == []


def test_isolated_station_only_reaches_itself():
    network = parse_lines_spec("Solo: Lone\nOther: X, Y")

    assert network.get_shortest_paths("Lone", "Lone", 1, 1)[0].get_path() == ["Lone"]
    assert network.get_shortest_paths("Lone", "X", 1, 1) == []


def test_fewest_stations_win_over_cheaper_cost():
    network = parse_lines_spec(
        "Long: S, L1, L2, L3, T\nUp: S, P\nAcross: P, Q\nDown: Q, T"
    )

    paths = network.get_shortest_paths("S", "T", 1, 10)

    assert len(paths) == 1
    assert paths[0].get_path() == ["S", "P", "Q", "T"]
    assert paths[0].get_total_cost() == 23


def test_circular_line_takes_the_short_way_round():
    network = parse_lines_spec("Circle: A, B, C, D, A")

    paths = network.get_shortest_paths("A", "D", 1, 1)

    assert paths[0].get_path() == ["A", "D"]
    assert paths[0].get_total_cost() == 1


def test_long_line_does_not_hit_recursion_limit():
    names = [f"S{i}" for i in range(3000)]
    network = parse_lines_spec("Long: " + ", ".join(names))

    paths = network.get_shortest_paths("S0", "S2999", 1, 1)

    assert paths[0].get_path() == names
    assert paths[0].get_total_cost() == 2999


def test_find_shortest_paths_on_registry(sample_network):
    stations = {
        name: sample_network.get_station_info(name)
        for name in sample_network.get_station_names()
    }

    paths = find_shortest_paths(stations, "C1", "A7", 1, 0)

    # Line B is swept first from BC, which settles C4..C7 through AC; the
    # equally long route along line C is never tried.
    assert paths[0].get_path() == ["C1", "C2", "BC", "B5", "B4", "AB", "A5", "AC", "A7"]
    assert paths[0].get_total_cost() == 8


def test_count_line_switches(sample_network):
    stations = {
        name: sample_network.get_station_info(name)
        for name in sample_network.get_station_names()
    }

    assert count_line_switches(stations, ["A1", "A2", "A3", "AB", "B4"]) == 1
    assert count_line_switches(stations, ["A1", "A2"]) == 0
    assert count_line_switches(stations, ["B4"]) == 0


def test_path_clone_is_independent():
    original = Path(stations=["A"], total_cost=2)
    branch = original.clone()
    branch.add_station("B")
    branch.add_cost(3)

    assert original.get_path() == ["A"]
    assert original.get_total_cost() == 2
    assert branch.get_path() == ["A", "B"]
    assert branch.get_total_cost() == 5
    assert branch.previous_station == "A"
    assert original.previous_station is None
