import io
import itertools
import random

import pytest

from heurograph.hamiltonian import (
    annealing_cycle,
    backtracking_cycle,
    build_adjacency,
    count_cycle_edges,
    format_result,
    has_edge,
    hill_climbing_cycle,
    is_valid_cycle,
    main,
    parse_graph,
)

SQUARE_EDGES = [(0, 1), (1, 2), (2, 3), (3, 0)]
STAR_EDGES = [(0, 1), (0, 2), (0, 3)]


def complete(n):
    return build_adjacency(n, itertools.combinations(range(n), 2))


def assert_hamiltonian(cycle, adj):
    assert cycle[0] == cycle[-1]
    assert sorted(cycle[:-1]) == list(range(len(adj)))
    assert is_valid_cycle(cycle[:-1], adj)


def test_adjacency_is_undirected():
    adj = build_adjacency(4, SQUARE_EDGES)
    assert all(has_edge(u, v, adj) and has_edge(v, u, adj) for u, v in SQUARE_EDGES)
    assert not has_edge(0, 2, adj)


def test_adjacency_rejects_out_of_range():
    with pytest.raises(ValueError):
        build_adjacency(3, [(0, 3)])


def test_count_edges_of_full_cycle():
    adj = build_adjacency(4, SQUARE_EDGES)
    path = [0, 1, 2, 3]
    assert count_cycle_edges(path, adj) == len(path)


def test_count_edges_of_crossed_order():
    adj = build_adjacency(4, SQUARE_EDGES)
    assert count_cycle_edges([0, 2, 1, 3], adj) == 2


def test_valid_cycle_checks():
    adj = build_adjacency(4, SQUARE_EDGES)
    assert is_valid_cycle([0, 1, 2, 3], adj)
    assert not is_valid_cycle([0, 2, 1, 3], adj)
    assert not is_valid_cycle([], adj)


def test_backtracking_finds_square():
    assert backtracking_cycle(build_adjacency(4, SQUARE_EDGES)) == [0, 1, 2, 3, 0]


def test_backtracking_on_larger_graph():
    edges = [(0, 2), (2, 4), (4, 1), (1, 3), (3, 5), (5, 0), (0, 1), (2, 3)]
    adj = build_adjacency(6, edges)
    assert_hamiltonian(backtracking_cycle(adj), adj)


@pytest.mark.parametrize("edges,n", [(STAR_EDGES, 4), ([(0, 1), (1, 2)], 3), ([], 0)])
def test_backtracking_reports_none(edges, n):
    assert backtracking_cycle(build_adjacency(n, edges)) is None


def test_hill_climbing_on_complete_graph():
    adj = complete(5)
    assert_hamiltonian(hill_climbing_cycle(adj, 1000, random.Random(5)), adj)


def test_hill_climbing_without_cycle():
    adj = build_adjacency(4, STAR_EDGES)
    assert hill_climbing_cycle(adj, 200, random.Random(2)) is None


def test_annealing_on_complete_graph_keeps_identity():
    adj = complete(5)
    cycle = annealing_cycle(adj, 500, random.Random(9))
    assert cycle == [*range(5), 0]


def test_annealing_finds_cycle_from_bad_start():
    adj = build_adjacency(4, [(0, 2), (2, 1), (1, 3), (3, 0)])
    assert_hamiltonian(annealing_cycle(adj, 2000, random.Random(4)), adj)


def test_annealing_without_cycle():
    adj = build_adjacency(4, STAR_EDGES)
    assert annealing_cycle(adj, 300, random.Random(1)) is None


def test_methods_agree_on_graph_with_cycle():
    adj = build_adjacency(4, SQUARE_EDGES)
    rng = random.Random(11)
    for cycle in (backtracking_cycle(adj), hill_climbing_cycle(adj, 5000, rng)):
        assert_hamiltonian(cycle, adj)


def test_parse_graph_round_trip():
    adj = parse_graph("4 4\n0 1\n1 2\n2 3\n3 0\n")
    assert adj == build_adjacency(4, SQUARE_EDGES)


@pytest.mark.parametrize("text", ["", "3", "3 2\n0 1\n", "3 1\n0 a", "2 1\n0 5"])
def test_parse_graph_rejects_bad_text(text):
    with pytest.raises(ValueError):
        parse_graph(text)


def test_format_result_without_cycle():
    assert format_result(None) == "-1"


def test_format_result_with_cycle():
    lines = format_result([0, 1, 2, 0]).splitlines()
    assert lines[0] == "1"
    assert [int(t) for t in lines[1].split()] == [0, 1, 2, 0]


def test_main_prints_cycle(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 4\n0 1\n1 2\n2 3\n3 0\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "1"
    cycle = [int(t) for t in lines[1].split()]
    assert_hamiltonian(cycle, build_adjacency(4, SQUARE_EDGES))


def test_main_without_cycle(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 3\n0 1\n0 2\n0 3\n"))
    assert main(["--method", "backtracking"]) == 0
    assert capsys.readouterr().out.strip() == "-1"


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 2\n0 1\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err