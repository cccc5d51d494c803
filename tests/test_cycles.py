import pytest

from algobook.graphs.cycles import (
    find_directed_cycle,
    find_negative_cycle,
    find_undirected_cycle,
)


def _assert_undirected_cycle(cycle, edges):
    pairs = {frozenset(edge) for edge in edges}
    assert cycle[0] == cycle[-1]
    assert len(cycle) >= 4
    assert len(set(cycle[:-1])) == len(cycle) - 1
    for a, b in zip(cycle, cycle[1:]):
        assert frozenset((a, b)) in pairs


def _assert_directed_cycle(cycle, edges):
    arcs = set(edges)
    assert cycle[0] == cycle[-1]
    assert len(set(cycle[:-1])) == len(cycle) - 1
    for a, b in zip(cycle, cycle[1:]):
        assert (a, b) in arcs


def test_undirected_triangle_with_tail():
    edges = [(1, 2), (2, 3), (3, 1), (3, 4)]
    cycle = find_undirected_cycle(4, edges)
    _assert_undirected_cycle(cycle, edges)
    assert set(cycle) == {1, 2, 3}


def test_undirected_cycle_in_later_component():
    edges = [(1, 2), (3, 4), (4, 5), (5, 3)]
    cycle = find_undirected_cycle(5, edges)
    _assert_undirected_cycle(cycle, edges)
    assert set(cycle) == {3, 4, 5}


def test_undirected_tree_has_no_cycle():
    assert find_undirected_cycle(5, [(1, 2), (1, 3), (3, 4), (3, 5)]) is None


def test_undirected_repeated_road_is_not_a_trip():
    assert find_undirected_cycle(2, [(1, 2), (1, 2)]) is None


def test_undirected_self_loop_is_not_a_trip():
    assert find_undirected_cycle(2, [(1, 1), (1, 2)]) is None


def test_undirected_rejects_unknown_node():
    with pytest.raises(ValueError):
        find_undirected_cycle(3, [(1, 4)])


def test_directed_cycle_found():
    edges = [(1, 2), (2, 3), (3, 1), (3, 4)]
    cycle = find_directed_cycle(4, edges)
    _assert_directed_cycle(cycle, edges)
    assert set(cycle) == {1, 2, 3}


def test_directed_two_node_cycle():
    edges = [(4, 1), (1, 2), (2, 1)]
    cycle = find_directed_cycle(4, edges)
    _assert_directed_cycle(cycle, edges)
    assert set(cycle) == {1, 2}


def test_directed_acyclic_graph_has_no_cycle():
    assert find_directed_cycle(4, [(1, 2), (1, 3), (2, 4), (3, 4)]) is None


def test_directed_self_loop_is_cycle():
    assert find_directed_cycle(3, [(1, 2), (3, 3)]) == [3, 3]


def test_directed_rejects_unknown_node():
    with pytest.raises(ValueError):
        find_directed_cycle(2, [(0, 1)])


def _assert_negative_cycle(cycle, edges):
    lightest = {}
    for u, v, w in edges:
        lightest[(u, v)] = min(w, lightest.get((u, v), w))
    assert cycle[0] == cycle[-1]
    total = 0
    for a, b in zip(cycle, cycle[1:]):
        assert (a, b) in lightest
        total += lightest[(a, b)]
    assert total < 0


def test_negative_cycle_found():
    edges = [(1, 2, 1), (2, 3, 1), (3, 1, -3), (3, 4, 5)]
    cycle = find_negative_cycle(4, edges)
    _assert_negative_cycle(cycle, edges)
    assert set(cycle) == {1, 2, 3}


def test_negative_cycle_unreachable_from_first_node():
    edges = [(1, 2, 4), (3, 4, -2), (4, 3, 1)]
    cycle = find_negative_cycle(4, edges)
    _assert_negative_cycle(cycle, edges)
    assert set(cycle) == {3, 4}


def test_negative_self_loop():
    assert find_negative_cycle(3, [(1, 2, 3), (2, 2, -1)]) == [2, 2]


def test_negative_edges_without_cycle():
    assert find_negative_cycle(3, [(1, 2, -5), (2, 3, -5), (1, 3, 2)]) is None


def test_positive_cycle_is_not_negative():
    assert find_negative_cycle(3, [(1, 2, 1), (2, 3, 1), (3, 1, 1)]) is None


def test_negative_cycle_rejects_unknown_node():
    with pytest.raises(ValueError):
        find_negative_cycle(2, [(1, 3, -1)])