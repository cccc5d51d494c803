import pytest

from algobook.graphs.shortest import (
    all_pairs_distances,
    dijkstra,
    high_score,
    shortest_message_route,
)


def test_dijkstra_worked_example():
    edges = [(1, 2, 6), (1, 3, 2), (3, 2, 3), (1, 3, 4)]
    assert dijkstra(3, edges) == [0, 5, 2]


def test_dijkstra_unreachable_is_none():
    result = dijkstra(3, [(2, 3, 1)])
    assert result[0] == 0
    assert result[1] is None
    assert result[2] is None


def test_dijkstra_edges_are_one_way():
    edges = [(2, 1, 7)]
    assert dijkstra(2, edges)[1] is None


def test_dijkstra_single_edge_distance_is_its_weight():
    weight = 11
    assert dijkstra(2, [(1, 2, weight)]) == [0, weight]


def test_dijkstra_matches_all_pairs_on_two_way_graph():
    roads = [(1, 2, 4), (2, 3, 1), (1, 3, 7), (3, 4, 2), (4, 5, 3), (2, 5, 9)]
    arcs = roads + [(v, u, w) for u, v, w in roads]
    matrix = all_pairs_distances(6, roads)
    assert dijkstra(6, arcs) == matrix[0]


def test_dijkstra_rejects_negative_weight():
    with pytest.raises(ValueError):
        dijkstra(2, [(1, 2, -1)])


def test_dijkstra_rejects_unknown_node():
    with pytest.raises(ValueError):
        dijkstra(2, [(1, 3, 1)])


def test_all_pairs_is_symmetric_with_zero_diagonal():
    roads = [(1, 2, 5), (2, 3, 2), (3, 4, 8), (1, 4, 20)]
    matrix = all_pairs_distances(4, roads)
    for a in range(4):
        assert matrix[a][a] == 0
        for b in range(4):
            assert matrix[a][b] == matrix[b][a]


def test_all_pairs_satisfies_triangle_inequality():
    roads = [(1, 2, 5), (2, 3, 2), (3, 4, 8), (1, 4, 20), (2, 4, 3)]
    matrix = all_pairs_distances(4, roads)
    for a in range(4):
        for b in range(4):
            for c in range(4):
                assert matrix[a][c] <= matrix[a][b] + matrix[b][c]


def test_all_pairs_keeps_lightest_parallel_road():
    heavy, light = 9, 4
    matrix = all_pairs_distances(2, [(1, 2, heavy), (2, 1, light)])
    assert matrix[0][1] == light
    assert matrix[1][0] == light


def test_all_pairs_disconnected_is_none():
    matrix = all_pairs_distances(3, [(1, 2, 3)])
    assert matrix[0][2] is None
    assert matrix[2][1] is None


def test_message_route_worked_example():
    edges = [(1, 2), (1, 3), (1, 4), (2, 3), (5, 4)]
    assert shortest_message_route(5, edges) == [1, 4, 5]


def test_message_route_is_a_shortest_walk():
    edges = [(1, 2), (2, 3), (3, 6), (1, 4), (4, 5), (5, 6), (2, 5)]
    route = shortest_message_route(6, edges)
    pairs = {frozenset(edge) for edge in edges}
    assert route[0] == 1
    assert route[-1] == 6
    for a, b in zip(route, route[1:]):
        assert frozenset((a, b)) in pairs
    hops = dijkstra(6, [(u, v, 1) for u, v in edges] + [(v, u, 1) for u, v in edges])
    assert len(route) - 1 == hops[-1]


def test_message_route_single_node():
    assert shortest_message_route(1, []) == [1]


def test_message_route_impossible():
    assert shortest_message_route(4, [(1, 2), (3, 4)]) is None


def test_high_score_worked_example():
    edges = [(1, 2, 3), (2, 4, -1), (1, 3, -2), (3, 4, 7)]
    assert high_score(4, edges) == 5


def test_high_score_single_path_is_sum():
    edges = [(1, 2, 3), (2, 3, -4), (3, 4, 10)]
    assert high_score(4, edges) == sum(score for _, _, score in edges)


def test_high_score_unbounded():
    edges = [(1, 2, 1), (2, 3, 1), (3, 2, 1), (3, 4, 1)]
    assert high_score(4, edges) is None


def test_high_score_ignores_cycle_that_cannot_reach_end():
    direct = 2
    edges = [(1, 2, 5), (2, 3, 1), (3, 2, 1), (1, 4, direct)]
    assert high_score(4, edges) == direct


def test_high_score_unreachable_end():
    with pytest.raises(ValueError):
        high_score(3, [(1, 2, 4)])


def test_high_score_rejects_unknown_node():
    with pytest.raises(ValueError):
        high_score(2, [(1, 5, 1)])