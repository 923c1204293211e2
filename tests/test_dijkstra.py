import pytest

from roadtrip.dijkstra import Graph, NoPathError, Route, main, sample_graph


def _path_cost(graph, path):
    total = 0
    for u, v in zip(path, path[1:]):
        weights = [w for (dest, w) in graph.adjacency[u] if dest == v]
        assert weights, f"no edge {u}->{v}"
        total += min(weights)
    return total


def test_sample_route():
    route = sample_graph().shortest_path(0, 5)
    assert route.cost == 9
    assert route.path == (0, 1, 2, 4, 3, 5)


def test_route_cost_matches_edges():
    graph = sample_graph()
    route = graph.shortest_path(0, 5)
    assert _path_cost(graph, route.path) == route.cost
    assert route.path[0] == 0 and route.path[-1] == 5


def test_route_is_not_longer_than_any_direct_alternative():
    graph = sample_graph()
    best = graph.shortest_path(0, 5).cost
    assert best <= _path_cost(graph, (0, 1, 3, 5))
    assert best <= _path_cost(graph, (0, 2, 4, 5))


def test_same_source_and_destination():
    route = sample_graph().shortest_path(3, 3)
    assert route == Route(cost=0, path=(3,))


def test_no_path_raises():
    with pytest.raises(NoPathError) as info:
        sample_graph().shortest_path(5, 0)
    assert str(info.value) == "no path exists"
    assert (info.value.src, info.value.dest) == (5, 0)


def test_invalid_vertex():
    graph = Graph(2)
    with pytest.raises(ValueError):
        graph.add_edge(0, 2, 1)
    with pytest.raises(ValueError):
        graph.shortest_path(-1, 1)


def test_format():
    assert Route(cost=3, path=(0, 2)).format() == "Shortest travel time: 3 hours\nPath: 0 -> 2"
    assert Route(cost=0, path=(4,)).format() == "Shortest travel time: 0 hours\nPath: 4"


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    expected = "Shortest path from city 0 to city 5:\n" + sample_graph().shortest_path(0, 5).format() + "\n"
    assert out == expected