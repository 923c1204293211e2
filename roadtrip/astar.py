"""Shortest travel time between cities using A* search."""

from __future__ import annotations

import argparse
import heapq
import itertools

from roadtrip.dijkstra import Graph, NoPathError, Route


class HeuristicGraph(Graph):
    """Road graph with an estimated remaining distance for every city."""

    def __init__(self, vertices: int) -> None:
        super().__init__(vertices)
        self.heuristic: list[int] = [0] * vertices

    def set_heuristic(self, city: int, h: int) -> None:
        """Set the estimated distance from ``city`` to the destination."""
        self._check_vertex(city)
        self.heuristic[city] = h

    def a_star_search(self, src: int, dest: int) -> Route:
        """Return a route from ``src`` to ``dest`` found by A* search.

        Cities are reopened when a cheaper route to them is found, so the
        search also copes with heuristics that are not consistent.
        Raises NoPathError if ``dest`` is unreachable.
        """
        self._check_vertex(src)
        self._check_vertex(dest)

        g_score: dict[int, int] = {src: 0}
        parent: dict[int, int] = {}
        counter = itertools.count()
        queue = [(self.heuristic[src], next(counter), 0, src)]

        while queue:
            _, _, g, current = heapq.heappop(queue)
            if g > g_score[current]:
                continue
            if current == dest:
                return self._route(parent, g, src, dest)
            for neighbour, weight in self.adjacency[current]:
                candidate = g + weight
                if candidate < g_score.get(neighbour, float("inf")):
                    g_score[neighbour] = candidate
                    parent[neighbour] = current
                    f_score = candidate + self.heuristic[neighbour]
                    heapq.heappush(queue, (f_score, next(counter), candidate, neighbour))

        raise NoPathError(src, dest)


def sample_heuristic_graph() -> HeuristicGraph:
    """Build the six-city network with straight-line estimates to city 5."""
    graph = HeuristicGraph(6)
    for u, v, w in (
        (0, 1, 2),
        (0, 2, 4),
        (1, 2, 1),
        (1, 3, 7),
        (2, 4, 3),
        (3, 5, 1),
        (4, 3, 2),
        (4, 5, 5),
    ):
        graph.add_edge(u, v, w)
    for city, h in enumerate((10, 8, 6, 1, 4, 0)):
        graph.set_heuristic(city, h)
    return graph


def main(argv: list[str] | None = None) -> int:
    """Print the A* route from city 0 to city 5 in the sample graph."""
    argparse.ArgumentParser(
        description="Shortest route from city 0 to city 5 using A* search."
    ).parse_args(argv)
    print("A* search from city 0 to city 5:")
    try:
        print(sample_heuristic_graph().a_star_search(0, 5).format())
    except NoPathError as error:
        print(error)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())