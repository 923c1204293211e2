"""Shortest travel time between cities using Dijkstra's algorithm."""

from __future__ import annotations

import argparse
import heapq
import itertools
from dataclasses import dataclass


class NoPathError(Exception):
    """Raised when the destination cannot be reached from the start."""

    def __init__(self, src: int, dest: int) -> None:
        super().__init__("no path exists")
        self.src = src
        self.dest = dest


@dataclass(frozen=True)
class Route:
    """A path through the graph and its total travel time."""

    cost: int
    path: tuple[int, ...]

    def format(self) -> str:
        """Render the route as the two report lines."""
        cities = " -> ".join(str(city) for city in self.path)
        return f"Shortest travel time: {self.cost} hours\nPath: {cities}"


class Graph:
    """Directed weighted graph of cities stored as an adjacency list."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.vertices = vertices
        self.adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertices)]

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise ValueError(f"city {vertex} is not in the graph")

    def add_edge(self, u: int, v: int, w: int) -> None:
        """Add a road from city ``u`` to city ``v`` taking ``w`` hours."""
        self._check_vertex(u)
        self._check_vertex(v)
        self.adjacency[u].append((v, w))

    def _route(self, parent: dict[int, int], cost: int, src: int, dest: int) -> Route:
        reversed_path = [dest]
        while reversed_path[-1] != src:
            reversed_path.append(parent[reversed_path[-1]])
        return Route(cost=cost, path=tuple(reversed(reversed_path)))

    def shortest_path(self, src: int, dest: int) -> Route:
        """Return the minimum-time route from ``src`` to ``dest``.

        Raises NoPathError if ``dest`` is unreachable.
        """
        self._check_vertex(src)
        self._check_vertex(dest)

        visited: set[int] = set()
        cost: dict[int, int] = {src: 0}
        parent: dict[int, int] = {}
        counter = itertools.count()
        queue = [(0, next(counter), src)]

        while dest not in visited and queue:
            _, _, current = heapq.heappop(queue)
            visited.add(current)
            for neighbour, weight in self.adjacency[current]:
                if neighbour in visited:
                    continue
                candidate = cost[current] + weight
                if candidate < cost.get(neighbour, float("inf")):
                    cost[neighbour] = candidate
                    parent[neighbour] = current
                    heapq.heappush(queue, (candidate, next(counter), neighbour))

        if dest not in visited:
            raise NoPathError(src, dest)
        return self._route(parent, cost[dest], src, dest)


def sample_graph() -> Graph:
    """Build the six-city road network used by the exercises."""
    graph = Graph(6)
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
    return graph


def main(argv: list[str] | None = None) -> int:
    """Print the shortest route from city 0 to city 5 in the sample graph."""
    argparse.ArgumentParser(
        description="Shortest route from city 0 to city 5 using Dijkstra's algorithm."
    ).parse_args(argv)
    print("Shortest path from city 0 to city 5:")
    try:
        print(sample_graph().shortest_path(0, 5).format())
    except NoPathError as error:
        print(error)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())