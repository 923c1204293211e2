# roadtrip

Find the fastest route between cities on a directed road network in which
every road has a travel time in hours. Cities are numbered from `0` to
`vertices - 1`.

The package offers two searches:

- **Dijkstra** (`roadtrip.dijkstra.Graph.shortest_path`) works out the
  minimum total travel time from a start city to a destination.
- **A\*** (`roadtrip.astar.HeuristicGraph.a_star_search`) does the same,
  using an estimate of each city's remaining distance to the destination to
  guide the search. A city is searched again whenever a cheaper way to it
  turns up, so estimates that are not consistent still give the cheapest
  route as long as they never overestimate.

## Installation

```
pip install .
```

## Library use

```python
from roadtrip.dijkstra import Graph, NoPathError

g = Graph(6)
g.add_edge(0, 1, 2)
g.add_edge(1, 3, 7)
g.add_edge(3, 5, 1)

try:
    route = g.shortest_path(0, 5)
except NoPathError:
    print("no path exists")
else:
    print(route.format())
```

`shortest_path` returns a `Route`, a frozen dataclass with `cost` (total
hours) and `path` (a tuple of cities from start to destination).
`Route.format()` gives the report:

```
Shortest travel time: 10 hours
Path: 0 -> 1 -> 3 -> 5
```

If the destination cannot be reached, `NoPathError` is raised; it carries
`src` and `dest`. `Graph(vertices)` raises `ValueError` for a negative
number of cities, and `add_edge` and the searches raise `ValueError` for a
city outside the graph.

For A\*, build a `HeuristicGraph` (a `Graph` with estimates, all `0` to
begin with), give cities an estimate with `set_heuristic(city, h)`, and call
`a_star_search(src, dest)`. It returns a `Route` in the same way.

`roadtrip.dijkstra.sample_graph()` and
`roadtrip.astar.sample_heuristic_graph()` build the six-city example network
used by the commands below. On it, the fastest route from city 0 to city 5
takes 9 hours: `0 -> 1 -> 2 -> 4 -> 3 -> 5`.

`roadtrip.visualize.visualize_graph()` returns an ASCII drawing of the
example network with its adjacency list and edge list, and
`roadtrip.visualize.instructions()` returns the short list of exercise steps
printed after it.

## Commands

```
roadtrip-dijkstra     # shortest route from city 0 to city 5 with Dijkstra
roadtrip-astar        # the same route found with A*
roadtrip-visualize    # ASCII drawing, adjacency list and edge list of the example
```

Each command takes only `-h`/`--help`.

## What it does not do

The commands always work on the built-in six-city example from city 0 to
city 5. There is no option to read a network from a file or to choose other
start and destination cities on the command line; build a `Graph` or
`HeuristicGraph` in Python for that. `roadtrip-visualize` draws only the
example network, not an arbitrary graph.

## Tests

```
pip install .[test]
pytest
```