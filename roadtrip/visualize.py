"""Text picture of the sample road network."""

from __future__ import annotations

import argparse
import sys

_RULE = "=============================================="

_PICTURE = """\
    2h        1h
  +----->1------+
  |      |      |
  |      |7h    v
  |      |    +---+
0 |      |    | 3 |
  |      |    +---+
  |      |      |
  |      |      |1h
  |      |      v
  |      |    +---+
  |      |    | 5 | (Destination)
  |      |    +---+
  |      |      ^
  |4h    |      |
  v      |      |5h
+---+    |    +---+
| 2 |----+--->| 4 |
+---+    3h   +---+
               |
               |2h
               |
               v
              (3)
"""

_ADJACENCY = """\
Adjacency List Representation:
-----------------------------
City 0: (1,2), (2,4)
City 1: (2,1), (3,7)
City 2: (4,3)
City 3: (5,1)
City 4: (3,2), (5,5)
City 5: [Destination]
"""

_EDGES = """\
Edge List (From, To, Weight):
----------------------------
(0,1,2), (0,2,4), (1,2,1), (1,3,7), (2,4,3), (3,5,1), (4,3,2), (4,5,5)
"""


def visualize_graph() -> str:
    """Return the drawing, adjacency list and edge list of the sample graph."""
    return (
        f"\n{_RULE}\n"
        "GRAPH VISUALIZATION (Cities and Travel Times)\n"
        f"{_RULE}\n\n"
        f"{_PICTURE}\n"
        f"{_ADJACENCY}\n"
        f"{_EDGES}\n"
        f"{_RULE}\n"
    )


def instructions() -> str:
    """Return the instructions shown after the drawing."""
    return (
        "\nInstructions for students:\n"
        "1. Understand the graph structure above\n"
        "2. Implement Dijkstra's algorithm in the main exercise file\n"
        "3. Trace through the algorithm by hand to verify your solution\n"
        "4. Run your code and check if you get the correct shortest path\n"
    )


def main(argv: list[str] | None = None) -> int:
    """Print the graph picture followed by the instructions."""
    argparse.ArgumentParser(description="Show the sample road network.").parse_args(argv)
    sys.stdout.write(visualize_graph())
    sys.stdout.write(instructions())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())