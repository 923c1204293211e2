"""Shortest travel-time routes on directed road networks with Dijkstra and A*."""

__version__ = "0.1.0"
__all__ = ["astar", "dijkstra", "visualize"]