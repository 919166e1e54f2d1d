"""An undirected graph stored as an adjacency list."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any


class Graph:
    """An undirected graph; parallel edges are kept as separate entries."""

    def __init__(self) -> None:
        self._adjacency: dict[Any, list[Any]] = {}

    def __contains__(self, vertex: Hashable) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def add_vertex(self, vertex: Hashable) -> None:
        """Add ``vertex`` with no neighbours, if it is not present yet."""
        self._adjacency.setdefault(vertex, [])

    def remove_vertex(self, vertex: Hashable) -> None:
        """Remove ``vertex`` and every edge touching it; absent vertices are ignored."""
        if vertex not in self._adjacency:
            return
        del self._adjacency[vertex]
        for vertex_key, neighbours in self._adjacency.items():
            self._adjacency[vertex_key] = [n for n in neighbours if n != vertex]

    def add_edge(self, first: Hashable, second: Hashable) -> None:
        """Connect ``first`` and ``second``, adding either vertex if needed."""
        self._adjacency.setdefault(first, []).append(second)
        self._adjacency.setdefault(second, []).append(first)

    def remove_edge(self, first: Hashable, second: Hashable) -> None:
        """Remove every edge between ``first`` and ``second``."""
        if first in self._adjacency:
            self._adjacency[first] = [n for n in self._adjacency[first] if n != second]
        if second in self._adjacency:
            self._adjacency[second] = [n for n in self._adjacency[second] if n != first]

    def vertices(self) -> list[Any]:
        """Return the vertices in insertion order."""
        return list(self._adjacency)

    def edges(self) -> list[tuple[Any, Any]]:
        """Return each edge once as ``(smaller, larger)``."""
        return [
            (vertex, neighbour)
            for vertex, neighbours in self._adjacency.items()
            for neighbour in neighbours
            if vertex < neighbour
        ]

    def neighbors(self, vertex: Hashable) -> list[Any]:
        """Return a copy of the neighbours of ``vertex``; empty if it is absent."""
        return list(self._adjacency.get(vertex, ()))

    def is_adjacent(self, first: Hashable, second: Hashable) -> bool:
        """Return True if an edge joins ``first`` and ``second``."""
        return second in self._adjacency.get(first, ())

    def vertex_count(self) -> int:
        """Return the number of vertices."""
        return len(self._adjacency)

    def edge_count(self) -> int:
        """Return the number of edges."""
        return sum(len(neighbours) for neighbours in self._adjacency.values()) // 2