"""Graph traversals and small graph problems on integer-labelled vertices."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def _check_vertex(vertex: int, count: int) -> None:
    if not 0 <= vertex < count:
        raise IndexError(f"vertex {vertex} is out of range 0..{count - 1}")


def _adjacency(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    if n < 0:
        raise ValueError("the number of vertices must be non-negative")
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for first, second in edges:
        _check_vertex(first, n)
        _check_vertex(second, n)
        adjacency[first].append(second)
        adjacency[second].append(first)
    return adjacency


class AdjacencyGraph:
    """An undirected graph on the vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        self._adjacency = _adjacency(vertices, ())

    def __len__(self) -> int:
        return len(self._adjacency)

    def add_edge(self, first: int, second: int) -> None:
        """Connect ``first`` and ``second``."""
        _check_vertex(first, len(self._adjacency))
        _check_vertex(second, len(self._adjacency))
        self._adjacency[first].append(second)
        self._adjacency[second].append(first)

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first order.

        Neighbours are pushed on a stack in insertion order, so the most
        recently added neighbour is explored first.
        """
        _check_vertex(start, len(self._adjacency))
        visited = {start}
        stack = [start]
        order: list[int] = []
        while stack:
            current = stack.pop()
            order.append(current)
            for neighbour in self._adjacency[current]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)
        return order

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        _check_vertex(start, len(self._adjacency))
        visited = {start}
        pending = deque([start])
        order: list[int] = []
        while pending:
            current = pending.popleft()
            order.append(current)
            for neighbour in self._adjacency[current]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    pending.append(neighbour)
        return order


def valid_path(n: int, edges: Iterable[Sequence[int]], start: int, end: int) -> bool:
    """Return True if ``end`` can be reached from ``start`` along ``edges``."""
    adjacency = _adjacency(n, edges)
    _check_vertex(start, n)
    _check_vertex(end, n)
    if start == end:
        return True
    visited = {start}
    stack = [start]
    while stack:
        for neighbour in adjacency[stack.pop()]:
            if neighbour == end:
                return True
            if neighbour not in visited:
                visited.add(neighbour)
                stack.append(neighbour)
    return False


def find_provinces(is_connected: Sequence[Sequence[int]]) -> int:
    """Count the connected groups in an adjacency matrix of 0s and 1s."""
    size = len(is_connected)
    visited = [False] * size
    provinces = 0
    for city in range(size):
        if visited[city]:
            continue
        provinces += 1
        visited[city] = True
        stack = [city]
        while stack:
            row = is_connected[stack.pop()]
            for other, linked in enumerate(row):
                if linked == 1 and not visited[other]:
                    visited[other] = True
                    stack.append(other)
    return provinces


def find_smallest_set_of_vertices(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Return, in ascending order, the vertices of a directed graph with no incoming edge."""
    with_incoming = {target for _, target in edges}
    return [vertex for vertex in range(n) if vertex not in with_incoming]