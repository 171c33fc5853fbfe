"""Graph traversals, shortest paths and minimum spanning trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

INF = 9999
"""Distance reported for unreachable vertices; weights at or above it are ignored by :func:`prim`."""


@dataclass(frozen=True)
class WeightedEdge:
    """An undirected edge between vertices ``u`` and ``v`` with a weight."""

    u: int
    v: int
    weight: int


def _check_vertex(vertex: int, count: int, *, first: int) -> None:
    if not first <= vertex < first + count:
        raise ValueError(
            f"vertex {vertex} is outside the range {first}..{first + count - 1}"
        )


def _adjacency(node_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    if node_count < 0:
        raise ValueError("node count must not be negative")
    neighbours: list[set[int]] = [set() for _ in range(node_count)]
    for u, v in edges:
        _check_vertex(u, node_count, first=1)
        _check_vertex(v, node_count, first=1)
        neighbours[u - 1].add(v - 1)
        neighbours[v - 1].add(u - 1)
    return [sorted(adjacent) for adjacent in neighbours]


def _traverse(
    node_count: int,
    edges: Iterable[tuple[int, int]],
    start: int,
    take: Callable[[deque[int]], int],
) -> list[int]:
    adjacency = _adjacency(node_count, edges)
    _check_vertex(start, node_count, first=1)
    origin = start - 1
    visited = {origin}
    pending = deque([origin])
    order: list[int] = []
    while pending:
        node = take(pending)
        order.append(node + 1)
        for neighbour in adjacency[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                pending.append(neighbour)
    return order


def bfs(node_count: int, edges: Iterable[tuple[int, int]], start: int) -> list[int]:
    """Breadth-first order of an undirected graph with vertices numbered from 1."""
    return _traverse(node_count, edges, start, deque.popleft)


def dfs(node_count: int, edges: Iterable[tuple[int, int]], start: int) -> list[int]:
    """Stack-based depth-first order of an undirected graph with vertices numbered from 1.

    A vertex is marked visited when pushed, and neighbours are pushed in
    ascending order, so the highest-numbered neighbour is explored first.
    """
    return _traverse(node_count, edges, start, deque.pop)


def _square_size(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return size


def dijkstra(matrix: Sequence[Sequence[int]], source: int) -> list[int]:
    """Shortest distances from ``source`` over an adjacency matrix (0 means no edge).

    Vertices that cannot be reached keep the distance :data:`INF`.
    """
    size = _square_size(matrix)
    _check_vertex(source, size, first=0)
    dist = [INF] * size
    dist[source] = 0
    visited = [False] * size

    for _ in range(size - 1):
        candidates = [k for k in range(size) if not visited[k] and dist[k] <= INF]
        if not candidates:
            break
        # Ties go to the highest index.
        u = min(reversed(candidates), key=dist.__getitem__)
        visited[u] = True
        for v, weight in enumerate(matrix[u]):
            if not visited[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def prim(matrix: Sequence[Sequence[int]]) -> list[WeightedEdge]:
    """Minimum spanning tree grown from vertex 0, in the order edges are chosen.

    Raises ValueError if some vertex cannot be joined to the tree.
    """
    size = _square_size(matrix)
    selected = {0} if size else set()
    tree: list[WeightedEdge] = []
    while len(selected) < size:
        best = min(
            (
                (matrix[i][j], i, j)
                for i in sorted(selected)
                for j in range(size)
                if j not in selected and matrix[i][j] and matrix[i][j] < INF
            ),
            default=None,
        )
        if best is None:
            raise ValueError("graph is not connected")
        weight, x, y = best
        tree.append(WeightedEdge(x, y, weight))
        selected.add(y)
    return tree


def kruskal(
    vertex_count: int,
    edges: Iterable[WeightedEdge | tuple[int, int, int]],
) -> list[WeightedEdge]:
    """Minimum spanning forest over vertices numbered from 0, in the order edges are taken."""
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    normalised = [
        edge if isinstance(edge, WeightedEdge) else WeightedEdge(*edge) for edge in edges
    ]
    for edge in normalised:
        _check_vertex(edge.u, vertex_count, first=0)
        _check_vertex(edge.v, vertex_count, first=0)

    parent = list(range(vertex_count))

    def find(vertex: int) -> int:
        while parent[vertex] != vertex:
            vertex = parent[vertex]
        return vertex

    tree: list[WeightedEdge] = []
    for edge in sorted(normalised, key=lambda e: e.weight):
        a, b = find(edge.u), find(edge.v)
        if a != b:
            tree.append(edge)
            parent[a] = b
    return tree