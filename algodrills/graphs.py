"""Traversals and shortest paths on adjacency-list graphs."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence

Graph = Sequence[Sequence[int]]
WeightedGraph = Sequence[Sequence[tuple[int, int]]]


def _check_node(graph: Sequence, node: int) -> None:
    if not 0 <= node < len(graph):
        raise IndexError(f"node {node} out of range for {len(graph)} nodes")


def _bfs(graph: Graph, source: int, visited: list[bool]) -> list[int]:
    visited[source] = True
    queue = deque([source])
    order = []
    while queue:
        current = queue.popleft()
        order.append(current)
        for neighbour in graph[current]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return order


def bfs_from(graph: Graph, source: int) -> list[int]:
    """Breadth-first visiting order of the nodes reachable from ``source``."""
    _check_node(graph, source)
    return _bfs(graph, source, [False] * len(graph))


def bfs_order(graph: Graph) -> list[int]:
    """Breadth-first visiting order over every node, one component after another."""
    visited = [False] * len(graph)
    order: list[int] = []
    for start in range(len(graph)):
        if not visited[start]:
            order.extend(_bfs(graph, start, visited))
    return order


def bfs_levels(graph: Graph) -> list[list[int]]:
    """Breadth-first levels over every node; each component adds its own levels."""
    visited = [False] * len(graph)
    levels: list[list[int]] = []
    for start in range(len(graph)):
        if visited[start]:
            continue
        visited[start] = True
        frontier = [start]
        while frontier:
            levels.append(frontier)
            following = []
            for current in frontier:
                for neighbour in graph[current]:
                    if not visited[neighbour]:
                        visited[neighbour] = True
                        following.append(neighbour)
            frontier = following
    return levels


def _dfs(graph: Graph, start: int, visited: list[bool], parents: list[int | None]) -> list[int]:
    visited[start] = True
    order = [start]
    stack = [(start, iter(graph[start]))]
    while stack:
        node, neighbours = stack[-1]
        for neighbour in neighbours:
            if not visited[neighbour]:
                visited[neighbour] = True
                parents[neighbour] = node
                order.append(neighbour)
                stack.append((neighbour, iter(graph[neighbour])))
                break
        else:
            stack.pop()
    return order


def dfs_components(graph: Graph) -> list[list[int]]:
    """Depth-first preorder of each component, in order of the lowest unvisited node."""
    visited = [False] * len(graph)
    parents: list[int | None] = [None] * len(graph)
    return [
        _dfs(graph, start, visited, parents)
        for start in range(len(graph))
        if not visited[start]
    ]


def dfs_parents(graph: Graph) -> list[int | None]:
    """Parent of each node in the depth-first forest; roots have None."""
    visited = [False] * len(graph)
    parents: list[int | None] = [None] * len(graph)
    for start in range(len(graph)):
        if not visited[start]:
            _dfs(graph, start, visited, parents)
    return parents


def path_to_root(parents: Sequence[int | None], node: int) -> list[int]:
    """Follow parent links from ``node`` to its root."""
    _check_node(parents, node)
    path = []
    current: int | None = node
    while current is not None:
        path.append(current)
        current = parents[current]
    return path


def weighted_bfs_order(graph: WeightedGraph) -> list[int]:
    """Breadth-first order over a graph whose edges are ``(weight, node)`` pairs."""
    return bfs_order([[node for _, node in edges] for edges in graph])


def shortest_path(vertex_count: int, edges: Iterable[tuple[int, int, int]]) -> list[int] | None:
    """Shortest path from vertex 1 to ``vertex_count`` in an undirected weighted graph.

    Vertices are numbered from 1; ``edges`` holds ``(u, v, weight)`` triples.
    Returns None when the last vertex cannot be reached.
    """
    if vertex_count < 1:
        raise ValueError("a graph needs at least one vertex")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count + 1)]
    for u, v, weight in edges:
        for end in (u, v):
            if not 1 <= end <= vertex_count:
                raise ValueError(f"vertex {end} out of range 1..{vertex_count}")
        adjacency[u].append((weight, v))
        adjacency[v].append((weight, u))

    dist: list[float] = [float("inf")] * (vertex_count + 1)
    parent: list[int | None] = [None] * (vertex_count + 1)
    dist[1] = 0
    heap = [(0, 1)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for weight, v in adjacency[u]:
            candidate = d + weight
            if candidate < dist[v]:
                dist[v] = candidate
                parent[v] = u
                heapq.heappush(heap, (candidate, v))

    if dist[vertex_count] == float("inf"):
        return None
    path = path_to_root(parent, vertex_count)
    path.reverse()
    return path