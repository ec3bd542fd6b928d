"""Shortest paths, topological order and longest paths on 1-indexed graphs.

Adjacency lists are indexed by node; index 0 is unused. A weighted list holds
``(to, weight)`` pairs, an unweighted one holds plain node numbers.
Unreachable nodes get the distance ``INF``.
"""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Sequence
from typing import Any

INF = (1 << 63) - 1

WeightedAdjacency = Sequence[Sequence[tuple[int, int]]]
Adjacency = Sequence[Sequence[int]]


def _is_weighted(adj_list: Sequence[Sequence[Any]]) -> bool:
    for edges in adj_list:
        for item in edges:
            return isinstance(item, (tuple, list))
    return False


def _as_weighted(adj_list: Sequence[Sequence[Any]]) -> list[list[tuple[int, int]]]:
    if _is_weighted(adj_list):
        return [[(to, w) for to, w in edges] for edges in adj_list]
    return [[(to, 1) for to in edges] for edges in adj_list]


def _as_unweighted(adj_list: Sequence[Sequence[Any]]) -> list[list[int]]:
    if _is_weighted(adj_list):
        return [[to for to, _ in edges] for edges in adj_list]
    return [list(edges) for edges in adj_list]


def _edge_list(adj_list: WeightedAdjacency) -> list[tuple[int, int, int]]:
    return [
        (frm, to, w)
        for frm in range(1, len(adj_list))
        for to, w in adj_list[frm]
    ]


def shortest_path_bfs(adj_list: Adjacency, start: int) -> list[int]:
    """Single-source shortest path lengths in an unweighted graph, O(N + E)."""
    dist = [INF] * len(adj_list)
    dist[start] = 0
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for to in adj_list[node]:
            if dist[to] == INF:
                dist[to] = dist[node] + 1
                queue.append(to)
    return dist


def shortest_path_dijkstra(adj_list: WeightedAdjacency, start: int) -> list[int]:
    """Single-source shortest paths with non-negative weights, O(E + N log N)."""
    dist = [INF] * len(adj_list)
    dist[start] = 0
    heap = [(0, start)]
    while heap:
        d, node = heapq.heappop(heap)
        if dist[node] < d:
            continue
        for to, w in adj_list[node]:
            if dist[to] > d + w:
                dist[to] = d + w
                heapq.heappush(heap, (dist[to], to))
    return dist


def shortest_path_bellman_ford(
    adj_list: WeightedAdjacency, start: int
) -> tuple[bool, list[int]]:
    """Single-source shortest paths allowing negative weights, O(E * N).

    Returns ``(negative_loop, distances)``; ``negative_loop`` is True when a
    negative cycle is reachable from ``start``.
    """
    n = len(adj_list) - 1
    dist = [INF] * (n + 1)
    dist[start] = 0
    edges = _edge_list(adj_list)
    negative_loop = False

    for i in range(1, n + 1):
        for frm, to, w in edges:
            if dist[frm] == INF:
                continue
            if dist[to] > dist[frm] + w:
                dist[to] = dist[frm] + w
                if i == n:
                    # Without a negative cycle everything settles in N - 1 rounds.
                    negative_loop = True
                    break
    return negative_loop, dist


def detect_negative_inf_nodes(
    adj_list: WeightedAdjacency, start: int, min_weight_list: Sequence[int]
) -> list[bool]:
    """Flag nodes whose shortest distance is minus infinity.

    ``min_weight_list`` is the distance list from
    :func:`shortest_path_bellman_ford`; it is not modified.
    """
    n = len(adj_list) - 1
    dist = list(min_weight_list)
    negative_inf = [False] * (n + 1)
    edges = _edge_list(adj_list)

    for _ in range(n):
        for frm, to, w in edges:
            if dist[frm] == INF:
                continue
            if dist[to] > dist[frm] + w:
                dist[to] = dist[frm] + w
                negative_inf[to] = True
            if negative_inf[frm]:
                negative_inf[to] = True
    return negative_inf


def all_shortest_paths_warshall_floyd(
    adj_list: WeightedAdjacency,
) -> tuple[bool, list[list[int]]]:
    """All-pairs shortest paths, O(N^3).

    Returns ``(negative_loop, matrix)``; row and column 0 stay ``INF``. A node
    on a negative cycle has a negative diagonal entry.
    """
    size = len(adj_list)
    n = size - 1
    dist = [[INF] * size for _ in range(size)]

    for node in range(1, n + 1):
        dist[node][node] = 0
        for to, w in adj_list[node]:
            dist[node][to] = min(dist[node][to], w)

    for k in range(1, n + 1):
        row_k = dist[k]
        for i in range(1, n + 1):
            d_ik = dist[i][k]
            if d_ik == INF:
                continue
            row_i = dist[i]
            for j in range(1, n + 1):
                if row_k[j] == INF:
                    continue
                candidate = d_ik + row_k[j]
                if candidate < row_i[j]:
                    row_i[j] = candidate

    negative_loop = any(dist[node][node] < 0 for node in range(1, n + 1))
    return negative_loop, dist


def find_shortest_path(
    start: int,
    end: int,
    adj_list: Sequence[Sequence[Any]],
    min_weight_list: Sequence[int],
) -> list[int]:
    """Recover the node sequence of a shortest path from ``start`` to ``end``.

    ``min_weight_list`` holds the distances from ``start``. Works for weighted
    and unweighted adjacency lists.
    """
    weighted = _as_weighted(adj_list)
    n = len(weighted) - 1
    reverse_adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for frm in range(1, n + 1):
        for to, w in weighted[frm]:
            reverse_adj[to].append((frm, w))

    visited = [False] * (n + 1)
    node = end
    back_path = [node]
    visited[node] = True

    while node != start:
        for frm, w in reverse_adj[node]:
            if visited[frm] or min_weight_list[frm] == INF:
                continue
            if min_weight_list[node] == min_weight_list[frm] + w:
                back_path.append(frm)
                node = frm
                visited[frm] = True
                break
        else:
            raise ValueError(f"no shortest path from {start} to {end}")

    back_path.reverse()
    return back_path


def topological_sort(adj_list: Sequence[Sequence[Any]]) -> tuple[bool, list[int]]:
    """Kahn's algorithm, O(N + E).

    Returns ``(is_dag, order)``; when the graph has a cycle ``order`` holds
    only the nodes that could be placed.
    """
    adj = _as_unweighted(adj_list)
    n = len(adj) - 1
    in_degree = [0] * (n + 1)
    for frm in range(1, n + 1):
        for to in adj[frm]:
            in_degree[to] += 1

    queue = deque(node for node in range(1, n + 1) if in_degree[node] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for to in adj[node]:
            in_degree[to] -= 1
            if in_degree[to] == 0:
                queue.append(to)

    return len(order) == n, order


def longest_path(adj_list: Sequence[Sequence[Any]]) -> int:
    """Weight of the longest path in a DAG, or -1 if the graph has a cycle."""
    weighted = _as_weighted(adj_list)
    n = len(weighted) - 1
    is_dag, order = topological_sort(weighted)
    if not is_dag:
        return -1

    best = [0] * (n + 1)
    for frm in order:
        for to, w in weighted[frm]:
            if best[to] < best[frm] + w:
                best[to] = best[frm] + w
    return max(best)