"""Strongly connected components by Kosaraju's algorithm (nodes are 1-indexed)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def _targets(adj_list: Sequence[Sequence[Any]]) -> list[list[int]]:
    weighted = any(
        isinstance(item, (tuple, list)) for edges in adj_list for item in edges[:1]
    )
    if weighted:
        return [[to for to, _ in edges] for edges in adj_list]
    return [list(edges) for edges in adj_list]


class StronglyConnectedComponents:
    """Components numbered from 1 in topological order of the condensation.

    ``adj_list`` is indexed by node with index 0 unused; entries are node
    numbers or ``(to, weight)`` pairs.
    """

    def __init__(self, adj_list: Sequence[Sequence[Any]]) -> None:
        if not adj_list:
            raise ValueError("adjacency list must not be empty")
        adj = _targets(adj_list)
        n = len(adj) - 1
        self._n = n
        reverse: list[list[int]] = [[] for _ in range(n + 1)]
        for frm in range(1, n + 1):
            for to in adj[frm]:
                reverse[to].append(frm)

        post_order: list[int] = []
        visited = [False] * (n + 1)
        for start in range(1, n + 1):
            if visited[start]:
                continue
            visited[start] = True
            stack = [(start, iter(adj[start]))]
            while stack:
                node, edges = stack[-1]
                for nxt in edges:
                    if not visited[nxt]:
                        visited[nxt] = True
                        stack.append((nxt, iter(adj[nxt])))
                        break
                else:
                    stack.pop()
                    post_order.append(node)

        scc = [-1] * (n + 1)
        count = 0
        for start in reversed(post_order):
            if scc[start] != -1:
                continue
            count += 1
            scc[start] = count
            stack_nodes = [start]
            while stack_nodes:
                node = stack_nodes.pop()
                for nxt in reverse[node]:
                    if scc[nxt] == -1:
                        scc[nxt] = count
                        stack_nodes.append(nxt)

        successors: list[set[int]] = [set() for _ in range(count + 1)]
        for frm in range(1, n + 1):
            for to in adj[frm]:
                if scc[frm] != scc[to]:
                    successors[scc[frm]].add(scc[to])

        self._scc = scc
        self._graph = [sorted(s) for s in successors]
        self._groups: list[list[int]] = [[] for _ in range(count + 1)]
        for node in range(1, n + 1):
            self._groups[scc[node]].append(node)

    def scc_count(self) -> int:
        """Number of strongly connected components."""
        return len(self._graph) - 1

    def scc_graph(self) -> list[list[int]]:
        """Adjacency list of the condensation (a DAG, index 0 unused)."""
        return [list(edges) for edges in self._graph]

    def scc_of(self, node: int) -> int:
        """Component number (from 1) of ``node``."""
        if not 1 <= node <= self._n:
            raise IndexError(f"node {node} out of range 1..{self._n}")
        return self._scc[node]

    def scc_groups(self) -> list[list[int]]:
        """Nodes of each component in ascending order (index 0 unused)."""
        return [list(group) for group in self._groups]