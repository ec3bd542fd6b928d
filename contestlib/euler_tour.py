"""Tree queries on the Euler tour of a weighted tree (nodes are 1-indexed)."""

from __future__ import annotations

import operator
from collections.abc import Iterable

from contestlib.segment_tree import SegmentTree
from contestlib.sparse_table import SparseTable

_SHIFT = 30
_MASK = (1 << _SHIFT) - 1
_NO_INDEX = (1 << 63) - 1


def _encode(depth: int, node: int) -> int:
    """Pack ``(depth, node)`` so that ordering follows depth first."""
    if depth < 0:
        return _NO_INDEX
    return (depth << _SHIFT) | node


class EulerTour:
    """Subtree sums, path sums, depths and LCA on a tree given by its edges.

    Each edge is ``(u, v, weight)``; the tree has ``len(edge_list) + 1`` nodes.
    Node weights start at zero. :meth:`build` must be called before queries
    and again after :meth:`set_node_weight`.
    """

    def __init__(self, edge_list: Iterable[tuple[int, int, int]]) -> None:
        self._edges = [(u, v, w) for u, v, w in edge_list]
        self._n = len(self._edges) + 1
        self._node_weight = [0] * (self._n + 1)
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(self._n + 1)]
        for index, (u, v, _) in enumerate(self._edges):
            self._check_node(u)
            self._check_node(v)
            self._adj[u].append((v, index))
            self._adj[v].append((u, index))
        self._built = False
        self._root = -1
        self._in_time: list[int] = []
        self._out_time: list[int] = []

    def _check_node(self, node: int) -> None:
        if not 1 <= node <= self._n:
            raise IndexError(f"node {node} out of range 1..{self._n}")

    def set_node_weight(self, node: int, weight: int) -> None:
        """Set a node's weight before building; a later :meth:`build` is needed."""
        self._check_node(node)
        self._node_weight[node] = weight
        self._built = False

    def node_weight(self, node: int) -> int:
        self._check_node(node)
        return self._node_weight[node]

    def edge_weight(self, edge_index: int) -> int:
        return self._edges[edge_index][2]

    def build(self, root_node: int) -> None:
        """Lay out the tour from ``root_node``; O(N log N)."""
        self._check_node(root_node)
        if self._built:
            return
        self._built = True
        self._root = root_node

        n = self._n
        size = 2 * (n - 1) + 2
        self._in_time = [-1] * (n + 1)
        self._out_time = [-1] * (n + 1)
        subtree_node = [0] * size
        subtree_edge = [0] * size
        path_node = [0] * size
        path_edge = [0] * size
        lca_index = [_NO_INDEX] * size

        t = -1
        stack = [(True, root_node, 0, 0, 0)]
        while stack:
            entering, node, parent, depth, weight = stack.pop()
            if entering:
                t += 1
                self._in_time[node] = t
                subtree_node[t] = self._node_weight[node]
                subtree_edge[t] = weight
                path_node[t] = self._node_weight[node]
                path_edge[t] = weight
                lca_index[t] = _encode(depth, node)
                stack.append((False, node, parent, depth, weight))
                for nxt, e in reversed(self._adj[node]):
                    if nxt == parent:
                        continue
                    stack.append((True, nxt, node, depth + 1, self._edges[e][2]))
            else:
                self._out_time[node] = t
                t += 1
                # Cancelling entries make prefix sums equal to root-to-node sums.
                path_node[t] = -self._node_weight[node]
                path_edge[t] = -weight
                lca_index[t] = _encode(depth - 1, parent)

        self._subtree_node = SegmentTree(subtree_node, operator.add, 0)
        self._subtree_edge = SegmentTree(subtree_edge, operator.add, 0)
        self._path_node = SegmentTree(path_node, operator.add, 0)
        self._path_edge = SegmentTree(path_edge, operator.add, 0)
        self._lca_table = SparseTable(lca_index, min)

    def _times(self, node: int) -> tuple[int, int]:
        self._check_node(node)
        if not self._built:
            raise RuntimeError("build() must be called before querying")
        return self._in_time[node], self._out_time[node]

    def update_node_weight(self, node: int, weight: int) -> None:
        """Change a node's weight on the built tour; O(log N)."""
        in_time, out_time = self._times(node)
        self._node_weight[node] = weight
        self._subtree_node.update(in_time, weight)
        self._path_node.update(in_time, weight)
        self._path_node.update(out_time + 1, -weight)

    def update_edge_weight(self, edge_index: int, weight: int) -> None:
        """Change an edge's weight on the built tour; O(log N)."""
        u, v, _ = self._edges[edge_index]
        self._edges[edge_index] = (u, v, weight)
        in_1, out_1 = self._times(u)
        in_2, out_2 = self._times(v)
        # The edge's weight lives at the child's entry and exit times.
        in_time = max(in_1, in_2)
        out_time = min(out_1, out_2)
        self._subtree_edge.update(in_time, weight)
        self._path_edge.update(in_time, weight)
        self._path_edge.update(out_time + 1, -weight)

    def subtree_size(self, node: int) -> int:
        """Number of nodes in the subtree rooted at ``node``."""
        in_time, out_time = self._times(node)
        return (out_time - in_time) // 2 + 1

    def in_subtree(self, sub_tree_root: int, node: int) -> bool:
        """Whether ``node`` lies in the subtree rooted at ``sub_tree_root``."""
        sub_in, sub_out = self._times(sub_tree_root)
        node_in, node_out = self._times(node)
        return sub_in <= node_in and node_out <= sub_out

    def subtree_query(self, node: int) -> int:
        """Sum of node weights and edge weights inside the subtree of ``node``."""
        in_time, out_time = self._times(node)
        return self._subtree_node.query(in_time, out_time + 1) + self._subtree_edge.query(
            in_time + 1, out_time + 1
        )

    def root_path_query(self, node: int) -> int:
        """Sum of node and edge weights on the path from the root to ``node``."""
        _, out_time = self._times(node)
        return self._path_node.query(0, out_time + 1) + self._path_edge.query(
            1, out_time + 1
        )

    def path_query(self, node_1: int, node_2: int) -> int:
        """Sum of node and edge weights on the path between two nodes."""
        lca = self.lca(node_1, node_2)
        lca_in, _ = self._times(lca)
        return (
            self.root_path_query(node_1)
            + self.root_path_query(node_2)
            - 2 * self.root_path_query(lca)
            + self._subtree_node.query(lca_in, lca_in + 1)
        )

    def depth(self, node: int) -> int:
        """Number of edges between the root and ``node``."""
        in_time, _ = self._times(node)
        return self._lca_table.query(in_time, in_time + 1) >> _SHIFT

    def lca(self, node_1: int, node_2: int) -> int:
        """Lowest common ancestor of two nodes; O(1)."""
        in_1, out_1 = self._times(node_1)
        in_2, out_2 = self._times(node_2)
        index = self._lca_table.query(min(in_1, in_2), max(out_1, out_2) + 1)
        return index & _MASK

    def path_length(self, node_1: int, node_2: int) -> int:
        """Number of edges on the path between two nodes."""
        lca = self.lca(node_1, node_2)
        return self.depth(node_1) + self.depth(node_2) - 2 * self.depth(lca)