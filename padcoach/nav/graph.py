from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

import numpy as np

from .pads import PadNode, Vec3

# Returned by nearest() when the graph has no nodes.
NO_NODE = -1


class NavGraph:
    """
    Boost pads as a routing graph.

    Nodes are kept in an ordered list; ``neighbors[i]`` holds the indices of
    the nodes reachable from node ``i`` in one hop. Edges carry no cost of
    their own, the cost of ``i -> j`` is the straight-line distance between
    the two pads.

    The default construction connects every pad to every other pad. Pad
    counts are small (a standard arena has 16 tracked pads), so the O(n^2)
    edge list is cheap and no pair is ever unreachable.
    """

    def __init__(self, nodes: Sequence[PadNode] = (), neighbors: Sequence[Sequence[int]] | None = None):
        self.nodes: list[PadNode] = list(nodes)
        if neighbors is None:
            self.neighbors: list[list[int]] = [[] for _ in self.nodes]
        else:
            if len(neighbors) != len(self.nodes):
                raise ValueError(f"neighbors has {len(neighbors)} entries for {len(self.nodes)} nodes")
            n = len(self.nodes)
            for i, nbrs in enumerate(neighbors):
                for j in nbrs:
                    if not 0 <= j < n:
                        raise ValueError(f"node {i} has out-of-range neighbor {j}")
            self.neighbors = [list(nbrs) for nbrs in neighbors]
        self._positions = np.array([node.pos for node in self.nodes], dtype=np.float64).reshape(-1, 3)

    @classmethod
    def build(cls, pads: Sequence[PadNode]) -> NavGraph:
        """Build the complete graph over ``pads``."""
        graph = cls(pads)
        n = len(graph.nodes)
        for i in range(n):
            for j in range(i + 1, n):
                graph.neighbors[i].append(j)
                graph.neighbors[j].append(i)
        return graph

    @classmethod
    def from_edges(cls, pads: Sequence[PadNode], edges: Iterable[tuple[int, int]]) -> NavGraph:
        """Build an undirected graph from an explicit edge list."""
        n = len(pads)
        adjacency: list[list[int]] = [[] for _ in range(n)]
        for a, b in edges:
            if not (0 <= a < n and 0 <= b < n):
                raise ValueError(f"edge ({a}, {b}) out of range for {n} nodes")
            if b not in adjacency[a]:
                adjacency[a].append(b)
            if a not in adjacency[b]:
                adjacency[b].append(a)
        for nbrs in adjacency:
            nbrs.sort()
        return cls(pads, adjacency)

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def empty(self) -> bool:
        return not self.nodes

    def is_valid(self, index: int) -> bool:
        return 0 <= index < len(self.nodes)

    def edge_cost(self, a: int, b: int) -> float:
        return math.dist(self.nodes[a].pos, self.nodes[b].pos)

    def nearest(self, pos: Vec3) -> int:
        """Index of the pad closest to ``pos``, or NO_NODE on an empty graph.

        Ties go to the lowest index (np.argmin returns the first minimum).
        """
        if not self.nodes:
            return NO_NODE
        d_sq = np.sum((self._positions - np.asarray(pos, dtype=np.float64)) ** 2, axis=1)
        return int(np.argmin(d_sq))

    def to_dict(self) -> dict:
        """Serialize graph to a JSON-safe dictionary."""
        return {
            "nodes": [
                {
                    "index": node.index,
                    "pos": list(node.pos),
                    "type": node.pad_type.value,
                    "neighbors": list(self.neighbors[i]),
                }
                for i, node in enumerate(self.nodes)
            ]
        }


def path_cost(graph: NavGraph, path: Sequence[int]) -> float:
    """Total edge cost along ``path``."""
    return sum(graph.edge_cost(a, b) for a, b in zip(path, path[1:]))
