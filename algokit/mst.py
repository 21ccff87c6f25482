"""Prim's algorithm for a minimum spanning tree."""

from __future__ import annotations

from dataclasses import dataclass, field

from algokit.graph import Graph

MAXINT = 1_000_000


@dataclass
class SpanningTree:
    """Total weight and the (parent, vertex) edges in the order they joined."""

    weight: int = 0
    edges: list[tuple[int, int]] = field(default_factory=list)

    def lines(self) -> list[str]:
        return [f"An edge ({p},{v}) in the tree" for p, v in self.edges]


def prim(graph: Graph, start: int = 1) -> SpanningTree:
    """Grow a spanning tree from *start* over vertices 1..nvertices.

    Vertices that cannot be reached, or only through edges of weight
    MAXINT or more, stay outside the tree.
    """
    count = graph.nvertices
    if not 1 <= start <= count:
        raise ValueError(f"start vertex {start} out of range")
    in_tree = [False] * (count + 1)
    distance = [MAXINT] * (count + 1)
    parent = [-1] * (count + 1)
    tree = SpanningTree()

    distance[start] = 0
    v = start
    while not in_tree[v]:
        in_tree[v] = True
        if v != start:
            tree.edges.append((parent[v], v))
            tree.weight += distance[v]
        for edge in graph.neighbours(v):
            w = edge.y
            if distance[w] > edge.weight and not in_tree[w]:
                distance[w] = edge.weight
                parent[w] = v
        best = MAXINT
        for i in range(1, count + 1):
            if not in_tree[i] and best > distance[i]:
                best = distance[i]
                v = i
    return tree