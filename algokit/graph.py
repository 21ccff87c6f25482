"""Adjacency-list graph with edge insertion and reading from a stream."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TextIO

MAXV = 100


@dataclass(eq=False)
class EdgeNode:
    """An entry of an adjacency list."""

    y: int
    weight: int = 0
    next: EdgeNode | None = None


@dataclass
class Graph:
    """A graph stored as adjacency lists, with room for MAXV vertices."""

    directed: bool = False
    nvertices: int = 0
    nedges: int = 0
    edges: list[EdgeNode | None] = field(default_factory=lambda: [None] * MAXV)
    degree: list[int] = field(default_factory=lambda: [0] * MAXV)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self.edges):
            raise IndexError(f"vertex {vertex} out of range")

    def insert_edge(self, x: int, y: int, directed: bool | None = None, weight: int = 0) -> None:
        """Add the edge (x, y); an undirected edge is stored in both lists.

        *directed* defaults to the graph's own setting. An undirected edge
        counts once in ``nedges``.
        """
        if directed is None:
            directed = self.directed
        self._check(x)
        self._check(y)
        self.edges[x] = EdgeNode(y, weight, self.edges[x])
        self.degree[x] += 1
        if not directed:
            self.insert_edge(y, x, True, weight)
        else:
            self.nedges += 1

    def neighbours(self, x: int) -> Iterator[EdgeNode]:
        """Yield the edges leaving *x*, most recently inserted first."""
        self._check(x)
        edge = self.edges[x]
        while edge is not None:
            yield edge
            edge = edge.next

    def format(self) -> str:
        """Render the adjacency lists of vertices 1..nvertices, one per line."""
        return "".join(
            f"{i}: " + "".join(f" {edge.y}" for edge in self.neighbours(i)) + "\n"
            for i in range(1, self.nvertices + 1)
        )


def read_graph(stream: TextIO, directed: bool = False) -> Graph:
    """Read a vertex count, an edge count and that many vertex pairs."""
    tokens = iter(stream.read().split())

    def next_int() -> int:
        try:
            return int(next(tokens))
        except StopIteration:
            raise ValueError("unexpected end of graph data") from None

    graph = Graph(directed=directed)
    graph.nvertices = next_int()
    for _ in range(next_int()):
        x = next_int()
        y = next_int()
        graph.insert_edge(x, y, directed)
    return graph