"""Directed graphs that keep out-degree and in-degree counters."""

from __future__ import annotations

from typing import Sequence

from adjgraph.graph import NO_LINK, Graph, Link, Vertex


class DirectedGraph(Graph):
    """A graph whose links are arcs from ``a`` to ``b``."""

    def __init__(self, matrix: Sequence[Sequence[int]], vertices: Sequence[Vertex]):
        super().__init__(matrix, vertices)
        self._compute_degrees()

    def _compute_degrees(self) -> None:
        self._out_degrees = [
            sum(weight != NO_LINK for weight in row) for row in self._matrix
        ]
        self._in_degrees = [
            sum(weight != NO_LINK for weight in column) for column in zip(*self._matrix)
        ]
        if not self._matrix:
            self._in_degrees = []

    def add_link(self, link: Link) -> None:
        """Add the arc a -> b unless one already exists."""
        i, j = self._index(link.a), self._index(link.b)
        if self._matrix[i][j] == NO_LINK:
            self._matrix[i][j] = link.weight
            self._link_count += 1
            self._out_degrees[i] += 1
            self._in_degrees[j] += 1

    def remove_link(self, link: Link) -> None:
        """Remove the arc a -> b if it exists."""
        i, j = self._index(link.a), self._index(link.b)
        if self._matrix[i][j] != NO_LINK:
            self._matrix[i][j] = NO_LINK
            self._link_count -= 1
            self._out_degrees[i] -= 1
            self._in_degrees[j] -= 1

    def set_weight(self, link: Link) -> None:
        """Change the weight of the arc a -> b if it exists."""
        i, j = self._index(link.a), self._index(link.b)
        if self._matrix[i][j] != NO_LINK:
            self._matrix[i][j] = link.weight

    def out_degree(self, vertex_id: int) -> int:
        return self._out_degrees[self._index(vertex_id)]

    def in_degree(self, vertex_id: int) -> int:
        return self._in_degrees[self._index(vertex_id)]

    def reverse_link(self, link: Link) -> None:
        """Move the value of a -> b onto b -> a and clear a -> b.

        The link count and the degree counters are left as they were.
        """
        i, j = self._index(link.a), self._index(link.b)
        self._matrix[j][i] = self._matrix[i][j]
        self._matrix[i][j] = NO_LINK

    def add_vertex(self, vertex: Vertex) -> None:
        super().add_vertex(vertex)
        self._out_degrees.append(0)
        self._in_degrees.append(0)

    def remove_vertex(self, vertex_id: int) -> None:
        super().remove_vertex(vertex_id)
        self._compute_degrees()