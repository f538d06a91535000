"""Undirected graphs that keep a degree counter per vertex."""

from __future__ import annotations

from typing import Sequence

from adjgraph.graph import NO_LINK, Graph, Link, Vertex


class UndirectedGraph(Graph):
    """A graph whose links are stored in both directions of the matrix.

    Degrees computed at construction count every matrix entry at both of
    its ends, so an edge stored symmetrically adds two to each endpoint.
    """

    def __init__(self, matrix: Sequence[Sequence[int]], vertices: Sequence[Vertex]):
        super().__init__(matrix, vertices)
        self._compute_degrees()

    def _compute_degrees(self) -> None:
        rows = [sum(weight != NO_LINK for weight in row) for row in self._matrix]
        columns = [
            sum(weight != NO_LINK for weight in column) for column in zip(*self._matrix)
        ]
        self._degrees = [out + inc for out, inc in zip(rows, columns)]

    def add_link(self, link: Link) -> None:
        """Add the edge a - b in both directions unless a -> b already exists."""
        i, j = self._index(link.a), self._index(link.b)
        if self._matrix[i][j] == NO_LINK:
            self._link_count += 1
            self._matrix[i][j] = link.weight
            self._matrix[j][i] = link.weight
            self._degrees[i] += 1
            self._degrees[j] += 1

    def remove_link(self, link: Link) -> None:
        """Remove the edge a - b in both directions if a -> b exists."""
        i, j = self._index(link.a), self._index(link.b)
        if self._matrix[i][j] != NO_LINK:
            self._link_count -= 1
            self._matrix[i][j] = NO_LINK
            self._matrix[j][i] = NO_LINK
            self._degrees[i] -= 1
            self._degrees[j] -= 1

    def set_weight(self, link: Link) -> None:
        """Change the weight of the edge a - b in both directions if it exists."""
        i, j = self._index(link.a), self._index(link.b)
        if self._matrix[i][j] != NO_LINK:
            self._matrix[i][j] = link.weight
            self._matrix[j][i] = link.weight

    def degree(self, vertex_id: int) -> int:
        return self._degrees[self._index(vertex_id)]

    def add_vertex(self, vertex: Vertex) -> None:
        super().add_vertex(vertex)
        self._degrees.append(0)

    def remove_vertex(self, vertex_id: int) -> None:
        super().remove_vertex(vertex_id)
        self._compute_degrees()