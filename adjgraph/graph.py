"""Weighted graphs stored as an adjacency matrix, with FS/APS and adjacency-list forms."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Iterator, Sequence

NO_LINK = 2**31 - 1
"""Matrix value meaning that there is no link between two vertices."""

DEFAULT_FILE_NAME = "Graphe.txt"


@dataclass
class Vertex:
    """A vertex holding the contents of a 5-litre and a 3-litre jug."""

    id: int = 0
    jug_5l: int = 0
    jug_3l: int = 0

    def __str__(self) -> str:
        return f"({self.jug_5l},{self.jug_3l})"

    def write(self, stream: IO[str]) -> None:
        """Write the vertex data to a text stream as two numbers."""
        stream.write(f"{self.jug_5l} {self.jug_3l}")


@dataclass(frozen=True)
class Link:
    """A link from vertex ``a`` to vertex ``b`` (1-based ids) with a weight."""

    a: int
    b: int
    weight: int = 0

    def __str__(self) -> str:
        return f"({self.a},{self.b})={self.weight}"


@dataclass
class Arc:
    """An outgoing arc in the adjacency-list form."""

    weight: int
    target: int


@dataclass
class VertexEntry:
    """A vertex in the adjacency-list form, with its outgoing arcs in order."""

    id: int
    arcs: list[Arc] = field(default_factory=list)


def _check_id(vertex_id: int, count: int) -> int:
    if not 1 <= vertex_id <= count:
        raise IndexError(f"vertex id {vertex_id} out of range 1..{count}")
    return vertex_id - 1


def _successor_groups(
    fs: Sequence[int], costs: Sequence[int], count: int
) -> Iterator[list[tuple[int, int]]]:
    """Yield, for each of ``count`` vertices, its (target, cost) pairs from FS."""
    pairs = iter(zip(fs[1:], costs[1:]))
    for _ in range(count):
        group: list[tuple[int, int]] = []
        for target, cost in pairs:
            if target == 0:
                break
            if not 1 <= target <= count:
                raise ValueError(f"successor {target} out of range 1..{count}")
            group.append((target, cost))
        else:
            raise ValueError("FS array ends before every vertex is terminated")
        yield group


def lists_from_fs_aps_costs(
    fs: Sequence[int], aps: Sequence[int], costs: Sequence[int]
) -> list[VertexEntry]:
    """Build the adjacency-list form from FS, APS and cost arrays."""
    count = aps[0]
    return [
        VertexEntry(vertex_id, [Arc(cost, target) for target, cost in group])
        for vertex_id, group in enumerate(_successor_groups(fs, costs, count), start=1)
    ]


def fs_aps_costs_from_lists(
    entries: Sequence[VertexEntry],
) -> tuple[list[int], list[int], list[int]]:
    """Build FS, APS and cost arrays from the adjacency-list form."""
    fs = [0]
    costs = [0]
    aps = [len(entries)]
    for entry in entries:
        aps.append(len(fs))
        for arc in entry.arcs:
            fs.append(arc.target)
            costs.append(arc.weight)
        fs.append(0)
        costs.append(0)
    fs[0] = costs[0] = len(fs) - 1
    return fs, aps, costs


def aps_from_fs(fs: Sequence[int]) -> list[int]:
    """Derive the APS array from an FS array."""
    size = fs[0]
    zeros = [pos for pos, value in enumerate(fs[1 : size + 1], start=1) if value == 0]
    if not zeros:
        return [0]
    return [len(zeros), 1, *(pos + 1 for pos in zeros if pos < size)]


def format_lists(entries: Sequence[VertexEntry]) -> str:
    """Render every arc of the adjacency-list form as a "source target" line."""
    return "".join(
        f"{entry.id} {arc.target}\n" for entry in entries for arc in entry.arcs
    )


class Graph:
    """A weighted graph held as an adjacency matrix plus its vertices."""

    def __init__(self, matrix: Sequence[Sequence[int]], vertices: Sequence[Vertex]):
        rows = [list(row) for row in matrix]
        if any(len(row) != len(rows) for row in rows):
            raise ValueError("adjacency matrix must be square")
        if len(vertices) != len(rows):
            raise ValueError(
                f"{len(vertices)} vertices given for a {len(rows)}x{len(rows)} matrix"
            )
        self._matrix = rows
        self._vertices = [
            dataclasses.replace(vertex, id=vertex_id)
            for vertex_id, vertex in enumerate(vertices, start=1)
        ]
        self._link_count = self._count_links()

    @classmethod
    def from_fs_aps(
        cls,
        fs: Sequence[int],
        aps: Sequence[int],
        vertices: Sequence[Vertex],
        costs: Sequence[int] | None = None,
    ):
        """Build a graph from FS/APS arrays; every cost is 1 when none are given."""
        count = aps[0]
        if costs is None:
            costs = [1] * (fs[0] + 1)
        matrix = [[NO_LINK] * count for _ in range(count)]
        for row, group in zip(matrix, _successor_groups(fs, costs, count)):
            for target, cost in group:
                row[target - 1] = cost
        graph = cls(matrix, vertices)
        graph._link_count = fs[0] - aps[0]
        return graph

    @classmethod
    def from_file(cls, path: str | Path):
        """Read a graph: "n m", the n x n matrix, then two numbers per vertex."""
        values = [int(token) for token in Path(path).read_text().split()]
        if len(values) < 2:
            raise ValueError("graph file lacks the vertex and link counts")
        count, link_count = values[0], values[1]
        needed = 2 + count * count + 2 * count
        if count < 0 or len(values) < needed:
            raise ValueError("graph file is truncated")
        numbers = iter(values[2:needed])
        matrix = [[next(numbers) for _ in range(count)] for _ in range(count)]
        vertices = [
            Vertex(vertex_id, next(numbers), next(numbers))
            for vertex_id in range(1, count + 1)
        ]
        graph = cls(matrix, vertices)
        graph._link_count = link_count
        return graph

    @classmethod
    def from_lists(cls, entries: Sequence[VertexEntry], vertices: Sequence[Vertex]):
        """Build a graph from the adjacency-list form."""
        count = len(vertices)
        matrix = [[NO_LINK] * count for _ in range(count)]
        for entry in entries:
            row = matrix[_check_id(entry.id, count)]
            for arc in entry.arcs:
                row[_check_id(arc.target, count)] = arc.weight
        return cls(matrix, vertices)

    def to_lists(self) -> list[VertexEntry]:
        """Return the adjacency-list form of the graph."""
        return [
            VertexEntry(
                source,
                [
                    Arc(weight, target)
                    for target, weight in enumerate(row, start=1)
                    if weight != NO_LINK
                ],
            )
            for source, row in enumerate(self._matrix, start=1)
        ]

    def adjacency_matrix(self) -> list[list[int]]:
        """Return a copy of the adjacency matrix."""
        return [list(row) for row in self._matrix]

    def vertices(self) -> list[Vertex]:
        """Return copies of the vertices, in id order."""
        return [dataclasses.replace(vertex) for vertex in self._vertices]

    def vertex_count(self) -> int:
        return len(self._vertices)

    def link_count(self) -> int:
        return self._link_count

    def _index(self, vertex_id: int) -> int:
        return _check_id(vertex_id, self.vertex_count())

    def _count_links(self) -> int:
        return sum(weight != NO_LINK for row in self._matrix for weight in row)

    def weight_of(self, link: Link) -> int:
        """Return the matrix value for ``link`` (NO_LINK when absent)."""
        return self._matrix[self._index(link.a)][self._index(link.b)]

    def vertex(self, vertex_id: int) -> Vertex:
        return dataclasses.replace(self._vertices[self._index(vertex_id)])

    def set_vertex(self, vertex_id: int, vertex: Vertex) -> None:
        """Replace a vertex's data, keeping its id."""
        index = self._index(vertex_id)
        self._vertices[index] = dataclasses.replace(vertex, id=index + 1)

    def add_vertex(self, vertex: Vertex) -> None:
        """Append an isolated vertex; it takes the next id."""
        self._vertices.append(dataclasses.replace(vertex, id=len(self._vertices) + 1))
        for row in self._matrix:
            row.append(NO_LINK)
        self._matrix.append([NO_LINK] * len(self._vertices))

    def remove_vertex(self, vertex_id: int) -> None:
        """Remove a vertex and its links; later vertices are renumbered."""
        index = self._index(vertex_id)
        del self._vertices[index]
        for new_id, vertex in enumerate(self._vertices[index:], start=index + 1):
            vertex.id = new_id
        del self._matrix[index]
        for row in self._matrix:
            del row[index]
        self._link_count = self._count_links()

    def add_link(self, link: Link) -> None:
        """Add the arc a -> b unless one already exists."""
        i, j = self._index(link.a), self._index(link.b)
        if self._matrix[i][j] == NO_LINK:
            self._matrix[i][j] = link.weight
            self._link_count += 1

    def remove_link(self, link: Link) -> None:
        """Remove the arc a -> b if it exists."""
        i, j = self._index(link.a), self._index(link.b)
        if self._matrix[i][j] != NO_LINK:
            self._matrix[i][j] = NO_LINK
            self._link_count -= 1

    def set_weight(self, link: Link) -> None:
        """Change the weight of the arc a -> b if it exists."""
        i, j = self._index(link.a), self._index(link.b)
        if self._matrix[i][j] != NO_LINK:
            self._matrix[i][j] = link.weight

    def fs_aps_costs(self) -> tuple[list[int], list[int], list[int]]:
        """Return the FS, APS and cost arrays of the graph."""
        return fs_aps_costs_from_lists(self.to_lists())

    def format_matrix(self) -> str:
        """Render "n m" followed by the matrix rows."""
        lines = [f"{self.vertex_count()} {self._link_count}\n"]
        lines.extend("".join(f"{value} " for value in row) + "\n" for row in self._matrix)
        return "".join(lines)

    def format_vertices(self) -> str:
        return "".join(f"{vertex} " for vertex in self._vertices)

    def write_to_file(self, path: str | Path = DEFAULT_FILE_NAME) -> None:
        """Write the graph in the format read by :meth:`from_file`."""
        with open(path, "w") as stream:
            stream.write(self.format_matrix())
            for vertex in self._vertices:
                vertex.write(stream)
                stream.write("\n")

    def swap_vertices(self, id_a: int, id_b: int) -> None:
        """Swap the data and matrix rows of two vertices; ids stay positional."""
        i, j = self._index(id_a), self._index(id_b)
        first, second = self._vertices[i], self._vertices[j]
        self._vertices[i] = dataclasses.replace(second, id=i + 1)
        self._vertices[j] = dataclasses.replace(first, id=j + 1)
        self._matrix[i], self._matrix[j] = self._matrix[j], self._matrix[i]

    def has_negative_weights(self) -> bool:
        return any(
            weight != NO_LINK and weight < 0 for row in self._matrix for weight in row
        )