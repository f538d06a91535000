# adjgraph

Weighted graphs stored as an adjacency matrix, with conversions to and from
the FS/APS (successor array / start-address array) representation and an
adjacency-list form.

Vertices are numbered from 1. A missing link is marked in the matrix by the
`NO_LINK` sentinel (`2**31 - 1`) defined in `adjgraph.graph`. Each `Vertex`
carries two integers, `jug_5l` and `jug_3l`, the contents of a 5-litre and a
3-litre jug.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from adjgraph.graph import Vertex, Link
from adjgraph.directed import DirectedGraph

# FS/APS for 3 vertices: 1 -> 2, 1 -> 3, 2 -> 3, vertex 3 has no successors.
fs = [6, 2, 3, 0, 3, 0, 0]
aps = [3, 1, 4, 6]
vertices = [Vertex(jug_5l=0, jug_3l=0) for _ in range(3)]

g = DirectedGraph.from_fs_aps(fs, aps, vertices, None)   # every cost is 1
print(g.link_count())          # 3
print(g.out_degree(1))         # 2
print(g.in_degree(3))          # 2

g.add_link(Link(3, 1, 7))
print(g.weight_of(Link(3, 1)))   # 7

fs, aps, costs = g.fs_aps_costs()
print(g.format_matrix())
```

## What is in the package

`adjgraph.graph`

- `Vertex`, `Link`, and the adjacency-list types `VertexEntry` (a vertex id
  and its outgoing `Arc`s) and `Arc` (a weight and a target id).
- `Graph(matrix, vertices)` takes a square matrix and one vertex per row;
  vertex ids are reassigned from 1 in order.
- `Graph.from_fs_aps`, `Graph.from_file` and `Graph.from_lists` build a graph
  from FS/APS arrays (with optional costs), a text file, or the
  adjacency-list form. `Graph.fs_aps_costs` and `Graph.to_lists` convert back.
- `aps_from_fs`, `lists_from_fs_aps_costs`, `fs_aps_costs_from_lists` and
  `format_lists` work on the representations directly.
- `add_vertex`, `remove_vertex`, `swap_vertices`, `set_vertex` edit vertices;
  `add_link`, `remove_link`, `set_weight` edit links; `weight_of`,
  `has_negative_weights`, `vertex`, `vertices`, `adjacency_matrix`,
  `vertex_count` and `link_count` query the graph. Ids out of range raise
  `IndexError`; malformed FS arrays or files raise `ValueError`.
- `format_matrix` and `format_vertices` return text renderings.
- `write_to_file(path="Graphe.txt")` saves the graph in the format that
  `from_file` reads: the vertex and link counts, the matrix rows, then one
  line per vertex with its two jug values.

`adjgraph.directed.DirectedGraph` tracks out- and in-degrees (`out_degree`,
`in_degree`) and can move an arc onto the opposite direction with
`reverse_link`, which leaves the link count and degrees unchanged.

`adjgraph.undirected.UndirectedGraph` keeps added links symmetric and tracks
`degree`. Degrees computed at construction count every matrix entry at both
of its ends.

## What it does not do

The package is a library only: it has no command-line tool, and it provides
no graph algorithms (paths, traversals, searches) beyond the representations
and the editing operations listed above.