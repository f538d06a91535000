import pytest

from adjgraph.graph import NO_LINK, Link, Vertex
from adjgraph.undirected import UndirectedGraph

X = NO_LINK


def make_graph():
    matrix = [
        [X, 2, 3, X],
        [2, X, X, X],
        [3, X, X, 6],
        [X, X, 6, X],
    ]
    vertices = [Vertex() for _ in range(4)]
    return UndirectedGraph(matrix, vertices)


def neighbours(graph, vertex_id):
    return sum(w != NO_LINK for w in graph.adjacency_matrix()[vertex_id - 1])


def test_constructor_counts_each_end_of_stored_entries():
    graph = make_graph()
    for v in range(1, 5):
        assert graph.degree(v) == 2 * neighbours(graph, v)


def test_add_link_is_symmetric():
    graph = make_graph()
    count = graph.link_count()
    before = [graph.degree(v) for v in range(1, 5)]
    graph.add_link(Link(2, 4, 9))
    assert graph.weight_of(Link(2, 4)) == 9
    assert graph.weight_of(Link(4, 2)) == 9
    assert graph.link_count() == count + 1
    assert graph.degree(2) == before[1] + 1
    assert graph.degree(4) == before[3] + 1
    assert graph.degree(1) == before[0]


def test_add_existing_link_is_ignored():
    graph = make_graph()
    count = graph.link_count()
    graph.add_link(Link(1, 2, 50))
    assert graph.weight_of(Link(1, 2)) == 2
    assert graph.link_count() == count
    assert graph.adjacency_matrix() == make_graph().adjacency_matrix()


def test_remove_link_clears_both_directions():
    graph = make_graph()
    count = graph.link_count()
    d3 = graph.degree(3)
    graph.remove_link(Link(4, 3))
    assert graph.weight_of(Link(3, 4)) == NO_LINK
    assert graph.weight_of(Link(4, 3)) == NO_LINK
    assert graph.link_count() == count - 1
    assert graph.degree(3) == d3 - 1


def test_remove_missing_link_is_ignored():
    graph = make_graph()
    count = graph.link_count()
    graph.remove_link(Link(1, 4))
    assert graph.link_count() == count
    assert graph.degree(1) == make_graph().degree(1)


def test_add_after_remove_restores_degrees():
    graph = make_graph()
    before = [graph.degree(v) for v in range(1, 5)]
    graph.add_link(Link(2, 3, 1))
    graph.remove_link(Link(3, 2))
    assert [graph.degree(v) for v in range(1, 5)] == before


def test_set_weight_is_symmetric_and_needs_existing_link():
    graph = make_graph()
    graph.set_weight(Link(3, 1, -4))
    graph.set_weight(Link(1, 4, 8))
    assert graph.weight_of(Link(1, 3)) == -4
    assert graph.weight_of(Link(3, 1)) == -4
    assert graph.weight_of(Link(1, 4)) == NO_LINK
    assert graph.has_negative_weights()


def test_unknown_vertex_raises():
    graph = make_graph()
    with pytest.raises(IndexError):
        graph.degree(5)
    with pytest.raises(IndexError):
        graph.remove_link(Link(0, 1))


def test_add_vertex_starts_isolated():
    graph = make_graph()
    graph.add_vertex(Vertex(0, 5, 3))
    assert graph.vertex_count() == 5
    assert graph.degree(5) == 0
    graph.add_link(Link(5, 1, 2))
    assert graph.degree(5) == 1


def test_remove_vertex_recomputes_degrees():
    graph = make_graph()
    graph.remove_vertex(1)
    assert graph.vertex_count() == 3
    for v in range(1, 4):
        assert graph.degree(v) == 2 * neighbours(graph, v)


def test_from_lists_round_trip():
    graph = make_graph()
    rebuilt = UndirectedGraph.from_lists(graph.to_lists(), graph.vertices())
    assert isinstance(rebuilt, UndirectedGraph)
    assert rebuilt.adjacency_matrix() == graph.adjacency_matrix()
    assert [rebuilt.degree(v) for v in range(1, 5)] == [
        graph.degree(v) for v in range(1, 5)
    ]