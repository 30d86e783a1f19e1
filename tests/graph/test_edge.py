import pytest

from routegraph import Edge


def test_edge_equality_ignores_endpoint_order():
    assert Edge(0, 3) == Edge(3, 0)
    assert hash(Edge(0, 3)) == hash(Edge(3, 0))


def test_edge_equality_includes_route(make_route):
    route = make_route(2)
    assert Edge(0, 3, route) == Edge(3, 0, route)
    assert Edge(0, 3, route) != Edge(0, 3)
    assert Edge(0, 3, route) != Edge(0, 3, make_route(2))


def test_edges_collapse_in_set(make_route):
    route = make_route(4)
    edges = {Edge(1, 2), Edge(2, 1), Edge(1, 2, route), Edge(2, 1, route)}
    assert len(edges) == 2


def test_edge_not_equal_to_other_types():
    assert Edge(0, 1) != (0, 1)


def test_edge_helpers():
    edge = Edge(5, 2)
    assert edge.endpoints == (2, 5)
    assert edge.is_incident_to(5)
    assert edge.is_incident_to(2)
    assert not edge.is_incident_to(3)
    assert edge.other(5) == 2
    assert edge.other(2) == 5
    assert not edge.is_loop
    assert Edge(4, 4).is_loop
    assert Edge(4, 4).other(4) == 4


def test_edge_other_rejects_foreign_vertex():
    with pytest.raises(ValueError):
        Edge(0, 1).other(7)


def test_edge_length(make_route):
    assert Edge(0, 1).length is None
    assert Edge(0, 1, make_route(3)).length == 3


def test_edge_is_immutable():
    edge = Edge(0, 1)
    with pytest.raises(AttributeError):
        edge.a = 4  # type: ignore[misc]


def test_edge_repr(make_route):
    assert repr(Edge(0, 1)) == "Edge(0, 1)"
    assert repr(Edge(0, 1, make_route(2))).startswith("Edge(0, 1, FakeRoute(")
