import networkx as nx

from routegraph import Edge, RouteGraph
from routegraph.graph.convert import from_graph, from_multigraph, to_graph, to_multigraph


def build_sample_graph(make_route) -> RouteGraph:
    graph = RouteGraph.with_order(4)
    graph.add_edge(Edge(0, 1, make_route(2)))
    graph.add_edge(Edge(0, 1, make_route(5)))
    graph.add_edge(Edge(1, 2))
    return graph


def test_to_multigraph_keeps_parallel_edges(make_route):
    graph = build_sample_graph(make_route)
    nxg = to_multigraph(graph)

    assert isinstance(nxg, nx.MultiGraph)
    assert set(nxg.nodes) == {0, 1, 2, 3}
    assert nxg.number_of_edges(0, 1) == 2
    lengths = sorted(d["length"] for _, _, d in nxg.edges(0, data=True))
    assert lengths == [2, 5]
    assert nxg.edges[1, 2, Edge(1, 2)]["route"] is None


def test_multigraph_roundtrip(make_route):
    graph = build_sample_graph(make_route)
    roundtrip = from_multigraph(to_multigraph(graph))
    assert roundtrip.vertices() == graph.vertices()
    assert roundtrip.edges() == graph.edges()


def test_from_plain_networkx_graph():
    graph = from_multigraph(nx.path_graph(4))
    assert graph.order() == 4
    assert graph.size() == 3
    assert graph.is_chain()


def test_to_graph_consolidates_and_reverts(make_route):
    graph = build_sample_graph(make_route)
    nxg = to_graph(graph)

    assert isinstance(nxg, nx.Graph)
    assert nxg.number_of_edges() == 2
    assert len(nxg.edges[0, 1]["_uv_edges"]) == 2

    restored = from_graph(nxg)
    assert restored.edges() == graph.edges()
    assert restored.vertices() == graph.vertices()


def test_edge_func_applied_in_conversion(make_route):
    graph = build_sample_graph(make_route)
    nxg = to_graph(
        graph,
        edge_func=lambda edges: {"count": len(edges)},
        revertible=False,
    )
    assert nxg.edges[0, 1] == {"count": 2}
    assert nxg.edges[1, 2] == {"count": 1}
    # Without _uv_edges each pair comes back as a bare edge
    assert from_graph(nxg).edges() == {Edge(0, 1), Edge(1, 2)}
