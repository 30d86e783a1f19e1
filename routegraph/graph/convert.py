"""Conversion between RouteGraph and plain NetworkX graphs.

``to_multigraph`` keeps every parallel edge; ``to_graph`` consolidates them
into one edge per vertex pair and can keep the originals in a ``_uv_edges``
attribute so the conversion can be reverted with ``from_graph``.
"""

from typing import Callable, List, Optional

import networkx as nx

from routegraph.graph.edge import Edge
from routegraph.graph.route_graph import RouteGraph


def to_multigraph(graph: RouteGraph) -> nx.MultiGraph:
    """Convert to a NetworkX MultiGraph.

    Edge keys are the `Edge` values; each edge carries ``edge``, ``route`` and
    ``length`` attributes (``length`` is None for edges without a route).
    """
    nx_graph = nx.MultiGraph()
    nx_graph.add_nodes_from(graph.vertices())
    for edge in graph.edges():
        nx_graph.add_edge(
            edge.a, edge.b, key=edge, edge=edge, route=edge.route, length=edge.length
        )
    return nx_graph


def from_multigraph(nx_graph: nx.Graph) -> RouteGraph:
    """Build a RouteGraph from any undirected NetworkX graph.

    The optional ``route`` edge attribute becomes the payload. Parallel edges
    without a route, or with equal routes, collapse into one edge.
    """
    graph = RouteGraph()
    for v in nx_graph.nodes:
        graph.add_vertex(v)
    for u, v, data in nx_graph.edges(data=True):
        graph.add_edge(Edge(u, v, data.get("route")))
    return graph


def to_graph(
    graph: RouteGraph,
    edge_func: Optional[Callable[[List[Edge]], dict]] = None,
    revertible: bool = True,
) -> nx.Graph:
    """Convert to a simple NetworkX Graph, one edge per vertex pair.

    Args:
        graph: Graph to convert.
        edge_func: Optional function computing consolidated edge attributes from
            the list of parallel edges between a pair.
        revertible: If True, keep the original edges in ``_uv_edges``.

    Returns:
        A NetworkX Graph. Self-loops are kept as loops.
    """
    grouped = {}
    for edge in graph.edges():
        grouped.setdefault(edge.endpoints, []).append(edge)

    nx_graph = nx.Graph()
    nx_graph.add_nodes_from(graph.vertices())
    for (u, v), parallel in grouped.items():
        attrs = edge_func(parallel) if edge_func else {}
        if revertible:
            attrs["_uv_edges"] = list(parallel)
        nx_graph.add_edge(u, v, **attrs)
    return nx_graph


def from_graph(nx_graph: nx.Graph) -> RouteGraph:
    """Rebuild a RouteGraph from the output of ``to_graph(..., revertible=True)``."""
    graph = RouteGraph()
    for v in nx_graph.nodes:
        graph.add_vertex(v)
    for u, v, data in nx_graph.edges(data=True):
        for edge in data.get("_uv_edges") or [Edge(u, v)]:
            graph.add_edge(edge)
    return graph
