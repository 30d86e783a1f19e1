"""Vertex contraction."""

from __future__ import annotations

from typing import TYPE_CHECKING

from routegraph.graph.edge import Edge, Vertex
from routegraph.logging import get_logger

if TYPE_CHECKING:
    from routegraph.graph.route_graph import RouteGraph

logger = get_logger(__name__)


def merge_vertices(graph: RouteGraph, i: Vertex, j: Vertex) -> None:
    """Contract ``i`` and ``j`` into ``min(i, j)`` in place.

    Every edge between ``i`` and ``j`` is dropped, so no self-loop appears.
    Each remaining edge of the absorbed vertex is re-attached to the survivor
    with its route unchanged; an edge already present on the survivor with the
    same route collapses into it. Self-loops on the absorbed vertex are lost.
    Does nothing if either vertex is absent or ``i == j``.
    """
    if i == j or not graph.contains_vertex(i) or not graph.contains_vertex(j):
        return
    survivor, absorbed = (i, j) if i < j else (j, i)

    for edge in graph.incident_edges(absorbed):
        if edge.is_incident_to(survivor):
            graph.remove_edge(edge)

    moved = 0
    for edge in graph.incident_edges(absorbed):
        if edge.is_loop:
            continue
        graph.add_edge(Edge(survivor, edge.other(absorbed), edge.route))
        moved += 1

    graph.remove_vertex(absorbed)
    logger.debug(
        "Merged vertex %s into %s, re-attached %d edge(s)", absorbed, survivor, moved
    )
