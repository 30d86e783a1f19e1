"""Path searches without vertex repetition.

Four variants share the same result convention: a list of vertices from the
start to the end (both included), ``[start]`` when they coincide, and ``[]``
when no path exists. A missing start or end vertex raises
``VertexNotFoundError``.

- ``bfs_path``: fewest edges.
- ``dijkstra_path``: smallest total route length; edges without a route are
  not relaxable.
- ``budgeted_path``: fewest edges using only routes no longer than both
  budgets. Budgets are per-edge thresholds and are not consumed along the
  path.
- ``waypoint_path``: fewest-edges path meeting given vertices in order.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from heapq import heappop, heappush
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

from routegraph.algorithms.traversal import bfs_tree
from routegraph.errors import VertexNotFoundError
from routegraph.graph.edge import Edge, Vertex
from routegraph.logging import get_logger

if TYPE_CHECKING:
    from routegraph.graph.route_graph import RouteGraph

logger = get_logger(__name__)


@dataclass
class PathState:
    """Best known distance from the source and the predecessor achieving it.

    One instance exists per vertex for the duration of a single
    ``dijkstra_path`` call.
    """

    predecessor: Optional[Vertex] = None
    distance: float = math.inf


def _check_endpoints(graph: RouteGraph, start: Vertex, end: Vertex) -> None:
    for v in (start, end):
        if not graph.contains_vertex(v):
            raise VertexNotFoundError(v)


def _walk_back(
    pred: Dict[Vertex, Optional[Vertex]], start: Vertex, end: Vertex
) -> List[Vertex]:
    """Rebuild ``start``..``end`` from a predecessor map; ``[]`` if ``end`` is unreached."""
    if end not in pred:
        return []
    path = [end]
    node = end
    while node != start:
        node = pred[node]
        if node is None:
            return []
        path.append(node)
    path.reverse()
    return path


def bfs_path(graph: RouteGraph, start: Vertex, end: Vertex) -> List[Vertex]:
    """Return a path from ``start`` to ``end`` with the fewest edges."""
    _check_endpoints(graph, start, end)
    if start == end:
        return [start]
    pred = bfs_tree(graph, start, dst=end)
    return _walk_back(pred, start, end)


def dijkstra_path(graph: RouteGraph, start: Vertex, end: Vertex) -> List[Vertex]:
    """Return a path from ``start`` to ``end`` minimizing the summed route lengths.

    Among parallel edges only the shortest route matters. Edges carrying no
    route are skipped.
    """
    _check_endpoints(graph, start, end)
    if start == end:
        return [start]

    states: Dict[Vertex, PathState] = {v: PathState() for v in graph}
    states[start].distance = 0.0
    min_pq: List[Tuple[float, Vertex]] = [(0.0, start)]
    settled = set()

    while min_pq:
        current_distance, node = heappop(min_pq)
        if node in settled or current_distance > states[node].distance:
            continue
        settled.add(node)
        if node == end:
            break

        best_edge: Dict[Vertex, float] = {}
        for edge in graph.incident_edges(node):
            if edge.route is None:
                continue
            neighbor = edge.other(node)
            if neighbor not in best_edge or edge.length < best_edge[neighbor]:
                best_edge[neighbor] = edge.length

        for neighbor, length in best_edge.items():
            new_distance = current_distance + length
            state = states[neighbor]
            if new_distance < state.distance:
                state.distance = new_distance
                state.predecessor = node
                heappush(min_pq, (new_distance, neighbor))

    if math.isinf(states[end].distance):
        return []

    logger.debug(
        "Weighted path %s -> %s has length %s", start, end, states[end].distance
    )
    pred = {v: s.predecessor for v, s in states.items() if not math.isinf(s.distance)}
    return _walk_back(pred, start, end)


def budgeted_path(
    graph: RouteGraph,
    start: Vertex,
    end: Vertex,
    wagon_budget: float,
    boat_budget: float,
) -> List[Vertex]:
    """Return a fewest-edges path using only routes within both budgets.

    An edge is usable when it carries a route whose length is at most
    ``wagon_budget`` and at most ``boat_budget``. Each edge is compared with the
    full budgets; lengths are not deducted as the path grows.
    """
    _check_endpoints(graph, start, end)
    if start == end:
        return [start]

    def affordable(edge: Edge) -> bool:
        return (
            edge.route is not None
            and edge.length <= wagon_budget
            and edge.length <= boat_budget
        )

    pred = bfs_tree(graph, start, edge_filter=affordable, dst=end)
    path = _walk_back(pred, start, end)
    if not path:
        logger.debug(
            "No path %s -> %s within budgets wagons=%s boats=%s",
            start,
            end,
            wagon_budget,
            boat_budget,
        )
    return path


def waypoint_path(graph: RouteGraph, waypoints: Sequence[Vertex]) -> List[Vertex]:
    """Return a fewest-edges path meeting ``waypoints`` in the given order.

    The waypoints are accepted only if some shortest (fewest edges) path from
    ``waypoints[0]`` to ``waypoints[-1]`` meets them in the given order. That
    holds exactly when the shortest legs between consecutive waypoints add up
    to the overall shortest distance; the concatenated legs are then such a
    path and cannot repeat a vertex.

    Returns:
        The vertex path, or ``[]`` if ``waypoints`` is empty, repeats a vertex,
        or does not lie in order on any shortest path.

    Raises:
        VertexNotFoundError: If a waypoint is not in the graph.
    """
    if not waypoints:
        return []
    for v in waypoints:
        if not graph.contains_vertex(v):
            raise VertexNotFoundError(v)
    if len(set(waypoints)) != len(waypoints):
        return []

    first, last = waypoints[0], waypoints[-1]
    path = [first]
    for src, dst in zip(waypoints, waypoints[1:]):
        leg = bfs_path(graph, src, dst)
        if not leg:
            logger.debug("Waypoint leg %s -> %s is unreachable", src, dst)
            return []
        path.extend(leg[1:])

    shortest = bfs_path(graph, first, last)
    if len(path) != len(shortest):
        logger.debug(
            "Waypoints %s are not on a shortest path %s -> %s (%d edges vs %d)",
            list(waypoints),
            first,
            last,
            len(path) - 1,
            len(shortest) - 1,
        )
        return []
    return path
