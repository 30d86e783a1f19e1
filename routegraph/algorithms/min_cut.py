"""Minimum blocking edge set via unit-capacity max flow.

Every non-loop edge is an undirected arc of capacity 1 in either direction,
whatever its route length. Flow is augmented one unit at a time along
breadth-first paths of the residual graph (Edmonds-Karp). When no augmenting
path remains, the vertices still reachable from the source form one side of a
minimum cut, and the edges leaving that side are a smallest set of edges whose
removal separates source and sink (max-flow/min-cut theorem).
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, FrozenSet, List, Optional, Set, Tuple

from routegraph.errors import VertexNotFoundError
from routegraph.graph.edge import Edge, Vertex
from routegraph.logging import get_logger

if TYPE_CHECKING:
    from routegraph.graph.route_graph import RouteGraph

logger = get_logger(__name__)


@dataclass(frozen=True)
class CutSummary:
    """Result of a minimum edge cut computation.

    Attributes:
        flow: Number of edge-disjoint paths between source and sink.
        reachable: Vertices reachable from the source in the final residual graph.
        cut: Edges with exactly one endpoint in ``reachable``; ``len(cut) == flow``.
    """

    flow: int
    reachable: FrozenSet[Vertex]
    cut: FrozenSet[Edge]


def _residual_bfs(
    src: Vertex,
    dst: Vertex,
    arcs: Dict[Vertex, List[int]],
    edges: List[Edge],
    flow: List[int],
) -> Tuple[Dict[Vertex, Optional[Tuple[Vertex, int]]], bool]:
    """Search the residual graph; return predecessors and whether ``dst`` was reached."""
    pred: Dict[Vertex, Optional[Tuple[Vertex, int]]] = {src: None}
    queue = deque([src])
    while queue:
        node = queue.popleft()
        for idx in arcs.get(node, ()):
            edge = edges[idx]
            # flow[idx] is oriented from edge.a to edge.b
            residual = 1 - flow[idx] if node == edge.a else 1 + flow[idx]
            if residual <= 0:
                continue
            neighbor = edge.other(node)
            if neighbor in pred:
                continue
            pred[neighbor] = (node, idx)
            if neighbor == dst:
                return pred, True
            queue.append(neighbor)
    return pred, False


def min_edge_cut(graph: RouteGraph, src: Vertex, dst: Vertex) -> CutSummary:
    """Compute a minimum-cardinality edge cut between ``src`` and ``dst``.

    Args:
        graph: Graph to analyze; it is not modified.
        src: Source vertex.
        dst: Sink vertex.

    Returns:
        CutSummary with the flow value, the source side and the cut edges.

    Raises:
        VertexNotFoundError: If either vertex is absent.
        ValueError: If ``src == dst``; a vertex cannot be separated from itself.
    """
    for v in (src, dst):
        if not graph.contains_vertex(v):
            raise VertexNotFoundError(v)
    if src == dst:
        raise ValueError(f"Cannot separate vertex '{src}' from itself.")

    edges = [e for e in graph.edges() if not e.is_loop]
    arcs: Dict[Vertex, List[int]] = {}
    for idx, edge in enumerate(edges):
        arcs.setdefault(edge.a, []).append(idx)
        arcs.setdefault(edge.b, []).append(idx)
    flow = [0] * len(edges)

    total = 0
    while True:
        pred, found = _residual_bfs(src, dst, arcs, edges, flow)
        if not found:
            break
        node = dst
        while node != src:
            prev, idx = pred[node]  # type: ignore[misc]
            flow[idx] += 1 if prev == edges[idx].a else -1
            node = prev
        total += 1

    reachable = frozenset(pred)
    cut = frozenset(e for e in edges if (e.a in reachable) != (e.b in reachable))
    logger.debug(
        "Min cut %s | %s: flow=%d, %d edge(s), source side has %d vertices",
        src,
        dst,
        total,
        len(cut),
        len(reachable),
    )
    return CutSummary(flow=total, reachable=reachable, cut=cut)


def minimal_blocking_edge_set(graph: RouteGraph, v1: Vertex, v2: Vertex) -> Set[Edge]:
    """Return a smallest set of edges whose removal disconnects ``v1`` from ``v2``.

    Edge lengths are ignored; only the number of edges counts. When several
    minimum sets exist, the one closest to ``v1`` is returned. An empty set
    means the vertices are already disconnected.
    """
    return set(min_edge_cut(graph, v1, v2).cut)
