"""Breadth-first traversal and connected components.

Every structural predicate is built on ``bfs_tree``. The traversal is guarded
by ``TRAVERSAL_CONFIG``: reaching a neighbor that is not a vertex, or popping
more vertices than the graph can hold, means the incidence structure is
corrupt and raises ``InvariantViolationError`` instead of looping forever.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Callable, Dict, Optional, Set

from routegraph.config import TRAVERSAL_CONFIG, TraversalConfig
from routegraph.errors import InvariantViolationError, VertexNotFoundError
from routegraph.graph.edge import Edge, Vertex

if TYPE_CHECKING:
    from routegraph.graph.route_graph import RouteGraph

EdgeFilter = Callable[[Edge], bool]


def bfs_tree(
    graph: RouteGraph,
    src: Vertex,
    edge_filter: Optional[EdgeFilter] = None,
    excluded: Optional[Set[Vertex]] = None,
    dst: Optional[Vertex] = None,
    config: TraversalConfig = TRAVERSAL_CONFIG,
) -> Dict[Vertex, Optional[Vertex]]:
    """Breadth-first search recording the discovering predecessor of each vertex.

    Args:
        graph: Graph to traverse.
        src: Start vertex.
        edge_filter: If given, only edges for which it returns True are followed.
        excluded: Vertices that must not be entered.
        dst: Optional target; the search stops as soon as it is discovered.
        config: Traversal safety limits.

    Returns:
        Mapping of every reached vertex to its predecessor (``None`` for ``src``).

    Raises:
        VertexNotFoundError: If ``src`` is not in the graph.
        InvariantViolationError: If the incidence structure is inconsistent.
    """
    if not graph.contains_vertex(src):
        raise VertexNotFoundError(src)
    excluded = excluded or set()

    pred: Dict[Vertex, Optional[Vertex]] = {src: None}
    queue = deque([src])
    step_limit = config.step_limit(graph.order())
    steps = 0
    while queue:
        steps += 1
        if steps > step_limit:
            raise InvariantViolationError(
                f"Traversal from '{src}' exceeded {step_limit} steps."
            )
        node = queue.popleft()
        if edge_filter is None:
            candidates = graph.neighbors(node)
        else:
            candidates = {
                e.other(node) for e in graph.incident_edges(node) if edge_filter(e)
            }
        for neighbor in candidates:
            if neighbor in pred or neighbor in excluded:
                continue
            if config.check_symmetry and not graph.contains_vertex(neighbor):
                raise InvariantViolationError(
                    f"Vertex '{node}' has an edge to unknown vertex '{neighbor}'."
                )
            pred[neighbor] = node
            if neighbor == dst:
                return pred
            queue.append(neighbor)
    return pred


def connected_component(graph: RouteGraph, v: Vertex) -> Set[Vertex]:
    """Return the set of vertices reachable from ``v``, ``v`` included.

    Raises:
        VertexNotFoundError: If ``v`` is not in the graph.
    """
    return set(bfs_tree(graph, v))


def connected_components(graph: RouteGraph) -> Set[frozenset]:
    """Return every connected component as a frozenset of vertices."""
    components: Set[frozenset] = set()
    seen: Set[Vertex] = set()
    for v in graph:
        if v in seen:
            continue
        component = frozenset(bfs_tree(graph, v))
        seen.update(component)
        components.add(component)
    return components


def is_connected(graph: RouteGraph) -> bool:
    """True iff the graph has exactly one component (an empty graph is not)."""
    if graph.order() == 0:
        return False
    start = next(iter(graph))
    return len(bfs_tree(graph, start)) == graph.order()
