"""Structural classification: trees, forests, chains, cycles and bridges.

Conventions for degenerate graphs:
    - The empty graph is a chain, a cycle and a forest, but not a tree.
    - A single vertex is a tree and a forest, but not a chain (degree 0).
    - Parallel edges and self-loops disqualify chains, cycles and trees of
      two or more vertices. A single vertex is a tree even if it carries a
      self-loop, so a loop on an isolated vertex does not break a forest.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Optional, Set

from routegraph.algorithms.traversal import connected_components, is_connected
from routegraph.config import TRAVERSAL_CONFIG
from routegraph.errors import InvariantViolationError
from routegraph.graph.edge import Edge, Vertex

if TYPE_CHECKING:
    from routegraph.graph.route_graph import RouteGraph


def is_tree(graph: RouteGraph) -> bool:
    """True iff the graph is connected and acyclic.

    Runs a traversal that keeps "to visit" and "visited" apart: meeting a
    neighbor that is already waiting in the queue closes a cycle. A neighbor
    set cannot reveal parallel edges or self-loops, so the edge count must
    also be exactly ``order - 1``.

    Any one-vertex graph is a tree, self-loops included.
    """
    order = graph.order()
    if order == 0:
        return False
    if order == 1:
        return True
    if graph.size() != order - 1:
        return False

    start = next(iter(graph))
    to_visit = deque([start])
    queued: Set[Vertex] = {start}
    visited: Set[Vertex] = set()
    step_limit = TRAVERSAL_CONFIG.step_limit(order)
    while to_visit:
        if len(visited) >= step_limit:
            raise InvariantViolationError(
                f"Tree check from '{start}' exceeded {step_limit} steps."
            )
        node = to_visit.popleft()
        queued.discard(node)
        visited.add(node)
        for neighbor in graph.neighbors(node):
            if neighbor in visited:
                continue
            if neighbor in queued:
                return False
            queued.add(neighbor)
            to_visit.append(neighbor)
    return (visited | queued) == graph.vertices()


def is_forest(graph: RouteGraph) -> bool:
    """True iff every connected component is a tree."""
    if graph.order() <= 1 or graph.size() == 0:
        return True
    for component in connected_components(graph):
        if not is_tree(type(graph).induced(graph, component)):
            return False
    return True


def is_chain(graph: RouteGraph) -> bool:
    """True iff the graph is a simple path.

    Requires exactly two vertices of degree 1, all others of degree 2, and a
    walk from one end that never steps back onto a visited vertex other than
    the one it just left. The walk rules out a path plus a disjoint cycle,
    which has the same degree profile.
    """
    if graph.order() == 0:
        return True
    if not graph.is_simple():
        return False

    ends = []
    for v in graph:
        d = graph.degree(v)
        if d == 1:
            ends.append(v)
            if len(ends) > 2:
                return False
        elif d != 2:
            return False
    if len(ends) != 2:
        return False

    previous: Optional[Vertex] = None
    current = ends[0]
    visited = {current}
    while True:
        step = None
        for neighbor in graph.neighbors(current):
            if neighbor == previous:
                continue
            if neighbor in visited:
                return False
            step = neighbor
        if step is None:
            break
        previous, current = current, step
        visited.add(current)
    return current == ends[1] and len(visited) == graph.order()


def is_cycle(graph: RouteGraph) -> bool:
    """True iff the graph is a single simple cycle.

    Two vertices joined by two parallel edges have the right degrees but are
    rejected, as is any graph with a self-loop.
    """
    if graph.order() == 0:
        return True
    if not graph.is_simple():
        return False
    if any(graph.degree(v) != 2 for v in graph):
        return False
    return is_connected(graph)


def is_isthmus(graph: RouteGraph, edge: Edge) -> bool:
    """True iff removing ``edge`` increases the number of connected components.

    The check runs on a throwaway copy; ``graph`` is not modified. An edge that
    is not in the graph is never a bridge.
    """
    if not graph.contains_edge(edge):
        return False
    before = len(connected_components(graph))
    trial = graph.copy()
    trial.remove_edge(edge)
    return len(connected_components(trial)) > before
