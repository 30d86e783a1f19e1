"""Degree sequences and sequence realizability checks.

``same_degree_sequence`` is a necessary condition for isomorphism only. Two
graphs with equal degree sequences may still be non-isomorphic (a 6-cycle
and two disjoint triangles, for instance); callers must not treat a True
result as proof of isomorphism.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence, Set, Tuple

if TYPE_CHECKING:
    from routegraph.graph.route_graph import RouteGraph


def degree_sequence(graph: RouteGraph) -> List[int]:
    """Return all vertex degrees sorted in non-increasing order."""
    return sorted((graph.degree(v) for v in graph), reverse=True)


def same_degree_sequence(g1: RouteGraph, g2: RouteGraph) -> bool:
    """Heuristic isomorphism filter.

    Returns False as soon as the orders or sizes differ, without computing
    any degree sequence; otherwise compares the degree sequences.
    """
    if g1.order() != g2.order() or g1.size() != g2.size():
        return False
    return degree_sequence(g1) == degree_sequence(g2)


def sequence_is_graphical(sequence: Sequence[int]) -> bool:
    """Check that a vertex walk describes a simple graph.

    Each consecutive pair ``(sequence[i], sequence[i + 1])`` is read as an
    edge. The walk is valid when every value is a vertex index in
    ``0..len(sequence) - 1``, no pair is a self-loop and no unordered pair is
    used twice.
    """
    n = len(sequence)
    for value in sequence:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        if not 0 <= value < n:
            return False

    seen: Set[Tuple[int, int]] = set()
    for u, v in zip(sequence, sequence[1:]):
        if u == v:
            return False
        pair = (u, v) if u < v else (v, u)
        if pair in seen:
            return False
        seen.add(pair)
    return True


def is_degree_sequence_graphical(sequence: Sequence[int]) -> bool:
    """Havel-Hakimi test: is ``sequence`` the degree sequence of a simple graph?

    Args:
        sequence: Non-negative vertex degrees in any order.

    Returns:
        True iff some simple graph has exactly these degrees.
    """
    remaining = sorted(sequence, reverse=True)
    if any(d < 0 for d in remaining) or sum(remaining) % 2:
        return False
    while remaining and remaining[0] > 0:
        d = remaining.pop(0)
        if d > len(remaining):
            return False
        for k in range(d):
            remaining[k] -= 1
            if remaining[k] < 0:
                return False
        remaining.sort(reverse=True)
    return True
