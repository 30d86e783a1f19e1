"""routegraph: undirected weighted multigraphs for route networks.

Vertices are integers (cities), edges are `Edge` values optionally carrying a
route payload with a ``length``. `RouteGraph` offers structural predicates,
vertex contraction, degree-sequence checks, path searches and the minimum
blocking edge set.

Example:
    from routegraph import Edge, RouteGraph

    graph = RouteGraph([Edge(0, 1), Edge(1, 2), Edge(2, 3)])
    graph.is_chain()            # True
    graph.shortest_path(0, 3)   # [0, 1, 2, 3]
"""

from __future__ import annotations

from routegraph import logging
from routegraph._version import __version__
from routegraph.graph import Edge, Route, RouteGraph, Vertex  # isort: skip
from routegraph.algorithms.degree import (
    degree_sequence,
    is_degree_sequence_graphical,
    same_degree_sequence,
    sequence_is_graphical,
)
from routegraph.algorithms.min_cut import CutSummary, min_edge_cut
from routegraph.algorithms.paths import PathState
from routegraph.errors import (
    InvariantViolationError,
    RouteGraphError,
    VertexNotFoundError,
)

__all__ = [
    "CutSummary",
    "Edge",
    "InvariantViolationError",
    "PathState",
    "Route",
    "RouteGraph",
    "RouteGraphError",
    "Vertex",
    "VertexNotFoundError",
    "__version__",
    "degree_sequence",
    "is_degree_sequence_graphical",
    "logging",
    "min_edge_cut",
    "same_degree_sequence",
    "sequence_is_graphical",
]
