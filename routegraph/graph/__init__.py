"""Graph primitives.

This package provides the `Edge` value type, the `Route` payload protocol, the
`RouteGraph` multigraph container and NetworkX conversion helpers
(`convert`).
"""

from routegraph.graph.edge import Edge, Route, Vertex
from routegraph.graph.route_graph import RouteGraph

__all__ = ["Edge", "Route", "RouteGraph", "Vertex"]
