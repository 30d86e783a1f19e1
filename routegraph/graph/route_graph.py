"""Undirected weighted multigraph of a route network.

`RouteGraph` stores its incidence structure in a ``networkx.MultiGraph`` whose
edge keys are `Edge` values. Because networkx indexes parallel edges by key,
the multigraph identity rules of `Edge` carry over directly: re-adding an
equal edge is a no-op and parallel edges with distinct routes coexist.

Structural predicates, path searches and the minimum blocking edge set live in
``routegraph.algorithms`` as plain functions; the methods below delegate to
them so callers can use either style.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Set

import networkx as nx

from routegraph.algorithms import contraction, degree, min_cut, paths, structure
from routegraph.algorithms.traversal import connected_component, connected_components
from routegraph.errors import VertexNotFoundError
from routegraph.graph.edge import Edge, Vertex


class RouteGraph:
    """Undirected multigraph with integer vertices and route-carrying edges.

    The graph owns no vertex objects: a vertex exists iff it is a node of the
    underlying incidence structure, with or without incident edges.

    Not safe for concurrent mutation. Read-only queries may run concurrently
    with each other but never alongside a mutation.
    """

    def __init__(self, edges: Optional[Iterable[Edge]] = None) -> None:
        """Build a graph, optionally from a collection of edges.

        Args:
            edges: Edges to insert. Missing endpoints are created.
        """
        self._graph = nx.MultiGraph()
        if edges is not None:
            for edge in edges:
                self.add_edge(edge)

    @classmethod
    def with_order(cls, n: int) -> RouteGraph:
        """Return a graph with vertices ``0..n-1`` and no edges."""
        graph = cls()
        for v in range(n):
            graph.add_vertex(v)
        return graph

    @classmethod
    def induced(cls, source: RouteGraph, vertices: Iterable[Vertex]) -> RouteGraph:
        """Return the subgraph of ``source`` induced by ``vertices``.

        Keeps every given vertex and each edge whose both endpoints are given.
        ``source`` is left untouched and shares no mutable state with the result.

        Args:
            source: Graph to extract from.
            vertices: Vertex subset; every element must exist in ``source``.

        Raises:
            VertexNotFoundError: If a vertex of the subset is not in ``source``.
        """
        subset = set(vertices)
        graph = cls()
        for v in subset:
            if not source.contains_vertex(v):
                raise VertexNotFoundError(v)
            graph.add_vertex(v)
        for v in subset:
            for edge in source.incident_edges(v):
                if edge.a in subset and edge.b in subset:
                    graph.add_edge(edge)
        return graph

    def copy(self) -> RouteGraph:
        """Return an independent copy; route payloads are shared, not cloned."""
        graph = type(self)()
        graph._graph = self._graph.copy()
        return graph

    #
    # Basic queries
    #
    def order(self) -> int:
        """Number of vertices."""
        return self._graph.number_of_nodes()

    def size(self) -> int:
        """Number of edges, parallel edges and self-loops each counted once."""
        return self._graph.number_of_edges()

    def vertices(self) -> Set[Vertex]:
        return set(self._graph.nodes)

    def edges(self) -> Set[Edge]:
        return {key for _, _, key in self._graph.edges(keys=True)}

    def incident_edges(self, v: Vertex) -> Set[Edge]:
        """Return a snapshot of the edges touching ``v``.

        Raises:
            VertexNotFoundError: If ``v`` is not in the graph.
        """
        if v not in self._graph:
            raise VertexNotFoundError(v)
        return {key for keys in self._graph.adj[v].values() for key in keys}

    def contains_vertex(self, v: Vertex) -> bool:
        return v in self._graph

    def contains_edge(self, edge: Edge) -> bool:
        return self._graph.has_edge(edge.a, edge.b, key=edge)

    def degree(self, v: Vertex) -> int:
        """Return the number of edge ends at ``v``; a self-loop counts twice.

        Raises:
            VertexNotFoundError: If ``v`` is not in the graph.
        """
        if v not in self._graph:
            raise VertexNotFoundError(v)
        return self._graph.degree[v]

    def neighbors(self, v: Vertex) -> Set[Vertex]:
        """Return the distinct opposite endpoints of edges at ``v``.

        Unlike ``degree``, an absent vertex yields an empty set.
        """
        if v not in self._graph:
            return set()
        return set(self._graph.adj[v])

    def max_degree(self) -> Optional[int]:
        """Return the largest vertex degree, or ``None`` for an edgeless graph."""
        if self.size() == 0:
            return None
        return max(d for _, d in self._graph.degree)

    def is_simple(self) -> bool:
        """True iff the graph has neither self-loops nor parallel edges."""
        for u, nbrs in self._graph.adj.items():
            for v, keys in nbrs.items():
                if u == v or len(keys) > 1:
                    return False
        return True

    def is_complete(self) -> bool:
        """True iff every pair of distinct vertices is joined by an edge."""
        adj = self._graph.adj
        for u in adj:
            for v in adj:
                if u != v and v not in adj[u]:
                    return False
        return True

    def are_adjacent(self, i: Vertex, j: Vertex) -> bool:
        return j in self.neighbors(i)

    #
    # Mutation
    #
    def add_vertex(self, v: Vertex) -> None:
        """Add ``v``; does nothing if it already exists."""
        if v not in self._graph:
            self._graph.add_node(v)

    def add_edge(self, edge: Edge) -> None:
        """Add ``edge``, creating missing endpoints.

        Adding an edge equal to a stored one leaves the graph unchanged.
        """
        if not self.contains_edge(edge):
            self._graph.add_edge(edge.a, edge.b, key=edge)

    def remove_edge(self, edge: Edge) -> None:
        """Remove ``edge`` from both endpoints; does nothing if it is absent."""
        if self.contains_edge(edge):
            self._graph.remove_edge(edge.a, edge.b, key=edge)

    def remove_vertex(self, v: Vertex) -> None:
        """Remove ``v`` together with every incident edge.

        Raises:
            VertexNotFoundError: If ``v`` is not in the graph.
        """
        for edge in self.incident_edges(v):
            self.remove_edge(edge)
        self._graph.remove_node(v)

    def merge_vertices(self, i: Vertex, j: Vertex) -> None:
        contraction.merge_vertices(self, i, j)

    #
    # Connectivity and structure
    #
    def connected_component(self, v: Vertex) -> Set[Vertex]:
        return connected_component(self, v)

    def connected_components(self) -> Set[frozenset]:
        return connected_components(self)

    def is_tree(self) -> bool:
        return structure.is_tree(self)

    def is_forest(self) -> bool:
        return structure.is_forest(self)

    def is_chain(self) -> bool:
        return structure.is_chain(self)

    def is_cycle(self) -> bool:
        return structure.is_cycle(self)

    def is_isthmus(self, edge: Edge) -> bool:
        return structure.is_isthmus(self, edge)

    def degree_sequence(self) -> List[int]:
        return degree.degree_sequence(self)

    #
    # Paths and cuts
    #
    def shortest_path(
        self, start: Vertex, end: Vertex, weighted: bool = False
    ) -> List[Vertex]:
        """Return a shortest ``start``..``end`` vertex path, or ``[]``.

        Args:
            start: First vertex of the path.
            end: Last vertex of the path.
            weighted: If True, minimize the summed route lengths (edges without
                a route are ignored); otherwise minimize the hop count.
        """
        if weighted:
            return paths.dijkstra_path(self, start, end)
        return paths.bfs_path(self, start, end)

    def budgeted_path(
        self, start: Vertex, end: Vertex, wagon_budget: float, boat_budget: float
    ) -> List[Vertex]:
        return paths.budgeted_path(self, start, end, wagon_budget, boat_budget)

    def waypoint_path(self, waypoints: List[Vertex]) -> List[Vertex]:
        return paths.waypoint_path(self, waypoints)

    def minimal_blocking_edge_set(self, v1: Vertex, v2: Vertex) -> Set[Edge]:
        return min_cut.minimal_blocking_edge_set(self, v1, v2)

    #
    # Dunder helpers
    #
    def __len__(self) -> int:
        return self.order()

    def __contains__(self, v: object) -> bool:
        return v in self._graph

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._graph.nodes)

    def __str__(self) -> str:
        lines = []
        for v in self._graph.nodes:
            incident = sorted(self.incident_edges(v), key=repr)
            lines.append(f"vertex {v} : {incident}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"RouteGraph(order={self.order()}, size={self.size()})"
