"""Undirected edge value type and the route payload protocol.

An ``Edge`` names two endpoint vertices and optionally carries a route
payload supplied by the game domain. Equality ignores endpoint order but
takes the payload into account, which is what makes the graph a true
multigraph: two edges between the same cities with different routes are
distinct, while re-adding an identical edge is a no-op.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol, Tuple

Vertex = int


class Route(Protocol):
    """Capability read from edge payloads.

    Only ``length`` is consumed (weighted and budgeted search). Colors, names
    and any other attribute stay opaque to the graph.
    """

    length: float


@dataclass(frozen=True, eq=False)
class Edge:
    """Immutable undirected edge ``{a, b}`` with an optional route payload.

    Attributes:
        a: First endpoint.
        b: Second endpoint.
        route: Payload shared with the domain model; ``None`` for bare edges.
            Must be hashable.
    """

    a: Vertex
    b: Vertex
    route: Optional[Route] = None

    @property
    def endpoints(self) -> Tuple[Vertex, Vertex]:
        """Endpoints in canonical (ascending) order."""
        return (self.a, self.b) if self.a <= self.b else (self.b, self.a)

    @property
    def is_loop(self) -> bool:
        return self.a == self.b

    @property
    def length(self) -> Optional[float]:
        """Payload length, or ``None`` when the edge carries no route."""
        if self.route is None:
            return None
        return self.route.length

    def is_incident_to(self, v: Vertex) -> bool:
        return self.a == v or self.b == v

    def other(self, v: Vertex) -> Vertex:
        """Return the endpoint opposite to ``v``.

        Args:
            v: One of the endpoints.

        Raises:
            ValueError: If ``v`` is not an endpoint of this edge.
        """
        if v == self.a:
            return self.b
        if v == self.b:
            return self.a
        raise ValueError(f"Vertex '{v}' is not an endpoint of {self!r}.")

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, Edge):
            return NotImplemented
        return self.endpoints == other.endpoints and self.route == other.route

    def __hash__(self) -> int:
        return hash((*self.endpoints, self.route))

    def __repr__(self) -> str:
        if self.route is None:
            return f"Edge({self.a}, {self.b})"
        return f"Edge({self.a}, {self.b}, {self.route!r})"
