"""Typed errors raised by routegraph.

Lookups of vertices that must exist raise ``VertexNotFoundError``; it also
derives from ``KeyError`` so callers that treat the graph as a mapping keep
working. Path searches never raise for an unreachable target and return an
empty list instead.
"""

from __future__ import annotations

from typing import Hashable


class RouteGraphError(Exception):
    """Base class for all routegraph errors."""


class VertexNotFoundError(RouteGraphError, KeyError):
    """A vertex required by the operation is not in the graph.

    Attributes:
        vertex: The missing vertex identifier.
    """

    def __init__(self, vertex: Hashable) -> None:
        super().__init__(f"Vertex '{vertex}' does not exist.")
        self.vertex = vertex

    def __str__(self) -> str:
        # KeyError would quote the message.
        return str(self.args[0])


class InvariantViolationError(RouteGraphError):
    """The incidence structure is inconsistent (e.g. a one-sided edge)."""
