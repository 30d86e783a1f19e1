"""Shared fixtures for routegraph tests.

Routes are stand-ins for the game-domain payload: frozen dataclasses exposing
``length`` and an opaque ``color``. Each route gets a unique name so two routes
with equal length and color are still distinct payloads.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count

import pytest

from routegraph import Edge, RouteGraph


@dataclass(frozen=True)
class FakeRoute:
    name: str
    length: int
    color: str = "GRIS"


@pytest.fixture
def make_route():
    """Factory returning a fresh, distinct route of the given length."""
    ids = count()

    def _make(length: int, color: str = "GRIS") -> FakeRoute:
        return FakeRoute(name=f"route-{next(ids)}", length=length, color=color)

    return _make


@pytest.fixture
def base_graph() -> RouteGraph:
    # 0 - 1
    # |   |      8 - 42
    # 3 - 2
    return RouteGraph(
        [Edge(0, 1), Edge(0, 3), Edge(1, 2), Edge(2, 3), Edge(8, 42)]
    )


@pytest.fixture
def chain10() -> RouteGraph:
    graph = RouteGraph.with_order(10)
    for i in range(9):
        graph.add_edge(Edge(i, i + 1))
    return graph


@pytest.fixture
def k4() -> RouteGraph:
    graph = RouteGraph.with_order(4)
    for i in range(4):
        for j in range(i + 1, 4):
            graph.add_edge(Edge(i, j))
    return graph


@pytest.fixture
def route_network(make_route) -> RouteGraph:
    # Route lengths:
    #       [2]     [2]
    #    0 ───── 1 ───── 2
    #    │ ╲            │
    #    │  ╲[7] (0-2)   │ [1]
    #   [1]             │
    #    3 ──────[1]──── 4 ──[6]── 5
    return RouteGraph(
        [
            Edge(0, 1, make_route(2)),
            Edge(1, 2, make_route(2)),
            Edge(0, 3, make_route(1)),
            Edge(3, 4, make_route(1)),
            Edge(4, 2, make_route(1)),
            Edge(4, 5, make_route(6)),
            Edge(0, 2, make_route(7)),
        ]
    )
