"""Configuration classes for routegraph traversals."""

from dataclasses import dataclass


@dataclass
class TraversalConfig:
    """Safety limits applied by every breadth-first traversal."""

    # Raise if a neighbor reached through an edge is not itself a vertex
    check_symmetry: bool = True

    # A traversal pops at most step_limit_factor * order + 1 vertices
    step_limit_factor: int = 2

    def step_limit(self, order: int) -> int:
        """Return the maximum number of queue pops for a graph of ``order`` vertices."""
        return max(0, self.step_limit_factor) * max(0, order) + 1


# Global configuration instance
TRAVERSAL_CONFIG = TraversalConfig()
