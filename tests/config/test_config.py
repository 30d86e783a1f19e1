"""Tests for `routegraph.config`."""

from routegraph.config import TRAVERSAL_CONFIG, TraversalConfig


def test_default_config() -> None:
    assert TRAVERSAL_CONFIG.check_symmetry is True
    assert TRAVERSAL_CONFIG.step_limit_factor == 2


def test_step_limit_formula() -> None:
    config = TraversalConfig(step_limit_factor=3)
    assert config.step_limit(0) == 1
    assert config.step_limit(4) == 13


def test_step_limit_never_below_one() -> None:
    assert TraversalConfig(step_limit_factor=-2).step_limit(10) == 1
    assert TraversalConfig().step_limit(-5) == 1


def test_step_limit_covers_every_vertex() -> None:
    config = TraversalConfig()
    for order in range(50):
        assert config.step_limit(order) > order
