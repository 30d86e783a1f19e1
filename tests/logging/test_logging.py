"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from routegraph import Edge, RouteGraph
from routegraph.logging import (
    debug_trace,
    get_logger,
    reset_logging,
    set_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


def test_debug_trace_is_scoped():
    """INFO by default, DEBUG inside debug_trace, INFO again afterwards."""
    logger = get_logger("routegraph.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    try:
        logger.info("info-1")
        assert "info-1" in capture.getvalue()

        logger.debug("debug-1")
        assert "debug-1" not in capture.getvalue()

        with debug_trace() as package_logger:
            assert package_logger.name == "routegraph"
            logger.debug("debug-2")
        assert "debug-2" in capture.getvalue()

        logger.debug("debug-3")
        assert "debug-3" not in capture.getvalue()
    finally:
        logger.removeHandler(handler)


def test_global_level_propagates_to_children():
    logger1 = get_logger("routegraph.module1")
    logger2 = get_logger("routegraph.module2")
    assert logger1.getEffectiveLevel() == logging.INFO

    set_level(logging.WARNING)
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING
    assert get_logger("routegraph.module3").getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_idempotent():
    capture = StringIO()
    setup_root_logger(handler=logging.StreamHandler(capture))
    setup_root_logger(handler=logging.StreamHandler(StringIO()))

    root_logger = logging.getLogger("routegraph")
    assert len(root_logger.handlers) == 1

    get_logger("routegraph.idem").info("once")
    assert capture.getvalue().count("once") == 1


def test_custom_format_string():
    capture = StringIO()
    setup_root_logger(
        format_string="%(levelname)s|%(message)s",
        handler=logging.StreamHandler(capture),
    )
    get_logger("routegraph.fmt").warning("hello")
    assert capture.getvalue().strip() == "WARNING|hello"


def test_algorithms_are_silent_at_info(base_graph):
    capture = StringIO()
    setup_root_logger(handler=logging.StreamHandler(capture))
    base_graph.merge_vertices(0, 1)
    base_graph.minimal_blocking_edge_set(0, 2)
    assert capture.getvalue() == ""


def test_algorithms_trace_at_debug(caplog):
    graph = RouteGraph([Edge(0, 1), Edge(1, 2)])
    with debug_trace(), caplog.at_level(logging.DEBUG, logger="routegraph"):
        graph.merge_vertices(1, 2)
        graph.minimal_blocking_edge_set(0, 1)
    messages = [r.getMessage() for r in caplog.records]
    assert any("Merged vertex 2 into 1" in m for m in messages)
    assert any(m.startswith("Min cut 0 | 1") for m in messages)


def test_debug_trace_restores_custom_level():
    set_level(logging.WARNING)
    with debug_trace():
        assert get_logger("routegraph.scoped").isEnabledFor(logging.DEBUG)
    assert logging.getLogger("routegraph").level == logging.WARNING


def test_debug_trace_restores_level_on_error():
    with pytest.raises(RuntimeError):
        with debug_trace():
            raise RuntimeError("boom")
    assert logging.getLogger("routegraph").level == logging.INFO
