"""Tests for ContextualLogger."""

import logging

from ga_universal.core.logging import ContextualLogger, LoggerConfigurator, logger


def test_module_logger_is_contextual():
    assert isinstance(logger, ContextualLogger)
    assert logger.logger.name == "ga_universal"


def test_with_context_accumulates_dimensions():
    base = ContextualLogger(logging.getLogger("ga_universal.test"), {"integration": "ga"})
    child = base.with_context(event_type="track")

    assert child.dimensions == {"integration": "ga", "event_type": "track"}
    assert base.dimensions == {"integration": "ga"}


def test_process_renders_prefix_and_dimensions():
    adapter = ContextualLogger(logging.getLogger("ga_universal.test"), {"hit": "event"})
    adapter = adapter.with_prefix("Dispatch: ")

    msg, kwargs = adapter.process("sent", {})

    assert msg == "Dispatch: sent [hit=event]"
    assert kwargs["extra"] == {"hit": "event"}


def test_process_without_dimensions():
    adapter = ContextualLogger(logging.getLogger("ga_universal.test"))
    assert adapter.process("plain", {})[0] == "plain"


def test_configure_logger_returns_contextual_logger():
    configured = LoggerConfigurator.configure_logger(
        "ga_universal.dispatch", dimensions={"operation": "dispatch"}
    )
    assert isinstance(configured, ContextualLogger)
    assert configured.dimensions == {"operation": "dispatch"}
