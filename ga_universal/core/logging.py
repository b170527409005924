"""Logging helpers.

Every module logs through ``logger`` or a ``ContextualLogger`` derived from
it, so dispatch lines carry the same dimensions (integration, event, ...).

Usage:
    from ga_universal.core.logging import logger

    send_logger = logger.with_context(event_type="track")
    send_logger.info("Sent payload")
"""

import logging
import sys
from typing import Any, Dict, MutableMapping, Optional, Tuple

from ga_universal.core.config import settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that appends key/value dimensions to every record."""

    def __init__(
        self,
        logger: logging.Logger,
        dimensions: Optional[Dict[str, Any]] = None,
        prefix: str = "",
    ) -> None:
        """Wrap ``logger`` with fixed dimensions and an optional message prefix."""
        super().__init__(logger, dict(dimensions or {}))
        self.dimensions: Dict[str, Any] = dict(dimensions or {})
        self.prefix = prefix

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping]:
        """Prefix the message and render dimensions as ``key=value`` pairs."""
        extra = kwargs.setdefault("extra", {})
        extra.update(self.dimensions)
        if self.dimensions:
            rendered = " ".join(f"{k}={v}" for k, v in self.dimensions.items())
            msg = f"{self.prefix}{msg} [{rendered}]"
        elif self.prefix:
            msg = f"{self.prefix}{msg}"
        return msg, kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a new logger carrying the current and the given dimensions."""
        return ContextualLogger(self.logger, {**self.dimensions, **dimensions}, self.prefix)

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a new logger that prepends ``prefix`` to each message."""
        return ContextualLogger(self.logger, self.dimensions, prefix)


class LoggerConfigurator:
    """Builds process loggers with a single stream handler."""

    _configured = False

    @classmethod
    def configure_root(cls, level: Optional[str] = None) -> None:
        """Attach the stream handler to the package logger once."""
        if cls._configured:
            return
        package_logger = logging.getLogger("ga_universal")
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        package_logger.addHandler(handler)
        package_logger.setLevel((level or settings.LOG_LEVEL).upper())
        package_logger.propagate = False
        cls._configured = True

    @classmethod
    def configure_logger(
        cls, name: str, dimensions: Optional[Dict[str, Any]] = None
    ) -> ContextualLogger:
        """Return a ContextualLogger for ``name`` with the given dimensions."""
        cls.configure_root()
        return ContextualLogger(logging.getLogger(name), dimensions)


logger = LoggerConfigurator.configure_logger("ga_universal")
