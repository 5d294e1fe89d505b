"""Opt-in logging helpers for library code.

Library modules never print. They ask ``resolve_logger`` for a logger and get
a no-op stand-in unless the caller passed a logger or enabled logging.
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER_NAME = "buftree"


class NoopLogger:
    """Logger-shaped object that discards every call."""

    def debug(self, *args, **kwargs) -> None:
        pass

    info = warning = error = exception = critical = debug


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.DEBUG,
) -> logging.Logger | NoopLogger:
    """Return ``logger`` when given, a named logger when enabled, else a no-op."""
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or PACKAGE_LOGGER_NAME)
        lg.setLevel(level)
        # Bubble to the root handlers so pytest's caplog and basicConfig see it.
        lg.propagate = True
        return lg
    return NoopLogger()


def configure_cli_logging(debug: bool) -> None:
    """Install a stderr handler for command-line runs."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


__all__ = ["NoopLogger", "PACKAGE_LOGGER_NAME", "configure_cli_logging", "resolve_logger"]
