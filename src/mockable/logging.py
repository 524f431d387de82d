"""Structured logging helpers.

The library never configures logging on import. Events are routed through
stdlib loggers named after the emitting module, so they stay silent until the
host application (or :func:`configure_logging`) enables them::

    from mockable.logging import configure_logging
    configure_logging("DEBUG")
"""
from __future__ import annotations

import logging
from typing import Any

import structlog

_PROCESSORS: list[Any] = [
    structlog.stdlib.filter_by_level,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.stdlib.render_to_log_kwargs,
]


def get_logger(name: str | None = None, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the stdlib logger *name*.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def configure_logging(level: int | str | None = None, *, logger_name: str = "mockable") -> None:
    """Attach a JSON-rendering handler to the ``mockable`` logger tree.

    *level* defaults to ``MockableSettings.log_level``.
    """
    if level is None:
        from mockable.config import get_settings

        level = get_settings().log_level_number
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.ExtraAdder(),
            structlog.processors.TimeStamper(fmt="iso"),
        ],
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    target = logging.getLogger(logger_name)
    target.handlers.clear()
    target.addHandler(handler)
    target.setLevel(level)


__all__ = ["configure_logging", "get_logger"]
