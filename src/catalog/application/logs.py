"""Logger factory for the application handlers.

Until the host application configures structlog (the CLI does so via
``configure_logging``), events below WARNING are dropped instead of
going to stdout through structlog's default printer.
"""

from __future__ import annotations

import logging

import structlog


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    if not structlog.is_configured():
        structlog.configure(
            wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        )
    return structlog.get_logger(name)
