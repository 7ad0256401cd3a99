# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Structured logging setup for Flux.

Library code only calls ``structlog.get_logger(__name__)``; applications
call :func:`configure_logging` once at startup.
"""

import logging

import structlog

from .config import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog and the stdlib root level from settings."""
    settings = settings or get_settings()

    if settings.log_format == "text":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    logging.basicConfig(format="%(message)s", level=settings.log_level)
    logging.getLogger().setLevel(settings.log_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
