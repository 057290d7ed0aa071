"""
structlog setup for applications that log through railtrack.observe.

In production: JSON lines to stdout (machine-readable).
In development: colored, human-readable console output.
"""

from __future__ import annotations

import logging

import structlog

from railtrack.config import RailtrackSettings, get_settings


def configure_structlog(log_level: str = "INFO", json: bool = False) -> None:
    """
    Configure structlog processors, renderer and level filter.

    Unknown level names fall back to INFO.
    """
    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_settings(settings: RailtrackSettings | None = None) -> None:
    """Apply log_level and log_json from settings (the cached ones by default)."""
    settings = settings or get_settings()
    configure_structlog(settings.log_level, json=settings.log_json)
