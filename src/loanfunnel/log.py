"""Logging configuration using structlog."""

import logging
import sys
from typing import Optional

import structlog

from loanfunnel.config import FunnelConfig, get_config


def configure_logging(config: Optional[FunnelConfig] = None) -> None:
    """Configure structlog and the stdlib root logger."""
    config = config or get_config()
    log_level = getattr(logging, config.log_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            # Pretty output for local runs, JSON for CI logs
            structlog.dev.ConsoleRenderer()
            if config.debug
            else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Playwright and urllib3 log through the stdlib
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
