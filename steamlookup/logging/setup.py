"""Structlog configuration for steamlookup.

Log lines go to stderr. stdout belongs to the CLI: profile tables, the
remember prompt and `lookup --json` output, which must stay parseable.
"""

import logging
import sys

import structlog

from steamlookup.config import AppConfig, LogFormat


def configure_logging(config: AppConfig | None = None) -> None:
    """
    Configure structlog for one ProfileLookup session.

    Called on every ProfileLookup entry, so the logger cache stays off and
    a later session (or CLI invocation) picks up its own level, format and
    stderr stream.

    Args:
        config: AppConfig instance, uses defaults if None
    """
    if config is None:
        config = AppConfig()

    log_level = getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if config.log_format == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.extend([
            structlog.dev.set_exc_info,
            # no ANSI codes when stderr is redirected
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Logger for lookup events (fetch_start, fetch_failed, profile_classified...).

    Bind it after configure_logging(); a logger bound earlier keeps the
    previous configuration.

    Args:
        name: Bound as logger_name, e.g. "lookup"
    """
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger_name=name)
    return logger
