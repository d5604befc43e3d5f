"""Structlog configuration for the application.

Colored console output when attached to a terminal, JSON lines otherwise.
"""

import os
import sys

import structlog


def configure_logging(debug: bool = False) -> None:
    """Configure structlog processors and the minimum log level.

    FORCE_COLOR=1 enables colors even without a TTY (e.g. inside Docker).

    Args:
        debug: Emit debug-level events when True
    """
    force_color = os.environ.get("FORCE_COLOR", "").lower() in ("1", "true", "yes")
    use_colors = force_color or sys.stdout.isatty()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if use_colors:
        processors: list[structlog.types.Processor] = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    # 10 = DEBUG, 20 = INFO
    min_level = 10 if debug else 20

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
