import logging
import sys
from typing import Any

import structlog


def configure_logging(*, json: bool = False, level: int = logging.INFO) -> None:
    """
    Configure structlog for the process. Logs go to stderr so that quote
    output on stdout stays machine-readable.
    """
    renderer: Any = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(component: str) -> Any:
    return structlog.get_logger().bind(component=component)
