"""structlog setup for Site Search and per-search log context."""

import logging
import sys
from contextlib import contextmanager
from typing import Iterator

import structlog

# Third-party loggers that log every request at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def _renderer(json_output: bool) -> structlog.typing.Processor:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def setup_logging(log_level: str = "INFO", json_output: bool = False) -> None:
    """Route structlog events through stdlib logging on stdout.

    Args:
        log_level: Logging level name; unknown names fall back to INFO
        json_output: Render events as JSON lines instead of console text
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(json_output),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@contextmanager
def search_context(query: str, source: str) -> Iterator[None]:
    """Tag every log event of one search with its query and source.

    Args:
        query: Search query being presented
        source: Where the search was started from, e.g. ``api`` or ``cli``
    """
    with structlog.contextvars.bound_contextvars(search_query=query, search_source=source):
        yield
