"""Logging setup for the mdpage CLI.

Pipeline modules log structured events (document_loaded, page_written, ...)
through structlog; this module routes them through the stdlib root handler so
page HTML on stdout never mixes with log output.
"""

import logging
import sys
from typing import TextIO

import structlog


PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _renderer(log_json: bool, stream: TextIO) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False, stream: TextIO = None) -> None:
    """Send mdpage events to stream (stderr by default).

    verbose lowers the mdpage threshold from WARNING to DEBUG; log_json swaps
    the console renderer for one JSON object per line.
    """
    stream = stream or sys.stderr

    structlog.configure(
        processors=[*PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(log_json, stream),
        ],
    ))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("mdpage").setLevel(logging.DEBUG if verbose else logging.WARNING)
