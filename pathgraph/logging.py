# pathgraph/logging.py

"""
structlog output for the pathgraph DEBUG trace.

The graph logs through stdlib loggers under the "pathgraph" namespace and
installs nothing on import. configure_logging() routes that namespace only:
the root logger and any handlers the host application owns are left alone.
"""

from __future__ import annotations
from typing import List
import logging
import sys

import structlog

# marks the handler configure_logging() owns, so repeat calls replace only it
_HANDLER_ATTR = "_pathgraph_handler"


def _owned_handlers(logger: logging.Logger) -> List[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """
    Attach one stderr handler to the "pathgraph" logger:
    - verbose: DEBUG trace of insertions and searches, otherwise WARNING+
    - log_json: JSON lines instead of console-rendered output
    The logger stops propagating, so records are not duplicated by root handlers.
    """
    shared_processors: List[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_ATTR, True)

    pg_logger = logging.getLogger("pathgraph")
    for old in _owned_handlers(pg_logger):
        pg_logger.removeHandler(old)
    pg_logger.addHandler(handler)
    pg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    pg_logger.propagate = False
