"""structlog rendering for the ``fuzzydate`` logger.

Library modules log through stdlib ``logging.getLogger(__name__)``. This
attaches one handler, formatted by structlog's ``ProcessorFormatter``, to the
``fuzzydate`` logger only. The root logger, its handlers and the global
structlog configuration belong to the host application and are left alone.

Two output modes:
- Human (default): console-rendered output to stderr
- JSON: structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "fuzzydate"
HANDLER_NAME = "fuzzydate.structlog"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route ``fuzzydate`` records through structlog to stderr.

    Repeated calls replace the handler installed by the previous call.
    Records stop propagating to the root logger so they are not printed
    twice when the host also logs to stderr.

    Args:
        verbose: Enable DEBUG-level output (rejected inputs are logged at
            DEBUG). When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    for existing in logger.handlers[:]:
        if existing.get_name() == HANDLER_NAME:
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
