# structured logging setup shared by the cli commands
# logs go to stderr so stdout carries nothing but the result line

from __future__ import annotations
import logging
import os
import sys
from typing import Any, List
import structlog

from .config import LogSettings

_CI_VARS = ("CI", "CONTINUOUS_INTEGRATION", "GITHUB_ACTIONS", "JENKINS_URL")


def _should_use_json(stream) -> bool:
    if any(os.environ.get(var) for var in _CI_VARS):
        return True
    isatty = getattr(stream, "isatty", None)
    return not (isatty and isatty())


def setup_logging(settings: LogSettings) -> None:
    stream = sys.stderr
    use_json = settings.format == "json" or (settings.format == "auto" and _should_use_json(stream))

    processors: List[Any] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, settings.level)),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        # the cli may be invoked repeatedly in one process (tests), so never pin a stream
        cache_logger_on_first_use=False,
    )
