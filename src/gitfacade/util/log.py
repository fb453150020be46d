# src/gitfacade/util/log.py: Package logger with repository context.
# This module provides the logging setup for the package. A contextvar carries
# the repository path of the command currently running so every record emitted
# while a git subprocess is in flight can be tied back to its repository.
# Output is plain text or structured JSON (python-json-logger).

import contextvars
import logging
import sys
from typing import TYPE_CHECKING

from pythonjsonlogger.json import JsonFormatter

if TYPE_CHECKING:
    from ..config import Config

PACKAGE_LOGGER = "gitfacade"

repo_context = contextvars.ContextVar("repo_context", default=None)


class RepoContextFilter(logging.Filter):
    """Attach the active repository path to each record as ``repo``."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "repo"):
            record.repo = repo_context.get()
        return True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def setup_logging(config: "Config") -> logging.Logger:
    """Configure the package logger from the ``logging`` section of the config.

    Replaces any handler installed by a previous call, so it is safe to call
    more than once.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(config.logging.level.upper())

    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    if config.logging.json_format:
        handler.setFormatter(
            JsonFormatter("%(asctime)s %(name)s %(levelname)s %(repo)s %(message)s")
        )
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - [%(repo)s] %(message)s")
        )
    handler.addFilter(RepoContextFilter())
    logger.addHandler(handler)
    return logger
