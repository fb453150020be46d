"""A thin façade over the git command-line tool."""

import logging

from .api import create, is_repo, open
from .config import DEFAULT_TOOL_PATH, Config, load_config
from .repo import GitRepo, normalize_shared, quote_files
from .util.errors import (
    AlreadyExistsError,
    CommandError,
    ConfigError,
    GitFacadeError,
    PathError,
)
from .util.log import setup_logging
from .util.paths import is_repository_path
from .util.shell import CommandResult, run_command

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AlreadyExistsError",
    "CommandError",
    "CommandResult",
    "Config",
    "ConfigError",
    "DEFAULT_TOOL_PATH",
    "GitFacadeError",
    "GitRepo",
    "PathError",
    "create",
    "is_repo",
    "is_repository_path",
    "load_config",
    "normalize_shared",
    "open",
    "quote_files",
    "run_command",
    "setup_logging",
]
