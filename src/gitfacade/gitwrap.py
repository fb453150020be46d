# src/gitfacade/gitwrap.py: Safe subprocess wrappers for Git.
# This module runs the configured git binary through the command runner. It
# scrubs the environment so git never prompts for credentials, and it turns a
# non-zero exit status into a CommandError carrying git's standard error.

import os
from pathlib import Path
from typing import Mapping, Optional, Sequence

from .util.errors import CommandError
from .util.log import get_logger
from .util.shell import COMMAND_NOT_FOUND, CommandResult, run_command

logger = get_logger(__name__)


def git_env(overrides: Optional[Mapping[str, str]] = None) -> dict:
    """Build the child environment: the current one, without terminal prompts."""
    env = os.environ.copy()
    env["GIT_TERMINAL_PROMPT"] = "0"  # Disable interactive prompts
    if overrides:
        env.update(overrides)
    return env


def run_git(
    tool_path: str,
    args: Sequence[str],
    cwd: Path,
    env: Optional[Mapping[str, str]] = None,
) -> CommandResult:
    """
    Runs a git command in a specified directory.

    Args:
        tool_path: The git executable to invoke.
        args: A list of arguments for the git command.
        cwd: The working directory for the command.
        env: Optional environment variables layered over the current ones.

    Returns:
        The CommandResult of a successful run.

    Raises:
        CommandError: If git exits with a non-zero status, including when
            the executable cannot be found (status 127).
        PathError: If the working directory does not exist.
    """
    result = run_command([tool_path, *args], cwd=cwd, env=git_env(env))
    if not result.ok:
        logger.debug("git %s failed with status %d", " ".join(args[:1]), result.returncode)
        raise CommandError(
            result.stderr,
            result.returncode,
            command=result.args,
            stdout=result.stdout,
        )
    return result


def tool_available(tool_path: str, cwd: Optional[Path] = None) -> bool:
    """Checks that the git binary can be spawned.

    The bare tool is run with no arguments; git prints its usage and exits
    non-zero, so only the "command not found" status counts as missing.
    """
    result = run_command([tool_path], cwd=cwd or Path.cwd(), env=git_env())
    return result.returncode != COMMAND_NOT_FOUND
