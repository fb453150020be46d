# src/gitfacade/util/errors.py: Typed exceptions.
# This module defines the exception hierarchy raised by the package. Path
# validation, repository creation and git invocation each fail with their own
# type so callers can tell a bad path apart from a failed git command.

from typing import Optional, Sequence


class GitFacadeError(Exception):
    """Base exception for the package."""


class ConfigError(GitFacadeError):
    """Configuration-related errors."""


class PathError(GitFacadeError):
    """Invalid, missing or uncreatable repository path."""


class AlreadyExistsError(GitFacadeError):
    """Creation requested on a path that is already a git repository."""


class CommandError(GitFacadeError):
    """A git command exited with a non-zero status.

    ``stderr`` holds the captured standard error verbatim.
    """

    def __init__(
        self,
        stderr: str,
        returncode: int,
        command: Optional[Sequence[str]] = None,
        stdout: str = "",
    ):
        self.stderr = stderr
        self.stdout = stdout
        self.returncode = returncode
        self.command = list(command) if command is not None else []
        message = stderr.strip()
        if not message:
            rendered = " ".join(self.command) or "command"
            message = f"'{rendered}' exited with status {returncode}"
        super().__init__(message)
