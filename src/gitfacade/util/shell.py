# src/gitfacade/util/shell.py: Subprocess execution wrapper.
# This module runs an external command from an argument vector in a given
# working directory and captures both output streams. Standard input is closed
# so the child can never block waiting on it. A missing or non-executable
# binary is reported through the conventional shell exit statuses (127/126)
# instead of an exception, which lets callers probe for the tool.

import shlex
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from .errors import PathError
from .log import get_logger

logger = get_logger(__name__)

COMMAND_NOT_FOUND = 127
COMMAND_NOT_EXECUTABLE = 126


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of a single process invocation."""

    args: List[str] = field(default_factory=list)
    stdout: str = ""
    stderr: str = ""
    returncode: int = 0

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def command_line(self) -> str:
        return shlex.join(self.args)


def run_command(
    args: Sequence[str],
    cwd: str | Path,
    env: Optional[Mapping[str, str]] = None,
) -> CommandResult:
    """
    Runs a command and captures its output.

    Args:
        args: The program followed by its arguments.
        cwd: The working directory for the command.
        env: An optional full environment for the child process.

    Returns:
        The CommandResult. A non-zero exit status is returned, not raised.

    Raises:
        PathError: If the working directory does not exist.
    """
    argv = [str(arg) for arg in args]
    workdir = Path(cwd)
    if not workdir.is_dir():
        raise PathError(f"Working directory not found: {workdir}")

    logger.debug("Running %s in %s", shlex.join(argv), workdir)
    try:
        process = subprocess.run(
            argv,
            cwd=workdir,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            errors="replace",
            check=False,
            env=dict(env) if env is not None else None,
        )
    except (FileNotFoundError, NotADirectoryError):
        logger.debug("Executable not found: %s", argv[0])
        return CommandResult(
            args=argv,
            stderr=f"{argv[0]}: command not found",
            returncode=COMMAND_NOT_FOUND,
        )
    except PermissionError:
        logger.debug("Executable not runnable: %s", argv[0])
        return CommandResult(
            args=argv,
            stderr=f"{argv[0]}: permission denied",
            returncode=COMMAND_NOT_EXECUTABLE,
        )

    logger.debug("Exit status %d from %s", process.returncode, argv[0])
    return CommandResult(
        args=argv,
        stdout=process.stdout or "",
        stderr=process.stderr or "",
        returncode=process.returncode,
    )
