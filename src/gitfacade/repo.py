# src/gitfacade/repo.py: Git repository handle.
# This module defines GitRepo, the object bound to a single repository path.
# It validates (and optionally creates) the path, then exposes the git
# operations as methods. Each method builds an argument vector and runs it
# through the git wrapper with the repository as working directory, so a
# failing command raises CommandError and a successful one returns git's
# standard output.

import os
import re
import shlex
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .config import DEFAULT_TOOL_PATH
from .gitwrap import run_git, tool_available
from .util.errors import PathError
from .util.log import get_logger, repo_context
from .util.paths import expand_path, is_repository_path

logger = get_logger(__name__)

ACTIVE_MARKER = "*"

SHARED_TOKENS = frozenset(
    {"false", "true", "umask", "group", "all", "world", "everybody"}
)
_OCTAL_SHARED = re.compile(r"0[0-9]{3}")


def normalize_shared(shared: Union[str, bool, None]) -> Optional[str]:
    """
    Normalize the ``--shared`` option of ``git init``.

    Returns the token to pass as ``--shared=<token>``, or None when no flag
    should be emitted. Unknown values fall back to None instead of failing.
    """
    if shared is None or shared is False:
        return None
    if shared is True:
        return "true"

    token = str(shared).strip().lower()
    if token in SHARED_TOKENS or _OCTAL_SHARED.fullmatch(token):
        return None if token == "false" else token
    if token:
        logger.warning("Ignoring unrecognised shared mode %r", shared)
    return None


def quote_files(files: Sequence[str]) -> str:
    """Render a file list as double-quoted, space-separated tokens."""
    return " ".join(f'"{name}"' for name in files)


def validate_path(path) -> Path:
    """Check the path argument type and return it expanded and resolved."""
    if not isinstance(path, (str, os.PathLike)):
        raise PathError(f"'{path!r}' is not a valid repository path")
    return expand_path(path)


def _strip_marker(branch: str) -> str:
    if branch.startswith(ACTIVE_MARKER):
        return branch[len(ACTIVE_MARKER):].strip()
    return branch


class GitRepo:
    """
    A handle on one git repository.

    ``tool_path`` is the git binary used by this handle and may be changed
    at any time. A handle constructed without a path is inert: every
    operation except ``test_tool`` raises PathError until ``set_path``
    binds it.
    """

    def __init__(
        self,
        path: Optional[Union[str, os.PathLike]] = None,
        create_new: bool = False,
        init: bool = True,
        bare: bool = False,
        tool_path: Optional[str] = None,
    ):
        self.path: Optional[Path] = None
        self.tool_path: str = tool_path or DEFAULT_TOOL_PATH
        if path is not None:
            self.set_path(path, create_new=create_new, init=init, bare=bare)

    def __repr__(self) -> str:
        return f"GitRepo(path={str(self.path) if self.path else None!r}, tool_path={self.tool_path!r})"

    def set_path(
        self,
        path: Union[str, os.PathLike],
        create_new: bool = False,
        init: bool = True,
        bare: bool = False,
    ) -> None:
        """
        Bind the handle to a repository path.

        Args:
            path: The repository directory. Symlinks are resolved.
            create_new: Create the directory when it is not a repository yet.
            init: Run ``git init`` after creating the directory.
            bare: Initialize as a bare repository.

        Raises:
            PathError: If the path is not a repository and cannot be created.
        """
        repo_path = validate_path(path)

        if is_repository_path(repo_path):
            self.path = repo_path
            return

        if not create_new:
            if repo_path.exists():
                raise PathError(f"'{repo_path}' is not a git repository")
            raise PathError(f"Repository path '{repo_path}' does not exist")

        if not repo_path.parent.is_dir():
            raise PathError("Cannot create repository - parent directory does not exist")

        if not repo_path.is_dir():
            try:
                repo_path.mkdir()
            except OSError as e:
                raise PathError(f"Failed to create repository path '{repo_path}': {e}") from e

        self.path = repo_path
        if init:
            if bare:
                self.run("init", "--bare")
            else:
                self.run("init")

    def _require_path(self) -> Path:
        if self.path is None:
            raise PathError("Repository path is not set")
        return self.path

    # --- Command execution ---

    def test_tool(self) -> bool:
        """Tests if the configured git binary can be found."""
        return tool_available(self.tool_path, cwd=self.path)

    def run(self, *args: str) -> str:
        """Run a git subcommand in the repository and return its stdout."""
        path = self._require_path()
        token = repo_context.set(str(path))
        try:
            return run_git(self.tool_path, [str(arg) for arg in args], cwd=path).stdout
        finally:
            repo_context.reset(token)

    # --- Working tree ---

    def add(self, files: Union[str, os.PathLike, Sequence[str]] = "*") -> str:
        """
        Runs a ``git add`` call.

        A list or tuple stages each element as its own path. A plain string
        is split into words the way a shell would split it.
        """
        if isinstance(files, os.PathLike):
            paths = [os.fspath(files)]
        elif isinstance(files, str):
            paths = shlex.split(files)
        else:
            paths = [os.fspath(name) for name in files]
            logger.debug("Staging %s", quote_files(paths))
        return self.run("add", *paths, "-v")

    def commit(self, message: str = "") -> str:
        """Commit all tracked changes with the given message."""
        return self.run("commit", "-av", "-m", message)

    def clean(self, dirs: bool = False, force: bool = False) -> str:
        args = ["clean"]
        if dirs:
            args.append("-d")
        if force:
            args.append("-f")
        return self.run(*args)

    def checkout(self, branch: str) -> str:
        return self.run("checkout", branch)

    # --- Cloning ---

    def clone_to(self, target: Union[str, os.PathLike]) -> str:
        """Clone this repository into ``target``."""
        path = self._require_path()
        destination = Path(target).expanduser().absolute()
        logger.info("Cloning %s to %s", path, destination)
        return self.run("clone", "--local", str(path), str(destination))

    def clone_from(self, source: Union[str, os.PathLike]) -> str:
        """Clone a local repository into this repository's path."""
        path = self._require_path()
        origin = _absolute_if_local(source)
        logger.info("Cloning %s into %s", origin, path)
        return self.run("clone", "--local", origin, str(path))

    def clone_remote(self, source: str) -> str:
        """Clone a remote repository into this repository's path."""
        path = self._require_path()
        logger.info("Cloning remote %s into %s", source, path)
        return self.run("clone", source, str(path))

    # --- Branches ---

    def create_branch(self, name: str) -> str:
        return self.run("branch", name)

    def delete_branch(self, name: str, force: bool = False) -> str:
        return self.run("branch", "-D" if force else "-d", name)

    def list_branches(self, keep_asterisk: bool = False) -> List[str]:
        """
        List local branches in the order git prints them.

        Blank lines are dropped and every entry is stripped. The ``*`` marking
        the active branch is removed unless ``keep_asterisk`` is set.
        """
        branches = []
        for line in self.run("branch", "--no-color").splitlines():
            branch = line.strip()
            if not branch:
                continue
            if not keep_asterisk:
                branch = _strip_marker(branch)
            branches.append(branch)
        return branches

    def active_branch(self, keep_asterisk: bool = False) -> Optional[str]:
        """
        Returns the name of the active branch.

        None is returned when git marks no branch as active, which is the
        case in a repository without commits.
        """
        for branch in self.list_branches(keep_asterisk=True):
            if branch.startswith(ACTIVE_MARKER):
                return branch if keep_asterisk else _strip_marker(branch)
        return None


def _absolute_if_local(source: Union[str, os.PathLike]) -> str:
    # Relative local sources are taken from the caller's cwd, not the repository's.
    if isinstance(source, os.PathLike) or os.path.exists(source):
        return str(Path(source).expanduser().absolute())
    return str(source)
