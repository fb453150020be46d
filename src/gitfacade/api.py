# src/gitfacade/api.py: Repository lifecycle entry points.
# This module provides the create/open functions that hand out GitRepo
# handles. The git binary for the new handle comes from an explicit tool_path,
# else from the supplied Config, else from the built-in default.

import os
from typing import Optional, Union

from .config import Config
from .repo import GitRepo, normalize_shared, validate_path
from .util.errors import AlreadyExistsError
from .util.log import get_logger
from .util.paths import is_repository_path

logger = get_logger(__name__)

PathArg = Union[str, os.PathLike]


def _tool_path(tool_path: Optional[str], config: Optional[Config]) -> str:
    if tool_path:
        return tool_path
    return (config or Config()).git.tool_path


def create(
    path: PathArg,
    source: Optional[PathArg] = None,
    bare: bool = False,
    shared: Union[str, bool, None] = False,
    tool_path: Optional[str] = None,
    config: Optional[Config] = None,
) -> GitRepo:
    """
    Create a new git repository.

    Args:
        path: The repository directory. It is created if missing; its parent
            must exist.
        source: A repository to clone into ``path`` instead of running init.
        bare: Initialize a bare repository.
        shared: The ``--shared`` mode for init (false|true|umask|group|all|
            world|everybody|0xxx). Anything else means "not shared".
        tool_path: The git binary for the returned handle.
        config: Configuration supplying the default git binary.

    Returns:
        A GitRepo bound to the new repository.

    Raises:
        AlreadyExistsError: If ``path`` already is a git repository.
        PathError: If the directory cannot be created.
        CommandError: If git init or clone fails.
    """
    repo_path = validate_path(path)
    if is_repository_path(repo_path):
        raise AlreadyExistsError(f"'{repo_path}' is already a git repository")

    shared_mode = normalize_shared(shared)
    repo = GitRepo(
        repo_path,
        create_new=True,
        init=False,
        tool_path=_tool_path(tool_path, config),
    )

    if source is not None:
        repo.clone_from(source)
    else:
        args = ["init"]
        if bare:
            args.append("--bare")
        if shared_mode:
            args.append(f"--shared={shared_mode}")
        repo.run(*args)

    logger.info("Created repository at %s", repo.path)
    return repo


def open(
    path: PathArg,
    tool_path: Optional[str] = None,
    config: Optional[Config] = None,
) -> GitRepo:
    """Open an existing git repository. Raises PathError if there is none at ``path``."""
    return GitRepo(path, tool_path=_tool_path(tool_path, config))


def is_repo(obj) -> bool:
    """Checks if a value is a GitRepo handle."""
    return isinstance(obj, GitRepo)
