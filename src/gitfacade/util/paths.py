# src/gitfacade/util/paths.py: Path resolution helpers.
# This module resolves the XDG config location of the package and expands
# user-supplied paths. It also holds the repository qualification test shared
# by repository creation and opening.

import os
from pathlib import Path

import platformdirs

APP_NAME = "gitfacade"


def get_xdg_config_home() -> Path:
    """Get the XDG_CONFIG_HOME path for the application."""
    return Path(platformdirs.user_config_dir(APP_NAME))


def get_default_config_path() -> Path:
    """Get the default path for the config.yaml file."""
    return get_xdg_config_home() / "config.yaml"


def expand_path(path: str | os.PathLike) -> Path:
    """Expand environment variables and the user home directory, then resolve symlinks."""
    return Path(os.path.expandvars(os.path.expanduser(os.fspath(path)))).resolve()


def is_repository_path(path: str | os.PathLike) -> bool:
    """
    Check whether a path is a git repository.

    A path qualifies when it is a directory that either holds a ``.git``
    directory or carries the bare-repository signature: a ``HEAD`` file
    next to an ``objects`` directory.
    """
    candidate = Path(path)
    if not candidate.is_dir():
        return False
    if (candidate / ".git").is_dir():
        return True
    return (candidate / "HEAD").is_file() and (candidate / "objects").is_dir()
