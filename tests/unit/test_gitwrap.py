# tests/unit/test_gitwrap.py: Unit tests for the Git wrapper.

import subprocess
from pathlib import Path

import pytest

from gitfacade.gitwrap import run_git, tool_available
from gitfacade.util.errors import CommandError


def test_run_git_success(monkeypatch, tmp_path: Path):
    """Tests that run_git prefixes the tool path and disables prompts."""
    seen = {}

    def mock_run(args, **kwargs):
        seen["args"] = args
        seen["env"] = kwargs["env"]
        return subprocess.CompletedProcess(args=args, returncode=0, stdout="main", stderr="")

    monkeypatch.setattr(subprocess, "run", mock_run)
    result = run_git("/opt/git", ["symbolic-ref", "HEAD"], cwd=tmp_path)

    assert result.stdout == "main"
    assert seen["args"] == ["/opt/git", "symbolic-ref", "HEAD"]
    assert seen["env"]["GIT_TERMINAL_PROMPT"] == "0"


def test_run_git_env_overrides(monkeypatch, tmp_path: Path):
    seen = {}

    def mock_run(args, **kwargs):
        seen["env"] = kwargs["env"]
        return subprocess.CompletedProcess(args=args, returncode=0, stdout="", stderr="")

    monkeypatch.setattr(subprocess, "run", mock_run)
    run_git("git", ["status"], cwd=tmp_path, env={"GIT_AUTHOR_NAME": "Tester"})

    assert seen["env"]["GIT_AUTHOR_NAME"] == "Tester"


def test_run_git_failure(monkeypatch, tmp_path: Path):
    """Tests that run_git raises a CommandError carrying stderr verbatim."""
    def mock_run(args, **kwargs):
        return subprocess.CompletedProcess(
            args=args, returncode=128, stdout="", stderr="fatal: not a git repository\n"
        )

    monkeypatch.setattr(subprocess, "run", mock_run)
    with pytest.raises(CommandError, match="fatal: not a git repository") as excinfo:
        run_git("git", ["status"], cwd=tmp_path)

    assert excinfo.value.stderr == "fatal: not a git repository\n"
    assert excinfo.value.returncode == 128
    assert excinfo.value.command == ["git", "status"]


def test_run_git_failure_without_stderr(monkeypatch, tmp_path: Path):
    def mock_run(args, **kwargs):
        return subprocess.CompletedProcess(args=args, returncode=1, stdout="", stderr="")

    monkeypatch.setattr(subprocess, "run", mock_run)
    with pytest.raises(CommandError, match="exited with status 1"):
        run_git("git", ["commit"], cwd=tmp_path)


def test_run_git_missing_binary(tmp_path: Path):
    with pytest.raises(CommandError) as excinfo:
        run_git(str(tmp_path / "git"), ["status"], cwd=tmp_path)
    assert excinfo.value.returncode == 127


def test_tool_available(monkeypatch, tmp_path: Path):
    """Tests that a usage error from the bare tool still counts as available."""
    def mock_run(args, **kwargs):
        return subprocess.CompletedProcess(args=args, returncode=1, stdout="usage: git", stderr="")

    monkeypatch.setattr(subprocess, "run", mock_run)
    assert tool_available("/usr/bin/git", cwd=tmp_path) is True


def test_tool_unavailable(tmp_path: Path):
    assert tool_available(str(tmp_path / "missing-git"), cwd=tmp_path) is False


def test_tool_unavailable_under_regular_file(tmp_path: Path):
    (tmp_path / "blocker").write_text("")
    assert tool_available(str(tmp_path / "blocker" / "git"), cwd=tmp_path) is False
