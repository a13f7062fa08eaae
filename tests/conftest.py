"""Shared test fixtures for champ-workspace."""

import subprocess
from pathlib import Path

import pytest

from champ_workspace.config import CONFIG_FILE_ENV, CONFIG_VARS, load_config


def run_git(args: list[str], cwd: Path) -> subprocess.CompletedProcess:
    return subprocess.run(["git"] + args, cwd=cwd, capture_output=True, text=True, check=True)


def make_repo(path: Path, files: dict[str, str], branch: str = "main") -> Path:
    """Create a git repo at ``path`` with one commit holding ``files``."""
    path.mkdir(parents=True, exist_ok=True)
    run_git(["init", "-b", branch], path)
    for name, content in files.items():
        target = path / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)
    run_git(["add", "-A"], path)
    run_git(["commit", "-m", "init"], path)
    return path


def commit_count(path: Path) -> int:
    return int(run_git(["rev-list", "--count", "HEAD"], path).stdout.strip())


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Pin git identity, hide the user's git config and the CLI's env vars."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    monkeypatch.setenv("GIT_AUTHOR_NAME", "test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "t@t")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "t@t")
    for name in CONFIG_VARS + (CONFIG_FILE_ENV,):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def workspace(tmp_path):
    """A workspace repo with a single committed README."""
    return make_repo(tmp_path / "ws", {"README.md": "# OpenMutt\n"})


@pytest.fixture
def config(workspace):
    return load_config(workspace, environ={})


class GitRecorder:
    """Replaces functions in champ_workspace.git.commands and records calls."""

    def __init__(self, monkeypatch):
        self.calls: list[tuple[str, tuple]] = []
        self._monkeypatch = monkeypatch

    def stub(self, name: str, result=True) -> None:
        def fake(*args, **kwargs):
            self.calls.append((name, args))
            return result

        self._monkeypatch.setattr(f"champ_workspace.git.commands.{name}", fake)

    def called(self, name: str) -> list[tuple]:
        return [args for n, args in self.calls if n == name]


@pytest.fixture
def fake_git(monkeypatch):
    return GitRecorder(monkeypatch)
