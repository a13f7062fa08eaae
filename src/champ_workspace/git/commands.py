"""Thin wrappers over the git command line.

Each function runs one git invocation and reduces its result to what the
maintenance commands need: a bool, an optional string, or the completed
process when the caller wants stderr.
"""

import subprocess
from pathlib import Path

CLONE_TIMEOUT = 300


def _run_git(
    args: list[str],
    cwd: Path,
    timeout: int | None = None,
) -> subprocess.CompletedProcess:
    """Run a git command and return the result."""
    return subprocess.run(
        ["git"] + args,
        cwd=cwd,
        capture_output=True,
        text=True,
        timeout=timeout,
    )


def has_metadata(path: Path) -> bool:
    """True if ``path`` holds its own .git (directory or gitdir file)."""
    git_entry = path / ".git"
    return git_entry.is_dir() or git_entry.is_file()


def git_available() -> bool:
    try:
        return _run_git(["--version"], Path.cwd()).returncode == 0
    except FileNotFoundError:
        return False


def resolve_short_commit(path: Path) -> str | None:
    """Short HEAD commit of the repo at ``path``, or None if unresolvable."""
    result = _run_git(["rev-parse", "--short", "HEAD"], path)
    if result.returncode == 0 and result.stdout.strip():
        return result.stdout.strip()
    return None


def current_branch(root: Path) -> str | None:
    result = _run_git(["rev-parse", "--abbrev-ref", "HEAD"], root)
    if result.returncode == 0:
        return result.stdout.strip()
    return None


def get_remote_url(root: Path, remote: str) -> str | None:
    """URL of ``remote``, or None if no such remote is registered."""
    result = _run_git(["remote", "get-url", remote], root)
    if result.returncode == 0:
        return result.stdout.strip()
    return None


def diff_relative(path: Path) -> str:
    """Unified diff of staged and unstaged changes below ``path`` against HEAD.

    Paths in the diff are relative to ``path``.

    Returns an empty string when ``path`` is outside any git work tree or
    the repo has no commit yet.
    """
    result = _run_git(
        ["diff", "HEAD", "--no-color", "--no-ext-diff", "--relative", "--", "."],
        path,
    )
    if result.returncode != 0:
        return ""
    return result.stdout


def clone_shallow(url: str, branch: str, dest: Path) -> subprocess.CompletedProcess:
    """Single-branch, depth-1 clone of ``url`` at ``branch`` into ``dest``."""
    return _run_git(
        ["clone", "--depth=1", "--single-branch", "--branch", branch, url, str(dest)],
        dest.parent,
        timeout=CLONE_TIMEOUT,
    )


def stage_all(root: Path) -> bool:
    return _run_git(["add", "-A"], root).returncode == 0


def stage(root: Path, paths: list[str]) -> bool:
    return _run_git(["add", "--"] + paths, root).returncode == 0


def commit(root: Path, message: str) -> bool:
    """Commit the index. False when there was nothing to commit."""
    return _run_git(["commit", "-m", message], root).returncode == 0


def fetch(root: Path, remote: str) -> bool:
    return _run_git(["fetch", remote], root, timeout=CLONE_TIMEOUT).returncode == 0


def switch(path: Path, branch: str) -> bool:
    return _run_git(["switch", branch], path).returncode == 0


def merge_ff_only(path: Path, ref: str) -> bool:
    return _run_git(["merge", "--ff-only", ref], path).returncode == 0


def pull_rebase(path: Path) -> bool:
    return _run_git(["pull", "--rebase"], path, timeout=CLONE_TIMEOUT).returncode == 0


def rebase(root: Path, onto: str) -> bool:
    """Rebase the current branch onto ``onto``; aborts a conflicted rebase."""
    result = _run_git(["rebase", onto], root)
    if result.returncode != 0:
        # Leave the work tree usable for the suggested merge
        _run_git(["rebase", "--abort"], root)
        return False
    return True


def submodule_add(root: Path, url: str, path: str) -> subprocess.CompletedProcess:
    return _run_git(["submodule", "add", url, path], root, timeout=CLONE_TIMEOUT)


def lfs_available(root: Path) -> bool:
    try:
        return _run_git(["lfs", "version"], root).returncode == 0
    except FileNotFoundError:
        return False


def lfs_install(root: Path) -> bool:
    return _run_git(["lfs", "install"], root).returncode == 0


def lfs_track(root: Path, patterns: list[str]) -> bool:
    return _run_git(["lfs", "track"] + patterns, root).returncode == 0
