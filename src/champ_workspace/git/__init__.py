"""Git module — narrow interface to the git CLI used by the maintenance commands."""

from champ_workspace.git.commands import (
    clone_shallow,
    commit,
    current_branch,
    diff_relative,
    get_remote_url,
    has_metadata,
    resolve_short_commit,
    stage,
    stage_all,
)

__all__ = [
    "clone_shallow",
    "commit",
    "current_branch",
    "diff_relative",
    "get_remote_url",
    "has_metadata",
    "resolve_short_commit",
    "stage",
    "stage_all",
]
