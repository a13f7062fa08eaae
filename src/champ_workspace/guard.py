"""Workspace precondition shared by every maintenance command."""

from champ_workspace.config import WorkspaceConfig
from champ_workspace.git import commands as git
from champ_workspace.outcome import OperationReport


def require_workspace(config: WorkspaceConfig, report: OperationReport) -> bool:
    """Check that the workspace root has its own .git.

    Records a fatal outcome and returns False when it does not.
    """
    if git.has_metadata(config.root):
        return True
    report.flag("not-a-workspace", "Run this from your repo root (where .git lives).")
    return False
