"""Git LFS setup for the large binary assets of a robot workspace."""

from champ_workspace.config import WorkspaceConfig
from champ_workspace.git import commands as git
from champ_workspace.guard import require_workspace
from champ_workspace.outcome import OperationReport

# rosbags, COLLADA meshes, STL meshes
LFS_PATTERNS = ["*.bag", "*.dae", "*.stl"]


def lfs_setup(config: WorkspaceConfig, report: OperationReport) -> OperationReport:
    if not require_workspace(config, report):
        return report

    if not git.git_available():
        report.flag("tool-missing", "git not found")
        return report
    if not git.lfs_available(config.root):
        report.flag("tool-missing", "git lfs not found")
        return report

    report.ok("Installing Git LFS and tracking common large asset types")
    if not git.lfs_install(config.root):
        report.flag("lfs-command-failed", "git lfs install failed; LFS hooks may be missing.")
    if not git.lfs_track(config.root, LFS_PATTERNS):
        report.flag(
            "lfs-command-failed",
            f"git lfs track failed; {' '.join(LFS_PATTERNS)} are not tracked.",
        )
        return report
    git.stage(config.root, [".gitattributes"])
    if not git.commit(config.root, "chore: enable Git LFS for large assets"):
        report.flag("nothing-to-commit", "LFS patterns already present.")
    return report
