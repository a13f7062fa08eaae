"""Rebase the workspace repo onto its upstream remote."""

from champ_workspace.config import WorkspaceConfig
from champ_workspace.git import commands as git
from champ_workspace.guard import require_workspace
from champ_workspace.outcome import OperationReport


def sync_upstream(config: WorkspaceConfig, report: OperationReport) -> OperationReport:
    """Fetch MAIN_UPSTREAM_REMOTE and rebase the current branch onto it.

    Without that remote this only warns. No pushes are made.
    """
    if not require_workspace(config, report):
        return report

    remote = config.main_upstream_remote
    if git.get_remote_url(config.root, remote) is None:
        report.flag(
            "remote-missing",
            f"No '{remote}' remote set. Add one with: git remote add {remote} <url>",
        )
        return report

    report.ok(f"Syncing main repo from remote '{remote}'")
    if not git.fetch(config.root, remote):
        report.flag("fetch-failed", f"Could not fetch '{remote}'")

    branch = git.current_branch(config.root) or "HEAD"
    onto = f"{remote}/{branch}"
    report.ok(f"Rebasing {branch} onto {onto}")
    if not git.rebase(config.root, onto):
        report.flag("rebase-failed", f"Rebase had issues; try: git merge {onto}")
        return report

    report.ok("Push your branch if needed: git push")
    return report
