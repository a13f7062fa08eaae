"""Submodule workflow for CHAMP, the alternative to vendoring."""

from champ_workspace.config import WorkspaceConfig
from champ_workspace.git import commands as git
from champ_workspace.guard import require_workspace
from champ_workspace.outcome import OperationReport


def submodule_add(config: WorkspaceConfig, report: OperationReport) -> OperationReport:
    """Register CHAMP as a submodule at CHAMP_DIR, on CHAMP_BRANCH."""
    if not require_workspace(config, report):
        return report

    directory = config.path(config.champ_dir)
    if git.has_metadata(directory):
        report.flag(
            "submodule-target-initialized",
            f"{config.champ_dir} already looks like a git repo. "
            "Remove it or choose vendor workflow.",
        )
        return report

    report.ok(f"Adding CHAMP as submodule at {config.champ_dir}")
    result = git.submodule_add(config.root, config.champ_remote, config.champ_dir)
    if result.returncode != 0:
        report.flag("submodule-add-failed", f"git submodule add failed: {result.stderr.strip()}")
        return report

    if not git.fetch(directory, "origin"):
        report.flag("fetch-failed", f"Could not fetch origin in {config.champ_dir}")
    if not git.switch(directory, config.champ_branch):
        report.flag(
            "branch-switch-failed",
            f"Could not switch {config.champ_dir} to {config.champ_branch}; staying on the cloned branch.",
        )

    git.stage(config.root, [".gitmodules", config.champ_dir])
    if not git.commit(config.root, f"chore: add CHAMP as submodule ({config.champ_branch})"):
        report.flag("nothing-to-commit", "No submodule changes to commit.")
    report.ok("Initialize/Update submodules: git submodule update --init --recursive")
    return report


def submodule_update(config: WorkspaceConfig, report: OperationReport) -> OperationReport:
    """Advance the CHAMP submodule to the tip of CHAMP_BRANCH and record the bump.

    Tries a fast-forward merge first and falls back to ``git pull --rebase``.
    """
    if not require_workspace(config, report):
        return report

    directory = config.path(config.champ_dir)
    if not directory.is_dir():
        report.flag("vendor-dir-missing", f"{config.champ_dir} not found")
        return report
    # A vendored tree has no .git of its own; git would act on the workspace repo
    if not git.has_metadata(directory):
        report.flag(
            "not-a-submodule",
            f"{config.champ_dir} has no .git of its own (vendored?); "
            "use vendor-update instead.",
        )
        return report

    branch = config.champ_branch
    report.ok(f"Updating CHAMP submodule to latest {branch}")
    if not git.fetch(directory, "origin"):
        report.flag("fetch-failed", f"Could not fetch origin in {config.champ_dir}")
    if not git.switch(directory, branch):
        report.flag("branch-switch-failed", f"Could not switch {config.champ_dir} to {branch}")
    if not git.merge_ff_only(directory, f"origin/{branch}"):
        if not git.pull_rebase(directory):
            report.flag(
                "merge-failed",
                f"Could not fast-forward or rebase {config.champ_dir} onto origin/{branch}",
            )

    git.stage(config.root, [config.champ_dir])
    if not git.commit(config.root, f"chore: bump CHAMP submodule to latest {branch}"):
        report.flag("nothing-to-commit", "No submodule changes to commit.")
    report.ok("Remember to push both parent and submodule if needed.")
    return report
