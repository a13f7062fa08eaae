"""Maintenance command handlers and report rendering."""

import argparse
import sys

from champ_workspace.config import WorkspaceConfig
from champ_workspace.outcome import OperationReport, Outcome, Severity

_COLORS = {
    Severity.SUCCESS: "\033[1;34m",
    Severity.WARNING: "\033[1;33m",
    Severity.FATAL: "\033[1;31m",
}
_MARKERS = {
    Severity.SUCCESS: "==>",
    Severity.WARNING: "[warn]",
    Severity.FATAL: "[err]",
}
_RESET = "\033[0m"


def format_outcome(outcome: Outcome, color: bool = False) -> str:
    marker = _MARKERS[outcome.severity]
    if color:
        marker = f"{_COLORS[outcome.severity]}{marker}{_RESET}"
    return f"{marker} {outcome.message}"


def print_outcome(item: Outcome | str) -> None:
    """Echo callback for OperationReport: fatal to stderr, the rest to stdout."""
    if isinstance(item, str):
        print(f"  {item}")
        return
    stream = sys.stderr if item.severity is Severity.FATAL else sys.stdout
    print(format_outcome(item, color=stream.isatty()), file=stream)


def _run(command: str, operation, config: WorkspaceConfig) -> int:
    report = OperationReport(command=command, echo=print_outcome)
    operation(config, report)
    return report.exit_code


def cmd_check(args: argparse.Namespace) -> int:
    from champ_workspace.vendor.scan import check

    return _run("check", check, args.config)


def cmd_vendor_init(args: argparse.Namespace) -> int:
    from champ_workspace.vendor.flatten import vendor_init

    return _run("vendor-init", vendor_init, args.config)


def cmd_vendor_update(args: argparse.Namespace) -> int:
    from champ_workspace.vendor.update import vendor_update

    return _run("vendor-update", vendor_update, args.config)


def cmd_submodule_add(args: argparse.Namespace) -> int:
    from champ_workspace.submodule import submodule_add

    return _run("submodule-add", submodule_add, args.config)


def cmd_submodule_update(args: argparse.Namespace) -> int:
    from champ_workspace.submodule import submodule_update

    return _run("submodule-update", submodule_update, args.config)


def cmd_sync_upstream(args: argparse.Namespace) -> int:
    from champ_workspace.upstream import sync_upstream

    return _run("sync-upstream", sync_upstream, args.config)


def cmd_lfs_setup(args: argparse.Namespace) -> int:
    from champ_workspace.lfs import lfs_setup

    return _run("lfs-setup", lfs_setup, args.config)
