"""Keep CHAMP tidy in an OpenMutt ROS 2 workspace.

Usage:
    manage-champ check
    manage-champ vendor-init
    manage-champ vendor-update
    manage-champ submodule-add
    manage-champ submodule-update
    manage-champ sync-upstream
    manage-champ lfs-setup
    manage-champ [help | -h | --help]

Run from the repo root (the directory holding the workspace's .git), or
pass --workspace. Nothing is ever force-pushed.
"""

import argparse
import sys
from pathlib import Path

import yaml

from champ_workspace.cli.commands import (
    cmd_check,
    cmd_lfs_setup,
    cmd_submodule_add,
    cmd_submodule_update,
    cmd_sync_upstream,
    cmd_vendor_init,
    cmd_vendor_update,
    format_outcome,
)
from champ_workspace.config import WorkspaceConfig, load_config
from champ_workspace.outcome import Outcome

PROG = "manage-champ"

COMMANDS = {
    "check": (cmd_check, "show nested .git dirs (should only see top-level .git)"),
    "vendor-init": (cmd_vendor_init, "remove nested .git dirs and record hashes"),
    "vendor-update": (cmd_vendor_update, "refresh CHAMP files from upstream (vendor workflow)"),
    "submodule-add": (cmd_submodule_add, "add CHAMP as a git submodule (one-time)"),
    "submodule-update": (cmd_submodule_update, "pull latest CHAMP and record submodule bump"),
    "sync-upstream": (cmd_sync_upstream, "sync your main repo with its upstream remote (if set)"),
    "lfs-setup": (cmd_lfs_setup, "configure Git LFS for common large asset types"),
}

HELP_ALIASES = {"help", "-h", "--help"}


def build_parser() -> argparse.ArgumentParser:
    # Help is rendered by usage_text() so it can show the live config
    parser = argparse.ArgumentParser(prog=PROG, add_help=False)
    parser.add_argument("command", nargs="?", default=None)
    parser.add_argument("-h", "--help", action="store_true", dest="help")
    parser.add_argument(
        "--workspace", default=None,
        help="Workspace root directory (default: current directory)",
    )
    return parser


def usage_text(config: WorkspaceConfig) -> str:
    lines = [f"Usage: {PROG} <command>", "", "Commands:"]
    for name, (_, summary) in COMMANDS.items():
        lines.append(f"  {name:<21} {summary}")
    lines += ["", "Config via env vars (with defaults):"]
    for name, value in config.as_env().items():
        lines.append(f"  {name}={value}")
    lines += ["", "Examples:"]
    for name in COMMANDS:
        lines.append(f"  {PROG} {name}")
    return "\n".join(lines)


def main() -> int:
    parser = build_parser()
    args, extra = parser.parse_known_args()

    root = Path(args.workspace).expanduser().resolve() if args.workspace else Path.cwd()
    try:
        config = load_config(root)
    except (OSError, ValueError, yaml.YAMLError) as e:
        fatal = Outcome.from_condition("invalid-config", f"Could not load configuration: {e}")
        print(format_outcome(fatal, color=sys.stderr.isatty()), file=sys.stderr)
        return 1

    wants_help = args.help or args.command in HELP_ALIASES
    if wants_help or (args.command is None and not extra):
        print(usage_text(config))
        return 0

    command = args.command or extra[0]
    entry = COMMANDS.get(command)
    if entry is None or extra:
        unknown = command if entry is None else extra[0]
        fatal = Outcome.from_condition("unknown-command", f"Unknown command: {unknown} (use --help)")
        print(format_outcome(fatal, color=sys.stderr.isatty()), file=sys.stderr)
        return 1

    args.config = config
    handler, _ = entry
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
