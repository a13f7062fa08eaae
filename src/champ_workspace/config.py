"""Workspace configuration.

Resolves the workspace-relative paths, the CHAMP remote and the upstream
remote alias. Values come from built-in defaults, then an optional
``.manage-champ.yaml`` at the workspace root, then the environment.

Environment variables:
    SRC_DIR — source tree (default: src)
    CHAMP_DIR — primary vendored tree (default: $SRC_DIR/champ)
    TELEOP_DIR — teleop vendored tree (default: $SRC_DIR/champ_teleop)
    VISION_DIR — vision vendored tree (default: $SRC_DIR/vision_opencv)
    VENDORED_HASHES — ledger file (default: $SRC_DIR/.vendored-hashes.txt)
    PATCH_DIR — local patch storage (default: $SRC_DIR/.patches)
    CHAMP_REMOTE — CHAMP upstream URL
    CHAMP_BRANCH — CHAMP branch (default: ros2)
    MAIN_UPSTREAM_REMOTE — remote alias of the main repo upstream (default: upstream)
    MANAGE_CHAMP_CONFIG — alternative YAML config file
"""

from __future__ import annotations

import os
import warnings
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import yaml

CONFIG_FILENAME = ".manage-champ.yaml"
CONFIG_FILE_ENV = "MANAGE_CHAMP_CONFIG"

DEFAULT_CHAMP_REMOTE = "https://github.com/chvmp/champ.git"
DEFAULT_CHAMP_BRANCH = "ros2"
DEFAULT_UPSTREAM_REMOTE = "upstream"
PATCH_FILENAME = "champ-local.patch"

# Environment variable names in the order they are documented in --help
CONFIG_VARS = (
    "SRC_DIR",
    "CHAMP_DIR",
    "TELEOP_DIR",
    "VISION_DIR",
    "VENDORED_HASHES",
    "PATCH_DIR",
    "CHAMP_REMOTE",
    "CHAMP_BRANCH",
    "MAIN_UPSTREAM_REMOTE",
)


@dataclass(frozen=True)
class WorkspaceConfig:
    """Resolved settings for one invocation."""

    root: Path
    src_dir: str = "src"
    champ_dir: str = "src/champ"
    teleop_dir: str = "src/champ_teleop"
    vision_dir: str = "src/vision_opencv"
    vendored_hashes: str = "src/.vendored-hashes.txt"
    patch_dir: str = "src/.patches"
    champ_remote: str = DEFAULT_CHAMP_REMOTE
    champ_branch: str = DEFAULT_CHAMP_BRANCH
    main_upstream_remote: str = DEFAULT_UPSTREAM_REMOTE

    def path(self, value: str) -> Path:
        """Resolve a configured path against the workspace root."""
        p = Path(value)
        return p if p.is_absolute() else self.root / p

    @property
    def ledger_path(self) -> Path:
        return self.path(self.vendored_hashes)

    @property
    def patch_path(self) -> Path:
        return self.path(self.patch_dir) / PATCH_FILENAME

    def vendored_dirs(self) -> list[tuple[str, str]]:
        """(label, configured path) for each vendored tree, primary first."""
        return [
            ("champ", self.champ_dir),
            ("champ_teleop", self.teleop_dir),
            ("vision_opencv", self.vision_dir),
        ]

    def as_env(self) -> dict[str, str]:
        """Current values keyed by their environment variable names."""
        return {name: getattr(self, name.lower()) for name in CONFIG_VARS}


def _read_config_file(path: Path) -> dict[str, str]:
    """Read a YAML config file into a {lower_case_key: str} mapping."""
    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} is not a YAML mapping")

    known = {name.lower() for name in CONFIG_VARS}
    values = {}
    for key, value in data.items():
        key = str(key).lower()
        if key not in known:
            warnings.warn(f"{path}: ignoring unknown key '{key}'")
            continue
        values[key] = str(value)
    return values


def load_config(
    root: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> WorkspaceConfig:
    """Build the configuration for a workspace.

    Args:
        root: Workspace root. Defaults to the current directory.
        environ: Environment mapping. Defaults to ``os.environ``.

    Returns:
        Frozen WorkspaceConfig.

    Raises:
        ValueError: If the config file is not a YAML mapping.
    """
    ws = Path(root) if root else Path.cwd()
    env = os.environ if environ is None else environ

    config_file = env.get(CONFIG_FILE_ENV)
    file_path = Path(config_file) if config_file else ws / CONFIG_FILENAME
    file_values = _read_config_file(file_path) if file_path.is_file() else {}

    def lookup(name: str, default: str) -> str:
        if env.get(name):
            return env[name]
        return file_values.get(name.lower(), default)

    src = lookup("SRC_DIR", "src")
    return WorkspaceConfig(
        root=ws,
        src_dir=src,
        champ_dir=lookup("CHAMP_DIR", f"{src}/champ"),
        teleop_dir=lookup("TELEOP_DIR", f"{src}/champ_teleop"),
        vision_dir=lookup("VISION_DIR", f"{src}/vision_opencv"),
        vendored_hashes=lookup("VENDORED_HASHES", f"{src}/.vendored-hashes.txt"),
        patch_dir=lookup("PATCH_DIR", f"{src}/.patches"),
        champ_remote=lookup("CHAMP_REMOTE", DEFAULT_CHAMP_REMOTE),
        champ_branch=lookup("CHAMP_BRANCH", DEFAULT_CHAMP_BRANCH),
        main_upstream_remote=lookup("MAIN_UPSTREAM_REMOTE", DEFAULT_UPSTREAM_REMOTE),
    )
