"""Wrappers over the rsync and patch command-line tools."""

import shutil
import subprocess
from pathlib import Path

SYNC_TIMEOUT = 600


def tool_available(name: str) -> bool:
    return shutil.which(name) is not None


def rsync_mirror(
    source: Path,
    dest: Path,
    exclude: list[str] | None = None,
) -> subprocess.CompletedProcess:
    """Make ``dest`` a copy of ``source``, deleting files absent from it.

    Excluded names are neither copied nor deleted on the destination side.
    """
    args = ["rsync", "-a", "--delete"]
    for pattern in exclude or []:
        args.append(f"--exclude={pattern}")
    # Trailing slashes: copy the contents, not the directory itself
    args += [f"{source}/", f"{dest}/"]
    return subprocess.run(
        args,
        capture_output=True,
        text=True,
        timeout=SYNC_TIMEOUT,
    )


def apply_patch(directory: Path, patch_file: Path, strip: int = 1) -> bool:
    """Apply a unified diff inside ``directory``. False on rejects or errors."""
    result = subprocess.run(
        ["patch", f"-p{strip}", "--batch", "-d", str(directory), "-i", str(patch_file.resolve())],
        capture_output=True,
        text=True,
    )
    return result.returncode == 0
