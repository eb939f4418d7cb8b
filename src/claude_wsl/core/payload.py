"""Copying and verifying the notification scripts."""

import shutil
from pathlib import Path

from claude_wsl.core.config import NOTIFY_SCRIPT, WRAPPER_SCRIPT

EXECUTABLE_SUFFIX = ".sh"
EXECUTABLE_MODE = 0o755

# Files that must exist after a successful install
REQUIRED_FILES = (WRAPPER_SCRIPT, NOTIFY_SCRIPT)


def list_payload(template_dir: Path) -> list[Path]:
    """List the files to copy, sorted by name.

    Raises:
        OSError: If template_dir cannot be listed.
    """
    return sorted(p for p in template_dir.iterdir() if p.is_file())


def copy_payload(template_dir: Path, install_dir: Path) -> list[Path]:
    """Copy every template file into install_dir, overwriting existing files.

    Shell scripts are made executable (0755) after the copy.

    Returns:
        Destination paths, in copy order.
    """
    copied = []
    for src in list_payload(template_dir):
        dest = install_dir / src.name
        shutil.copyfile(src, dest)
        if src.name.endswith(EXECUTABLE_SUFFIX):
            dest.chmod(EXECUTABLE_MODE)
        copied.append(dest)
    return copied


def missing_files(install_dir: Path) -> list[str]:
    """Return the names of required files absent from install_dir."""
    return [name for name in REQUIRED_FILES if not (install_dir / name).exists()]
