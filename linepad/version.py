from __future__ import annotations

import importlib.metadata
import subprocess
from pathlib import Path
from typing import Optional

from .constants import EditorConstants


def _run_git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
        return out.decode().strip() or None
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None


def get_package_version() -> str:
    try:
        return importlib.metadata.version(EditorConstants.APP_NAME)
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_commit() -> Optional[str]:
    """Short commit hash when running from a git checkout, with -dirty if changed."""
    here = Path(__file__).resolve().parent
    commit = _run_git(["rev-parse", "--short=7", "HEAD"], cwd=here)
    if commit is None:
        return None
    status = _run_git(["status", "--porcelain"], cwd=here)
    return commit + ("-dirty" if status else "")


def get_version_string() -> str:
    version = get_package_version()
    commit = get_commit()
    if commit:
        return f"{EditorConstants.APP_NAME} {version} ({commit})"
    return f"{EditorConstants.APP_NAME} {version}"
