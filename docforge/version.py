from __future__ import annotations

import importlib.metadata
import subprocess
from pathlib import Path
from typing import NamedTuple, Optional


class BuildInfo(NamedTuple):
    version: str
    commit: Optional[str]
    dirty: bool


def _run_git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(
            ["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL
        )
        return out.decode().strip() or None
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None


def _installed_version() -> str:
    try:
        return importlib.metadata.version("docforge")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_build_info() -> BuildInfo:
    # Commit info is only available when running from a git checkout
    here = Path(__file__).resolve().parent
    commit = _run_git(["rev-parse", "HEAD"], cwd=here)
    dirty = False
    if commit:
        status = _run_git(["status", "--porcelain"], cwd=here)
        dirty = bool(status)
    return BuildInfo(version=_installed_version(), commit=commit, dirty=dirty)


def get_version_string() -> str:
    info = get_build_info()
    if not info.commit:
        return info.version
    dirty_suffix = "-dirty" if info.dirty else ""
    # Use short (7-character) git hashes
    return f"{info.version} ({info.commit[:7]}{dirty_suffix})"
