from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional

from .errors import BranchResolutionError


def _git(args: List[str], cwd: Optional[Path] = None) -> subprocess.CompletedProcess:
    return subprocess.run(
        ["git", *args],
        cwd=str(cwd) if cwd else None,
        capture_output=True,
        text=True,
    )


def current_branch(cwd: Optional[Path] = None) -> str:
    """Short name of the branch checked out in ``cwd`` (e.g. ``feature-x``)."""
    try:
        proc = _git(["rev-parse", "--symbolic-full-name", "--abbrev-ref", "HEAD"], cwd=cwd)
    except OSError as exc:
        raise BranchResolutionError(f"Can not resolve --checkout branch name. {exc}") from exc
    if proc.returncode != 0:
        detail = proc.stderr.strip() or f"git exited with {proc.returncode}"
        raise BranchResolutionError(f"Can not resolve --checkout branch name. {detail}")
    return proc.stdout.strip()
