import subprocess

import pytest

import canimerge.repo as repo
from canimerge.errors import BranchResolutionError


def _proc(args, returncode: int, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(["git", *args], returncode, stdout, stderr)


def test_current_branch_strips_output(monkeypatch) -> None:
    seen = []

    def fake_git(args, cwd=None):
        seen.append(args)
        return _proc(args, 0, "feature-x\n")

    monkeypatch.setattr(repo, "_git", fake_git)
    assert repo.current_branch() == "feature-x"
    assert seen == [["rev-parse", "--symbolic-full-name", "--abbrev-ref", "HEAD"]]


def test_current_branch_outside_repo(monkeypatch) -> None:
    monkeypatch.setattr(
        repo, "_git", lambda args, cwd=None: _proc(args, 128, stderr="fatal: not a git repository")
    )
    with pytest.raises(BranchResolutionError) as excinfo:
        repo.current_branch()
    assert "not a git repository" in str(excinfo.value)


def test_current_branch_without_git(monkeypatch) -> None:
    def missing(args, cwd=None):
        raise FileNotFoundError("git")

    monkeypatch.setattr(repo, "_git", missing)
    with pytest.raises(BranchResolutionError):
        repo.current_branch()
