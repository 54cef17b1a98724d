from pathlib import Path

import pytest

import canimerge.logging as canimerge_logging


@pytest.fixture(autouse=True)
def log_to_tmp(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(canimerge_logging, "LOG_PATH", tmp_path / "canimerge.log")
