"""Pytest configuration and fixtures"""

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_directory_store
from src.infrastructure.filesystem import DirectoryStore
from src.main import app

# 2024-01-17T10:00:00Z
FIXED_MTIME = datetime(2024, 1, 17, 10, 0, 0, tzinfo=timezone.utc).timestamp()


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    """
    Build a small report tree:

        a/b.log
        reports/daily/report.html
        test folder/
        b.txt, c.txt, README.md
    """
    root = tmp_path / "data"

    (root / "a").mkdir(parents=True)
    (root / "reports" / "daily").mkdir(parents=True)
    (root / "test folder").mkdir()

    (root / "a" / "b.log").write_text("line 1\nline 2\n")
    (root / "reports" / "daily" / "report.html").write_text("<html></html>")
    (root / "b.txt").write_text("bee")
    (root / "c.txt").write_text("sea")
    (root / "README.md").write_text("# Reports\n")

    for path in [root / "b.txt", root / "c.txt", root / "a"]:
        os.utime(path, (FIXED_MTIME, FIXED_MTIME))

    return root


@pytest.fixture
def outside_dir(tmp_path: Path) -> Path:
    """A directory next to the data root that must never be reachable."""
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "secret.txt").write_text("top secret")
    return outside


@pytest.fixture
def store(data_root: Path) -> DirectoryStore:
    return DirectoryStore(data_root)


@pytest.fixture
def client(store: DirectoryStore) -> Generator[TestClient, None, None]:
    """FastAPI test client bound to the temporary data root"""
    app.dependency_overrides[get_directory_store] = lambda: store

    yield TestClient(app)

    app.dependency_overrides.clear()
