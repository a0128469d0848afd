from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection
# even when the package is not installed.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def sandbox_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Point the default store location at a temp directory so tests never touch the real cwd.
    """
    monkeypatch.setenv("HASHSTORE_BASE_DIR", str(tmp_path))
    for name in ("HASHSTORE_FILENAME", "HASHSTORE_JSON_INDENT", "HASHSTORE_DEBUG_LOG_VALUES"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def store_path(sandbox_dir: Path) -> Path:
    return sandbox_dir / "store.json"
