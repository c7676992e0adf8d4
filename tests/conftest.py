from __future__ import annotations

from dataclasses import replace
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import persistence...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def save_dir(tmp_path: Path) -> Path:
    """
    Sandboxed save directory so tests never touch the real ./saves.
    Deliberately not created: startup must create it.
    """
    return tmp_path / "saves"


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch, save_dir: Path):
    from settings import get_settings

    monkeypatch.setenv("FLEX_SAVE_DIR", str(save_dir))
    return get_settings()


@pytest.fixture
def store(save_dir: Path):
    from persistence import DiskSaveStore

    s = DiskSaveStore(save_dir)
    s.ensure_ready()
    return s


@pytest.fixture
def client(settings):
    from fastapi.testclient import TestClient

    import app as app_module

    # Entering the context runs the lifespan (directory probe).
    with TestClient(app_module.create_app(settings)) as c:
        yield c


@pytest.fixture
def small_body_client(settings):
    from fastapi.testclient import TestClient

    import app as app_module

    with TestClient(app_module.create_app(replace(settings, max_body_bytes=64))) as c:
        yield c
