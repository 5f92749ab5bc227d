from __future__ import annotations

from pathlib import Path
import sys
from typing import Callable

import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import jsondb...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from jsondb import ContentLayout, TypedJsonDB  # noqa: E402


LAYOUT = {
    "/login": "single",
    "/restaurants": "array",
    "/teams": "dictionary",
}


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "db.json"


@pytest.fixture
def layout() -> ContentLayout:
    return ContentLayout.from_mapping(LAYOUT)


@pytest.fixture
def make_db(db_path: Path, layout: ContentLayout) -> Callable[..., TypedJsonDB]:
    """
    Build a TypedJsonDB over the temp file; keyword overrides go to the constructor.
    """

    def _make(**kwargs) -> TypedJsonDB:
        return TypedJsonDB(db_path, layout, **kwargs)

    return _make


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "JSONDB_FILENAME",
        "JSONDB_SAVE_ON_PUSH",
        "JSONDB_HUMAN_READABLE",
        "JSONDB_SEPARATOR",
        "JSONDB_THROW_ON_MISSING",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
