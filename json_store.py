from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any


def read_json(path: Path) -> Any | None:
    """
    Read JSON from disk.

    Returns None for missing or empty files. Invalid JSON and read errors
    propagate (json.JSONDecodeError / OSError) so callers can decide.
    """
    if not path.exists():
        return None
    raw = path.read_text(encoding="utf-8")
    if not raw.strip():
        return None
    return json.loads(raw)


def dumps_json(payload: Any, *, indent: int | None = None) -> str:
    if indent is None:
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(payload, ensure_ascii=False, indent=indent)


def atomic_write_json(path: Path, payload: Any, *, indent: int | None = None) -> None:
    """
    Atomically write JSON to disk by writing to a temp file then replacing.

    The payload is serialized before the temp file is opened, so an
    unserializable document never touches the filesystem.
    """
    text = dumps_json(payload, indent=indent)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp_path.open("w", encoding="utf-8") as f:
            f.write(text)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
