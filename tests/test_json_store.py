from __future__ import annotations

import json

import pytest

from json_store import atomic_write_json, read_json


def test_read_json_missing_and_empty(tmp_path):
    assert read_json(tmp_path / "missing.json") is None
    empty = tmp_path / "empty.json"
    empty.write_text("  \n", encoding="utf-8")
    assert read_json(empty) is None


def test_read_json_invalid_raises(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("not valid json{{{", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        read_json(bad)


def test_atomic_write_compact_and_indented(tmp_path):
    path = tmp_path / "sub" / "doc.json"
    atomic_write_json(path, {"a": [1, 2]})
    assert path.read_text(encoding="utf-8") == '{"a":[1,2]}\n'

    atomic_write_json(path, {"a": [1, 2]}, indent=4)
    text = path.read_text(encoding="utf-8")
    assert "\n    " in text
    assert json.loads(text) == {"a": [1, 2]}
    assert not path.with_suffix(".json.tmp").exists()


def test_atomic_write_unserializable_leaves_file_untouched(tmp_path):
    path = tmp_path / "doc.json"
    atomic_write_json(path, {"ok": True})
    with pytest.raises(TypeError):
        atomic_write_json(path, {"bad": object()})
    assert json.loads(path.read_text(encoding="utf-8")) == {"ok": True}
    assert not path.with_suffix(".json.tmp").exists()


def test_atomic_write_keeps_unicode(tmp_path):
    path = tmp_path / "doc.json"
    atomic_write_json(path, {"name": "café"})
    assert "café" in path.read_text(encoding="utf-8")
