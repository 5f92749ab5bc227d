from __future__ import annotations

import pytest
from pydantic import ValidationError

from jsondb.entries import ContentLayout
from jsondb.errors import UnknownEntryError
from jsondb.shapes import Shape


def test_layout_normalizes_paths():
    layout = ContentLayout.from_mapping({"login": "single", "/teams/": Shape.DICTIONARY})
    assert layout.entries == {"/login": Shape.SINGLE, "/teams": Shape.DICTIONARY}
    assert layout.shape_of("/login/") is Shape.SINGLE
    assert layout.declares("teams")


def test_unknown_path():
    layout = ContentLayout.from_mapping({"/login": "single"})
    with pytest.raises(UnknownEntryError):
        layout.shape_of("/nope")
    assert not layout.declares("/nope")


def test_invalid_shape_rejected():
    with pytest.raises(ValidationError):
        ContentLayout.from_mapping({"/login": "tuple"})


def test_conflicting_declarations_rejected():
    with pytest.raises(ValidationError):
        ContentLayout.from_mapping({"/login": "single", "login/": "array"})


def test_layout_is_frozen():
    layout = ContentLayout.from_mapping({"/login": "single"})
    with pytest.raises(ValidationError):
        layout.separator = "."


def test_invalid_separator_rejected():
    with pytest.raises(ValidationError):
        ContentLayout.from_mapping({"/login": "single"}, separator="")
