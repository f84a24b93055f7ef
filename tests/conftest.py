"""Shared fixtures for the railists test suite."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from tests.fixtures import COLLECTION_FILE, WISH_LIST_FILE


@pytest.fixture
def collection_file(tmp_path: Path) -> Path:
    """A copy of the sample collection document in a temporary directory."""
    target = tmp_path / "collection.yaml"
    shutil.copyfile(COLLECTION_FILE, target)
    return target


@pytest.fixture
def wish_list_file(tmp_path: Path) -> Path:
    """A copy of the sample wish list document in a temporary directory."""
    target = tmp_path / "wish_list.yaml"
    shutil.copyfile(WISH_LIST_FILE, target)
    return target


@pytest.fixture
def write_document(tmp_path: Path):
    """Write a YAML document to a temporary file and return its path."""

    def _write(text: str, name: str = "document.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
