"""Test fixtures: YAML documents and builders for domain objects."""

from pathlib import Path

FIXTURES_DIR = Path(__file__).parent

COLLECTION_FILE = FIXTURES_DIR / "collection.yaml"
WISH_LIST_FILE = FIXTURES_DIR / "wish_list.yaml"
