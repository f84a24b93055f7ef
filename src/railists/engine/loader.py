"""
Data loader implementations for the collection manager.

Provides the concrete implementation of DataSourceProtocol for YAML
documents.

Classes:
    YamlLoader: Load collections and wish lists from YAML files

Usage:
    from railists.engine.loader import YamlLoader

    loader = YamlLoader()
    collection = loader.load_collection(Path("collection.yaml"))

The loader only reads and parses the file; turning the document into
domain objects is delegated to DocumentAdapter.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from railists.contracts.config import RailistsConfig
from railists.contracts.errors import (
    ERROR_TYPE_MISMATCH,
    DataLoadError,
)
from railists.domain.collections import Collection
from railists.domain.wish_lists import WishList
from railists.engine.adapter import DocumentAdapter

logger = logging.getLogger(__name__)

_NUMERIC_TAGS = frozenset({
    "tag:yaml.org,2002:bool",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
})


class TextScalarLoader(yaml.SafeLoader):
    """
    SafeLoader that keeps unquoted numbers and booleans as written.

    ``itemNumber: 012345`` stays the text "012345" instead of the octal
    integer 5349. Nulls and timestamps are still resolved; the document
    adapter converts numeric fields itself.
    """


TextScalarLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _NUMERIC_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class YamlLoader:
    """
    Load collection and wish list documents from YAML files.

    Implements DataSourceProtocol. Files are parsed with TextScalarLoader,
    so only plain YAML data types are constructed and scalars other than
    nulls and timestamps reach the adapter as text.

    Attributes:
        config: Configuration passed to the document adapter
        adapter: Converter from parsed documents to domain objects
    """

    def __init__(
        self,
        config: RailistsConfig | None = None,
        adapter: DocumentAdapter | None = None,
    ) -> None:
        """
        Initialize YamlLoader.

        Args:
            config: Optional configuration (defaults to RailistsConfig.default())
            adapter: Optional adapter, mainly for tests
        """
        self.config = config or RailistsConfig.default()
        self.adapter = adapter or DocumentAdapter(self.config)

    def load_collection(self, path: str | Path) -> Collection:
        """
        Load a collection document.

        Raises:
            DataLoadError: If the file cannot be read or parsed, or any field
                is invalid
        """
        document = self._read_document(Path(path))
        collection = self.adapter.to_collection(document)
        logger.info("Loaded %d items from %s", len(collection), path)
        return collection

    def load_wish_list(self, path: str | Path) -> WishList:
        """
        Load a wish list document.

        Raises:
            DataLoadError: If the file cannot be read or parsed, or any field
                is invalid
        """
        document = self._read_document(Path(path))
        wish_list = self.adapter.to_wish_list(document)
        logger.info("Loaded %d wish list items from %s", len(wish_list), path)
        return wish_list

    def _read_document(self, path: Path) -> dict[str, Any]:
        """
        Read and parse a YAML file.

        Returns:
            The document root mapping

        Raises:
            DataLoadError: If the file is missing, unreadable, not valid YAML
                or its root is not a mapping
        """
        if not path.exists():
            raise DataLoadError(f"File not found: {path}", source=str(path))

        try:
            with path.open(encoding="utf-8") as stream:
                document = yaml.load(stream, Loader=TextScalarLoader)
        except yaml.YAMLError as e:
            raise DataLoadError(f"Invalid YAML document: {e}", source=str(path)) from e
        except UnicodeDecodeError as e:
            raise DataLoadError(f"File is not valid UTF-8: {e}", source=str(path)) from e
        except OSError as e:
            raise DataLoadError(f"Failed to read file: {e}", source=str(path)) from e

        if not isinstance(document, dict):
            raise DataLoadError(
                "The document root must be a mapping",
                source=str(path),
                code=ERROR_TYPE_MISMATCH,
            )

        logger.debug("Parsed YAML document %s", path)
        return document
