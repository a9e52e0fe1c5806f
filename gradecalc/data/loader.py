"""
Data loading and caching.

This module handles loading grade documents from disk with caching to
prevent repeated file I/O when the same course is reported on repeatedly.
"""

import json
from pathlib import Path
from typing import Optional

from ..config import DATA_DIR
from ..log import get_logger

logger = get_logger("data.loader")


class DataLoader:
    """
    Loads and caches JSON grade documents.

    DOCUMENT TYPES:
    - Course documents: {"course": {...categories, latePolicy...},
                         "enrollment": {...grades...}}
    - History documents: {"pastGrades": [...], "enrollments": [...]}

    Documents are addressed by file name relative to the data directory
    (DATA_DIR unless another directory is given), or by absolute path.

    Usage:
        loader = DataLoader()
        document = loader.load_document("example_course.json")
    """

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
        self._cache = {}  # Keyed by resolved path

    def resolve(self, name: str) -> Path:
        path = Path(name)
        if not path.is_absolute():
            path = self.data_dir / path
        return path

    def load_document(self, name: str) -> dict:
        """
        Load a JSON document, caching it by resolved path.

        Raises:
            FileNotFoundError: if the document does not exist
            json.JSONDecodeError: if the document is not valid JSON
        """
        path = self.resolve(name)
        if path not in self._cache:
            if not path.exists():
                raise FileNotFoundError(f"Grade document not found: {path}")
            logger.debug("Loading grade document %s", path)
            with open(path, "r", encoding="utf-8") as f:
                self._cache[path] = json.load(f)
        return self._cache[path]

    def list_documents(self) -> list:
        """List the JSON documents available in the data directory."""
        if not self.data_dir.exists():
            return []
        return sorted(p.name for p in self.data_dir.glob("*.json"))

    def clear_cache(self):
        self._cache.clear()
