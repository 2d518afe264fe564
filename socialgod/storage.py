"""
Local key-value store for persisted snapshots.

Each key maps to one text file under the data directory. Writes go to a
temporary file first and are moved into place, so a crash mid-write leaves
the previous snapshot intact.
"""

import os
import re
from pathlib import Path

from .exceptions import PersistenceCorrupt


class LocalStore:
    """Durable text blobs under stable keys."""

    def __init__(self, root: Path | str):
        """
        Initialize the store.

        Args:
            root: Directory holding one file per key.
        """
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        if not re.fullmatch(r"[A-Za-z0-9_.-]+", key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.root / f"{key}.json"

    def get(self, key: str) -> str | None:
        """Return the stored text, or None if the key was never written.

        Raises:
            PersistenceCorrupt: If the stored bytes are not UTF-8 text
        """
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise PersistenceCorrupt(key, f"not UTF-8 text: {e}")

    def set(self, key: str, text: str) -> None:
        """Replace the stored text for a key."""
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(text, encoding="utf-8")
        os.replace(tmp_path, path)

    def delete(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""
        self._path(key).unlink(missing_ok=True)
