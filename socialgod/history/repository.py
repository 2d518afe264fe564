"""
Script Repository - ordered local history of generated scripts.

Most recent first, unique by id. The full collection is re-serialized on
every mutation; there is no delta persistence. Records are never removed.
"""

import json

from pydantic import ValidationError

from ..exceptions import PersistenceCorrupt
from ..models import ScriptContent
from ..storage import LocalStore


class ScriptRepository:
    """In-memory script collection backed by a LocalStore snapshot."""

    def __init__(self, store: LocalStore, key: str = "zunetech_scripts"):
        """
        Initialize the repository. Call load_all() to hydrate it.

        Args:
            store: Durable key-value store
            key: Key of the snapshot inside the store
        """
        self.store = store
        self.key = key
        self._scripts: list[ScriptContent] = []

    def __len__(self) -> int:
        return len(self._scripts)

    @property
    def scripts(self) -> tuple[ScriptContent, ...]:
        """Read-only view of the collection, most recent first."""
        return tuple(self._scripts)

    def load_all(self) -> list[ScriptContent]:
        """Read the persisted snapshot.

        A missing or corrupt snapshot yields an empty history. Corruption
        is never reported; losing history is acceptable, crashing is not.
        """
        try:
            self._scripts = self._decode(self.store.get(self.key))
        except PersistenceCorrupt:
            self._scripts = []
        return list(self._scripts)

    def get(self, script_id: str) -> ScriptContent | None:
        """Get a script by id."""
        for script in self._scripts:
            if script.id == script_id:
                return script
        return None

    def prepend(self, script: ScriptContent) -> None:
        """Add a new script at the front and persist.

        Raises:
            ValueError: If a script with the same id already exists.
        """
        if self.get(script.id) is not None:
            raise ValueError(f"Script {script.id} already exists")
        self._scripts.insert(0, script)
        self._save()

    def replace(self, script_id: str, updated: ScriptContent) -> bool:
        """Overwrite the script with a matching id in place and persist.

        Returns:
            True if a script was replaced. An unknown id is a no-op.
        """
        for idx, script in enumerate(self._scripts):
            if script.id == script_id:
                self._scripts[idx] = updated
                self._save()
                return True
        return False

    def _save(self) -> None:
        data = [s.model_dump(mode="json") for s in self._scripts]
        self.store.set(self.key, json.dumps(data, ensure_ascii=False, indent=2))

    def _decode(self, text: str | None) -> list[ScriptContent]:
        if text is None:
            return []
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise PersistenceCorrupt(self.key, str(e))
        if not isinstance(data, list):
            raise PersistenceCorrupt(self.key, "snapshot is not a list")
        try:
            return [ScriptContent.model_validate(item) for item in data]
        except ValidationError as e:
            raise PersistenceCorrupt(self.key, str(e))
