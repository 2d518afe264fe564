"""Configuration Store - holds the current persona."""

import json

from pydantic import ValidationError

from ..exceptions import PersistenceCorrupt
from ..models import PersonaProfile
from ..storage import LocalStore
from .defaults import default_persona


class PersonaStore:
    """Persona held for the session and persisted under a stable key.

    Only "must decode to an object" is enforced on edits; the persona is
    embedded into prompts as text, so its inner shape is free.
    """

    def __init__(self, store: LocalStore, key: str = "zunetech_persona"):
        self.store = store
        self.key = key
        self._current = default_persona()

    @property
    def current(self) -> PersonaProfile:
        return self._current

    def load(self) -> PersonaProfile:
        """Load the persisted persona, falling back to the built-in default."""
        self._current = default_persona()
        try:
            text = self.store.get(self.key)
            if text is not None:
                self._current = PersonaProfile.model_validate_json(text)
        except (PersistenceCorrupt, ValidationError):
            pass  # unreadable snapshot, keep the default
        return self._current

    def set(self, profile: PersonaProfile) -> PersonaProfile:
        """Replace the persona wholesale and persist it."""
        self._current = profile
        self._save()
        return self._current

    def set_from_text(self, text: str) -> PersonaProfile:
        """Replace the persona from a raw JSON edit.

        Raises:
            ValueError: If the text is not a JSON object with the persona's
                top-level fields.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Persona is not valid JSON: {e}")
        if not isinstance(data, dict):
            raise ValueError("Persona must be a JSON object")

        try:
            profile = PersonaProfile.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Persona is missing required fields: {e}")
        return self.set(profile)

    def reset(self) -> PersonaProfile:
        """Restore and persist the built-in default."""
        return self.set(default_persona())

    def dump(self) -> str:
        """Pretty JSON of the current persona."""
        return json.dumps(self._current.model_dump(), ensure_ascii=False, indent=2)

    def _save(self) -> None:
        self.store.set(self.key, self.dump())
