"""Persona configuration."""

from .defaults import INITIAL_PERSONA, default_persona
from .store import PersonaStore

__all__ = ["INITIAL_PERSONA", "PersonaStore", "default_persona"]
