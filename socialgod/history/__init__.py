"""Local script history."""

from .repository import ScriptRepository

__all__ = ["ScriptRepository"]
