"""Generation client and its prompts."""

from .client import GenerationClient
from .prompts import FALLBACK_TRENDS, SCRIPT_REQUIRED_FIELDS, SCRIPT_RESPONSE_SCHEMA

__all__ = [
    "GenerationClient",
    "FALLBACK_TRENDS",
    "SCRIPT_REQUIRED_FIELDS",
    "SCRIPT_RESPONSE_SCHEMA",
]
