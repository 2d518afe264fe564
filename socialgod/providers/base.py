"""Generative provider abstraction."""

from abc import ABC, abstractmethod
from typing import Any

from ..config import GeminiConfig


class GenerativeProvider(ABC):
    """Abstract base class for generative backends.

    A provider only moves requests and raw responses across the wire.
    Prompt assembly and response validation belong to the GenerationClient.
    """

    def __init__(self, config: GeminiConfig):
        self.config = config

    @property
    @abstractmethod
    def has_credential(self) -> bool:
        """True if a credential is configured (not necessarily valid)."""
        pass

    @abstractmethod
    async def generate_text(
        self,
        prompt: str,
        system_instruction: str | None = None,
        max_output_tokens: int | None = None,
    ) -> str:
        """Generate free text.

        Args:
            prompt: The user prompt
            system_instruction: Optional system-level steering text
            max_output_tokens: Optional output length cap

        Returns:
            The generated text (may be empty)
        """
        pass

    @abstractmethod
    async def generate_json(
        self,
        prompt: str,
        system_instruction: str | None = None,
        schema: dict[str, Any] | None = None,
        use_search: bool = False,
    ) -> str:
        """Generate a structured response.

        Args:
            prompt: The user prompt
            system_instruction: Optional system-level steering text
            schema: Declared output schema (a hint, not a guarantee)
            use_search: Enable web-search augmentation if supported

        Returns:
            Raw response text, expected to hold JSON
        """
        pass

    @abstractmethod
    async def generate_image(
        self, prompt: str, aspect_ratio: str
    ) -> tuple[str, str] | None:
        """Generate an image.

        Returns:
            (mime_type, base64_data) of the first inline image, or None
            if the response carried no image.
        """
        pass

    @abstractmethod
    async def analyze_media(
        self,
        prompt: str,
        media_base64: str,
        mime_type: str,
        system_instruction: str | None = None,
    ) -> str:
        """Run a multimodal request over an image or video payload."""
        pass
