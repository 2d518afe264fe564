"""Generative backend providers."""

from ..config import Config
from .base import GenerativeProvider
from .gemini import GeminiProvider
from .mock import MockProvider


def get_provider(config: Config | None = None) -> GenerativeProvider:
    """Get the appropriate provider based on configuration.

    Args:
        config: Configuration object. If None, loads default config.

    Returns:
        A provider instance.

    Raises:
        ValueError: If provider name is not recognized.
    """
    if config is None:
        from ..config import load_config

        config = load_config()

    provider_name = config.gemini.provider.lower()

    if provider_name == "mock":
        return MockProvider(config.gemini)
    elif provider_name == "gemini":
        return GeminiProvider(config.gemini)
    else:
        raise ValueError(f"Unknown provider: {provider_name}")


__all__ = ["GenerativeProvider", "GeminiProvider", "MockProvider", "get_provider"]
