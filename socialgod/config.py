"""Configuration loading and management."""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class GeminiConfig(BaseModel):
    """Generative backend configuration."""

    provider: str = "gemini"
    text_model: str = "gemini-3-flash-preview"
    image_model: str = "gemini-2.5-flash-image"
    api_key_env: str = "GEMINI_API_KEY"
    fallback_api_key_env: str = "API_KEY"
    timeout_seconds: float = 60.0
    image_aspect_ratio: str = "9:16"
    language: str = "Português (Brasil)"
    trend_count: int = 4
    suggestion_count: int = 3

    def resolve_api_key(self) -> str:
        """Read the API key from the environment.

        Blank values and the literal string "undefined" count as missing.
        """
        for name in (self.api_key_env, self.fallback_api_key_env):
            key = (os.getenv(name) or "").strip()
            if key and key != "undefined":
                return key
        return ""


class PathsConfig(BaseModel):
    """Path configuration."""

    data_dir: str = "data"


class StorageConfig(BaseModel):
    """Keys under which snapshots are persisted."""

    scripts_key: str = "zunetech_scripts"
    persona_key: str = "zunetech_persona"


class Config(BaseModel):
    """Main application configuration."""

    gemini: GeminiConfig = Field(default_factory=GeminiConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "Config":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            return cls()

        return cls(**data)

    def to_yaml(self, path: Path | str) -> None:
        """Save configuration to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = self.model_dump()
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)


def load_config(config_path: Path | str | None = None) -> Config:
    """Load configuration from file or use defaults."""
    if config_path is None:
        # Look for config.yaml in current directory or project root
        candidates = [Path("config.yaml"), Path(__file__).parent.parent / "config.yaml"]
        for candidate in candidates:
            if candidate.exists():
                config_path = candidate
                break

    if config_path is not None:
        return Config.from_yaml(config_path)

    return Config()
