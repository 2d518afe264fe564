"""
Core data models used across the application.

Includes models for:
- The persona document that conditions every generation request
- Generated scripts and their scenes (the unit of persistence)
- Ephemeral trend suggestions
"""

import json
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


# ============================================================================
# GENERATION OPTIONS
# ============================================================================


class VideoDuration(str, Enum):
    """Requested video length category."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"

    @property
    def label(self) -> str:
        """Length label used inside prompts."""
        return _DURATION_LABELS[self]


class CtaPlacement(str, Enum):
    """Where the call-to-action lands inside the video."""

    START = "start"
    MIDDLE = "middle"
    END = "end"

    @property
    def label(self) -> str:
        """Placement label used inside prompts."""
        return _CTA_LABELS[self]


_DURATION_LABELS = {
    VideoDuration.SHORT: "10s",
    VideoDuration.MEDIUM: "30s",
    VideoDuration.LONG: "60s",
}

_CTA_LABELS = {
    CtaPlacement.START: "Inicio",
    CtaPlacement.MIDDLE: "Meio",
    CtaPlacement.END: "Fim",
}


def _from_label(value: Any, labels: dict) -> Any:
    """Map a display label back to its enum member; anything else passes through."""
    if isinstance(value, Enum) or not isinstance(value, str):
        return value
    wanted = value.strip().lower().replace("í", "i")
    for member, label in labels.items():
        if label.lower() == wanted:
            return member
    return value


# ============================================================================
# PERSONA
# ============================================================================


class PersonaProfile(BaseModel):
    """
    Configuration document that accompanies every generation request.

    `context_memory` is an open-ended document (audience description,
    performance history, content log, production rules). Its shape is not
    enforced; it is only ever embedded into prompts as text.
    """

    project: str
    version: str = ""
    system_instruction: str
    context_memory: dict[str, Any] = Field(default_factory=dict)

    def context_memory_text(self) -> str:
        """Serialize context memory to text, deterministically."""
        return json.dumps(self.context_memory, ensure_ascii=False, indent=2)


# ============================================================================
# TRENDS
# ============================================================================


class TrendingTopic(BaseModel):
    """A topic suggestion used to pre-fill the topic input. Never persisted."""

    title: str
    reason: str


# ============================================================================
# SCRIPTS
# ============================================================================


class ScriptScene(BaseModel):
    """One timed beat of a script."""

    time_segment: str = Field(description="Advisory offset label, e.g. '0-3s'")
    visual_cue: str = Field(description="What appears on screen")
    audio_narration: str = Field(description="What is spoken")


class ScriptContent(BaseModel):
    """A generated short-video script."""

    id: str
    topic: str
    title: str
    video_start_text: str = ""
    hook_visual_desc: str = ""
    veo_prompt: str = ""
    alternative_hook: str = ""
    cta_text: str = ""
    cta_placement: CtaPlacement
    main_content: str = ""  # flat body of records written before script_scenes existed
    script_scenes: list[ScriptScene] = Field(default_factory=list)
    outro: str = ""
    caption_seo: str = ""
    hashtags: list[str] = Field(default_factory=list)
    generated_image_url: Optional[str] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    duration: VideoDuration = VideoDuration.MEDIUM

    @field_validator("duration", mode="before")
    @classmethod
    def duration_from_label(cls, value: Any) -> Any:
        """Older records store the label ('30s') instead of the value."""
        if value is None:
            return VideoDuration.MEDIUM
        return _from_label(value, _DURATION_LABELS)

    @field_validator("cta_placement", mode="before")
    @classmethod
    def cta_from_label(cls, value: Any) -> Any:
        """Older records store the label ('Meio') instead of the value."""
        return _from_label(value, _CTA_LABELS)

    @field_validator("script_scenes", "hashtags", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def with_image(self, image_url: str) -> "ScriptContent":
        """Return a copy with the hook image attached."""
        return self.model_copy(update={"generated_image_url": image_url})
