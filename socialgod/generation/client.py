"""
Generation client - the only path to the generative backend.

Every operation follows the same shape: build the request, call the
provider once, validate the response into typed records. No retries are
performed here; retrying is the caller's decision.
"""

import base64
import json
import mimetypes
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any
from uuid import uuid4

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from ..config import Config, load_config
from ..exceptions import CredentialMissing, GenerationFailed
from ..models import (
    CtaPlacement,
    PersonaProfile,
    ScriptContent,
    TrendingTopic,
    VideoDuration,
)
from ..providers import GenerativeProvider, get_provider
from .prompts import (
    FALLBACK_TRENDS,
    SCENE_REQUIRED_FIELDS,
    SCRIPT_REQUIRED_FIELDS,
    SCRIPT_RESPONSE_SCHEMA,
    TRENDS_RESPONSE_SCHEMA,
    build_analysis_prompt,
    build_image_prompt,
    build_script_prompt,
    build_script_system_instruction,
    build_trends_prompt,
)

console = Console(stderr=True)


class GenerationClient:
    """Builds requests, calls the provider and validates the results."""

    def __init__(
        self,
        config: Config | None = None,
        provider: GenerativeProvider | None = None,
    ):
        """Initialize the client.

        Args:
            config: Configuration object. If None, loads default config.
            provider: Provider instance. If None, built from config.
        """
        self.config = config or load_config()
        self.provider = provider or get_provider(self.config)

    # ------------------------------------------------------------------
    # Script generation
    # ------------------------------------------------------------------

    async def generate_script(
        self,
        topic: str,
        persona: PersonaProfile,
        duration: VideoDuration = VideoDuration.MEDIUM,
        cta_placement: CtaPlacement = CtaPlacement.MIDDLE,
    ) -> ScriptContent:
        """Generate a structured script for a topic.

        Args:
            topic: The user's topic; must not be blank
            persona: Persona embedded into the system instruction
            duration: Requested length category
            cta_placement: Requested CTA position

        Returns:
            A new ScriptContent. `topic`, `duration` and `cta_placement` are
            the requested values, whatever the model echoed back.

        Raises:
            ValueError: If the topic is blank
            CredentialMissing: If no credential is configured
            ConnectionFailed: On transport, auth or timeout failure
            GenerationFailed: If the response is not a complete script
        """
        if not topic or not topic.strip():
            raise ValueError("Topic must not be empty")

        duration = VideoDuration(duration)
        cta_placement = CtaPlacement(cta_placement)
        gemini = self.config.gemini

        system_instruction = build_script_system_instruction(
            persona, duration, cta_placement, gemini.language
        )
        raw = await self.provider.generate_json(
            build_script_prompt(topic),
            system_instruction=system_instruction,
            schema=SCRIPT_RESPONSE_SCHEMA,
        )

        data = self._parse_json_response(raw, "script")
        return self._parse_script_result(data, topic, duration, cta_placement)

    def _parse_script_result(
        self,
        data: Any,
        topic: str,
        duration: VideoDuration,
        cta_placement: CtaPlacement,
    ) -> ScriptContent:
        """Validate a decoded payload and turn it into a ScriptContent."""
        if not isinstance(data, dict):
            raise GenerationFailed("script", f"Expected a JSON object, got {type(data).__name__}")

        missing = [name for name in SCRIPT_REQUIRED_FIELDS if name not in data]
        if missing:
            raise GenerationFailed("script", f"Missing required fields: {', '.join(missing)}")

        scenes = data["script_scenes"]
        if not isinstance(scenes, list):
            raise GenerationFailed("script", "script_scenes is not a list")
        for idx, scene in enumerate(scenes):
            if not isinstance(scene, dict):
                raise GenerationFailed("script", f"Scene {idx + 1} is not an object")
            missing = [name for name in SCENE_REQUIRED_FIELDS if name not in scene]
            if missing:
                raise GenerationFailed(
                    "script", f"Scene {idx + 1} missing fields: {', '.join(missing)}"
                )

        hashtags = data["hashtags"]
        if isinstance(hashtags, str):
            hashtags = hashtags.split()

        try:
            return ScriptContent(
                id=str(uuid4()),
                topic=topic,
                title=data["title"],
                video_start_text=data["video_start_text"],
                hook_visual_desc=data["hook_visual_desc"],
                veo_prompt=data["veo_prompt"],
                alternative_hook=data["alternative_hook"],
                cta_text=data["cta_text"],
                cta_placement=cta_placement,
                main_content=data.get("main_content") or "",
                script_scenes=scenes,
                outro=data["outro"],
                caption_seo=data["caption_seo"],
                hashtags=hashtags,
                timestamp=datetime.now(timezone.utc),
                duration=duration,
            )
        except ValidationError as e:
            raise GenerationFailed("script", f"Malformed script payload: {e}")

    # ------------------------------------------------------------------
    # Trends
    # ------------------------------------------------------------------

    async def fetch_trends(self) -> list[TrendingTopic]:
        """Fetch current topic suggestions using web search.

        Never raises. Any failure yields the static fallback list, since
        suggestions are a convenience and must not make the console look
        broken.
        """
        count = self.config.gemini.trend_count
        if not self.provider.has_credential:
            return self._fallback_trends()

        try:
            raw = await self.provider.generate_json(
                build_trends_prompt(count),
                schema=TRENDS_RESPONSE_SCHEMA,
                use_search=True,
            )
            data = self._parse_json_response(raw, "trends")
            trends = [TrendingTopic(**item) for item in data]
        except Exception as e:
            console.print(f"[yellow]Trend lookup failed, using fallback list: {escape(str(e))}[/yellow]")
            return self._fallback_trends()

        if not trends:
            return self._fallback_trends()

        return trends[:count]

    def _fallback_trends(self) -> list[TrendingTopic]:
        return [t.model_copy() for t in FALLBACK_TRENDS]

    # ------------------------------------------------------------------
    # Hook image
    # ------------------------------------------------------------------

    async def generate_hook_image(self, visual_description: str) -> str:
        """Generate a portrait image for a hook description.

        Returns:
            A data URI, or "" if no credential is configured.

        Raises:
            ConnectionFailed: On transport, auth or timeout failure
            GenerationFailed: If the response carried no image
        """
        if not self.provider.has_credential:
            return ""

        aspect_ratio = self.config.gemini.image_aspect_ratio
        image = await self.provider.generate_image(
            build_image_prompt(visual_description, aspect_ratio),
            aspect_ratio,
        )
        if image is None:
            raise GenerationFailed("image", "Response contained no image payload")

        mime_type, data = image
        return f"data:{mime_type};base64,{data}"

    # ------------------------------------------------------------------
    # Media critique
    # ------------------------------------------------------------------

    async def analyze_media(
        self,
        media_base64: str,
        mime_type: str,
        persona: PersonaProfile,
    ) -> str:
        """Critique an image or video against the persona's audience and rules.

        Raises:
            CredentialMissing: If no credential is configured
            ConnectionFailed: On transport, auth or timeout failure
            GenerationFailed: If the backend returned no critique
        """
        if not self.provider.has_credential:
            raise CredentialMissing()

        critique = await self.provider.analyze_media(
            build_analysis_prompt(persona, self.config.gemini.suggestion_count),
            media_base64,
            mime_type,
            system_instruction=persona.system_instruction,
        )
        if not critique.strip():
            raise GenerationFailed("analysis", "Empty critique returned")
        return critique.strip()

    async def analyze_media_file(self, path: Path | str, persona: PersonaProfile) -> str:
        """Read a media file and critique it."""
        path = Path(path)
        mime_type, _ = mimetypes.guess_type(path.name)
        if mime_type is None:
            raise ValueError(f"Cannot determine media type of {path.name}")

        media_base64 = base64.b64encode(path.read_bytes()).decode("utf-8")
        return await self.analyze_media(media_base64, mime_type, persona)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _parse_json_response(self, response: str, operation: str) -> Any:
        """Parse JSON from a response, tolerating markdown code fences.

        Raises:
            GenerationFailed: If the text holds no valid JSON
        """
        text = (response or "").strip()
        if not text:
            raise GenerationFailed(operation, "Empty response")

        json_block_pattern = r"```(?:json)?\s*([\s\S]*?)```"
        matches = re.findall(json_block_pattern, text)
        if matches:
            text = matches[0].strip()

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise GenerationFailed(
                operation, f"Failed to parse JSON response: {e}\nResponse: {response[:500]}"
            )
