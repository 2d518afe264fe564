"""Gemini provider built on the google-genai SDK."""

import asyncio
import base64
from typing import Any, Awaitable, TypeVar

import httpx
from google import genai
from google.genai import errors, types

from ..config import GeminiConfig
from ..exceptions import ConnectionFailed, CredentialMissing
from .base import GenerativeProvider

T = TypeVar("T")

# Status codes the API uses when the key itself is the problem
REJECTED_KEY_CODES = {401, 403, 404}


class GeminiProvider(GenerativeProvider):
    """Talks to the Gemini API.

    Every call is bounded by `config.timeout_seconds`; a timeout surfaces as
    ConnectionFailed, the same as any transport error.
    """

    def __init__(self, config: GeminiConfig, api_key: str | None = None):
        """Initialize the provider.

        Args:
            config: Gemini configuration
            api_key: Explicit key. If None, read from the environment.
        """
        super().__init__(config)
        self.api_key = api_key if api_key is not None else config.resolve_api_key()
        self._client = None

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)

    @property
    def client(self) -> genai.Client:
        """Lazy-load the SDK client."""
        if not self.api_key:
            raise CredentialMissing()
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate_text(
        self,
        prompt: str,
        system_instruction: str | None = None,
        max_output_tokens: int | None = None,
    ) -> str:
        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            max_output_tokens=max_output_tokens,
        )
        response = await self._call(
            self.client.aio.models.generate_content(
                model=self.config.text_model,
                contents=prompt,
                config=config,
            )
        )
        return response.text or ""

    async def generate_json(
        self,
        prompt: str,
        system_instruction: str | None = None,
        schema: dict[str, Any] | None = None,
        use_search: bool = False,
    ) -> str:
        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            response_mime_type="application/json",
            response_schema=schema,
            tools=[types.Tool(google_search=types.GoogleSearch())] if use_search else None,
        )
        response = await self._call(
            self.client.aio.models.generate_content(
                model=self.config.text_model,
                contents=prompt,
                config=config,
            )
        )
        return response.text or ""

    async def generate_image(
        self, prompt: str, aspect_ratio: str
    ) -> tuple[str, str] | None:
        config = types.GenerateContentConfig(
            image_config=types.ImageConfig(aspect_ratio=aspect_ratio),
        )
        response = await self._call(
            self.client.aio.models.generate_content(
                model=self.config.image_model,
                contents=[types.Part.from_text(text=prompt)],
                config=config,
            )
        )

        candidates = response.candidates or []
        if not candidates or candidates[0].content is None:
            return None

        for part in candidates[0].content.parts or []:
            if part.inline_data and part.inline_data.data:
                data = part.inline_data.data
                if isinstance(data, bytes):
                    data = base64.b64encode(data).decode("utf-8")
                return part.inline_data.mime_type or "image/png", data

        return None

    async def analyze_media(
        self,
        prompt: str,
        media_base64: str,
        mime_type: str,
        system_instruction: str | None = None,
    ) -> str:
        media = types.Part.from_bytes(
            data=base64.b64decode(media_base64),
            mime_type=mime_type,
        )
        config = types.GenerateContentConfig(system_instruction=system_instruction)
        response = await self._call(
            self.client.aio.models.generate_content(
                model=self.config.text_model,
                contents=[media, types.Part.from_text(text=prompt)],
                config=config,
            )
        )
        return response.text or ""

    async def _call(self, request: Awaitable[T]) -> T:
        """Await an SDK request, translating failures into ConnectionFailed."""
        try:
            return await asyncio.wait_for(request, timeout=self.config.timeout_seconds)
        except asyncio.TimeoutError:
            raise ConnectionFailed(
                f"Gemini did not answer within {self.config.timeout_seconds:.0f}s"
            )
        except errors.ClientError as e:
            rejected = e.code in REJECTED_KEY_CODES or "Requested entity was not found" in str(e)
            raise ConnectionFailed(f"Gemini rejected the request: {e}", credential_rejected=rejected)
        except errors.APIError as e:
            raise ConnectionFailed(f"Gemini API error: {e}")
        except httpx.HTTPError as e:
            raise ConnectionFailed(f"Network error talking to Gemini: {e}")
