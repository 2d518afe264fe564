"""Mock provider for tests and offline runs."""

import json
from dataclasses import dataclass, field
from typing import Any

from ..config import GeminiConfig
from ..exceptions import CredentialMissing
from .base import GenerativeProvider

# 1x1 transparent PNG
MOCK_IMAGE_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


def mock_script_payload() -> dict[str, Any]:
    """Return a realistic script payload shaped like the declared schema."""
    return {
        "title": "Seu celular está cheio de lixo invisível",
        "video_start_text": "PARE DE APAGAR SUAS FOTOS",
        "hook_visual_desc": "Close na tela de armazenamento marcando 99% cheio, alerta vermelho piscando",
        "veo_prompt": "Vertical 9:16 macro shot of an Android storage screen at 99%, red warning glow, fast zoom in",
        "alternative_hook": "Tem 5GB de lixo escondido no seu Android e ninguém te contou",
        "cta_text": "Segue pra não perder o próximo hack",
        "cta_placement": "Fim",
        "script_scenes": [
            {
                "time_segment": "0-3s",
                "visual_cue": "Print do armazenamento quase cheio com zoom digital",
                "audio_narration": "Seu celular não está cheio. Ele está sujo.",
            },
            {
                "time_segment": "3-7s",
                "visual_cue": "Tela de Configurações > Apps > WhatsApp > Armazenamento",
                "audio_narration": "Abre as configurações, vai em apps e procura o WhatsApp.",
            },
            {
                "time_segment": "7-10s",
                "visual_cue": "Dedo tocando em 'Limpar cache', contador de espaço subindo",
                "audio_narration": "Limpa o cache. Pronto, gigas de volta sem apagar nada.",
            },
        ],
        "main_content": "",
        "outro": "Manda pra aquele amigo que vive sem espaço.",
        "caption_seo": "Como liberar memória do celular sem apagar fotos #android #dicas",
        "hashtags": ["#android", "#whatsapp", "#celular", "#dicas"],
    }


def mock_trends_payload() -> list[dict[str, str]]:
    """Return a trend list shaped like the declared schema."""
    return [
        {"title": "WhatsApp parando em celulares antigos", "reason": "Notícia recente gerando dúvida"},
        {"title": "Bateria viciada no Android", "reason": "Dor recorrente do público"},
        {"title": "Removedor de fundo grátis com IA", "reason": "Ferramenta nova viralizando"},
        {"title": "Modo escondido de economia de dados", "reason": "Curiosidade alta nas buscas"},
    ]


@dataclass
class MockCall:
    """A recorded provider call."""

    method: str
    prompt: str
    system_instruction: str | None = None
    options: dict[str, Any] = field(default_factory=dict)


class MockProvider(GenerativeProvider):
    """Provider returning canned responses without network access.

    Responses can be overridden per instance; setting `error` makes every
    call raise it, which is how tests simulate transport failures.
    """

    def __init__(
        self,
        config: GeminiConfig | None = None,
        credential: bool = True,
        script_payload: dict[str, Any] | str | None = None,
        trends_payload: list[dict[str, Any]] | str | None = None,
        image: tuple[str, str] | None = ("image/png", MOCK_IMAGE_BASE64),
        critique: str = "Nota 6/10. O gancho demora demais para aparecer.",
        error: Exception | None = None,
    ):
        super().__init__(config or GeminiConfig(provider="mock"))
        self.credential = credential
        self.script_payload = script_payload if script_payload is not None else mock_script_payload()
        self.trends_payload = trends_payload if trends_payload is not None else mock_trends_payload()
        self.image = image
        self.critique = critique
        self.error = error
        self.calls: list[MockCall] = []

    @property
    def has_credential(self) -> bool:
        return self.credential

    def _record(self, method: str, prompt: str, system_instruction: str | None, **options) -> None:
        self.calls.append(MockCall(method, prompt, system_instruction, options))
        if not self.credential:
            raise CredentialMissing()
        if self.error is not None:
            raise self.error

    async def generate_text(
        self,
        prompt: str,
        system_instruction: str | None = None,
        max_output_tokens: int | None = None,
    ) -> str:
        self._record("generate_text", prompt, system_instruction, max_output_tokens=max_output_tokens)
        return "pong"

    async def generate_json(
        self,
        prompt: str,
        system_instruction: str | None = None,
        schema: dict[str, Any] | None = None,
        use_search: bool = False,
    ) -> str:
        self._record("generate_json", prompt, system_instruction, schema=schema, use_search=use_search)
        if schema is not None and schema.get("type") == "ARRAY":
            payload = self.trends_payload
        else:
            payload = self.script_payload
        if isinstance(payload, str):
            return payload
        return json.dumps(payload, ensure_ascii=False)

    async def generate_image(
        self, prompt: str, aspect_ratio: str
    ) -> tuple[str, str] | None:
        self._record("generate_image", prompt, None, aspect_ratio=aspect_ratio)
        return self.image

    async def analyze_media(
        self,
        prompt: str,
        media_base64: str,
        mime_type: str,
        system_instruction: str | None = None,
    ) -> str:
        self._record(
            "analyze_media", prompt, system_instruction,
            mime_type=mime_type, size=len(media_base64),
        )
        return self.critique
