"""Prompts, output schemas and fallback content for the generation client."""

from ..models import CtaPlacement, PersonaProfile, TrendingTopic, VideoDuration


# ============================================================================
# SCRIPT GENERATION
# ============================================================================

SCRIPT_REQUIRED_FIELDS = [
    "title",
    "video_start_text",
    "hook_visual_desc",
    "veo_prompt",
    "alternative_hook",
    "cta_text",
    "cta_placement",
    "script_scenes",
    "outro",
    "caption_seo",
    "hashtags",
]

SCENE_REQUIRED_FIELDS = ["time_segment", "visual_cue", "audio_narration"]

SCRIPT_RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "title": {"type": "STRING"},
        "video_start_text": {"type": "STRING"},
        "hook_visual_desc": {"type": "STRING"},
        "veo_prompt": {"type": "STRING"},
        "alternative_hook": {"type": "STRING"},
        "cta_text": {"type": "STRING"},
        "cta_placement": {"type": "STRING"},
        "script_scenes": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "time_segment": {"type": "STRING"},
                    "visual_cue": {"type": "STRING"},
                    "audio_narration": {"type": "STRING"},
                },
                "required": SCENE_REQUIRED_FIELDS,
            },
        },
        "main_content": {"type": "STRING"},
        "outro": {"type": "STRING"},
        "caption_seo": {"type": "STRING"},
        "hashtags": {"type": "ARRAY", "items": {"type": "STRING"}},
    },
    "required": SCRIPT_REQUIRED_FIELDS,
}

SCRIPT_SYSTEM_TEMPLATE = """{system_instruction}

CONTEXTO ZUNETECH:
{context_memory}

REGRAS:
- Duração: {duration}.
- CTA em: {cta_placement}.
- Idioma: {language}.
- Use ganchos de curiosidade agressivos."""

SCRIPT_USER_TEMPLATE = "Gere um roteiro épico sobre: {topic}"


def build_script_system_instruction(
    persona: PersonaProfile,
    duration: VideoDuration,
    cta_placement: CtaPlacement,
    language: str,
) -> str:
    """Embed the persona verbatim plus the per-request constraints."""
    return SCRIPT_SYSTEM_TEMPLATE.format(
        system_instruction=persona.system_instruction,
        context_memory=persona.context_memory_text(),
        duration=duration.label,
        cta_placement=cta_placement.label,
        language=language,
    )


def build_script_prompt(topic: str) -> str:
    return SCRIPT_USER_TEMPLATE.format(topic=topic)


# ============================================================================
# TRENDS
# ============================================================================

TRENDS_RESPONSE_SCHEMA = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "title": {"type": "STRING"},
            "reason": {"type": "STRING"},
        },
        "required": ["title", "reason"],
    },
}

TRENDS_PROMPT_TEMPLATE = (
    "Pesquise na web em português Brasil por: "
    "1. Problemas ou bugs recentes no WhatsApp, Instagram ou Android. "
    "2. Novas ferramentas de IA gratuitas úteis. "
    "3. Dores de quem tem celular lento ou bateria ruim. "
    "Extraia {count} temas para vídeos curtos e virais."
)

FALLBACK_TRENDS = [
    TrendingTopic(title="Libertar Memória WhatsApp", reason="Sempre em alta no Brasil"),
    TrendingTopic(title="IA Grátis para Fotos", reason="Tendência de produtividade"),
    TrendingTopic(title="Limpar Cache do Android", reason="Solução para travamentos"),
    TrendingTopic(title="Novas Vozes do TikTok", reason="Engajamento visual"),
]


def build_trends_prompt(count: int) -> str:
    return TRENDS_PROMPT_TEMPLATE.format(count=count)


# ============================================================================
# HOOK IMAGE
# ============================================================================

IMAGE_PROMPT_TEMPLATE = "Social media impact image: {description}. Aspect Ratio {aspect_ratio}."


def build_image_prompt(description: str, aspect_ratio: str) -> str:
    return IMAGE_PROMPT_TEMPLATE.format(description=description, aspect_ratio=aspect_ratio)


# ============================================================================
# MEDIA CRITIQUE
# ============================================================================

ANALYSIS_PROMPT_TEMPLATE = """Analise este material como o Social GOD analisaria antes da publicação.

Seja direto e brutalmente honesto. Avalie contra o público-alvo e as regras da persona:
1. O gancho prende nos primeiros 3 segundos?
2. O visual e o ritmo seguem as regras técnicas de edição?
3. O tema conversa com as dores e desejos do avatar?

Dê uma nota de 0 a 10 para o potencial de performance e termine com exatamente {count} sugestões concretas de melhoria, numeradas.

CONTEXTO DA PERSONA:
{context_memory}"""


def build_analysis_prompt(persona: PersonaProfile, count: int) -> str:
    return ANALYSIS_PROMPT_TEMPLATE.format(
        count=count,
        context_memory=persona.context_memory_text(),
    )
