"""Integration tests that make real Gemini calls.

These tests verify that the live backend honours the declared schemas and
that the persona actually shapes the output. They cost money and need
GEMINI_API_KEY, so they only run when explicitly requested.

Run with: pytest tests/test_integration_llm.py -v --run-llm-tests
Skip with: pytest tests/test_integration_llm.py -v (will skip by default)
"""

import base64

import pytest

from socialgod.config import load_config
from socialgod.gate import CredentialGate
from socialgod.generation import GenerationClient
from socialgod.models import CtaPlacement, VideoDuration
from socialgod.persona import default_persona
from socialgod.providers import GeminiProvider
from socialgod.providers.mock import MOCK_IMAGE_BASE64

# Mark all tests in this module to require --run-llm-tests flag
pytestmark = pytest.mark.llm_integration


@pytest.fixture
def client():
    config = load_config()
    config.gemini.provider = "gemini"
    provider = GeminiProvider(config.gemini)
    if not provider.has_credential:
        pytest.skip("GEMINI_API_KEY not set")
    return GenerationClient(config, provider)


class TestLiveBackend:
    @pytest.mark.asyncio
    async def test_gate_probe(self, client):
        gate = CredentialGate(client.provider)
        assert await gate.check_capability() is True

    @pytest.mark.asyncio
    async def test_script_is_complete(self, client):
        script = await client.generate_script(
            "limpar memória do celular",
            default_persona(),
            VideoDuration.SHORT,
            CtaPlacement.MIDDLE,
        )

        assert script.title
        assert script.hook_visual_desc
        assert script.script_scenes, "Expected at least one scene"
        for scene in script.script_scenes:
            assert scene.time_segment and scene.audio_narration
        assert all(tag.startswith("#") for tag in script.hashtags)

    @pytest.mark.asyncio
    async def test_trends_are_not_fallback(self, client):
        trends = await client.fetch_trends()
        assert 1 <= len(trends) <= client.config.gemini.trend_count
        assert all(t.title and t.reason for t in trends)

    @pytest.mark.asyncio
    async def test_hook_image(self, client):
        image = await client.generate_hook_image(
            "Close na tela de armazenamento de um Android marcando 99% cheio"
        )
        assert image.startswith("data:image/")
        assert base64.b64decode(image.split(",", 1)[1])

    @pytest.mark.asyncio
    async def test_media_critique(self, client):
        critique = await client.analyze_media(MOCK_IMAGE_BASE64, "image/png", default_persona())
        assert len(critique) > 20
