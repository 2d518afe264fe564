"""Tests for core data models."""

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from socialgod.models import (
    CtaPlacement,
    PersonaProfile,
    ScriptContent,
    ScriptScene,
    TrendingTopic,
    VideoDuration,
)


def make_script(**overrides) -> ScriptContent:
    data = dict(
        id="abc-123",
        topic="bateria do Samsung",
        title="O segredo da bateria",
        cta_placement=CtaPlacement.END,
        duration=VideoDuration.SHORT,
        script_scenes=[
            ScriptScene(time_segment="0-3s", visual_cue="Print", audio_narration="Olha isso"),
        ],
        hashtags=["#android"],
    )
    data.update(overrides)
    return ScriptContent(**data)


class TestEnums:
    """Tests for option enums."""

    def test_duration_labels(self):
        assert VideoDuration.SHORT.label == "10s"
        assert VideoDuration.MEDIUM.label == "30s"
        assert VideoDuration.LONG.label == "60s"

    def test_cta_labels(self):
        assert CtaPlacement.START.label == "Inicio"
        assert CtaPlacement.MIDDLE.label == "Meio"
        assert CtaPlacement.END.label == "Fim"

    def test_enums_accept_plain_strings(self):
        assert VideoDuration("short") is VideoDuration.SHORT
        assert CtaPlacement("middle") is CtaPlacement.MIDDLE

    def test_unknown_duration_rejected(self):
        with pytest.raises(ValueError):
            VideoDuration("forever")


class TestPersonaProfile:
    """Tests for the persona model."""

    def test_context_memory_text_is_json(self):
        persona = PersonaProfile(
            project="P",
            system_instruction="Seja direto.",
            context_memory={"avatar": "Lucas", "rules": ["Nunca 'Oi gente'"]},
        )
        text = persona.context_memory_text()
        assert json.loads(text) == persona.context_memory
        assert "Nunca 'Oi gente'" in text

    def test_context_memory_text_is_deterministic(self):
        persona = PersonaProfile(
            project="P",
            system_instruction="x",
            context_memory={"b": 1, "a": {"nested": ["ç", "ã"]}},
        )
        assert persona.context_memory_text() == persona.context_memory_text()

    def test_version_is_optional(self):
        persona = PersonaProfile(project="P", system_instruction="x")
        assert persona.version == ""
        assert persona.context_memory == {}

    def test_missing_system_instruction_rejected(self):
        with pytest.raises(ValidationError):
            PersonaProfile(project="P")


class TestScriptContent:
    """Tests for the script model."""

    def test_defaults(self):
        script = make_script()
        assert script.generated_image_url is None
        assert script.main_content == ""
        assert script.timestamp.tzinfo is not None

    def test_with_image_keeps_identity(self):
        script = make_script(timestamp=datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc))
        updated = script.with_image("data:image/png;base64,AAA")

        assert updated.generated_image_url == "data:image/png;base64,AAA"
        assert updated.id == script.id
        assert updated.timestamp == script.timestamp
        assert script.generated_image_url is None

    def test_json_round_trip(self):
        script = make_script()
        restored = ScriptContent.model_validate(script.model_dump(mode="json"))
        assert restored == script

    def test_scene_requires_all_fields(self):
        with pytest.raises(ValidationError):
            ScriptScene(time_segment="0-3s", visual_cue="x")


class TestTrendingTopic:
    def test_fields(self):
        trend = TrendingTopic(title="WhatsApp", reason="Em alta")
        assert trend.title == "WhatsApp"
        assert trend.reason == "Em alta"


class TestLegacyRecords:
    """Records written by the earlier web console use display labels."""

    def test_labels_map_to_enum_values(self):
        script = make_script(duration="30s", cta_placement="Meio")
        assert script.duration == VideoDuration.MEDIUM
        assert script.cta_placement == CtaPlacement.MIDDLE

    @pytest.mark.parametrize("label", ["Inicio", "Início", "inicio"])
    def test_start_label_variants(self, label):
        assert make_script(cta_placement=label).cta_placement == CtaPlacement.START

    def test_missing_duration_defaults_to_medium(self):
        data = make_script().model_dump(mode="json")
        del data["duration"]
        assert ScriptContent.model_validate(data).duration == VideoDuration.MEDIUM

    def test_null_duration_and_scenes(self):
        script = make_script(duration=None, script_scenes=None, main_content="Texto corrido")
        assert script.duration == VideoDuration.MEDIUM
        assert script.script_scenes == []

    def test_unknown_label_still_rejected(self):
        with pytest.raises(ValidationError):
            make_script(cta_placement="Depois do gancho")
