"""Tests for the script repository."""

import json

import pytest

from socialgod.history import ScriptRepository
from socialgod.models import CtaPlacement, ScriptContent, VideoDuration
from socialgod.storage import LocalStore


def make_script(script_id: str, **overrides) -> ScriptContent:
    data = dict(
        id=script_id,
        topic=f"tema {script_id}",
        title=f"Roteiro {script_id}",
        cta_placement=CtaPlacement.END,
        duration=VideoDuration.MEDIUM,
        script_scenes=[
            {"time_segment": "0-3s", "visual_cue": "Print", "audio_narration": "Olha isso"},
        ],
        hashtags=["#android"],
    )
    data.update(overrides)
    return ScriptContent(**data)


@pytest.fixture
def repo(store) -> ScriptRepository:
    repository = ScriptRepository(store)
    repository.load_all()
    return repository


class TestLoadAll:
    def test_empty_store(self, repo):
        assert repo.load_all() == []
        assert len(repo) == 0

    @pytest.mark.parametrize(
        "snapshot",
        [
            "{not json",
            '{"id": "1"}',
            '[{"id": "1"}]',
            '"just a string"',
        ],
    )
    def test_corrupt_snapshot_yields_empty(self, store, snapshot):
        store.set("zunetech_scripts", snapshot)
        repo = ScriptRepository(store)
        assert repo.load_all() == []

    def test_corrupt_snapshot_is_replaced_on_next_write(self, store):
        store.set("zunetech_scripts", "garbage")
        repo = ScriptRepository(store)
        repo.load_all()
        repo.prepend(make_script("a"))

        assert json.loads(store.get("zunetech_scripts"))[0]["id"] == "a"

    def test_custom_key(self, store):
        repo = ScriptRepository(store, key="other")
        repo.load_all()
        repo.prepend(make_script("a"))
        assert store.get("zunetech_scripts") is None
        assert store.get("other") is not None


class TestPrepend:
    def test_most_recent_first(self, repo):
        repo.prepend(make_script("a"))
        repo.prepend(make_script("b"))
        repo.prepend(make_script("c"))
        assert [s.id for s in repo.scripts] == ["c", "b", "a"]

    def test_persistence_round_trip(self, store, repo):
        scripts = [make_script("a"), make_script("b", generated_image_url="data:image/png;base64,AA")]
        for script in scripts:
            repo.prepend(script)

        reloaded = ScriptRepository(store).load_all()

        assert reloaded == list(reversed(scripts))

    def test_duplicate_id_rejected(self, repo):
        repo.prepend(make_script("a"))
        with pytest.raises(ValueError):
            repo.prepend(make_script("a", title="outro"))
        assert len(repo) == 1
        assert repo.get("a").title == "Roteiro a"

    def test_snapshot_is_json_list(self, store, repo):
        repo.prepend(make_script("a"))
        data = json.loads(store.get("zunetech_scripts"))
        assert isinstance(data, list)
        assert data[0]["cta_placement"] == "end"
        assert data[0]["duration"] == "medium"


class TestReplace:
    def test_replace_keeps_position_and_length(self, store, repo):
        for script_id in ("a", "b", "c"):
            repo.prepend(make_script(script_id))
        before = [s.id for s in repo.scripts]

        updated = repo.get("b").with_image("data:image/png;base64,QUJD")
        assert repo.replace("b", updated) is True

        assert [s.id for s in repo.scripts] == before
        assert len(repo) == 3
        assert repo.get("b").generated_image_url == "data:image/png;base64,QUJD"
        assert repo.get("a").generated_image_url is None
        assert repo.get("c").generated_image_url is None

        reloaded = ScriptRepository(store)
        reloaded.load_all()
        assert reloaded.get("b").generated_image_url == "data:image/png;base64,QUJD"

    def test_unknown_id_is_noop(self, store, repo):
        repo.prepend(make_script("a"))
        snapshot = store.get("zunetech_scripts")

        assert repo.replace("missing", make_script("missing")) is False
        assert [s.id for s in repo.scripts] == ["a"]
        assert store.get("zunetech_scripts") == snapshot

    def test_scripts_view_is_read_only(self, repo):
        repo.prepend(make_script("a"))
        view = repo.scripts
        assert isinstance(view, tuple)


class TestLocalStoreIsolation:
    def test_separate_data_dirs(self, tmp_path):
        first = ScriptRepository(LocalStore(tmp_path / "one"))
        second = ScriptRepository(LocalStore(tmp_path / "two"))
        first.load_all()
        second.load_all()

        first.prepend(make_script("a"))

        assert second.load_all() == []


class TestHostileSnapshots:
    @pytest.mark.parametrize("raw", [b"\xc3\x28", b"[\xff\xfe garbage"])
    def test_non_utf8_snapshot_yields_empty(self, store, raw):
        (store.root / "zunetech_scripts.json").write_bytes(raw)
        repo = ScriptRepository(store)
        assert repo.load_all() == []

        repo.prepend(make_script("a"))
        assert [s.id for s in ScriptRepository(store).load_all()] == ["a"]

    def test_records_from_earlier_console_are_kept(self, store):
        legacy = [
            {
                "id": "old-1",
                "topic": "bateria",
                "title": "Bateria viciada",
                "video_start_text": "PARE",
                "hook_visual_desc": "Bateria 1%",
                "veo_prompt": "macro",
                "alternative_hook": "alt",
                "cta_text": "Segue",
                "cta_placement": "Meio",
                "main_content": "Texto corrido do roteiro",
                "outro": "Tchau",
                "caption_seo": "legenda",
                "hashtags": ["#android"],
                "timestamp": "2025-11-02T14:30:00.000Z",
            },
            {
                "id": "old-2",
                "topic": "whatsapp",
                "title": "Memória cheia",
                "video_start_text": "",
                "hook_visual_desc": "",
                "veo_prompt": "",
                "alternative_hook": "",
                "cta_text": "",
                "cta_placement": "Fim",
                "main_content": "",
                "script_scenes": [
                    {"time_segment": "0-3s", "visual_cue": "Print", "audio_narration": "Olha"},
                ],
                "outro": "",
                "caption_seo": "",
                "hashtags": [],
                "timestamp": "2025-11-01T10:00:00.000Z",
                "duration": "10s",
            },
        ]
        store.set("zunetech_scripts", json.dumps(legacy))

        scripts = ScriptRepository(store).load_all()

        assert [s.id for s in scripts] == ["old-1", "old-2"]
        assert scripts[0].duration == VideoDuration.MEDIUM
        assert scripts[0].cta_placement == CtaPlacement.MIDDLE
        assert scripts[0].script_scenes == []
        assert scripts[1].duration == VideoDuration.SHORT
        assert scripts[1].cta_placement == CtaPlacement.END


class TestIdempotentLoad:
    def test_repeated_loads_are_equal(self, store, repo):
        repo.prepend(make_script("a"))
        repo.prepend(make_script("b", generated_image_url="data:image/png;base64,AA"))

        reloaded = ScriptRepository(store)
        first = reloaded.load_all()
        second = reloaded.load_all()

        assert first == second
        assert [s.model_dump() for s in first] == [s.model_dump() for s in second]
        assert [s.id for s in first] == ["b", "a"]
