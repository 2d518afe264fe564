"""Tests for the local key-value store."""

import pytest

from socialgod.exceptions import PersistenceCorrupt
from socialgod.storage import LocalStore


class TestLocalStore:
    def test_missing_key_returns_none(self, store):
        assert store.get("never_written") is None

    def test_set_then_get(self, store):
        store.set("zunetech_scripts", '[{"id": "1"}]')
        assert store.get("zunetech_scripts") == '[{"id": "1"}]'

    def test_overwrite(self, store):
        store.set("k", "one")
        store.set("k", "two")
        assert store.get("k") == "two"

    def test_unicode_survives(self, store):
        store.set("k", "Ação rápida 🚀")
        assert store.get("k") == "Ação rápida 🚀"

    def test_no_temp_file_left_behind(self, store):
        store.set("k", "value")
        assert sorted(p.name for p in store.root.iterdir()) == ["k.json"]

    def test_persists_across_instances(self, tmp_path):
        LocalStore(tmp_path / "s").set("k", "value")
        assert LocalStore(tmp_path / "s").get("k") == "value"

    def test_delete(self, store):
        store.set("k", "value")
        store.delete("k")
        assert store.get("k") is None
        store.delete("k")

    @pytest.mark.parametrize("key", ["", "../escape", "a/b", "with space"])
    def test_invalid_keys_rejected(self, store, key):
        with pytest.raises(ValueError):
            store.set(key, "x")

    def test_non_utf8_bytes_are_corrupt(self, store):
        (store.root / "k.json").write_bytes(b"\xc3\x28")
        with pytest.raises(PersistenceCorrupt) as exc_info:
            store.get("k")
        assert exc_info.value.key == "k"
