"""Test best-effort inventory persistence."""

from unittest.mock import patch

import pytest

from src.storage import (
    INVENTORY_KEY,
    KeyValueStore,
    MemoryStore,
    JsonFileStore,
    FallbackStore,
    default_store,
    load_inventory,
    save_inventory,
)


class TestKeyValueStore:
    """Test the store interface."""

    def test_interface_cannot_be_instantiated(self):
        """The base store has no storage of its own."""
        with pytest.raises(TypeError):
            KeyValueStore()


class TestMemoryStore:
    """Test the in-process store."""

    def test_round_trip(self):
        """A saved value is read back."""
        store = MemoryStore()
        assert store.set("k", "v") is True
        assert store.get("k") == "v"

    def test_missing_key(self):
        """Unknown keys read as None."""
        assert MemoryStore().get("nope") is None


class TestJsonFileStore:
    """Test the JSON file store."""

    def test_creates_file_and_directories(self, tmp_path):
        """set creates the parent directories and the file."""
        path = tmp_path / "a" / "b" / "store.json"
        store = JsonFileStore(path=path)
        assert store.set(INVENTORY_KEY, "A:3 B") is True
        assert path.exists()
        assert JsonFileStore(path=path).get(INVENTORY_KEY) == "A:3 B"

    def test_keeps_other_keys(self, tmp_path):
        """Writing one key keeps the others."""
        store = JsonFileStore(path=tmp_path / "store.json")
        store.set("one", "1")
        store.set("two", "2")
        assert store.get("one") == "1"
        assert store.get("two") == "2"

    def test_missing_file(self, tmp_path):
        """A store whose file does not exist reads None."""
        assert JsonFileStore(path=tmp_path / "absent.json").get("k") is None

    def test_corrupt_file(self, tmp_path):
        """Undecodable content reads as None and is replaced on write."""
        path = tmp_path / "store.json"
        path.write_text("{not json")
        store = JsonFileStore(path=path)
        assert store.get("k") is None
        assert store.set("k", "v") is True
        assert store.get("k") == "v"

    def test_non_object_file(self, tmp_path):
        """A JSON file holding a list is treated as empty."""
        path = tmp_path / "store.json"
        path.write_text("[1, 2]")
        assert JsonFileStore(path=path).get("k") is None

    def test_non_string_value(self, tmp_path):
        """Values that are not strings read as None."""
        path = tmp_path / "store.json"
        path.write_text('{"k": 5}')
        assert JsonFileStore(path=path).get("k") is None

    def test_unwritable_location(self, tmp_path):
        """A failed write returns False instead of raising."""
        blocker = tmp_path / "file"
        blocker.write_text("")
        store = JsonFileStore(path=blocker / "store.json")
        assert store.set("k", "v") is False
        assert store.get("k") is None


class TestFallbackStore:
    """Test chained stores."""

    def test_write_goes_to_first_accepting_store(self, tmp_path):
        """When the primary fails, the fallback receives the value."""
        blocker = tmp_path / "file"
        blocker.write_text("")
        primary = JsonFileStore(path=blocker / "store.json")
        fallback = MemoryStore()
        store = FallbackStore.chain(primary, fallback)

        assert store.set("k", "v") is True
        assert fallback.get("k") == "v"
        assert store.get("k") == "v"

    def test_primary_wins_on_read(self):
        """Reads prefer the first store holding a value."""
        primary = MemoryStore(data={"k": "primary"})
        fallback = MemoryStore(data={"k": "fallback"})
        assert FallbackStore.chain(primary, fallback).get("k") == "primary"

    def test_primary_only_written(self):
        """A successful primary write does not touch the fallback."""
        primary, fallback = MemoryStore(), MemoryStore()
        FallbackStore.chain(primary, fallback).set("k", "v")
        assert fallback.get("k") is None

    def test_chain_keeps_store_instances(self):
        """The chained stores are the very objects passed in."""
        primary, fallback = MemoryStore(), MemoryStore()
        store = FallbackStore.chain(primary, fallback)
        assert store.stores[0] is primary
        assert store.stores[1] is fallback

    def test_all_unavailable(self, tmp_path):
        """With every store failing, set is False and get is None."""
        blocker = tmp_path / "file"
        blocker.write_text("")
        store = FallbackStore.chain(
            JsonFileStore(path=blocker / "a.json"),
            JsonFileStore(path=blocker / "b.json"),
        )
        assert store.set("k", "v") is False
        assert store.get("k") is None


class TestInventoryHelpers:
    """Test the inventory key helpers."""

    def test_save_and_load(self):
        """Inventory text is stored under the inventory key."""
        store = MemoryStore()
        assert save_inventory(store, "A:2 \\::1") is True
        assert store.data == {INVENTORY_KEY: "A:2 \\::1"}
        assert load_inventory(store) == "A:2 \\::1"

    def test_default_store_uses_given_path(self, tmp_path):
        """The primary store of default_store is the given path."""
        store = default_store(tmp_path / "store.json")
        assert store.stores[0].path == tmp_path / "store.json"
        assert len(store.stores) == 2

    def test_default_store_under_home(self, tmp_path):
        """Without a path the primary lives under the home directory."""
        with patch("src.storage.store.Path.home", return_value=tmp_path):
            store = default_store()
        assert store.stores[0].path == tmp_path / ".config" / "tile-checker" / "store.json"
