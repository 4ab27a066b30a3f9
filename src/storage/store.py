"""
Best-effort key-value persistence for the inventory text.

Stores never raise: a failed read returns None and a failed write returns
False, so an unavailable disk can never change the outcome of a check.
"""

import json
import tempfile
from abc import abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


INVENTORY_KEY = "tileChecker.singleTiles"

STORE_DIR_NAME = "tile-checker"


class KeyValueStore(BaseModel):
    """Interface shared by all stores."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> bool:
        ...


class MemoryStore(KeyValueStore):
    """In-process store, used for tests and when persistence is disabled."""
    data: Dict[str, str] = Field(default_factory=dict)

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> bool:
        self.data[key] = value
        return True


class JsonFileStore(KeyValueStore):
    """A JSON object on disk, rewritten on every set."""
    path: Path

    def _load(self) -> Dict[str, str]:
        with open(self.path) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Store file {self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        try:
            value = self._load().get(key)
        except (OSError, ValueError):
            return None
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> bool:
        try:
            data = self._load()
        except (OSError, ValueError):
            data = {}
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump(data, f, indent=2)
        except OSError:
            return False
        return True


class FallbackStore(KeyValueStore):
    """
    Chain of stores tried in order.

    Writes go to the first store that accepts them; reads return the first
    value found.
    """
    stores: List[KeyValueStore] = Field(default_factory=list)

    @classmethod
    def chain(cls, *stores: KeyValueStore) -> "FallbackStore":
        """Build a fallback chain from stores in priority order."""
        return cls(stores=list(stores))

    def get(self, key: str) -> Optional[str]:
        for store in self.stores:
            value = store.get(key)
            if value is not None:
                return value
        return None

    def set(self, key: str, value: str) -> bool:
        return any(store.set(key, value) for store in self.stores)


def default_store(path: Optional[Path] = None) -> FallbackStore:
    """Primary JSON file in the user's config dir, with a temp-dir file as fallback."""
    if path is None:
        path = Path.home() / ".config" / STORE_DIR_NAME / "store.json"
    fallback = Path(tempfile.gettempdir()) / f"{STORE_DIR_NAME}-store.json"
    return FallbackStore.chain(JsonFileStore(path=Path(path)), JsonFileStore(path=fallback))


def load_inventory(store: KeyValueStore) -> Optional[str]:
    """Last saved inventory text, if any."""
    return store.get(INVENTORY_KEY)


def save_inventory(store: KeyValueStore, text: str) -> bool:
    """Persist the inventory text. Returns False if no store accepted it."""
    return store.set(INVENTORY_KEY, text)
