"""Inventory text persistence for tile-checker."""

from .store import (
    INVENTORY_KEY,
    KeyValueStore,
    MemoryStore,
    JsonFileStore,
    FallbackStore,
    default_store,
    load_inventory,
    save_inventory,
)

__all__ = [
    "INVENTORY_KEY",
    "KeyValueStore",
    "MemoryStore",
    "JsonFileStore",
    "FallbackStore",
    "default_store",
    "load_inventory",
    "save_inventory",
]
