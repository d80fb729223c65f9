# Path: core/storage/__init__.py
# Purpose: Package initializer for key-value persistence backends.
# Layer: core/storage.
# Details: Exposes the BoxStore interface with JSON-file and in-memory implementations.

from .base import BoxStore
from .json_store import JsonBoxStore
from .memory_store import MemoryBoxStore

__all__ = ["BoxStore", "JsonBoxStore", "MemoryBoxStore"]
