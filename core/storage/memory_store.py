# Path: core/storage/memory_store.py
# Purpose: Provide an in-memory BoxStore.
# Layer: core/storage.
# Details: Used by tests and the demo harness; values are deep-copied so callers cannot alias stored data.

from __future__ import annotations

import copy
from typing import Any, Dict, Optional

from .base import BoxStore


class MemoryBoxStore(BoxStore):
    """Box kept in a process-local dictionary."""

    def __init__(self, name: str = "imagesBox", contents: Optional[Dict[str, Any]] = None) -> None:
        self.name = name
        self._contents: Dict[str, Any] = copy.deepcopy(contents) if contents else {}

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        if key not in self._contents:
            return default
        return copy.deepcopy(self._contents[key])

    def put(self, key: str, value: Any) -> None:
        self._contents[key] = copy.deepcopy(value)

    def snapshot(self) -> Dict[str, Any]:
        return copy.deepcopy(self._contents)
