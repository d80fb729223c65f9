# Path: core/storage/base.py
# Purpose: Define the BoxStore interface for named key-value collections.
# Layer: core/storage.
# Details: A box holds JSON-compatible values under string keys; the index lives in one box under one key.

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class BoxStore(ABC):
    """Abstract base class for pluggable key-value persistence backends."""

    name: str

    @abstractmethod
    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Return the value stored under key, or default when absent."""

    @abstractmethod
    def put(self, key: str, value: Any) -> None:
        """Store value under key and make it durable for the backend."""

    @abstractmethod
    def snapshot(self) -> Dict[str, Any]:
        """Return a copy of every key and value currently held."""

    def serialize(self) -> bytes:
        """Encode the box deterministically; identical contents give identical bytes."""

        return encode_box(self.snapshot())


def encode_box(contents: Dict[str, Any]) -> bytes:
    return json.dumps(contents, indent=2, ensure_ascii=False, sort_keys=True).encode("utf-8")
