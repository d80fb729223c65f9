# Path: core/storage/json_store.py
# Purpose: Provide a file-backed BoxStore persisted as one JSON document per box.
# Layer: core/storage.
# Details: Writes go through a temporary file and os.replace so a crash never leaves a torn box.

from __future__ import annotations

import copy
import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

from .base import BoxStore, encode_box

logger = logging.getLogger(__name__)


class JsonBoxStore(BoxStore):
    """Box persisted at ``<directory>/<name>.json``.

    The file is read once at construction; every ``put`` rewrites it.
    """

    def __init__(self, directory: Path | str, name: str) -> None:
        self.name = name
        self.directory = Path(directory)
        self.path = self.directory / f"{name}.json"
        self._lock = threading.Lock()
        self._contents: Dict[str, Any] = self._read()

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        with self._lock:
            if key not in self._contents:
                return default
            return copy.deepcopy(self._contents[key])

    def put(self, key: str, value: Any) -> None:
        """Write the box with key set to value; on OSError the previous contents stay."""

        with self._lock:
            candidate = dict(self._contents)
            candidate[key] = copy.deepcopy(value)
            self._write(encode_box(candidate))
            self._contents = candidate

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return copy.deepcopy(self._contents)

    def _read(self) -> Dict[str, Any]:
        """Load the box file, treating a missing or corrupt file as an empty box."""

        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            logger.warning("Corrupt box file %s, starting empty", self.path, exc_info=True)
            return {}
        if not isinstance(payload, dict):
            logger.warning("Box file %s does not hold a mapping, starting empty", self.path)
            return {}
        return payload

    def _write(self, data: bytes) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(".json.tmp")
        try:
            tmp_path.write_bytes(data)
            os.replace(tmp_path, self.path)
        except OSError:
            if tmp_path.exists():
                tmp_path.unlink()
            raise
