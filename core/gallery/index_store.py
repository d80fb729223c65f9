# Path: core/gallery/index_store.py
# Purpose: Own the authoritative set of indexed images and keep it mirrored in a BoxStore.
# Layer: core/gallery.
# Details: Every mutation persists before returning; reads hand out tuples so callers cannot mutate the set.

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple

from core.models.domain import ImageEntry
from core.storage.base import BoxStore

logger = logging.getLogger(__name__)

IMAGES_KEY = "images"


class IndexStore:
    """In-memory index of ImageEntry objects keyed by path."""

    def __init__(self, box: BoxStore, key: str = IMAGES_KEY) -> None:
        self.box = box
        self.key = key
        self._entries: Dict[str, ImageEntry] = {}
        self._lock = threading.RLock()

    @property
    def images(self) -> Tuple[ImageEntry, ...]:
        with self._lock:
            return tuple(self._entries.values())

    def get(self, path: str) -> Optional[ImageEntry]:
        with self._lock:
            return self._entries.get(path)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._entries

    def load(self) -> Tuple[ImageEntry, ...]:
        """Replace the in-memory set with the persisted records.

        Malformed records fall back to field defaults; records without a path are skipped.
        """

        raw = self.box.get(self.key)
        if raw is None:
            raw = []
        elif not isinstance(raw, list):
            logger.warning("Ignoring persisted %r value of type %s", self.key, type(raw).__name__)
            raw = []

        now = datetime.now()
        loaded: Dict[str, ImageEntry] = {}
        for record in raw:
            if not isinstance(record, dict):
                logger.warning("Skipping persisted record that is not a mapping: %r", record)
                continue
            try:
                entry = ImageEntry.from_dict(record, now=now)
            except ValueError as exc:
                logger.warning("Skipping persisted record: %s", exc)
                continue
            if entry.path in loaded:
                logger.warning("Skipping duplicate persisted record for %s", entry.path)
                continue
            loaded[entry.path] = entry

        with self._lock:
            self._entries = loaded
            return tuple(loaded.values())

    def replace_all(self, entries: Iterable[ImageEntry]) -> None:
        """Persist a new set of entries, then swap it in.

        Raises OSError when the box cannot be written; the current set is kept.
        """

        replacement: Dict[str, ImageEntry] = {}
        for entry in entries:
            replacement[entry.path] = entry
        with self._lock:
            self._commit(replacement)

    def remove(self, path: str) -> bool:
        """Drop the entry for path if present; persists either way.

        Raises OSError when the box cannot be written; the entry is kept.
        """

        with self._lock:
            remaining = dict(self._entries)
            removed = remaining.pop(path, None) is not None
            self._commit(remaining)
        return removed

    def persist(self) -> None:
        with self._lock:
            self._write(self._entries)

    def _commit(self, entries: Dict[str, ImageEntry]) -> None:
        # Memory only changes once the box holds the same set.
        self._write(entries)
        self._entries = entries

    def _write(self, entries: Dict[str, ImageEntry]) -> None:
        records: List[Dict[str, str]] = [entry.to_dict() for entry in entries.values()]
        self.box.put(self.key, records)
