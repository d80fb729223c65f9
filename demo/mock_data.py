# Path: demo/mock_data.py
# Purpose: Generate seeded mock gallery data for tests and UI harnesses.
# Layer: demo.
# Details: Builds deterministic entries and can write real placeholder images so scans have files to find.

from __future__ import annotations

import os
import zlib
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Iterable, List, Optional

from PIL import Image

from core.gallery.index_store import IndexStore
from core.models.domain import ImageEntry

MOCK_CONTACTS = 5
MOCK_COUNT = 30


def mock_contact(index: int) -> str:
    return f"WA{index % MOCK_CONTACTS + 1:04d}"


def build_mock_entries(now: Optional[datetime] = None, count: int = MOCK_COUNT) -> List[ImageEntry]:
    """Return ``count`` entries spread over the last ten days across five contacts."""

    now = now or datetime.now()
    entries: List[ImageEntry] = []
    for i in range(count):
        day_offset = i % 10
        contact = mock_contact(i)
        stamp = int((now - timedelta(days=day_offset)).timestamp() * 1000)
        entries.append(
            ImageEntry(
                path=f"mock/path/IMG-{stamp}-{contact}-{i}.jpg",
                date=now
                - timedelta(days=day_offset, hours=i, minutes=(i * 7) % 60, seconds=(i * 13) % 60),
                contact_id=contact,
            )
        )
    return entries


def seed_store(store: IndexStore, now: Optional[datetime] = None) -> bool:
    """Fill an empty store with mock entries; returns False when it already had data."""

    if len(store):
        return False
    store.replace_all(build_mock_entries(now))
    return True


@dataclass(frozen=True)
class PlaceholderImage:
    """A file to create under a folder with a given modification time."""

    name: str
    modified: datetime


def write_placeholder_images(
    folder: Path,
    images: Iterable[PlaceholderImage],
    size: int = 8,
) -> List[Path]:
    """Write small solid-colour images and stamp their modification times.

    The colour is derived from the file name; the format follows the suffix.
    """

    folder = Path(folder)
    folder.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    for image in images:
        target = folder / image.name
        with Image.new("RGB", (size, size), _colour_for(image.name)) as canvas:
            canvas.save(target, format=_format_for(target))
        mtime = image.modified.timestamp()
        os.utime(target, (mtime, mtime))
        written.append(target)
    return written


def _colour_for(name: str) -> tuple:
    digest = zlib.crc32(name.encode("utf-8"))
    return ((digest >> 16) & 0xFF, (digest >> 8) & 0xFF, digest & 0xFF)


def _format_for(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in (".jpg", ".jpeg"):
        return "JPEG"
    if suffix == ".webp":
        return "WEBP"
    return "PNG"
