# Path: core/gallery/grouping.py
# Purpose: Derive albums and time-windowed timelines from indexed entries.
# Layer: core/gallery.
# Details: Pure functions recomputed on demand; nothing here caches or mutates the index.

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from core.models.domain import ImageEntry, contact_display_name


def _newest_first(entries: Iterable[ImageEntry]) -> List[ImageEntry]:
    return sorted(entries, key=lambda entry: entry.date, reverse=True)


def group_albums(entries: Iterable[ImageEntry]) -> Dict[str, List[ImageEntry]]:
    """Partition entries by contact id, each album sorted newest first."""

    albums: Dict[str, List[ImageEntry]] = {}
    for entry in entries:
        albums.setdefault(entry.contact_id, []).append(entry)
    return {contact_id: _newest_first(items) for contact_id, items in albums.items()}


def ordered_album_ids(albums: Mapping[str, Sequence[ImageEntry]]) -> List[str]:
    """Return album keys ordered by their newest entry, most recent first.

    Ties keep the mapping's iteration order. Empty albums sort last.
    """

    def newest(contact_id: str) -> datetime:
        items = albums[contact_id]
        if not items:
            return datetime.min
        return max(entry.date for entry in items)

    return sorted(albums, key=newest, reverse=True)


def images_in_last(
    entries: Iterable[ImageEntry],
    window: timedelta,
    now: Optional[datetime] = None,
) -> List[ImageEntry]:
    """Return entries strictly newer than ``now - window``, newest first."""

    cutoff = (now or datetime.now()) - window
    return _newest_first(entry for entry in entries if entry.date > cutoff)


def filter_albums(album_ids: Iterable[str], query: str) -> List[str]:
    """Keep album ids whose display name contains query, ignoring case.

    A blank query keeps every album. Input order is preserved.
    """

    needle = query.strip().lower()
    if not needle:
        return list(album_ids)
    return [album_id for album_id in album_ids if needle in contact_display_name(album_id).lower()]
