# Path: core/models/domain.py
# Purpose: Define domain models shared across scanning, storage, and grouping workflows.
# Layer: core/models.
# Details: Lightweight dataclasses simplify serialization between the key-value store and callers.

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

UNKNOWN_CONTACT = "Unknown"


@dataclass(frozen=True)
class ImageEntry:
    """One indexed image keyed by its path."""

    path: str
    date: datetime
    contact_id: str = UNKNOWN_CONTACT

    @property
    def file_name(self) -> str:
        return Path(self.path).name

    def to_dict(self) -> Dict[str, str]:
        return {
            "path": self.path,
            "date": self.date.isoformat(),
            "contactId": self.contact_id,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], now: Optional[datetime] = None) -> "ImageEntry":
        """Build an entry from a persisted record, substituting defaults for bad fields.

        Raises ValueError when the record has no usable path, since it cannot be keyed.
        """

        path = payload.get("path")
        if not isinstance(path, str) or not path:
            raise ValueError(f"Record has no usable path: {payload!r}")

        contact_id = payload.get("contactId")
        if not isinstance(contact_id, str) or not contact_id:
            contact_id = UNKNOWN_CONTACT

        date = _parse_date(payload.get("date"))
        if date is None:
            date = now or datetime.now()
        return cls(path=path, date=date, contact_id=contact_id)


def _parse_date(raw: Any) -> Optional[datetime]:
    if not isinstance(raw, str):
        return None
    text = raw.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        # Entries compare against naive local time.
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def contact_display_name(contact_id: str) -> str:
    """Return the album title shown for a contact identifier."""

    if contact_id == UNKNOWN_CONTACT:
        return UNKNOWN_CONTACT
    return contact_id


class TimelineRange(Enum):
    """Recency windows offered by the timeline view."""

    TODAY = "today"
    WEEK = "week"
    MONTH = "month"

    @property
    def window(self) -> timedelta:
        return _TIMELINE_WINDOWS[self]


_TIMELINE_WINDOWS = {
    TimelineRange.TODAY: timedelta(hours=24),
    TimelineRange.WEEK: timedelta(days=7),
    TimelineRange.MONTH: timedelta(days=30),
}


class ScanStatus(Enum):
    """Result classification for a directory scan request."""

    COMPLETED = "completed"
    NOT_FOUND = "not_found"
    BUSY = "busy"
    BLOCKED = "blocked"
    FAILED = "failed"


@dataclass
class ScanOutcome:
    """Entries discovered by a scan plus bookkeeping about skipped files."""

    status: ScanStatus
    entries: Tuple[ImageEntry, ...] = field(default_factory=tuple)
    skipped: int = 0
    scanned_at: Optional[datetime] = None

    @property
    def succeeded(self) -> bool:
        return self.status is ScanStatus.COMPLETED
