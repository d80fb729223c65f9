# Path: core/models/formatting.py
# Purpose: Format entry timestamps for compact display.
# Layer: core/models.
# Details: Mirrors the captions used by timeline tiles and the full-screen viewer.

from __future__ import annotations

from datetime import datetime
from typing import Optional


def short_date(value: datetime, now: Optional[datetime] = None) -> str:
    """Return ``HH:MM`` for today's timestamps, otherwise ``M/D``."""

    now = now or datetime.now()
    if value.date() == now.date():
        return f"{value.hour:02d}:{value.minute:02d}"
    return f"{value.month}/{value.day}"


def short_datetime(value: datetime) -> str:
    return f"{value.year}-{value.month:02d}-{value.day:02d} {value.hour:02d}:{value.minute:02d}"
