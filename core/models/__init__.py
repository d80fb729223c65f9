# Path: core/models/__init__.py
# Purpose: Package initializer for domain model definitions.
# Layer: core/models.
# Details: Exposes dataclasses and enums used across scanning, storage, and grouping layers.

from .domain import (
    UNKNOWN_CONTACT,
    ImageEntry,
    ScanOutcome,
    ScanStatus,
    TimelineRange,
    contact_display_name,
)
from .formatting import short_date, short_datetime

__all__ = [
    "UNKNOWN_CONTACT",
    "ImageEntry",
    "ScanOutcome",
    "ScanStatus",
    "TimelineRange",
    "contact_display_name",
    "short_date",
    "short_datetime",
]
