# Path: core/indexing/classifier.py
# Purpose: Derive a contact (album) identifier from an image file name.
# Layer: core/indexing.
# Details: WhatsApp names received images like IMG-20230510-WA0001.jpg; the WA token groups them.

from __future__ import annotations

import re
from pathlib import PurePath

from core.models.domain import UNKNOWN_CONTACT

CONTACT_PATTERN = re.compile(r"WA\d+")


def extract_contact_id(file_name: str) -> str:
    """Return the first ``WA<digits>`` token in the base name, or ``Unknown``.

    Matching is case-sensitive: ``wa0001`` does not classify.
    """

    match = CONTACT_PATTERN.search(PurePath(file_name).name)
    if match is None:
        return UNKNOWN_CONTACT
    return match.group(0)
