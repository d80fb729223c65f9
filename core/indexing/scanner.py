# Path: core/indexing/scanner.py
# Purpose: Scan a gallery folder and collect image entries with modification times.
# Layer: core/indexing.
# Details: Non-recursive listing; per-file stat failures are skipped so one bad file never aborts a scan.

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import AbstractSet, Iterable, List

from tqdm import tqdm

from core.models.domain import ImageEntry, ScanOutcome, ScanStatus
from .classifier import extract_contact_id

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp"})


class ImageScanner:
    """Scan a single directory for supported image files."""

    def __init__(
        self,
        root: Path,
        extensions: AbstractSet[str] = SUPPORTED_EXTENSIONS,
        show_progress: bool = False,
    ) -> None:
        self.root = Path(root)
        self.extensions = frozenset(ext.lower() for ext in extensions)
        self.show_progress = show_progress

    def scan(self) -> ScanOutcome:
        """Return every supported image in the root directory as an ImageEntry.

        A missing root yields NOT_FOUND; a listing failure yields FAILED. Neither carries entries.
        """

        if not self.root.is_dir():
            logger.info("Gallery folder not found: %s", self.root)
            return ScanOutcome(status=ScanStatus.NOT_FOUND)

        try:
            candidates = list(self._iter_image_files())
        except OSError:
            logger.warning("Could not list gallery folder %s", self.root, exc_info=True)
            return ScanOutcome(status=ScanStatus.FAILED)

        entries: List[ImageEntry] = []
        skipped = 0
        for path in tqdm(candidates, desc="Scanning images", unit="img", disable=not self.show_progress):
            try:
                modified = datetime.fromtimestamp(path.stat().st_mtime)
            except OSError as exc:
                skipped += 1
                logger.warning("Skipping unreadable file %s: %s", path, exc)
                continue
            entries.append(ImageEntry(path=str(path), date=modified, contact_id=extract_contact_id(path.name)))

        if skipped:
            logger.warning("Scan of %s skipped %d unreadable files", self.root, skipped)
        logger.info("Scanned %s: %d images", self.root, len(entries))
        return ScanOutcome(
            status=ScanStatus.COMPLETED,
            entries=tuple(entries),
            skipped=skipped,
            scanned_at=datetime.now(),
        )

    def is_supported(self, path: Path) -> bool:
        return path.suffix.lower() in self.extensions

    def _iter_image_files(self) -> Iterable[Path]:
        """Yield regular files with a supported suffix directly under the root."""

        for path in sorted(self.root.iterdir()):
            if path.is_file() and self.is_supported(path):
                yield path
