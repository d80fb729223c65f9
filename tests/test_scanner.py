"""Tests for directory scanning."""

import logging
from datetime import datetime
from pathlib import Path

import pytest

from core.indexing import ImageScanner
from core.models import ScanStatus
from demo import PlaceholderImage, write_placeholder_images

MODIFIED = datetime(2024, 5, 9, 8, 30, 0)


@pytest.fixture
def gallery(tmp_path):
    folder = tmp_path / "WhatsApp Images"
    write_placeholder_images(
        folder,
        [
            PlaceholderImage("IMG-20240509-WA0001.jpg", MODIFIED),
            PlaceholderImage("IMG-20240509-WA0002.PNG", MODIFIED),
            PlaceholderImage("photo.jpeg", MODIFIED),
        ],
    )
    (folder / "notes.txt").write_text("not an image")
    (folder / "anim.gif").write_bytes(b"GIF89a")
    (folder / "nested.jpg").mkdir()
    (folder / "nested.jpg" / "IMG-WA0009.jpg").write_bytes(b"\xff\xd8\xff")
    return folder


class TestImageScanner:
    def test_missing_directory_is_not_found(self, tmp_path):
        outcome = ImageScanner(tmp_path / "absent").scan()
        assert outcome.status is ScanStatus.NOT_FOUND
        assert outcome.entries == ()

    def test_file_root_is_not_found(self, tmp_path):
        target = tmp_path / "file.jpg"
        target.write_bytes(b"")
        assert ImageScanner(target).scan().status is ScanStatus.NOT_FOUND

    def test_keeps_supported_regular_files_only(self, gallery):
        outcome = ImageScanner(gallery).scan()
        assert outcome.status is ScanStatus.COMPLETED
        names = {Path(entry.path).name for entry in outcome.entries}
        assert names == {"IMG-20240509-WA0001.jpg", "IMG-20240509-WA0002.PNG", "photo.jpeg"}

    def test_entries_carry_contact_and_mtime(self, gallery):
        entries = {Path(e.path).name: e for e in ImageScanner(gallery).scan().entries}
        assert entries["IMG-20240509-WA0001.jpg"].contact_id == "WA0001"
        assert entries["IMG-20240509-WA0002.PNG"].contact_id == "WA0002"
        assert entries["photo.jpeg"].contact_id == "Unknown"
        assert all(entry.date == MODIFIED for entry in entries.values())

    def test_custom_extensions(self, gallery):
        outcome = ImageScanner(gallery, extensions={".GIF"}).scan()
        assert [Path(e.path).name for e in outcome.entries] == ["anim.gif"]

    def test_unreadable_file_is_skipped(self, gallery, caplog):
        class FlakyScanner(ImageScanner):
            def _iter_image_files(self):
                yield from super()._iter_image_files()
                yield self.root / "vanished-WA0005.jpg"

        with caplog.at_level(logging.WARNING, logger="core.indexing.scanner"):
            outcome = FlakyScanner(gallery).scan()
        assert outcome.status is ScanStatus.COMPLETED
        assert outcome.skipped == 1
        assert len(outcome.entries) == 3
        assert any("vanished-WA0005.jpg" in record.getMessage() for record in caplog.records)

    def test_progress_bar_does_not_change_result(self, gallery):
        quiet = ImageScanner(gallery).scan()
        loud = ImageScanner(gallery, show_progress=True).scan()
        assert quiet.entries == loud.entries
