"""Tests for settings defaults, environment overrides, and logging setup."""

import logging
from pathlib import Path

from config import AppSettings, configure_logging


def test_defaults():
    settings = AppSettings()
    assert settings.gallery.image_folder == Path("/storage/emulated/0/WhatsApp/Media/WhatsApp Images")
    assert settings.gallery.supported_extensions == {".jpg", ".jpeg", ".png", ".webp"}
    assert settings.storage.box_name == "imagesBox"
    assert settings.storage.images_key == "images"


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("GALLERY_IMAGE_FOLDER", str(tmp_path / "images"))
    monkeypatch.setenv("GALLERY_STORAGE_DIR", str(tmp_path / "boxes"))
    monkeypatch.setenv("GALLERY_LOG_LEVEL", "debug")
    settings = AppSettings.from_env()
    assert settings.gallery.image_folder == tmp_path / "images"
    assert settings.storage.directory == tmp_path / "boxes"
    assert settings.log_level == "DEBUG"


def test_configure_logging_sets_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("warning")
        assert root.level == logging.WARNING
        configure_logging("nonsense")
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)
