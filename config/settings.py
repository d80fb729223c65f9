# Path: config/settings.py
# Purpose: Provide typed application configuration models.
# Layer: config.
# Details: Centralizes the scanned gallery folder, supported extensions, and key-value storage location.

import os
from pathlib import Path
from typing import Set

from pydantic import BaseModel, Field


class GallerySettings(BaseModel):
    """Settings describing which folder is scanned and how scans behave."""

    image_folder: Path = Field(
        default=Path("/storage/emulated/0/WhatsApp/Media/WhatsApp Images"),
        description="Directory scanned (non-recursively) for images.",
    )
    supported_extensions: Set[str] = Field(
        default_factory=lambda: {".jpg", ".jpeg", ".png", ".webp"},
        description="Lower-case file suffixes accepted by the scanner.",
    )
    show_progress: bool = Field(default=False, description="Render a tqdm progress bar while stating files.")
    scan_on_init: bool = Field(default=True, description="Run a scan right after a successful initialization.")
    delete_files: bool = Field(default=True, description="Delete the underlying file when an image is removed.")


class StorageSettings(BaseModel):
    """Settings controlling where the persisted index lives."""

    directory: Path = Field(default=Path("storage/boxes"), description="Directory holding box files.")
    box_name: str = Field(default="imagesBox", description="Name of the collection holding the index.")
    images_key: str = Field(default="images", description="Key under which the list of records is stored.")


class AppSettings(BaseModel):
    """Top-level application settings shared across services and interfaces."""

    gallery: GallerySettings = Field(default_factory=GallerySettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    log_level: str = Field(default="INFO", description="Verbosity level for application logs.")

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Instantiate settings, applying GALLERY_* environment overrides when present."""

        settings = cls()
        folder = os.environ.get("GALLERY_IMAGE_FOLDER")
        if folder:
            settings.gallery.image_folder = Path(folder)
        storage_dir = os.environ.get("GALLERY_STORAGE_DIR")
        if storage_dir:
            settings.storage.directory = Path(storage_dir)
        log_level = os.environ.get("GALLERY_LOG_LEVEL")
        if log_level:
            settings.log_level = log_level.upper()
        return settings


__all__ = ["AppSettings", "GallerySettings", "StorageSettings"]
