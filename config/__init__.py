# Path: config/__init__.py
# Purpose: Package initializer for configuration module.
# Layer: config.
# Details: Exposes settings models and logging setup for application-wide configuration.

from .logging_setup import configure_logging
from .settings import AppSettings, GallerySettings, StorageSettings

__all__ = ["AppSettings", "GallerySettings", "StorageSettings", "configure_logging"]
