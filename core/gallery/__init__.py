# Path: core/gallery/__init__.py
# Purpose: Package initializer for the gallery index layer.
# Layer: core/gallery.
# Details: Exposes the index store, grouping helpers, and the coordinating repository.

from .grouping import filter_albums, group_albums, images_in_last, ordered_album_ids
from .index_store import IMAGES_KEY, IndexStore
from .repository import GalleryRepository, GalleryState

__all__ = [
    "IMAGES_KEY",
    "GalleryRepository",
    "GalleryState",
    "IndexStore",
    "filter_albums",
    "group_albums",
    "images_in_last",
    "ordered_album_ids",
]
