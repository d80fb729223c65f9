# Path: demo/__init__.py
# Purpose: Package initializer for demo and fixture data helpers.
# Layer: demo.
# Details: Exposes seeded mock entries and placeholder image writers; core code never imports this package.

from .mock_data import PlaceholderImage, build_mock_entries, seed_store, write_placeholder_images

__all__ = ["PlaceholderImage", "build_mock_entries", "seed_store", "write_placeholder_images"]
