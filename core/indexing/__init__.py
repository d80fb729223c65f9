# Path: core/indexing/__init__.py
# Purpose: Package initializer for indexing utilities.
# Layer: core/indexing.
# Details: Exposes directory scanning and filename classification helpers.

from .classifier import CONTACT_PATTERN, extract_contact_id
from .scanner import SUPPORTED_EXTENSIONS, ImageScanner

__all__ = ["CONTACT_PATTERN", "SUPPORTED_EXTENSIONS", "ImageScanner", "extract_contact_id"]
