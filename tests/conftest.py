"""Shared fixtures for the gallery index tests."""

from datetime import datetime, timedelta

import pytest

from core.gallery import IndexStore
from core.models import ImageEntry
from core.storage import JsonBoxStore, MemoryBoxStore

NOW = datetime(2024, 5, 10, 12, 0, 0)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def memory_store():
    return IndexStore(MemoryBoxStore("imagesBox"))


@pytest.fixture
def box_dir(tmp_path):
    return tmp_path / "boxes"


@pytest.fixture
def json_store(box_dir):
    return IndexStore(JsonBoxStore(box_dir, "imagesBox"))


@pytest.fixture
def scenario_entries(now):
    """A: 1h old, B: 2d old (both WA0001); C: 40d old, Unknown."""
    a = ImageEntry(path="/g/IMG-20240510-WA0001.jpg", date=now - timedelta(hours=1), contact_id="WA0001")
    b = ImageEntry(path="/g/IMG-20240508-WA0001.jpg", date=now - timedelta(days=2), contact_id="WA0001")
    c = ImageEntry(path="/g/Screenshot.png", date=now - timedelta(days=40), contact_id="Unknown")
    return a, b, c
