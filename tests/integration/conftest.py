from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def sample_items_path():
    return Path(__file__).parent.parent / "fixtures" / "posts.json"


@pytest.fixture
def sample_items(sample_items_path):
    return json.loads(sample_items_path.read_text())["posts"]


@pytest.fixture
def settings_file(tmp_path):
    """Factory fixture writing a settings JSON file."""

    def _make(settings: dict) -> Path:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(settings))
        return path

    return _make
