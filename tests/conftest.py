"""Shared fixtures for generator tests."""

import pytest
from rich.console import Console

from hoi4_radio.config import Settings
from hoi4_radio.core.generator import ModGenerator
from hoi4_radio.core.tracker import StepTracker


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at temporary output and downloads directories."""
    downloads = tmp_path / "downloads"
    downloads.mkdir()
    return Settings(output_dir=tmp_path / "output", downloads_dir=downloads)


@pytest.fixture
def make_tracks(settings):
    """Create audio files in the downloads directory and return their paths."""

    def _make(*names: str) -> list[str]:
        for name in names:
            (settings.downloads_dir / name).write_bytes(b"OggS" + name.encode())
        return [f"downloads/{name}" for name in names]

    return _make


@pytest.fixture
def tracker():
    return StepTracker()


@pytest.fixture
def generator(settings, tracker):
    return ModGenerator(settings, tracker=tracker, console=Console(quiet=True))
