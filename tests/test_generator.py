"""Tests for the end-to-end generation pipeline."""

import asyncio

import pytest
from rich.console import Console

from hoi4_radio import __version__
from hoi4_radio.constants import PIPELINE_STEPS
from hoi4_radio.core.files import FileLayer
from hoi4_radio.core.generator import ModGenerator
from hoi4_radio.core.layout import ModPaths
from hoi4_radio.data.loader import read_bundled_bytes
from hoi4_radio.script.validators import (
    extract_asset_entries,
    extract_localisation_keys,
    extract_music_songs,
)


def run(generator, name, tracks, **kwargs):
    return asyncio.run(generator.generate(name, tracks, **kwargs))


class TestGenerate:
    """Tests for ModGenerator.generate."""

    def test_returns_mod_root(self, generator, settings, make_tracks):
        mod_root = run(generator, "jazz_radio", make_tracks("a.ogg"))

        assert mod_root == settings.output_dir / "jazz_radio"
        assert mod_root.is_dir()

    def test_creates_all_files(self, generator, settings, make_tracks):
        run(generator, "jazz_radio", make_tracks("Take Five.ogg", "So What.ogg"))
        paths = ModPaths(settings.output_dir, "jazz_radio")

        for directory in paths.directories:
            assert directory.is_dir(), directory
        for path in paths.files:
            assert path.is_file(), path

    def test_copies_tracks_by_base_filename(self, generator, settings):
        (settings.downloads_dir / "Take Five.ogg").write_bytes(b"audio-data")
        run(generator, "jazz_radio", ["/somewhere/else/Take Five.ogg"])

        copied = ModPaths(settings.output_dir, "jazz_radio").music_dir / "Take Five.ogg"
        assert copied.read_bytes() == b"audio-data"

    def test_descriptors(self, generator, settings, make_tracks):
        run(generator, "jazz_radio", make_tracks("a.ogg"))
        paths = ModPaths(settings.output_dir, "jazz_radio")

        descriptor = paths.descriptor.read_text()
        assert descriptor == 'name="jazz_radio"\nsupported_version="1.16.5"\n'

        external = paths.external_descriptor.read_text()
        assert '"Sound"' in external
        assert 'path="mod/jazz_radio"' in external
        assert f'version="{__version__}"' in external
        assert 'supported_version="1.16.5"' in external

    def test_supported_version_from_settings(self, settings, tracker, make_tracks):
        settings.supported_version = "1.15.*"
        generator = ModGenerator(settings, tracker=tracker, console=Console(quiet=True))
        run(generator, "r", make_tracks("a.ogg"))

        descriptor = ModPaths(settings.output_dir, "r").descriptor.read_text()
        assert 'supported_version="1.15.*"' in descriptor

    def test_localisation_has_bom(self, generator, settings, make_tracks):
        run(generator, "jazz_radio", make_tracks("a.ogg"))

        data = ModPaths(settings.output_dir, "jazz_radio").localisation_file.read_bytes()
        assert data[:3] == b"\xef\xbb\xbf"

    def test_track_ids_consistent_across_artifacts(self, generator, settings, make_tracks):
        names = ["Zebra Song.ogg", "alpha.ogg", "Mid Tempo Tune.mp3", "x.y.ogg"]
        run(generator, "jazz_radio", make_tracks(*names))
        paths = ModPaths(settings.output_dir, "jazz_radio")

        loc = paths.localisation_file.read_text(encoding="utf-8-sig")
        loc_ids = [k for k in extract_localisation_keys(loc) if k != "jazz_radio"]
        songs = extract_music_songs(paths.music_script.read_text())
        asset_ids = [e["name"] for e in extract_asset_entries(paths.music_asset.read_text())]

        expected = ["Zebra_Song", "alpha", "Mid_Tempo_Tune", "x"]
        assert loc_ids == expected
        assert songs == expected
        assert asset_ids == expected

    def test_asset_entries(self, generator, settings, make_tracks):
        run(generator, "jazz_radio", make_tracks("Take Five.ogg", "b.ogg"))

        entries = extract_asset_entries(
            ModPaths(settings.output_dir, "jazz_radio").music_asset.read_text()
        )
        assert entries == [
            {"name": "Take_Five", "file": "Take Five.ogg", "volume": "0.65"},
            {"name": "b", "file": "b.ogg", "volume": "0.65"},
        ]

    def test_faceplate_copied_from_bundle(self, generator, settings, make_tracks):
        run(generator, "jazz_radio", make_tracks("a.ogg"))

        faceplate = ModPaths(settings.output_dir, "jazz_radio").faceplate_file
        assert faceplate.read_bytes() == read_bundled_bytes("radio_station.dds")
        assert faceplate.read_bytes()[:4] == b"DDS "

    def test_empty_track_list(self, generator, settings):
        run(generator, "jazz_radio", [])
        paths = ModPaths(settings.output_dir, "jazz_radio")

        for directory in paths.directories:
            assert directory.is_dir()
        assert paths.music_script.read_text() == 'music_station = "jazz_radio"\n'
        assert paths.music_asset.read_text() == ""
        assert paths.descriptor.exists()
        assert paths.gui_file.exists()

    def test_empty_name_rejected_before_writing(self, generator, settings, tracker):
        with pytest.raises(ValueError):
            run(generator, "", [])

        assert tracker.current_step is None
        assert not settings.output_dir.exists()


class TestSteps:
    """Tests for step tracking."""

    def test_steps_reported_in_order(self, generator, tracker, make_tracks):
        run(generator, "jazz_radio", make_tracks("a.ogg"))

        assert tracker.history == list(PIPELINE_STEPS)
        assert tracker.current_step == "done"
        assert tracker.finished

    def test_callback_sees_each_step(self, settings, make_tracks):
        from hoi4_radio.core.tracker import StepTracker

        seen = []
        generator = ModGenerator(
            settings, tracker=StepTracker(on_step=seen.append), console=Console(quiet=True)
        )
        run(generator, "r", make_tracks("a.ogg"))

        assert seen == list(PIPELINE_STEPS)


class TestFailures:
    """Tests for error propagation and rerun behaviour."""

    def test_missing_track_aborts(self, generator, settings, tracker, make_tracks):
        tracks = make_tracks("present.ogg") + ["downloads/missing.ogg"]

        with pytest.raises(FileNotFoundError):
            run(generator, "jazz_radio", tracks)

        paths = ModPaths(settings.output_dir, "jazz_radio")
        assert tracker.current_step == "copy_music"
        assert not tracker.finished
        # Partial output stays; later steps never ran
        assert (paths.music_dir / "present.ogg").exists()
        assert not paths.descriptor.exists()
        assert not paths.music_script.exists()

    def test_write_failure_propagates_unchanged(self, settings, tracker, make_tracks):
        class FailingFiles(FileLayer):
            async def write_file(self, path, data):
                if path.suffix == ".gfx":
                    raise PermissionError("read-only")
                await super().write_file(path, data)

        generator = ModGenerator(
            settings, tracker=tracker, files=FailingFiles(), console=Console(quiet=True)
        )
        with pytest.raises(PermissionError, match="read-only"):
            run(generator, "r", make_tracks("a.ogg"))

        assert tracker.current_step == "interface"
        assert ModPaths(settings.output_dir, "r").localisation_file.exists()

    def test_setup_is_idempotent(self, generator, settings, make_tracks):
        tracks = make_tracks("a.ogg")
        run(generator, "jazz_radio", tracks)
        run(generator, "jazz_radio", tracks)

        assert ModPaths(settings.output_dir, "jazz_radio").descriptor.exists()

    def test_rerun_keeps_stale_tracks(self, generator, settings, make_tracks):
        run(generator, "jazz_radio", make_tracks("a.ogg", "b.ogg"))
        run(generator, "jazz_radio", make_tracks("a.ogg"))
        paths = ModPaths(settings.output_dir, "jazz_radio")

        assert (paths.music_dir / "b.ogg").exists()
        assert extract_music_songs(paths.music_script.read_text()) == ["a"]

    def test_clean_removes_previous_output(self, generator, settings, make_tracks):
        run(generator, "jazz_radio", make_tracks("a.ogg", "b.ogg"))
        run(generator, "jazz_radio", make_tracks("a.ogg"), clean=True)
        paths = ModPaths(settings.output_dir, "jazz_radio")

        assert not (paths.music_dir / "b.ogg").exists()
        assert (paths.music_dir / "a.ogg").exists()
        assert paths.external_descriptor.exists()
