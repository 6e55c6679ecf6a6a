"""Radio station mod generation pipeline."""

import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from hoi4_radio import __version__
from hoi4_radio.config import Settings, get_settings
from hoi4_radio.constants import (
    FACEPLATE_TEMPLATE,
    STEP_ASSET_FILES,
    STEP_COPY_MUSIC,
    STEP_DESCRIPTOR,
    STEP_DONE,
    STEP_INTERFACE,
    STEP_LOCALISATION,
    STEP_MUSIC_SCRIPT,
    STEP_SETUP,
)
from hoi4_radio.core.files import FileLayer
from hoi4_radio.core.layout import ModPaths
from hoi4_radio.core.tracker import StepTracker
from hoi4_radio.script.builders import ScriptBuilder
from hoi4_radio.script.schemas import StationContent

logger = logging.getLogger(__name__)


def _hl(value: object) -> str:
    """Highlight a name or path in console output."""
    return f"[yellow]{escape(str(value))}[/]"


class ModGenerator:
    """Builds a complete HOI4 radio station mod from a list of tracks.

    Steps run strictly in order and each file operation is awaited before
    the next starts. Any filesystem error propagates out of ``generate``
    and leaves whatever was already written in place.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        tracker: StepTracker | None = None,
        files: FileLayer | None = None,
        console: Console | None = None,
    ):
        self.settings = settings or get_settings()
        self.tracker = tracker or StepTracker()
        self.files = files or FileLayer()
        self.console = console or Console()
        self.builder = ScriptBuilder()

    def paths_for(self, mod_name: str) -> ModPaths:
        return ModPaths(self.settings.output_dir, mod_name)

    async def generate(
        self,
        mod_name: str,
        track_files: list[str],
        *,
        clean: bool = False,
    ) -> Path:
        """Generate the mod and return its root directory.

        Args:
            mod_name: Mod name, used verbatim for folders, files and keys
            track_files: Audio files in playback order. Only the base
                filename is used; files are read from the downloads dir.
            clean: Remove a previous package with this name first. Without
                it, files from an earlier run that are not regenerated stay.

        Returns:
            Path to the mod root directory
        """
        # Derive track names once; every artifact reads them from here
        content = StationContent.from_files(
            mod_name,
            track_files,
            version=__version__,
            supported_version=self.settings.supported_version,
        )
        paths = self.paths_for(content.name)

        await self._setup(content, paths, clean=clean)
        await self._copy_music(content, paths)
        await self._write_descriptors(content, paths)
        await self._write_localisation(content, paths)
        await self._write_interface(content, paths)
        await self._write_music_script(content, paths)
        await self._write_asset_file(content, paths)

        await self.tracker.set_current_step(STEP_DONE)
        self._ok(f"Mod generation complete for {_hl(content.name)}")
        return paths.mod_root

    # --- Steps ---

    async def _setup(self, content: StationContent, paths: ModPaths, *, clean: bool) -> None:
        await self.tracker.set_current_step(STEP_SETUP)
        self._info(f"Setting up mod structure for {_hl(content.name)}")

        if clean:
            await self.files.remove_tree(paths.mod_root)
            await self.files.remove_tree(paths.external_descriptor)
            logger.info("Removed previous output for %s", content.name)

        for directory in paths.directories:
            await self.files.create_directory(directory)
        self._ok(f"Created mod folder structure for {_hl(content.name)}")

    async def _copy_music(self, content: StationContent, paths: ModPaths) -> None:
        await self.tracker.set_current_step(STEP_COPY_MUSIC)
        for track in content.tracks:
            src = self.settings.downloads_dir / track.base_filename
            dest = paths.music_dir / track.base_filename
            await self.files.copy_file(src, dest)
            self._info(f"Copied {_hl(track.base_filename)} to {_hl(dest)}")

    async def _write_descriptors(self, content: StationContent, paths: ModPaths) -> None:
        await self.tracker.set_current_step(STEP_DESCRIPTOR)
        await self.files.write_file(
            paths.descriptor, self.builder.build_descriptor(content.descriptor)
        )
        self._ok(f"Wrote mod-specific descriptor.mod for {_hl(content.name)}")

        await self.files.write_file(
            paths.external_descriptor,
            self.builder.build_external_descriptor(content.external_descriptor),
        )
        self._ok(f"Wrote user-specific descriptor for {_hl(content.name)}")

    async def _write_localisation(self, content: StationContent, paths: ModPaths) -> None:
        await self.tracker.set_current_step(STEP_LOCALISATION)
        await self.files.write_file(
            paths.localisation_file, self.builder.encode_localisation(content)
        )
        self._ok(f"Wrote localisation file {_hl(paths.localisation_file.name)}")

    async def _write_interface(self, content: StationContent, paths: ModPaths) -> None:
        await self.tracker.set_current_step(STEP_INTERFACE)
        await self.files.write_file(paths.gfx_file, self.builder.build_gfx(content.name))
        self._ok(f"Wrote .gfx file for {_hl(content.name)}")

        await self.files.write_file(paths.gui_file, self.builder.build_gui(content.name))

        faceplate = await self.files.read_bundled_file(FACEPLATE_TEMPLATE)
        await self.files.write_file(paths.faceplate_file, faceplate)
        self._ok(f"Wrote interface files for {_hl(content.name)}")

    async def _write_music_script(self, content: StationContent, paths: ModPaths) -> None:
        await self.tracker.set_current_step(STEP_MUSIC_SCRIPT)
        await self.files.write_file(
            paths.music_script, self.builder.build_music_script(content)
        )
        self._ok(f"Wrote music script for {_hl(content.name)}")

    async def _write_asset_file(self, content: StationContent, paths: ModPaths) -> None:
        await self.tracker.set_current_step(STEP_ASSET_FILES)
        await self.files.write_file(
            paths.music_asset, self.builder.build_music_asset(content)
        )
        self._ok(f"Wrote music asset file for {_hl(content.name)}")

    # --- Output ---

    def _info(self, message: str) -> None:
        logger.info(Text.from_markup(message).plain)
        self.console.print(f"  {message}")

    def _ok(self, message: str) -> None:
        logger.info(Text.from_markup(message).plain)
        self.console.print(f"  [green]✓[/] {message}")
