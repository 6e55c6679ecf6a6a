"""Clausewitz script generation for HOI4 radio mod files."""

from hoi4_radio.constants import FACEPLATE_FRAMES, LOCALISATION_LANGUAGE, UTF8_BOM
from hoi4_radio.data.loader import render_gui
from hoi4_radio.script.schemas import (
    AssetEntry,
    ExternalDescriptor,
    ModDescriptor,
    MusicEntry,
    StationContent,
)

INDENT = "    "


class ScriptBuilder:
    """Builds HOI4 mod files from Pydantic models."""

    @staticmethod
    def _quote(value: str) -> str:
        return f'"{value}"'

    @staticmethod
    def _format_number(value: float) -> str:
        """Render numbers the way the game's own files do (1, not 1.0)."""
        if float(value).is_integer():
            return str(int(value))
        return repr(float(value))

    # --- Descriptors ---

    def build_descriptor(self, descriptor: ModDescriptor) -> str:
        """Build descriptor.mod for inside the mod folder."""
        return (
            f"name={self._quote(descriptor.name)}\n"
            f"supported_version={self._quote(descriptor.supported_version)}\n"
        )

    def build_external_descriptor(self, descriptor: ExternalDescriptor) -> str:
        """Build <name>.mod, the launcher-facing descriptor for a local mod."""
        lines = [f"name={self._quote(descriptor.name)}", "tags={"]
        lines.extend(f"{INDENT}{self._quote(tag)}" for tag in descriptor.tags)
        lines.append("}")
        lines.append(f"path={self._quote(descriptor.path)}")
        lines.append(f"supported_version={self._quote(descriptor.supported_version)}")
        lines.append(f"version={self._quote(descriptor.version)}")
        return "\n".join(lines) + "\n"

    # --- Localisation ---

    def build_localisation(self, content: StationContent) -> str:
        """Build the English localisation text (without BOM)."""
        lines = [f"{LOCALISATION_LANGUAGE}:"]
        lines.append(f"  {content.name}: {self._quote(content.name + ' Radio')}")
        for track_id in content.track_ids:
            lines.append(f"  {track_id}: {self._quote(track_id)}")
        return "\n".join(lines) + "\n"

    def encode_localisation(self, content: StationContent) -> bytes:
        """Localisation payload ready to write: UTF-8 with a leading BOM."""
        return UTF8_BOM + self.build_localisation(content).encode("utf-8")

    # --- Interface ---

    def build_gfx(self, mod_name: str) -> str:
        """Build the sprite definition for the station faceplate."""
        return (
            "spriteTypes = {\n"
            f"{INDENT}spriteType = {{\n"
            f"{INDENT * 2}name = {self._quote(sprite_name(mod_name))}\n"
            f"{INDENT * 2}texturefile = {self._quote(faceplate_texture(mod_name))}\n"
            f"{INDENT * 2}noOfFrames = {FACEPLATE_FRAMES}\n"
            f"{INDENT}}}\n"
            "}\n"
        )

    def build_gui(self, mod_name: str) -> str:
        """Build the music player layout from the bundled template."""
        return render_gui(mod_name)

    # --- Music ---

    def build_music_entry(self, entry: MusicEntry) -> str:
        return (
            "music = {\n"
            f"{INDENT}song = {self._quote(entry.song)}\n"
            f"{INDENT}chance = {{\n"
            f"{INDENT * 2}factor = {self._format_number(entry.factor)}\n"
            f"{INDENT * 2}modifier = {{\n"
            f"{INDENT * 3}factor = {self._format_number(entry.modifier_factor)}\n"
            f"{INDENT * 2}}}\n"
            f"{INDENT}}}\n"
            "}\n"
        )

    def build_music_script(self, content: StationContent) -> str:
        """Build <name>_music.txt: station header then one block per track.

        Entries keep input order; the game enumerates station content in
        file order.
        """
        parts = [f"music_station = {self._quote(content.name)}\n"]
        parts.extend(self.build_music_entry(e) for e in content.music_entries)
        return "".join(parts)

    def build_asset_entry(self, entry: AssetEntry) -> str:
        return (
            "music = {\n"
            f"{INDENT}name = {self._quote(entry.name)}\n"
            f"{INDENT}file = {self._quote(entry.file)}\n"
            f"{INDENT}volume = {self._format_number(entry.volume)}\n"
            "}\n"
        )

    def build_music_asset(self, content: StationContent) -> str:
        """Build <name>_music.asset. Empty when the station has no tracks."""
        return "".join(self.build_asset_entry(e) for e in content.asset_entries)


def sprite_name(mod_name: str) -> str:
    return f"GFX_{mod_name}_faceplate"


def faceplate_texture(mod_name: str) -> str:
    """Texture path as referenced from the .gfx, relative to the mod root."""
    return f"gfx/{mod_name}_faceplate.dds"
