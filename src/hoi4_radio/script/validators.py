"""Consistency checks for generated radio mod packages."""

import re
from dataclasses import dataclass, field
from pathlib import Path

from hoi4_radio.constants import LOCALISATION_LANGUAGE, UTF8_BOM
from hoi4_radio.core.layout import ModPaths

_LOC_LINE = re.compile(r'^\s+(\S.*?):\d*\s*"(.*)"\s*$')
_SONG = re.compile(r'^\s*song\s*=\s*"([^"]*)"', re.MULTILINE)
_STATION = re.compile(r'^\s*music_station\s*=\s*"([^"]*)"', re.MULTILINE)
_ASSET_BLOCK = re.compile(r"music\s*=\s*\{(.*?)\}", re.DOTALL)
_ASSET_FIELD = re.compile(r'(\w+)\s*=\s*("([^"]*)"|[\d.]+)')
_DESCRIPTOR_NAME = re.compile(r'^name\s*=\s*"([^"]*)"', re.MULTILINE)


@dataclass
class DiagnosticCheck:
    """A single diagnostic check result."""

    name: str
    status: str  # "pass" | "fail" | "warn"
    message: str = ""


@dataclass
class DiagnosticResult:
    """Result of running all diagnostic checks on a mod package."""

    checks: list[DiagnosticCheck] = field(default_factory=list)
    track_ids: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(c.status != "fail" for c in self.checks)


def extract_localisation_keys(text: str) -> list[str]:
    """Return localisation keys in file order (BOM and header skipped)."""
    text = text.lstrip("\ufeff")
    keys = []
    for line in text.splitlines():
        match = _LOC_LINE.match(line)
        if match:
            keys.append(match.group(1))
    return keys


def extract_station_name(script: str) -> str | None:
    match = _STATION.search(script)
    return match.group(1) if match else None


def extract_music_songs(script: str) -> list[str]:
    """Return ``song`` ids from a music station script, in order."""
    return _SONG.findall(script)


def extract_asset_entries(asset: str) -> list[dict[str, str]]:
    """Parse ``music = { name file volume }`` blocks from an asset file."""
    entries = []
    for block in _ASSET_BLOCK.findall(asset):
        entry = {}
        for key, raw, quoted in _ASSET_FIELD.findall(block):
            entry[key] = quoted if raw.startswith('"') else raw
        entries.append(entry)
    return entries


def check_structure(paths: ModPaths) -> DiagnosticCheck:
    missing = [p for p in paths.directories if not p.is_dir()]
    missing += [p for p in paths.files if not p.is_file()]
    if missing:
        rel = ", ".join(str(p.relative_to(paths.output_root)) for p in missing)
        return DiagnosticCheck("structure", "fail", f"Missing: {rel}")
    return DiagnosticCheck("structure", "pass")


def check_bom(localisation: bytes) -> DiagnosticCheck:
    if localisation.startswith(UTF8_BOM):
        return DiagnosticCheck("bom", "pass")
    return DiagnosticCheck("bom", "fail", "Localisation file has no UTF-8 byte-order mark")


def check_track_ids(
    mod_name: str, localisation: str, script: str, asset: str
) -> tuple[DiagnosticCheck, list[str]]:
    """Compare track ids across localisation, music script and asset file.

    All three must list the same ids in the same order. The first
    localisation key is the station name; track keys follow it.
    """
    keys = extract_localisation_keys(localisation)
    loc_ids = keys[1:]
    songs = extract_music_songs(script)
    asset_ids = [e.get("name", "") for e in extract_asset_entries(asset)]

    problems = []
    if not keys or keys[0] != mod_name:
        problems.append(f"localisation does not start with station key {mod_name!r}")
    elif loc_ids == songs == asset_ids:
        return DiagnosticCheck("track_ids", "pass", f"{len(songs)} tracks"), songs

    if loc_ids != songs:
        problems.append(f"localisation {loc_ids} != music script {songs}")
    if songs != asset_ids:
        problems.append(f"music script {songs} != asset file {asset_ids}")
    return DiagnosticCheck("track_ids", "fail", "; ".join(problems)), songs


def check_asset_files(paths: ModPaths, asset: str) -> DiagnosticCheck:
    missing = [
        e.get("file", "")
        for e in extract_asset_entries(asset)
        if not (paths.music_dir / e.get("file", "")).is_file()
    ]
    if missing:
        return DiagnosticCheck("asset_files", "fail", f"Missing audio: {', '.join(missing)}")
    return DiagnosticCheck("asset_files", "pass")


def check_descriptors(mod_name: str, descriptor: str, external: str) -> DiagnosticCheck:
    names = [_DESCRIPTOR_NAME.search(text) for text in (descriptor, external)]
    found = [m.group(1) if m else None for m in names]
    if all(n == mod_name for n in found):
        return DiagnosticCheck("descriptor", "pass")
    return DiagnosticCheck(
        "descriptor", "fail", f"Descriptor names {found} do not match {mod_name!r}"
    )


def check_package(output_root: Path, mod_name: str) -> DiagnosticResult:
    """Read a generated package back and run all checks.

    Checks that need a missing file are skipped; the structure check
    already reports it.
    """
    paths = ModPaths(output_root, mod_name)
    result = DiagnosticResult()
    result.checks.append(check_structure(paths))

    if paths.localisation_file.is_file():
        loc_bytes = paths.localisation_file.read_bytes()
        result.checks.append(check_bom(loc_bytes))
        loc_text = loc_bytes.decode("utf-8-sig")
        if not loc_text.startswith(f"{LOCALISATION_LANGUAGE}:"):
            result.checks.append(
                DiagnosticCheck("localisation", "warn", f"Missing {LOCALISATION_LANGUAGE}: header")
            )
    else:
        loc_text = None

    script = paths.music_script.read_text(encoding="utf-8") if paths.music_script.is_file() else None
    asset = paths.music_asset.read_text(encoding="utf-8") if paths.music_asset.is_file() else None

    if script is not None and extract_station_name(script) != mod_name:
        result.checks.append(
            DiagnosticCheck("station", "fail", f"music_station is not {mod_name!r}")
        )

    if loc_text is not None and script is not None and asset is not None:
        check, track_ids = check_track_ids(mod_name, loc_text, script, asset)
        result.checks.append(check)
        result.track_ids = track_ids

    if asset is not None:
        result.checks.append(check_asset_files(paths, asset))

    if paths.descriptor.is_file() and paths.external_descriptor.is_file():
        result.checks.append(
            check_descriptors(
                mod_name,
                paths.descriptor.read_text(encoding="utf-8"),
                paths.external_descriptor.read_text(encoding="utf-8"),
            )
        )

    return result
