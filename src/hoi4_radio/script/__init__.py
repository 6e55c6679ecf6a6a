"""Clausewitz script models, builders and package checks."""

from hoi4_radio.script.builders import ScriptBuilder
from hoi4_radio.script.schemas import (
    AssetEntry,
    ExternalDescriptor,
    ModDescriptor,
    MusicEntry,
    StationContent,
    TrackReference,
)

__all__ = [
    "AssetEntry",
    "ExternalDescriptor",
    "ModDescriptor",
    "MusicEntry",
    "ScriptBuilder",
    "StationContent",
    "TrackReference",
]
