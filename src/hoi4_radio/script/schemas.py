"""Pydantic models for HOI4 radio mod records.

Each model mirrors one record the game reads: descriptors, music station
entries, music asset entries. Track names are derived once, on
TrackReference, and every builder reads them from there.
"""

from pydantic import BaseModel, Field, computed_field, field_validator, model_validator

from hoi4_radio.constants import (
    ASSET_VOLUME,
    CHANCE_FACTOR,
    DESCRIPTOR_TAGS,
    HOI4_SUPPORTED_VERSION,
)


def strip_path(source: str) -> str:
    """Strip a path down to its last segment."""
    return source.replace("\\", "/").rsplit("/", 1)[-1]


def derive_track_id(filename: str) -> str:
    """Derive the in-game song identifier from an audio filename.

    Everything from the first dot on is dropped and spaces become
    underscores: ``"My Song.ogg"`` -> ``"My_Song"``.
    """
    return filename.split(".", 1)[0].replace(" ", "_")


class TrackReference(BaseModel):
    """An input audio file and the names derived from it."""

    source: str = Field(..., description="Path of the track as given by the caller")

    model_config = {"frozen": True}

    @field_validator("source")
    @classmethod
    def validate_source(cls, v: str) -> str:
        if not strip_path(v):
            raise ValueError(f"Track path has no filename: {v!r}")
        return v

    @computed_field
    @property
    def base_filename(self) -> str:
        return strip_path(self.source)

    @computed_field
    @property
    def track_id(self) -> str:
        return derive_track_id(self.base_filename)


class ModDescriptor(BaseModel):
    """descriptor.mod inside the mod folder."""

    name: str
    supported_version: str = HOI4_SUPPORTED_VERSION


class ExternalDescriptor(ModDescriptor):
    """<name>.mod next to the mod folder, pointing the launcher at it."""

    tags: list[str] = Field(default_factory=lambda: list(DESCRIPTOR_TAGS))
    path: str = ""
    version: str = Field(..., description="Generator release that produced the mod")

    @model_validator(mode="after")
    def default_path(self) -> "ExternalDescriptor":
        if not self.path:
            self.path = f"mod/{self.name}"
        return self


class MusicEntry(BaseModel):
    """A ``music = { ... }`` block in the station script."""

    song: str
    factor: int = CHANCE_FACTOR
    modifier_factor: int = CHANCE_FACTOR

    @classmethod
    def from_track(cls, track: TrackReference) -> "MusicEntry":
        return cls(song=track.track_id)


class AssetEntry(BaseModel):
    """A ``music = { ... }`` block in the asset file."""

    name: str
    file: str
    volume: float = ASSET_VOLUME

    @classmethod
    def from_track(cls, track: TrackReference) -> "AssetEntry":
        return cls(name=track.track_id, file=track.base_filename)


class StationContent(BaseModel):
    """Everything needed to render one radio station mod."""

    name: str = Field(..., description="Mod name, used verbatim in every file")
    tracks: list[TrackReference] = Field(default_factory=list)
    supported_version: str = HOI4_SUPPORTED_VERSION
    version: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Mod name must not be empty")
        return v

    @classmethod
    def from_files(
        cls,
        name: str,
        track_files: list[str],
        *,
        version: str,
        supported_version: str = HOI4_SUPPORTED_VERSION,
    ) -> "StationContent":
        return cls(
            name=name,
            tracks=[TrackReference(source=f) for f in track_files],
            supported_version=supported_version,
            version=version,
        )

    @property
    def track_ids(self) -> list[str]:
        return [t.track_id for t in self.tracks]

    @property
    def descriptor(self) -> ModDescriptor:
        return ModDescriptor(name=self.name, supported_version=self.supported_version)

    @property
    def external_descriptor(self) -> ExternalDescriptor:
        return ExternalDescriptor(
            name=self.name,
            supported_version=self.supported_version,
            version=self.version,
        )

    @property
    def music_entries(self) -> list[MusicEntry]:
        return [MusicEntry.from_track(t) for t in self.tracks]

    @property
    def asset_entries(self) -> list[AssetEntry]:
        return [AssetEntry.from_track(t) for t in self.tracks]
