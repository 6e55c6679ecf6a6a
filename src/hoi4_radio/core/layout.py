"""On-disk layout of a generated radio mod."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ModPaths:
    """Every path the generator writes for one mod.

    Note the British "localisation" spelling; HOI4 ignores a
    "localization" folder.
    """

    output_root: Path
    mod_name: str

    @property
    def mod_root(self) -> Path:
        return self.output_root / self.mod_name

    @property
    def music_dir(self) -> Path:
        return self.mod_root / "music" / self.mod_name

    @property
    def localisation_dir(self) -> Path:
        return self.mod_root / "localisation"

    @property
    def interface_dir(self) -> Path:
        return self.mod_root / "interface"

    @property
    def gfx_dir(self) -> Path:
        return self.mod_root / "gfx"

    @property
    def gfx_interface_dir(self) -> Path:
        return self.gfx_dir / "interface"

    @property
    def directories(self) -> list[Path]:
        return [
            self.mod_root,
            self.music_dir,
            self.localisation_dir,
            self.interface_dir,
            self.gfx_dir,
            self.gfx_interface_dir,
        ]

    @property
    def descriptor(self) -> Path:
        return self.mod_root / "descriptor.mod"

    @property
    def external_descriptor(self) -> Path:
        return self.output_root / f"{self.mod_name}.mod"

    @property
    def localisation_file(self) -> Path:
        return self.localisation_dir / f"{self.mod_name}_l_english.yml"

    @property
    def gfx_file(self) -> Path:
        return self.interface_dir / f"{self.mod_name}.gfx"

    @property
    def gui_file(self) -> Path:
        return self.interface_dir / f"{self.mod_name}.gui"

    @property
    def faceplate_file(self) -> Path:
        return self.gfx_dir / f"{self.mod_name}_faceplate.dds"

    @property
    def music_script(self) -> Path:
        return self.music_dir / f"{self.mod_name}_music.txt"

    @property
    def music_asset(self) -> Path:
        return self.music_dir / f"{self.mod_name}_music.asset"

    @property
    def files(self) -> list[Path]:
        return [
            self.descriptor,
            self.external_descriptor,
            self.localisation_file,
            self.gfx_file,
            self.gui_file,
            self.faceplate_file,
            self.music_script,
            self.music_asset,
        ]
