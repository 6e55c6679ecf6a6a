"""Configuration and environment loading."""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

from hoi4_radio.constants import HOI4_SUPPORTED_VERSION

load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Paths
    output_dir: Path = Field(default=Path("./output"), alias="HOI4_RADIO_OUTPUT_DIR")
    downloads_dir: Path = Field(
        default=Path("./downloads"), alias="HOI4_RADIO_DOWNLOADS_DIR"
    )

    # Engine
    supported_version: str = Field(
        default=HOI4_SUPPORTED_VERSION, alias="HOI4_SUPPORTED_VERSION"
    )

    model_config = {"env_file": ".env", "extra": "ignore", "populate_by_name": True}

    def mod_root(self, mod_name: str) -> Path:
        """Directory a mod with this name is generated into."""
        return self.output_dir / mod_name

    def external_descriptor_path(self, mod_name: str) -> Path:
        """Path of the user-mod descriptor that sits beside the mod folder.

        Mods not installed through the Steam Workshop need this file in the
        launcher's mod directory for the game to find them.
        """
        return self.output_dir / f"{mod_name}.mod"


_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get application settings singleton."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
