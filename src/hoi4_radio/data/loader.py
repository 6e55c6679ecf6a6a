"""Bundled resource access for interface templates and placeholder art."""

from pathlib import Path
from string import Template

from hoi4_radio.constants import GUI_TEMPLATE

_DATA_DIR = Path(__file__).parent
_GUI_CACHE: Template | None = None


def bundled_path(name: str) -> Path:
    """Resolve a file shipped alongside this module."""
    return _DATA_DIR / name


def load_gui_template() -> Template:
    """Load the faceplate .gui template (cached after first call).

    The layout is static apart from ``${mod_name}`` placeholders.
    """
    global _GUI_CACHE
    if _GUI_CACHE is None:
        _GUI_CACHE = Template(bundled_path(GUI_TEMPLATE).read_text(encoding="utf-8"))
    return _GUI_CACHE


def render_gui(mod_name: str) -> str:
    """Render the faceplate layout for a station."""
    return load_gui_template().substitute(mod_name=mod_name)


def read_bundled_bytes(name: str) -> bytes:
    """Read a bundled binary asset such as the placeholder faceplate."""
    return bundled_path(name).read_bytes()
