"""Async file primitives used by the generator.

Each call runs the blocking filesystem work in a worker thread and is
awaited before the next one starts. Errors are not caught here.
"""

import asyncio
import shutil
from pathlib import Path

from hoi4_radio.data.loader import read_bundled_bytes


class FileLayer:
    """Directory creation, copy, write and bundled-asset reads."""

    async def create_directory(self, path: Path) -> None:
        """Create a directory and its parents; existing directories are fine."""
        await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)

    async def copy_file(self, src: Path, dst: Path) -> None:
        await asyncio.to_thread(shutil.copyfile, src, dst)

    async def write_file(self, path: Path, data: str | bytes) -> None:
        """Write text (as UTF-8) or raw bytes, replacing any existing file."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        await asyncio.to_thread(path.write_bytes, data)

    async def read_bundled_file(self, name: str) -> bytes:
        return await asyncio.to_thread(read_bundled_bytes, name)

    async def remove_tree(self, path: Path) -> None:
        """Delete a directory tree or single file if present."""
        await asyncio.to_thread(_remove, path)


def _remove(path: Path) -> None:
    if path.is_dir():
        shutil.rmtree(path)
    elif path.exists():
        path.unlink()
