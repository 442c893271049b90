"""Filesystem abstraction for testability.

RealFileSystem wraps the standard library Path and os primitives that the
file operations rely on. Errors are not caught here.
"""

from __future__ import annotations

import os
from pathlib import Path


class RealFileSystem:
    """Production filesystem implementation.

    Satisfies the FileSystem protocol structurally.
    """

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        return path.is_file()

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        path.mkdir(parents=parents, exist_ok=exist_ok)

    def create_empty(self, path: Path) -> None:
        """Create a zero-length file without overwriting an existing one."""
        with open(path, "x"):
            pass

    def write_text(self, path: Path, content: str) -> None:
        """Overwrite a file with UTF-8 text."""
        path.write_text(content, encoding="utf-8")

    def write_bytes(self, path: Path, content: bytes) -> None:
        """Overwrite a file with raw bytes."""
        path.write_bytes(content)

    def rename(self, src: Path, dst: Path) -> None:
        """Rename a file."""
        os.rename(src, dst)

    def unlink(self, path: Path) -> None:
        """Remove a file."""
        path.unlink()
