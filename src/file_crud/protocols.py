"""Protocol definitions for core abstractions.

This module defines abstract interfaces (Protocols) for the filesystem
primitives and for the file operations built on top of them. Concrete
implementations satisfy these protocols structurally (duck typing), so test
doubles can be injected without inheritance.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from file_crud.types import OpResult


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem primitives.

    Implementations raise OSError (or a subclass) on failure. Callers are
    responsible for turning those errors into results.
    """

    def is_dir(self, path: Path) -> bool:
        """Check if a path is an existing directory.

        Args:
            path: Path to check.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...

    def is_file(self, path: Path) -> bool:
        """Check if a path is an existing regular file.

        Args:
            path: Path to check.

        Returns:
            True if path is a regular file, False otherwise.
        """
        ...

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory.

        Args:
            path: Path to create.
            parents: Create parent directories if needed.
            exist_ok: Don't raise if directory exists.
        """
        ...

    def create_empty(self, path: Path) -> None:
        """Create a zero-length file; raise FileExistsError if one is already there.

        Args:
            path: Path of the file to create.
        """
        ...

    def write_text(self, path: Path, content: str) -> None:
        """Overwrite a file with text content.

        Args:
            path: Path to the file.
            content: Content to write.
        """
        ...

    def write_bytes(self, path: Path, content: bytes) -> None:
        """Overwrite a file with binary content.

        Args:
            path: Path to the file.
            content: Content to write.
        """
        ...

    def rename(self, src: Path, dst: Path) -> None:
        """Rename a file.

        Args:
            src: Existing path.
            dst: New path.
        """
        ...

    def unlink(self, path: Path) -> None:
        """Remove a file.

        Args:
            path: Path to remove.
        """
        ...


@runtime_checkable
class FileOperations(Protocol):
    """Protocol for the logged file operations.

    Every mutating operation reports its outcome as an OpResult and never
    raises for filesystem failures.
    """

    def directory_exists(self, path: str | Path) -> bool:
        """Return True iff path exists and is a directory."""
        ...

    def file_exists(self, path: str | Path) -> bool:
        """Return True iff path exists and is a regular file."""
        ...

    def create_directory(self, path: str | Path) -> OpResult:
        """Create a directory and any missing ancestors.

        Args:
            path: Directory to create.

        Returns:
            SKIPPED if it already exists, DONE or FAILED otherwise.
        """
        ...

    def create_file(self, directory: str | Path, name: str) -> OpResult:
        """Create an empty file inside a directory.

        Args:
            directory: Containing directory.
            name: File name.

        Returns:
            SKIPPED if the file already exists, DONE or FAILED otherwise.
        """
        ...

    def write_file(self, directory: str | Path, name: str, content: str | bytes) -> OpResult:
        """Overwrite the content of an existing file.

        Args:
            directory: Containing directory.
            name: File name.
            content: New content.

        Returns:
            SKIPPED if the file does not exist, DONE or FAILED otherwise.
        """
        ...

    def rename_file(self, directory: str | Path, old_name: str, new_name: str) -> OpResult:
        """Rename a file within a directory.

        Args:
            directory: Containing directory.
            old_name: Current file name.
            new_name: New file name.

        Returns:
            DONE or FAILED.
        """
        ...

    def delete_file(self, directory: str | Path, name: str) -> OpResult:
        """Delete a file from a directory.

        Args:
            directory: Containing directory.
            name: File name.

        Returns:
            SKIPPED if the file does not exist, DONE or FAILED otherwise.
        """
        ...
