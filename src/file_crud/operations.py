"""File operations: create, write, rename and delete with logged outcomes."""

from __future__ import annotations

import logging
from pathlib import Path

from file_crud.filesystem import RealFileSystem
from file_crud.protocols import FileSystem
from file_crud.types import Operation, OpResult, OpStatus

logger = logging.getLogger(__name__)


class FileOps:
    """Thin, fallible wrappers around filesystem primitives.

    Each mutating operation logs exactly one line and returns an OpResult.
    OSError raised by the filesystem is caught at the failing call and turned
    into a FAILED result; it is never propagated to the caller.
    """

    def __init__(self, filesystem: FileSystem) -> None:
        """Initialize file operations.

        Args:
            filesystem: Filesystem abstraction (required).

        Note:
            Use factory method `create()` for production code.
        """
        self.fs = filesystem

    @classmethod
    def create(cls, filesystem: FileSystem | None = None) -> FileOps:
        """Factory method for production instantiation.

        Args:
            filesystem: Optional filesystem abstraction (created if not provided).

        Returns:
            Configured FileOps instance.
        """
        return cls(filesystem=filesystem or RealFileSystem())

    def _report(
        self,
        operation: Operation,
        status: OpStatus,
        path: Path,
        message: str,
        error: str | None = None,
    ) -> OpResult:
        level = logging.ERROR if status is OpStatus.FAILED else logging.INFO
        logger.log(level, message)
        return OpResult(
            operation=operation,
            status=status,
            path=path,
            message=message,
            error=error,
        )

    def directory_exists(self, path: str | Path) -> bool:
        """Return True iff path exists and is a directory.

        Inaccessible paths count as absent.
        """
        try:
            return self.fs.is_dir(Path(path))
        except OSError as e:
            logger.debug("Cannot stat %s: %s", path, e)
            return False

    def file_exists(self, path: str | Path) -> bool:
        """Return True iff path exists and is a regular file.

        Inaccessible paths count as absent.
        """
        try:
            return self.fs.is_file(Path(path))
        except OSError as e:
            logger.debug("Cannot stat %s: %s", path, e)
            return False

    def create_directory(self, path: str | Path) -> OpResult:
        """Create a directory and all missing ancestors.

        Args:
            path: Directory to create.

        Returns:
            OpResult; SKIPPED if the directory already exists.
        """
        op = Operation.CREATE_DIRECTORY
        path = Path(path)
        if self.directory_exists(path):
            return self._report(op, OpStatus.SKIPPED, path, f"Directory '{path}' already exists.")

        try:
            self.fs.mkdir(path, parents=True, exist_ok=True)
        except OSError as e:
            return self._report(
                op, OpStatus.FAILED, path, f"Error creating directory: {e}", error=str(e)
            )
        return self._report(op, OpStatus.DONE, path, f"Directory '{path}' created successfully.")

    def create_file(self, directory: str | Path, name: str) -> OpResult:
        """Create an empty file inside a directory.

        Args:
            directory: Containing directory.
            name: File name.

        Returns:
            OpResult; SKIPPED if the file already exists.
        """
        op = Operation.CREATE_FILE
        directory = Path(directory)
        path = directory / name
        if self.file_exists(path):
            return self._report(
                op,
                OpStatus.SKIPPED,
                path,
                f"File '{name}' already exists in directory '{directory}'.",
            )

        try:
            self.fs.create_empty(path)
        except OSError as e:
            return self._report(
                op, OpStatus.FAILED, path, f"Error creating file: {e}", error=str(e)
            )
        return self._report(
            op,
            OpStatus.DONE,
            path,
            f"Empty file '{name}' created successfully in directory '{directory}'.",
        )

    def write_file(self, directory: str | Path, name: str, content: str | bytes) -> OpResult:
        """Overwrite the content of an existing file.

        The file is never created here: a missing target is a no-op.

        Args:
            directory: Containing directory.
            name: File name.
            content: New content; text is written as UTF-8.

        Returns:
            OpResult; SKIPPED if the file does not exist.
        """
        op = Operation.WRITE_FILE_CONTENT
        directory = Path(directory)
        path = directory / name
        if not self.file_exists(path):
            return self._report(
                op,
                OpStatus.SKIPPED,
                path,
                f"File '{name}' does not exist in directory '{directory}'.",
            )

        try:
            if isinstance(content, bytes):
                self.fs.write_bytes(path, content)
            else:
                self.fs.write_text(path, content)
        except OSError as e:
            return self._report(
                op, OpStatus.FAILED, path, f"Error writing content to file: {e}", error=str(e)
            )
        return self._report(
            op,
            OpStatus.DONE,
            path,
            f"Content updated in file '{name}' successfully in directory '{directory}'.",
        )

    def rename_file(self, directory: str | Path, old_name: str, new_name: str) -> OpResult:
        """Rename a file within a directory.

        No existence check is made on the source; a missing source is
        reported as a failure.

        Args:
            directory: Containing directory.
            old_name: Current file name.
            new_name: New file name.

        Returns:
            OpResult with the source path.
        """
        op = Operation.RENAME_FILE
        directory = Path(directory)
        path = directory / old_name
        try:
            self.fs.rename(path, directory / new_name)
        except OSError as e:
            return self._report(
                op, OpStatus.FAILED, path, f"Error renaming file: {e}", error=str(e)
            )
        return self._report(
            op,
            OpStatus.DONE,
            path,
            f"File '{old_name}' renamed to '{new_name}' successfully in directory '{directory}'.",
        )

    def delete_file(self, directory: str | Path, name: str) -> OpResult:
        """Delete a file from a directory.

        Args:
            directory: Containing directory.
            name: File name.

        Returns:
            OpResult; SKIPPED if the file does not exist.
        """
        op = Operation.DELETE_FILE
        directory = Path(directory)
        path = directory / name
        if not self.file_exists(path):
            return self._report(
                op,
                OpStatus.SKIPPED,
                path,
                f"File '{name}' does not exist in directory '{directory}'.",
            )

        try:
            self.fs.unlink(path)
        except OSError as e:
            return self._report(
                op, OpStatus.FAILED, path, f"Error deleting file: {e}", error=str(e)
            )
        return self._report(
            op,
            OpStatus.DONE,
            path,
            f"File '{name}' deleted successfully from directory '{directory}'.",
        )
