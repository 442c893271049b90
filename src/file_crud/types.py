"""Shared data types for file-crud."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

__all__ = ["Operation", "OpResult", "OpStatus"]


class Operation(str, Enum):
    """Which single file operation to execute on a run."""

    CREATE_DIRECTORY = "createDirectory"
    CREATE_FILE = "createFile"
    WRITE_FILE_CONTENT = "writeFileContent"
    RENAME_FILE = "renameFile"
    DELETE_FILE = "deleteFile"


class OpStatus(str, Enum):
    """Outcome of a file operation."""

    DONE = "done"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class OpResult:
    """Result of a file operation.

    Attributes:
        operation: Operation that produced this result.
        status: DONE when the filesystem changed, SKIPPED for a no-op,
            FAILED when the underlying call raised.
        path: Path the operation targeted.
        message: Human-readable outcome, identical to the logged line.
        error: Error text from the failing call (None unless FAILED).
    """

    operation: Operation
    status: OpStatus
    path: Path
    message: str
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.status is OpStatus.FAILED and self.error is None:
            raise ValueError("status=FAILED requires error message")
        if self.status is not OpStatus.FAILED and self.error is not None:
            raise ValueError(f"status={self.status.name} but error is set")
        if not self.message:
            raise ValueError("message cannot be empty")

    @property
    def success(self) -> bool:
        """True unless the operation failed."""
        return self.status is not OpStatus.FAILED

    @property
    def changed(self) -> bool:
        """True if the operation modified the filesystem."""
        return self.status is OpStatus.DONE
