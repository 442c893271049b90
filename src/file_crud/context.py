"""Application context for dependency injection.

Separates object creation from object use so CLI commands can be tested
with injected doubles. Dependencies are typed with Protocols rather than
concrete classes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from file_crud.protocols import FileOperations, FileSystem


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from file_crud.filesystem import RealFileSystem
    return RealFileSystem()


@dataclass
class AppContext:
    """Container for application dependencies.

    Provides a single injection point for the services used by CLI commands.
    """

    operations: FileOperations
    filesystem: FileSystem = field(default_factory=_default_filesystem)


def create_context(filesystem: FileSystem | None = None) -> AppContext:
    """Factory for application dependencies.

    Args:
        filesystem: Override filesystem implementation (for testing).

    Returns:
        Configured AppContext whose operations share its filesystem.
    """
    from file_crud.filesystem import RealFileSystem
    from file_crud.operations import FileOps

    filesystem = filesystem or RealFileSystem()
    return AppContext(
        operations=FileOps.create(filesystem),
        filesystem=filesystem,
    )
