"""Single-shot file CRUD operations with logged, inspectable outcomes."""

__version__ = "0.1.0"

# Export protocol interfaces for type hints and dependency injection
from file_crud.protocols import FileOperations, FileSystem
from file_crud.types import Operation, OpResult, OpStatus

__all__ = [
    "__version__",
    "FileOperations",
    "FileSystem",
    "Operation",
    "OpResult",
    "OpStatus",
]
