"""Dispatch a configured operation to the matching file operation."""

from __future__ import annotations

from typing import Callable

from file_crud.config import OperationConfig
from file_crud.protocols import FileOperations
from file_crud.types import Operation, OpResult

Handler = Callable[[OperationConfig, FileOperations], OpResult]

HANDLERS: dict[Operation, Handler] = {
    Operation.CREATE_DIRECTORY: lambda cfg, ops: ops.create_directory(cfg.directory),
    Operation.CREATE_FILE: lambda cfg, ops: ops.create_file(cfg.directory, cfg.file_name),
    Operation.WRITE_FILE_CONTENT: lambda cfg, ops: ops.write_file(
        cfg.directory, cfg.file_name, cfg.content
    ),
    Operation.RENAME_FILE: lambda cfg, ops: ops.rename_file(
        cfg.directory, cfg.file_name, cfg.new_file_name
    ),
    Operation.DELETE_FILE: lambda cfg, ops: ops.delete_file(cfg.directory, cfg.file_name),
}

_missing = set(Operation) - set(HANDLERS)
if _missing:
    raise RuntimeError(f"No handler for operations: {sorted(op.value for op in _missing)}")


def run_operation(config: OperationConfig, ops: FileOperations) -> OpResult:
    """Execute exactly one file operation selected by the configuration.

    Args:
        config: Effective run configuration.
        ops: File operations implementation.

    Returns:
        OpResult of the selected operation.

    Raises:
        ValueError: If the selector has no handler.
    """
    try:
        handler = HANDLERS[Operation(config.operation)]
    except (KeyError, ValueError) as e:
        raise ValueError(f"Invalid operation: {config.operation!r}") from e
    return handler(config, ops)
