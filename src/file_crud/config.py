"""Run configuration: which operation to execute and on which paths."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from file_crud.types import Operation

# Defaults used when neither a config file nor a flag provides a value
DEFAULT_DIRECTORY = Path("/tmp/testDir/")
DEFAULT_FILE_NAME = "a.txt"
DEFAULT_CONTENT = "Hello, this is my file content!"
DEFAULT_NEW_FILE_NAME = "updatedFile.txt"

CONFIG_SUFFIXES = (".json", ".yaml", ".yml")


class OperationConfig(BaseModel):
    """Target paths, content and the selected operation for a single run."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    directory: Path = DEFAULT_DIRECTORY
    file_name: str = Field(default=DEFAULT_FILE_NAME, alias="fileName", min_length=1)
    content: str = DEFAULT_CONTENT
    new_file_name: str = Field(default=DEFAULT_NEW_FILE_NAME, alias="newFileName", min_length=1)
    operation: Operation = Operation.CREATE_FILE

    @classmethod
    def from_file(cls, path: Path) -> OperationConfig:
        """Load a configuration from a JSON or YAML file.

        Args:
            path: Path to a .json, .yaml or .yml file.

        Returns:
            Parsed OperationConfig.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If the file is unreadable, the suffix is unsupported or
                the document is invalid.
        """
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        suffix = path.suffix.lower()
        if suffix not in CONFIG_SUFFIXES:
            raise ValueError(
                f"Unsupported config format '{suffix}' (expected one of {', '.join(CONFIG_SUFFIXES)})"
            )

        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ValueError(f"Cannot read config file {path}: {e}") from e
        try:
            data = json.loads(text) if suffix == ".json" else yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ValueError(f"Invalid config file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Invalid config file {path}: expected a mapping")
        return cls.model_validate(data)

    def merged(self, **overrides: Any) -> OperationConfig:
        """Return a copy with every non-None override applied.

        Overrides are validated the same way as file values.
        """
        data = self.model_dump()
        data.update({key: value for key, value in overrides.items() if value is not None})
        return type(self).model_validate(data)


def load_config(path: Path | None = None, **overrides: Any) -> OperationConfig:
    """Build the effective configuration.

    Args:
        path: Optional config file. Defaults apply when omitted.
        **overrides: Field values that win over the file (None is ignored).

    Returns:
        Validated OperationConfig.
    """
    config = OperationConfig.from_file(path) if path else OperationConfig()
    return config.merged(**overrides)
