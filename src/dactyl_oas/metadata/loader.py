"""Load controller metadata from a YAML or JSON file.

Expected shape::

    info:            # optional
      title: ...
      description: ...
      version: ...
    controllers:
      - name: UserController
        prefix: /users
        routes:
          - {methodName: getUser, path: /:id, requestMethod: GET}
        ...
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from dactyl_oas.errors import ConfigurationError
from dactyl_oas.metadata.base import ControllerMetadata
from dactyl_oas.metadata.registry import Application


class InfoOverrides(BaseModel):
    """Document header values supplied by a metadata file."""

    # YAML reads `version: 2.1` as a float
    model_config = ConfigDict(coerce_numbers_to_str=True)

    title: str | None = None
    description: str | None = None
    version: str | None = None


class MetadataFile(BaseModel):
    info: InfoOverrides = InfoOverrides()
    controllers: list[ControllerMetadata]


def load_metadata(file_path: Path) -> MetadataFile:
    """Parse and validate a metadata file."""
    text = file_path.read_text(encoding="utf-8")
    try:
        # JSON is a subset of YAML, one loader covers both
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Cannot parse {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"{file_path}: expected a mapping at the top level")

    try:
        return MetadataFile.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"{file_path}: invalid controller metadata: {e}") from e


def load_application(file_path: Path) -> tuple[Application, InfoOverrides]:
    """Load a metadata file as an ``Application`` plus its header overrides."""
    parsed = load_metadata(file_path)
    return Application(parsed.controllers), parsed.info
