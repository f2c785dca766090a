# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read the update descriptor and extract its declared file changes."""

from __future__ import annotations

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import ManifestParseError
from .paths import canonicalize


class FileChanges(BaseModel):
    """The ``file_changes`` section of an update descriptor."""

    model_config = ConfigDict(extra="allow")

    added_files: list[str] = Field(default_factory=list)
    removed_files: list[str] = Field(default_factory=list)
    modified_files: list[str] = Field(default_factory=list)

    @field_validator("added_files", "removed_files", "modified_files", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return [] if value is None else value


class UpdateDescriptor(BaseModel):
    """Subset of the update descriptor consumed during validation.

    Only ``file_changes`` is interpreted; every other key is accepted as-is.
    """

    model_config = ConfigDict(extra="allow")

    file_changes: FileChanges = Field(default_factory=FileChanges)

    @property
    def added_files(self) -> set[str]:
        """Return the canonical keys of files declared as newly added.

        Returns:
            set[str]: Added file paths normalised for set comparison.
        """

        return {key for key in (canonicalize(entry) for entry in self.file_changes.added_files) if key}


def parse_descriptor(data: bytes | str, *, source: str = "update descriptor") -> UpdateDescriptor:
    """Parse the raw descriptor document.

    Args:
        data: YAML document as read from the update package.
        source: Name used in error messages.

    Returns:
        UpdateDescriptor: Parsed descriptor model.

    Raises:
        ManifestParseError: If the document is not YAML or has the wrong shape.
    """

    try:
        payload = yaml.safe_load(data)
    except yaml.YAMLError as exc:
        raise ManifestParseError(f"Error occurred while unmarshalling the yaml in '{source}': {exc}") from exc
    if payload is None:
        raise ManifestParseError(f"'{source}' is empty.")
    if not isinstance(payload, dict):
        raise ManifestParseError(f"'{source}' must contain a mapping at the top level.")
    if payload.get("file_changes") is None:
        payload = {key: value for key, value in payload.items() if key != "file_changes"}
    try:
        return UpdateDescriptor.model_validate(payload)
    except PydanticValidationError as exc:
        raise ManifestParseError(f"Invalid file_changes section in '{source}': {exc}") from exc


__all__ = ["FileChanges", "UpdateDescriptor", "parse_descriptor"]
