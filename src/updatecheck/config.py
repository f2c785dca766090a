# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models describing update package conventions."""

from __future__ import annotations

from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .paths import SEPARATOR, canonicalize


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


DEFAULT_NAME_PREFIX: Final[str] = "WSO2-CARBON-UPDATE"
DEFAULT_CONTENT_ROOT: Final[str] = "carbon.home"
DEFAULT_LICENSE_FILE: Final[str] = "LICENSE.txt"
DEFAULT_README_FILE: Final[str] = "README.txt"
DEFAULT_DESCRIPTOR_FILE: Final[str] = "update-descriptor.yaml"
DEFAULT_INSTRUCTIONS_FILE: Final[str] = "instructions.txt"
DEFAULT_NOT_A_CONTRIBUTION_FILE: Final[str] = "NOT_A_CONTRIBUTION.txt"


class ResourceNames(BaseModel):
    """Reserved top-level resource file names of an update package."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    license: str = DEFAULT_LICENSE_FILE
    readme: str = DEFAULT_README_FILE
    descriptor: str = DEFAULT_DESCRIPTOR_FILE
    instructions: str = DEFAULT_INSTRUCTIONS_FILE
    not_a_contribution: str = DEFAULT_NOT_A_CONTRIBUTION_FILE

    @field_validator("*")
    @classmethod
    def _require_plain_file_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise ValueError("resource file names must not be empty")
        if SEPARATOR in name or "\\" in name:
            raise ValueError(f"resource file name '{name}' must not contain a path separator")
        return name

    @property
    def mandatory(self) -> tuple[str, ...]:
        """Return resource names that every update package must contain.

        Returns:
            tuple[str, ...]: License, readme, and descriptor file names.
        """

        return (self.license, self.readme, self.descriptor)

    @property
    def optional(self) -> tuple[str, ...]:
        """Return resource names that an update package may omit.

        Returns:
            tuple[str, ...]: Instructions and not-a-contribution file names.
        """

        return (self.instructions, self.not_a_contribution)


class ValidationConfig(BaseModel):
    """Naming and layout conventions applied to every validation run."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    name_prefix: str = DEFAULT_NAME_PREFIX
    content_root: str = DEFAULT_CONTENT_ROOT
    resources: ResourceNames = Field(default_factory=ResourceNames)

    @field_validator("content_root")
    @classmethod
    def _canonical_content_root(cls, value: str) -> str:
        root = canonicalize(value)
        if not root:
            raise ValueError("content_root must name a folder")
        return root

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible mapping of the configuration.

        Returns:
            dict[str, Any]: Serialised configuration payload.
        """

        return self.model_dump(mode="json")


__all__ = [
    "ConfigError",
    "DEFAULT_CONTENT_ROOT",
    "DEFAULT_DESCRIPTOR_FILE",
    "DEFAULT_INSTRUCTIONS_FILE",
    "DEFAULT_LICENSE_FILE",
    "DEFAULT_NAME_PREFIX",
    "DEFAULT_NOT_A_CONTRIBUTION_FILE",
    "DEFAULT_README_FILE",
    "ResourceNames",
    "ValidationConfig",
]
