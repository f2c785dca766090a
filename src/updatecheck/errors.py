# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fatal validation errors raised while checking an update package.

Every error is terminal for the run: nothing is retried or recovered locally.
The CLI maps each one to a failure banner and a non-zero exit status.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

FAILURE_EXIT_CODE: Final[int] = 1


class ValidationError(Exception):
    """Base class for fatal conditions detected during a validation run."""

    exit_code: int = FAILURE_EXIT_CODE

    def __init__(self, message: str) -> None:
        """Initialise the error with a human-readable ``message``.

        Args:
            message: Text identifying the offending path or name.
        """

        super().__init__(message)
        self.message = message


class LocationError(ValidationError):
    """Raised when an input location is missing or has the wrong kind."""


class StructureError(ValidationError):
    """Raised when an archive entry is not rooted under the expected folder."""

    def __init__(self, path: str, expected_root: str, actual_root: str | None = None) -> None:
        if actual_root is None:
            message = f"'{path}' should be in a root folder called '{expected_root}'."
        else:
            message = f"'{path}' should be in '{expected_root}' root directory. But it is in '{actual_root}' directory."
        super().__init__(message)
        self.path = path
        self.expected_root = expected_root
        self.actual_root = actual_root


class NamingError(ValidationError):
    """Raised when the package base name lacks the required prefix."""

    def __init__(self, name: str, prefix: str) -> None:
        super().__init__(f"Update file '{name}' does not have the '{prefix}' prefix.")
        self.name = name
        self.prefix = prefix


class LayoutError(ValidationError):
    """Raised when a non-resource entry lives outside the content root."""

    def __init__(self, path: str, expected_folder: str) -> None:
        super().__init__(f"'{path}' is not a known resource file. It should be in '{expected_folder}/' folder.")
        self.path = path
        self.expected_folder = expected_folder


class MissingResourceError(ValidationError):
    """Raised when mandatory resource files are absent from the package."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = tuple(missing)
        listing = "\n".join(f"\t- {name}" for name in self.missing)
        super().__init__(f"Following resource file(s) were not found in the update zip:\n{listing}")


class IncompleteReadError(ValidationError):
    """Raised when fewer (or more) entries were processed than the source declared."""

    def __init__(self, source: str, processed: int, declared: int) -> None:
        super().__init__(f"All files not read from '{source}': processed {processed} of {declared} entries.")
        self.source = source
        self.processed = processed
        self.declared = declared


class ManifestParseError(ValidationError):
    """Raised when the update descriptor cannot be read or parsed."""


class SourceReadError(ValidationError):
    """Raised when the archive or filesystem layer fails to read a location."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Error occurred while reading '{path}': {reason}")
        self.path = str(path)
        self.reason = reason


@dataclass(frozen=True, slots=True)
class Violation:
    """Describe an update file with no distribution counterpart."""

    path: str
    reason: str = "not found in distribution and it is not a newly added file."

    @property
    def display_path(self) -> str:
        """Return the path rooted at the installation directory.

        Returns:
            str: ``path`` with a leading ``/`` as shown to users.
        """

        return f"/{self.path}"

    def describe(self) -> str:
        """Return the one-line user-facing description of the violation.

        Returns:
            str: Path and reason joined for display.
        """

        return f"{self.display_path} {self.reason}"


class ReconciliationError(ValidationError):
    """Raised when an update file is neither distributed nor declared as added."""

    def __init__(self, violations: Sequence[Violation]) -> None:
        if not violations:
            raise ValueError("ReconciliationError requires at least one violation")
        self.violations = tuple(violations)
        self.path = self.violations[0].path
        super().__init__("\n".join(violation.describe() for violation in self.violations))


__all__ = [
    "FAILURE_EXIT_CODE",
    "IncompleteReadError",
    "LayoutError",
    "LocationError",
    "ManifestParseError",
    "MissingResourceError",
    "NamingError",
    "ReconciliationError",
    "SourceReadError",
    "StructureError",
    "ValidationError",
    "Violation",
]
