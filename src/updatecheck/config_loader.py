# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Layered configuration loading.

Layers are merged in increasing precedence: built-in defaults, the
``[tool.updatecheck]`` table of ``pyproject.toml``, ``.updatecheck.toml`` and
finally a file passed with ``--config``. Tables merge key by key; any other
value in a later layer replaces the earlier one.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError as PydanticValidationError

from .config import ConfigError, ValidationConfig

INCLUDE_KEY: Final[str] = "include"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[tuple[str, ...]] = ("tool", "updatecheck")
PROJECT_CONFIG_FILENAME: Final[str] = ".updatecheck.toml"

LOGGER = logging.getLogger(__name__)

Fragment = dict[str, Any]


@dataclass(frozen=True, slots=True)
class ConfigLayer:
    """A TOML file contributing one layer of configuration.

    ``section`` selects a nested table (``("tool", "updatecheck")`` for
    ``pyproject.toml``). A missing file contributes nothing unless
    ``required`` is set.
    """

    path: Path
    section: tuple[str, ...] = ()
    required: bool = False

    def read(self) -> Fragment:
        """Return this layer's fragment with includes resolved.

        Raises:
            ConfigError: If a required file is missing, a document is not
                valid TOML, or includes form a cycle.
        """

        if not self.path.is_file():
            if self.required:
                raise ConfigError(f"Configuration file {self.path} does not exist")
            return {}
        document = read_toml(self.path)
        for key in self.section:
            table = document.get(key)
            if not isinstance(table, Mapping):
                return {}
            document = dict(table)
        return document


def read_toml(path: Path, *, chain: tuple[Path, ...] = ()) -> Fragment:
    """Load ``path`` and merge the files named by its ``include`` key beneath it.

    Include paths are relative to the including file. Values in the including
    file win over included ones.

    Args:
        path: TOML document to read.
        chain: Files already being read, outermost first.

    Returns:
        Fragment: Merged document without the ``include`` key.

    Raises:
        ConfigError: On unreadable or invalid TOML, or an include cycle.
    """

    resolved = path.resolve()
    if resolved in chain:
        cycle = " -> ".join(str(entry) for entry in (*chain, resolved))
        raise ConfigError(f"Circular include detected: {cycle}")
    try:
        document = tomllib.loads(resolved.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    merged: Fragment = {}
    for included in _include_paths(document.pop(INCLUDE_KEY, None), resolved.parent):
        merged = merge_fragments(merged, read_toml(included, chain=(*chain, resolved)))
    return merge_fragments(merged, document)


def _include_paths(raw: object, base_dir: Path) -> list[Path]:
    if raw is None:
        return []
    entries = [raw] if isinstance(raw, str) else raw
    if not isinstance(entries, list) or not all(isinstance(entry, str) for entry in entries):
        raise ConfigError(f"Unsupported include declaration: {raw!r}")
    return [base_dir / entry for entry in entries]


def merge_fragments(base: Mapping[str, Any], override: Mapping[str, Any]) -> Fragment:
    """Return ``base`` updated by ``override``, merging nested tables."""

    result: Fragment = dict(base)
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = merge_fragments(current, value)
        else:
            result[key] = value
    return result


def project_layers(root: Path, explicit: Path | None = None) -> list[ConfigLayer]:
    """Return the file layers consulted for ``root``, lowest precedence first."""

    layers = [
        ConfigLayer(root / PYPROJECT_FILENAME, section=PYPROJECT_SECTION),
        ConfigLayer(root / PROJECT_CONFIG_FILENAME),
    ]
    if explicit is not None:
        layers.append(ConfigLayer(explicit, required=True))
    return layers


def load_config(
    root: Path,
    *,
    explicit: Path | None = None,
    layers: Sequence[ConfigLayer] | None = None,
) -> ValidationConfig:
    """Merge the configuration layers over the defaults and validate the result.

    Args:
        root: Directory searched for ``pyproject.toml`` and ``.updatecheck.toml``.
        explicit: Optional file given via ``--config``.
        layers: Replaces the project layers when given.

    Returns:
        ValidationConfig: Conventions for a validation run.

    Raises:
        ConfigError: If a layer cannot be read or the merged values are invalid.
    """

    merged = ValidationConfig().to_dict()
    for layer in layers if layers is not None else project_layers(root, explicit):
        fragment = layer.read()
        if fragment:
            LOGGER.debug("Applying configuration from %s", layer.path)
            merged = merge_fragments(merged, fragment)
    try:
        return ValidationConfig.model_validate(merged)
    except PydanticValidationError as exc:
        raise ConfigError(str(exc)) from exc


__all__ = [
    "ConfigLayer",
    "PROJECT_CONFIG_FILENAME",
    "PYPROJECT_FILENAME",
    "load_config",
    "merge_fragments",
    "project_layers",
    "read_toml",
]
