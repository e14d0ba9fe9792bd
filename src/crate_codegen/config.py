# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Configuration file loading and JSON Schema validation."""

from __future__ import annotations

import dataclasses
import json
import keyword
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import jsonschema
import yaml

from .errors import config_error, invalid_input
from .fonts import FONT_EXTENSIONS
from .naming import DEFAULT_MAX_SUFFIX_ATTEMPTS
from .templates import HEADER_NAMES

__all__ = [
    "CrateConfig",
    "DEFAULT_CONFIG_NAME",
    "find_schema",
    "validate_doc",
    "config_from_doc",
    "load_config",
    "check_identifier",
    "check_root_class",
    "check_package_name",
    "default_config_path",
]

DEFAULT_CONFIG_NAME = "crate.yaml"
SCHEMA_NAME = "crate.schema.json"


@dataclass(frozen=True)
class CrateConfig:
    assets: Path
    output: Path
    package: str
    root_class: str = "Crate"
    module: str = "crate"
    font_extensions: Tuple[str, ...] = FONT_EXTENSIONS
    max_suffix_attempts: int = DEFAULT_MAX_SUFFIX_ATTEMPTS

    def with_overrides(self, **overrides: Any) -> "CrateConfig":
        """Copy with every non-``None`` override applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **values)


def check_identifier(name: str, what: str) -> str:
    if not name.isidentifier() or not name.isascii() or keyword.iskeyword(name):
        raise invalid_input(
            f"{what} must be a Python identifier, got '{name}'", {what: name}
        )
    return name


def check_root_class(name: str) -> str:
    check_identifier(name, "root_class")
    if name in HEADER_NAMES:
        raise invalid_input(
            f"root_class '{name}' clashes with a name the generated module "
            "already defines",
            {"root_class": name},
        )
    return name


def check_package_name(package: str) -> str:
    for part in package.split("."):
        check_identifier(part, "package")
    return package


def find_schema(explicit_path: str | Path | None = None) -> Path:
    """Explicit schema path if given, else the schema shipped in the package."""
    if explicit_path:
        return Path(explicit_path)
    return Path(__file__).resolve().parent / SCHEMA_NAME


def validate_doc(
    doc: Dict[str, Any], schema_path: str | Path | None = None
) -> None:
    """Validate ``doc`` against the config schema.

    Raises:
        ConfigError: the schema cannot be read or the document violates it.
    """
    p = find_schema(schema_path)
    try:
        with p.open("r", encoding="utf-8") as f:
            schema = json.load(f)
    except (OSError, ValueError) as e:
        raise config_error(f"Failed to load schema at {p}: {e}") from e
    try:
        jsonschema.validate(instance=doc, schema=schema)
    except jsonschema.ValidationError as e:
        path = "->".join(str(x) for x in e.path) if e.path else "(root)"
        raise config_error(
            f"Config validation failed at {path}: {e.message}",
            {"path": path},
        ) from e


def config_from_doc(doc: Dict[str, Any], base_dir: Path) -> CrateConfig:
    """Build a :class:`CrateConfig`; relative paths resolve from ``base_dir``."""
    validate_doc(doc)

    def _resolve(value: str) -> Path:
        p = Path(value)
        return p if p.is_absolute() else (base_dir / p)

    exts = doc.get("font_extensions")
    return CrateConfig(
        assets=_resolve(doc["assets"]),
        output=_resolve(doc["output"]),
        package=doc["package"],
        root_class=doc.get("root_class", "Crate"),
        module=doc.get("module", "crate"),
        font_extensions=(
            tuple(e.lower().lstrip(".") for e in exts)
            if exts is not None
            else FONT_EXTENSIONS
        ),
        max_suffix_attempts=int(
            doc.get("max_suffix_attempts", DEFAULT_MAX_SUFFIX_ATTEMPTS)
        ),
    )


def load_config(path: str | Path) -> CrateConfig:
    """Load and validate a YAML config file.

    Raises:
        ConfigError: the file is unreadable, is not a YAML mapping, or fails
            schema validation.
    """
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            doc = yaml.safe_load(f)
    except OSError as e:
        raise config_error(f"Cannot read config {p}: {e}") from e
    except yaml.YAMLError as e:
        raise config_error(f"Invalid YAML in {p}: {e}") from e
    if not isinstance(doc, dict):
        raise config_error(f"Config {p} must be a mapping")
    return config_from_doc(doc, p.resolve().parent)


def default_config_path(cwd: Optional[Path] = None) -> Optional[Path]:
    candidate = (cwd or Path.cwd()) / DEFAULT_CONFIG_NAME
    return candidate if candidate.is_file() else None
