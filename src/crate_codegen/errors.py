# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Error definitions for CrateCodeGen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

E_INVALID_INPUT = "E_INVALID_INPUT"
E_WRITE_IO = "E_WRITE_IO"
E_IDENTIFIER_EXHAUSTED = "E_IDENTIFIER_EXHAUSTED"
E_CONFIG = "E_CONFIG"


@dataclass
class CrateError(Exception):
    code: str
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}" + (
            f" | ctx={self.context}" if self.context else ""
        )


class InvalidInputError(CrateError):
    pass


class ArtifactWriteError(CrateError):
    pass


class IdentifierExhaustedError(CrateError):
    pass


class ConfigError(CrateError):
    pass


class FontParseUnavailable(Exception):
    """Raised by the font reader when no family name can be extracted.

    Never leaves :mod:`crate_codegen.fonts`; callers fall back to the file
    name.
    """


def invalid_input(
    message: str, context: Optional[Dict[str, Any]] = None
) -> InvalidInputError:
    return InvalidInputError(
        code=E_INVALID_INPUT, message=message, context=context
    )


def write_error(
    message: str, context: Optional[Dict[str, Any]] = None
) -> ArtifactWriteError:
    return ArtifactWriteError(code=E_WRITE_IO, message=message, context=context)


def config_error(
    message: str, context: Optional[Dict[str, Any]] = None
) -> ConfigError:
    return ConfigError(code=E_CONFIG, message=message, context=context)


__all__ = [
    "CrateError",
    "InvalidInputError",
    "ArtifactWriteError",
    "IdentifierExhaustedError",
    "ConfigError",
    "FontParseUnavailable",
    "invalid_input",
    "write_error",
    "config_error",
    "E_INVALID_INPUT",
    "E_WRITE_IO",
    "E_IDENTIFIER_EXHAUSTED",
    "E_CONFIG",
]
