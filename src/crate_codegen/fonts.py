# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Best-effort font family extraction via fontTools."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from fontTools.ttLib import TTFont  # type: ignore[import]

from .errors import FontParseUnavailable
from .logging import get_logger
from .naming import file_extension

__all__ = [
    "FONT_EXTENSIONS",
    "is_font_file",
    "read_font_family",
    "extract_font_family",
]

FONT_EXTENSIONS = ("ttf", "otf")

NAME_ID_FAMILY = 1
NAME_ID_FULLNAME = 4
NAME_ID_TYPO_FAMILY = 16

# Legacy family first: it is what most toolkits report as the family.
_FAMILY_NAME_IDS = (NAME_ID_FAMILY, NAME_ID_TYPO_FAMILY, NAME_ID_FULLNAME)


def is_font_file(
    file_name: str, extensions: Iterable[str] = FONT_EXTENSIONS
) -> bool:
    ext = file_extension(file_name).lower()
    return bool(ext) and ext in {e.lower().lstrip(".") for e in extensions}


def read_font_family(path: Path) -> str:
    """Return the family name stored in the font's ``name`` table.

    Raises:
        FontParseUnavailable: the file cannot be parsed or carries no usable
            family name.
    """
    try:
        with TTFont(
            str(path), lazy=True, recalcBBoxes=False, recalcTimestamp=False
        ) as tt:
            if "name" not in tt:
                raise FontParseUnavailable(f"{path}: no 'name' table")
            name_table = tt["name"]
            for name_id in _FAMILY_NAME_IDS:
                rec = name_table.getDebugName(name_id)
                if rec and rec.strip():
                    return rec.strip()
    except FontParseUnavailable:
        raise
    except Exception as e:
        raise FontParseUnavailable(f"{path}: {e}") from e
    raise FontParseUnavailable(f"{path}: no family name record")


def extract_font_family(path: Path) -> Optional[str]:
    """Family name of the font at ``path``, or ``None`` when unavailable."""
    try:
        return read_font_family(path)
    except FontParseUnavailable as e:
        get_logger("fonts").debug("Font name unavailable: %s", e)
        return None
