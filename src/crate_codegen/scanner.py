# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Deterministic directory listing."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from .errors import invalid_input

__all__ = ["list_children"]


def _sort_key(path: Path) -> Tuple[int, str, str]:
    # Directories first, then case-insensitive name; exact name breaks ties.
    return (0 if path.is_dir() else 1, path.name.casefold(), path.name)


def list_children(directory: Path) -> List[Path]:
    """Return the immediate children of ``directory`` in generation order.

    All subdirectories precede all files; each group is ordered by
    case-insensitive name. The order is what makes generated output
    byte-for-byte reproducible across runs.

    Raises:
        InvalidInputError: ``directory`` is missing, not a directory, or
            cannot be listed.
    """
    directory = Path(directory)
    if not directory.exists() or not directory.is_dir():
        raise invalid_input(
            f"Invalid directory passed: {directory.resolve()}",
            {"path": str(directory)},
        )
    try:
        children = list(directory.iterdir())
    except OSError as e:
        raise invalid_input(
            f"Cannot list directory {directory}: {e}",
            {"path": str(directory)},
        ) from e
    return sorted(children, key=_sort_key)
