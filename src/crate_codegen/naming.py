# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Identifier sanitization and per-namespace collision resolution."""

from __future__ import annotations

import keyword
import re
from typing import Iterable, Set

from .errors import E_IDENTIFIER_EXHAUSTED, IdentifierExhaustedError

__all__ = [
    "COLLECTION_NAME",
    "DEFAULT_MAX_SUFFIX_ATTEMPTS",
    "IdentifierScope",
    "constant_name",
    "file_extension",
    "file_stem",
    "namespace_name",
    "sanitize",
]

COLLECTION_NAME = "LIST"
DEFAULT_MAX_SUFFIX_ATTEMPTS = 10_000

_INVALID_CHARS = re.compile(r"[^0-9A-Za-z_]")

# Names the generated root class defines itself; a directory class must not
# shadow them.
_RESERVED_NAMESPACE_NAMES = frozenset(
    {
        COLLECTION_NAME,
        "Asset",
        "FontAsset",
        "get",
        "close",
        "_get_manager",
        "_context",
        "_manager",
    }
)


def file_extension(file_name: str) -> str:
    i = file_name.rfind(".")
    return file_name[i + 1 :] if i > 0 else ""


def file_stem(file_name: str) -> str:
    i = file_name.rfind(".")
    return file_name[:i] if i > 0 else file_name


def sanitize(name: str) -> str:
    """Map ``name`` onto ``[A-Za-z0-9_]`` and make it a legal identifier.

    Every other character becomes an underscore and a leading digit gets an
    underscore prefix. Character classes are ASCII-only so the result does
    not depend on the host locale.
    """
    out = _INVALID_CHARS.sub("_", name) or "_"
    if out[0].isdigit():
        out = "_" + out
    return out


def _unmangle(name: str) -> str:
    """Collapse a leading ``__`` so a class body does not mangle ``name``.

    Full dunders (``__x__``) are left alone; Python never mangles them.
    """
    if name.startswith("__") and not name.endswith("__"):
        return "_" + name.lstrip("_")
    return name


def constant_name(file_name: str) -> str:
    """Upper-case constant identifier for a file (extension dropped)."""
    return _unmangle(sanitize(file_stem(file_name)).upper())


def namespace_name(dir_name: str) -> str:
    """Class identifier for a directory, kept in its original case."""
    out = _unmangle(sanitize(dir_name))
    if (
        keyword.iskeyword(out)
        or out in _RESERVED_NAMESPACE_NAMES
        or (out.startswith("__") and out.endswith("__"))
    ):
        out += "_"
    return out


class IdentifierScope:
    """Case-insensitive set of identifiers taken within one namespace.

    The collection constant name is always reserved so a file called
    ``list.png`` cannot shadow it.
    """

    def __init__(
        self,
        max_attempts: int = DEFAULT_MAX_SUFFIX_ATTEMPTS,
        reserved: Iterable[str] = (COLLECTION_NAME,),
    ) -> None:
        self.max_attempts = max_attempts
        self._taken: Set[str] = {r.upper() for r in reserved}

    def __contains__(self, identifier: str) -> bool:
        return identifier.upper() in self._taken

    def claim(self, candidate: str, also_taken: Iterable[str] = ()) -> str:
        """Reserve ``candidate`` or the first free ``candidate_<n>``.

        Suffixes count up from 0. ``also_taken`` lists exact-case names that
        are unavailable without being part of this scope (e.g. nested class
        names).

        Raises:
            IdentifierExhaustedError: no free name within ``max_attempts``
                suffixes.
        """
        blocked = set(also_taken)

        def _free(name: str) -> bool:
            return name not in self and name not in blocked

        chosen = candidate if _free(candidate) else None
        if chosen is None:
            base = candidate + "_"
            for counter in range(self.max_attempts):
                attempt = f"{base}{counter}"
                if _free(attempt):
                    chosen = attempt
                    break
        if chosen is None:
            raise IdentifierExhaustedError(
                code=E_IDENTIFIER_EXHAUSTED,
                message=(
                    f"No free identifier for '{candidate}' after "
                    f"{self.max_attempts} attempts"
                ),
                context={"identifier": candidate},
            )
        self._taken.add(chosen.upper())
        return chosen
