# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Generator-version stamp embedded in, and read back from, artifacts.

The stamp is a SHA-256 over the tool version and the source of every module
that shapes the generated text. It says nothing about the scanned assets:
an artifact is "valid" when it was produced by this exact generator.
"""

from __future__ import annotations

import hashlib
import re
from pathlib import Path
from typing import Iterable, Optional

from ._version import __version__ as TOOL_VERSION

__all__ = [
    "GENERATOR_HASH",
    "MARKER_SUFFIX",
    "compute_generator_hash",
    "marker_line",
    "read_marker",
    "is_hash_valid",
]

MARKER_SUFFIX = "-- DO NOT EDIT THIS LINE"

# Fixed order; renaming or adding an output-shaping module means updating it.
GENERATOR_MODULES = (
    "scanner.py",
    "naming.py",
    "fonts.py",
    "model.py",
    "builder.py",
    "emitter.py",
    "render.py",
    "templates.py",
    "hashing.py",
)

_MARKER_RE = re.compile(
    r"^#\s*([0-9a-f]{64})\s+" + re.escape(MARKER_SUFFIX) + r"\s*$"
)


def compute_generator_hash(
    version: str = TOOL_VERSION,
    modules: Iterable[str] = GENERATOR_MODULES,
    package_dir: Optional[Path] = None,
) -> str:
    base = package_dir or Path(__file__).resolve().parent
    h = hashlib.sha256()
    h.update(version.encode("utf-8"))
    for name in modules:
        h.update(b"\0" + name.encode("utf-8") + b"\0")
        # Normalize newlines so checkouts with CRLF hash the same.
        h.update((base / name).read_bytes().replace(b"\r\n", b"\n"))
    return h.hexdigest()


GENERATOR_HASH = compute_generator_hash()


def marker_line(digest: str = GENERATOR_HASH) -> str:
    return f"# {digest} {MARKER_SUFFIX}"


def read_marker(path: Path) -> Optional[str]:
    """Return the hash stamped on the first line of ``path``, if any."""
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            first = f.readline()
    except OSError:
        return None
    m = _MARKER_RE.match(first.rstrip("\r\n"))
    return m.group(1) if m else None


def is_hash_valid(path: Path, expected: str = GENERATOR_HASH) -> bool:
    p = Path(path)
    if not p.exists() or not p.is_file():
        return False
    return read_marker(p) == expected
