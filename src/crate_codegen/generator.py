# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Generator orchestration: scan, build, render, write, and staleness checks."""

from __future__ import annotations

import contextlib
import os
import time
from pathlib import Path
from typing import Iterable, Optional

from ._version import __version__ as TOOL_VERSION
from .builder import build_tree
from .config import (
    CrateConfig,
    check_identifier,
    check_package_name,
    check_root_class,
)
from .emitter import build_artifact
from .errors import write_error
from .fonts import FONT_EXTENSIONS
from .hashing import GENERATOR_HASH, is_hash_valid, marker_line
from .model import AssetKind
from .naming import DEFAULT_MAX_SUFFIX_ATTEMPTS
from .render import render_artifact
from .reporting import Reporter

__all__ = [
    "artifact_path",
    "atomic_write",
    "render_crate",
    "generate",
    "generate_from_config",
    "is_artifact_valid",
]


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def artifact_path(
    output_root: str | Path, target_namespace: str, module_name: str = "crate"
) -> Path:
    """Where the module for ``target_namespace`` lands under ``output_root``."""
    return Path(output_root).joinpath(
        *target_namespace.split("."), f"{module_name}.py"
    )


def atomic_write(path: Path, content: str) -> bool:
    """Write ``content`` to ``path`` through a temp file and ``os.replace``.

    Returns False (and leaves ``path`` untouched) when the bytes on disk
    already match. An existing file that is not valid UTF-8 simply counts as
    changed.

    Raises:
        ArtifactWriteError: any storage failure; no partial file is left at
            ``path`` and the temp file is removed.
    """
    path = Path(path)
    tmp = path.with_name(path.name + ".tmp")
    data = content.encode("utf-8")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.is_file() and path.read_bytes() == data:
            return False
        with open(tmp, "wb") as f:
            f.write(data)
        os.replace(tmp, path)
        return True
    except OSError as e:
        raise write_error(
            f"Failed to write {path}: {e}", {"path": str(path)}
        ) from e
    finally:
        with contextlib.suppress(OSError):
            if tmp.exists():
                os.remove(tmp)


def render_crate(
    input_asset_dir: str | Path,
    target_namespace: str,
    *,
    root_class: str = "Crate",
    font_extensions: Iterable[str] = FONT_EXTENSIONS,
    max_suffix_attempts: int = DEFAULT_MAX_SUFFIX_ATTEMPTS,
    reporter: Optional[Reporter] = None,
) -> str:
    """Scan ``input_asset_dir`` and return the generated module text."""
    rep = reporter or Reporter()
    rep.progress("Scanning assets: %s", input_asset_dir)
    tree = build_tree(
        Path(input_asset_dir),
        font_extensions=font_extensions,
        max_suffix_attempts=max_suffix_attempts,
    )
    namespaces = list(tree.walk())
    entries = sum(len(ns.entries) for ns in namespaces)
    fonts = sum(
        1 for ns in namespaces for e in ns.entries if e.kind is AssetKind.FONT
    )
    rep.progress(
        "Tree summary: namespaces=%d assets=%d fonts=%d",
        len(namespaces) - 1,
        entries,
        fonts,
    )
    rep.progress("Rendering module (generator hash %s)", GENERATOR_HASH[:12])
    module = build_artifact(
        tree, root_class, target_namespace, marker_line(GENERATOR_HASH)
    )
    return render_artifact(module)


def generate(
    output_root: str | Path,
    input_asset_dir: str | Path,
    target_namespace: str,
    *,
    root_class: str = "Crate",
    module_name: str = "crate",
    font_extensions: Iterable[str] = FONT_EXTENSIONS,
    max_suffix_attempts: int = DEFAULT_MAX_SUFFIX_ATTEMPTS,
    dry_run: bool = False,
    reporter: Optional[Reporter] = None,
) -> Optional[Path]:
    """Generate the crate module for ``input_asset_dir``.

    Returns the artifact path, or ``None`` when ``input_asset_dir`` does not
    exist (absent variants are skipped, not an error).

    Raises:
        InvalidInputError: bad package, class or module name.
        IdentifierExhaustedError: pathological name collisions.
        ArtifactWriteError: the artifact could not be persisted.
    """
    rep = reporter or Reporter()
    start = time.perf_counter()
    asset_dir = Path(input_asset_dir)
    if not asset_dir.exists() or not asset_dir.is_dir():
        rep.progress("No asset directory at %s, skipping", asset_dir)
        return None

    check_package_name(target_namespace)
    check_root_class(root_class)
    check_identifier(module_name, "module")
    out = artifact_path(output_root, target_namespace, module_name)

    rep.debug("CrateCodeGen %s", TOOL_VERSION)
    content = render_crate(
        asset_dir,
        target_namespace,
        root_class=root_class,
        font_extensions=font_extensions,
        max_suffix_attempts=max_suffix_attempts,
        reporter=rep,
    )
    if dry_run:
        rep.info("[DRY RUN] Planned output: %s", out)
        return out

    rep.progress("Writing %s", out)
    if atomic_write(out, content):
        rep.info("Generated %s", out)
    else:
        rep.info("No changes (up to date): %s", out)
    rep.progress("Time to build was %dms", _elapsed_ms(start))
    return out


def generate_from_config(
    cfg: CrateConfig, *, dry_run: bool = False, reporter=None
) -> Optional[Path]:
    return generate(
        cfg.output,
        cfg.assets,
        cfg.package,
        root_class=cfg.root_class,
        module_name=cfg.module,
        font_extensions=cfg.font_extensions,
        max_suffix_attempts=cfg.max_suffix_attempts,
        dry_run=dry_run,
        reporter=reporter,
    )


def is_artifact_valid(
    artifact_file: str | Path, reporter: Optional[Reporter] = None
) -> bool:
    """True when ``artifact_file`` carries this generator's hash stamp.

    The stamp tracks the generator only; asset changes do not invalidate it.
    """
    rep = reporter or Reporter()
    start = time.perf_counter()
    valid = is_hash_valid(Path(artifact_file), GENERATOR_HASH)
    rep.progress(
        "Hash check took %dms, was valid: %s", _elapsed_ms(start), valid
    )
    return valid
