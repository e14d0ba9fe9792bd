# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Build the namespace tree mirroring an asset directory."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Set

from . import fonts as fonts_mod
from .logging import get_logger
from .model import AssetDescriptor, FontAssetDescriptor, Namespace
from .naming import (
    DEFAULT_MAX_SUFFIX_ATTEMPTS,
    IdentifierScope,
    constant_name,
    namespace_name,
)
from .scanner import list_children

__all__ = ["build_tree", "relative_asset_path"]


def relative_asset_path(path: Path, scan_root: Path) -> str:
    """``path`` relative to ``scan_root`` with forward slashes."""
    return Path(path).relative_to(scan_root).as_posix()


def build_tree(
    directory: Path,
    scan_root: Optional[Path] = None,
    *,
    font_extensions: Iterable[str] = fonts_mod.FONT_EXTENSIONS,
    max_suffix_attempts: int = DEFAULT_MAX_SUFFIX_ATTEMPTS,
) -> Namespace:
    """Scan ``directory`` recursively into a :class:`Namespace` tree.

    Args:
        directory: Directory to scan; becomes the returned namespace.
        scan_root: Root that relative paths are computed against. Defaults
            to ``directory``, which then yields the (nameless) root
            namespace.
        font_extensions: File extensions treated as fonts.
        max_suffix_attempts: Bound on collision suffixes per identifier.

    Raises:
        InvalidInputError: ``directory`` is missing or not a directory.
        IdentifierExhaustedError: a namespace holds too many files that
            sanitize to the same identifier.
    """
    directory = Path(directory)
    root = Path(scan_root) if scan_root is not None else directory
    return _build_namespace(
        directory,
        root,
        is_root=directory == root,
        font_extensions=tuple(font_extensions),
        max_suffix_attempts=max_suffix_attempts,
    )


def _build_namespace(
    directory: Path,
    scan_root: Path,
    *,
    is_root: bool,
    font_extensions: tuple,
    max_suffix_attempts: int,
) -> Namespace:
    log = get_logger("builder")
    if is_root:
        ns = Namespace(name="", identifier="")
    else:
        ns = Namespace(
            name=directory.name, identifier=namespace_name(directory.name)
        )

    scope = IdentifierScope(max_attempts=max_suffix_attempts)
    class_names: Set[str] = set()

    for child in list_children(directory):
        if child.is_dir():
            sub = _build_namespace(
                child,
                scan_root,
                is_root=False,
                font_extensions=font_extensions,
                max_suffix_attempts=max_suffix_attempts,
            )
            if sub.identifier in class_names:
                log.warning(
                    "Directory '%s' maps to an existing namespace '%s'",
                    relative_asset_path(child, scan_root),
                    sub.identifier,
                )
            class_names.add(sub.identifier)
            ns.children.append(sub)
            continue

        file_name = child.name
        identifier = scope.claim(constant_name(file_name), class_names)
        rel = relative_asset_path(child, scan_root)
        if fonts_mod.is_font_file(file_name, font_extensions):
            family = fonts_mod.extract_font_family(child)
            ns.add_entry(
                FontAssetDescriptor(
                    identifier=identifier,
                    relative_path=rel,
                    display_name=file_name,
                    font_family=family if family is not None else file_name,
                )
            )
        else:
            ns.add_entry(
                AssetDescriptor(
                    identifier=identifier,
                    relative_path=rel,
                    display_name=file_name,
                )
            )
        log.debug("%s -> %s", rel, identifier)

    return ns
