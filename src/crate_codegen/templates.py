# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""String templates used by the crate code generator."""

ASSET_TYPE = "Asset"
FONT_ASSET_TYPE = "FontAsset"

# Module-level names bound by the header; the root class must not rebind them.
HEADER_NAMES = frozenset(
    {
        "annotations",
        "dataclass",
        "Any",
        "BinaryIO",
        "Optional",
        "Tuple",
        ASSET_TYPE,
        FONT_ASSET_TYPE,
    }
)

TEMPLATE_MODULE_HEADER = '''{marker}
"""Typed accessors for the assets of package ``{package}``.

Generated by CrateCodeGen {tool_ver} - do not edit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, BinaryIO, Optional, Tuple


@dataclass(frozen=True)
class {asset_type}:
    path: str
    name: str


@dataclass(frozen=True)
class {font_asset_type}({asset_type}):
    font_name: str
'''

METHOD_INIT = """def __init__(self, context: Any) -> None:
    self._context = context
    self._manager: Optional[Any] = None"""

METHOD_GET = """def get(self, asset: Asset, mode: Optional[int] = None) -> BinaryIO:
    manager = self._get_manager()
    if mode is None:
        return manager.open(asset.path)
    return manager.open(asset.path, mode)"""

METHOD_GET_MANAGER = """def _get_manager(self) -> Any:
    if self._manager is None:
        self._manager = self._context.get_assets()
    return self._manager"""

METHOD_CLOSE = """def close(self) -> None:
    if self._manager is not None:
        self._manager.close()
        self._manager = None"""

# Order in which the root class defines its runtime surface.
ROOT_METHODS = (
    ("__init__", METHOD_INIT),
    ("get", METHOD_GET),
    ("_get_manager", METHOD_GET_MANAGER),
    ("close", METHOD_CLOSE),
)
