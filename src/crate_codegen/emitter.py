# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Structured artifact model built from a namespace tree.

The emitter only decides *what* the generated module contains; turning the
nodes into text is the job of :mod:`crate_codegen.render`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ._version import __version__ as TOOL_VERSION
from .model import AssetKind, Descriptor, FontAssetDescriptor, Namespace
from .naming import COLLECTION_NAME
from .templates import ASSET_TYPE, FONT_ASSET_TYPE, ROOT_METHODS

__all__ = [
    "ConstantNode",
    "CollectionNode",
    "MethodNode",
    "ClassNode",
    "ArtifactModule",
    "build_artifact",
]


@dataclass(frozen=True)
class ConstantNode:
    name: str
    type_name: str
    args: Tuple[str, ...]


@dataclass(frozen=True)
class CollectionNode:
    name: str
    element_type: str
    members: Tuple[str, ...]


@dataclass(frozen=True)
class MethodNode:
    name: str
    source: str


@dataclass
class ClassNode:
    name: str
    doc: str
    classes: List["ClassNode"] = field(default_factory=list)
    constants: List[ConstantNode] = field(default_factory=list)
    collection: Optional[CollectionNode] = None
    methods: List[MethodNode] = field(default_factory=list)


@dataclass
class ArtifactModule:
    marker: str
    package: str
    root: ClassNode
    tool_version: str = TOOL_VERSION
    asset_type: str = ASSET_TYPE
    font_asset_type: str = FONT_ASSET_TYPE


def _constant(entry: Descriptor) -> ConstantNode:
    if isinstance(entry, FontAssetDescriptor):
        return ConstantNode(
            name=entry.identifier,
            type_name=FONT_ASSET_TYPE,
            args=(entry.relative_path, entry.display_name, entry.font_family),
        )
    return ConstantNode(
        name=entry.identifier,
        type_name=ASSET_TYPE,
        args=(entry.relative_path, entry.display_name),
    )


def _collection(ns: Namespace) -> Optional[CollectionNode]:
    if not ns.has_collection:
        return None
    # A mixed namespace falls back to the base type, which fonts refine.
    element = (
        FONT_ASSET_TYPE if ns.uniform_kind is AssetKind.FONT else ASSET_TYPE
    )
    return CollectionNode(
        name=COLLECTION_NAME,
        element_type=element,
        members=tuple(e.identifier for e in ns.entries),
    )


def _class_node(ns: Namespace, name: str, doc: str, rel_dir: str) -> ClassNode:
    node = ClassNode(name=name, doc=doc)
    for child in ns.children:
        child_dir = f"{rel_dir}/{child.name}" if rel_dir else child.name
        node.classes.append(
            _class_node(
                child, child.identifier, f"Assets under {child_dir}/.", child_dir
            )
        )
    node.constants = [_constant(e) for e in ns.entries]
    node.collection = _collection(ns)
    return node


def build_artifact(
    tree: Namespace, root_class: str, target_namespace: str, marker: str
) -> ArtifactModule:
    """Convert ``tree`` into the node model of one generated module."""
    root = _class_node(
        tree,
        root_class,
        "Asset accessors; pass a host context providing get_assets().",
        "",
    )
    root.methods = [MethodNode(name=n, source=src) for n, src in ROOT_METHODS]
    return ArtifactModule(marker=marker, package=target_namespace, root=root)
