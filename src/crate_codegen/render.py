# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Render an :class:`~crate_codegen.emitter.ArtifactModule` to Python text."""

from __future__ import annotations

import json
from typing import List

from .emitter import ArtifactModule, ClassNode, CollectionNode, ConstantNode
from .templates import TEMPLATE_MODULE_HEADER

__all__ = ["render_artifact", "py_str"]

INDENT = "    "
MAX_LINE = 88


def py_str(value: str) -> str:
    """Python string literal for ``value`` (ASCII-only, double-quoted)."""
    # JSON string escapes are a subset of Python's.
    return json.dumps(value, ensure_ascii=True)


def _render_constant(c: ConstantNode, pad: str) -> str:
    args = ", ".join(py_str(a) for a in c.args)
    return f"{pad}{c.name} = {c.type_name}({args})"


def _render_collection(c: CollectionNode, pad: str) -> List[str]:
    head = f"{pad}{c.name}: Tuple[{c.element_type}, ...] = "
    if len(c.members) == 1:
        one_line = f"{head}({c.members[0]},)"
    else:
        one_line = f"{head}({', '.join(c.members)})"
    if len(one_line) <= MAX_LINE:
        return [one_line]
    lines = [f"{head}("]
    lines.extend(f"{pad}{INDENT}{m}," for m in c.members)
    lines.append(f"{pad})")
    return lines


def _render_class(node: ClassNode, pad: str) -> List[str]:
    body = pad + INDENT
    lines = [f"{pad}class {node.name}:", f"{body}{py_str(node.doc)}"]
    for sub in node.classes:
        lines.append("")
        lines.extend(_render_class(sub, body))
    if node.constants:
        lines.append("")
        lines.extend(_render_constant(c, body) for c in node.constants)
    if node.collection is not None:
        lines.append("")
        lines.extend(_render_collection(node.collection, body))
    for method in node.methods:
        lines.append("")
        lines.extend(
            (body + src) if src else "" for src in method.source.splitlines()
        )
    return lines


def render_artifact(module: ArtifactModule) -> str:
    """Render ``module`` in one pass; output ends with a single newline."""
    header = TEMPLATE_MODULE_HEADER.format(
        marker=module.marker,
        package=module.package,
        tool_ver=module.tool_version,
        asset_type=module.asset_type,
        font_asset_type=module.font_asset_type,
    )
    lines = header.rstrip("\n").split("\n")
    lines.extend(["", ""])
    lines.extend(_render_class(module.root, ""))
    return "\n".join(lines) + "\n"
