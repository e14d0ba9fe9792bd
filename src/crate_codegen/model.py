# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Typed data model for the asset tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Union


class AssetKind(Enum):
    GENERIC = "generic"
    FONT = "font"


@dataclass(frozen=True)
class AssetDescriptor:
    identifier: str
    relative_path: str
    display_name: str

    @property
    def kind(self) -> AssetKind:
        return AssetKind.GENERIC


@dataclass(frozen=True)
class FontAssetDescriptor:
    identifier: str
    relative_path: str
    display_name: str
    font_family: str

    @property
    def kind(self) -> AssetKind:
        return AssetKind.FONT


Descriptor = Union[AssetDescriptor, FontAssetDescriptor]


@dataclass
class Namespace:
    """One scanned directory.

    ``uniform_kind`` is FONT while every entry seen so far is a font and
    drops to GENERIC for good on the first other entry.
    """

    name: str
    identifier: str
    children: List["Namespace"] = field(default_factory=list)
    entries: List[Descriptor] = field(default_factory=list)
    uniform_kind: AssetKind = AssetKind.FONT

    @property
    def is_root(self) -> bool:
        return self.name == ""

    @property
    def has_collection(self) -> bool:
        return bool(self.entries)

    def add_entry(self, entry: Descriptor) -> None:
        self.entries.append(entry)
        if entry.kind is not AssetKind.FONT:
            self.uniform_kind = AssetKind.GENERIC

    def entry(self, identifier: str) -> Optional[Descriptor]:
        for e in self.entries:
            if e.identifier == identifier:
                return e
        return None

    def child(self, name: str) -> Optional["Namespace"]:
        for c in self.children:
            if c.name == name:
                return c
        return None

    def walk(self) -> Iterator["Namespace"]:
        yield self
        for c in self.children:
            yield from c.walk()
