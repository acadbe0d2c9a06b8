#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Final, Mapping

from .types import BLOCK_KINDS, BlockKind, BlockStyle, ContentBlock, FontHandle, StyleSpec

DEFAULT_FONT_FAMILY: Final = "Helvetica"
DEFAULT_LINE_GAP_PT: Final = 4.0
DEFAULT_BULLET: Final = "•"
DEFAULT_ORDERED_MARKER: Final = "{n}."

_HEADING_SIZES: Final[dict[int, float]] = {1: 20.0, 2: 16.0}
_HEADING_SIZE_DEFAULT: Final = 14.0
_HEADING_LEADING_GAP_PT: Final = 10.0
_HEADING_TRAILING_GAP_PT: Final = 6.0
_BODY_SIZE_PT: Final = 12.0
_LIST_INDENT_PT: Final = 14.0
_LIST_TRAILING_GAP_PT: Final = 2.0


@dataclass(frozen=True)
class StyleTable:
    entries: Mapping[BlockKind, BlockStyle] = field(default_factory=dict)
    bullet: str = DEFAULT_BULLET
    ordered_marker: str = DEFAULT_ORDERED_MARKER

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def resolve(self, kind: str) -> BlockStyle:
        entry = self.entries.get(kind)
        if entry is not None:
            return entry
        paragraph = self.entries.get("paragraph")
        if paragraph is not None:
            return paragraph
        return BlockStyle()

    def for_block(self, block: ContentBlock) -> BlockStyle:
        return self.resolve(block.kind)

    def marker(self, *, ordered: bool, index: int) -> str:
        if not ordered:
            return self.bullet
        return self.ordered_marker.format(n=index)

    def with_entry(self, kind: BlockKind, entry: BlockStyle) -> "StyleTable":
        entries = dict(self.entries)
        entries[kind] = entry
        return replace(self, entries=entries)


def default_style_table(
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    line_gap_pt: float = DEFAULT_LINE_GAP_PT,
    paragraph_gap_pt: float = 0.0,
    bullet: str = DEFAULT_BULLET,
    ordered_marker: str = DEFAULT_ORDERED_MARKER,
) -> StyleTable:
    regular = FontHandle(family=font_family, style="")
    bold = FontHandle(family=font_family, style="B")

    def spec(font: FontHandle, size: float) -> StyleSpec:
        return StyleSpec(
            font=font,
            size_pt=size,
            line_gap_pt=line_gap_pt,
            paragraph_gap_pt=paragraph_gap_pt,
        )

    entries: dict[BlockKind, BlockStyle] = {}
    for kind in BLOCK_KINDS:
        if not kind.startswith("heading"):
            continue
        level = int(kind.removeprefix("heading"))
        entries[kind] = BlockStyle(
            style=spec(bold, _HEADING_SIZES.get(level, _HEADING_SIZE_DEFAULT)),
            leading_gap_pt=_HEADING_LEADING_GAP_PT,
            trailing_gap_pt=_HEADING_TRAILING_GAP_PT,
        )
    entries["paragraph"] = BlockStyle(style=spec(regular, _BODY_SIZE_PT))
    entries["list_item"] = BlockStyle(
        style=spec(regular, _BODY_SIZE_PT),
        indent_pt=_LIST_INDENT_PT,
        trailing_gap_pt=_LIST_TRAILING_GAP_PT,
    )
    entries["break"] = BlockStyle(
        style=spec(regular, _BODY_SIZE_PT),
        trailing_gap_pt=_BODY_SIZE_PT,
    )
    return StyleTable(entries=entries, bullet=bullet, ordered_marker=ordered_marker)
