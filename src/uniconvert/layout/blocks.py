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

from dataclasses import dataclass
from typing import Final

from .styles import StyleTable
from .types import (
    Break,
    ConfigurationError,
    ContentBlock,
    ListItem,
    Measurer,
    Paragraph,
    StyleSpec,
)
from .wrap import wrap_text

__all__ = [
    "MARKER_GAP_PT",
    "ListState",
    "RenderedBlock",
    "RenderedLine",
    "normalize_block_text",
    "render_block",
]

MARKER_GAP_PT: Final = 2.0


@dataclass
class ListState:
    """Running ordinal for the current group of consecutive list items."""

    ordered: bool | None = None
    counter: int = 0

    def next_index(self, *, ordered: bool) -> int:
        if self.ordered is not ordered:
            self.ordered = ordered
            self.counter = 0
        self.counter += 1
        return self.counter

    def reset(self) -> None:
        self.ordered = None
        self.counter = 0


@dataclass(frozen=True)
class RenderedLine:
    text: str
    style: StyleSpec
    x_offset_pt: float = 0.0
    marker: str | None = None


@dataclass(frozen=True)
class RenderedBlock:
    lines: tuple[RenderedLine, ...]
    leading_gap_pt: float = 0.0
    trailing_gap_pt: float = 0.0
    advance_pt: float = 0.0


def normalize_block_text(text: str | None) -> str:
    if not text:
        return ""
    return str(text).replace("\u00a0", " ").strip()


def render_block(
    block: ContentBlock,
    table: StyleTable,
    measure: Measurer,
    max_width_pt: float,
    state: ListState,
) -> RenderedBlock:
    entry = table.for_block(block)
    style = entry.style

    if isinstance(block, Break):
        state.reset()
        return RenderedBlock(
            lines=(),
            leading_gap_pt=float(entry.leading_gap_pt),
            advance_pt=float(entry.trailing_gap_pt),
        )

    text = normalize_block_text(getattr(block, "text", ""))

    if isinstance(block, ListItem):
        index = state.next_index(ordered=block.ordered)
        marker = table.marker(ordered=block.ordered, index=index)
        # text starts past the marker even when the marker is wider than the indent
        marker_width = measure(marker, style.font, style.size_pt) if marker else 0.0
        offset = max(float(entry.indent_pt), marker_width + MARKER_GAP_PT)
        width = max_width_pt - offset
        if width <= 0:
            raise ConfigurationError("list indent leaves no room for text")
        wrapped = wrap_text(text, style, width, measure)
        lines = tuple(
            RenderedLine(
                text=line,
                style=style,
                x_offset_pt=offset,
                marker=marker if position == 0 else None,
            )
            for position, line in enumerate(wrapped)
        )
        return RenderedBlock(
            lines=lines,
            leading_gap_pt=float(entry.leading_gap_pt),
            trailing_gap_pt=float(entry.trailing_gap_pt),
        )

    state.reset()
    indent = float(entry.indent_pt)
    width = max_width_pt - indent
    if width <= 0:
        raise ConfigurationError("block indent leaves no room for text")
    trailing = float(entry.trailing_gap_pt)
    if isinstance(block, Paragraph):
        trailing += float(style.paragraph_gap_pt)
    lines = tuple(
        RenderedLine(text=line, style=style, x_offset_pt=indent)
        for line in wrap_text(text, style, width, measure)
    )
    return RenderedBlock(
        lines=lines,
        leading_gap_pt=float(entry.leading_gap_pt),
        trailing_gap_pt=trailing,
    )
