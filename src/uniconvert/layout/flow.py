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

from typing import Iterable

from .blocks import ListState, RenderedBlock, RenderedLine, render_block
from .styles import StyleTable, default_style_table
from .types import (
    ConfigurationError,
    ContentBlock,
    Measurer,
    Page,
    PageGeometry,
    PlacedRun,
    StyleSpec,
)

__all__ = ["PageFlow", "layout_blocks"]


class PageFlow:
    """Vertical cursor over a growing list of pages.

    The cursor is a text baseline measured upward from the bottom edge, as in
    PDF user space. It starts at ``height - margin`` on every new page.
    """

    def __init__(self, geometry: PageGeometry) -> None:
        geometry.validate()
        self.geometry = geometry
        self.pages: list[Page] = []
        self.cursor = geometry.top_pt
        self.new_page()

    @property
    def page(self) -> Page:
        return self.pages[-1]

    @property
    def margin(self) -> float:
        return float(self.geometry.margin_pt)

    def new_page(self) -> Page:
        page = Page(number=len(self.pages) + 1)
        self.pages.append(page)
        self.cursor = self.geometry.top_pt
        return page

    def fits(self, required_pt: float) -> bool:
        return self.cursor - required_pt >= self.margin

    def ensure_space(self, required_pt: float) -> None:
        if self.fits(required_pt):
            return
        # a line taller than the whole text area goes at the top of a fresh page
        if self.page.is_empty and self.cursor >= self.geometry.top_pt:
            return
        self.new_page()

    def advance(self, gap_pt: float) -> None:
        if gap_pt <= 0:
            return
        self.cursor = max(self.margin, self.cursor - float(gap_pt))

    def place_line(
        self,
        text: str,
        style: StyleSpec,
        x_pt: float,
        *,
        marker: str | None = None,
        marker_x_pt: float | None = None,
    ) -> PlacedRun:
        required = style.line_height_pt
        self.ensure_space(required)
        if marker:
            x_marker = self.margin if marker_x_pt is None else float(marker_x_pt)
            self.page.runs.append(
                PlacedRun(text=marker, x_pt=x_marker, y_pt=self.cursor, style=style)
            )
        run = PlacedRun(text=text, x_pt=float(x_pt), y_pt=self.cursor, style=style)
        self.page.runs.append(run)
        self.cursor -= required
        return run

    def place_rendered(self, rendered: RenderedBlock) -> None:
        self.advance(rendered.leading_gap_pt)
        for line in rendered.lines:
            self._place(line)
        self.advance(rendered.advance_pt)
        self.advance(rendered.trailing_gap_pt)

    def _place(self, line: RenderedLine) -> None:
        self.place_line(
            line.text,
            line.style,
            self.margin + line.x_offset_pt,
            marker=line.marker,
            marker_x_pt=self.margin,
        )


def layout_blocks(
    blocks: Iterable[ContentBlock],
    geometry: PageGeometry,
    measure: Measurer,
    table: StyleTable | None = None,
) -> list[Page]:
    """Lay out ``blocks`` onto pages of ``geometry``.

    Always returns at least one page. Raises ``ConfigurationError`` before any
    block is consumed when the geometry has no usable text area.
    """
    table = table or default_style_table()
    flow = PageFlow(geometry)
    state = ListState()
    max_width = geometry.max_width_pt
    _check_indents(table, max_width)
    for block in blocks:
        rendered = render_block(block, table, measure, max_width, state)
        flow.place_rendered(rendered)
    return flow.pages


def _check_indents(table: StyleTable, max_width_pt: float) -> None:
    for kind, entry in table.entries.items():
        if entry.style.size_pt <= 0:
            raise ConfigurationError(f"{kind} font size must be positive")
        if max_width_pt - float(entry.indent_pt) <= 0:
            raise ConfigurationError(f"{kind} indent leaves no room for text")
