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

"""Text-flow layout: content blocks in, positioned text runs out."""

from .blocks import MARKER_GAP_PT, ListState, RenderedBlock, RenderedLine, render_block
from .flow import PageFlow, layout_blocks
from .styles import StyleTable, default_style_table
from .types import (
    BLOCK_KINDS,
    BlockKind,
    BlockStyle,
    Break,
    ConfigurationError,
    ContentBlock,
    FontHandle,
    Heading,
    ListItem,
    Measurer,
    Page,
    PageGeometry,
    Paragraph,
    PlacedRun,
    StyleSpec,
    fixed_width_measurer,
)
from .wrap import split_word, wrap_text

__all__ = [
    "MARKER_GAP_PT",
    "BLOCK_KINDS",
    "BlockKind",
    "BlockStyle",
    "Break",
    "ConfigurationError",
    "ContentBlock",
    "FontHandle",
    "Heading",
    "ListItem",
    "ListState",
    "Measurer",
    "Page",
    "PageFlow",
    "PageGeometry",
    "Paragraph",
    "PlacedRun",
    "RenderedBlock",
    "RenderedLine",
    "StyleSpec",
    "StyleTable",
    "default_style_table",
    "fixed_width_measurer",
    "layout_blocks",
    "render_block",
    "split_word",
    "wrap_text",
]
