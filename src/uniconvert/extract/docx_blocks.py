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

import io
import re
import zipfile
from pathlib import Path
from typing import Final

from docx import Document as open_docx_document
from docx.opc.exceptions import PackageNotFoundError

from ..core.errors import ConversionError
from ..layout.blocks import normalize_block_text
from ..layout.types import Break, ContentBlock, Heading, ListItem, Paragraph

_HEADING_STYLE_RE: Final = re.compile(r"^heading\s*([1-9])\b", re.IGNORECASE)
_TITLE_STYLES: Final[frozenset[str]] = frozenset({"title"})
_BULLET_STYLE_PREFIX: Final = "list bullet"
_NUMBER_STYLE_PREFIX: Final = "list number"
_BULLET_NUM_FORMATS: Final[frozenset[str]] = frozenset({"bullet", "none"})


def extract_blocks(source: str | Path | bytes) -> list[ContentBlock]:
    """Read a DOCX package into ordered content blocks.

    Headings come from ``Title``/``Heading N`` styles, list items from list
    styles or paragraph numbering, breaks from paragraphs that hold only
    ``w:br`` elements. Tables, images and character formatting are dropped.
    """
    document = _open_document(source)
    numbering = _numbering_element(document)
    blocks: list[ContentBlock] = []
    for paragraph in document.paragraphs:
        block = _paragraph_block(paragraph, numbering)
        if block is not None:
            blocks.append(block)
    return blocks


def _open_document(source: str | Path | bytes):
    try:
        if isinstance(source, (bytes, bytearray)):
            return open_docx_document(io.BytesIO(bytes(source)))
        return open_docx_document(str(source))
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as exc:
        raise ConversionError("failed to read Word document (expected .docx)") from exc


def _numbering_element(document):
    try:
        return document.part.numbering_part.element
    except (KeyError, NotImplementedError):
        return None


def _paragraph_block(paragraph, numbering) -> ContentBlock | None:
    text = normalize_block_text(paragraph.text)
    element = paragraph._p
    if not text:
        if element.xpath(".//w:br"):
            return Break()
        return None

    style_name = _style_name(paragraph)
    level = _heading_level(style_name)
    if level is not None:
        return Heading(level=level, text=text)

    lowered = style_name.lower()
    if lowered.startswith(_BULLET_STYLE_PREFIX):
        return ListItem(ordered=False, text=text)
    if lowered.startswith(_NUMBER_STYLE_PREFIX):
        return ListItem(ordered=True, text=text)

    num_ids = element.xpath("./w:pPr/w:numPr/w:numId/@w:val")
    if num_ids and num_ids[0] != "0":
        levels = element.xpath("./w:pPr/w:numPr/w:ilvl/@w:val")
        ilvl = levels[0] if levels else "0"
        return ListItem(ordered=_is_ordered(numbering, num_ids[0], ilvl), text=text)

    return Paragraph(text=text)


def _style_name(paragraph) -> str:
    style = paragraph.style
    if style is None:
        return ""
    return str(style.name or "").strip()


def _heading_level(style_name: str) -> int | None:
    if style_name.lower() in _TITLE_STYLES:
        return 1
    match = _HEADING_STYLE_RE.match(style_name)
    if match is None:
        return None
    return int(match.group(1))


def _is_ordered(numbering, num_id: str, ilvl: str) -> bool:
    if numbering is None or not (num_id.isdigit() and ilvl.isdigit()):
        return False
    abstract_ids = numbering.xpath(f'./w:num[@w:numId="{num_id}"]/w:abstractNumId/@w:val')
    if not abstract_ids or not abstract_ids[0].isdigit():
        return False
    formats = numbering.xpath(
        f'./w:abstractNum[@w:abstractNumId="{abstract_ids[0]}"]'
        f'/w:lvl[@w:ilvl="{ilvl}"]/w:numFmt/@w:val'
    )
    if not formats:
        return False
    return formats[0] not in _BULLET_NUM_FORMATS
