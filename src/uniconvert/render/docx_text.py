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

import re
from pathlib import Path
from typing import Final, Sequence

from docx import Document as create_docx_document
from docx.enum.text import WD_BREAK

# XML 1.0 forbids these; pypdf output occasionally contains them.
_XML_INVALID_RE: Final = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def xml_safe_text(text: str) -> str:
    return _XML_INVALID_RE.sub("", text)


def render_text_docx(
    page_texts: Sequence[str],
    output_path: str | Path,
    *,
    page_breaks: bool = False,
) -> Path:
    """Write plain page texts to a DOCX, one paragraph per text line.

    Pages are separated by an empty paragraph, or by a hard page break when
    ``page_breaks`` is set.
    """
    output_path = Path(output_path)
    doc = create_docx_document()
    _remove_leading_empty_paragraph(doc)

    for index, text in enumerate(page_texts):
        if index > 0:
            separator = doc.add_paragraph()
            if page_breaks:
                separator.add_run().add_break(WD_BREAK.PAGE)
        for line in text.splitlines():
            doc.add_paragraph(xml_safe_text(line))

    output_path.parent.mkdir(parents=True, exist_ok=True)
    doc.save(str(output_path))
    return output_path


def _remove_leading_empty_paragraph(doc: object) -> None:
    paragraphs = getattr(doc, "paragraphs", [])
    if not paragraphs:
        return
    paragraph = paragraphs[0]
    text = getattr(paragraph, "text", "")
    if text and str(text).strip():
        return
    element = getattr(paragraph, "_element", None)
    if element is None:
        return
    parent = element.getparent()
    if parent is None:
        return
    parent.remove(element)


__all__ = ["render_text_docx", "xml_safe_text"]
