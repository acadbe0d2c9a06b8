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

from pathlib import Path

from ..core.models import ConversionResult, ProgressCallback, report
from ..core.validation import default_output_path, require_distinct_paths, require_input_file
from ..extract.pdf_text import extract_page_texts
from ..render.docx_text import render_text_docx

PDF_SUFFIXES = (".pdf",)

_EXTRACT_START = 50
_EXTRACT_SPAN = 40


def pdf_to_word(
    input_path: str | Path,
    output_path: str | Path | None = None,
    *,
    page_breaks: bool = False,
    on_progress: ProgressCallback | None = None,
) -> ConversionResult:
    """Extract the text of a PDF into a plain DOCX (one paragraph per line)."""
    source = require_input_file(input_path, suffixes=PDF_SUFFIXES, label="PDF")
    target = Path(output_path) if output_path else default_output_path(source, ".docx")
    require_distinct_paths(source, target)

    report(on_progress, 10, "Reading PDF")
    payload = source.read_bytes()
    report(on_progress, 30, "Opening PDF")

    def on_page(number: int, total: int) -> None:
        percent = _EXTRACT_START + (number * _EXTRACT_SPAN) // max(1, total)
        report(on_progress, percent, f"Extracting text ({number}/{total})")

    page_texts = extract_page_texts(payload, on_page=on_page)
    report(on_progress, 95, "Writing Word document")
    render_text_docx(page_texts, target, page_breaks=page_breaks)
    report(on_progress, 100, "Saved text to .docx")
    return ConversionResult(input_path=source, output_path=target, pages=len(page_texts))
