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

from ..config.loader import AppConfig, default_app_config
from ..core.models import ConversionResult, ProgressCallback, report
from ..core.validation import default_output_path, require_distinct_paths, require_input_file
from ..extract.docx_blocks import extract_blocks
from ..layout.flow import layout_blocks
from ..layout.types import Measurer
from ..render.fonts import FpdfMeasurer
from ..render.pdf_pages import render_pages_to_bytes

WORD_SUFFIXES = (".docx",)


def word_to_pdf(
    input_path: str | Path,
    output_path: str | Path | None = None,
    *,
    config: AppConfig | None = None,
    measure: Measurer | None = None,
    on_progress: ProgressCallback | None = None,
) -> ConversionResult:
    """Convert a DOCX file to a text-only PDF.

    Headings, paragraphs, list items and breaks are kept; tables, images and
    character styling are not.
    """
    source = require_input_file(input_path, suffixes=WORD_SUFFIXES, label="Word document")
    target = Path(output_path) if output_path else default_output_path(source, ".pdf")
    require_distinct_paths(source, target)
    config = config or default_app_config()

    report(on_progress, 5, "Reading document")
    payload = source.read_bytes()
    report(on_progress, 20, "Extracting content")
    blocks = extract_blocks(payload)
    report(on_progress, 40, "Laying out pages")
    pages = layout_blocks(
        blocks,
        config.geometry,
        measure or FpdfMeasurer(),
        config.style_table,
    )
    report(on_progress, 55, "Rendering PDF")
    pdf_bytes = render_pages_to_bytes(pages, config.geometry, title=source.stem)
    report(on_progress, 90, "Writing PDF")
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(pdf_bytes)
    report(on_progress, 100, "Converted to PDF")
    return ConversionResult(input_path=source, output_path=target, pages=len(pages))
