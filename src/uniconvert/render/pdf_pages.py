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
from typing import Any, Sequence, cast

from fpdf import FPDF

from ..layout.types import Page, PageGeometry
from .fonts import core_font_text, fpdf_style

_CREATOR = "uniconvert"


def build_pdf(
    pages: Sequence[Page],
    geometry: PageGeometry,
    *,
    title: str | None = None,
) -> FPDF:
    if not pages:
        raise ValueError("pages cannot be empty")
    geometry.validate()

    page_format = (float(geometry.width_pt), float(geometry.height_pt))
    pdf = FPDF(unit="pt", format=cast(Any, page_format))
    pdf.set_auto_page_break(False)
    pdf.set_creator(_CREATOR)
    if title:
        pdf.set_title(title)
    pdf.set_text_color(0, 0, 0)

    height = float(geometry.height_pt)
    for page in pages:
        pdf.add_page()
        for run in page.runs:
            style = run.style
            pdf.set_font(style.font.family, style=fpdf_style(style.font), size=style.size_pt)
            # layout baselines are measured from the bottom edge, fpdf from the top
            pdf.text(run.x_pt, height - run.y_pt, core_font_text(run.text))
    return pdf


def render_pages_to_bytes(
    pages: Sequence[Page],
    geometry: PageGeometry,
    *,
    title: str | None = None,
) -> bytes:
    pdf = build_pdf(pages, geometry, title=title)
    return bytes(pdf.output())


def render_pages_to_pdf(
    pages: Sequence[Page],
    geometry: PageGeometry,
    output_path: str | Path,
    *,
    title: str | None = None,
) -> Path:
    output_path = Path(output_path)
    payload = render_pages_to_bytes(pages, geometry, title=title)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(payload)
    return output_path
