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

"""Output writers: fpdf2 pages for laid-out text, python-docx for plain text."""

from .docx_text import render_text_docx, xml_safe_text
from .fonts import FpdfMeasurer, core_font_text
from .pdf_pages import build_pdf, render_pages_to_bytes, render_pages_to_pdf

__all__ = [
    "FpdfMeasurer",
    "build_pdf",
    "core_font_text",
    "render_pages_to_bytes",
    "render_pages_to_pdf",
    "render_text_docx",
    "xml_safe_text",
]
