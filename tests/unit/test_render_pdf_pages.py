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
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from pypdf import PdfReader

from uniconvert.layout import (
    Heading,
    Page,
    PageGeometry,
    Paragraph,
    PlacedRun,
    layout_blocks,
)
from uniconvert.render import FpdfMeasurer, render_pages_to_bytes, render_pages_to_pdf
from uniconvert.render import pdf_pages

from tests.test_support import BODY

A4 = PageGeometry(width_pt=595.28, height_pt=841.89, margin_pt=48.0)


class TestRenderPages(unittest.TestCase):
    def test_empty_page_list_raises(self) -> None:
        with self.assertRaisesRegex(ValueError, "pages cannot be empty"):
            render_pages_to_bytes([], A4)

    def test_one_pdf_page_per_layout_page(self) -> None:
        blocks = [Heading(level=1, text="Report")]
        blocks.extend(Paragraph(text=f"Paragraph number {index}") for index in range(120))
        pages = layout_blocks(blocks, A4, FpdfMeasurer())
        payload = render_pages_to_bytes(pages, A4, title="Report")

        self.assertTrue(payload.startswith(b"%PDF"))
        reader = PdfReader(io.BytesIO(payload))
        self.assertEqual(len(reader.pages), len(pages))
        self.assertGreater(len(reader.pages), 1)
        box = reader.pages[0].mediabox
        self.assertAlmostEqual(float(box.width), 595.28, places=1)
        self.assertAlmostEqual(float(box.height), 841.89, places=1)
        first_text = reader.pages[0].extract_text()
        self.assertIn("Report", first_text)
        self.assertIn("Paragraph number 0", first_text)
        self.assertEqual(reader.metadata.title, "Report")

    def test_blank_page_is_rendered(self) -> None:
        payload = render_pages_to_bytes([Page(number=1)], A4)
        self.assertEqual(len(PdfReader(io.BytesIO(payload)).pages), 1)

    def test_baseline_is_flipped_to_top_origin(self) -> None:
        run = PlacedRun(text="\u2022", x_pt=48.0, y_pt=793.89, style=BODY)
        with mock.patch.object(pdf_pages, "FPDF") as fpdf_cls:
            pdf = fpdf_cls.return_value
            pdf_pages.build_pdf([Page(number=1, runs=[run])], A4)
        pdf.add_page.assert_called_once()
        pdf.set_font.assert_called_once_with("Helvetica", style="", size=12.0)
        args = pdf.text.call_args.args
        self.assertEqual(args[0], 48.0)
        self.assertAlmostEqual(args[1], 48.0)
        self.assertEqual(args[2], "\xb7")

    def test_render_pages_to_pdf_creates_parent_dirs(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "nested" / "out.pdf"
            result = render_pages_to_pdf([Page(number=1)], A4, output)
            self.assertEqual(result, output)
            self.assertTrue(output.read_bytes().startswith(b"%PDF"))


if __name__ == "__main__":
    unittest.main()
