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

import tempfile
import unittest
from pathlib import Path

from docx import Document

from uniconvert.config import load_app_config
from uniconvert.convert import image_to_pdf, pdf_to_word, reencode_jpeg, word_to_pdf

from tests.test_support import make_docx, make_image


class TestConversionChains(unittest.TestCase):
    def test_word_pdf_word_round_trip_keeps_text(self) -> None:
        entries = [
            ("title", "Quarterly review"),
            ("p", "Revenue grew in every region this quarter. " * 6),
            ("bullet", "North"),
            ("bullet", "South"),
            ("number", "Hire two engineers"),
            ("number", "Ship the new release"),
            ("h2", "Risks"),
            ("p", "Supply costs remain volatile."),
        ]
        with tempfile.TemporaryDirectory() as tmpdir:
            source = make_docx(Path(tmpdir) / "review.docx", entries)
            pdf_result = word_to_pdf(source)
            word_result = pdf_to_word(pdf_result.output_path, Path(tmpdir) / "back.docx")
            doc = Document(str(word_result.output_path))

        text = " ".join(paragraph.text for paragraph in doc.paragraphs)
        for expected in ("Quarterly review", "North", "Hire two engineers", "Risks"):
            self.assertIn(expected, text)
        self.assertIn("1.", text)
        self.assertIn("2.", text)

    def test_custom_config_changes_page_count(self) -> None:
        toml = "[page]\nsize = \"A4\"\nmargin_pt = 200\n"
        entries = [("p", f"Line {index}") for index in range(60)]
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "config.toml"
            config_path.write_text(toml, encoding="utf-8")
            source = make_docx(Path(tmpdir) / "lines.docx", entries)
            default_pages = word_to_pdf(source, Path(tmpdir) / "a.pdf").pages
            wide_margin_pages = word_to_pdf(
                source, Path(tmpdir) / "b.pdf", config=load_app_config(config_path)
            ).pages
        self.assertEqual(default_pages, 2)
        self.assertGreater(wide_margin_pages, default_pages)

    def test_reencoded_jpeg_can_be_wrapped_in_pdf(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            source = make_image(Path(tmpdir) / "scan.jpeg", size=(300, 200))
            jpeg_result = reencode_jpeg(source, quality=60)
            self.assertEqual(jpeg_result.output_path.name, "scan.jpg")
            pdf_result = image_to_pdf(jpeg_result.output_path)
            self.assertEqual(pdf_result.output_path, Path(tmpdir) / "scan.pdf")
            self.assertTrue(pdf_result.output_path.read_bytes().startswith(b"%PDF"))


if __name__ == "__main__":
    unittest.main()
