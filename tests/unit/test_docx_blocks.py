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

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from docx import Document
from docx.oxml import OxmlElement, parse_xml
from docx.oxml.ns import nsdecls, qn

from uniconvert.core.errors import ConversionError
from uniconvert.extract import docx_blocks, extract_blocks
from uniconvert.layout import Break, Heading, ListItem, Paragraph

from tests.test_support import make_docx

_NUMBERING_XML = (
    f"<w:numbering {nsdecls('w')}>"
    '<w:abstractNum w:abstractNumId="1">'
    '<w:lvl w:ilvl="0"><w:numFmt w:val="decimal"/></w:lvl>'
    '<w:lvl w:ilvl="1"><w:numFmt w:val="bullet"/></w:lvl>'
    "</w:abstractNum>"
    '<w:num w:numId="7"><w:abstractNumId w:val="1"/></w:num>'
    "</w:numbering>"
)


def _add_numbered_paragraph(doc, text: str, num_id: str, ilvl: str = "0") -> None:
    paragraph = doc.add_paragraph(text)
    p_pr = paragraph._p.get_or_add_pPr()
    num_pr = OxmlElement("w:numPr")
    level = OxmlElement("w:ilvl")
    level.set(qn("w:val"), ilvl)
    num = OxmlElement("w:numId")
    num.set(qn("w:val"), num_id)
    num_pr.append(level)
    num_pr.append(num)
    p_pr.append(num_pr)


class TestExtractBlocks(unittest.TestCase):
    def test_maps_paragraph_styles_to_blocks(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = make_docx(
                Path(tmpdir) / "doc.docx",
                [
                    ("title", "Annual report"),
                    ("h2", "Summary"),
                    ("p", "Body text."),
                    ("empty", ""),
                    ("bullet", "apples"),
                    ("number", "step one"),
                    ("break", ""),
                    ("h9", "Deep"),
                ],
            )
            blocks = extract_blocks(path)

        self.assertEqual(
            blocks,
            [
                Heading(level=1, text="Annual report"),
                Heading(level=2, text="Summary"),
                Paragraph(text="Body text."),
                ListItem(ordered=False, text="apples"),
                ListItem(ordered=True, text="step one"),
                Break(),
                Heading(level=6, text="Deep"),
            ],
        )

    def test_accepts_bytes(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = make_docx(Path(tmpdir) / "doc.docx", [("p", "from bytes")])
            payload = path.read_bytes()
        self.assertEqual(extract_blocks(payload), [Paragraph(text="from bytes")])

    def test_text_is_normalized(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = make_docx(Path(tmpdir) / "doc.docx", [("p", "  padded\u00a0text  ")])
            blocks = extract_blocks(path)
        self.assertEqual(blocks, [Paragraph(text="padded text")])

    def test_numbering_properties_make_list_items(self) -> None:
        doc = Document()
        _add_numbered_paragraph(doc, "numbered", "7")
        _add_numbered_paragraph(doc, "not numbered", "0")
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "numbered.docx"
            doc.save(str(path))
            with mock.patch.object(docx_blocks, "_numbering_element", return_value=None):
                blocks = extract_blocks(path)
        self.assertEqual(
            blocks,
            [ListItem(ordered=False, text="numbered"), Paragraph(text="not numbered")],
        )

    def test_number_format_decides_ordering(self) -> None:
        numbering = parse_xml(_NUMBERING_XML)
        self.assertTrue(docx_blocks._is_ordered(numbering, "7", "0"))
        self.assertFalse(docx_blocks._is_ordered(numbering, "7", "1"))
        self.assertFalse(docx_blocks._is_ordered(numbering, "8", "0"))
        self.assertFalse(docx_blocks._is_ordered(numbering, '7"]', "0"))
        self.assertFalse(docx_blocks._is_ordered(None, "7", "0"))

    def test_invalid_package_raises_conversion_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "broken.docx"
            path.write_bytes(b"this is not a zip archive")
            with self.assertRaisesRegex(ConversionError, "failed to read Word document"):
                extract_blocks(path)
        with self.assertRaises(ConversionError):
            extract_blocks(b"PK\x03\x04 truncated")


if __name__ == "__main__":
    unittest.main()
