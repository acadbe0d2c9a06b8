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
from types import SimpleNamespace
from unittest import mock

from pypdf.errors import PdfReadError

from uniconvert.core.errors import ConversionError
from uniconvert.extract import extract_page_texts
from uniconvert.extract import pdf_text

from tests.test_support import make_pdf


def _fake_page(text):
    return SimpleNamespace(extract_text=mock.Mock(return_value=text))


class TestExtractPageTexts(unittest.TestCase):
    def test_reads_text_of_every_page(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = make_pdf(Path(tmpdir) / "doc.pdf", ["Hello world", "Second page"])
            texts = extract_page_texts(path)
            from_bytes = extract_page_texts(path.read_bytes())
        self.assertEqual(len(texts), 2)
        self.assertIn("Hello world", texts[0])
        self.assertIn("Second page", texts[1])
        self.assertEqual(texts, from_bytes)

    def test_reports_each_page(self) -> None:
        calls: list[tuple[int, int]] = []
        reader = SimpleNamespace(
            is_encrypted=False,
            pages=[_fake_page("a"), _fake_page(None), _fake_page("c")],
        )
        with mock.patch.object(pdf_text.pypdf, "PdfReader", return_value=reader):
            texts = extract_page_texts(b"%PDF", on_page=lambda n, t: calls.append((n, t)))
        self.assertEqual(texts, ["a", "", "c"])
        self.assertEqual(calls, [(1, 3), (2, 3), (3, 3)])

    def test_unreadable_pdf_raises_conversion_error(self) -> None:
        with mock.patch.object(
            pdf_text.pypdf, "PdfReader", side_effect=PdfReadError("EOF marker not found")
        ):
            with self.assertRaisesRegex(ConversionError, "failed to read PDF"):
                extract_page_texts(b"garbage")

    def test_garbage_bytes_raise_conversion_error(self) -> None:
        with self.assertRaises(ConversionError):
            extract_page_texts(b"not a pdf at all")

    def test_encrypted_pdf_tries_empty_password(self) -> None:
        reader = mock.Mock(is_encrypted=True, pages=[_fake_page("open")])
        reader.decrypt.return_value = 1
        with mock.patch.object(pdf_text.pypdf, "PdfReader", return_value=reader):
            self.assertEqual(extract_page_texts(b"%PDF"), ["open"])
        reader.decrypt.assert_called_once_with("")

    def test_password_protected_pdf_raises(self) -> None:
        reader = mock.Mock(is_encrypted=True, pages=[])
        reader.decrypt.return_value = 0
        with mock.patch.object(pdf_text.pypdf, "PdfReader", return_value=reader):
            with self.assertRaisesRegex(ConversionError, "password protected"):
                extract_page_texts(b"%PDF")

    def test_page_extraction_failure_names_page(self) -> None:
        broken = SimpleNamespace(extract_text=mock.Mock(side_effect=KeyError("/Font")))
        reader = SimpleNamespace(is_encrypted=False, pages=[_fake_page("ok"), broken])
        with mock.patch.object(pdf_text.pypdf, "PdfReader", return_value=reader):
            with self.assertRaisesRegex(ConversionError, "page 2"):
                extract_page_texts(b"%PDF")


if __name__ == "__main__":
    unittest.main()
