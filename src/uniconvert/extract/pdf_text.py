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
from pathlib import Path
from typing import Callable, Iterator

import pypdf
from pypdf.errors import PyPdfError

from ..core.errors import ConversionError

PageCallback = Callable[[int, int], None]


def extract_page_texts(
    source: str | Path | bytes,
    *,
    on_page: PageCallback | None = None,
) -> list[str]:
    """Return the plain text of every page, in page order.

    ``on_page`` is called with ``(page_number, page_count)`` after each page.
    """
    reader = _open_reader(source)
    total = len(reader.pages)
    texts: list[str] = []
    for number, text in enumerate(_iter_page_texts(reader), start=1):
        texts.append(text)
        if on_page is not None:
            on_page(number, total)
    return texts


def _open_reader(source: str | Path | bytes) -> pypdf.PdfReader:
    stream = io.BytesIO(bytes(source)) if isinstance(source, (bytes, bytearray)) else str(source)
    try:
        reader = pypdf.PdfReader(stream)
    except (PyPdfError, OSError, ValueError) as exc:
        raise ConversionError(f"failed to read PDF: {exc}") from exc
    if reader.is_encrypted:
        try:
            unlocked = reader.decrypt("")
        except (PyPdfError, NotImplementedError) as exc:
            raise ConversionError("PDF is encrypted") from exc
        if not unlocked:
            raise ConversionError("PDF is password protected")
    return reader


def _iter_page_texts(reader: pypdf.PdfReader) -> Iterator[str]:
    for index, page in enumerate(reader.pages):
        try:
            text = page.extract_text() or ""
        except (PyPdfError, KeyError, ValueError) as exc:
            raise ConversionError(f"failed to extract text from page {index + 1}") from exc
        yield text
