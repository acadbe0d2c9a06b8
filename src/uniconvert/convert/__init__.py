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

"""File conversions built on the layout, extract and render packages."""

from ..core.errors import ConversionError, UnsupportedInputError
from .image_pdf import IMAGE_SUFFIXES, image_to_pdf
from .jpeg import JPEG_SUFFIXES, reencode_jpeg
from .pdf_word import PDF_SUFFIXES, pdf_to_word
from .word_pdf import WORD_SUFFIXES, word_to_pdf

__all__ = [
    "ConversionError",
    "IMAGE_SUFFIXES",
    "JPEG_SUFFIXES",
    "PDF_SUFFIXES",
    "UnsupportedInputError",
    "WORD_SUFFIXES",
    "image_to_pdf",
    "pdf_to_word",
    "reencode_jpeg",
    "word_to_pdf",
]
