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

import functools
from typing import Final

from fpdf import FPDF

from ..layout.types import FontHandle

CORE_FONT_FAMILIES: Final[frozenset[str]] = frozenset(
    {"courier", "helvetica", "arial", "times", "symbol", "zapfdingbats"}
)

# Core fonts only cover latin-1; typographic characters get a close stand-in.
_CORE_FONT_REPLACEMENTS: Final[dict[str, str]] = {
    "\u2022": "\xb7",
    "\u2013": "-",
    "\u2014": "-",
    "\u2018": "'",
    "\u2019": "'",
    "\u201a": ",",
    "\u201c": '"',
    "\u201d": '"',
    "\u2026": "...",
    "\u2212": "-",
    "\u00a0": " ",
    "\u200b": "",
}
_CORE_FONT_TABLE: Final = str.maketrans(_CORE_FONT_REPLACEMENTS)


def core_font_text(text: str) -> str:
    """Map ``text`` into the latin-1 range the PDF core fonts can draw."""
    translated = text.translate(_CORE_FONT_TABLE)
    return translated.encode("latin-1", errors="replace").decode("latin-1")


def fpdf_style(font: FontHandle) -> str:
    style = font.style.upper()
    return "".join(flag for flag in "BIU" if flag in style)


class FpdfMeasurer:
    """Text measurement backed by fpdf2 core-font metrics, in points.

    Each instance owns a private ``FPDF``; use one measurer per thread.
    """

    def __init__(self, *, cache_size: int = 4096) -> None:
        self._pdf = FPDF(unit="pt")
        self._measure = functools.lru_cache(maxsize=cache_size)(self._measure_uncached)

    def __call__(self, text: str, font: FontHandle, size_pt: float) -> float:
        if not text:
            return 0.0
        return self._measure(text, font.family, fpdf_style(font), float(size_pt))

    def _measure_uncached(self, text: str, family: str, style: str, size_pt: float) -> float:
        self._pdf.set_font(family, style=style, size=size_pt)
        return float(self._pdf.get_string_width(core_font_text(text)))
