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

from .types import ConfigurationError, Measurer, StyleSpec

__all__ = ["split_word", "wrap_text"]


def wrap_text(
    text: str,
    style: StyleSpec,
    max_width_pt: float,
    measure: Measurer,
) -> list[str]:
    """Greedily wrap ``text`` into lines no wider than ``max_width_pt``.

    Words are split on whitespace runs. A word that alone exceeds the width is
    broken character by character; its last fragment stays open so following
    words may join it.
    """
    if max_width_pt <= 0:
        raise ConfigurationError("max width must be positive")
    if not text:
        return []

    font = style.font
    size = float(style.size_pt)

    def fits(candidate: str) -> bool:
        return measure(candidate, font, size) <= max_width_pt

    wrapped: list[str] = []
    current = ""
    for word in text.split():
        candidate = word if not current else f"{current} {word}"
        if fits(candidate):
            current = candidate
            continue
        if current:
            wrapped.append(current)
            current = ""
        if fits(word):
            current = word
            continue
        parts = split_word(word, style, max_width_pt, measure)
        wrapped.extend(parts[:-1])
        current = parts[-1] if parts else ""
    if current:
        wrapped.append(current)
    return wrapped


def split_word(
    word: str,
    style: StyleSpec,
    max_width_pt: float,
    measure: Measurer,
) -> list[str]:
    parts: list[str] = []
    chunk = ""
    for ch in word:
        next_chunk = f"{chunk}{ch}"
        # a lone character wider than the line is still emitted
        if chunk and measure(next_chunk, style.font, float(style.size_pt)) > max_width_pt:
            parts.append(chunk)
            chunk = ch
        else:
            chunk = next_chunk
    if chunk:
        parts.append(chunk)
    return parts
