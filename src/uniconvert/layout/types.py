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

import math
from dataclasses import dataclass, field
from typing import Callable, Final, Literal, Union, cast, get_args


class ConfigurationError(ValueError):
    """Raised when page geometry or styles leave no usable text area."""


BlockKind = Literal[
    "heading1",
    "heading2",
    "heading3",
    "heading4",
    "heading5",
    "heading6",
    "paragraph",
    "list_item",
    "break",
]

BLOCK_KINDS: Final[tuple[BlockKind, ...]] = get_args(BlockKind)

MIN_HEADING_LEVEL: Final = 1
MAX_HEADING_LEVEL: Final = 6


@dataclass(frozen=True)
class Heading:
    level: int
    text: str

    def __post_init__(self) -> None:
        level = min(MAX_HEADING_LEVEL, max(MIN_HEADING_LEVEL, int(self.level)))
        object.__setattr__(self, "level", level)

    @property
    def kind(self) -> BlockKind:
        return cast(BlockKind, f"heading{self.level}")


@dataclass(frozen=True)
class Paragraph:
    text: str

    @property
    def kind(self) -> BlockKind:
        return "paragraph"


@dataclass(frozen=True)
class ListItem:
    ordered: bool
    text: str

    @property
    def kind(self) -> BlockKind:
        return "list_item"


@dataclass(frozen=True)
class Break:
    @property
    def kind(self) -> BlockKind:
        return "break"


ContentBlock = Union[Heading, Paragraph, ListItem, Break]


@dataclass(frozen=True)
class FontHandle:
    family: str = "Helvetica"
    style: str = ""

    @property
    def bold(self) -> bool:
        return "B" in self.style.upper()


@dataclass(frozen=True)
class StyleSpec:
    font: FontHandle = field(default_factory=FontHandle)
    size_pt: float = 12.0
    line_gap_pt: float = 4.0
    paragraph_gap_pt: float = 0.0

    @property
    def line_height_pt(self) -> float:
        return float(self.size_pt) + float(self.line_gap_pt)


@dataclass(frozen=True)
class BlockStyle:
    style: StyleSpec = field(default_factory=StyleSpec)
    indent_pt: float = 0.0
    leading_gap_pt: float = 0.0
    trailing_gap_pt: float = 0.0


@dataclass(frozen=True)
class PageGeometry:
    width_pt: float
    height_pt: float
    margin_pt: float

    @property
    def max_width_pt(self) -> float:
        return float(self.width_pt) - 2 * float(self.margin_pt)

    @property
    def top_pt(self) -> float:
        return float(self.height_pt) - float(self.margin_pt)

    def validate(self) -> None:
        for name in ("width_pt", "height_pt", "margin_pt"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"page {name} must be a number")
            if not math.isfinite(value):
                raise ConfigurationError(f"page {name} must be finite")
        if self.margin_pt < 0:
            raise ConfigurationError("page margin_pt must be >= 0")
        if self.max_width_pt <= 0:
            raise ConfigurationError("page width leaves no room between margins")
        if self.height_pt <= 2 * self.margin_pt:
            raise ConfigurationError("page height leaves no room between margins")


@dataclass(frozen=True)
class PlacedRun:
    text: str
    x_pt: float
    y_pt: float
    style: StyleSpec


@dataclass
class Page:
    number: int
    runs: list[PlacedRun] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.runs


Measurer = Callable[[str, FontHandle, float], float]


def fixed_width_measurer(em_ratio: float = 0.5) -> Measurer:
    """Monospace metrics: every character is ``size_pt * em_ratio`` wide."""

    def measure(text: str, font: FontHandle, size_pt: float) -> float:
        _ = font
        return len(text) * float(size_pt) * em_ratio

    return measure
