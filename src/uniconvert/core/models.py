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

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

ProgressCallback = Callable[[int, str], None]


@dataclass(frozen=True)
class ConversionResult:
    input_path: Path
    output_path: Path
    pages: int | None = None


def report(on_progress: ProgressCallback | None, percent: int, description: str) -> None:
    if on_progress is None:
        return
    on_progress(max(0, min(100, int(percent))), description)
