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

from collections.abc import Iterable
from pathlib import Path

from .bounds import MAX_INPUT_BYTES
from .errors import ConversionError, UnsupportedInputError


def require_input_file(
    path: str | Path,
    *,
    suffixes: Iterable[str],
    label: str,
    max_bytes: int = MAX_INPUT_BYTES,
) -> Path:
    """Validate that ``path`` is a readable file with one of ``suffixes``."""
    resolved = Path(path).expanduser()
    if not resolved.exists():
        raise ConversionError(f"{label} not found: {resolved}")
    if not resolved.is_file():
        raise ConversionError(f"{label} is not a file: {resolved}")
    allowed = {suffix.lower() for suffix in suffixes}
    if resolved.suffix.lower() not in allowed:
        expected = ", ".join(sorted(allowed))
        raise UnsupportedInputError(
            f"unsupported {label} type: {resolved.name} (expected {expected})"
        )
    size = resolved.stat().st_size
    if size > max_bytes:
        raise ConversionError(f"{label} too large: {size} bytes (max {max_bytes})")
    return resolved


def default_output_path(input_path: str | Path, suffix: str) -> Path:
    """Sibling of ``input_path`` with its extension replaced by ``suffix``."""
    path = Path(input_path)
    return path.with_name(f"{path.stem}{suffix}")


def require_distinct_paths(input_path: Path, output_path: Path) -> None:
    try:
        same = input_path.resolve() == output_path.resolve()
    except OSError:
        same = False
    if same:
        raise ConversionError(f"output would overwrite input: {output_path}")
