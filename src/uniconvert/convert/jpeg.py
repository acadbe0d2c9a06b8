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

from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError

from ..core.bounds import DEFAULT_JPEG_QUALITY, MAX_JPEG_QUALITY, MIN_JPEG_QUALITY
from ..core.errors import ConversionError
from ..core.models import ConversionResult, ProgressCallback, report
from ..core.validation import require_distinct_paths, require_input_file

JPEG_SUFFIXES = (".jpg", ".jpeg")
REENCODED_SUFFIX = "-reencoded"


def default_jpeg_output(input_path: Path) -> Path:
    """``photo.jpeg`` becomes ``photo.jpg``; ``photo.jpg`` becomes ``photo-reencoded.jpg``."""
    candidate = input_path.with_name(f"{input_path.stem}.jpg")
    if candidate.name == input_path.name:
        candidate = input_path.with_name(f"{input_path.stem}{REENCODED_SUFFIX}.jpg")
    return candidate


def reencode_jpeg(
    input_path: str | Path,
    output_path: str | Path | None = None,
    *,
    quality: int = DEFAULT_JPEG_QUALITY,
    on_progress: ProgressCallback | None = None,
) -> ConversionResult:
    """Decode and re-encode a JPEG, dropping its metadata."""
    if isinstance(quality, bool) or not isinstance(quality, int):
        raise ValueError("quality must be an integer")
    if not MIN_JPEG_QUALITY <= quality <= MAX_JPEG_QUALITY:
        raise ValueError(f"quality must be between {MIN_JPEG_QUALITY} and {MAX_JPEG_QUALITY}")
    source = require_input_file(input_path, suffixes=JPEG_SUFFIXES, label="JPEG")
    target = Path(output_path) if output_path else default_jpeg_output(source)
    require_distinct_paths(source, target)

    report(on_progress, 10, "Loading image")
    try:
        with Image.open(source) as image:
            oriented = ImageOps.exif_transpose(image)
            rgb = oriented.convert("RGB")
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        raise ConversionError(f"failed to read JPEG: {source.name}") from exc

    report(on_progress, 60, "Encoding JPEG")
    target.parent.mkdir(parents=True, exist_ok=True)
    rgb.save(target, format="JPEG", quality=quality, exif=b"")
    report(on_progress, 100, "Saved as .jpg")
    return ConversionResult(input_path=source, output_path=target, pages=None)
