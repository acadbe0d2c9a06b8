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
from typing import Any, cast

from fpdf import FPDF
from PIL import Image, ImageOps, UnidentifiedImageError

from ..core.errors import ConversionError
from ..core.models import ConversionResult, ProgressCallback, report
from ..core.validation import default_output_path, require_distinct_paths, require_input_file

IMAGE_SUFFIXES = (".png", ".jpg", ".jpeg", ".gif", ".bmp", ".tif", ".tiff", ".webp")

# Modes fpdf2 embeds directly; everything else goes through RGB(A).
_PDF_MODES = frozenset({"RGB", "RGBA", "L", "LA"})


def load_image(path: Path) -> Image.Image:
    """Open an image, apply its EXIF orientation and take the first frame."""
    try:
        with Image.open(path) as image:
            image.seek(0)
            oriented = ImageOps.exif_transpose(image)
            oriented.load()
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        raise ConversionError(f"failed to read image: {path.name}") from exc
    return _normalize_mode(oriented)


def _normalize_mode(image: Image.Image) -> Image.Image:
    if image.mode in _PDF_MODES:
        return image
    if image.mode == "P" and "transparency" in image.info:
        return image.convert("RGBA")
    if image.mode == "PA":
        return image.convert("RGBA")
    return image.convert("RGB")


def image_to_pdf(
    input_path: str | Path,
    output_path: str | Path | None = None,
    *,
    on_progress: ProgressCallback | None = None,
) -> ConversionResult:
    """Wrap a raster image in a single-page PDF sized to its pixel dimensions."""
    source = require_input_file(input_path, suffixes=IMAGE_SUFFIXES, label="image")
    target = Path(output_path) if output_path else default_output_path(source, ".pdf")
    require_distinct_paths(source, target)

    report(on_progress, 10, "Loading image")
    image = load_image(source)
    width, height = image.size
    if width <= 0 or height <= 0:
        raise ConversionError(f"image has no pixels: {source.name}")

    report(on_progress, 50, "Creating PDF")
    pdf = FPDF(unit="pt", format=cast(Any, (float(width), float(height))))
    pdf.set_auto_page_break(False)
    pdf.set_margin(0)
    pdf.set_creator("uniconvert")
    pdf.set_title(source.stem)
    pdf.add_page()
    pdf.image(image, x=0, y=0, w=width, h=height)

    report(on_progress, 90, "Writing PDF")
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(bytes(pdf.output()))
    report(on_progress, 100, "Converted to PDF")
    return ConversionResult(input_path=source, output_path=target, pages=1)
