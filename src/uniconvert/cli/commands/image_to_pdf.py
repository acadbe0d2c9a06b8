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

import typer

from ...convert.image_pdf import image_to_pdf as convert_image_to_pdf
from ..api import console
from ..core.common import _ctx_value, _is_quiet, _load_config, _run_cli, _run_with_progress

_IMAGE_TO_PDF_HELP = (
    "Wrap an image in a single-page PDF sized to the image.\n\n"
    "Accepts PNG, JPEG, GIF (first frame), BMP, TIFF and WebP.\n\n"
    "Examples:\n"
    "  uniconvert image-to-pdf photo.png\n"
    "  uniconvert image-to-pdf photo.png -o photo.pdf\n"
)


def register(app: typer.Typer) -> None:
    app.command("image-to-pdf", help=_IMAGE_TO_PDF_HELP)(image_to_pdf)


def image_to_pdf(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., metavar="INPUT", help="Image file."),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output PDF path (defaults to <input>.pdf).",
        rich_help_panel="Outputs",
    ),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        config = _load_config(ctx)
        quiet_value = _is_quiet(ctx, config)
        result = _run_with_progress(
            lambda on_progress: convert_image_to_pdf(
                input_path,
                output,
                on_progress=on_progress,
            ),
            description="Converting to PDF",
            quiet=quiet_value,
        )
        if not quiet_value:
            console.print(str(result.output_path), soft_wrap=True)

    _run_cli(_run, debug=debug_value)
