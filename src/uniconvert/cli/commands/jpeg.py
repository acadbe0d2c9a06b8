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

from ...convert.jpeg import reencode_jpeg
from ...core.bounds import MAX_JPEG_QUALITY, MIN_JPEG_QUALITY
from ..api import console
from ..core.common import _ctx_value, _is_quiet, _load_config, _run_cli, _run_with_progress

_JPEG_HELP = (
    "Re-encode a JPEG and strip its metadata.\n\n"
    "The EXIF orientation is applied to the pixels before the metadata is dropped.\n\n"
    "Examples:\n"
    "  uniconvert jpeg photo.jpeg\n"
    "  uniconvert jpeg photo.jpg --quality 80 -o small.jpg\n"
)


def register(app: typer.Typer) -> None:
    app.command("jpeg", help=_JPEG_HELP)(jpeg)


def jpeg(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., metavar="INPUT", help="JPEG file (.jpg/.jpeg)."),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (defaults to <input>.jpg, or <input>-reencoded.jpg).",
        rich_help_panel="Outputs",
    ),
    quality: int | None = typer.Option(
        None,
        "--quality",
        "-q",
        min=MIN_JPEG_QUALITY,
        max=MAX_JPEG_QUALITY,
        help="JPEG quality (defaults to [jpeg] quality in the config).",
        rich_help_panel="Outputs",
    ),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        config = _load_config(ctx)
        quiet_value = _is_quiet(ctx, config)
        result = _run_with_progress(
            lambda on_progress: reencode_jpeg(
                input_path,
                output,
                quality=quality if quality is not None else config.jpeg_quality,
                on_progress=on_progress,
            ),
            description="Re-encoding JPEG",
            quiet=quiet_value,
        )
        if not quiet_value:
            console.print(str(result.output_path), soft_wrap=True)

    _run_cli(_run, debug=debug_value)
