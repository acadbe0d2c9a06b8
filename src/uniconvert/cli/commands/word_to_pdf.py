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

from ...convert.word_pdf import word_to_pdf as convert_word_to_pdf
from ..api import console
from ..core.common import _ctx_value, _is_quiet, _load_config, _run_cli, _run_with_progress

_WORD_TO_PDF_HELP = (
    "Convert a Word document (.docx) to a text-only PDF.\n\n"
    "Headings, paragraphs, bulleted and numbered lists are laid out on pages of the\n"
    "configured paper size; tables, images and character styling are dropped.\n\n"
    "Examples:\n"
    "  uniconvert word-to-pdf report.docx\n"
    "  uniconvert --paper letter word-to-pdf report.docx -o out/report.pdf\n"
)


def register(app: typer.Typer) -> None:
    app.command("word-to-pdf", help=_WORD_TO_PDF_HELP)(word_to_pdf)


def word_to_pdf(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., metavar="INPUT", help="Word document (.docx)."),
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
            lambda on_progress: convert_word_to_pdf(
                input_path,
                output,
                config=config,
                on_progress=on_progress,
            ),
            description="Converting to PDF",
            quiet=quiet_value,
        )
        if not quiet_value:
            console.print(str(result.output_path), soft_wrap=True)

    _run_cli(_run, debug=debug_value)
