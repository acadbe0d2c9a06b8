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

from ...convert.pdf_word import pdf_to_word as convert_pdf_to_word
from ..api import console, print_warning
from ..core.common import _ctx_value, _is_quiet, _load_config, _run_cli, _run_with_progress

_PDF_TO_WORD_HELP = (
    "Extract the text of a PDF into a Word document (.docx).\n\n"
    "Each extracted line becomes a paragraph. Layout, images and fonts are not kept.\n\n"
    "Examples:\n"
    "  uniconvert pdf-to-word scan.pdf\n"
    "  uniconvert pdf-to-word scan.pdf --page-breaks -o scan.docx\n"
)


def register(app: typer.Typer) -> None:
    app.command("pdf-to-word", help=_PDF_TO_WORD_HELP)(pdf_to_word)


def pdf_to_word(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., metavar="INPUT", help="PDF file."),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output .docx path (defaults to <input>.docx).",
        rich_help_panel="Outputs",
    ),
    page_breaks: bool = typer.Option(
        False,
        "--page-breaks",
        help="Start each PDF page on a new Word page.",
        rich_help_panel="Outputs",
    ),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        config = _load_config(ctx)
        quiet_value = _is_quiet(ctx, config)
        result = _run_with_progress(
            lambda on_progress: convert_pdf_to_word(
                input_path,
                output,
                page_breaks=page_breaks,
                on_progress=on_progress,
            ),
            description="Extracting text",
            quiet=quiet_value,
        )
        if result.pages == 0:
            print_warning("the PDF has no pages", quiet=quiet_value)
        if not quiet_value:
            console.print(str(result.output_path), soft_wrap=True)

    _run_cli(_run, debug=debug_value)
