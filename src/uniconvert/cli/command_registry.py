#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    image_to_pdf as image_to_pdf_command,
    jpeg as jpeg_command,
    pdf_to_word as pdf_to_word_command,
    word_to_pdf as word_to_pdf_command,
)


def register(app: typer.Typer) -> None:
    word_to_pdf_command.register(app)
    pdf_to_word_command.register(app)
    image_to_pdf_command.register(app)
    jpeg_command.register(app)
