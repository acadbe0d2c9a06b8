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

import importlib.metadata
from collections.abc import Callable
from typing import Any

import typer
from rich.traceback import install as install_rich_traceback

from ...config import PAPER_SIZES_PT, AppConfig, load_app_config, resolve_paper_size
from ...core.models import ConversionResult, ProgressCallback
from ..api import configure_ui, console_err, progress


def _run_cli(func: Callable[[], Any], *, debug: bool) -> None:
    if debug:
        install_rich_traceback(show_locals=True)
    try:
        result = func()
    except (OSError, RuntimeError, ValueError, TypeError, LookupError) as exc:
        if debug:
            raise
        console_err.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=2)
    if isinstance(result, int) and result != 0:
        raise typer.Exit(code=result)


def _ctx_value(ctx: typer.Context, key: str) -> Any:
    if ctx.obj is None:
        return None
    return ctx.obj.get(key)


def _load_config(ctx: typer.Context) -> AppConfig:
    """Load the active config and apply its ``[ui]`` console defaults."""
    paper_size = resolve_paper_size(_ctx_value(ctx, "paper"))
    config = load_app_config(_ctx_value(ctx, "config"), paper_size=paper_size)
    ui = config.ui
    no_color = bool(_ctx_value(ctx, "no_color")) or ui.no_color
    no_animations = bool(_ctx_value(ctx, "no_animations")) or ui.no_animations
    configure_ui(no_color=no_color, no_animations=no_animations)
    return config


def _is_quiet(ctx: typer.Context, config: AppConfig) -> bool:
    return bool(_ctx_value(ctx, "quiet")) or config.ui.quiet


def _run_with_progress(
    convert: Callable[[ProgressCallback | None], ConversionResult],
    *,
    description: str,
    quiet: bool,
) -> ConversionResult:
    with progress(quiet=quiet) as progress_bar:
        if progress_bar is None:
            return convert(None)
        task_id = progress_bar.add_task(description, total=100)

        def on_progress(percent: int, message: str) -> None:
            progress_bar.update(task_id, completed=percent, description=message)

        return convert(on_progress)


def _paper_callback(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip().upper()
    if normalized not in PAPER_SIZES_PT:
        raise typer.BadParameter("paper must be A4 or LETTER")
    return normalized


def _get_version() -> str:
    try:
        return importlib.metadata.version("uniconvert")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"
