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

import math
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import cast

from ..core.bounds import DEFAULT_JPEG_QUALITY, MAX_JPEG_QUALITY, MIN_JPEG_QUALITY
from ..layout.styles import (
    DEFAULT_BULLET,
    DEFAULT_FONT_FAMILY,
    DEFAULT_LINE_GAP_PT,
    DEFAULT_ORDERED_MARKER,
    StyleTable,
    default_style_table,
)
from ..layout.types import BLOCK_KINDS, BlockKind, BlockStyle, FontHandle, PageGeometry
from ..render.fonts import CORE_FONT_FAMILIES
from .installer import DEFAULT_PAPER_SIZE, PAPER_SIZES_PT, resolve_config_path

DEFAULT_MARGIN_PT = 48.0
_FONT_STYLE_FLAGS = frozenset("BIU")


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False
    no_animations: bool = False


@dataclass(frozen=True)
class AppConfig:
    paper_size: str
    geometry: PageGeometry
    style_table: StyleTable
    jpeg_quality: int = DEFAULT_JPEG_QUALITY
    ui: UiDefaults = field(default_factory=UiDefaults)
    source_path: Path | None = None


def load_app_config(path: str | Path | None = None, *, paper_size: str | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path)
    return parse_app_config(data, paper_size=paper_size, source_path=config_path)


def parse_app_config(
    data: dict[str, object],
    *,
    paper_size: str | None = None,
    source_path: Path | None = None,
) -> AppConfig:
    page_cfg = _get_dict(data, "page")
    resolved_paper = _resolve_paper_size(paper_size, page_cfg)
    geometry = _parse_geometry(page_cfg, resolved_paper, explicit_paper=paper_size is not None)
    style_table = _parse_style_table(_get_dict(data, "styles"))
    jpeg_quality = _parse_jpeg_quality(_get_dict(data, "jpeg").get("quality"))
    return AppConfig(
        paper_size=resolved_paper,
        geometry=geometry,
        style_table=style_table,
        jpeg_quality=jpeg_quality,
        ui=_parse_ui_defaults(_get_dict(data, "ui")),
        source_path=source_path,
    )


def default_app_config(*, paper_size: str | None = None) -> AppConfig:
    return parse_app_config({}, paper_size=paper_size)


def _resolve_paper_size(paper_size: str | None, page_cfg: dict[str, object]) -> str:
    raw = paper_size or _parse_optional_str(page_cfg.get("size"), field="page.size")
    if raw is None:
        return DEFAULT_PAPER_SIZE
    key = raw.strip().upper()
    if key not in PAPER_SIZES_PT:
        raise ValueError(f"page.size must be one of: {', '.join(sorted(PAPER_SIZES_PT))}")
    return key


def _parse_geometry(
    cfg: dict[str, object],
    paper_size: str,
    *,
    explicit_paper: bool,
) -> PageGeometry:
    width, height = PAPER_SIZES_PT[paper_size]
    width_value = _parse_optional_float(cfg.get("width_pt"), field="page.width_pt")
    height_value = _parse_optional_float(cfg.get("height_pt"), field="page.height_pt")
    if (width_value is None) != (height_value is None):
        raise ValueError("page.width_pt and page.height_pt must be set together")
    if width_value is not None and height_value is not None and not explicit_paper:
        width, height = width_value, height_value
    margin = _parse_optional_float(cfg.get("margin_pt"), field="page.margin_pt")
    geometry = PageGeometry(
        width_pt=width,
        height_pt=height,
        margin_pt=DEFAULT_MARGIN_PT if margin is None else margin,
    )
    geometry.validate()
    return geometry


def _parse_style_table(cfg: dict[str, object]) -> StyleTable:
    font_family = _parse_font_family(cfg.get("font_family"), field="styles.font_family")
    line_gap = _parse_optional_float(cfg.get("line_gap_pt"), field="styles.line_gap_pt")
    paragraph_gap = _parse_optional_float(
        cfg.get("paragraph_gap_pt"), field="styles.paragraph_gap_pt"
    )
    bullet = _parse_optional_str(cfg.get("bullet"), field="styles.bullet")
    ordered_marker = _parse_ordered_marker(cfg.get("ordered_marker"))
    _require_non_negative(line_gap, field="styles.line_gap_pt")
    _require_non_negative(paragraph_gap, field="styles.paragraph_gap_pt")

    table = default_style_table(
        font_family=font_family or DEFAULT_FONT_FAMILY,
        line_gap_pt=DEFAULT_LINE_GAP_PT if line_gap is None else line_gap,
        paragraph_gap_pt=0.0 if paragraph_gap is None else paragraph_gap,
        bullet=bullet or DEFAULT_BULLET,
        ordered_marker=ordered_marker or DEFAULT_ORDERED_MARKER,
    )
    for key, value in cfg.items():
        if not isinstance(value, dict):
            continue
        if key not in BLOCK_KINDS:
            raise ValueError(f"styles.{key} is not a known block kind")
        kind = cast(BlockKind, key)
        table = table.with_entry(kind, _parse_block_style(table.resolve(kind), value, kind=kind))
    return table


def _parse_block_style(base: BlockStyle, cfg: dict[str, object], *, kind: str) -> BlockStyle:
    prefix = f"styles.{kind}"
    style = base.style
    font = style.font

    family = _parse_font_family(cfg.get("font_family"), field=f"{prefix}.font_family")
    font_style = _parse_font_style(cfg.get("font_style"), field=f"{prefix}.font_style")
    if family is not None or font_style is not None:
        font = FontHandle(
            family=family or font.family,
            style=font.style if font_style is None else font_style,
        )

    size = _parse_optional_float(cfg.get("size_pt"), field=f"{prefix}.size_pt")
    if size is not None and size <= 0:
        raise ValueError(f"{prefix}.size_pt must be positive")
    line_gap = _parse_optional_float(cfg.get("line_gap_pt"), field=f"{prefix}.line_gap_pt")
    paragraph_gap = _parse_optional_float(
        cfg.get("paragraph_gap_pt"), field=f"{prefix}.paragraph_gap_pt"
    )
    indent = _parse_optional_float(cfg.get("indent_pt"), field=f"{prefix}.indent_pt")
    leading = _parse_optional_float(cfg.get("leading_gap_pt"), field=f"{prefix}.leading_gap_pt")
    trailing = _parse_optional_float(
        cfg.get("trailing_gap_pt"), field=f"{prefix}.trailing_gap_pt"
    )
    for value, name in (
        (line_gap, "line_gap_pt"),
        (paragraph_gap, "paragraph_gap_pt"),
        (indent, "indent_pt"),
        (leading, "leading_gap_pt"),
        (trailing, "trailing_gap_pt"),
    ):
        _require_non_negative(value, field=f"{prefix}.{name}")

    style = replace(
        style,
        font=font,
        size_pt=style.size_pt if size is None else size,
        line_gap_pt=style.line_gap_pt if line_gap is None else line_gap,
        paragraph_gap_pt=style.paragraph_gap_pt if paragraph_gap is None else paragraph_gap,
    )
    return BlockStyle(
        style=style,
        indent_pt=base.indent_pt if indent is None else indent,
        leading_gap_pt=base.leading_gap_pt if leading is None else leading,
        trailing_gap_pt=base.trailing_gap_pt if trailing is None else trailing,
    )


def _parse_ui_defaults(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
        no_animations=_parse_bool(
            cfg.get("no_animations"),
            field="ui.no_animations",
            default=False,
        ),
    )


def _parse_jpeg_quality(value: object) -> int:
    if value is None:
        return DEFAULT_JPEG_QUALITY
    quality = _parse_int_strict(value, field="jpeg.quality")
    if not MIN_JPEG_QUALITY <= quality <= MAX_JPEG_QUALITY:
        raise ValueError(
            f"jpeg.quality must be between {MIN_JPEG_QUALITY} and {MAX_JPEG_QUALITY}"
        )
    return quality


def _parse_font_family(value: object, *, field: str) -> str | None:
    family = _parse_optional_str(value, field=field)
    if family is None:
        return None
    if family.strip().lower() not in CORE_FONT_FAMILIES:
        raise ValueError(f"{field} must be a PDF core font (Helvetica, Times, Courier)")
    return family.strip()


def _parse_font_style(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    normalized = value.strip().upper()
    if any(flag not in _FONT_STYLE_FLAGS for flag in normalized):
        raise ValueError(f"{field} may only contain B, I, and U")
    return normalized


def _parse_ordered_marker(value: object) -> str | None:
    marker = _parse_optional_str(value, field="styles.ordered_marker")
    if marker is None:
        return None
    try:
        marker.format(n=1)
    except (KeyError, IndexError, ValueError) as exc:
        raise ValueError("styles.ordered_marker may only use the {n} placeholder") from exc
    return marker


def _require_non_negative(value: float | None, *, field: str) -> None:
    if value is not None and value < 0:
        raise ValueError(f"{field} must be >= 0")


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_optional_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    normalized = value.strip()
    return normalized or None


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")


def _parse_optional_float(value: object, *, field: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a number")
    if isinstance(value, (int, float)):
        parsed = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = float(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be a number") from exc
    else:
        raise ValueError(f"{field} must be a number")
    if not math.isfinite(parsed):
        raise ValueError(f"{field} must be a finite number")
    return parsed


def _parse_int_strict(value: object, *, field: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field} must be an integer")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError(f"{field} must be an integer")
        try:
            return int(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be an integer") from exc
    raise ValueError(f"{field} must be an integer")
