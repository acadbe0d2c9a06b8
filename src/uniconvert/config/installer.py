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

import os
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "config" / "config.toml"
DEFAULT_PAPER_SIZE = "A4"
PAPER_SIZES_PT: dict[str, tuple[float, float]] = {
    "A4": (595.28, 841.89),
    "LETTER": (612.0, 792.0),
}
CONFIG_ENV = "UNICONVERT_CONFIG"
PAPER_SIZE_ENV = "UNICONVERT_PAPER_SIZE"
XDG_CONFIG_ENV = "XDG_CONFIG_HOME"
APP_NAME = "uniconvert"


@dataclass(frozen=True)
class ConfigPaths:
    user_config_dir: Path
    user_config_path: Path


def _user_config_dir() -> Path:
    xdg_override = os.environ.get(XDG_CONFIG_ENV)
    if xdg_override:
        return Path(xdg_override) / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / ".config" / APP_NAME
    return Path(user_config_dir(APP_NAME, appauthor=False))


def _build_paths() -> ConfigPaths:
    config_dir = _user_config_dir()
    return ConfigPaths(
        user_config_dir=config_dir,
        user_config_path=config_dir / DEFAULT_CONFIG_PATH.name,
    )


def resolve_config_path(path: str | Path | None = None) -> Path:
    if path:
        return Path(path).expanduser()

    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return Path(env_path).expanduser()

    paths = _build_paths()
    if paths.user_config_path.is_file():
        return paths.user_config_path
    return DEFAULT_CONFIG_PATH


def resolve_paper_size(paper_size: str | None) -> str | None:
    value = paper_size or os.environ.get(PAPER_SIZE_ENV)
    if not value:
        return None
    key = value.strip().upper()
    if key not in PAPER_SIZES_PT:
        raise ValueError(f"unknown paper size: {value}")
    return key


def init_user_config() -> Path:
    paths = _build_paths()
    try:
        paths.user_config_dir.mkdir(parents=True, exist_ok=True)
        _copy_if_missing(DEFAULT_CONFIG_PATH, paths.user_config_path)
    except OSError as exc:
        raise OSError(f"unable to create config dir at {paths.user_config_dir}") from exc
    return paths.user_config_dir


def user_config_path() -> Path:
    return _build_paths().user_config_path


def _copy_if_missing(source: Path, dest: Path) -> None:
    if dest.exists():
        return
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(source, dest)
