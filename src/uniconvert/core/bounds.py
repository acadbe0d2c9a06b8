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

# Largest input file any conversion will read into memory.
MAX_INPUT_BYTES = 256 * 1_048_576

# JPEG quality accepted by Pillow's encoder.
MIN_JPEG_QUALITY = 1
MAX_JPEG_QUALITY = 95

# Quality used when re-encoding JPEG files.
DEFAULT_JPEG_QUALITY = 92
