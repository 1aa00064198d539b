#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Text rendering of matrices"""

from .names import CELL_WIDTH, DISPLAY_DIGITS, ROW_INDENT


def format_entry(value: float, digits: int = DISPLAY_DIGITS) -> str:
    """
    Round to at most the given number of decimals without trailing zeros.

    Examples:
        >>> format_entry(1.0)
        '1'
        >>> format_entry(-0.5)
        '-0.5'
        >>> format_entry(2 / 3)
        '0.67'
    """
    text = f"{value:.{digits}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text == '-0':
        text = '0'
    return text


def matrix_to_str(matrix, digits: int = DISPLAY_DIGITS, width: int = CELL_WIDTH, indent: int = ROW_INDENT) -> str:
    """One line per row, entries left-aligned in cells of the given width"""
    lines = []
    for row in range(matrix.rows):
        cells = (format_entry(value, digits).ljust(width) + ' ' for value in matrix.row(row))
        lines.append(' ' * indent + ''.join(cells))
    return '\n'.join(lines)
