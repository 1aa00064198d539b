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
"""
Dense matrix of real entries.

This module provides DenseMatrix, a fixed-shape row-major grid of floats that can be
read freely and mutated in place through elementary row operations only. Every
derived matrix (copy, transpose, minor) is an independent value that shares no
storage with its source.
"""

from typing import Iterable, List, Tuple

import numpy as np

from .names import EPSILON


class DimensionError(ValueError):
    """Grid shape does not match the declared row and column counts"""


class DenseMatrix:
    """
    An m x n matrix of real numbers.

    The grid dimensions are fixed at construction. Entries are changed only by
    exchange_rows, scale_row, add_scaled_row and cleanup_near_zero, which the
    row reduction uses on its own working copy.
    """

    def __init__(self, rows: int, cols: int, grid: Iterable[Iterable[float]]):
        """
        Create a matrix from an explicit grid.

        Args:
            rows: Number of rows (positive)
            cols: Number of columns (positive)
            grid: Row-major 2-D data, e.g. a list of lists or a numpy array.
                The values are copied.

        Raises:
            DimensionError: If the grid does not hold exactly rows x cols entries
        """
        if rows < 1 or cols < 1:
            raise DimensionError(f"matrix dimensions must be positive, got {rows}x{cols}")
        if isinstance(grid, np.ndarray) and grid.ndim != 2:
            raise DimensionError(f"expected a 2-D array, got {grid.ndim} dimension(s)")
        try:
            entries = [[float(value) for value in row] for row in grid]
        except TypeError as err:
            raise DimensionError(f"expected {rows} rows of {cols} entries") from err
        if len(entries) != rows:
            raise DimensionError(f"expected {rows} rows, but found {len(entries)}")
        for index, row in enumerate(entries):
            if len(row) != cols:
                raise DimensionError(f"expected {cols} entries in row {index}, but found {len(row)}")
        self._rows = rows
        self._cols = cols
        self._entries = entries

    @classmethod
    def from_rows(cls, grid: Iterable[Iterable[float]]) -> 'DenseMatrix':
        """Create a matrix whose shape is taken from the grid itself"""
        data = [list(row) for row in grid]
        cols = len(data[0]) if data else 0
        return cls(len(data), cols, data)

    @classmethod
    def identity(cls, size: int) -> 'DenseMatrix':
        return cls(size, size, [[1.0 if r == c else 0.0 for c in range(size)] for r in range(size)])

    # Read access
    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._cols

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    def value_at(self, row: int, col: int) -> float:
        return self._entries[row][col]

    def row(self, row: int) -> List[float]:
        return list(self._entries[row])

    def column(self, col: int) -> List[float]:
        return [entries[col] for entries in self._entries]

    def to_list(self) -> List[List[float]]:
        """Return the entries as a fresh list of row lists"""
        return [list(row) for row in self._entries]

    def to_numpy(self) -> np.ndarray:
        return np.array(self._entries, dtype=float)

    def is_zero_row(self, row: int) -> bool:
        return all(value == 0 for value in self._entries[row])

    # Derived matrices
    def copy(self) -> 'DenseMatrix':
        """Create an independent matrix with identical entries"""
        return DenseMatrix(self._rows, self._cols, self._entries)

    def transpose(self) -> 'DenseMatrix':
        """Return the n x m transpose; this matrix is left untouched"""
        return DenseMatrix(self._cols, self._rows,
                           [[self._entries[r][c] for r in range(self._rows)] for c in range(self._cols)])

    def minor(self, row: int, col: int) -> 'DenseMatrix':
        """
        Return the submatrix left after deleting one row and one column.

        Args:
            row: Index of the row to delete
            col: Index of the column to delete

        Returns:
            New (m-1) x (n-1) matrix

        Raises:
            DimensionError: If the matrix has a single row or a single column
            IndexError: If row or col is out of range
        """
        if self._rows < 2 or self._cols < 2:
            raise DimensionError(f"a {self._rows}x{self._cols} matrix has no minor")
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"position ({row}, {col}) outside {self._rows}x{self._cols} matrix")
        grid = [[value for c, value in enumerate(entries) if c != col]
                for r, entries in enumerate(self._entries) if r != row]
        return DenseMatrix(self._rows - 1, self._cols - 1, grid)

    def is_identity(self) -> bool:
        """
        Check whether the matrix is an identity matrix, using exact comparison.

        A non-square matrix skips the entry check entirely and is reported as
        identity. Callers that care must test is_square first.
        """
        if self.is_square:
            for r in range(self._rows):
                for c in range(self._cols):
                    expected = 1.0 if r == c else 0.0
                    if self._entries[r][c] != expected:
                        return False
        return True

    # Elementary row operations (in place)
    def exchange_rows(self, row1: int, row2: int) -> None:
        self._entries[row1], self._entries[row2] = self._entries[row2], self._entries[row1]

    def scale_row(self, row: int, factor: float) -> None:
        """Multiply every entry of a row by factor"""
        self._entries[row] = [value * factor for value in self._entries[row]]

    def normalize_row(self, row: int, col: int) -> None:
        """Divide a row by its entry in col so that this entry becomes exactly one"""
        pivot = self._entries[row][col]
        self._entries[row] = [value / pivot for value in self._entries[row]]

    def add_scaled_row(self, target_row: int, source_row: int, factor: float) -> None:
        """target += factor * source, element-wise"""
        source = self._entries[source_row]
        self._entries[target_row] = [value + factor * src for value, src in zip(self._entries[target_row], source)]

    def cleanup_near_zero(self, epsilon: float = EPSILON) -> None:
        """Snap every entry with an absolute value <= epsilon to exactly zero"""
        for entries in self._entries:
            for c, value in enumerate(entries):
                if abs(value) <= epsilon:
                    entries[c] = 0.0

    # Comparison and output
    def allclose(self, other: 'DenseMatrix', tol: float = EPSILON) -> bool:
        """Same shape and every pair of entries within tol of each other"""
        if self.shape != other.shape:
            return False
        return all(abs(a - b) <= tol
                   for row_a, row_b in zip(self._entries, other._entries)
                   for a, b in zip(row_a, row_b))

    def __eq__(self, other) -> bool:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self.shape == other.shape and self._entries == other._entries

    __hash__ = None

    def __repr__(self) -> str:
        return f"DenseMatrix({self._rows}, {self._cols}, {self._entries!r})"

    def __str__(self) -> str:
        from .printing import matrix_to_str
        return matrix_to_str(self)
