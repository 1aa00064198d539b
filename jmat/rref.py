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
Reduced row echelon form.

The reduction works on a private copy of the input and repeats a single pivot step
until the copy satisfies the RREF predicate or no further pivot can be found:

1. stop if the working matrix is already reduced
2. snap near-zero entries to zero
3. search columns left to right, rows top to bottom, for a valid pivot
4. hoist the pivot row above a zero row directly above it
5. scale the pivot row so the pivot becomes one
6. eliminate the pivot column in every other row

Columns that are already reduced (a single one, zeros elsewhere) are never used as
pivot columns again. Instead their rows are kept in increasing column order, which
covers columns that become reduced as a side effect of an earlier elimination.
Once no pivot is left, zero rows are moved to the bottom.
"""

import logging
from typing import Optional, Tuple

from .matrix import DenseMatrix
from .names import EPSILON

LOG = logging.getLogger(__name__)


def _leading_entry(matrix: DenseMatrix, row: int) -> Optional[Tuple[int, float]]:
    """Column and value of the first non-zero entry of a row, None for a zero row"""
    for col, value in enumerate(matrix.row(row)):
        if value != 0:
            return col, value
    return None


def is_reduced(matrix: DenseMatrix) -> bool:
    """
    Check the RREF predicate with exact comparisons.

    The matrix is reduced iff zero rows trail, every non-zero row leads with a one,
    leading ones move strictly to the right from row to row and every column that
    holds a leading one is zero in all other rows.

    Args:
        matrix: Matrix to check

    Returns:
        True if the matrix is in reduced row echelon form
    """
    after_zero_row = False
    previous_col = -1
    for row in range(matrix.rows):
        leading = _leading_entry(matrix, row)
        if leading is None:
            after_zero_row = True
            continue
        col, value = leading
        if value != 1 or after_zero_row or previous_col >= col:
            return False
        for other in range(matrix.rows):
            if other != row and matrix.value_at(other, col) != 0:
                return False
        previous_col = col
    return True


def is_reduced_column(matrix: DenseMatrix, col: int) -> bool:
    """True if the column holds at most one entry equal to one and zeros elsewhere"""
    found_one = False
    for value in matrix.column(col):
        if value == 1:
            if found_one:
                return False
            found_one = True
        elif value != 0:
            return False
    return True


class RowReduction:
    """
    One reduction session.

    Holds the working copy and the most recent pivot row. The pivot row survives
    from one pass to the next so that newly accepted pivot rows are stacked
    directly below the ones already processed.
    """

    def __init__(self, matrix: DenseMatrix, epsilon: float = EPSILON):
        """
        Args:
            matrix: Input matrix, left untouched
            epsilon: Entries at or below this magnitude are treated as zero
        """
        self.matrix = matrix.copy()
        self.epsilon = epsilon
        self.pivot_row = -1
        self.passes = 0

    def run(self) -> DenseMatrix:
        """
        Reduce the working copy and return it.

        Every pivot turns one more column into a reduced column without touching
        the columns to its left, so at most cols pivot passes are made. The pass
        limit of rows + cols only guards against a broken predicate.
        """
        matrix = self.matrix
        limit = matrix.rows + matrix.cols
        while self.passes < limit:
            if is_reduced(matrix):
                return matrix
            matrix.cleanup_near_zero(self.epsilon)
            pivot = self.find_pivot()
            if pivot is None:
                LOG.debug(f"No pivot left after {self.passes} passes")
                self._sink_zero_rows()
                return matrix
            self.passes += 1
            LOG.debug(f"Pass {self.passes}: pivot at {pivot}")
            self._apply_pivot(*pivot)

        matrix.cleanup_near_zero(self.epsilon)
        if not is_reduced(matrix):
            LOG.warning(f"Row reduction stopped after {self.passes} passes without reaching reduced form")
        return matrix

    def find_pivot(self) -> Optional[Tuple[int, int]]:
        """
        Find the next pivot, scanning columns left to right and rows top to bottom.

        Returns:
            (row, col) of the accepted pivot after it has been moved into place,
            or None if no entry qualifies
        """
        for col in range(self.matrix.cols):
            for row in range(self.matrix.rows):
                if self.is_valid_pivot(row, col):
                    return self.pivot_row, col
        return None

    def is_valid_pivot(self, row: int, col: int) -> bool:
        """
        Decide whether (row, col) can serve as the next pivot.

        Zero entries and entries of already reduced columns are rejected, and so
        are rows that hold the one of a reduced column further left.

        Side effects: if the one of a reduced column is the leading entry of its
        row, that row is moved into column order among the other reduced rows and
        becomes the most recent pivot row. An accepted candidate is exchanged into
        the row directly below the most recent pivot row and then becomes the most
        recent pivot row itself.
        """
        matrix = self.matrix
        if matrix.value_at(row, col) == 0:
            return False
        if is_reduced_column(matrix, col):
            if _leading_entry(matrix, row)[0] == col:
                self.pivot_row = self._reorder_reduced_row(row, col)
            return False
        for earlier in range(col):
            if matrix.value_at(row, earlier) == 1 and is_reduced_column(matrix, earlier):
                return False

        slot = self.pivot_row + 1
        if slot < matrix.rows:
            matrix.exchange_rows(row, slot)
            row = slot
        self.pivot_row = row
        return True

    def _leads_reduced_column_after(self, row: int, col: int) -> bool:
        leading = _leading_entry(self.matrix, row)
        return (leading is not None and leading[0] > col and leading[1] == 1
                and is_reduced_column(self.matrix, leading[0]))

    def _reorder_reduced_row(self, one_row: int, col: int) -> int:
        """
        Exchange the row holding the leading one of reduced column col with the
        first row above it that leads with the one of a reduced column further
        right.

        Returns:
            Row index of the column's one after reordering
        """
        for row in range(one_row):
            if self._leads_reduced_column_after(row, col):
                self.matrix.exchange_rows(row, one_row)
                return row
        return one_row

    def _sink_zero_rows(self) -> None:
        """Move zero rows below all non-zero rows, keeping the order of the latter"""
        matrix = self.matrix
        target = 0
        for row in range(matrix.rows):
            if not matrix.is_zero_row(row):
                if row != target:
                    matrix.exchange_rows(row, target)
                target += 1

    def _apply_pivot(self, row: int, col: int) -> None:
        matrix = self.matrix
        if row > 0 and matrix.is_zero_row(row - 1):
            matrix.exchange_rows(row, row - 1)
            row -= 1
            self.pivot_row = row
        matrix.normalize_row(row, col)
        for other in range(matrix.rows):
            factor = matrix.value_at(other, col)
            if other != row and factor != 0:
                matrix.add_scaled_row(other, row, -factor)


def reduce_to_rref(matrix: DenseMatrix, epsilon: float = EPSILON) -> DenseMatrix:
    """
    Compute the reduced row echelon form of a matrix.

    Args:
        matrix: Input matrix, not modified
        epsilon: Entries at or below this magnitude are treated as zero

    Returns:
        A new matrix in reduced row echelon form
    """
    return RowReduction(matrix, epsilon).run()
