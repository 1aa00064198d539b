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
Determinants, cofactors and adjoints by Laplace expansion.

Results that require a square matrix (or compatible shapes for products) are None
when the precondition does not hold; no exception is raised for that case.

The expansion is recursive along the first row and costs O(n!) operations, so it is
only meant for small matrices. A 10x10 matrix already needs millions of 2x2
determinants.
"""

import logging
from typing import Optional

from .matrix import DenseMatrix

LOG = logging.getLogger(__name__)


def _sign(index: int) -> int:
    return 1 if index % 2 == 0 else -1


def determinant(matrix: DenseMatrix) -> Optional[float]:
    """
    Compute the determinant by cofactor expansion along the first row.

    Args:
        matrix: Input matrix

    Returns:
        The determinant, or None if the matrix is not square
    """
    if not matrix.is_square:
        return None
    n = matrix.rows
    if n == 1:
        return matrix.value_at(0, 0)
    if n == 2:
        return matrix.value_at(0, 0) * matrix.value_at(1, 1) - matrix.value_at(0, 1) * matrix.value_at(1, 0)
    det = 0.0
    for col in range(n):
        entry = matrix.value_at(0, col)
        if entry != 0:
            det += _sign(col) * entry * determinant(matrix.minor(0, col))
    return det


def cofactor_at(matrix: DenseMatrix, row: int, col: int) -> Optional[float]:
    """
    Signed determinant of the minor obtained by deleting row and col.

    The cofactor of a 1x1 matrix is 1, the determinant of the empty minor.
    None is returned for non-square matrices.
    """
    if not matrix.is_square:
        return None
    if matrix.rows == 1:
        if (row, col) != (0, 0):
            raise IndexError(f"position ({row}, {col}) outside 1x1 matrix")
        return 1.0
    return _sign(row + col) * determinant(matrix.minor(row, col))


def cofactor_matrix(matrix: DenseMatrix) -> Optional[DenseMatrix]:
    """Matrix of all cofactors, None if the matrix is not square"""
    if not matrix.is_square:
        return None
    n = matrix.rows
    if n > 8:
        LOG.warning(f"Cofactor expansion of a {n}x{n} matrix, this may take very long.")
    return DenseMatrix(n, n, [[cofactor_at(matrix, r, c) for c in range(n)] for r in range(n)])


def adjoint(matrix: DenseMatrix) -> Optional[DenseMatrix]:
    """
    Adjoint (adjugate) of a square matrix: the transpose of its cofactor matrix.

    Together with the determinant it gives the inverse, A^-1 = adj(A) / det(A).

    Args:
        matrix: Input matrix

    Returns:
        The adjoint, or None if the matrix is not square
    """
    cofactors = cofactor_matrix(matrix)
    if cofactors is None:
        return None
    return cofactors.transpose()


def adjoint_determinant(matrix: DenseMatrix) -> Optional[float]:
    """det(adj(A)) = det(A)^(n-1), None for non-square matrices"""
    det = determinant(matrix)
    if det is None:
        return None
    return det**(matrix.rows - 1)


def dot(a: DenseMatrix, b: DenseMatrix) -> Optional[DenseMatrix]:
    """
    Matrix product a @ b.

    Args:
        a: Left factor (m x k)
        b: Right factor (k x n)

    Returns:
        The m x n product, or None if a.cols != b.rows
    """
    if a.cols != b.rows:
        return None
    columns = [b.column(c) for c in range(b.cols)]
    grid = [[sum(x * y for x, y in zip(a.row(r), column)) for column in columns] for r in range(a.rows)]
    return DenseMatrix(a.rows, b.cols, grid)
