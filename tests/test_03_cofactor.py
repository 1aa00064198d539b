"""Determinant, cofactor, adjoint and product tests."""
import numpy as np
import pytest
from scipy.linalg import det as scipy_det
from jmat import (DenseMatrix, adjoint, adjoint_determinant, cofactor_at, cofactor_matrix, determinant, dot)


def test_determinant_2x2():
    assert determinant(DenseMatrix(2, 2, [[1, 2], [3, 4]])) == -2.0
    assert determinant(DenseMatrix(2, 2, [[2, 4], [1, 2]])) == 0.0


def test_determinant_3x3(square_3x3):
    assert determinant(square_3x3) == -3.0


def test_determinant_1x1():
    assert determinant(DenseMatrix(1, 1, [[-7.5]])) == -7.5


def test_determinant_non_square_is_undefined(wide_2x3):
    assert determinant(wide_2x3) is None


def test_determinant_matches_scipy(invertible):
    assert determinant(invertible) == pytest.approx(scipy_det(invertible.to_numpy()))


def test_determinant_transpose_invariant(invertible):
    assert determinant(invertible.transpose()) == pytest.approx(determinant(invertible))


def test_determinant_singular_4x4():
    mx = DenseMatrix.from_rows([[1, 2, 3, 4], [2, 4, 6, 8], [0, 1, 0, 1], [5, 3, 1, 0]])
    assert determinant(mx) == pytest.approx(0.0)


def test_cofactor_at(square_3x3):
    # minor without row 0 and column 1: [[4, 6], [7, 10]] -> 40 - 42 = -2, sign -1
    assert cofactor_at(square_3x3, 0, 1) == 2.0
    # minor without row 1 and column 1: [[1, 3], [7, 10]] -> 10 - 21 = -11, sign +1
    assert cofactor_at(square_3x3, 1, 1) == -11.0
    assert cofactor_at(DenseMatrix(1, 1, [[3]]), 0, 0) == 1.0
    assert cofactor_at(DenseMatrix(2, 3, [[1, 2, 3], [4, 5, 6]]), 0, 0) is None


def test_cofactor_matrix_2x2():
    cof = cofactor_matrix(DenseMatrix(2, 2, [[1, 2], [3, 4]]))
    assert cof == DenseMatrix(2, 2, [[4, -3], [-2, 1]])


def test_cofactor_matrix_non_square(wide_2x3):
    assert cofactor_matrix(wide_2x3) is None


def test_adjoint_2x2():
    adj = adjoint(DenseMatrix(2, 2, [[1, 2], [3, 4]]))
    assert adj == DenseMatrix(2, 2, [[4, -2], [-3, 1]])


def test_adjoint_1x1():
    assert adjoint(DenseMatrix(1, 1, [[4]])) == DenseMatrix(1, 1, [[1]])


def test_adjoint_non_square(wide_2x3):
    assert adjoint(wide_2x3) is None
    assert adjoint_determinant(wide_2x3) is None


def test_adjoint_identity(invertible):
    """A @ adj(A) == det(A) * I"""
    n = invertible.rows
    product = dot(invertible, adjoint(invertible))
    expected = DenseMatrix(n, n, determinant(invertible) * np.eye(n))
    assert product.allclose(expected, tol=1e-5)


def test_adjoint_is_scaled_inverse(invertible):
    inverse = adjoint(invertible).to_numpy() / determinant(invertible)
    assert np.allclose(inverse, np.linalg.inv(invertible.to_numpy()))


def test_adjoint_determinant(square_3x3):
    assert adjoint_determinant(square_3x3) == 9.0
    assert determinant(adjoint(square_3x3)) == pytest.approx(9.0)


def test_dot():
    a = DenseMatrix(2, 3, [[1, 2, 4], [2, 4, 6]])
    b = DenseMatrix(3, 2, [[1, 6], [2, 7], [3, 8]])
    product = dot(a, b)
    assert product.shape == (2, 2)
    assert product == DenseMatrix(2, 2, [[17, 52], [28, 88]])
    assert np.array_equal(product.to_numpy(), a.to_numpy() @ b.to_numpy())


def test_dot_incompatible(wide_2x3):
    assert dot(wide_2x3, wide_2x3) is None
    assert dot(wide_2x3, wide_2x3.transpose()).shape == (2, 2)


def test_dot_does_not_mutate(square_3x3):
    before = square_3x3.to_list()
    dot(square_3x3, square_3x3)
    assert square_3x3.to_list() == before
