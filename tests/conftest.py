import pytest
from jmat import DenseMatrix

# Integer matrices so that reference results from sympy are exact
rref_cases = [
    [[1, 2], [3, 4]],
    [[2, 4], [1, 2]],
    [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
    [[1, 2, 3], [4, 5, 6], [7, 8, 10]],
    [[0, 0, 2], [0, 3, 1], [4, 0, 0]],
    [[1, 1, 0], [1, 1, 0], [0, 0, 1]],
    [[0, 1], [1, 0]],
    [[0, 0], [0, 3]],
    [[2, -1, 0, 5], [1, 3, -2, 0], [3, 2, -2, 5]],
    [[1, 2], [2, 4], [3, 7]],
    [[0, 2, 4, -2], [1, 0, 1, 1], [2, 2, 6, 0], [1, 1, 3, 0]],
    [[5]],
    [[0, 0, 0]],
]

invertible_cases = [
    [[4]],
    [[1, 2], [3, 4]],
    [[1, 2, 3], [4, 5, 6], [7, 8, 10]],
    [[2, -1, 0], [-1, 2, -1], [0, -1, 2]],
    [[3, 0, 2, -1], [1, 2, 0, -2], [4, 0, 6, -3], [5, 0, 2, 0]],
]


def _matrix(grid):
    return DenseMatrix(len(grid), len(grid[0]), grid)


@pytest.fixture(params=rref_cases, scope="session")
def any_matrix(request: pytest.FixtureRequest) -> DenseMatrix:
    """Provide session-level fixture for assorted matrices, singular and non-square included."""
    return _matrix(request.param)


@pytest.fixture(params=invertible_cases, scope="session")
def invertible(request: pytest.FixtureRequest) -> DenseMatrix:
    """Provide session-level fixture for invertible square matrices."""
    return _matrix(request.param)


@pytest.fixture
def square_3x3() -> DenseMatrix:
    return DenseMatrix(3, 3, [[1, 2, 3], [4, 5, 6], [7, 8, 10]])


@pytest.fixture
def wide_2x3() -> DenseMatrix:
    return DenseMatrix(2, 3, [[1, 2, 3], [4, 5, 6]])
