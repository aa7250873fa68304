from __future__ import annotations

import pytest

from gridplane.api.errors import SingularMatrixError, SizeMismatchError
from gridplane.linalg.matrix import Matrix


def test_identity_times_vector_is_vector() -> None:
    product = Matrix([[1, 0], [0, 1]]).multiply(Matrix([[3], [4]]))
    assert product == Matrix([[3], [4]])
    assert product.shape == (2, 1)


def test_multiply_general_and_operator_sugar() -> None:
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[5, 6], [7, 8]])
    assert (a @ b).to_list() == [[19.0, 22.0], [43.0, 50.0]]
    assert (a + b).to_list() == [[6.0, 8.0], [10.0, 12.0]]
    assert (b - a).to_list() == [[4.0, 4.0], [4.0, 4.0]]
    assert (a * 2).to_list() == [[2.0, 4.0], [6.0, 8.0]]
    assert (2 * a) == a.scale(2)


def test_operations_return_new_values() -> None:
    a = Matrix([[1, 2], [3, 4]])
    a.scale(10)
    a.add(Matrix([[1, 1], [1, 1]]))
    assert a.to_list() == [[1.0, 2.0], [3.0, 4.0]]


def test_shape_mismatches_raise() -> None:
    square = Matrix([[1, 2], [3, 4]])
    row = Matrix([[1, 2]])
    with pytest.raises(SizeMismatchError):
        square.multiply(row)
    with pytest.raises(SizeMismatchError):
        square.add(row)
    with pytest.raises(SizeMismatchError):
        square.subtract(row)


def test_ragged_or_empty_entries_are_rejected() -> None:
    with pytest.raises(SizeMismatchError):
        Matrix([[1, 2], [3]])
    with pytest.raises(SizeMismatchError):
        Matrix([])
    with pytest.raises(SizeMismatchError):
        Matrix([[]])


def test_norm_of_column_vector() -> None:
    assert Matrix.vector(3, 4).norm() == 5.0
    with pytest.raises(SizeMismatchError):
        Matrix([[3, 4]]).norm()


def test_determinant_and_inverse() -> None:
    a = Matrix([[1, 2], [3, 4]])
    assert a.determinant() == -2.0
    assert a.inverse().to_list() == [[-2.0, 1.0], [1.5, -0.5]]
    identity = Matrix.identity()
    assert identity.inverse() == identity


def test_inverse_of_zero_matrix_is_singular() -> None:
    with pytest.raises(SingularMatrixError):
        Matrix([[0, 0], [0, 0]]).inverse()


def test_determinant_and_inverse_require_2x2() -> None:
    three = Matrix([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
    with pytest.raises(SizeMismatchError):
        three.determinant()
    with pytest.raises(SizeMismatchError):
        three.inverse()


def test_entry_and_string_form() -> None:
    a = Matrix([[1, 2.5], [3, 4]])
    assert a.entry(0, 1) == 2.5
    assert str(a) == "1 2.5\n3 4"


def test_norm_of_longer_column() -> None:
    assert Matrix([[1], [2], [2]]).norm() == pytest.approx(3.0)
