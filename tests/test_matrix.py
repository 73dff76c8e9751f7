import pytest

from vecmat.matrix import SquareMatrix, matrix2, matrix3, matrix4
from vecmat.vector import vector2, vector3, vector4

TOL = 0.00001


def approx(value):
    return pytest.approx(value, abs=TOL)


def test_list_initialization_2d():
    m = matrix2(vector2(1.0, 0.0), vector2(0.0, 1.0))
    assert m.at(0, 0) == approx(1.0)
    assert m.at(0, 1) == approx(0.0)
    assert m.at(1, 0) == approx(0.0)
    assert m.at(1, 1) == approx(1.0)


def test_list_initialization_3d():
    m = matrix3(
        vector3(1.0, 0.0, 0.0),
        vector3(0.0, 1.0, 0.0),
        vector3(0.0, 0.0, 1.0),
    )
    for i in range(3):
        for j in range(3):
            assert m[i][j] == approx(1.0 if i == j else 0.0)


def test_list_initialization_4d_is_column_ordered():
    m = matrix4(
        (1.0, 5.0, 9.0, 13.0),
        (2.0, 6.0, 10.0, 14.0),
        (3.0, 7.0, 11.0, 15.0),
        (4.0, 8.0, 12.0, 16.0),
    )
    values = [m.at(row, column) for row in range(4) for column in range(4)]
    assert values == [approx(float(v)) for v in range(1, 17)]


def test_product_with_vector_3d():
    m = matrix3((1.0, 0.0, 1.0), (0.0, 1.0, 1.0), (0.0, 0.0, 1.0))
    product = m * vector3(-6.0, 3.0, 1.0)
    assert list(product) == [approx(-6.0), approx(3.0), approx(-2.0)]


def test_product_with_matrix_2d():
    m1 = matrix2((1.0, 2.0), (-1.0, 1.5))
    m2 = matrix2((2.0, -1.0), (1.0, 0.0))
    m = m1 * m2
    assert m.at(0, 0) == approx(3.0)
    assert m.at(0, 1) == approx(1.0)
    assert m.at(1, 0) == approx(2.5)
    assert m.at(1, 1) == approx(2.0)


def test_index_operators():
    m = matrix2((1.22, 2.0), (-1.0, 1.5))
    assert m[0][0] == approx(1.22)
    assert m[1][1] == approx(1.5)


def test_index_returns_live_column():
    m = matrix2((1.22, 2.0), (-1.0, 1.5))
    first = m[0]
    second = m[1]
    assert first[0] == approx(1.22)
    assert second[0] == approx(-1.0)
    first[0] = 9.0
    assert m.at(0, 0) == approx(9.0)


def test_product_of_4d_matrices():
    columns = [(1.0, 2.0, 3.0, 4.0)] * 4
    res = matrix4(*columns) * matrix4(*columns)
    assert res.at(0, 0) == approx(10.0)
    assert res.at(1, 0) == approx(20.0)
    assert res.at(2, 0) == approx(30.0)
    assert res.at(3, 0) == approx(40.0)


def test_product_with_vector_4d():
    m = matrix4(
        (2, 4, 8, 16),
        (4, 8, 16, 32),
        (8, 16, 32, 64),
        (16, 32, 64, 128),
    )
    res = m * vector4(2, 3, 4, 5)
    assert list(res) == [approx(128.0), approx(256.0), approx(512.0), approx(1024.0)]


def test_default_matrix_is_zero():
    m = SquareMatrix(size=3)
    assert all(m.at(r, c) == 0.0 for r in range(3) for c in range(3))


def test_missing_columns_are_zero():
    m = matrix3((1, 2, 3))
    assert list(m[2]) == [0.0, 0.0, 0.0]
    assert list(m[0]) == [1.0, 2.0, 3.0]


def test_wrong_column_length_rejected():
    with pytest.raises(ValueError):
        matrix2((1.0, 2.0, 3.0), (1.0, 2.0))


def test_too_many_columns_rejected():
    with pytest.raises(ValueError):
        matrix2((1, 0), (0, 1), (1, 1))


def test_at_out_of_range():
    m = matrix2((1, 0), (0, 1))
    with pytest.raises(IndexError):
        m.at(2, 0)
    with pytest.raises(IndexError):
        m.at(0, -1)


def test_set_at_and_setitem():
    m = matrix2()
    m.set_at(1, 0, 4.0)
    m[1] = (7.0, 8.0)
    assert m == matrix2((0.0, 4.0), (7.0, 8.0))


def test_identity_product_keeps_matrix():
    identity = matrix3((1, 0, 0), (0, 1, 0), (0, 0, 1))
    m = matrix3((1, 2, 3), (4, 5, 6), (7, 8, 9))
    assert identity * m == m
    assert m * identity == m


def test_vector_size_mismatch_rejected():
    with pytest.raises(ValueError):
        matrix2((1, 0), (0, 1)) * vector3(1, 2, 3)