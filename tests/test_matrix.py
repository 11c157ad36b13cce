import pytest

from contestlib.matrix import Matrix


def test_shape_and_indexing():
    m = Matrix([[1, 2, 3], [4, 5, 6]])
    assert m.shape == (2, 3)
    assert m[1] == [4, 5, 6]
    assert m[0, 2] == 3


def test_row_is_mutable():
    m = Matrix.zeros(2, 2)
    m[0][1] = 7
    assert m[0, 1] == 7
    assert m == Matrix([[0, 7], [0, 0]])


def test_constructor_copies_rows():
    rows = [[1, 2], [3, 4]]
    m = Matrix(rows)
    rows[0][0] = 99
    assert m[0, 0] == 1


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        Matrix([[1, 2], [3]])


def test_empty_rejected():
    with pytest.raises(ValueError):
        Matrix([])


def test_zeros_and_identity():
    assert Matrix.zeros(2, 3) == Matrix([[0, 0, 0], [0, 0, 0]])
    assert Matrix.identity(2) == Matrix([[1, 0], [0, 1]])


def test_negation_and_addition_cancel():
    m = Matrix([[1, -2], [3, 4]])
    assert m + (-m) == Matrix.zeros(2, 2)
    assert m - m == Matrix.zeros(2, 2)


def test_pos_is_copy():
    m = Matrix([[1, 2]])
    p = +m
    p[0][0] = 5
    assert m[0, 0] == 1
    assert p == Matrix([[5, 2]])


def test_in_place_addition():
    m = Matrix([[1, 2], [3, 4]])
    original = m
    m += Matrix([[1, 1], [1, 1]])
    assert m is original
    assert m == Matrix([[2, 3], [4, 5]])
    m -= Matrix([[1, 1], [1, 1]])
    assert m == Matrix([[1, 2], [3, 4]])


def test_add_shape_mismatch():
    with pytest.raises(ValueError):
        Matrix([[1, 2]]) + Matrix([[1], [2]])


def test_product_known_value():
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[5, 6], [7, 8]])
    assert a @ b == Matrix([[19, 22], [43, 50]])


def test_product_rectangular_shape():
    a = Matrix([[1, 2, 3]])
    b = Matrix([[1], [2], [3]])
    assert (a @ b).shape == (1, 1)
    assert (b @ a).shape == (3, 3)


def test_identity_is_neutral():
    a = Matrix([[2, 3], [5, 7]])
    assert Matrix.identity(2) @ a == a
    assert a @ Matrix.identity(2) == a


def test_product_is_associative():
    a = Matrix([[1, 2], [0, 1]])
    b = Matrix([[3, 0], [1, 2]])
    c = Matrix([[1, 1], [4, 0]])
    assert (a @ b) @ c == a @ (b @ c)


def test_imatmul_changes_shape():
    m = Matrix([[1, 2]])
    m @= Matrix([[1, 0, 2], [0, 1, 3]])
    assert m.shape == (1, 3)


def test_product_shape_mismatch():
    with pytest.raises(ValueError):
        Matrix([[1, 2]]) @ Matrix([[1, 2]])


def test_pow_zero_is_identity():
    assert Matrix([[4, 5], [6, 7]]).pow(0) == Matrix.identity(2)


def test_pow_matches_repeated_product():
    a = Matrix([[1, 1], [1, 0]])
    assert a.pow(5) == a @ a @ a @ a @ a
    assert a.pow(1) == a


def test_pow_fibonacci():
    assert Matrix([[1, 1], [1, 0]]).pow(10)[0, 1] == 55


def test_pow_non_square():
    with pytest.raises(ValueError):
        Matrix([[1, 2]]).pow(2)


def test_pow_negative():
    with pytest.raises(ValueError):
        Matrix([[1]]).pow(-1)


def test_str_format():
    assert str(Matrix([[1, 2], [3, 4]])) == "[ 1 2 ]\n[ 3 4 ]\n"