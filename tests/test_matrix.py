import pytest

from rasterkit.matrix import Matrix4
from rasterkit.vector import Vec4

A = Matrix4([(1, 2, 0, -1), (3, 0, 4, 2), (0, 5, 1, 0), (2, 1, 1, 1)])
B = Matrix4([(0, 1, 2, 3), (-1, 4, 0, 2), (2, 2, 1, 0), (1, 0, 3, 5)])


def test_identity_leaves_vector_unchanged():
    v = Vec4(1.5, -2, 3, 1)
    assert Matrix4.identity() * v == v


def test_translation_moves_point():
    translate = Matrix4([(1, 0, 0, 2), (0, 1, 0, 3), (0, 0, 1, 4), (0, 0, 0, 1)])
    assert translate * Vec4(1, 1, 1, 1) == Vec4(3, 4, 5, 1)


def test_transposed_twice_is_original():
    assert A.transposed().transposed() == A


def test_column_is_row_of_transpose():
    for j in range(4):
        assert A.column(j) == A.transposed().row(j)


def test_composition_with_identity_transposes():
    identity = Matrix4.identity()
    assert A * identity == A.transposed()
    assert identity * A == A.transposed()


def test_composition_matches_successive_application():
    v = Vec4(1, -2, 3, 4)
    assert (A * B).transposed() * v == A * (B * v)


def test_scalar_scaling_both_sides():
    v = Vec4(2, 0, -1, 3)
    assert (2 * A) * v == (A * v) * 2
    assert A * 2 == 2 * A


def test_scalar_scaling_does_not_mutate():
    before = Matrix4([A.row(i) for i in range(4)])
    _ = A * 3
    assert A == before


def test_rows_are_copied():
    row = Vec4(1, 2, 3, 4)
    m = Matrix4([row, row, row, row])
    row[0] = 100
    assert m.row(0)[0] == 1


def test_wrong_row_count():
    with pytest.raises(ValueError):
        Matrix4([(1, 0, 0, 0), (0, 1, 0, 0), (0, 0, 1, 0)])


def test_unsupported_operand():
    before = Matrix4([A.row(i) for i in range(4)])
    with pytest.raises(TypeError) as excinfo:
        A * "x"
    assert excinfo.type is TypeError
    assert A == before
    assert A * Vec4(1, 0, 0, 0) == Vec4(1, 3, 0, 2)