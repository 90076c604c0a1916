import numpy as np
import pytest

from planar.exception import InvalidArgumentError, SingularMatrixError
from planar.math.matrix import Matrix4, TransformationMatrix
from planar.math.quaternion import Quaternion
from planar.math.vector import Vector3


def move_point(point, matrix):
    # column-major storage, point is a column vector with w = 1
    m = np.reshape(matrix.values, (4, 4), order='F')
    return (m @ np.append(np.asarray(point, dtype=np.float32), 1))[0:3]


IDENTITY = [1, 0, 0, 0,
            0, 1, 0, 0,
            0, 0, 1, 0,
            0, 0, 0, 1]


def test_init_identity():
    np.testing.assert_array_equal(Matrix4().values, IDENTITY)
    assert len(Matrix4()) == 16


def test_init_wrong_size():
    with pytest.raises(InvalidArgumentError):
        Matrix4([1, 2, 3])


def test_translation_is_column_major():
    matrix = TransformationMatrix().to_translation(1, 2, 3)
    np.testing.assert_array_equal(matrix.values[12:15], [1, 2, 3])


def test_mul_order():
    translation = TransformationMatrix().to_translation(1, 0, 0)
    scale = TransformationMatrix().to_scale(2, 2, 2)

    # translation @ scale: scale first, then translate
    point = move_point([1, 1, 1], translation.mul(scale))
    np.testing.assert_array_equal(point, [3, 2, 2])


def test_inv():
    matrix = TransformationMatrix().to_translation(1, -2, 3)
    matrix.inv()

    expected = TransformationMatrix().to_translation(-1, 2, -3)
    np.testing.assert_allclose(matrix.values, expected.values, atol=1e-6)


def test_inv_singular():
    matrix = TransformationMatrix().to_scale(0, 1, 1)
    before = matrix.values.copy()

    with pytest.raises(SingularMatrixError):
        matrix.inv()
    with pytest.raises(ArithmeticError):
        Matrix4([0] * 16).inv()

    np.testing.assert_array_equal(matrix.values, before)


def test_rotation_identity():
    matrix = TransformationMatrix().to_rotation(Quaternion())
    np.testing.assert_array_equal(matrix.values, IDENTITY)


def test_rotation_quarter_turn():
    rotation = Quaternion().set_from_axis_angle(Vector3([0, 0, 1]), 90)
    point = move_point([1, 0, 0],
                       TransformationMatrix().to_rotation(rotation))

    np.testing.assert_allclose(point, [0, 1, 0], atol=1e-6)


def test_str():
    lines = str(TransformationMatrix().to_translation(1, 2, 3)).splitlines()
    assert lines[0].split() == ['1.0', '0.0', '0.0', '1.0']
