import copy

import numpy as np
import pytest

from planar.exception import InvalidArgumentError
from planar.math.vector import Vector3, Vector4


def test_init():
    assert len(Vector3()) == 3
    assert len(Vector3([1, 2, 3])) == 3
    assert len(Vector4()) == 4
    assert Vector3().values.dtype == np.float32


def test_init_wrong_size():
    with pytest.raises(InvalidArgumentError):
        Vector3([1, 2])
    with pytest.raises(ValueError):
        Vector4([1, 2, 3])


def test_equals():
    assert Vector3([1, 2, 3]) == Vector3([1, 2, 3])
    assert Vector3([1, 2, 3]) != Vector3([1, 2, 4])
    assert Vector3([1, 2, 3]) != (1, 2, 3)
    assert Vector4([1, 2, 3, 4]) == Vector4([1, 2, 3, 4])


def test_hash():
    assert hash(Vector3([1, 2, 3])) == hash(Vector3([1, 2, 3]))
    assert len({Vector3([1, 2, 3]), Vector3([1, 2, 3])}) == 1


def test_iter():
    vector = Vector3([1, 2, 3])
    for t in zip(vector, [1, 2, 3]):
        assert t[0] == t[1]


def test_components():
    vector = Vector4([1, 2, 3, 4])
    assert (vector.x, vector.y, vector.z, vector.w) == (1, 2, 3, 4)

    vector.w = 8
    assert vector[3] == 8

    point = Vector3().set(4, 5, 6)
    assert point == Vector3([4, 5, 6])


def test_sub():
    a = Vector3([1, 2, 3])
    result = a - Vector3([3, 2, 1])

    assert result == Vector3([-2, 0, 2])
    assert isinstance(result, Vector3)
    assert a - (1, 1, 1) == Vector3([0, 1, 2])
    # operands untouched
    assert a == Vector3([1, 2, 3])


def test_inplace_mul():
    vector = Vector3([1, 2, 3])
    same = vector
    vector *= 2

    assert same is vector
    assert vector == Vector3([2, 4, 6])


def test_matmul_is_dot():
    assert Vector3([1, 2, 3]) @ Vector3([4, 5, 6]) == 32
    assert Vector3([1, 2, 3]) @ (4, 5, 6) == 32


def test_size():
    assert Vector3([0, 3, 4]).size == pytest.approx(5)


def test_copy():
    vector = Vector3([1, 2, 3])
    other = copy.copy(vector)
    other.x = 10

    assert vector.x == 1
