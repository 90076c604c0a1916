from math import sqrt

import numpy as np
import pytest

from planar.exception import InvalidArgumentError
from planar.math.quaternion import Quaternion
from planar.math.vector import Vector3


def test_init_identity():
    assert Quaternion() == Quaternion([0, 0, 0, 1])
    assert Quaternion() == Quaternion.Identity


def test_init_wrong_size():
    with pytest.raises(InvalidArgumentError):
        Quaternion([0, 0, 1])


def test_components():
    q = Quaternion([1, 2, 3, 4])
    assert (q.x, q.y, q.z, q.w) == (1, 2, 3, 4)


def test_axis_angle():
    q = Quaternion().set_from_axis_angle(Vector3([0, 0, 2]), 90)

    np.testing.assert_allclose(q.values, [0, 0, sqrt(0.5), sqrt(0.5)],
                               rtol=1e-6)
    assert q.size == pytest.approx(1)


def test_axis_angle_zero_axis():
    q = Quaternion([1, 0, 0, 0]).set_from_axis_angle(Vector3(), 45)
    assert q == Quaternion.Identity
