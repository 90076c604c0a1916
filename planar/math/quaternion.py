'''Quaternion module

A quaternion is the compact representation of a rotation.
Planes only need its four components to build a rotation basis.
'''
from math import cos, radians, sin

from planar.exception import InvalidArgumentError
from planar.math.vector import Vector, XMixin, YMixin, ZMixin, WMixin


class Quaternion(Vector, XMixin, YMixin, ZMixin, WMixin):
    '''Quaternion class represents a rotation.
    It has four components `x`, `y`, `z` (imaginary part) and `w`
    (real part).
    '''
    Identity = None

    def __init__(self, values=None):
        '''
        *Parameters:*

        - `values`: `list` of 4 `float` in `x, y, z, w` order
        '''
        if values is None:
            super().__init__([0, 0, 0, 1])
        elif len(values) == 4:
            super().__init__(values)
        else:
            raise InvalidArgumentError("Quaternion needs 4 components")

    def set(self, x, y, z, w):
        '''Set components of this quaternion

        *Parameters:*

        - `x`, `y`, `z`, `w`: `float`
        '''
        self._values[0] = x
        self._values[1] = y
        self._values[2] = z
        self._values[3] = w
        return self

    def to_identity(self):
        '''Set this quaternion to the identity rotation'''
        return self.set(0, 0, 0, 1)

    def set_from_axis_angle(self, axis, degrees):
        '''Set this quaternion to a rotation around `axis`

        *Parameters:*

        - `axis`: `Vector3`, doesn't need to be normalized
        - `degrees`: Angle of rotation in degrees
        '''
        length = axis.size
        if length == 0:
            return self.to_identity()

        half = radians(degrees) / 2
        s = sin(half) / length
        return self.set(axis.x * s, axis.y * s, axis.z * s, cos(half))


Quaternion.Identity = Quaternion([0, 0, 0, 1])
