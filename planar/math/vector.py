'''Vector module

This module contains the Vector classes used by planes.
A plane only reads their components, so they stay small.
'''
import numpy as np
from numpy import linalg

from planar.exception import InvalidArgumentError


class Vector():
    '''Base class for Vector

    *Exemple:*

    ```
    edge = v2 - v1 # New vector
    v1 *= 2 # Scale all components (in place)
    dot_product = v1 @ v2 # Dot product use the matmul operator
    ```

    **Note: Vector is just a wrapper around a numpy array. You can
            get directly the numpy array if you need more power**
    '''
    def __init__(self, values):
        '''
        *Parameters:*

        - `values`: `list` of `float`
        '''
        self._values = np.fromiter(values, dtype=np.float32, count=len(values))

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __getitem__(self, index):
        return self._values[index]

    def __sub__(self, value):
        return self.__class__(self._values - _raw(value))

    def __imul__(self, value):
        self._values *= _raw(value)
        return self

    def __matmul__(self, value):
        return self._values @ _raw(value)

    def __str__(self):
        return str(self._values)

    def __repr__(self):
        return '{}{}'.format(self.__class__.__name__, self._values.tolist())

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return (len(self) == len(other) and
                bool(np.all(self._values == other.values)))

    def __hash__(self):
        return hash(tuple(self._values.tolist()))

    def __copy__(self):
        return self.__class__(self._values)

    @property
    def values(self):
        return self._values

    @values.setter
    def values(self, values):
        self._values[:] = values

    @property
    def size(self):
        '''
        Return the size of vector
        '''
        return linalg.norm(self._values)


def _raw(value):
    if isinstance(value, Vector):
        return value.values
    return value


class XMixin():
    '''Mixin adding `x` property to class'''
    @property
    def x(self):
        return self._values[0]

    @x.setter
    def x(self, value):
        self._values[0] = value


class YMixin():
    '''Mixin adding `y` property to class'''
    @property
    def y(self):
        return self._values[1]

    @y.setter
    def y(self, value):
        self._values[1] = value


class ZMixin():
    '''Mixin adding `z` property to class'''
    @property
    def z(self):
        return self._values[2]

    @z.setter
    def z(self, value):
        self._values[2] = value


class WMixin():
    '''Mixin adding `w` property to class'''
    @property
    def w(self):
        return self._values[3]

    @w.setter
    def w(self, value):
        self._values[3] = value


class Vector3(Vector, XMixin, YMixin, ZMixin):
    '''Vector3 class represents a Vector in 3D space.
    It has three components `x`, `y` and `z`.
    '''
    def __init__(self, values=None):
        '''
        *Parameters:*

        - `values`: `list` of 3 `float`
        '''
        if values is None:
            super().__init__([0, 0, 0])
        elif len(values) == 3:
            super().__init__(values)
        else:
            raise InvalidArgumentError("Vector3 needs 3 components")

    def set(self, x, y, z):
        '''Set values of this vector

        *Parameters:*

        - `x`, `y`, `z`: `float`
        '''
        self._values[0] = x
        self._values[1] = y
        self._values[2] = z
        return self


class Vector4(Vector, XMixin, YMixin, ZMixin, WMixin):
    '''Vector4 class represents a homogeneous Vector in 3D space.
    It has four components `x`, `y`, `z`, `w`.
    '''
    def __init__(self, values=None):
        '''
        *Parameters:*

        - `values`: `list` of 4 `float`
        '''
        if values is None:
            super().__init__([0, 0, 0, 0])
        elif len(values) == 4:
            super().__init__(values)
        else:
            raise InvalidArgumentError("Vector4 needs 4 components")
