'''Matrix module

This module contains all class relative to Matrices.
Planes are moved in space with a transformation matrix, the same one
used for points. I recommand you to read this article to understand why
planes need the inverse-transpose of that matrix:
https://www.scratchapixel.com/lessons/mathematics-physics-for-computer-graphics/geometry/transforming-normals.html
'''
import logging

import numpy as np
from numpy import linalg

from planar.exception import InvalidArgumentError, SingularMatrixError


logger = logging.getLogger()


class Matrix():
    '''Base class for Matrix'''
    def __init__(self, values):
        '''
        *Parameters:*

        - `values`: `list` of float

        **Note: In Planar, Matrix is in column-major order**
        '''
        self._values = np.array(values, dtype=np.float32)

    def __len__(self):
        '''Return the matrix size'''
        return len(self._values)

    def __copy__(self):
        return self.__class__(self._values)

    @property
    def values(self):
        return self._values

    def set(self, matrix):
        '''Set this matrix to `matrix`

        *Parameters:*

        - `matrix`: `Matrix` to set
        '''
        return self.set2(matrix.values)

    def set2(self, values, offset=0):
        '''Set this matrix to `values` from `offset`

        *Parameters:*

        - `values`: `list` of `float`
        - `offset`: Start of the update
        '''
        self._values[offset:] = values
        return self


class Matrix4(Matrix):
    '''Matrix4 class

    Points are column vectors: a point `p` is moved to `M @ p`.
    '''

    def __init__(self, values=None):
        '''
        *Parameters:*

        - `values`: `list` of 16 `float`
        '''
        if values is None:
            super().__init__([1, 0, 0, 0,
                              0, 1, 0, 0,
                              0, 0, 1, 0,
                              0, 0, 0, 1])
        elif np.shape(values) == (16,):
            super().__init__(values)
        else:
            raise InvalidArgumentError("Matrix4 needs 16 components")

    def __str__(self):
        '''Return a beautiful readable matrix'''
        v = self._values
        return ('{} {} {} {}\n'
                '{} {} {} {}\n'
                '{} {} {} {}\n'
                '{} {} {} {}\n'.format(
                   v[0], v[4], v[8], v[12],
                   v[1], v[5], v[9], v[13],
                   v[2], v[6], v[10], v[14],
                   v[3], v[7], v[11], v[15]))

    def mul(self, matrix):
        '''Multiply this matrix by `matrix`
        The order of operation is: `this @ matrix`.

        *Parameters:*

        - `matrix`: `Matrix4`
        '''
        # Row-major views of column-major data are the transposes
        view1 = np.reshape(self._values, (4, 4))
        view2 = np.reshape(matrix.values, (4, 4))
        self._values[:] = np.matmul(view2, view1).flatten()

        return self

    def inv(self):
        '''Inverse this matrix

        Raise `SingularMatrixError` when the matrix has no inverse, this
        matrix is left untouched in that case.
        '''
        view = np.reshape(self._values, (4, 4))
        try:
            inverse = linalg.inv(view)
        except linalg.LinAlgError as e:
            msg = "Cannot invert matrix: %s" % e
            logger.error(msg)
            raise SingularMatrixError(msg) from e

        self._values[:] = inverse.flatten()
        return self

    def to_identity(self):
        '''Set this matrix to identity matrix'''
        self._values[:] = 0.
        self._values[0] = 1.
        self._values[5] = 1.
        self._values[10] = 1.
        self._values[15] = 1.

        return self


class TransformationMatrix(Matrix4):
    '''This class represents a transformation Matrix.

    It's a Matrix4 with added capabilities used to move points, and
    therefore planes, in space.
    '''
    def to_translation(self, x, y, z):
        '''
        Set this matrix to a translation matrix.
        First set it to identity and then set the 4th column to the
        translation vector.

        *Parameters:*

        - `x`: x-component of translation vector
        - `y`: y-component of translation vector
        - `z`: z-component of translation vector
        '''
        self.to_identity()
        self._values[12] = x
        self._values[13] = y
        self._values[14] = z

        return self

    def to_scale(self, x, y, z):
        '''
        Set this matrix to a scale matrix.

        *Parameters:*

        - `x`, `y`, `z`: scale factor of each axis
        '''
        self.to_identity()
        self._values[0] = x
        self._values[5] = y
        self._values[10] = z

        return self

    def to_rotation(self, rotation):
        '''
        Set this matrix to the rotation described by a unit quaternion.

        *Parameters:*

        - `rotation`: `Quaternion`
        '''
        x, y, z, w = (float(c) for c in rotation)
        x2 = x + x
        y2 = y + y
        z2 = z + z
        xx = x * x2
        xy = x * y2
        xz = x * z2
        yy = y * y2
        yz = y * z2
        zz = z * z2
        wx = w * x2
        wy = w * y2
        wz = w * z2

        self.to_identity()
        v = self._values
        v[0] = 1 - (yy + zz)
        v[1] = xy + wz
        v[2] = xz - wy
        v[4] = xy - wz
        v[5] = 1 - (xx + zz)
        v[6] = yz + wx
        v[8] = xz + wy
        v[9] = yz - wx
        v[10] = 1 - (xx + yy)

        return self
