'''Plane module

A plane is stored in normal form: a `normal` vector and a `distance` so
that `normal @ p + distance == 0` for every point `p` of the plane.

Most operations come in two flavors:

- a method which mutates the plane and returns it for chaining,
- a function which leaves its argument untouched and returns a new plane,
  or fills `out` when it's given.

Transformations and `dot_coordinate` expect a normalized plane. Nothing
checks it, a non unit normal just gives a scaled result.
'''
import locale
import logging
import numbers

import numpy as np

from planar.exception import IndexOutOfRangeError, InvalidArgumentError, \
    NullInputError
from planar.math.matrix import Matrix4
from planar.math.vector import Vector3, Vector4


logger = logging.getLogger()


class Plane():
    '''Plane in 3D space'''
    OnPlane = 1
    Back = 2
    Front = 3

    # numpy scalars on the left must defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, normal=None, distance=0):
        '''
        *Parameters:*

        - `normal`: `Vector3` or 3 `float`, copied, not normalized
        - `distance`: Distance of the plane along its normal from the origin
        '''
        self.normal = Vector3(normal)
        self.distance = distance

    @classmethod
    def from_coefficients(cls, a, b, c, d):
        '''Create the plane `a*x + b*y + c*z + d = 0`'''
        return cls().set(a, b, c, d)

    @classmethod
    def filled(cls, value):
        '''Create a plane with `value` in its four coefficients'''
        return cls().set(value, value, value, value)

    @classmethod
    def from_points(cls, p1, p2, p3):
        '''Create the normalized plane passing through three points

        See `set_from_points`.
        '''
        return cls().set_from_points(p1, p2, p3)

    @classmethod
    def from_values(cls, values):
        '''Create a plane from a `list` of 4 `float`

        See `set_from_values`.
        '''
        return cls().set_from_values(values)

    @property
    def distance(self):
        return self._distance

    @distance.setter
    def distance(self, value):
        self._distance = np.float32(value)

    @property
    def values(self):
        '''Coefficients `[a, b, c, d]` in a new numpy array'''
        return self.to_array()

    def set(self, a, b, c, d):
        '''Set the four coefficients of this plane

        *Parameters:*

        - `a`, `b`, `c`: Components of the normal
        - `d`: Distance
        '''
        self.normal.set(a, b, c)
        self.distance = d
        return self

    def set2(self, plane):
        '''Set this plane to `plane`

        *Parameters:*

        - `plane`: `Plane`
        '''
        return self.set(plane.normal.x, plane.normal.y, plane.normal.z,
                        plane.distance)

    def set_from_points(self, p1, p2, p3):
        '''Set this plane to the one passing through three points

        The normal is `(p2 - p1) x (p3 - p1)`, normalized, so the points
        are seen counter-clockwise from the front of the plane.
        Collinear points have no plane: the result is full of NaN.

        *Parameters:*

        - `p1`, `p2`, `p3`: `Vector3`
        '''
        p1 = _as_vector3(p1)
        e1 = _as_vector3(p2) - p1
        e2 = _as_vector3(p3) - p1
        x1, y1, z1 = e1
        x2, y2, z2 = e2
        yz = y1 * z2 - z1 * y2
        xz = z1 * x2 - x1 * z2
        xy = x1 * y2 - y1 * x2
        inv_length = np.float32(1) / np.sqrt(yz * yz + xz * xz + xy * xy)

        self.normal.set(yz * inv_length, xz * inv_length, xy * inv_length)
        self.distance = -(self.normal @ p1)
        return self

    def set_from_values(self, values):
        '''Set this plane from a `list` of 4 `float`

        *Parameters:*

        - `values`: `[a, b, c, d]`
        '''
        if values is None:
            msg = "Plane values are required"
            logger.error(msg)
            raise NullInputError(msg)
        if len(values) != 4:
            msg = ("There must be four and only four input values for "
                   "Plane, got %d" % len(values))
            logger.error(msg)
            raise InvalidArgumentError(msg)

        return self.set(*values)

    def __getitem__(self, index):
        _check_index(index)
        if index == 3:
            return self.distance
        return self.normal.values[index]

    def __setitem__(self, index, value):
        _check_index(index)
        if index == 3:
            self.distance = value
        else:
            self.normal.values[index] = value

    def __iter__(self):
        yield from self.normal
        yield self.distance

    def __len__(self):
        return 4

    def to_array(self):
        '''Return the coefficients `[a, b, c, d]` as a numpy array'''
        return np.array(list(self), dtype=np.float32)

    def normalize(self):
        '''Make the normal unit length and scale the distance with it

        The plane stays geometrically the same. A zero normal gives NaN.
        '''
        n = self.normal.values
        magnitude = np.float32(1) / np.sqrt(n[0] * n[0] + n[1] * n[1] +
                                            n[2] * n[2])
        return self.mul(magnitude)

    def mul(self, scale):
        '''Multiply the four coefficients by `scale`

        *Parameters:*

        - `scale`: `float`
        '''
        self.normal *= scale
        self.distance = self.distance * scale
        return self

    def dot(self, vector):
        '''Return the 4D dot product with an homogeneous `Vector4`'''
        v = _as_vector4(vector)
        n = self.normal
        return n.x * v.x + n.y * v.y + n.z * v.z + self.distance * v.w

    def dot_coordinate(self, point):
        '''Return `normal @ point + distance`

        It's the signed distance of `point` when the plane is normalized.
        '''
        p = _as_vector3(point)
        n = self.normal
        return n.x * p.x + n.y * p.y + n.z * p.z + self.distance

    def dot_coordinates(self, points, out=None):
        '''`dot_coordinate` for a whole array of points

        *Parameters:*

        - `points`: array-like of shape `(N, 3)`
        - `out`: Optional array of shape `(N,)` filled with the result
        '''
        points = np.asarray(points, dtype=np.float32)
        result = points @ self.normal.values + self.distance
        if out is None:
            return result
        out[:] = result
        return out

    def dot_normal(self, direction):
        '''Return `normal @ direction`, the distance is ignored'''
        d = _as_vector3(direction)
        n = self.normal
        return n.x * d.x + n.y * d.y + n.z * d.z

    def classify(self, point, epsilon=0.):
        '''Return on which side of the plane is `point`

        *Parameters:*

        - `point`: `Vector3`
        - `epsilon`: Tolerance of `Plane.OnPlane`

        *Returns:*

        `Plane.Front`, `Plane.Back` or `Plane.OnPlane`
        '''
        dist = self.dot_coordinate(point)
        if dist > epsilon:
            return Plane.Front
        if dist < -epsilon:
            return Plane.Back
        return Plane.OnPlane

    def rotate(self, rotation):
        '''Rotate this normalized plane around the origin

        The distance doesn't change since a rotation has no translation.

        *Parameters:*

        - `rotation`: Unit `Quaternion`
        '''
        _apply_basis(self, _rotation_basis(rotation))
        return self

    def transform(self, matrix):
        '''Transform this normalized plane by `matrix`

        Raise `SingularMatrixError` if `matrix` can't be inverted.

        *Parameters:*

        - `matrix`: `Matrix4` transforming points, not modified
        '''
        _apply_rows(self, _inverse_rows(matrix))
        return self

    def __mul__(self, scale):
        if not isinstance(scale, numbers.Real):
            return NotImplemented
        return multiply(self, scale)

    def __rmul__(self, scale):
        return self.__mul__(scale)

    def __imul__(self, scale):
        if not isinstance(scale, numbers.Real):
            return NotImplemented
        return self.mul(scale)

    def __eq__(self, other):
        if not isinstance(other, Plane):
            return NotImplemented
        return bool(self.normal == other.normal and
                    self.distance == other.distance)

    def __hash__(self):
        return hash(self.normal) + hash(float(self.distance))

    def __copy__(self):
        return self.__class__(self.normal, self.distance)

    def __repr__(self):
        return 'Plane[a={}, b={}, c={}, d={}]'.format(*self)

    def __str__(self):
        return 'A:{} B:{} C:{} D:{}'.format(*self)

    def __format__(self, spec):
        if not spec:
            return str(self)
        return 'A:{0} B:{1} C:{2} D:{3}'.format(
            *(format(c, spec) for c in self))

    def to_string(self, fmt=None, loc=None):
        '''Return the coefficients formatted for a locale

        **Note: The process locale is switched during the call, it's not
                thread safe**

        *Parameters:*

        - `fmt`: printf-like numeric format without `%` (ex: `.3f`),
                 default is `g`
        - `loc`: Locale name (ex: `fr_FR.UTF-8`), default is the current
                 one
        '''
        pattern = '%' + (fmt or 'g')
        previous = locale.setlocale(locale.LC_NUMERIC)
        try:
            if loc is not None:
                locale.setlocale(locale.LC_NUMERIC, loc)
            return 'A:{0} B:{1} C:{2} D:{3}'.format(
                *(locale.format_string(pattern, float(c), grouping=True)
                  for c in self))
        finally:
            locale.setlocale(locale.LC_NUMERIC, previous)


def normalize(plane, out=None):
    '''Return `plane` normalized

    *Parameters:*

    - `plane`: Source `Plane`, not modified
    - `out`: Optional `Plane` receiving the result
    '''
    return _target(out).set2(plane).normalize()


def multiply(plane, scale, out=None):
    '''Return `plane` scaled by `scale`'''
    return _target(out).set2(plane).mul(scale)


def dot(plane, vector):
    '''See `Plane.dot`'''
    return plane.dot(vector)


def dot_coordinate(plane, point):
    '''See `Plane.dot_coordinate`'''
    return plane.dot_coordinate(point)


def dot_normal(plane, direction):
    '''See `Plane.dot_normal`'''
    return plane.dot_normal(direction)


def rotate(plane, rotation, out=None):
    '''Return the normalized `plane` rotated by `rotation`

    *Parameters:*

    - `plane`: Source `Plane`, not modified
    - `rotation`: Unit `Quaternion`
    - `out`: Optional `Plane` receiving the result
    '''
    return _target(out).set2(plane).rotate(rotation)


def transform(plane, matrix, out=None):
    '''Return the normalized `plane` transformed by `matrix`

    *Parameters:*

    - `plane`: Source `Plane`, not modified
    - `matrix`: `Matrix4` transforming points
    - `out`: Optional `Plane` receiving the result
    '''
    return _target(out).set2(plane).transform(matrix)


def rotate_all(planes, rotation):
    '''Rotate every plane of `planes` in place

    *Parameters:*

    - `planes`: `list` of normalized `Plane`
    - `rotation`: Unit `Quaternion`
    '''
    _check_planes(planes)
    logger.debug("Rotating %d planes", len(planes))

    basis = _rotation_basis(rotation)
    for plane in planes:
        _apply_basis(plane, basis)


def transform_all(planes, matrix):
    '''Transform every plane of `planes` in place

    The matrix is inverted only once.

    *Parameters:*

    - `planes`: `list` of normalized `Plane`
    - `matrix`: `Matrix4` transforming points
    '''
    _check_planes(planes)
    logger.debug("Transforming %d planes", len(planes))

    rows = _inverse_rows(matrix)
    for plane in planes:
        _apply_rows(plane, rows)


def _target(out):
    if out is None:
        return Plane()
    return out


def _as_vector3(value):
    if isinstance(value, Vector3):
        return value
    return Vector3(value)


def _as_vector4(value):
    if isinstance(value, Vector4):
        return value
    return Vector4(value)


def _check_index(index):
    if not isinstance(index, numbers.Integral) or not 0 <= index <= 3:
        msg = ("Indices for Plane run from 0 to 3, inclusive, got %r" %
               (index,))
        logger.error(msg)
        raise IndexOutOfRangeError(msg)


def _check_planes(planes):
    if planes is None:
        msg = "Planes are required"
        logger.error(msg)
        raise NullInputError(msg)


def _rotation_basis(rotation):
    '''Return the rows of the 3x3 rotation matrix of `rotation`'''
    x2 = rotation.x + rotation.x
    y2 = rotation.y + rotation.y
    z2 = rotation.z + rotation.z
    wx = rotation.w * x2
    wy = rotation.w * y2
    wz = rotation.w * z2
    xx = rotation.x * x2
    xy = rotation.x * y2
    xz = rotation.x * z2
    yy = rotation.y * y2
    yz = rotation.y * z2
    zz = rotation.z * z2

    return ((1 - yy - zz, xy - wz, xz + wy),
            (xy + wz, 1 - xx - zz, yz - wx),
            (xz - wy, yz + wx, 1 - xx - yy))


def _apply_basis(plane, basis):
    x, y, z = plane.normal
    plane.normal.set(*(r[0] * x + r[1] * y + r[2] * z for r in basis))


def _inverse_rows(matrix):
    '''Return the inverse of `matrix` as 4 rows of its storage

    Matrices are column-major, so the storage rows of the inverse are the
    columns of the mathematical inverse: dotting a plane against them
    applies the inverse-transpose.
    '''
    inverse = Matrix4().set(matrix).inv()
    return np.reshape(inverse.values, (4, 4))


def _apply_rows(plane, rows):
    plane.set(*(rows @ plane.to_array()))
