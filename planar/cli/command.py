'''Commands of the planar CLI

Each command receives the `CliConfiguration` and the raw text arguments
and returns the text to print.
'''
import logging

from planar.exception import InvalidArgumentError
from planar.math.matrix import TransformationMatrix
from planar.math.plane import Plane
from planar.math.quaternion import Quaternion
from planar.math.vector import Vector3


logger = logging.getLogger()

SIDES = {
    Plane.Front: 'front',
    Plane.Back: 'back',
    Plane.OnPlane: 'on-plane'
}


def parse_floats(text):
    '''Convert `"1,2,3"` to `[1.0, 2.0, 3.0]`'''
    try:
        return [float(v) for v in text.split(',')]
    except ValueError:
        raise InvalidArgumentError("Not a list of numbers: %s" % text)


def parse_plane(configuration, text):
    plane = Plane.from_values(parse_floats(text))
    if configuration.normalize:
        plane.normalize()
    logger.debug("Input plane: %r", plane)
    return plane


def points(configuration, p1, p2, p3):
    plane = Plane.from_points(Vector3(parse_floats(p1)),
                              Vector3(parse_floats(p2)),
                              Vector3(parse_floats(p3)))
    return format(plane, configuration.format)


def classify(configuration, plane, point):
    plane = parse_plane(configuration, plane)
    side = plane.classify(Vector3(parse_floats(point)),
                          configuration.epsilon)
    return SIDES[side]


def rotate(configuration, plane, axis, angle):
    plane = parse_plane(configuration, plane)
    try:
        degrees = float(angle)
    except ValueError:
        raise InvalidArgumentError("Angle must be a number, got %s" % angle)

    rotation = Quaternion().set_from_axis_angle(
        Vector3(parse_floats(axis)), degrees)
    return format(plane.rotate(rotation), configuration.format)


def translate(configuration, plane, offset):
    plane = parse_plane(configuration, plane)
    matrix = TransformationMatrix().to_translation(*Vector3(
        parse_floats(offset)))
    return format(plane.transform(matrix), configuration.format)
