'''Exception module

Every error raised by planar inherits from `PlanarError`.
Each error also inherits from the matching builtin exception so callers
can catch it the usual Python way.
'''


__all__ = ['PlanarError', 'NullInputError', 'InvalidArgumentError',
           'IndexOutOfRangeError', 'SingularMatrixError']


class PlanarError(Exception):
    '''Base class of planar errors'''


class NullInputError(PlanarError, TypeError):
    '''A required argument is `None`'''


class InvalidArgumentError(PlanarError, ValueError):
    '''An argument has the wrong size'''


class IndexOutOfRangeError(InvalidArgumentError, IndexError):
    '''A component index is outside the allowed range'''


class SingularMatrixError(PlanarError, ArithmeticError):
    '''The matrix can't be inverted'''
