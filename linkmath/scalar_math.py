# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
This module provides the scalar routines that the vector, quaternion, and interpolation code in :mod:`linkmath` is
built on.

Description
-----------

Everything here is a pure function of its inputs.  Unless otherwise noted the routines are vectorized, meaning that
you can pass a python float or any array like object and the operation is applied element by element.  Scalar inputs
produce a numpy float64 scalar (which is a subclass of ``float``) while array inputs produce a numpy array of the
broadcast shape.

Floating point edge cases follow IEEE-754 rather than python's exception based behavior.  Dividing by zero yields
an infinity, ``0/0`` yields NaN, and these propagate through later arithmetic.  Nothing in this module raises for a
degenerate numeric input and nothing emits a numpy ``RuntimeWarning`` either; all operations that can leave their
domain are evaluated inside of :func:`numpy.errstate`.

Angles
------

Angles are in radians unless the function name says otherwise.  There are two families of angle reduction:

* :func:`wrap_angle` reduces to :math:`(-\pi, \pi]`
* :func:`normalize_angle_in_radians` and :func:`normalize_angle_in_degrees` reduce to :math:`[0, 2\pi)` and
  :math:`[0, 360)` respectively.

The shortest signed difference between two angles is given by :func:`delta_angle_in_degrees` and
:func:`delta_angle_in_radians`, which always land in :math:`(-\text{period}/2, \text{period}/2]`.

Epsilon
-------

:data:`EPSILON` is the smallest positive double the host can actually represent.  It is resolved exactly once, when
this module is imported, by checking whether the host flushes subnormal doubles to zero.  If it does,
:data:`EPSILON` is the smallest normal double, otherwise it is the smallest subnormal double.  It is never
recomputed.
"""

import logging

from typing import Sequence

import numpy as np

from linkmath._typing import SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY


__all__ = ['EPSILON', 'PI', 'PI_HALF', 'PI_OVER_4', 'TWO_PI', 'TAU', 'DEG_TO_RAD', 'RAD_TO_DEG',
           'DEG_360_IN_RAD', 'DEG_180_IN_RAD', 'DEG_90_IN_RAD', 'DEG_45_IN_RAD', 'DEG_30_IN_RAD', 'DEG_15_IN_RAD',
           'LOG10E', 'LOG2E', 'SMOOTH_TIME_FLOOR',
           'ieee_divide', 'inverse_sqrt_fast', 'to_radians', 'to_degrees', 'wrap_angle',
           'normalize_angle_in_degrees', 'normalize_angle_in_radians', 'repeat', 'ping_pong',
           'delta_angle_in_degrees', 'delta_angle_in_radians', 'copy_sign', 'sign', 'clamp', 'clamp01',
           'approximately', 'barycentric', 'distance', 'is_power_of_two', 'min_of', 'max_of', 'gamma',
           'smooth_damp', 'smooth_damp_angle', 'line_intersection', 'line_segment_intersection']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


PI: float = np.pi
PI_HALF: float = np.pi * 0.5
PI_OVER_4: float = np.pi * 0.25
TWO_PI: float = np.pi * 2.0
TAU: float = TWO_PI
"""
An alias of :data:`TWO_PI`
"""

DEG_360_IN_RAD: float = TWO_PI
DEG_180_IN_RAD: float = PI
DEG_90_IN_RAD: float = PI_HALF
DEG_45_IN_RAD: float = PI_OVER_4
DEG_30_IN_RAD: float = np.pi / 6.0
DEG_15_IN_RAD: float = np.pi / 12.0

DEG_TO_RAD: float = 0.017453292519943295769236907684886
"""
The factor pi/180 used to convert degrees to radians
"""

RAD_TO_DEG: float = 57.295779513082320876798154814105
"""
The factor 180/pi used to convert radians to degrees
"""

LOG10E: float = 0.4342944819032518
LOG2E: float = 1.4426950408889634

SMOOTH_TIME_FLOOR: float = 1e-4
"""
The smallest smooth time :func:`smooth_damp` will use.  Anything smaller (including 0) is raised to this value.
"""

_INVERSE_SQRT_MAGIC = np.int32(0x5f3759df)

_SIGN_BIT = np.int64(np.iinfo(np.int64).min)


def _resolve_epsilon() -> float:
    """
    Probes the host for flush-to-zero behavior and returns the smallest double that survives it.

    :return: the smallest normal double if subnormals are flushed to zero, otherwise the smallest subnormal double
    """

    finfo = np.finfo(np.float64)

    smallest_subnormal = np.array(finfo.smallest_subnormal, dtype=np.float64)
    flush_to_zero = bool(smallest_subnormal == 0.0)

    epsilon = float(finfo.smallest_normal) if flush_to_zero else float(finfo.smallest_subnormal)

    _LOGGER.debug(f'Resolved EPSILON to {epsilon!r} (flush to zero detected: {flush_to_zero})')

    return epsilon


EPSILON: float = _resolve_epsilon()
"""
A tiny positive floating point value.  This is read only for the lifetime of the process.
"""


def ieee_divide(numerator: SCALAR_OR_ARRAY, denominator: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Divides following IEEE-754 semantics instead of raising :exc:`ZeroDivisionError`.

    ``x/0`` gives a signed infinity and ``0/0`` gives NaN.  No warning is emitted.

    :param numerator: the value(s) to divide
    :param denominator: the value(s) to divide by
    :return: the quotient(s)
    """

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return np.divide(numerator, denominator)


def inverse_sqrt_fast(value: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    r"""
    Approximates :math:`1/\sqrt{x}` using the classic bit level trick on the single precision representation.

    The value is cast to single precision, its bit pattern is reinterpreted as an integer and subtracted from a magic
    constant to produce a first guess, and one Newton-Raphson step refines the guess:

    .. math::
        y_1 = y_0\left(\frac{3}{2} - \frac{x}{2}y_0^2\right)

    .. warning::
        This trades precision for speed.  The relative error is on the order of 0.2% and the result will not be bit
        identical to ``1/np.sqrt(value)``.  Use it only where an approximate length is acceptable.

    :param value: the value(s) to compute the reciprocal square root of
    :return: the approximate reciprocal square root(s)
    """

    shape = np.shape(value)

    x = np.array(value, dtype=np.float32, ndmin=1)

    bits = _INVERSE_SQRT_MAGIC - np.right_shift(x.view(np.int32), 1)

    y = bits.view(np.float32)

    with np.errstate(over='ignore', invalid='ignore'):
        y = y * (np.float32(1.5) - np.float32(0.5) * x * y * y)

    return y.astype(np.float64).reshape(shape)[()]


def to_radians(degrees: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Converts degrees to radians using the :data:`DEG_TO_RAD` factor.

    :param degrees: the angle(s) in degrees
    :return: the angle(s) in radians
    """

    return np.multiply(degrees, DEG_TO_RAD)


def to_degrees(radians: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Converts radians to degrees using the :data:`RAD_TO_DEG` factor.

    :param radians: the angle(s) in radians
    :return: the angle(s) in degrees
    """

    return np.multiply(radians, RAD_TO_DEG)


def wrap_angle(angle: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    r"""
    Reduces an angle in radians to the half open interval :math:`(-\pi, \pi]`.

    Angles already in range are returned untouched.  Anything else is reduced modulo :math:`2\pi` (keeping the sign of
    the input, like C's ``fmod``) and then shifted by one full turn if it still sits outside of the interval.  This
    means that :math:`-\pi` maps to :math:`\pi`.

    :param angle: the angle(s) to wrap in radians
    :return: the wrapped angle(s) in radians
    """

    angle = np.asarray(angle, dtype=np.float64)

    in_range = (angle > -PI) & (angle <= PI)

    with np.errstate(invalid='ignore'):
        reduced = np.fmod(angle, TWO_PI)

    reduced = np.where(reduced <= -PI, reduced + TWO_PI, np.where(reduced > PI, reduced - TWO_PI, reduced))

    return np.where(in_range, angle, reduced)[()]


def normalize_angle_in_degrees(angle: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Reduces an angle in degrees to [0, 360).

    :param angle: the angle(s) in degrees
    :return: the normalized angle(s) in degrees
    """

    with np.errstate(invalid='ignore'):
        mod_angle = np.fmod(angle, 360.0)

    return np.where(mod_angle < 0.0, mod_angle + 360.0, mod_angle)[()]


def normalize_angle_in_radians(angle: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    r"""
    Reduces an angle in radians to :math:`[0, 2\pi)`.

    :param angle: the angle(s) in radians
    :return: the normalized angle(s) in radians
    """

    with np.errstate(invalid='ignore'):
        mod_angle = np.fmod(angle, DEG_360_IN_RAD)

    return np.where(mod_angle < 0.0, mod_angle + DEG_360_IN_RAD, mod_angle)[()]


def repeat(value: SCALAR_OR_ARRAY, length: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Loops the value so that it is never larger than length and never smaller than 0.

    This is computed as ``clamp(value - floor(value/length)*length, 0, length)`` so the result always lies in the closed
    interval ``[0, length]``.  A zero length produces NaN.

    :param value: the value(s) to loop
    :param length: the loop length(s)
    :return: the looped value(s)
    """

    with np.errstate(divide='ignore', invalid='ignore'):
        looped = np.subtract(value, np.floor(np.divide(value, length)) * length)

    return np.clip(looped, 0.0, length)


def ping_pong(value: SCALAR_OR_ARRAY, length: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    A triangle wave that increments from 0 up to length and back down to 0 as value increases.

    :param value: the value(s) to fold
    :param length: the peak(s) of the triangle wave
    :return: the folded value(s) in ``[0, length]``
    """

    looped = repeat(value, np.multiply(length, 2.0))

    return np.subtract(length, np.abs(looped - length))


def delta_angle_in_degrees(current: SCALAR_OR_ARRAY, target: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Calculates the shortest signed difference from current to target, both in degrees.

    The result is in (-180, 180].  For instance ``delta_angle_in_degrees(350, 10)`` is 20 and
    ``delta_angle_in_degrees(0, 370)`` is 10.

    :param current: the angle(s) to start from
    :param target: the angle(s) to reach
    :return: the signed difference(s) in degrees
    """

    delta = repeat(np.subtract(target, current), 360.0)

    return np.where(delta > 180.0, delta - 360.0, delta)[()]


def delta_angle_in_radians(current: SCALAR_OR_ARRAY, target: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    r"""
    Calculates the shortest signed difference from current to target, both in radians.

    The result is in :math:`(-\pi, \pi]`.

    :param current: the angle(s) to start from
    :param target: the angle(s) to reach
    :return: the signed difference(s) in radians
    """

    delta = repeat(np.subtract(target, current), DEG_360_IN_RAD)

    return np.where(delta > DEG_180_IN_RAD, delta - DEG_360_IN_RAD, delta)[()]


def copy_sign(x: SCALAR_OR_ARRAY, y: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Returns x with the sign bit of y.

    This works directly on the raw IEEE-754 bit patterns so that it is correct for every input, including NaN and
    signed zeros.  Comparison based implementations (``y < 0``) get ``-0.0`` and negative NaNs wrong.

    :param x: the magnitude(s)
    :param y: the value(s) to take the sign bit from
    :return: x with the sign of y
    """

    shape = np.broadcast_shapes(np.shape(x), np.shape(y))

    x_values, y_values = np.broadcast_arrays(np.array(x, dtype=np.float64, ndmin=1),
                                             np.array(y, dtype=np.float64, ndmin=1))

    x_bits = x_values.view(np.int64)
    y_bits = y_values.view(np.int64)

    # a negative xor means the sign bits differ
    result = np.where((x_bits ^ y_bits) < 0, x_bits ^ _SIGN_BIT, x_bits)

    return result.view(np.float64).reshape(shape)[()]


def sign(value: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Returns 1 for values greater than or equal to 0 and -1 otherwise.

    Unlike :func:`numpy.sign` this never returns 0.  NaN gives -1.

    :param value: the value(s) to take the sign of
    :return: the sign(s)
    """

    return np.where(np.greater_equal(value, 0.0), 1.0, -1.0)[()]


def clamp(value: SCALAR_OR_ARRAY, minimum: SCALAR_OR_ARRAY, maximum: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Clamps value to ``[minimum, maximum]``.

    :param value: the value(s) to clamp
    :param minimum: the lower bound(s)
    :param maximum: the upper bound(s)
    :return: the clamped value(s)
    """

    return np.clip(value, minimum, maximum)


def clamp01(value: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Clamps value to ``[0, 1]``.  NaN passes through.

    :param value: the value(s) to clamp
    :return: the clamped value(s)
    """

    return np.clip(value, 0.0, 1.0)


def approximately(a: SCALAR_OR_ARRAY, b: SCALAR_OR_ARRAY) -> bool | np.ndarray:
    r"""
    Compares two floating point values and returns True if they are similar.

    The tolerance is relative for large magnitudes and absolute near zero:

    .. math::
        |b - a| < \max\left(10^{-6}\max(|a|, |b|), 8\epsilon\right)

    where :math:`\epsilon` is :data:`EPSILON`.  This is the tolerance based comparison; the ``==`` operator on the
    vector and quaternion types is always exact.

    :param a: the first value(s)
    :param b: the second value(s)
    :return: whether the values are approximately equal
    """

    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    with np.errstate(invalid='ignore'):
        tolerance = np.maximum(1e-6 * np.maximum(np.abs(a), np.abs(b)), EPSILON * 8.0)

        return (np.abs(b - a) < tolerance)[()]


def barycentric(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, value3: SCALAR_OR_ARRAY,
                amount1: SCALAR_OR_ARRAY, amount2: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Returns the coordinate along one axis of a point given by a triangle and two normalized barycentric coordinates.

    :param value1: the coordinate of vertex 1
    :param value2: the coordinate of vertex 2
    :param value3: the coordinate of vertex 3
    :param amount1: the weight for vertex 2
    :param amount2: the weight for vertex 3
    :return: the cartesian coordinate of the point
    """

    value1 = np.asarray(value1, dtype=np.float64)

    return (value1 + (np.subtract(value2, value1)) * amount1 + (np.subtract(value3, value1)) * amount2)[()]


def distance(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Returns the absolute difference between two values.
    """

    return np.abs(np.subtract(value1, value2))


def is_power_of_two(value: int) -> bool:
    """
    Determines whether an integer is a positive power of two.
    """

    return value > 0 and (value & (value - 1)) == 0


def min_of(*values: float) -> float:
    """
    Returns the smallest of the supplied values.

    The values are scanned in order and a value only replaces the running minimum if it compares strictly less,
    so a leading NaN is returned as is.  Calling this with no values returns 0 by convention rather than raising.

    :param values: the values to compare
    :return: the smallest value or 0 if there were none
    """

    if not values:
        return 0.0

    result = values[0]

    for value in values[1:]:
        if value < result:
            result = value

    return result


def max_of(*values: float) -> float:
    """
    Returns the largest of the supplied values.

    See :func:`min_of` for the scan order.  Calling this with no values returns 0.

    :param values: the values to compare
    :return: the largest value or 0 if there were none
    """

    if not values:
        return 0.0

    result = values[0]

    for value in values[1:]:
        if value > result:
            result = value

    return result


def gamma(value: SCALAR_OR_ARRAY, absmax: SCALAR_OR_ARRAY, exponent: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Applies a gamma curve to the magnitude of value inside of ``[-absmax, absmax]``, keeping the sign.

    Magnitudes beyond absmax are returned unchanged.

    :param value: the value(s) to apply the curve to
    :param absmax: the magnitude that maps onto itself
    :param exponent: the gamma exponent
    :return: the curved value(s)
    """

    value = np.asarray(value, dtype=np.float64)

    magnitude = np.abs(value)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        curved = np.power(magnitude / absmax, exponent) * absmax

    result = np.where(magnitude > absmax, magnitude, curved)

    return np.where(value < 0.0, -result, result)[()]


def smooth_damp(current: SCALAR_OR_ARRAY, target: SCALAR_OR_ARRAY, current_velocity: SCALAR_OR_ARRAY,
                smooth_time: SCALAR_OR_ARRAY, delta_time: SCALAR_OR_ARRAY,
                max_speed: SCALAR_OR_ARRAY = np.inf) -> tuple[F_SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY]:
    r"""
    Gradually moves a value towards a target using a critically damped spring approximation.

    The spring stiffness is :math:`\omega = 2/t_s` where :math:`t_s` is the smooth time (roughly the time it takes to
    reach the target).  Instead of evaluating :math:`e^{-\omega\Delta t}` the decay is approximated by the rational
    polynomial

    .. math::
        d = \frac{1}{1 + x + 0.48x^2 + 0.235x^3},\qquad x = \omega\Delta t

    The distance covered is limited to ``max_speed*smooth_time`` before integrating, and if the integrated position
    would end up past the target (on the other side compared to where we started) the output snaps to the target
    and the velocity is recomputed from the snapped output so that it is 0.

    The smooth time is floored to :data:`SMOOTH_TIME_FLOOR` so that 0 does not cause a division by zero.

    Since python does not have reference parameters, the updated velocity is returned alongside the new value and
    should be fed back in on the next call::

        >>> from linkmath.scalar_math import smooth_damp
        >>> value, velocity = 0.0, 0.0
        >>> for _ in range(3):
        ...     value, velocity = smooth_damp(value, 10.0, velocity, 0.3, 1/60)

    See :class:`.SmoothDamper` for a class that keeps track of the velocity for you.

    :param current: the current value(s)
    :param target: the value(s) we are trying to reach
    :param current_velocity: the current velocity (from the previous call)
    :param smooth_time: approximately the time it will take to reach the target
    :param delta_time: the time since the last call
    :param max_speed: the maximum speed to move at
    :return: the new value(s) and the new velocity(ies)
    """

    current = np.asarray(current, dtype=np.float64)
    target = np.asarray(target, dtype=np.float64)
    current_velocity = np.asarray(current_velocity, dtype=np.float64)

    smooth_time = np.maximum(SMOOTH_TIME_FLOOR, smooth_time)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        omega = 2.0 / smooth_time

        x = omega * delta_time
        decay = 1.0 / (1.0 + x + 0.48 * x * x + 0.235 * x * x * x)

        original_target = target

        max_change = max_speed * smooth_time
        change = np.clip(current - target, -max_change, max_change)

        target = current - change

        temp = (current_velocity + omega * change) * delta_time

        new_velocity = (current_velocity - omega * temp) * decay

        output = target + (change + temp) * decay

        # moving up and ending above the target or moving down and ending at/below it is an overshoot
        overshot = (original_target - current > 0.0) == (output > original_target)

        output = np.where(overshot, original_target, output)
        new_velocity = np.where(overshot, np.divide(output - original_target, delta_time), new_velocity)

    return output[()], new_velocity[()]


def smooth_damp_angle(current: SCALAR_OR_ARRAY, target: SCALAR_OR_ARRAY, current_velocity: SCALAR_OR_ARRAY,
                      smooth_time: SCALAR_OR_ARRAY, delta_time: SCALAR_OR_ARRAY,
                      max_speed: SCALAR_OR_ARRAY = np.inf) -> tuple[F_SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY]:
    """
    Like :func:`smooth_damp` but for angles in degrees.

    The target is first resolved to ``current + delta_angle_in_degrees(current, target)`` so the spring always takes
    the short way around instead of unwinding through the 0/360 boundary.

    :param current: the current angle(s) in degrees
    :param target: the angle(s) we are trying to reach in degrees
    :param current_velocity: the current angular velocity (from the previous call)
    :param smooth_time: approximately the time it will take to reach the target
    :param delta_time: the time since the last call
    :param max_speed: the maximum angular speed to move at
    :return: the new angle(s) and the new angular velocity(ies)
    """

    target = np.add(current, delta_angle_in_degrees(current, target))

    return smooth_damp(current, target, current_velocity, smooth_time, delta_time, max_speed=max_speed)


def line_intersection(point1: Sequence[float], point2: Sequence[float],
                      point3: Sequence[float], point4: Sequence[float]) -> tuple[float, float] | None:
    """
    Finds where the infinite line through point1 and point2 crosses the infinite line through point3 and point4.

    The intersection parameter is found with the 2x2 determinant (2D cross product) of the line directions.  If the
    determinant is exactly 0 the lines are parallel (or coincident) and ``None`` is returned.

    The points can be anything that unpacks into 2 values, including :class:`.Vector2` instances.

    :param point1: the first point on the first line
    :param point2: the second point on the first line
    :param point3: the first point on the second line
    :param point4: the second point on the second line
    :return: the ``(x, y)`` intersection or ``None`` if the lines are parallel
    """

    x1, y1 = point1
    x2, y2 = point2
    x3, y3 = point3
    x4, y4 = point4

    dx1 = x2 - x1
    dy1 = y2 - y1
    dx2 = x4 - x3
    dy2 = y4 - y3

    determinant = dx1 * dy2 - dy1 * dx2

    if determinant == 0:
        return None

    offset_x = x3 - x1
    offset_y = y3 - y1

    along_first = (offset_x * dy2 - offset_y * dx2) / determinant

    return x1 + along_first * dx1, y1 + along_first * dy1


def line_segment_intersection(point1: Sequence[float], point2: Sequence[float],
                              point3: Sequence[float], point4: Sequence[float]) -> tuple[float, float] | None:
    """
    Finds where the segment from point1 to point2 crosses the segment from point3 to point4.

    This is :func:`line_intersection` with the additional requirement that the intersection parameter on each segment
    lies in ``[0, 1]``.

    :param point1: the start of the first segment
    :param point2: the end of the first segment
    :param point3: the start of the second segment
    :param point4: the end of the second segment
    :return: the ``(x, y)`` intersection or ``None`` if the segments are parallel or do not touch
    """

    x1, y1 = point1
    x2, y2 = point2
    x3, y3 = point3
    x4, y4 = point4

    dx1 = x2 - x1
    dy1 = y2 - y1
    dx2 = x4 - x3
    dy2 = y4 - y3

    determinant = dx1 * dy2 - dy1 * dx2

    if determinant == 0:
        return None

    offset_x = x3 - x1
    offset_y = y3 - y1

    along_first = (offset_x * dy2 - offset_y * dx2) / determinant

    if along_first < 0 or along_first > 1:
        return None

    along_second = (offset_x * dy1 - offset_y * dx1) / determinant

    if along_second < 0 or along_second > 1:
        return None

    return x1 + along_first * dx1, y1 + along_first * dy1
