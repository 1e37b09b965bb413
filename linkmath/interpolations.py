# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
This module provides scalar blending functions used to interpolate between 2 (or 4 for splines) values.

Description
-----------

Each function takes the values to blend and an ``amount`` which is usually in :math:`[0, 1]`, where 0 returns the
first value and 1 returns the second.  The plain functions extrapolate when the amount is outside of this range while
the ``clamped_`` variants clamp the amount to :math:`[0, 1]` first.

Like :mod:`.scalar_math`, every function here is vectorized, so vectors can be interpolated by passing arrays (or
:class:`.Vector3` instances converted with :func:`numpy.asarray`) and the blend is applied component-wise.

Use
---

The easing functions differ only in the weight they apply to ``value2 - value1``

=====================  =================================================================
Function               Weight :math:`w(t)`
=====================  =================================================================
:func:`linear`         :math:`t`
:func:`cosine`         :math:`(1-\cos(\pi t))/2`
:func:`sine`           :math:`1-\sin(\pi t/2)`
:func:`cubic`          :math:`t^2(3-2t)`
:func:`quintic`        :math:`6t^5-15t^4+10t^3`
=====================  =================================================================

The result is always :math:`v_1 + (v_2 - v_1)w(t)`.
"""

import numpy as np

from linkmath.scalar_math import clamp01, repeat, sign, delta_angle_in_degrees, delta_angle_in_radians, \
    DEG_360_IN_RAD, DEG_180_IN_RAD, PI, PI_HALF

from linkmath._typing import SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY


__all__ = ['inverse_linear', 'linear', 'clamped_linear', 'linear_precise', 'clamped_linear_precise',
           'cosine', 'clamped_cosine', 'sine', 'clamped_sine', 'cubic', 'clamped_cubic', 'quintic', 'clamped_quintic',
           'smooth_step', 'smooth_step_cubic', 'hermite', 'hermite_tangents', 'catmull_rom',
           'linear_angle_in_degrees', 'linear_angle_in_radians', 'move_towards',
           'move_towards_angle_in_degrees', 'move_towards_angle_in_radians']


def inverse_linear(start: SCALAR_OR_ARRAY, end: SCALAR_OR_ARRAY, value: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Determines where a value lies between start and end.

    This is the inverse of :func:`clamped_linear`.  When start and end are the same this returns 0.

    :param start: the start of the range
    :param end: the end of the range
    :param value: the point within the range
    :return: a value in [0, 1] giving the fraction of the way from start to end that value falls
    """

    start = np.asarray(start, dtype=np.float64)
    end = np.asarray(end, dtype=np.float64)

    with np.errstate(divide='ignore', invalid='ignore'):
        fraction = clamp01((value - start) / (end - start))

    return np.where(start != end, fraction, 0.0)[()]


def linear(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, amount: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Linearly interpolates between two values as ``value1 + (value2 - value1)*amount``.

    This is the fastest form but it can lose precision at ``amount=1`` when the values differ greatly in magnitude.
    See :func:`linear_precise` for a form that returns value2 exactly at ``amount=1``.

    :param value1: the source value(s)
    :param value2: the destination value(s)
    :param amount: the weight of value2
    :return: the interpolated value(s)
    """

    value1 = np.asarray(value1, dtype=np.float64)

    return (value1 + (value2 - value1) * amount)[()]


def clamped_linear(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, amount: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    :func:`linear` with the amount clamped to [0, 1].
    """

    return linear(value1, value2, clamp01(amount))


def linear_precise(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, amount: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Linearly interpolates between two values as ``(1 - amount)*value1 + amount*value2``.

    This costs one more multiply than :func:`linear` but it does not suffer from the precision issue at the edge of
    the range.  For instance ``linear(1e17, 1, 1)`` is 0 while ``linear_precise(1e17, 1, 1)`` is 1.

    :param value1: the source value(s)
    :param value2: the destination value(s)
    :param amount: the weight of value2
    :return: the interpolated value(s)
    """

    amount = np.asarray(amount, dtype=np.float64)

    return ((1.0 - amount) * value1 + value2 * amount)[()]


def clamped_linear_precise(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY,
                           amount: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    :func:`linear_precise` with the amount clamped to [0, 1].
    """

    return linear_precise(value1, value2, clamp01(amount))


def cosine(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, amount: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    r"""
    Interpolates using half a cosine wave, which eases in and out of both values.

    .. math::
        v_1 + (v_2-v_1)\frac{1-\cos(\pi t)}{2}

    :param value1: the source value(s)
    :param value2: the destination value(s)
    :param amount: the weight of value2
    :return: the interpolated value(s)
    """

    value1 = np.asarray(value1, dtype=np.float64)

    return (value1 + (value2 - value1) * (1.0 - np.cos(np.multiply(amount, PI))) / 2.0)[()]


def clamped_cosine(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, amount: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    :func:`cosine` with the amount clamped to [0, 1].
    """

    return cosine(value1, value2, clamp01(amount))


def sine(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, amount: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    r"""
    Interpolates using a quarter sine wave.

    .. math::
        v_1 + (v_2-v_1)\left(1-\sin\left(\frac{\pi t}{2}\right)\right)

    .. note::
        The weight here is 1 at ``amount=0`` and 0 at ``amount=1``, so this starts at value2 and eases into value1,
        the opposite direction from the other easing functions in this module.  Swap the values if you need the
        other direction.

    :param value1: the value(s) reached at amount=1
    :param value2: the value(s) started from at amount=0
    :param amount: the interpolation amount
    :return: the interpolated value(s)
    """

    value1 = np.asarray(value1, dtype=np.float64)

    return (value1 + (value2 - value1) * (1.0 - np.sin(np.multiply(amount, PI_HALF))))[()]


def clamped_sine(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, amount: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    :func:`sine` with the amount clamped to [0, 1].
    """

    return sine(value1, value2, clamp01(amount))


def cubic(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, amount: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    r"""
    Interpolates using the cubic smoothstep weight :math:`t^2(3-2t)`, which has zero slope at both ends.

    :param value1: the source value(s)
    :param value2: the destination value(s)
    :param amount: the weight of value2
    :return: the interpolated value(s)
    """

    value1 = np.asarray(value1, dtype=np.float64)
    amount = np.asarray(amount, dtype=np.float64)

    return (value1 + (value2 - value1) * amount * amount * (3.0 - 2.0 * amount))[()]


def clamped_cubic(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, amount: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    :func:`cubic` with the amount clamped to [0, 1].
    """

    return cubic(value1, value2, clamp01(amount))


def quintic(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, amount: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    r"""
    Interpolates using the quintic smootherstep weight :math:`6t^5-15t^4+10t^3`.

    This has zero first and second derivatives at both ends.

    :param value1: the source value(s)
    :param value2: the destination value(s)
    :param amount: the weight of value2
    :return: the interpolated value(s)
    """

    value1 = np.asarray(value1, dtype=np.float64)
    amount = np.asarray(amount, dtype=np.float64)

    amount3 = amount * amount * amount

    weight = amount3 * (amount * (6.0 * amount - 15.0) + 10.0)

    return (value1 + (value2 - value1) * weight)[()]


def clamped_quintic(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, amount: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    :func:`quintic` with the amount clamped to [0, 1].
    """

    return quintic(value1, value2, clamp01(amount))


def smooth_step(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, amount: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Interpolates between value1 and value2 with smoothing at the limits.

    The amount is always clamped to [0, 1].

    :param value1: the source value(s)
    :param value2: the destination value(s)
    :param amount: the weight of value2
    :return: the interpolated value(s)
    """

    amount = clamp01(amount)

    amount = -2.0 * amount * amount * amount + 3.0 * amount * amount

    return (np.multiply(value2, amount) + np.multiply(value1, 1.0 - amount))[()]


def smooth_step_cubic(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, amount: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Clamps the amount to [0, 1] and then applies the two value :func:`hermite` form.

    An amount below 0 returns value1 and an amount above 1 returns value2.
    """

    return hermite(value1, value2, clamp01(amount))


def hermite(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, amount: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    r"""
    Performs a Hermite spline interpolation between two values with zero tangents.

    .. math::
        (2v_1-2v_2)s^3 + (3v_2-3v_1)s^2 + v_1

    An amount of exactly 0 or 1 returns the corresponding end point unchanged, which keeps extreme magnitudes from
    producing NaN (``inf - inf``) at the ends.

    :param value1: the source value(s)
    :param value2: the destination value(s)
    :param amount: the weighting factor
    :return: the interpolated value(s)
    """

    value1 = np.asarray(value1, dtype=np.float64)
    value2 = np.asarray(value2, dtype=np.float64)
    amount = np.asarray(amount, dtype=np.float64)

    with np.errstate(invalid='ignore', over='ignore'):
        amount_squared = amount * amount
        amount_cubed = amount_squared * amount

        result = (2.0 * value1 - 2.0 * value2) * amount_cubed + (3.0 * value2 - 3.0 * value1) * amount_squared + value1

    return np.where(amount == 0.0, value1, np.where(amount == 1.0, value2, result))[()]


def hermite_tangents(value1: SCALAR_OR_ARRAY, tangent1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY,
                     tangent2: SCALAR_OR_ARRAY, amount: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    r"""
    Performs a Hermite spline interpolation from value1 leaving with tangent1 to value2 arriving with tangent2.

    The cubic is

    .. math::
        (2v_1 - 2v_2 + t_2 + t_1)s^3 + (3v_2 - 3v_1 - 2t_1 - t_2)s^2 + t_1 s + v_1

    An amount of exactly 0 or 1 returns the corresponding end point unchanged.

    :param value1: the source position(s)
    :param tangent1: the source tangent(s)
    :param value2: the destination position(s)
    :param tangent2: the destination tangent(s)
    :param amount: the weighting factor
    :return: the interpolated value(s)
    """

    value1 = np.asarray(value1, dtype=np.float64)
    value2 = np.asarray(value2, dtype=np.float64)
    tangent1 = np.asarray(tangent1, dtype=np.float64)
    tangent2 = np.asarray(tangent2, dtype=np.float64)
    amount = np.asarray(amount, dtype=np.float64)

    with np.errstate(invalid='ignore', over='ignore'):
        amount_squared = amount * amount
        amount_cubed = amount_squared * amount

        result = ((2.0 * value1 - 2.0 * value2 + tangent2 + tangent1) * amount_cubed +
                  (3.0 * value2 - 3.0 * value1 - 2.0 * tangent1 - tangent2) * amount_squared +
                  tangent1 * amount + value1)

    return np.where(amount == 0.0, value1, np.where(amount == 1.0, value2, result))[()]


def catmull_rom(value1: SCALAR_OR_ARRAY, value2: SCALAR_OR_ARRAY, value3: SCALAR_OR_ARRAY, value4: SCALAR_OR_ARRAY,
                amount: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    r"""
    Performs a Catmull-Rom interpolation between value2 and value3, using value1 and value4 to shape the curve.

    .. math::
        \frac{1}{2}\left(2v_2 + (v_3-v_1)t + (2v_1-5v_2+4v_3-v_4)t^2 + (3v_2-v_1-3v_3+v_4)t^3\right)

    An amount of 0 gives value2 and an amount of 1 gives value3.

    :param value1: the point before the segment
    :param value2: the start of the segment
    :param value3: the end of the segment
    :param value4: the point after the segment
    :param amount: the weighting factor
    :return: the interpolated value(s)
    """

    value1 = np.asarray(value1, dtype=np.float64)
    value2 = np.asarray(value2, dtype=np.float64)
    value3 = np.asarray(value3, dtype=np.float64)
    value4 = np.asarray(value4, dtype=np.float64)
    amount = np.asarray(amount, dtype=np.float64)

    amount_squared = amount * amount
    amount_cubed = amount_squared * amount

    return (0.5 * (2.0 * value2 +
                   (value3 - value1) * amount +
                   (2.0 * value1 - 5.0 * value2 + 4.0 * value3 - value4) * amount_squared +
                   (3.0 * value2 - value1 - 3.0 * value3 + value4) * amount_cubed))[()]


def linear_angle_in_degrees(angle1: SCALAR_OR_ARRAY, angle2: SCALAR_OR_ARRAY,
                            amount: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Same as :func:`clamped_linear` but takes the short way around when the angles wrap around 360 degrees.

    :param angle1: the source angle(s) in degrees
    :param angle2: the destination angle(s) in degrees
    :param amount: the amount of progress, clamped to [0, 1]
    :return: the interpolated angle(s) in degrees (not normalized)
    """

    delta = repeat(np.subtract(angle2, angle1), 360.0)
    delta = np.where(delta > 180.0, delta - 360.0, delta)

    return (angle1 + delta * clamp01(amount))[()]


def linear_angle_in_radians(angle1: SCALAR_OR_ARRAY, angle2: SCALAR_OR_ARRAY,
                            amount: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Same as :func:`linear_angle_in_degrees` for angles in radians.
    """

    delta = repeat(np.subtract(angle2, angle1), DEG_360_IN_RAD)
    delta = np.where(delta > DEG_180_IN_RAD, delta - DEG_360_IN_RAD, delta)

    return (angle1 + delta * clamp01(amount))[()]


def move_towards(current: SCALAR_OR_ARRAY, target: SCALAR_OR_ARRAY, max_delta: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Moves current towards target by at most max_delta.

    If the target is within max_delta it is returned exactly.  A negative max_delta pushes away from the target.

    :param current: the current value(s)
    :param target: the value(s) to move towards
    :param max_delta: the largest change to apply
    :return: the moved value(s)
    """

    difference = np.subtract(target, current)

    moved = current + sign(difference) * max_delta

    return np.where(np.abs(difference) <= max_delta, target, moved)[()]


def move_towards_angle_in_degrees(current: SCALAR_OR_ARRAY, target: SCALAR_OR_ARRAY,
                                  max_delta: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Same as :func:`move_towards` but takes the short way around when the angles wrap around 360 degrees.

    If the target is within max_delta it is returned as given (not unwrapped), otherwise the result is current moved
    by max_delta in the direction of :func:`.delta_angle_in_degrees`.

    :param current: the current angle(s) in degrees
    :param target: the angle(s) to move towards in degrees
    :param max_delta: the largest change to apply in degrees
    :return: the moved angle(s) in degrees
    """

    max_delta = np.asarray(max_delta, dtype=np.float64)

    delta = delta_angle_in_degrees(current, target)

    moved = move_towards(current, np.add(current, delta), max_delta)

    return np.where((-max_delta < delta) & (delta < max_delta), target, moved)[()]


def move_towards_angle_in_radians(current: SCALAR_OR_ARRAY, target: SCALAR_OR_ARRAY,
                                  max_delta: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Same as :func:`move_towards_angle_in_degrees` for angles in radians.
    """

    max_delta = np.asarray(max_delta, dtype=np.float64)

    delta = delta_angle_in_radians(current, target)

    moved = move_towards(current, np.add(current, delta), max_delta)

    return np.where((-max_delta < delta) & (delta < max_delta), target, moved)[()]
