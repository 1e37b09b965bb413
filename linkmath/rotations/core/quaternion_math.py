# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
This module provides the quaternion algebra used throughout :mod:`linkmath`, implemented purely on numpy arrays.

Every function here accepts a single quaternion as a length 4 array like object ``[x, y, z, w]`` or multiple
quaternions as a :math:`4\times n` array where each column is an independent quaternion.  When a single quaternion
is combined with a stack of quaternions the single quaternion is applied to every column.

None of these functions normalize their inputs or outputs unless their name says so.  Degenerate inputs follow
IEEE-754 rules (inverting or normalizing a zero quaternion gives NaN) and never raise.
"""

import numpy as np

from linkmath.scalar_math import ieee_divide

from linkmath._typing import ARRAY_LIKE, DOUBLE_ARRAY, F_SCALAR_OR_ARRAY, DatetimeLike

from linkmath.rotations.core._helpers import _check_quaternion_array_and_shape


__all__ = ["quaternion_dot", "quaternion_length_squared", "quaternion_length", "quaternion_multiplication",
           "quaternion_conjugate", "quaternion_inverse", "quaternion_normalize", "quaternion_concatenate",
           "quaternion_divide", "lerp", "nlerp", "slerp", "SLERP_EPSILON"]


SLERP_EPSILON: float = 1e-6
"""
When the cosine of the angle between two quaternions is larger than ``1 - SLERP_EPSILON`` :func:`slerp` falls back to
linear blending of the coefficients.
"""


def _match_quaternion_dimensions(quaternion_1: DOUBLE_ARRAY,
                                 quaternion_2: DOUBLE_ARRAY) -> tuple[DOUBLE_ARRAY, DOUBLE_ARRAY]:
    # a single quaternion combined with a stack of quaternions is applied to every column
    if quaternion_1.ndim == 1 and quaternion_2.ndim > 1:
        quaternion_1 = quaternion_1.reshape(4, 1)
    elif quaternion_2.ndim == 1 and quaternion_1.ndim > 1:
        quaternion_2 = quaternion_2.reshape(4, 1)

    return quaternion_1, quaternion_2


def _interpolation_fraction(time: float | DatetimeLike, time0: float | DatetimeLike,
                            time1: float | DatetimeLike) -> float:
    try:
        return float((time - time0) / (time1 - time0))  # type: ignore
    except TypeError:
        raise TypeError('time, time0, and time1 must support subtraction resulting in a type that supports true '
                        'division.  Typically this means they should all be floats or all be DatetimeLike objects')


def quaternion_dot(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE) -> F_SCALAR_OR_ARRAY:
    """
    Computes the 4 dimensional dot product of quaternions.

    :param quaternion_1: the first quaternion(s)
    :param quaternion_2: the second quaternion(s)
    :return: the dot product(s) as a float for single quaternions or an array of length n for stacks
    """

    quaternion_1, quaternion_2 = _match_quaternion_dimensions(_check_quaternion_array_and_shape(quaternion_1),
                                                              _check_quaternion_array_and_shape(quaternion_2))

    return (quaternion_1 * quaternion_2).sum(axis=0)


def quaternion_length_squared(quaternion: ARRAY_LIKE) -> F_SCALAR_OR_ARRAY:
    """
    Computes the squared length of the quaternion(s).

    Prefer this over :func:`quaternion_length` when comparing lengths since it avoids the square root.
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    return (quaternion * quaternion).sum(axis=0)


def quaternion_length(quaternion: ARRAY_LIKE) -> F_SCALAR_OR_ARRAY:
    """
    Computes the length of the quaternion(s).
    """

    return np.sqrt(quaternion_length_squared(quaternion))


def quaternion_multiplication(quaternion_1_in: ARRAY_LIKE,
                              quaternion_2_in: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function performs the Hamilton quaternion product.

    Mathematically this is given by:

    .. math::
        \mathbf{q}_1\otimes\mathbf{q}_2=\left[\begin{array}{c}q_{s1}\mathbf{q}_{v2} + q_{s2}\mathbf{q}_{v1} +
        \mathbf{q}_{v1}\times\mathbf{q}_{v2}\\
        q_{s1}q_{s2}-\mathbf{q}_{v1}^T\mathbf{q}_{v2}\end{array}\right]

    where :math:`\mathbf{q}_v` is the vector portion and :math:`q_s` is the scalar portion of each quaternion.

    The product is not commutative.  Rotating a vector by :math:`\mathbf{q}_1\otimes\mathbf{q}_2` applies the rotation
    of :math:`\mathbf{q}_2` first and then the rotation of :math:`\mathbf{q}_1`.  See :func:`quaternion_concatenate`
    for the same operation with the arguments in application order.

    This function is vectorized, therefore you can input multiple quaternions as a 4xn array where each column is an
    independent quaternion.

    :param quaternion_1_in: The first quaternion(s) to multiply
    :param quaternion_2_in: The second quaternion(s) to multiply
    :return: The Hamilton product of quaternion_1 and quaternion_2
    """

    quaternion_1, quaternion_2 = _match_quaternion_dimensions(_check_quaternion_array_and_shape(quaternion_1_in),
                                                              _check_quaternion_array_and_shape(quaternion_2_in))

    qs1 = quaternion_1[-1]
    qv1 = quaternion_1[0:3]

    qs2 = quaternion_2[-1]
    qv2 = quaternion_2[0:3]

    vector_part = np.cross(qv1, qv2, axis=0) + qs2 * qv1 + qs1 * qv2

    scalar_part = qs1 * qs2 - (qv1 * qv2).sum(axis=0)

    return np.concatenate([vector_part, [scalar_part]], axis=0)


def quaternion_conjugate(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Negates the vector portion of the quaternion(s).

    For unit quaternions this is the same as :func:`quaternion_inverse`.

    :param quaternion: The quaternion(s) to conjugate
    :return: the conjugated quaternion(s) as a new array
    """

    # break mutability
    quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    quaternion[:3] *= -1

    return quaternion


def quaternion_inverse(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function provides the multiplicative inverse of quaternion(s).

    The inverse is defined such that :math:`\mathbf{q}\otimes\mathbf{q}^{-1}=\mathbf{q}_I` where
    :math:`\mathbf{q}_I=\left[\begin{array}{cccc}0&0&0&1\end{array}\right]^T` is the identity quaternion.  It is
    computed as the conjugate divided by the squared length:

    .. math::
        \mathbf{q}^{-1}=\frac{1}{\|\mathbf{q}\|^2}\left[\begin{array}{c}-\mathbf{q}_v\\q_s\end{array}\right]

    so this is correct for quaternions that are not unit length as well.  The zero quaternion has no inverse.  The
    reciprocal of its squared length is infinite and multiplying that by the zero components gives NaN, without
    raising.

    This function is also vectorized, meaning that you can specify multiple quaternions to be inverted by
    specifying each quaternion as a column.

    :param quaternion: The quaternion(s) to be inverted
    :return: the inverse quaternion(s)
    """

    conjugate = quaternion_conjugate(quaternion)

    with np.errstate(invalid='ignore', over='ignore'):
        return conjugate * ieee_divide(1.0, (conjugate * conjugate).sum(axis=0))


def quaternion_normalize(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Scales the quaternion(s) to unit length.

    The sign of the quaternion is preserved.  A zero quaternion produces NaN components.

    :param quaternion: the quaternion(s) to normalize

    :returns: The normalized quaternion(s)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    length = np.sqrt((quaternion * quaternion).sum(axis=0))

    with np.errstate(invalid='ignore'):
        return quaternion * ieee_divide(1.0, length)


def quaternion_concatenate(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Concatenates two rotations so that the rotation of quaternion_1 is applied first and then quaternion_2.

    This is :math:`\mathbf{q}_2\otimes\mathbf{q}_1`, the Hamilton product with the arguments reversed.

    :param quaternion_1: the first rotation(s) to apply
    :param quaternion_2: the second rotation(s) to apply
    :return: the combined rotation(s)
    """

    return quaternion_multiplication(quaternion_2, quaternion_1)


def quaternion_divide(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Computes :math:`\mathbf{q}_1\otimes\mathbf{q}_2^{-1}`.

    :param quaternion_1: the dividend quaternion(s)
    :param quaternion_2: the divisor quaternion(s)
    :return: the quotient quaternion(s)
    """

    return quaternion_multiplication(quaternion_1, quaternion_inverse(quaternion_2))


def slerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
          time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> DOUBLE_ARRAY:
    r"""
    This function performs spherical linear interpolation of quaternions.

    SLERP blends the quaternions along the great circle arc connecting them, which gives a constant angular velocity
    rotation.  The blend is

    .. math::
        \omega = \text{cos}^{-1}(\mathbf{q}_0^T\mathbf{q}_1)\\
        \mathbf{q}=\frac{\text{sin}((1-p)\omega)}{\text{sin}(\omega)}\mathbf{q}_0+
        \frac{\text{sin}(p\omega)}{\text{sin}(\omega)}\mathbf{q}_1

    where :math:`p` is the fractional percent of the way between :math:`\mathbf{q}_0` and :math:`\mathbf{q}_1` that we
    want to interpolate at.

    If the dot product of the quaternions is negative the sign of the second coefficient (and of the dot product) is
    flipped so that the shorter of the two arcs is taken.  If the quaternions are nearly parallel (the dot product
    is larger than ``1 - SLERP_EPSILON``) then :math:`\text{sin}(\omega)` is nearly 0 and the coefficients fall back to
    :math:`1-p` and :math:`p`.

    The inputs are not normalized and neither is the output.  For unit inputs the output is unit length to within
    rounding error.

    When using this function you can either specify the argument `time` as the fractional percent that you want to
    interpolate at, or specify the keyword arguments `time0` and `time1` to be the times corresponding to the first and
    second quaternion respectively and the function will compute the fractional percent for you.  When using this method
    it is also possible to specify all three of `time`, `time0`, and `time1` as python datetime objects.

    :param quaternion0: The starting quaternion(s)
    :param quaternion1: The ending quaternion(s)
    :param time: The time to interpolate the quaternions at, as a fractional percent or as the actual time between
                `time0` and `time1`
    :param time0: the time corresponding to the first quaternion(s). Leave at 0 if you are specifying `time` as a
                  fractional percent
    :param time1: the time corresponding to the second quaternion(s). Leave at 1 if you are specifying `time` as a
                  fractional percent
    :return: The interpolated quaternion(s)
    """

    fraction = _interpolation_fraction(time, time0, time1)

    q0, q1 = _match_quaternion_dimensions(_check_quaternion_array_and_shape(quaternion0),
                                          _check_quaternion_array_and_shape(quaternion1))

    cos_omega = (q0 * q1).sum(axis=0)

    # take the shorter arc
    flip = cos_omega < 0
    cos_omega = np.where(flip, -cos_omega, cos_omega)

    with np.errstate(divide='ignore', invalid='ignore'):
        omega = np.arccos(cos_omega)
        sin_omega = np.sin(omega)

        spherical_1 = np.sin((1 - fraction) * omega) / sin_omega
        spherical_2 = np.sin(fraction * omega) / sin_omega

    nearly_parallel = cos_omega > 1 - SLERP_EPSILON

    coefficient_1 = np.where(nearly_parallel, 1 - fraction, spherical_1)
    coefficient_2 = np.where(nearly_parallel, fraction, spherical_2)

    coefficient_2 = np.where(flip, -coefficient_2, coefficient_2)

    return q0 * coefficient_1 + q1 * coefficient_2


def lerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
         time: float | DatetimeLike,
         time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> DOUBLE_ARRAY:
    r"""
    This function performs the linear quaternion blend used by :meth:`.Quaternion.lerp`.

    The blend is

    .. math::
        \mathbf{q}=\frac{(s\mathbf{q}_1-\mathbf{q}_0)p}{\|(s\mathbf{q}_1-\mathbf{q}_0)p\|}

    where :math:`s` is 1 if :math:`\mathbf{q}_0^T\mathbf{q}_1\geq 0` and -1 otherwise.

    .. warning::
        This is the normalized *difference* of the quaternions, not the conventional normalized linear interpolation
        (note that :math:`\mathbf{q}_0` is not added back in).  The result at :math:`p=0` is NaN and the result does
        not in general lie between the inputs.  It is kept this way for compatibility with existing callers that
        depend on it.  Use :func:`nlerp` or :func:`slerp` for an actual interpolation.

    :param quaternion0: The starting quaternion(s)
    :param quaternion1: The ending quaternion(s)
    :param time: The time to interpolate the quaternions at, as a fractional percent or as the actual time between
                `time0` and `time1`
    :param time0: the time corresponding to the first quaternion(s)
    :param time1: the time corresponding to the second quaternion(s)
    :return: The blended quaternion(s)
    """

    fraction = _interpolation_fraction(time, time0, time1)

    q0, q1 = _match_quaternion_dimensions(_check_quaternion_array_and_shape(quaternion0),
                                          _check_quaternion_array_and_shape(quaternion1))

    sign = np.where((q0 * q1).sum(axis=0) >= 0, 1.0, -1.0)

    return quaternion_normalize((q1 * sign - q0) * fraction)


def nlerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
          time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> DOUBLE_ARRAY:
    r"""
    This function performs normalized linear interpolation of quaternions.

    NLERP of quaternions involves first performing a linear interpolation between the two vectors, and then normalizing
    the interpolated result to have unit length.  That is:

    .. math::
        \mathbf{q}=\frac{\mathbf{q}_0(1-p)+s\mathbf{q}_1p}
        {\left\|\mathbf{q}_0(1-p)+s\mathbf{q}_1p\right\|}

    where :math:`p` is the fractional percent of the way between :math:`\mathbf{q}_0` and :math:`\mathbf{q}_1` and
    :math:`s` is the sign of their dot product (taken as 1 when the dot product is 0), which selects the shorter arc.

    .. warning::
        NLERP is a very fast and efficient interpolation method that is fine for short interpolation intervals; however,
        it does not perform a constant angular velocity interpolation, therefore it is not well suited to interpolating
        over large angles.  Use :func:`slerp` for those.

    :param quaternion0: The starting quaternion(s)
    :param quaternion1: The ending quaternion(s)
    :param time: The time to interpolate the quaternions at, as a fractional percent or as the actual time between
                `time0` and `time1`
    :param time0: the time corresponding to the first quaternion(s). Leave at 0 if you are specifying `time` as a
                  fractional percent
    :param time1: the time corresponding to the second quaternion(s). Leave at 1 if you are specifying `time` as a
                  fractional percent
    :return: The interpolated quaternion(s)
    """

    fraction = _interpolation_fraction(time, time0, time1)

    q0, q1 = _match_quaternion_dimensions(_check_quaternion_array_and_shape(quaternion0),
                                          _check_quaternion_array_and_shape(quaternion1))

    sign = np.where((q0 * q1).sum(axis=0) >= 0, 1.0, -1.0)

    return quaternion_normalize(q0 * (1 - fraction) + q1 * sign * fraction)
