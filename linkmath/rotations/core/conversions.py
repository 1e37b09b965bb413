# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
Core conversion routines for rotation representations

This module contains the routines for converting between rotation quaternions, Euler angles, axis/angle pairs, and
rotation matrices, as well as for rotating vectors by quaternions.  All routines are implemented purely on numpy
arrays (or array like objects) and are vectorized over columns (or, for matrices, over the first axis).

Euler angles
------------

Euler angles are always given as ``[x, y, z]`` (pitch, yaw, roll) in radians and are applied in the fixed order z
(roll) first, then x (pitch), then y (yaw).  This is the order that puts the gimbal lock singularity at looking
straight up or down, which suits a typical first person camera.

Rotation matrices
-----------------

Matrices are in the row vector convention used by :meth:`.Vector3.transform`: a point is transformed as
:math:`\mathbf{v}'=\mathbf{v}\mathbf{M}` and element :math:`M_{ij}` is ``matrix[i-1, j-1]``.  This makes these
matrices the transpose of the more common column vector rotation matrices (for instance those produced by
:meth:`scipy.spatial.transform.Rotation.as_matrix`).  Where a 4x4 affine matrix is accepted only the upper left 3x3
rotation block is read.
"""

import logging

import numpy as np

from linkmath.scalar_math import normalize_angle_in_radians, PI_HALF

from linkmath._typing import ARRAY_LIKE, DOUBLE_ARRAY, SCALAR_OR_ARRAY

from linkmath.rotations.core._helpers import _check_matrix_array_and_shape, _check_quaternion_array_and_shape, \
    _check_vector_array_and_shape


__all__ = ['euler_to_quaternion', 'yaw_pitch_roll_to_quaternion', 'quaternion_to_euler', 'axis_angle_to_quaternion',
           'rotmat_to_quaternion', 'quaternion_to_rotmat', 'rotate_vector', 'GIMBAL_LOCK_THRESHOLD']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


GIMBAL_LOCK_THRESHOLD: float = 0.4995
"""
The fraction of the squared quaternion length that ``x*w - y*z`` must exceed for Euler extraction to treat the
quaternion as gimbal locked.

This is deliberately less than 0.5 so that rounding can never push the argument of the arcsine past 1.
"""


def euler_to_quaternion(angles: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts Euler angles into a rotation quaternion.

    The angles are ``[x, y, z]`` in radians and the rotations are applied z first, then x, then y, meaning the result
    is :math:`\mathbf{q}_y\otimes\mathbf{q}_x\otimes\mathbf{q}_z`.  Expanding the product with half angle sines
    :math:`s` and cosines :math:`c` gives

    .. math::
        \mathbf{q}=\left[\begin{array}{c}
        c_y s_x c_z + s_y c_x s_z\\
        s_y c_x c_z - c_y s_x s_z\\
        c_y c_x s_z - s_y s_x c_z\\
        c_y c_x c_z + s_y s_x s_z\end{array}\right]

    This function is vectorized, meaning that you can specify multiple sets of angles as a 3xn array where each column
    is an independent set.

    :param angles: The Euler angles as ``[x, y, z]`` in radians
    :return: The rotation quaternion(s)
    """

    half_angles = _check_vector_array_and_shape(angles) * 0.5

    sin_x, cos_x = np.sin(half_angles[0]), np.cos(half_angles[0])
    sin_y, cos_y = np.sin(half_angles[1]), np.cos(half_angles[1])
    sin_z, cos_z = np.sin(half_angles[2]), np.cos(half_angles[2])

    return np.stack([cos_y * sin_x * cos_z + sin_y * cos_x * sin_z,
                     sin_y * cos_x * cos_z - cos_y * sin_x * sin_z,
                     cos_y * cos_x * sin_z - sin_y * sin_x * cos_z,
                     cos_y * cos_x * cos_z + sin_y * sin_x * sin_z], axis=0)


def yaw_pitch_roll_to_quaternion(yaw: SCALAR_OR_ARRAY, pitch: SCALAR_OR_ARRAY, roll: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    """
    This function builds a rotation quaternion from yaw (about y), pitch (about x), and roll (about z) in radians.

    Roll is applied first, then pitch, then yaw.  This is the same rotation as
    ``euler_to_quaternion([pitch, yaw, roll])``.

    :param yaw: the rotation(s) about the y axis in radians
    :param pitch: the rotation(s) about the x axis in radians
    :param roll: the rotation(s) about the z axis in radians
    :return: The rotation quaternion(s)
    """

    return euler_to_quaternion(np.broadcast_arrays(np.asarray(pitch, dtype=np.float64),
                                                   np.asarray(yaw, dtype=np.float64),
                                                   np.asarray(roll, dtype=np.float64)))


def quaternion_to_euler(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function extracts the Euler angles ``[x, y, z]`` (pitch, yaw, roll) from rotation quaternion(s).

    This is the inverse of :func:`euler_to_quaternion` for unit quaternions away from gimbal lock.  The test value
    :math:`t=xw-yz` (which is half the sine of the pitch for a unit quaternion) is compared against
    :data:`GIMBAL_LOCK_THRESHOLD` times the squared length of the quaternion:

    * if :math:`t` is above the threshold the pitch is locked at :math:`\pi/2`, the yaw is
      :math:`2\text{atan2}(y, x)`, and the roll is 0
    * if :math:`t` is below the negative threshold the pitch is locked at :math:`-\pi/2`, the yaw is
      :math:`-2\text{atan2}(y, x)`, and the roll is 0
    * otherwise

      .. math::
          \theta_x = \text{sin}^{-1}(2(wx-yz))\\
          \theta_y = \text{atan2}(2(wy+xz), 1-2(x^2+y^2))\\
          \theta_z = \text{atan2}(2(wz+xy), 1-2(x^2+z^2))

    All angles are normalized into :math:`[0, 2\pi)`.  Because of this and because :math:`\mathbf{q}` and
    :math:`-\mathbf{q}` are the same rotation, converting the angles back with :func:`euler_to_quaternion` returns
    either the input or its negation.

    Inside the gimbal lock region yaw and roll can no longer be told apart, so only their combination is recovered.

    This function is vectorized, meaning that you can specify multiple quaternions as columns of a 4xn array.

    :param quaternion: the rotation quaternion(s), which should be unit length
    :return: The Euler angles as an array of length 3 (or a 3xn array)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    x, y, z, w = quaternion

    unit = x * x + y * y + z * z + w * w
    test = x * w - y * z

    north = test > GIMBAL_LOCK_THRESHOLD * unit
    south = test < -GIMBAL_LOCK_THRESHOLD * unit

    if np.any(north):
        _LOGGER.debug(f'Euler extraction hit the north pole singularity for {np.count_nonzero(north)} quaternion(s)')
    if np.any(south):
        _LOGGER.debug(f'Euler extraction hit the south pole singularity for {np.count_nonzero(south)} quaternion(s)')

    with np.errstate(invalid='ignore'):
        pitch = np.arcsin(2 * (w * x - y * z))
        yaw = np.arctan2(2 * w * y + 2 * z * x, 1 - 2 * (x * x + y * y))
        roll = np.arctan2(2 * w * z + 2 * x * y, 1 - 2 * (z * z + x * x))

    pole_yaw = 2 * np.arctan2(y, x)

    pitch = np.where(north, PI_HALF, np.where(south, -PI_HALF, pitch))
    yaw = np.where(north, pole_yaw, np.where(south, -pole_yaw, yaw))
    roll = np.where(north | south, 0.0, roll)

    return normalize_angle_in_radians(np.stack([pitch, yaw, roll], axis=0))


def axis_angle_to_quaternion(axis: ARRAY_LIKE, angle: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function builds the quaternion rotating by angle (radians) about axis.

    .. math::
        \mathbf{q}=\left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    The axis must already be unit length.  It is not checked or normalized, and a non unit axis gives a non unit
    quaternion.

    :param axis: the unit rotation axis (or a 3xn array of axes)
    :param angle: the rotation angle(s) in radians
    :return: The rotation quaternion(s)
    """

    axis = _check_vector_array_and_shape(axis)

    half_angle = np.multiply(angle, 0.5)

    sin_half = np.sin(half_angle)

    return np.concatenate([axis * sin_half, [np.broadcast_to(np.cos(half_angle), np.shape(axis[0]))]], axis=0)


def rotmat_to_quaternion(rotation_matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation matrix into a rotation quaternion.

    The matrix can be a 3x3 rotation matrix or a 4x4 affine matrix (from which only the rotation block is used), in
    the row vector convention described in the module documentation.  This is the inverse of
    :func:`quaternion_to_rotmat`, up to the sign of the quaternion.

    The classic numerically stable extraction is used.  If the trace of the rotation block is positive

    .. math::
        s=\sqrt{\text{Tr}(\mathbf{M})+1}\\
        q_s = \frac{s}{2}\\
        \mathbf{q}_v = \frac{1}{2s}\left[\begin{array}{c}M_{23}-M_{32}\\M_{31}-M_{13}\\M_{12}-M_{21}\end{array}\right]

    otherwise the largest diagonal element selects which vector component is computed from the square root (the
    ``M11 >= M22 and M11 >= M33`` branch first, then ``M22 > M33``, and the z branch last) so that we never divide
    by a value near 0.

    This function is also vectorized, meaning that you can specify multiple matrices stacked along the first axis.
    The result then has the quaternions as columns.

    :param rotation_matrix: The rotation matrix(ces) to convert to a rotation quaternion
    :return: the rotation quaternion(s) corresponding to the input matrix(ces)
    """

    matrix = _check_matrix_array_and_shape(rotation_matrix)

    m11, m12, m13 = matrix[..., 0, 0], matrix[..., 0, 1], matrix[..., 0, 2]
    m21, m22, m23 = matrix[..., 1, 0], matrix[..., 1, 1], matrix[..., 1, 2]
    m31, m32, m33 = matrix[..., 2, 0], matrix[..., 2, 1], matrix[..., 2, 2]

    trace = m11 + m22 + m33

    use_trace = trace > 0
    use_x = ~use_trace & (m11 >= m22) & (m11 >= m33)
    use_y = ~use_trace & ~use_x & (m22 > m33)

    if not np.all(use_trace):
        _LOGGER.debug(f'Rotation matrix extraction used a diagonal branch for '
                      f'{np.count_nonzero(~use_trace)} matrix(ces)')

    # every branch is evaluated and the valid one selected afterwards, so the discarded ones may be NaN/inf
    with np.errstate(divide='ignore', invalid='ignore'):
        s = np.sqrt(trace + 1)
        inverse = 0.5 / s
        trace_branch = [(m23 - m32) * inverse, (m31 - m13) * inverse, (m12 - m21) * inverse, s * 0.5]

        s = np.sqrt(1 + m11 - m22 - m33)
        inverse = 0.5 / s
        x_branch = [0.5 * s, (m12 + m21) * inverse, (m13 + m31) * inverse, (m23 - m32) * inverse]

        s = np.sqrt(1 + m22 - m11 - m33)
        inverse = 0.5 / s
        y_branch = [(m21 + m12) * inverse, 0.5 * s, (m32 + m23) * inverse, (m31 - m13) * inverse]

        s = np.sqrt(1 + m33 - m11 - m22)
        inverse = 0.5 / s
        z_branch = [(m31 + m13) * inverse, (m32 + m23) * inverse, 0.5 * s, (m12 - m21) * inverse]

    quaternion = np.select([use_trace, use_x, use_y], [np.stack(trace_branch), np.stack(x_branch),
                                                        np.stack(y_branch)], np.stack(z_branch))

    return quaternion


def quaternion_to_rotmat(quaternion: ARRAY_LIKE, homogeneous: bool = False) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation quaternion into its equivalent rotation matrix in the row vector convention.

    .. math::
        \mathbf{M}=\left[\begin{array}{ccc}
        1-2(y^2+z^2) & 2(xy+wz) & 2(xz-wy)\\
        2(xy-wz) & 1-2(x^2+z^2) & 2(yz+wx)\\
        2(xz+wy) & 2(yz-wx) & 1-2(x^2+y^2)\end{array}\right]

    so that ``vector @ M`` rotates ``vector`` the same way :func:`rotate_vector` does.  This is the transpose of the
    column vector rotation matrix.

    This function is vectorized, meaning that you can specify multiple rotation quaternions as columns.  The matrices
    are then stacked along the first axis, so the matrix for the first column is at index 0 of the first axis, and so
    on.

    :param quaternion: The rotation quaternion(s) to be converted to the rotation matrix(ces)
    :param homogeneous: If ``True`` a 4x4 affine matrix with no translation is returned instead of a 3x3 matrix
    :return: a numpy array containing the rotation matrix(ces) corresponding to the input quaternion(s)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    x, y, z, w = quaternion

    xx, yy, zz = x * x, y * y, z * z
    xy, xz, yz = x * y, x * z, y * z
    wx, wy, wz = w * x, w * y, w * z

    matrix = np.array([[1 - 2 * (yy + zz), 2 * (xy + wz), 2 * (xz - wy)],
                       [2 * (xy - wz), 1 - 2 * (xx + zz), 2 * (yz + wx)],
                       [2 * (xz + wy), 2 * (yz - wx), 1 - 2 * (xx + yy)]])

    if matrix.ndim > 2:
        # put the stack first
        matrix = np.moveaxis(matrix, -1, 0)

    if homogeneous:
        affine = np.zeros(matrix.shape[:-2] + (4, 4), dtype=np.float64)
        affine[..., :3, :3] = matrix
        affine[..., 3, 3] = 1
        return affine

    return matrix


def rotate_vector(quaternion: ARRAY_LIKE, vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function rotates vector(s) by rotation quaternion(s) without forming the rotation matrix.

    With :math:`x_2=2x`, :math:`y_2=2y`, :math:`z_2=2z` the rotated vector is

    .. math::
        \left[\begin{array}{c}
        v_x(1-yy_2-zz_2) + v_y(xy_2-wz_2) + v_z(xz_2+wy_2)\\
        v_x(xy_2+wz_2) + v_y(1-xx_2-zz_2) + v_z(yz_2-wx_2)\\
        v_x(xz_2-wy_2) + v_y(yz_2+wx_2) + v_z(1-xx_2-yy_2)\end{array}\right]

    which is the same as ``vector @ quaternion_to_rotmat(quaternion)``.  The quaternion is assumed to be unit length.

    A single quaternion can rotate a 3xn array of vectors, a 4xn array of quaternions can rotate a single vector, or
    matching stacks can be rotated column by column.

    :param quaternion: the rotation quaternion(s)
    :param vector: the vector(s) to rotate
    :return: the rotated vector(s)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)
    vector = _check_vector_array_and_shape(vector)

    x, y, z, w = quaternion

    x2, y2, z2 = x + x, y + y, z + z

    wx2, wy2, wz2 = w * x2, w * y2, w * z2
    xx2, xy2, xz2 = x * x2, x * y2, x * z2
    yy2, yz2, zz2 = y * y2, y * z2, z * z2

    vx, vy, vz = vector

    return np.stack([vx * (1 - yy2 - zz2) + vy * (xy2 - wz2) + vz * (xz2 + wy2),
                     vx * (xy2 + wz2) + vy * (1 - xx2 - zz2) + vz * (yz2 - wx2),
                     vx * (xz2 - wy2) + vy * (yz2 + wx2) + vz * (1 - xx2 - yy2)], axis=0)
