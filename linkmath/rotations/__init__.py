# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
This package defines the routines for converting between rotation representations, the quaternion algebra, and the
:class:`.Quaternion` class, which is the primary way to express rotations in linkmath.

The rotation representations used in this package are:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
quaternion         A 4 element rotation quaternion stored scalar last,
                   :math:`\mathbf{q}=\left[\begin{array}{c} q_x \\ q_y \\ q_z \\ q_w\end{array}\right]=
                   \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
                   \text{cos}(\frac{\theta}{2})\end{array}\right]`
                   where :math:`\hat{\mathbf{x}}` is the unit axis of rotation and :math:`\theta` is the angle to rotate
                   about it.  The rotation represented by :math:`\mathbf{q}` is the same as the one represented by
                   :math:`-\mathbf{q}`.  Quaternions are never normalized automatically.
axis/angle         A unit 3 element axis and an angle in radians.  The axis is not checked or normalized.
euler angles       The 3 angles ``[x, y, z]`` (pitch, yaw, roll) in radians, applied about z first, then x, then y.
                   Extracted angles are normalized into :math:`[0, 2\pi)`.  Looking straight up or down (pitch of
                   :math:`\pm\pi/2`) is the gimbal lock singularity.
rotation matrix    A :math:`3\times 3` orthonormal matrix (or the upper left block of a :math:`4\times 4` affine
                   matrix) in the row vector convention, :math:`\mathbf{v}'=\mathbf{v}\mathbf{M}`.  These are the
                   transpose of column vector rotation matrices.
=================  =====================================================================================================

The :class:`.Quaternion` object is what most users will work with.  It offers factories for each of the above
representations, operator overloading so that rotations compose with ``*``, and interpolation through
:meth:`~.Quaternion.slerp` and :meth:`~.Quaternion.nlerp`.

The array level functions in :mod:`.rotations.core` are also exported here.  They accept single ``[x, y, z, w]``
quaternions or ``4 x n`` stacks of column quaternions, which makes them the right choice when working with many
rotations at once.
"""

import linkmath.rotations.core
import linkmath.rotations.quaternion

from linkmath.rotations.core import *
from linkmath.rotations.quaternion import Quaternion

__all__ = ['euler_to_quaternion', 'yaw_pitch_roll_to_quaternion', 'quaternion_to_euler', 'axis_angle_to_quaternion',
           'rotmat_to_quaternion', 'quaternion_to_rotmat', 'rotate_vector', 'GIMBAL_LOCK_THRESHOLD',
           'quaternion_dot', 'quaternion_length_squared', 'quaternion_length', 'quaternion_multiplication',
           'quaternion_conjugate', 'quaternion_inverse', 'quaternion_normalize', 'quaternion_concatenate',
           'quaternion_divide', 'lerp', 'nlerp', 'slerp', 'SLERP_EPSILON', 'Quaternion']
