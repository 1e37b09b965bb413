# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This package contains the array level quaternion routines that the :class:`.Quaternion` class and the vector classes
are built on.

It depends only on :mod:`linkmath.scalar_math` so that both the vectors and the quaternions can use it without
circular imports.  All functions here are pure mathematical operations on numpy arrays.
"""

import linkmath.rotations.core.conversions
import linkmath.rotations.core.quaternion_math

from linkmath.rotations.core.conversions import (euler_to_quaternion, yaw_pitch_roll_to_quaternion, quaternion_to_euler,
                                                 axis_angle_to_quaternion, rotmat_to_quaternion, quaternion_to_rotmat,
                                                 rotate_vector, GIMBAL_LOCK_THRESHOLD)

from linkmath.rotations.core.quaternion_math import (quaternion_dot, quaternion_length_squared, quaternion_length,
                                                     quaternion_multiplication, quaternion_conjugate,
                                                     quaternion_inverse, quaternion_normalize, quaternion_concatenate,
                                                     quaternion_divide, lerp, nlerp, slerp, SLERP_EPSILON)

__all__ = ['euler_to_quaternion', 'yaw_pitch_roll_to_quaternion', 'quaternion_to_euler', 'axis_angle_to_quaternion',
           'rotmat_to_quaternion', 'quaternion_to_rotmat', 'rotate_vector', 'GIMBAL_LOCK_THRESHOLD',
           'quaternion_dot', 'quaternion_length_squared', 'quaternion_length', 'quaternion_multiplication',
           'quaternion_conjugate', 'quaternion_inverse', 'quaternion_normalize', 'quaternion_concatenate',
           'quaternion_divide', 'lerp', 'nlerp', 'slerp', 'SLERP_EPSILON']
