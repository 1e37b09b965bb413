# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
This module provides the :class:`Quaternion` class, the immutable rotation value used throughout linkmath.
"""

from dataclasses import dataclass

from numbers import Real

from typing import Iterator, Any

import numpy as np

from linkmath.scalar_math import to_radians, RAD_TO_DEG, DEG_15_IN_RAD, DEG_30_IN_RAD, DEG_45_IN_RAD, DEG_90_IN_RAD

from linkmath.rotations.core.conversions import (euler_to_quaternion, yaw_pitch_roll_to_quaternion,
                                                 quaternion_to_euler, axis_angle_to_quaternion, rotmat_to_quaternion,
                                                 quaternion_to_rotmat)
from linkmath.rotations.core.quaternion_math import (quaternion_multiplication, quaternion_inverse,
                                                     quaternion_normalize, slerp, lerp, nlerp)

from linkmath.vectors.vector2 import Vector2
from linkmath.vectors.vector3 import Vector3

from linkmath._typing import ARRAY_LIKE, DOUBLE_ARRAY


@dataclass(frozen=True, slots=True, eq=False)
class Quaternion:
    r"""
    An immutable rotation quaternion stored scalar last as ``(x, y, z, w)``.

    The :class:`Quaternion` class is the main way that rotations are communicated in linkmath.  The vector part
    ``(x, y, z)`` is the rotation axis scaled by :math:`\text{sin}(\theta/2)` and the scalar part ``w`` is
    :math:`\text{cos}(\theta/2)`.  Note that :math:`\mathbf{q}` and :math:`-\mathbf{q}` represent the same rotation.

    A quaternion can be built in a number of ways:

    * from its 4 components, ``Quaternion(x, y, z, w)``, or from an array with :meth:`from_array`
    * from a vector part and a scalar part with :meth:`from_parts`
    * from Euler angles with :meth:`from_euler_in_radians` or :meth:`from_euler_in_degrees`
    * from an axis and angle with :meth:`create_from_axis_angle` (or the ``from_*_axis_*`` helpers)
    * from yaw, pitch, and roll with :meth:`create_from_yaw_pitch_roll`
    * from a rotation matrix with :meth:`create_from_rotation_matrix`

    The class never normalizes on its own.  Operations that assume a unit quaternion (Euler extraction, rotating
    vectors) are only correct for unit inputs, so call :meth:`normalized` after repeated composition to remove
    drift.

    Operator overloading makes composing rotations easy.  ``q1 * q2`` is the Hamilton product, which applied to a
    vector performs ``q2`` first and then ``q1``::

        >>> from linkmath import Quaternion, Vector3
        >>> from numpy import pi
        >>> quarter_turn = Quaternion.create_from_axis_angle(Vector3.UNIT_Y, pi / 2)
        >>> turned = Vector3(0, 0, 1).rotate(quarter_turn)
        >>> turned.distance_to(Vector3.RIGHT) < 1e-12
        True

    :meth:`concatenate` is the reversed order convenience, ``q1.concatenate(q2) == q2 * q1``.  Quaternions can also be
    scaled with ``q * 2.0``, added, subtracted, negated, and divided (``q1 / q2 == q1 * q2.inverse()``).  Equality is
    exact component comparison.
    """

    x: float = 0.0
    """
    The x component of the vector part
    """

    y: float = 0.0
    """
    The y component of the vector part
    """

    z: float = 0.0
    """
    The z component of the vector part
    """

    w: float = 1.0
    """
    The scalar part
    """

    __array_ufunc__ = None

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))
        object.__setattr__(self, 'z', float(self.z))
        object.__setattr__(self, 'w', float(self.w))

    @classmethod
    def from_array(cls, array: ARRAY_LIKE) -> 'Quaternion':
        """
        Creates a quaternion from an array like ``[x, y, z, w]``.

        :raises ValueError: if the array does not contain exactly 4 values
        """

        array = np.asarray(array, dtype=np.float64).ravel()

        if array.size != 4:
            raise ValueError(f'A Quaternion needs exactly 4 values.  You gave {array.size}')

        return cls(array[0], array[1], array[2], array[3])

    @classmethod
    def from_parts(cls, vector_part: Vector3 | ARRAY_LIKE, scalar_part: float) -> 'Quaternion':
        """
        Creates a quaternion from its vector part ``(x, y, z)`` and its scalar part ``w``.
        """

        x, y, z = np.asarray(vector_part, dtype=np.float64).ravel()

        return cls(x, y, z, scalar_part)

    @classmethod
    def from_euler_in_radians(cls, angles: Vector3 | ARRAY_LIKE) -> 'Quaternion':
        """
        Creates the rotation from Euler angles ``(pitch, yaw, roll)`` in radians.

        The rotations are applied about z (roll) first, then x (pitch), then y (yaw).  See
        :func:`.euler_to_quaternion`.

        :param angles: the rotations about x, y, and z in radians
        :return: the rotation quaternion
        """

        return cls.from_array(euler_to_quaternion(np.asarray(angles, dtype=np.float64)))

    @classmethod
    def from_euler_in_degrees(cls, angles: Vector3 | ARRAY_LIKE) -> 'Quaternion':
        """
        Creates the rotation from Euler angles ``(pitch, yaw, roll)`` in degrees.
        """

        return cls.from_euler_in_radians(to_radians(np.asarray(angles, dtype=np.float64)))

    @classmethod
    def create_from_axis_angle(cls, axis: Vector3 | ARRAY_LIKE, angle: float) -> 'Quaternion':
        """
        Creates the rotation by angle (radians) about axis.

        The axis must already be unit length.  It is not checked or normalized.

        :param axis: the unit rotation axis
        :param angle: the rotation angle in radians
        :return: the rotation quaternion
        """

        return cls.from_array(axis_angle_to_quaternion(np.asarray(axis, dtype=np.float64), angle))

    @classmethod
    def create_from_yaw_pitch_roll(cls, yaw: float, pitch: float, roll: float) -> 'Quaternion':
        """
        Creates the rotation from yaw (about y), pitch (about x), and roll (about z) in radians.

        This is the same rotation as ``from_euler_in_radians((pitch, yaw, roll))``.
        """

        return cls.from_array(yaw_pitch_roll_to_quaternion(yaw, pitch, roll))

    @classmethod
    def create_from_rotation_matrix(cls, matrix: ARRAY_LIKE) -> 'Quaternion':
        """
        Extracts the rotation from a 3x3 rotation matrix or from the rotation block of a 4x4 affine matrix.

        The matrix is in the row vector convention used by :meth:`.Vector3.transform`.  See
        :func:`.rotmat_to_quaternion`.

        :param matrix: the 3x3 or 4x4 matrix
        :return: the rotation quaternion
        :raises ValueError: if the matrix is not 3x3 or 4x4
        """

        return cls.from_array(rotmat_to_quaternion(matrix))

    @classmethod
    def from_x_axis_in_radians(cls, angle: float) -> 'Quaternion':
        return cls.create_from_axis_angle(Vector3.UNIT_X, angle)

    @classmethod
    def from_y_axis_in_radians(cls, angle: float) -> 'Quaternion':
        return cls.create_from_axis_angle(Vector3.UNIT_Y, angle)

    @classmethod
    def from_z_axis_in_radians(cls, angle: float) -> 'Quaternion':
        return cls.create_from_axis_angle(Vector3.UNIT_Z, angle)

    @classmethod
    def from_x_axis_in_degrees(cls, angle: float) -> 'Quaternion':
        return cls.create_from_axis_angle(Vector3.UNIT_X, to_radians(angle))

    @classmethod
    def from_y_axis_in_degrees(cls, angle: float) -> 'Quaternion':
        return cls.create_from_axis_angle(Vector3.UNIT_Y, to_radians(angle))

    @classmethod
    def from_z_axis_in_degrees(cls, angle: float) -> 'Quaternion':
        return cls.create_from_axis_angle(Vector3.UNIT_Z, to_radians(angle))

    @classmethod
    def create_with_euler_x_in_radians(cls, x: float) -> 'Quaternion':
        return cls.from_euler_in_radians(Vector3.create_with_x(x))

    @classmethod
    def create_with_euler_y_in_radians(cls, y: float) -> 'Quaternion':
        return cls.from_euler_in_radians(Vector3.create_with_y(y))

    @classmethod
    def create_with_euler_z_in_radians(cls, z: float) -> 'Quaternion':
        return cls.from_euler_in_radians(Vector3.create_with_z(z))

    @classmethod
    def create_with_euler_xy_in_radians(cls, x: float | Vector2, y: float | None = None) -> 'Quaternion':
        return cls.from_euler_in_radians(Vector3.create_with_xy(x, y))

    @classmethod
    def create_with_euler_xz_in_radians(cls, x: float | Vector2, z: float | None = None) -> 'Quaternion':
        return cls.from_euler_in_radians(Vector3.create_with_xz(x, z))

    @classmethod
    def create_with_euler_yz_in_radians(cls, y: float | Vector2, z: float | None = None) -> 'Quaternion':
        return cls.from_euler_in_radians(Vector3.create_with_yz(y, z))

    @classmethod
    def create_with_euler_x_in_degrees(cls, x: float) -> 'Quaternion':
        return cls.from_euler_in_degrees(Vector3.create_with_x(x))

    @classmethod
    def create_with_euler_y_in_degrees(cls, y: float) -> 'Quaternion':
        return cls.from_euler_in_degrees(Vector3.create_with_y(y))

    @classmethod
    def create_with_euler_z_in_degrees(cls, z: float) -> 'Quaternion':
        return cls.from_euler_in_degrees(Vector3.create_with_z(z))

    @classmethod
    def create_with_euler_xy_in_degrees(cls, x: float | Vector2, y: float | None = None) -> 'Quaternion':
        return cls.from_euler_in_degrees(Vector3.create_with_xy(x, y))

    @classmethod
    def create_with_euler_xz_in_degrees(cls, x: float | Vector2, z: float | None = None) -> 'Quaternion':
        return cls.from_euler_in_degrees(Vector3.create_with_xz(x, z))

    @classmethod
    def create_with_euler_yz_in_degrees(cls, y: float | Vector2, z: float | None = None) -> 'Quaternion':
        return cls.from_euler_in_degrees(Vector3.create_with_yz(y, z))

    def to_array(self) -> DOUBLE_ARRAY:
        """
        Returns the components as a new numpy array ``[x, y, z, w]``.
        """
        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> np.ndarray:
        return np.array([self.x, self.y, self.z, self.w], dtype=dtype)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def component(self, index: int) -> float:
        """
        Returns the component at index, wrapping the index modulo 4.
        """

        return (self.x, self.y, self.z, self.w)[index % 4]

    @property
    def vector_part(self) -> Vector3:
        """
        The vector part ``(x, y, z)`` of the quaternion.

        This property is read only.
        """

        return Vector3(self.x, self.y, self.z)

    @property
    def scalar_part(self) -> float:
        """
        The scalar part ``w`` of the quaternion.

        This property is read only.
        """

        return self.w

    @property
    def xy(self) -> Vector2:
        return Vector2(self.x, self.y)

    @property
    def xz(self) -> Vector2:
        return Vector2(self.x, self.z)

    @property
    def yx(self) -> Vector2:
        return Vector2(self.y, self.x)

    @property
    def yz(self) -> Vector2:
        return Vector2(self.y, self.z)

    @property
    def zx(self) -> Vector2:
        return Vector2(self.z, self.x)

    @property
    def zy(self) -> Vector2:
        return Vector2(self.z, self.y)

    @property
    def xzy(self) -> Vector3:
        return Vector3(self.x, self.z, self.y)

    @property
    def yxz(self) -> Vector3:
        return Vector3(self.y, self.x, self.z)

    @property
    def yzx(self) -> Vector3:
        return Vector3(self.y, self.z, self.x)

    @property
    def zxy(self) -> Vector3:
        return Vector3(self.z, self.x, self.y)

    @property
    def zyx(self) -> Vector3:
        return Vector3(self.z, self.y, self.x)

    @property
    def is_identity(self) -> bool:
        """
        ``True`` if this is exactly ``(0, 0, 0, 1)``.
        """

        return self.equals(Quaternion.IDENTITY)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def length(self) -> float:
        return float(np.sqrt(self.length_squared()))

    def normalized(self) -> 'Quaternion':
        """
        Returns this quaternion scaled to unit length.

        The zero quaternion gives NaN components.  See :func:`.quaternion_normalize`.
        """

        return Quaternion.from_array(quaternion_normalize(self.to_array()))

    def conjugate(self) -> 'Quaternion':
        """
        Returns the quaternion with the vector part negated.

        For a unit quaternion this is the inverse rotation.
        """

        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def inverse(self) -> 'Quaternion':
        """
        Returns the conjugate divided by the squared length.

        The zero quaternion gives non-finite (NaN) components rather than raising.  See :func:`.quaternion_inverse`.
        """

        return Quaternion.from_array(quaternion_inverse(self.to_array()))

    def negated(self) -> 'Quaternion':
        """
        Returns the quaternion with every component negated, which is the same rotation.
        """

        return self.negate()

    def dot(self, other: 'Quaternion') -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def euler_in_radians(self) -> Vector3:
        """
        Extracts the Euler angles ``(pitch, yaw, roll)`` in radians, each normalized into :math:`[0, 2\\pi)`.

        Near the poles (looking straight up or down) the pitch is locked at :math:`\\pm\\pi/2` and the roll is 0.  See
        :func:`.quaternion_to_euler` for details.

        :return: the Euler angles as a :class:`.Vector3`
        """

        return Vector3.from_array(quaternion_to_euler(self.to_array()))

    def euler_in_degrees(self) -> Vector3:
        """
        Extracts the Euler angles ``(pitch, yaw, roll)`` in degrees, each normalized into [0, 360).
        """

        return self.euler_in_radians().multiply(RAD_TO_DEG)

    def with_euler_x_in_radians(self, x: float) -> 'Quaternion':
        """
        Returns the rotation with the same yaw and roll but with the given pitch in radians.
        """
        return Quaternion.from_euler_in_radians(self.euler_in_radians().with_x(x))

    def with_euler_y_in_radians(self, y: float) -> 'Quaternion':
        return Quaternion.from_euler_in_radians(self.euler_in_radians().with_y(y))

    def with_euler_z_in_radians(self, z: float) -> 'Quaternion':
        return Quaternion.from_euler_in_radians(self.euler_in_radians().with_z(z))

    def with_euler_xy_in_radians(self, x: float | Vector2, y: float | None = None) -> 'Quaternion':
        return Quaternion.from_euler_in_radians(self.euler_in_radians().with_xy(x, y))

    def with_euler_xz_in_radians(self, x: float | Vector2, z: float | None = None) -> 'Quaternion':
        return Quaternion.from_euler_in_radians(self.euler_in_radians().with_xz(x, z))

    def with_euler_yz_in_radians(self, y: float | Vector2, z: float | None = None) -> 'Quaternion':
        return Quaternion.from_euler_in_radians(self.euler_in_radians().with_yz(y, z))

    def with_euler_x_in_degrees(self, x: float) -> 'Quaternion':
        """
        Returns the rotation with the same yaw and roll but with the given pitch in degrees.
        """
        return Quaternion.from_euler_in_degrees(self.euler_in_degrees().with_x(x))

    def with_euler_y_in_degrees(self, y: float) -> 'Quaternion':
        return Quaternion.from_euler_in_degrees(self.euler_in_degrees().with_y(y))

    def with_euler_z_in_degrees(self, z: float) -> 'Quaternion':
        return Quaternion.from_euler_in_degrees(self.euler_in_degrees().with_z(z))

    def with_euler_xy_in_degrees(self, x: float | Vector2, y: float | None = None) -> 'Quaternion':
        return Quaternion.from_euler_in_degrees(self.euler_in_degrees().with_xy(x, y))

    def with_euler_xz_in_degrees(self, x: float | Vector2, z: float | None = None) -> 'Quaternion':
        return Quaternion.from_euler_in_degrees(self.euler_in_degrees().with_xz(x, z))

    def with_euler_yz_in_degrees(self, y: float | Vector2, z: float | None = None) -> 'Quaternion':
        return Quaternion.from_euler_in_degrees(self.euler_in_degrees().with_yz(y, z))

    def to_rotation_matrix(self, homogeneous: bool = True) -> DOUBLE_ARRAY:
        """
        Returns the row vector rotation matrix for this quaternion.

        By default this is a 4x4 affine matrix with no translation, suitable for :meth:`.Vector3.transform`.  Set
        homogeneous to ``False`` for just the 3x3 rotation block.  :meth:`create_from_rotation_matrix` inverts this.

        :param homogeneous: whether to return a 4x4 matrix instead of a 3x3 one
        :return: the rotation matrix
        """

        return quaternion_to_rotmat(self.to_array(), homogeneous=homogeneous)

    def rotate(self, vector: Vector3 | Vector2) -> Vector3 | Vector2:
        """
        Rotates a :class:`.Vector3` (or a :class:`.Vector2` in the z=0 plane) by this unit quaternion.

        This is the same as ``vector.rotate(self)``.
        """

        return vector.rotate(self)

    def slerp(self, other: 'Quaternion', amount: float) -> 'Quaternion':
        """
        Spherically interpolates from this quaternion to other along the shorter arc.

        See :func:`.quaternion_math.slerp`.
        """

        return Quaternion.from_array(slerp(self.to_array(), other.to_array(), amount))

    def lerp(self, other: 'Quaternion', amount: float) -> 'Quaternion':
        """
        Returns the normalized, hemisphere corrected difference ``normalize((s*other - self)*amount)``.

        .. warning::
            This does not add this quaternion back in, so it is not a conventional linear interpolation.  It is kept
            for compatibility.  Use :meth:`nlerp` or :meth:`slerp` to interpolate.  See
            :func:`.quaternion_math.lerp`.
        """

        return Quaternion.from_array(lerp(self.to_array(), other.to_array(), amount))

    def nlerp(self, other: 'Quaternion', amount: float) -> 'Quaternion':
        """
        Linearly interpolates from this quaternion to other along the shorter arc and normalizes the result.
        """

        return Quaternion.from_array(nlerp(self.to_array(), other.to_array(), amount))

    def concatenate(self, other: 'Quaternion') -> 'Quaternion':
        """
        Returns the rotation that applies this rotation first and other second, ``other * self``.
        """

        return other.multiply(self)

    def add(self, other: 'Quaternion') -> 'Quaternion':
        return Quaternion(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def subtract(self, other: 'Quaternion') -> 'Quaternion':
        return Quaternion(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def multiply(self, other: 'Quaternion | float') -> 'Quaternion':
        r"""
        Returns the Hamilton product with another quaternion, or this quaternion scaled by a scalar.

        The Hamilton product is

        .. math::
            \mathbf{q}_1\otimes\mathbf{q}_2 = \left[\begin{array}{c}
            \mathbf{v}_1\times\mathbf{v}_2 + w_2\mathbf{v}_1 + w_1\mathbf{v}_2\\
            w_1w_2 - \mathbf{v}_1^T\mathbf{v}_2\end{array}\right]

        See :func:`.quaternion_multiplication`.
        """

        if isinstance(other, Quaternion):
            return Quaternion.from_array(quaternion_multiplication(self.to_array(), other.to_array()))

        return Quaternion(self.x * other, self.y * other, self.z * other, self.w * other)

    def divide(self, other: 'Quaternion') -> 'Quaternion':
        """
        Returns ``self * other.inverse()``.
        """

        return self.multiply(other.inverse())

    def negate(self) -> 'Quaternion':
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def equals(self, other: 'Quaternion') -> bool:
        return self.x == other.x and self.y == other.y and self.z == other.z and self.w == other.w

    def __add__(self, other: Any) -> 'Quaternion':
        if isinstance(other, Quaternion):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Any) -> 'Quaternion':
        if isinstance(other, Quaternion):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, other: Any) -> 'Quaternion':
        if isinstance(other, (Quaternion, Real)):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> 'Quaternion':
        if isinstance(other, Real):
            return self.multiply(other)
        return NotImplemented

    def __truediv__(self, other: Any) -> 'Quaternion':
        if isinstance(other, Quaternion):
            return self.divide(other)
        return NotImplemented

    def __neg__(self) -> 'Quaternion':
        return self.negate()

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Quaternion):
            return self.equals(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z, self.w))

    def __str__(self) -> str:
        return f'(X:{self.x} Y:{self.y} Z:{self.z} W:{self.w})'


def _axis_rotation(axis: int, angle: float) -> Quaternion:
    components = [0.0, 0.0, 0.0, np.cos(angle / 2)]
    components[axis] = np.sin(angle / 2)
    return Quaternion(*components)


Quaternion.ZERO = Quaternion(0.0, 0.0, 0.0, 0.0)
Quaternion.IDENTITY = Quaternion(0.0, 0.0, 0.0, 1.0)
Quaternion.ONE = Quaternion(1.0, 1.0, 1.0, 1.0)
Quaternion.NEGATIVE = Quaternion(-1.0, -1.0, -1.0, -1.0)
Quaternion.HALF = Quaternion(0.5, 0.5, 0.5, 0.5)
Quaternion.POSITIVE_INFINITY = Quaternion(np.inf, np.inf, np.inf, np.inf)
Quaternion.NEGATIVE_INFINITY = Quaternion(-np.inf, -np.inf, -np.inf, -np.inf)

Quaternion.UNIT_X = Quaternion(1.0, 0.0, 0.0, 0.0)
Quaternion.UNIT_Y = Quaternion(0.0, 1.0, 0.0, 0.0)
Quaternion.UNIT_Z = Quaternion(0.0, 0.0, 1.0, 0.0)
Quaternion.UNIT_W = Quaternion(0.0, 0.0, 0.0, 1.0)

# the 180 degree rotations are exact rather than computed so that w is exactly 0
Quaternion.X15 = _axis_rotation(0, DEG_15_IN_RAD)
Quaternion.X30 = _axis_rotation(0, DEG_30_IN_RAD)
Quaternion.X45 = _axis_rotation(0, DEG_45_IN_RAD)
Quaternion.X90 = _axis_rotation(0, DEG_90_IN_RAD)
Quaternion.X180 = Quaternion(1.0, 0.0, 0.0, 0.0)

Quaternion.Y15 = _axis_rotation(1, DEG_15_IN_RAD)
Quaternion.Y30 = _axis_rotation(1, DEG_30_IN_RAD)
Quaternion.Y45 = _axis_rotation(1, DEG_45_IN_RAD)
Quaternion.Y90 = _axis_rotation(1, DEG_90_IN_RAD)
Quaternion.Y180 = Quaternion(0.0, 1.0, 0.0, 0.0)

Quaternion.Z15 = _axis_rotation(2, DEG_15_IN_RAD)
Quaternion.Z30 = _axis_rotation(2, DEG_30_IN_RAD)
Quaternion.Z45 = _axis_rotation(2, DEG_45_IN_RAD)
Quaternion.Z90 = _axis_rotation(2, DEG_90_IN_RAD)
Quaternion.Z180 = Quaternion(0.0, 0.0, 1.0, 0.0)
