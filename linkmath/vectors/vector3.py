# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
This module provides the :class:`Vector3` class, an immutable 3 component vector.

Besides the usual vector algebra, a :class:`Vector3` doubles as a container of Euler angles ``(pitch, yaw, roll)``
(rotations about x, y, and z) which can be turned into a :class:`.Quaternion` with the ``to_quaternion_*`` methods.
"""

from dataclasses import dataclass

from numbers import Real

from typing import Iterator, MutableSequence, Any, TYPE_CHECKING

import numpy as np

from linkmath.scalar_math import (ieee_divide, inverse_sqrt_fast, clamp01, to_radians, normalize_angle_in_degrees,
                                  normalize_angle_in_radians)

from linkmath.rotations.core.conversions import rotate_vector
from linkmath.rotations.core._helpers import _check_array_and_shape

from linkmath.vectors.vector2 import Vector2

from linkmath._typing import ARRAY_LIKE, DOUBLE_ARRAY

if TYPE_CHECKING:
    from linkmath.rotations.quaternion import Quaternion


@dataclass(frozen=True, slots=True, eq=False)
class Vector3:
    """
    An immutable 3 component vector of double precision floats.

    This behaves exactly like :class:`.Vector2` with a third component.  Every operation returns a new vector, the
    arithmetic operators are shorthand for the named methods, division follows IEEE-754, and equality is exact.

    A :class:`Vector3` can also be built from a :class:`.Vector2` and a z component:

        >>> from linkmath import Vector2, Vector3
        >>> str(Vector3.from_vector2(Vector2(1, 2), 3))
        '(1.0, 2.0, 3.0)'

    The 2 and 3 letter swizzle properties (``xz``, ``zyx`` and so on) return the components in the named order.
    """

    x: float = 0.0
    """
    The x component
    """

    y: float = 0.0
    """
    The y component
    """

    z: float = 0.0
    """
    The z component
    """

    __array_ufunc__ = None

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))
        object.__setattr__(self, 'z', float(self.z))

    @classmethod
    def from_scalar(cls, value: float) -> 'Vector3':
        """
        Creates a vector with all components set to value.
        """
        return cls(value, value, value)

    @classmethod
    def from_vector2(cls, xy: Vector2, z: float = 0.0) -> 'Vector3':
        return cls(xy.x, xy.y, z)

    @classmethod
    def from_array(cls, array: ARRAY_LIKE) -> 'Vector3':
        """
        Creates a vector from any array like object containing exactly 3 values.

        :raises ValueError: if the array does not contain exactly 3 values
        """

        array = np.asarray(array, dtype=np.float64).ravel()

        if array.size != 3:
            raise ValueError(f'A Vector3 needs exactly 3 values.  You gave {array.size}')

        return cls(array[0], array[1], array[2])

    @classmethod
    def create_with_x(cls, x: float) -> 'Vector3':
        return cls(x, 0.0, 0.0)

    @classmethod
    def create_with_y(cls, y: float) -> 'Vector3':
        return cls(0.0, y, 0.0)

    @classmethod
    def create_with_z(cls, z: float) -> 'Vector3':
        return cls(0.0, 0.0, z)

    @classmethod
    def create_with_xy(cls, x: float | Vector2, y: float | None = None) -> 'Vector3':
        """
        Creates a vector with the given x and y components (as 2 floats or a :class:`.Vector2`) and a zero z.
        """
        x, y = _split_pair(x, y)
        return cls(x, y, 0.0)

    @classmethod
    def create_with_xz(cls, x: float | Vector2, z: float | None = None) -> 'Vector3':
        x, z = _split_pair(x, z)
        return cls(x, 0.0, z)

    @classmethod
    def create_with_yz(cls, y: float | Vector2, z: float | None = None) -> 'Vector3':
        y, z = _split_pair(y, z)
        return cls(0.0, y, z)

    def to_array(self) -> DOUBLE_ARRAY:
        """
        Returns the components as a new numpy array of length 3.
        """
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def to_vector2(self) -> Vector2:
        """
        Drops the z component.
        """
        return Vector2(self.x, self.y)

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=dtype)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def component(self, index: int) -> float:
        """
        Returns the component at index, wrapping the index modulo 3.

        :param index: the index of the component
        :return: the component
        """

        return (self.x, self.y, self.z)[index % 3]

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
    def xzy(self) -> 'Vector3':
        return Vector3(self.x, self.z, self.y)

    @property
    def yxz(self) -> 'Vector3':
        return Vector3(self.y, self.x, self.z)

    @property
    def yzx(self) -> 'Vector3':
        return Vector3(self.y, self.z, self.x)

    @property
    def zxy(self) -> 'Vector3':
        return Vector3(self.z, self.x, self.y)

    @property
    def zyx(self) -> 'Vector3':
        return Vector3(self.z, self.y, self.x)

    def with_x(self, x: float) -> 'Vector3':
        return Vector3(x, self.y, self.z)

    def with_y(self, y: float) -> 'Vector3':
        return Vector3(self.x, y, self.z)

    def with_z(self, z: float) -> 'Vector3':
        return Vector3(self.x, self.y, z)

    def with_xy(self, x: float | Vector2, y: float | None = None) -> 'Vector3':
        """
        Replaces the x and y components, given either as 2 floats or as a :class:`.Vector2`.
        """
        x, y = _split_pair(x, y)
        return Vector3(x, y, self.z)

    def with_xz(self, x: float | Vector2, z: float | None = None) -> 'Vector3':
        x, z = _split_pair(x, z)
        return Vector3(x, self.y, z)

    def with_yz(self, y: float | Vector2, z: float | None = None) -> 'Vector3':
        y, z = _split_pair(y, z)
        return Vector3(self.x, y, z)

    def copy_to(self, array: MutableSequence[float] | np.ndarray, index: int = 0) -> None:
        """
        Writes the components into array starting at index.

        :param array: the array to write into
        :param index: where to write the x component
        """

        array[index] = self.x
        array[index + 1] = self.y
        array[index + 2] = self.z

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return float(np.sqrt(self.length_squared()))

    def length_fast(self) -> float:
        """
        Returns an approximation of the length computed with :func:`.inverse_sqrt_fast`.
        """

        length_squared = self.length_squared()

        return float(length_squared * inverse_sqrt_fast(length_squared))

    def square_rooted(self) -> 'Vector3':
        """
        Returns the component-wise square root.  Negative components give NaN.
        """

        with np.errstate(invalid='ignore'):
            return Vector3(np.sqrt(self.x), np.sqrt(self.y), np.sqrt(self.z))

    def square_rooted_fast(self) -> 'Vector3':
        return Vector3(self.x * inverse_sqrt_fast(self.x),
                       self.y * inverse_sqrt_fast(self.y),
                       self.z * inverse_sqrt_fast(self.z))

    def normalized(self) -> 'Vector3':
        """
        Returns a vector with the same direction and a length of 1.

        The zero vector gives NaN components.
        """
        return self.divide(self.length())

    def normalized_fast(self) -> 'Vector3':
        """
        Returns an approximately unit vector computed with :func:`.inverse_sqrt_fast`.
        """
        return self.multiply(inverse_sqrt_fast(self.length_squared()))

    def dot(self, other: 'Vector3') -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: 'Vector3') -> 'Vector3':
        r"""
        Returns the right handed cross product :math:`\mathbf{a}\times\mathbf{b}`.
        """
        return Vector3(self.y * other.z - self.z * other.y,
                       self.z * other.x - self.x * other.z,
                       self.x * other.y - self.y * other.x)

    def reflect(self, normal: 'Vector3') -> 'Vector3':
        """
        Reflects the vector off a surface with the given unit normal as ``v - 2*dot(v, n)*n``.
        """
        return self.subtract(normal.multiply(2.0 * self.dot(normal)))

    def vector_to(self, target: 'Vector3') -> 'Vector3':
        return target.subtract(self)

    def direction_to(self, target: 'Vector3') -> 'Vector3':
        return self.vector_to(target).normalized()

    def direction_fast_to(self, target: 'Vector3') -> 'Vector3':
        return self.vector_to(target).normalized_fast()

    def distance_to(self, target: 'Vector3') -> float:
        return self.vector_to(target).length()

    def distance_fast_to(self, target: 'Vector3') -> float:
        return self.vector_to(target).length_fast()

    def distance_squared_to(self, target: 'Vector3') -> float:
        return self.vector_to(target).length_squared()

    def min(self, other: 'Vector3') -> 'Vector3':
        return Vector3(self.x if self.x < other.x else other.x,
                       self.y if self.y < other.y else other.y,
                       self.z if self.z < other.z else other.z)

    def max(self, other: 'Vector3') -> 'Vector3':
        return Vector3(self.x if self.x > other.x else other.x,
                       self.y if self.y > other.y else other.y,
                       self.z if self.z > other.z else other.z)

    def abs(self) -> 'Vector3':
        return Vector3(abs(self.x), abs(self.y), abs(self.z))

    def clamp(self, minimum: 'Vector3', maximum: 'Vector3') -> 'Vector3':
        """
        Restricts each component between the components of minimum and maximum.

        The maximum is applied last so it wins when a minimum component is larger than the maximum component.  See
        :meth:`.Vector2.clamp`.
        """

        components = []
        for value, low, high in zip(self, minimum, maximum):
            value = low if low > value else value
            value = high if high < value else value
            components.append(value)

        return Vector3(*components)

    def lerp(self, other: 'Vector3', amount: float) -> 'Vector3':
        """
        Linearly interpolates as ``self + (other - self)*amount`` without clamping the amount.
        """
        return self.add(other.subtract(self).multiply(amount))

    def lerp_clamped(self, other: 'Vector3', amount: float) -> 'Vector3':
        return self.lerp(other, float(clamp01(amount)))

    def transform(self, matrix: ARRAY_LIKE) -> 'Vector3':
        r"""
        Transforms this position by a 4x4 row vector affine matrix.

        .. math::
            x' = xM_{11} + yM_{21} + zM_{31} + M_{41}\\
            y' = xM_{12} + yM_{22} + zM_{32} + M_{42}\\
            z' = xM_{13} + yM_{23} + zM_{33} + M_{43}

        :param matrix: the 4x4 matrix
        :return: the transformed position
        :raises ValueError: if the matrix is not 4x4
        """

        matrix = _check_single_matrix(matrix)

        return Vector3.from_array(self.to_array() @ matrix[:3, :3] + matrix[3, :3])

    def transform_normal(self, matrix: ARRAY_LIKE) -> 'Vector3':
        """
        Transforms this direction by the upper left 3x3 block of a 4x4 row vector matrix, ignoring the translation.

        :param matrix: the 4x4 matrix
        :return: the transformed direction
        :raises ValueError: if the matrix is not 4x4
        """

        matrix = _check_single_matrix(matrix)

        return Vector3.from_array(self.to_array() @ matrix[:3, :3])

    def rotate(self, rotation: 'Quaternion') -> 'Vector3':
        """
        Rotates this vector by a unit quaternion.

        See :func:`.rotate_vector`.
        """

        return Vector3.from_array(rotate_vector(rotation, self.to_array()))

    def normalize_angles_in_degrees(self) -> 'Vector3':
        """
        Treats the components as angles in degrees and wraps each into [0, 360).
        """
        return Vector3.from_array(normalize_angle_in_degrees(self.to_array()))

    def normalize_angles_in_radians(self) -> 'Vector3':
        """
        Treats the components as angles in radians and wraps each into [0, 2pi).
        """
        return Vector3.from_array(normalize_angle_in_radians(self.to_array()))

    def to_quaternion_from_radians(self) -> 'Quaternion':
        """
        Treats the components as Euler angles ``(pitch, yaw, roll)`` in radians and returns the matching rotation.

        See :meth:`.Quaternion.from_euler_in_radians`.
        """

        from linkmath.rotations.quaternion import Quaternion

        return Quaternion.from_euler_in_radians(self)

    def to_quaternion_from_degrees(self) -> 'Quaternion':
        """
        Treats the components as Euler angles ``(pitch, yaw, roll)`` in degrees and returns the matching rotation.
        """

        from linkmath.rotations.quaternion import Quaternion

        return Quaternion.from_euler_in_degrees(self)

    def to_quaternion_from_axis_in_radians(self, angle: float) -> 'Quaternion':
        """
        Treats this vector as a unit rotation axis and returns the rotation by angle (in radians) about it.

        The axis is not normalized.
        """

        from linkmath.rotations.quaternion import Quaternion

        return Quaternion.create_from_axis_angle(self, angle)

    def to_quaternion_from_axis_in_degrees(self, angle: float) -> 'Quaternion':

        from linkmath.rotations.quaternion import Quaternion

        return Quaternion.create_from_axis_angle(self, float(to_radians(angle)))

    def add(self, other: 'Vector3') -> 'Vector3':
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: 'Vector3') -> 'Vector3':
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def multiply(self, other: 'Vector3 | float') -> 'Vector3':
        """
        Multiplies component-wise by another vector or scales by a scalar.
        """

        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

        return Vector3(self.x * other, self.y * other, self.z * other)

    def divide(self, other: 'Vector3 | float') -> 'Vector3':
        """
        Divides component-wise by another vector or by a scalar following IEEE-754 rules.
        """

        if isinstance(other, Vector3):
            return Vector3(ieee_divide(self.x, other.x), ieee_divide(self.y, other.y), ieee_divide(self.z, other.z))

        return Vector3(ieee_divide(self.x, other), ieee_divide(self.y, other), ieee_divide(self.z, other))

    def negate(self) -> 'Vector3':
        return Vector3(-self.x, -self.y, -self.z)

    def equals(self, other: 'Vector3') -> bool:
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __add__(self, other: Any) -> 'Vector3':
        if isinstance(other, Vector3):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Any) -> 'Vector3':
        if isinstance(other, Vector3):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, other: Any) -> 'Vector3':
        if isinstance(other, (Vector3, Real)):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> 'Vector3':
        if isinstance(other, Real):
            return self.multiply(other)
        return NotImplemented

    def __truediv__(self, other: Any) -> 'Vector3':
        if isinstance(other, (Vector3, Real)):
            return self.divide(other)
        return NotImplemented

    def __neg__(self) -> 'Vector3':
        return self.negate()

    def __abs__(self) -> 'Vector3':
        return self.abs()

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Vector3):
            return self.equals(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __str__(self) -> str:
        return f'({self.x}, {self.y}, {self.z})'


def _split_pair(first: float | Vector2, second: float | None) -> tuple[float, float]:
    """
    Unpacks either a :class:`.Vector2` or a pair of floats.
    """

    if isinstance(first, Vector2):
        if second is not None:
            raise TypeError('Give either a Vector2 or 2 floats, not both')
        return first.x, first.y

    if second is None:
        raise TypeError('The second component is missing')

    return first, second


def _check_single_matrix(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:

    matrix = _check_array_and_shape(matrix, last_two_axes=((4, 4),))

    if matrix.ndim != 2:
        raise ValueError('Only a single matrix can be used to transform a vector')

    return matrix


Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.ONE = Vector3(1.0, 1.0, 1.0)
Vector3.NEGATIVE = Vector3(-1.0, -1.0, -1.0)
Vector3.HALF = Vector3(0.5, 0.5, 0.5)
Vector3.TWO = Vector3(2.0, 2.0, 2.0)
Vector3.POSITIVE_INFINITY = Vector3(np.inf, np.inf, np.inf)
Vector3.NEGATIVE_INFINITY = Vector3(-np.inf, -np.inf, -np.inf)

Vector3.UNIT_X = Vector3(1.0, 0.0, 0.0)
Vector3.UNIT_Y = Vector3(0.0, 1.0, 0.0)
Vector3.UNIT_Z = Vector3(0.0, 0.0, 1.0)

Vector3.RIGHT = Vector3(1.0, 0.0, 0.0)
Vector3.LEFT = Vector3(-1.0, 0.0, 0.0)
Vector3.UP = Vector3(0.0, 1.0, 0.0)
Vector3.DOWN = Vector3(0.0, -1.0, 0.0)
Vector3.FORWARD = Vector3(0.0, 0.0, 1.0)
Vector3.BACKWARD = Vector3(0.0, 0.0, -1.0)

Vector3.RIGHT_UP_FORWARD = Vector3.RIGHT + Vector3.UP + Vector3.FORWARD
Vector3.RIGHT_UP_BACKWARD = Vector3.RIGHT + Vector3.UP + Vector3.BACKWARD
Vector3.RIGHT_DOWN_FORWARD = Vector3.RIGHT + Vector3.DOWN + Vector3.FORWARD
Vector3.RIGHT_DOWN_BACKWARD = Vector3.RIGHT + Vector3.DOWN + Vector3.BACKWARD
Vector3.LEFT_UP_FORWARD = Vector3.LEFT + Vector3.UP + Vector3.FORWARD
Vector3.LEFT_UP_BACKWARD = Vector3.LEFT + Vector3.UP + Vector3.BACKWARD
Vector3.LEFT_DOWN_FORWARD = Vector3.LEFT + Vector3.DOWN + Vector3.FORWARD
Vector3.LEFT_DOWN_BACKWARD = Vector3.LEFT + Vector3.DOWN + Vector3.BACKWARD
