# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
This module provides the :class:`Vector2` class, an immutable 2 component vector.
"""

from dataclasses import dataclass

from numbers import Real

from typing import Iterator, MutableSequence, Any, TYPE_CHECKING

import numpy as np

from linkmath.scalar_math import ieee_divide, inverse_sqrt_fast, clamp01

from linkmath.rotations.core.conversions import rotate_vector
from linkmath.rotations.core._helpers import _check_array_and_shape

from linkmath._typing import ARRAY_LIKE, DOUBLE_ARRAY

if TYPE_CHECKING:
    from linkmath.vectors.vector3 import Vector3
    from linkmath.rotations.quaternion import Quaternion


@dataclass(frozen=True, slots=True, eq=False)
class Vector2:
    """
    An immutable 2 component vector of double precision floats.

    Instances are values: every operation returns a new :class:`Vector2` and nothing is ever modified in place.  The
    components are converted to python floats at construction, so ``Vector2(1, 2)`` stores ``1.0`` and ``2.0``.

    The arithmetic operators are shorthand for the named methods:

    ==================  ==================================
    Operator            Method
    ==================  ==================================
    ``a + b``           :meth:`add`
    ``a - b``           :meth:`subtract`
    ``a * b``           :meth:`multiply` (component-wise)
    ``a * 2``/``2 * a`` :meth:`multiply` with a scalar
    ``a / b``           :meth:`divide` (component-wise)
    ``-a``              :meth:`negate`
    ``a == b``          :meth:`equals` (exact)
    ==================  ==================================

    Every method can also be called through the class as a free function, for instance ``Vector2.dot(a, b)``.

    Division follows IEEE-754, so dividing by a zero component gives an infinite (or NaN) component instead of
    raising.  Equality is exact component comparison.  Use :func:`.approximately` for a tolerance based comparison.

    Vectors can be unpacked (``x, y = vector``) and converted to numpy arrays with :func:`numpy.asarray`.
    """

    x: float = 0.0
    """
    The x component
    """

    y: float = 0.0
    """
    The y component
    """

    # keep numpy from treating vectors as arrays in mixed arithmetic so our own operators are used
    __array_ufunc__ = None

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    @classmethod
    def from_scalar(cls, value: float) -> 'Vector2':
        """
        Creates a vector with both components set to value.
        """
        return cls(value, value)

    @classmethod
    def from_array(cls, array: ARRAY_LIKE) -> 'Vector2':
        """
        Creates a vector from any array like object containing exactly 2 values.

        :raises ValueError: if the array does not contain exactly 2 values
        """

        array = np.asarray(array, dtype=np.float64).ravel()

        if array.size != 2:
            raise ValueError(f'A Vector2 needs exactly 2 values.  You gave {array.size}')

        return cls(array[0], array[1])

    @classmethod
    def create_with_x(cls, x: float) -> 'Vector2':
        return cls(x, 0.0)

    @classmethod
    def create_with_y(cls, y: float) -> 'Vector2':
        return cls(0.0, y)

    def to_array(self) -> DOUBLE_ARRAY:
        """
        Returns the components as a new numpy array of length 2.
        """
        return np.array([self.x, self.y], dtype=np.float64)

    def to_vector3(self, z: float = 0.0) -> 'Vector3':
        """
        Extends this vector to a :class:`.Vector3` with the given z component.
        """

        from linkmath.vectors.vector3 import Vector3

        return Vector3(self.x, self.y, z)

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> np.ndarray:
        return np.array([self.x, self.y], dtype=dtype)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    def component(self, index: int) -> float:
        """
        Returns the component at index, wrapping the index modulo 2.

        Out of range indices never raise: ``component(2)`` is x and ``component(-1)`` is y.

        :param index: the index of the component
        :return: the component
        """

        return self.y if index % 2 else self.x

    @property
    def xy(self) -> 'Vector2':
        return Vector2(self.x, self.y)

    @property
    def yx(self) -> 'Vector2':
        return Vector2(self.y, self.x)

    def with_x(self, x: float) -> 'Vector2':
        return Vector2(x, self.y)

    def with_y(self, y: float) -> 'Vector2':
        return Vector2(self.x, y)

    def copy_to(self, array: MutableSequence[float] | np.ndarray, index: int = 0) -> None:
        """
        Writes the components into array starting at index.

        :param array: the array to write into
        :param index: where to write the x component
        """

        array[index] = self.x
        array[index + 1] = self.y

    def length_squared(self) -> float:
        """
        Returns the squared length of the vector.

        Prefer this over :meth:`length` when you only need to compare lengths since it avoids the square root.
        """
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return float(np.sqrt(self.length_squared()))

    def length_fast(self) -> float:
        """
        Returns an approximation of the length computed with :func:`.inverse_sqrt_fast`.

        This is only accurate to about 0.2% and is not bit identical to :meth:`length`.
        """

        length_squared = self.length_squared()

        return float(length_squared * inverse_sqrt_fast(length_squared))

    def square_rooted(self) -> 'Vector2':
        """
        Returns the component-wise square root.  Negative components give NaN.
        """

        with np.errstate(invalid='ignore'):
            return Vector2(np.sqrt(self.x), np.sqrt(self.y))

    def square_rooted_fast(self) -> 'Vector2':
        """
        Returns an approximation of the component-wise square root computed with :func:`.inverse_sqrt_fast`.
        """

        return Vector2(self.x * inverse_sqrt_fast(self.x), self.y * inverse_sqrt_fast(self.y))

    def normalized(self) -> 'Vector2':
        """
        Returns a vector with the same direction and a length of 1.

        The zero vector gives NaN components.
        """
        return self.divide(self.length())

    def normalized_fast(self) -> 'Vector2':
        """
        Returns an approximately unit vector computed with :func:`.inverse_sqrt_fast`.

        This trades precision for speed and is not bit identical to :meth:`normalized`.  The zero vector gives the zero
        vector.
        """
        return self.multiply(inverse_sqrt_fast(self.length_squared()))

    def perpendicular_right(self) -> 'Vector2':
        """
        Returns the vector rotated by 90 degrees clockwise.
        """
        return Vector2(self.y, -self.x)

    def perpendicular_left(self) -> 'Vector2':
        """
        Returns the vector rotated by 90 degrees counter clockwise.
        """
        return Vector2(-self.y, self.x)

    def dot(self, other: 'Vector2') -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: 'Vector2') -> float:
        """
        Returns the 2D cross product (the determinant of the 2x2 matrix with the vectors as rows).

        This is the z component of the 3D cross product of the vectors extended with a 0 z component.
        """
        return self.x * other.y - self.y * other.x

    def reflect(self, normal: 'Vector2') -> 'Vector2':
        """
        Reflects the vector off a surface with the given normal as ``v - 2*dot(v, n)*n``.

        :param normal: the unit normal of the surface
        :return: the reflected vector
        """
        return self.subtract(normal.multiply(2.0 * self.dot(normal)))

    def vector_to(self, target: 'Vector2') -> 'Vector2':
        """
        Returns the vector from this point to the target point.
        """
        return target.subtract(self)

    def direction_to(self, target: 'Vector2') -> 'Vector2':
        return self.vector_to(target).normalized()

    def direction_fast_to(self, target: 'Vector2') -> 'Vector2':
        return self.vector_to(target).normalized_fast()

    def distance_to(self, target: 'Vector2') -> float:
        return self.vector_to(target).length()

    def distance_fast_to(self, target: 'Vector2') -> float:
        return self.vector_to(target).length_fast()

    def distance_squared_to(self, target: 'Vector2') -> float:
        return self.vector_to(target).length_squared()

    def min(self, other: 'Vector2') -> 'Vector2':
        """
        Returns the component-wise minimum.
        """
        return Vector2(self.x if self.x < other.x else other.x,
                       self.y if self.y < other.y else other.y)

    def max(self, other: 'Vector2') -> 'Vector2':
        """
        Returns the component-wise maximum.
        """
        return Vector2(self.x if self.x > other.x else other.x,
                       self.y if self.y > other.y else other.y)

    def abs(self) -> 'Vector2':
        """
        Returns the component-wise absolute value.
        """
        return Vector2(abs(self.x), abs(self.y))

    def clamp(self, minimum: 'Vector2', maximum: 'Vector2') -> 'Vector2':
        """
        Restricts each component to lie between the corresponding components of minimum and maximum.

        The minimum is applied first and the maximum second, matching shader language ``clamp``.  This means that if
        a minimum component is larger than the maximum component the maximum wins.  For example clamping x with a
        minimum of 5 and a maximum of 1 always gives 1.  This order is intentional.

        :param minimum: the component-wise lower bound
        :param maximum: the component-wise upper bound
        :return: the clamped vector
        """

        x = self.x
        x = minimum.x if minimum.x > x else x
        x = maximum.x if maximum.x < x else x

        y = self.y
        y = minimum.y if minimum.y > y else y
        y = maximum.y if maximum.y < y else y

        return Vector2(x, y)

    def lerp(self, other: 'Vector2', amount: float) -> 'Vector2':
        """
        Linearly interpolates as ``self + (other - self)*amount`` without clamping the amount.
        """
        return self.add(other.subtract(self).multiply(amount))

    def lerp_clamped(self, other: 'Vector2', amount: float) -> 'Vector2':
        """
        Linearly interpolates with the amount clamped to [0, 1] first.
        """
        return self.lerp(other, float(clamp01(amount)))

    def transform(self, matrix: ARRAY_LIKE) -> 'Vector2':
        r"""
        Transforms this position by a row vector affine matrix.

        Both 3x2 matrices (translation in the last row) and 4x4 matrices (translation in the first 2 columns of the
        last row) are accepted:

        .. math::
            x' = xM_{11} + yM_{21} + t_x\\
            y' = xM_{12} + yM_{22} + t_y

        :param matrix: the 3x2 or 4x4 matrix
        :return: the transformed position
        :raises ValueError: if the matrix is not 3x2 or 4x4
        """

        matrix = _check_array_and_shape(matrix, last_two_axes=((3, 2), (4, 4)))

        if matrix.ndim != 2:
            raise ValueError('Only a single matrix can be used to transform a vector')

        translation = matrix[-1, :2]

        return Vector2(self.x * matrix[0, 0] + self.y * matrix[1, 0] + translation[0],
                       self.x * matrix[0, 1] + self.y * matrix[1, 1] + translation[1])

    def transform_normal(self, matrix: ARRAY_LIKE) -> 'Vector2':
        """
        Transforms this direction by a 3x2 or 4x4 row vector matrix, ignoring the translation.

        :param matrix: the 3x2 or 4x4 matrix
        :return: the transformed direction
        :raises ValueError: if the matrix is not 3x2 or 4x4
        """

        matrix = _check_array_and_shape(matrix, last_two_axes=((3, 2), (4, 4)))

        if matrix.ndim != 2:
            raise ValueError('Only a single matrix can be used to transform a vector')

        return Vector2(self.x * matrix[0, 0] + self.y * matrix[1, 0],
                       self.x * matrix[0, 1] + self.y * matrix[1, 1])

    def rotate(self, rotation: 'Quaternion') -> 'Vector2':
        """
        Rotates this vector (as a 3D vector in the z=0 plane) by a unit quaternion and drops the z component.

        See :func:`.rotate_vector`.

        :param rotation: the quaternion to rotate by
        :return: the x and y components of the rotated vector
        """

        rotated = rotate_vector(rotation, [self.x, self.y, 0.0])

        return Vector2(rotated[0], rotated[1])

    def add(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self.x + other.x, self.y + other.y)

    def subtract(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self.x - other.x, self.y - other.y)

    def multiply(self, other: 'Vector2 | float') -> 'Vector2':
        """
        Multiplies component-wise by another vector or scales by a scalar.
        """

        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)

        return Vector2(self.x * other, self.y * other)

    def divide(self, other: 'Vector2 | float') -> 'Vector2':
        """
        Divides component-wise by another vector or by a scalar following IEEE-754 rules.
        """

        if isinstance(other, Vector2):
            return Vector2(ieee_divide(self.x, other.x), ieee_divide(self.y, other.y))

        return Vector2(ieee_divide(self.x, other), ieee_divide(self.y, other))

    def negate(self) -> 'Vector2':
        return Vector2(-self.x, -self.y)

    def equals(self, other: 'Vector2') -> bool:
        """
        Compares the components exactly.  NaN components are never equal.
        """
        return self.x == other.x and self.y == other.y

    def __add__(self, other: Any) -> 'Vector2':
        if isinstance(other, Vector2):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Any) -> 'Vector2':
        if isinstance(other, Vector2):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, other: Any) -> 'Vector2':
        if isinstance(other, (Vector2, Real)):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> 'Vector2':
        if isinstance(other, Real):
            return self.multiply(other)
        return NotImplemented

    def __truediv__(self, other: Any) -> 'Vector2':
        if isinstance(other, (Vector2, Real)):
            return self.divide(other)
        return NotImplemented

    def __neg__(self) -> 'Vector2':
        return self.negate()

    def __abs__(self) -> 'Vector2':
        return self.abs()

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Vector2):
            return self.equals(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        return f'({self.x}, {self.y})'


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.ONE = Vector2(1.0, 1.0)
Vector2.NEGATIVE = Vector2(-1.0, -1.0)
Vector2.HALF = Vector2(0.5, 0.5)
Vector2.TWO = Vector2(2.0, 2.0)
Vector2.POSITIVE_INFINITY = Vector2(np.inf, np.inf)
Vector2.NEGATIVE_INFINITY = Vector2(-np.inf, -np.inf)

Vector2.UNIT_X = Vector2(1.0, 0.0)
Vector2.UNIT_Y = Vector2(0.0, 1.0)

Vector2.RIGHT = Vector2(1.0, 0.0)
Vector2.LEFT = Vector2(-1.0, 0.0)
Vector2.UP = Vector2(0.0, 1.0)
Vector2.DOWN = Vector2(0.0, -1.0)

Vector2.RIGHT_UP = Vector2.RIGHT + Vector2.UP
Vector2.RIGHT_DOWN = Vector2.RIGHT + Vector2.DOWN
Vector2.LEFT_UP = Vector2.LEFT + Vector2.UP
Vector2.LEFT_DOWN = Vector2.LEFT + Vector2.DOWN
