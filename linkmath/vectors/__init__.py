# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This package provides the immutable :class:`.Vector2` and :class:`.Vector3` value types.

Both classes are frozen dataclasses of python floats.  They support the usual arithmetic operators, convert to numpy
arrays through :func:`numpy.asarray`, and can be rotated by a :class:`.Quaternion` or transformed by row vector affine
matrices.
"""

from linkmath.vectors.vector2 import Vector2
from linkmath.vectors.vector3 import Vector3

__all__ = ['Vector2', 'Vector3']
