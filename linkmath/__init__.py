# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
Welcome to linkmath

linkmath is the spatial math kernel of a small game and animation engine.  It provides

* :mod:`.scalar_math` for angle wrapping, clamping, the fast reciprocal square root, and spring damping
* :mod:`.interpolations` for the scalar blend functions used to ease animations
* :mod:`.vectors` for the immutable :class:`.Vector2` and :class:`.Vector3` types
* :mod:`.rotations` for the :class:`.Quaternion` type and the array level rotation routines
* :mod:`.damping` for :class:`.SmoothDamper`, which carries the velocity of a smooth damp between frames

Everything is double precision and follows IEEE-754 for degenerate input, so dividing by a zero length gives infinite
or NaN components instead of raising.
"""

import linkmath.scalar_math
import linkmath.interpolations

# rotations must be imported before vectors since the Quaternion class builds on both
import linkmath.rotations
import linkmath.vectors
import linkmath.damping

from linkmath.rotations import Quaternion
from linkmath.vectors import Vector2, Vector3
from linkmath.damping import SmoothDamper, SmoothDamperOptions

__all__ = ['Quaternion', 'Vector2', 'Vector3', 'SmoothDamper', 'SmoothDamperOptions']
