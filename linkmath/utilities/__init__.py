# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This package provides the configuration helpers shared by the stateful parts of linkmath.

:class:`.UserOptions` is the base dataclass for option sets and :class:`.UserOptionConfigured` is the mixin that
applies an option set to a class at construction and can restore it later with
:meth:`~.UserOptionConfigured.reset_settings`.
"""

from linkmath.utilities.options import UserOptions
from linkmath.utilities.mixin_classes import UserOptionConfigured

__all__ = ['UserOptions', 'UserOptionConfigured']
