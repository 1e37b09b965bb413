# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`SmoothDamper` class, a stateful wrapper around :func:`.smooth_damp` and
:func:`.smooth_damp_angle` that keeps track of the velocity between calls.

Use
---

The damper is configured with a :class:`SmoothDamperOptions` instance and then stepped once per frame/tick::

    >>> from linkmath.damping import SmoothDamper, SmoothDamperOptions
    >>> damper = SmoothDamper(options=SmoothDamperOptions(smooth_time=0.25))
    >>> position = 0.0
    >>> for _ in range(120):
    ...     position = damper.step(position, 10.0, 1/60)

The damper works on scalars or on numpy arrays (for instance a position vector converted with
:func:`numpy.asarray`), in which case :attr:`SmoothDamper.velocity` becomes an array of the same shape.
"""

import logging

from dataclasses import dataclass

import numpy as np

from linkmath.scalar_math import smooth_damp, smooth_damp_angle

from linkmath.utilities.options import UserOptions
from linkmath.utilities.mixin_classes import UserOptionConfigured

from linkmath._typing import SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


@dataclass
class SmoothDamperOptions(UserOptions):
    """
    This dataclass serves as one way to control the settings for the :class:`.SmoothDamper` class.

    You can set any of the options on an instance of this dataclass and pass it to the :class:`.SmoothDamper` class
    at initialization (or through the method :meth:`.SmoothDamper.reset_settings`) to set the settings on the class.
    This class is the preferred way of setting options on the class due to ease of use in IDEs.
    """

    smooth_time: float = 0.3
    """
    Approximately the time it will take to reach the target.

    Smaller values reach the target faster.  Values below :data:`.SMOOTH_TIME_FLOOR` are raised to it.
    """

    max_speed: float = np.inf
    """
    The maximum speed to move at.  By default the speed is unlimited.
    """

    angular: bool = False
    """
    Whether the damped value is an angle in degrees.

    When this is ``True`` :func:`.smooth_damp_angle` is used so the damper always takes the short way around the
    0/360 boundary.
    """


class SmoothDamper(UserOptionConfigured[SmoothDamperOptions], SmoothDamperOptions):
    """
    This class gradually moves a value towards a target using a critically damped spring, remembering the velocity
    from one step to the next.

    Each call to :meth:`step` passes the stored :attr:`velocity` into :func:`.smooth_damp` (or
    :func:`.smooth_damp_angle` if :attr:`angular` is set) and stores the velocity it returns.  Call :meth:`reset` to
    clear the velocity, for instance when the value is teleported.
    """

    def __init__(self, options: SmoothDamperOptions | None = None, velocity: SCALAR_OR_ARRAY = 0.0):
        """
        :param options: the options to configure the damper with
        :param velocity: the initial velocity
        """

        super().__init__(SmoothDamperOptions, options=options)

        self.velocity: F_SCALAR_OR_ARRAY = velocity
        """
        The velocity after the last call to :meth:`step`
        """

    def step(self, current: SCALAR_OR_ARRAY, target: SCALAR_OR_ARRAY,
             delta_time: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
        """
        Advances the spring by delta_time.

        :param current: the current value(s)
        :param target: the value(s) we are trying to reach
        :param delta_time: the time since the last step
        :return: the new value(s) which should be passed back as current on the next step
        """

        damp = smooth_damp_angle if self.angular else smooth_damp

        value, self.velocity = damp(current, target, self.velocity, self.smooth_time, delta_time,
                                    max_speed=self.max_speed)

        return value

    def reset(self, velocity: SCALAR_OR_ARRAY = 0.0) -> None:
        """
        Resets the stored velocity.

        The options are left as they are.  Use :meth:`reset_settings` to restore those.

        :param velocity: the velocity to start from
        """

        _LOGGER.debug(f'Resetting smooth damper velocity from {self.velocity} to {velocity}')

        self.velocity = velocity
