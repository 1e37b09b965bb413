# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`UserOptionConfigured` mixin class that lets a class be configured from a
:class:`.UserOptions` dataclass and later be reset to that configuration.

Example:
    Basic usage of the UserOptionConfigured mixin::

        from dataclasses import dataclass

        from linkmath.utilities.options import UserOptions
        from linkmath.utilities.mixin_classes import UserOptionConfigured

        @dataclass
        class SpringOptions(UserOptions):
            stiffness: float = 5.0

        class Spring(UserOptionConfigured[SpringOptions], SpringOptions):
            def __init__(self, options: SpringOptions | None = None):
                super().__init__(SpringOptions, options=options)

        spring = Spring()
        spring.stiffness = 6.0
        spring.reset_settings()
        print(spring.stiffness)  # 5.0

.. Note::
    :class:`UserOptionConfigured` must come first in the bases so that it sees the options class later in the
    method resolution order.
"""

from typing import Generic, TypeVar

from linkmath.utilities.options import UserOptions


OptionsT = TypeVar("OptionsT", bound=UserOptions)
"""
Type variable bound to UserOptions for type safety
"""


class UserOptionConfigured(Generic[OptionsT]):
    """
    Mixin class providing :class:`.UserOptions` based configuration with reset capability.

    At initialization the options (or a default instance of the options type if none are given) are applied as
    attributes of the instance and remembered, so that :meth:`reset_settings` can restore them after the
    attributes have been changed.

    .. Warning::
        The options instance is stored by reference.  Modifying it after initialization changes what
        :meth:`reset_settings` restores.
    """

    def __init__(self, options_type: type[OptionsT], *args, options: OptionsT | None = None, **kwargs) -> None:
        """
        :param options_type: The type of the :class:`.UserOptions` to use
        :param options: An optional instance of `options_type` preconfigured.
        """

        super().__init__(*args, **kwargs)

        if options is None:
            options = options_type()

        options.apply_options(self)

        self._original_options: OptionsT = options
        """
        The original configuration for this class
        """

    def reset_settings(self) -> None:
        """
        Resets the class to the state it was originally initialized with.
        """

        self._original_options.apply_options(self)

    @property
    def original_options(self) -> OptionsT:
        """
        The options used during initialization.
        """
        return self._original_options
