# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`UserOptions` abstract dataclass, the base for every options class in
:mod:`linkmath`.
"""

from dataclasses import dataclass, fields

from typing import Any

from abc import ABCMeta


@dataclass
class UserOptions(metaclass=ABCMeta):
    """
    This is an abstract class used to create a dataclass of user options.

    These options are used to set defaults for the parameters of the class the options are associated with.  For
    instance :class:`.SmoothDamperOptions` contains the default options for the :class:`.SmoothDamper` class.

    Options classes follow the naming scheme ``<ClassName>Options`` and are supplied to the ``options`` keyword argument
    of ``ClassName.__init__``.  To copy the options onto a target use :meth:`apply_options`.

    for example:
        >>> @dataclass
        ... class ExampleOptions(UserOptions):
        ...     example_var: float = 12.5
        >>> class Example:
        ...     def __init__(self, options=None):
        ...         if options is None:
        ...             options = ExampleOptions()
        ...         options.apply_options(self)
        >>> Example().example_var
        12.5

    Usually you should use the :class:`.UserOptionConfigured` mixin instead of calling :meth:`apply_options`
    yourself.
    """

    def override_options(self):
        """
        Hook for subclasses that need to adjust an option before it is applied.

        This is called every time :attr:`options_dict` is built.  The default does nothing.
        """
        pass

    def apply_options(self, target: object) -> None:
        """
        Set the options as attributes of the target

        :param target: the instance that we are to update
        """

        for name, value in self.options_dict.items():
            setattr(target, name, value)

    @property
    def options_dict(self) -> dict[str, Any]:
        """
        The declared options and their current values.

        Only dataclass fields are included, so internal attributes and methods are ignored.
        """

        self.override_options()
        return {field.name: getattr(self, field.name) for field in fields(self)}
