"""
Builder which configures a copy of the instance it is given.
"""
from abc import ABCMeta
from collections.abc import Callable
from copy import copy, deepcopy
from typing import Self, TypeVar

from inline_builder.exception import BuilderError

T = TypeVar("T")


def _finalise(original: T, configured: T, result: T | None) -> T:
    if result is None:
        return configured
    if result is original:
        raise BuilderError("Configure function must not return the object being copied")
    if type(result) is not type(original):
        raise BuilderError(
            f"Configure function must return None or a {type(original).__name__!r} object, "
            f"got {type(result).__name__!r}"
        )
    return result


def build_copy(value: T, configure: Callable[[T], T | None], deep: bool = True) -> T:
    """
    Configure a copy of the given ``value`` and return the copy. ``value`` itself is never modified.

    ``configure`` may either modify the copy it is given in place and return None,
    or return a new object of the same type e.g. for frozen objects which cannot be modified.

    :param value: The instance to copy and configure.
    :param configure: Function which configures the copy.
    :param deep: When True, make a deep copy so that no nested state is shared with ``value``.
        When False, make a shallow copy.
    :return: The configured copy.
    :raise BuilderError: When ``configure`` returns ``value`` itself or an object of a different type.
    """
    this = deepcopy(value) if deep else copy(value)
    return _finalise(value, this, configure(this))


class BetterBuilder(metaclass=ABCMeta):
    """
    Mixin which allows objects to be configured inline on construction
    without ever modifying the object the configuration is called on.

    Works for mutable and frozen objects alike. For frozen objects, return a new object from the configure function.
    """

    __slots__ = ()

    def _builder_copy(self) -> Self:
        """Make the private copy to configure. Override to change how objects of this type are copied."""
        return deepcopy(self)

    def with_(self, configure: Callable[[Self], Self | None]) -> Self:
        """
        Configure a copy of this object and return the copy.

        :param configure: Function which takes the copy and sets it up.
        :return: The configured copy.
        :raise BuilderError: When ``configure`` returns this object or an object of a different type.
        """
        this = self._builder_copy()
        return _finalise(self, this, configure(this))
