"""
Builder which configures the instance it is given.
"""
from abc import ABCMeta
from collections.abc import Callable
from typing import Any, Self, TypeVar

T = TypeVar("T")


def build(value: T, configure: Callable[[T], Any]) -> T:
    """
    Configure the given ``value`` in place and return it.

    Any other reference to ``value`` will also see the changes made by ``configure``.
    Exceptions raised by ``configure`` are not handled and may leave ``value`` partially configured.

    :param value: The instance to configure.
    :param configure: Function which configures the instance. Its return value is ignored.
    :return: The same ``value`` instance.
    """
    configure(value)
    return value


class Builder(metaclass=ABCMeta):
    """
    Mixin which allows objects to be configured inline on construction.

    .. code-block:: python

        view = TableView().with_(lambda v: v.configure_rows(10))
    """

    __slots__ = ()

    def with_(self, configure: Callable[[Self], Any]) -> Self:
        """
        Configure this object in place and return it.

        :param configure: Function which takes this object and sets it up.
        :return: This object.
        """
        return build(self, configure)
