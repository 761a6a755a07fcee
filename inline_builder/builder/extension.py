"""
Retroactively opt existing classes in to inline configuration.
"""
import logging
from typing import Literal, TypeVar

from inline_builder.builder._reference import Builder
from inline_builder.builder._value import BetterBuilder
from inline_builder.exception import BuilderError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)

BUILDERS: dict[str, type[Builder | BetterBuilder]] = {
    "reference": Builder,
    "value": BetterBuilder,
}


def extend(cls: T, semantics: Literal["reference", "value"] = "reference") -> T:
    """
    Add the ``with_`` method to an existing class which cannot or should not inherit from a builder mixin
    e.g. classes from third-party packages.

    The class is also registered as a virtual subclass of the relevant builder
    so that ``isinstance`` checks against the builder pass for its instances.
    May be used as a class decorator when ``semantics`` is left as default.

    :param cls: The class to extend.
    :param semantics: 'reference' to configure instances in place as :py:class:`Builder` does,
        'value' to configure copies as :py:class:`BetterBuilder` does.
    :return: The extended class.
    :raise BuilderError: When ``cls`` is not a class, the semantics are not recognised,
        the class already defines its own ``with_`` or the class does not accept new attributes e.g. built-in types.
    """
    if not isinstance(cls, type):
        raise BuilderError(f"Only classes can be extended, got {type(cls).__name__!r}")
    if semantics not in BUILDERS:
        raise BuilderError(f"Unrecognised semantics {semantics!r}. Choose from: {', '.join(BUILDERS)}")
    builder = BUILDERS[semantics]

    if issubclass(cls, builder) and getattr(cls, "with_", None) is getattr(builder, "with_"):
        return cls
    if hasattr(cls, "with_"):
        raise BuilderError(f"{cls.__name__} already defines 'with_' and cannot be extended")

    try:
        cls.with_ = builder.with_
        if builder is BetterBuilder and not hasattr(cls, "_builder_copy"):
            cls._builder_copy = BetterBuilder._builder_copy
    except TypeError as ex:
        raise BuilderError(
            f"{cls.__name__} does not accept new attributes. Use the build functions for this type instead"
        ) from ex

    builder.register(cls)
    logger.debug(f"Extended {cls.__qualname__} with {semantics} semantics builder")
    return cls
