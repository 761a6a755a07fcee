"""
Builders which configure a value inline with a single configuration function.

Two flavours are available depending on how the configured value should relate to the value passed in:

* :py:class:`Builder` / :py:func:`build` configure the given instance in place and return that same instance.
* :py:class:`BetterBuilder` / :py:func:`build_copy` configure a private copy and return the copy,
  leaving the given instance untouched.
"""
from ._reference import Builder, build
from ._value import BetterBuilder, build_copy
from .extension import extend
