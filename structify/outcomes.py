# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
Outcomes of the lossless (`structify.convert()`) and strict
(`structify.strict()`) conversions.

>>> Success({'a': 1})
Success({'a': 1})
>>> Success({'a': 1}) == Success({'a': 1})
True
>>> Success(42) == Unchanged(42)
False
>>> Unchanged(42).unwrap()
42

>>> from structify.exceptions import UnknownKeysError
>>> failure = Failure(UnknownKeysError(['extra']))
>>> failure.is_failure
True
>>> failure.unwrap()
Traceback (most recent call last):
  ...
structify.exceptions.UnknownKeysError: unknown keys: 'extra'
"""

from typing import Any

from structify.class_helpers import type_name


class Outcome:

    """
    The base class of `Success`, `Unchanged` and `Failure`.

    Instances are immutable; they are equal if they are of the same
    class and their payloads (values or errors) are equal.
    """

    __slots__ = ('_payload',)

    #: (overridden in `Failure`)
    is_failure = False

    def __init__(self, payload: Any):
        object.__setattr__(self, '_payload', payload)

    def __setattr__(self, name, value):
        raise AttributeError(f'{type_name(self)} objects are immutable')

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._payload == other._payload

    def __hash__(self):
        return hash((type(self), self._payload))

    def __repr__(self):
        return f'{type(self).__qualname__}({self._payload!r})'

    def unwrap(self) -> Any:
        raise NotImplementedError


class Success(Outcome):

    """The value has been converted (the result is a new object)."""

    __slots__ = ()

    @property
    def value(self) -> Any:
        return self._payload

    def unwrap(self) -> Any:
        return self._payload


class Unchanged(Outcome):

    """
    The value did not need any restructuring (the result is the input
    object itself).
    """

    __slots__ = ()

    @property
    def value(self) -> Any:
        return self._payload

    def unwrap(self) -> Any:
        return self._payload


class Failure(Outcome):

    """The conversion failed; `error` is a `ConversionError` instance."""

    __slots__ = ()

    is_failure = True

    def __init__(self, error: BaseException):
        if not isinstance(error, BaseException):
            raise TypeError(f'{error!r} is not an exception')
        super().__init__(error)

    @property
    def error(self) -> BaseException:
        return self._payload

    def unwrap(self) -> Any:
        raise self._payload
