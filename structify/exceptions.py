# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
The `structify` package's public exception classes.
"""

import collections
import contextlib
from collections.abc import (
    Generator,
    Hashable,
    Iterable,
)

from structify.class_helpers import (
    attr_repr,
    type_name,
)
from structify.common_helpers import ascii_str


class StructifyError(Exception):
    """The base class of all `structify`-specific exceptions."""


class NestedConfigError(StructifyError, TypeError):

    """
    Raised when a nested conversion configuration is malformed (e.g.,
    when it is neither a mapping nor an iterable of key/rule pairs).

    It signals a programming error, not a problem with the converted
    data, so it is raised by *all* conversion functions (including the
    lossy `structify.coerce()`).
    """


class ConversionError(StructifyError, ValueError):

    """
    The base class of exceptions that represent a failed conversion.

    Instances are not raised out of `structify.convert()` or
    `structify.strict()` (they are *returned*, carried by
    `structify.Failure` outcomes); they are raised by the
    `structify.convert_unwrap()` and `structify.strict_unwrap()`
    functions.

    An additional feature: the `sublocation()` class method that
    returns a (single-use) context manager, which is used by the
    conversion engines when entering conversion of some nested stuff
    whose *relative location* (within its parent structure) is a key
    or an index. Thanks to that, the `str()` representation of any
    `ConversionError` raised within one or more `with` blocks of such
    context managers is automatically prepended with a *location path*
    pointing to the problematic item in the whole converted structure.

    For example:

    >>> with ConversionError.sublocation('users'):
    ...     with ConversionError.sublocation(3):
    ...         with ConversionError.sublocation('address'):
    ...             raise ConversionError('something is wrong')
    ...
    Traceback (most recent call last):
      ...
    structify.exceptions.ConversionError: [users.3.address] something is wrong

    >>> str(ConversionError())
    'conversion failed'
    """

    #: (overridable in subclasses)
    default_message = 'conversion failed'

    def __init__(self, *args):
        super().__init__(*args)
        self._location_path = collections.deque()

    @classmethod
    @contextlib.contextmanager
    def sublocation(cls, key_or_index: Hashable, /) -> Generator[None, None, None]:
        try:
            yield
        except ConversionError as exc:
            exc._location_path.appendleft(key_or_index)
            raise

    @property
    def location_path(self) -> tuple:
        return tuple(self._location_path)

    __repr__ = attr_repr('args', '_location_path')

    def __str__(self):
        return self._get_location_prefix() + self.get_message()

    def get_message(self) -> str:
        if self.args:
            return super().__str__()
        return self.default_message

    def _get_location_prefix(self):
        if self._location_path:
            path_as_ascii_str = '.'.join(map(self._format_path_item, self._location_path))
            return '[{}] '.format(path_as_ascii_str)
        return ''

    @staticmethod
    def _format_path_item(path_item):
        if isinstance(path_item, (str, int)):
            return ascii_str(path_item)
        return ascii_str(repr(path_item))


def _format_target(target):
    if isinstance(target, type):
        return type_name(target)
    return ascii_str(repr(target))


class NotARecordTypeError(ConversionError):

    """
    Raised when a conversion target does not denote a constructible
    record type (see: `structify.records.describe_record_type()`).

    >>> class NotARecord:
    ...     pass
    >>> exc = NotARecordTypeError(NotARecord)
    >>> exc.target is NotARecord
    True
    >>> str(exc)
    'NotARecord does not define a record type'
    >>> str(NotARecordTypeError('Spam'))
    "'Spam' does not define a record type"
    """

    def __init__(self, target):
        self.target = target
        super().__init__(target)

    def get_message(self) -> str:
        return f'{_format_target(self.target)} does not define a record type'


class RecordConstructionError(ConversionError):

    """
    Raised when the constructor of the target record type itself
    raised an exception (e.g., a dataclass's `__post_init__()`
    rejected the given field values).

    The original exception is available as the `cause` attribute (and
    as `__cause__`, when raised by the conversion engines).
    """

    def __init__(self, target, cause):
        self.target = target
        self.cause = cause
        super().__init__(target, cause)

    def get_message(self) -> str:
        return (f'could not construct a {_format_target(self.target)} record '
                f'({type_name(self.cause)}: {ascii_str(self.cause)})')


class KeyValidationError(ConversionError):

    """
    The base class of exceptions raised by the strict conversion engine
    when the keys of a mapping do not fit the target record type.

    Each instance exposes the `keys` attribute (a list of the offending
    keys) and the `target` attribute (the target record type, possibly
    `None` if not specified).

    >>> exc = UnknownKeysError(['extra', 'spam'], target=dict)
    >>> exc.keys
    ['extra', 'spam']
    >>> str(exc)
    "unknown keys (dict): 'extra', 'spam'"
    >>> str(MissingKeysError(['name']))
    "missing keys: 'name'"
    """

    #: (to be specified in concrete subclasses)
    category = None

    def __init__(self, keys: Iterable, target=None):
        self.keys = list(keys)
        self.target = target
        super().__init__(self.keys)

    def get_message(self) -> str:
        target_info = (f' ({_format_target(self.target)})' if self.target is not None
                       else '')
        keys_listing = ', '.join(ascii_str(repr(key)) for key in self.keys)
        return f'{self.category}{target_info}: {keys_listing}'


class InvalidKeysError(KeyValidationError):
    """Keys that are neither symbolic nor textual (e.g., `int` or `tuple` ones)."""
    category = 'invalid keys'


class UnresolvableKeysError(KeyValidationError):
    """Textual keys that do not resolve to any symbolic key known in the key-space."""
    category = 'unresolvable keys'


class UnknownKeysError(KeyValidationError):
    """Keys that are not declared as fields of the target record type."""
    category = 'unknown keys'


class MissingKeysError(KeyValidationError):
    """Required fields (mandatory, with no non-`None` default) absent from the input."""
    category = 'missing keys'
