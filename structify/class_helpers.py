# Copyright (c) 2025-2026 NASK. All rights reserved.

from structify.common_helpers import ascii_str


def attr_repr(*attr_names):
    """
    Make a __repr__() implementation based on given attribute names.

    Any number of positional args:
        Names of instance attributes and/or class attributes.

    Returns:
        A function being the requested __repr__() implementation.

    >>> class A(object):
    ...    __repr__ = attr_repr('x', 'y')
    ...    x = 1
    ...    def __init__(self):
    ...        self.y = 'qwerty'
    >>> a = A()
    >>> a
    <A x=1, y='qwerty'>
    """
    format_repr = ('<{0.__class__.__qualname__} ' +
                   ', '.join('%s={0.%s!r}' % (name, name)
                             for name in attr_names) +
                   '>').format
    format_repr_fallback = object.__repr__

    def __repr__(self):
        # noinspection PyBroadException
        try:
            return format_repr(self)
        except Exception:
            return format_repr_fallback(self)

    return __repr__


def type_name(obj):
    """
    Get a human-readable name of the given type (or of the type of the
    given non-type object), suitable for error messages.

    >>> type_name(int)
    'int'
    >>> type_name(42)
    'int'
    >>> class Spam:
    ...     class Ham:
    ...         pass
    >>> type_name(Spam.Ham)
    'Spam.Ham'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    return ascii_str(getattr(cls, '__qualname__', None) or cls.__name__)
