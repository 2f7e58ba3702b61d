# Copyright (c) 2025-2026 NASK. All rights reserved.

from collections.abc import (
    Iterable,
    Iterator,
)

from structify.typing_helpers import HashableT


def ascii_str(obj):

    r"""
    Safely convert the given object to an ASCII-only `str`.

    This function does its best to obtain a string representation
    (possibly `str`-like or `bytes`-like converted to `str`, though
    `repr()` can also be used as the last-resort fallback) and then
    escapes any non-ASCII characters -- *not raising* any encoding or
    decoding exceptions.

    >>> ascii_str('')
    ''
    >>> ascii_str('Ala ma kota\nA kot?\n2=2 ')   # pure ASCII str => unchanged
    'Ala ma kota\nA kot?\n2=2 '
    >>> ascii_str('Ech, ale błąd!')       # non-pure-ASCII-str => escaped
    'Ech, ale b\\u0142\\u0105d!'
    >>> ascii_str(b'Ech, ale b\xc5\x82\xc4\x85d!')   # UTF-8 bytes => decoded + escaped
    'Ech, ale b\\u0142\\u0105d!'
    >>> ascii_str(ValueError('Ech, ale błąd!'))
    'Ech, ale b\\u0142\\u0105d!'
    >>> ascii_str(42)
    '42'

    >>> class Nasty(object):
    ...     def __str__(self): raise ValueError
    ...     def __repr__(self): return u'really nasŧy!!!'
    ...
    >>> ascii_str(Nasty())
    'really nas\\u0167y!!!'
    """
    if isinstance(obj, str):
        s = obj
    else:
        if isinstance(obj, memoryview):
            obj = bytes(obj)
        if isinstance(obj, (bytes, bytearray)):
            s = obj.decode('utf-8', 'surrogateescape')
        else:
            try:
                s = str(obj)
            except ValueError:
                s = repr(obj)
    return s.encode('ascii', 'backslashreplace').decode('ascii')


def iter_deduplicated(collection_of_objects: Iterable[HashableT]) -> Iterator[HashableT]:
    """
    For an iterable of objects given as the only argument
    (`collection_of_objects`), return an iterator which yields the same
    objects (in the same order) but omitting any duplicates. Duplicates
    are detected using `dict`/`set`-like containment tests, so all
    objects yielded by the iterable should be *hashable*.

    >>> list(iter_deduplicated('abracadabra'))
    ['a', 'b', 'r', 'c', 'd']

    >>> class A: pass
    >>> class B: pass
    >>> list(iter_deduplicated([A, B, A, A])) == [A, B]
    True
    """
    return iter(dict.fromkeys(collection_of_objects))
