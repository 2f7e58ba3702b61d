# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
Symbolic keys and the key-space they live in.

A *symbolic* key (`Symbol`) is a `str` that has been registered in a
`SymbolTable` -- typically because it is a field name of some declared
record type. Any other `str` used as a mapping key is a *textual* key;
when a mapping is converted to a record, its textual keys are resolved
to symbolic ones with `SymbolTable.lookup()`, which never creates new
symbols:

>>> table = SymbolTable(['name', 'email'])
>>> table.lookup('name')
'name'
>>> type(table.lookup('name')) is Symbol
True
>>> table.lookup('no_such_field') is None
True
>>> 'no_such_field' in table
False

`Symbol` objects are equal to (and hash like) the corresponding plain
strings, so they can be used interchangeably as dict keys:

>>> {table.lookup('email'): 42} == {'email': 42}
True
"""

import threading
from collections.abc import Iterable
from typing import Optional

from structify.class_helpers import attr_repr


class Symbol(str):

    """
    A `str` subclass whose instances are symbolic keys (see the module
    docs). Instances should be obtained with `SymbolTable.intern()` (or
    the `symbol()` shortcut), not by instantiating this class directly.
    """

    __slots__ = ()


class SymbolTable:

    """
    A thread-safe interner of `Symbol` objects.

    >>> table = SymbolTable()
    >>> len(table)
    0
    >>> s = table.intern('spam')
    >>> s
    'spam'
    >>> table.intern('spam') is s
    True
    >>> table.lookup('spam') is s
    True
    >>> table.lookup('ham') is None
    True
    >>> len(table)
    1
    """

    def __init__(self, names: Iterable[str] = ()):
        self._lock = threading.Lock()
        self._symbols: dict[str, Symbol] = {}
        for name in names:
            self.intern(name)

    __repr__ = attr_repr('_symbols')

    def intern(self, name: str) -> Symbol:
        if not isinstance(name, str):
            raise TypeError(f'symbol name must be a str (got: {name!r})')
        sym = self._symbols.get(name)
        if sym is None:
            with self._lock:
                sym = self._symbols.get(name)
                if sym is None:
                    sym = self._symbols[name] = Symbol(name)
        return sym

    def lookup(self, name: str) -> Optional[Symbol]:
        if not isinstance(name, str):
            return None
        return self._symbols.get(name)

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)


GLOBAL_SYMBOL_TABLE = SymbolTable()


def symbol(name: str) -> Symbol:
    """Intern `name` in the global symbol table."""
    return GLOBAL_SYMBOL_TABLE.intern(name)


def resolve_key(key) -> Optional[Symbol]:
    """
    Resolve a mapping key to a symbolic key: a `Symbol` resolves to
    itself, a textual key (any other `str`) is looked up in the global
    symbol table; for any other key (or an unknown textual one) `None`
    is returned.

    >>> resolve_key(symbol('spam')) == 'spam'
    True
    >>> resolve_key('spam') is symbol('spam')
    True
    >>> resolve_key('surely not a known symbol #$%^') is None
    True
    >>> resolve_key(42) is None
    True
    """
    if isinstance(key, Symbol):
        return key
    if isinstance(key, str):
        return GLOBAL_SYMBOL_TABLE.lookup(key)
    return None
