# Copyright (c) 2025-2026 NASK. All rights reserved.

import threading
import unittest

from unittest_expander import (
    expand,
    foreach,
    param,
)

from structify.symbols import (
    GLOBAL_SYMBOL_TABLE,
    Symbol,
    SymbolTable,
    resolve_key,
    symbol,
)
from structify.tests._record_types import (
    A,
    UNKNOWN_TEXT_KEY,
)


class Test__Symbol(unittest.TestCase):

    def test_behaves_like_str(self):
        sym = SymbolTable().intern('spam')
        self.assertIsInstance(sym, str)
        self.assertIs(type(sym), Symbol)
        self.assertEqual(sym, 'spam')
        self.assertEqual(hash(sym), hash('spam'))
        self.assertEqual(repr(sym), "'spam'")
        self.assertEqual({sym: 1}, {'spam': 1})
        self.assertEqual({'spam': 1}[sym], 1)


@expand
class Test__SymbolTable(unittest.TestCase):

    def setUp(self):
        self.table = SymbolTable(['foo', 'bar'])

    def test_initial_names_interned(self):
        self.assertEqual(len(self.table), 2)
        self.assertIn('foo', self.table)
        self.assertIn('bar', self.table)
        self.assertNotIn('baz', self.table)
        self.assertNotIn(42, self.table)

    def test_intern_returns_the_same_object(self):
        sym = self.table.intern('foo')
        self.assertIs(self.table.intern('foo'), sym)
        self.assertIs(self.table.lookup('foo'), sym)
        self.assertEqual(len(self.table), 2)

    def test_intern_creates_new_symbol(self):
        sym = self.table.intern('baz')
        self.assertIs(type(sym), Symbol)
        self.assertEqual(len(self.table), 3)
        self.assertIs(self.table.lookup('baz'), sym)

    def test_lookup_never_creates(self):
        self.assertIsNone(self.table.lookup('baz'))
        self.assertIsNone(self.table.lookup('baz'))
        self.assertEqual(len(self.table), 2)
        self.assertNotIn('baz', self.table)

    @foreach(
        param(42),
        param(None),
        param(b'foo'),
        param(('foo',)),
    )
    def test_lookup_of_non_str_gives_none(self, name):
        self.assertIsNone(self.table.lookup(name))

    def test_intern_of_non_str_is_error(self):
        with self.assertRaises(TypeError):
            self.table.intern(42)

    def test_concurrent_interning(self):
        results = []

        def intern_many():
            results.append([self.table.intern(f'name{i}') for i in range(200)])

        threads = [threading.Thread(target=intern_many) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(len(self.table), 202)
        for symbols in results[1:]:
            for sym1, sym2 in zip(results[0], symbols):
                self.assertIs(sym1, sym2)


class Test__symbol(unittest.TestCase):

    def test(self):
        sym = symbol('test__symbol__name')
        self.assertIs(GLOBAL_SYMBOL_TABLE.lookup('test__symbol__name'), sym)


@expand
class Test__resolve_key(unittest.TestCase):

    def test_record_field_names_are_known_symbols(self):
        resolved = resolve_key('foo')
        self.assertIs(type(resolved), Symbol)
        self.assertIn(resolved, A.__record_schema__.all_fields)

    def test_symbol_resolves_to_itself(self):
        sym = symbol('test__resolve_key__name')
        self.assertIs(resolve_key(sym), sym)

    @foreach(
        param(UNKNOWN_TEXT_KEY),
        param(1),
        param((1, 2)),
        param(None),
        param(b'foo'),
    )
    def test_unresolvable(self, key):
        self.assertIsNone(resolve_key(key))
        self.assertNotIn(UNKNOWN_TEXT_KEY, GLOBAL_SYMBOL_TABLE)
