# Copyright (c) 2025-2026 NASK. All rights reserved.

import unittest

from unittest_expander import (
    expand,
    foreach,
    param,
)

from structify.const import SAME_TYPE
from structify.exceptions import NestedConfigError
from structify.nested_config import NestedRules
from structify.tests._record_types import (
    A,
    B,
    User,
)


@expand
class Test__NestedRules__from_config(unittest.TestCase):

    @foreach(
        param(None),
        param({}),
        param([]),
        param(()),
    )
    def test_empty(self, nested_config):
        rules = NestedRules.from_config(nested_config)
        self.assertEqual(rules, NestedRules())
        self.assertIs(rules.target, SAME_TYPE)
        self.assertEqual(rules.skip, ())
        self.assertEqual(rules.skip_recursive, ())
        self.assertEqual(rules.field_rules, {})
        self.assertFalse(rules.has_field_rules)

    def test_ready_rules_returned_as_is(self):
        rules = NestedRules(target=A)
        self.assertIs(NestedRules.from_config(rules), rules)

    def test_mapping_and_pairs_forms_are_equivalent(self):
        as_mapping = {
            '__to__': B,
            '__skip__': [User],
            '__skip_recursive__': [A],
            'a': {'__to__': None, 'foo': A},
            'users': User,
        }
        as_pairs = [
            ('__to__', B),
            ('__skip__', [User]),
            ('__skip_recursive__', [A]),
            ('a', [('__to__', None), ('foo', A)]),
            ('users', User),
        ]
        self.assertEqual(NestedRules.from_config(as_mapping),
                         NestedRules.from_config(as_pairs))

    def test_directives(self):
        rules = NestedRules.from_config({
            '__to__': B,
            '__skip__': [User, User],
            '__skip_recursive__': A,
        })
        self.assertIs(rules.target, B)
        self.assertEqual(rules.skip, (User,))
        self.assertEqual(rules.skip_recursive, (A,))
        self.assertFalse(rules.has_field_rules)

    @foreach(
        param(A, expected_target=A).label('record type'),
        param(None, expected_target=None).label('None'),
        param('NonExistentType', expected_target='NonExistentType').label('bogus target'),
    )
    def test_shorthand(self, rule, expected_target):
        shorthand = NestedRules.from_config({'field': rule})
        expanded = NestedRules.from_config({'field': {'__to__': rule}})
        self.assertEqual(shorthand, expanded)
        self.assertEqual(shorthand.field_rules['field'], NestedRules(target=expected_target))

    def test_explicit_none_target_differs_from_absent_target(self):
        self.assertIsNone(NestedRules.from_config({'__to__': None}).target)
        self.assertIs(NestedRules.from_config({'x': A}).target, SAME_TYPE)

    @foreach(
        param(42),
        param('abc'),
        param(b'abc'),
        param([('a', A, 'extra')]),
        param(['a']),
    )
    def test_malformed_config(self, nested_config):
        with self.assertRaises(NestedConfigError):
            NestedRules.from_config(nested_config)

    @foreach(
        param('__skip__'),
        param('__skip_recursive__'),
    )
    def test_malformed_skip_directive(self, key):
        with self.assertRaises(NestedConfigError):
            NestedRules.from_config({key: 'A'})

    def test_malformed_nested_rule(self):
        with self.assertRaises(NestedConfigError):
            NestedRules.from_config({'a': {'b': [('x',)]}})

    def test_immutable(self):
        rules = NestedRules()
        with self.assertRaises(AttributeError):
            rules.target = A


@expand
class Test__NestedRules__get_child_rules(unittest.TestCase):

    def test_no_rule(self):
        rules = NestedRules.from_config({'a': A})
        self.assertIsNone(rules.get_child_rules('b'))
        self.assertIsNone(rules.get_child_rules(['unhashable']))

    @foreach(
        param(1),
        param((1, 2)),
        param(None),
        param(b'a'),
    )
    def test_non_str_key_has_no_rule(self, key):
        rules = NestedRules.from_config({key: A, '__skip_recursive__': [B]})
        self.assertIn(key, rules.field_rules)
        self.assertIsNone(rules.get_child_rules(key))

    def test_rule_without_skip_recursive(self):
        rules = NestedRules.from_config({'__skip__': [User], 'a': A})
        child = rules.get_child_rules('a')
        self.assertEqual(child, NestedRules(target=A))

    def test_skip_is_not_propagated_but_skip_recursive_is(self):
        rules = NestedRules.from_config({
            '__skip__': [User],
            '__skip_recursive__': [A, B],
            'nested': {
                '__skip_recursive__': [User, A],
                'deeper': {'__to__': None},
            },
        })
        child = rules.get_child_rules('nested')
        self.assertEqual(child.skip, ())
        self.assertEqual(child.skip_recursive, (A, B, User))
        grandchild = child.get_child_rules('deeper')
        self.assertIsNone(grandchild.target)
        self.assertEqual(grandchild.skip, ())
        self.assertEqual(grandchild.skip_recursive, (A, B, User))

    def test_lookup_with_symbolic_key(self):
        rules = NestedRules.from_config({'foo': A})
        foo_symbol = A.__record_schema__.all_fields[0]
        self.assertEqual(rules.get_child_rules(foo_symbol), NestedRules(target=A))


class Test__NestedRules__should_skip(unittest.TestCase):

    def test(self):
        rules = NestedRules(skip=[A], skip_recursive=[B])
        self.assertTrue(rules.should_skip(A()))
        self.assertTrue(rules.should_skip(B()))
        self.assertFalse(rules.should_skip(User()))
        self.assertFalse(rules.should_skip({'foo': 1}))
        self.assertFalse(rules.should_skip(None))

    def test_exact_type_match(self):
        class SubA(A):
            pass
        self.assertFalse(NestedRules(skip=[A]).should_skip(SubA()))
