# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
Normalization of nested conversion configurations.

A *nested configuration* is keyed by field names; each value (*rule*)
is either another nested configuration or a bare target (a record type
or `None`), the latter being a shorthand for `{'__to__': <target>}`.
Three reserved keys are recognized:

* `'__to__'` -- the target for the level the configuration applies to
  (if absent, the type of the value at that level is kept, while its
  children may still be converted);

* `'__skip__'` -- record types whose instances are to be left intact
  if encountered *at that level*;

* `'__skip_recursive__'` -- like `'__skip__'` but inherited by all
  descendant rules.

A configuration can be given as a mapping or as an iterable of
*(key, rule)* pairs:

>>> class Address: pass
>>> class Company: pass
>>> rules = NestedRules.from_config([
...     ('__skip_recursive__', [Company]),
...     ('address', Address),
...     ('tags', None),
... ])
>>> rules == NestedRules.from_config({
...     '__skip_recursive__': [Company],
...     'address': {'__to__': Address},
...     'tags': {'__to__': None},
... })
True
>>> rules.target
SAME_TYPE
>>> rules.get_child_rules('address').target is Address
True
>>> rules.get_child_rules('address').skip_recursive == (Company,)
True
>>> rules.get_child_rules('no_rule_for_this') is None
True
"""

from collections.abc import (
    Hashable,
    Iterable,
    Iterator,
    Mapping,
)
from typing import Optional

from structify.common_helpers import iter_deduplicated
from structify.const import (
    SAME_TYPE,
    SKIP_KEY,
    SKIP_RECURSIVE_KEY,
    TO_KEY,
)
from structify.exceptions import NestedConfigError
from structify.typing_helpers import (
    Key,
    NestedConfig,
    NestedConfigRule,
    Target,
)


class NestedRules:

    """
    An immutable, normalized form of a nested conversion configuration.

    Attributes:
        `target`:
            A record type, `None` (meaning: a plain mapping) or
            `SAME_TYPE` (if no `'__to__'` was specified).
        `skip`:
            A tuple of the types to be left intact at this level.
        `skip_recursive`:
            A tuple of the types to be left intact at this level and
            in all descendant levels (includes the inherited ones if
            the object has been obtained with `get_child_rules()`).
        `field_rules`:
            A `dict` that maps field names to `NestedRules` objects.
    """

    __slots__ = ('target', 'skip', 'skip_recursive', 'field_rules')

    def __init__(self,
                 target: Target = SAME_TYPE,
                 skip: Iterable[Hashable] = (),
                 skip_recursive: Iterable[Hashable] = (),
                 field_rules: Optional[Mapping[Key, 'NestedRules']] = None):
        object.__setattr__(self, 'target', target)
        object.__setattr__(self, 'skip', tuple(iter_deduplicated(skip)))
        object.__setattr__(self, 'skip_recursive', tuple(iter_deduplicated(skip_recursive)))
        object.__setattr__(self, 'field_rules', dict(field_rules or {}))

    def __setattr__(self, name, value):
        raise AttributeError('NestedRules objects are immutable')

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self.target == other.target
                and self.skip == other.skip
                and self.skip_recursive == other.skip_recursive
                and self.field_rules == other.field_rules)

    __hash__ = None

    def __repr__(self):
        return (f'{type(self).__qualname__}(target={self.target!r}, '
                f'skip={self.skip!r}, '
                f'skip_recursive={self.skip_recursive!r}, '
                f'field_rules={self.field_rules!r})')

    @classmethod
    def from_config(cls, nested_config: Optional[NestedConfig]) -> 'NestedRules':
        """
        Normalize the given nested configuration (a mapping, an
        iterable of *(key, rule)* pairs, `None`, or a ready
        `NestedRules` object).

        Raises `NestedConfigError` if the configuration is malformed.
        """
        if nested_config is None:
            return cls()
        if isinstance(nested_config, NestedRules):
            return nested_config
        target = SAME_TYPE
        skip = skip_recursive = ()
        field_rules = {}
        for key, rule in _iter_config_pairs(nested_config):
            if key == TO_KEY:
                target = rule
            elif key == SKIP_KEY:
                skip = _get_type_collection(key, rule)
            elif key == SKIP_RECURSIVE_KEY:
                skip_recursive = _get_type_collection(key, rule)
            else:
                field_rules[key] = cls._from_field_rule(rule)
        return cls(target, skip, skip_recursive, field_rules)

    @classmethod
    def _from_field_rule(cls, rule: NestedConfigRule) -> 'NestedRules':
        if isinstance(rule, (NestedRules, Mapping, list, tuple)):
            return cls.from_config(rule)
        # a bare target (shorthand)
        return cls(target=rule)

    @property
    def has_field_rules(self) -> bool:
        return bool(self.field_rules)

    def should_skip(self, value) -> bool:
        value_type = type(value)
        return value_type in self.skip or value_type in self.skip_recursive

    def get_child_rules(self, key: Key) -> Optional['NestedRules']:
        """
        Get the rules for the given field (with this level's
        `skip_recursive` types added to the rules' own), or `None` if
        there is no rule for that field.

        Only textual and symbolic keys (i.e., `str` ones) can have
        rules; for any other key `None` is returned.
        """
        if not isinstance(key, str):
            return None
        child_rules = self.field_rules.get(key)
        if child_rules is None or not self.skip_recursive:
            return child_rules
        return NestedRules(
            child_rules.target,
            child_rules.skip,
            self.skip_recursive + child_rules.skip_recursive,
            child_rules.field_rules)


def _iter_config_pairs(nested_config: NestedConfig) -> Iterator[tuple[Key, NestedConfigRule]]:
    if isinstance(nested_config, Mapping):
        yield from nested_config.items()
        return
    if isinstance(nested_config, (str, bytes, bytearray)) or not isinstance(nested_config, Iterable):
        raise NestedConfigError(
            f'a nested configuration should be a mapping or an iterable '
            f'of (key, rule) pairs (got: {nested_config!r})')
    for item in nested_config:
        if not (isinstance(item, (tuple, list)) and len(item) == 2):
            raise NestedConfigError(
                f'{item!r} is not a (key, rule) pair (in the nested '
                f'configuration {nested_config!r})')
        key, rule = item
        yield key, rule


def _get_type_collection(key: str, rule) -> tuple:
    if isinstance(rule, type):
        return (rule,)
    if isinstance(rule, (list, tuple, set, frozenset)):
        return tuple(rule)
    raise NestedConfigError(
        f'the {key!r} directive should specify a type or a '
        f'list of types (got: {rule!r})')
