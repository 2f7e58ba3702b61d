# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
The lossy conversion engine (see: `coerce()`).
"""

from collections.abc import Mapping
from typing import Optional

from structify.config import (
    ConversionConfig,
    ensure_config,
)
from structify.const import SAME_TYPE
from structify.exceptions import (
    NotARecordTypeError,
    RecordConstructionError,
)
from structify.log_helpers import get_logger
from structify.nested_config import NestedRules
from structify.records import (
    describe_record_type,
    record_field_values,
    record_to_mapping,
)
from structify.symbols import resolve_key
from structify.typing_helpers import (
    Key,
    NestedConfig,
    Target,
    Value,
)
from structify.value_kinds import (
    ValueKind,
    get_value_kind,
)


LOGGER = get_logger(__name__)


def coerce(value: Value,
           target: Target = None,
           nested_config: Optional[NestedConfig] = None,
           *,
           config: Optional[ConversionConfig] = None) -> Value:
    """
    Convert the given value to the `target` (a record type or `None`,
    meaning "a plain `dict`"), applying the `nested_config` rules to
    its fields -- never failing because of the data: whatever cannot
    be converted is returned as is or as a plain `dict`.

    >>> from structify.records import Record, Field
    >>> class Address(Record):
    ...     street = Field()
    ...     city = Field()
    ...
    >>> class User(Record):
    ...     name = Field()
    ...     address = Field()
    ...     active = Field(default=True)
    ...
    >>> data = {'name': 'Alice', 'address': {'city': 'Warsaw'}, 'spam': 42}
    >>> coerce(data, User)
    User(name='Alice', address={'city': 'Warsaw'}, active=True)
    >>> coerce(data, User, {'address': Address})
    User(name='Alice', address=Address(street=None, city='Warsaw'), active=True)
    >>> coerce([data, None], User, {'address': {'__to__': Address}})  # doctest: +NORMALIZE_WHITESPACE
    [User(name='Alice', address=Address(street=None, city='Warsaw'), active=True),
     None]

    >>> user = coerce(data, User, {'address': Address})
    >>> coerce(user) == {
    ...     'name': 'Alice',
    ...     'address': Address(street=None, city='Warsaw'),
    ...     'active': True,
    ... }
    True
    >>> coerce(user, None, {'address': None}) == {
    ...     'name': 'Alice',
    ...     'address': {'street': None, 'city': 'Warsaw'},
    ...     'active': True,
    ... }
    True

    A target which is not a record type makes the fields be returned
    as a plain `dict`:

    >>> coerce({'name': 'Bob', 'no such field!': 42}, 'NotARecordType')
    {'name': 'Bob'}
    """
    config = ensure_config(config)
    rules = NestedRules.from_config(nested_config)
    coercer = Coercer(config)
    return coercer(value, target, rules)


class Coercer:

    """
    The engine behind `coerce()`; an instance is callable with
    `(value, target, rules)` arguments, where `rules` is a
    `NestedRules` object.
    """

    def __init__(self, config: ConversionConfig):
        self._config = config

    def __call__(self, value: Value, target: Target, rules: NestedRules) -> Value:
        kind = get_value_kind(value, self._config)
        if kind is ValueKind.SEQUENCE:
            return type(value)(self(item, target, rules) for item in value)
        if kind is ValueKind.RECORD:
            return self._coerce_record(value, target, rules)
        if kind is ValueKind.MAPPING:
            if target is SAME_TYPE:
                target = None
            return self._coerce_mapping(value, target, rules)
        return value

    def _coerce_record(self, record, target, rules):
        if rules.should_skip(record):
            return record
        if target is SAME_TYPE:
            target = type(record)
        if type(record) is target and not rules.has_field_rules:
            return record
        if target is None:
            fields = record_to_mapping(record, self._config.meta_keys)
        else:
            fields = record_field_values(record)
        return self._coerce_mapping(fields, target, rules)

    def _coerce_mapping(self, mapping: Mapping, target: Target, rules: NestedRules) -> Value:
        if target is None:
            return {key: self._coerce_field(key, val, rules)
                    for key, val in mapping.items()
                    if not self._config.is_meta_key(key)}
        try:
            schema = describe_record_type(target)
        except NotARecordTypeError as exc:
            schema = None
            failure_reason = exc
        field_values = {}
        for key, val in mapping.items():
            if self._config.is_meta_key(key):
                continue
            resolved_key = resolve_key(key)
            if resolved_key is None:
                continue
            if schema is not None and resolved_key not in schema:
                continue
            field_values[resolved_key] = self._coerce_field(resolved_key, val, rules)
        if schema is not None:
            try:
                return schema.construct(field_values)
            except RecordConstructionError as exc:
                failure_reason = exc
        LOGGER.debug('Falling back to a plain dict instead of a %a record (%s)',
                     target, failure_reason)
        return field_values

    def _coerce_field(self, key: Key, value: Value, rules: NestedRules) -> Value:
        child_rules = rules.get_child_rules(key)
        if child_rules is None:
            return value
        return self(value, child_rules.target, child_rules)
