# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
The lossless conversion engine (see: `convert()`).
"""

from collections.abc import Mapping
from typing import Optional

from structify.config import (
    ConversionConfig,
    ensure_config,
)
from structify.const import SAME_TYPE
from structify.exceptions import ConversionError
from structify.log_helpers import get_logger
from structify.nested_config import NestedRules
from structify.outcomes import (
    Failure,
    Outcome,
    Success,
    Unchanged,
)
from structify.records import (
    RecordSchema,
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


def convert(value: Value,
            target: Target = None,
            nested_config: Optional[NestedConfig] = None,
            *,
            config: Optional[ConversionConfig] = None) -> Outcome:
    """
    Convert the given value to the `target` (a record type or `None`,
    meaning "a plain `dict`"), applying the `nested_config` rules to
    its fields.

    Returns:
        * `Success(<new value>)` -- if anything had to be restructured;
        * `Unchanged(<the given value>)` -- if nothing needed that;
        * `Failure(<ConversionError instance>)` -- if some target turned
          out not to be a constructible record type (the first error
          encountered stops the conversion).

    >>> from structify.records import Record, Field
    >>> class Point(Record):
    ...     x = Field(default=0)
    ...     y = Field(default=0)
    ...
    >>> convert({'x': 1, 'extra': 'dropped'}, Point)
    Success(Point(x=1, y=0))
    >>> convert({'points': [{'x': 1}, {'y': 2}]}, None, {'points': Point})
    Success({'points': [Point(x=1, y=0), Point(x=0, y=2)]})
    >>> convert({'points': [{'x': 1}, {'y': 2}]}, None)
    Unchanged({'points': [{'x': 1}, {'y': 2}]})
    >>> p = Point(x=1)
    >>> convert(p, Point).value is p
    True

    >>> outcome = convert({'points': [{'x': 1}, {'y': 2}]}, None, {'points': dict})
    >>> outcome.is_failure
    True
    >>> print(outcome.error)
    [points.0] dict does not define a record type
    """
    config = ensure_config(config)
    rules = NestedRules.from_config(nested_config)
    converter = Converter(config)
    return converter.get_outcome(value, target, rules)


def convert_unwrap(value: Value,
                   target: Target = None,
                   nested_config: Optional[NestedConfig] = None,
                   *,
                   config: Optional[ConversionConfig] = None) -> Value:
    """
    Like `convert()` but return the converted value itself (if the
    outcome is `Success` or `Unchanged`), or raise the error (a
    `ConversionError` instance, if the outcome is `Failure`).

    >>> convert_unwrap([{'a': 1}, None], None, {'a': None})
    [{'a': 1}, None]
    >>> convert_unwrap({'a': {'b': 1}}, None, {'a': int})
    Traceback (most recent call last):
      ...
    structify.exceptions.NotARecordTypeError: [a] int does not define a record type
    """
    return convert(value, target, nested_config, config=config).unwrap()


class Converter:

    """
    The engine behind `convert()` (and, via the `StrictConverter`
    subclass, behind `structify.strict()`).

    An instance is callable with `(value, target, rules)` arguments,
    where `rules` is a `NestedRules` object; the call returns a
    `Success` or an `Unchanged` outcome, or raises a `ConversionError`.
    The `get_outcome()` method does the same but, instead of raising,
    returns a `Failure` outcome.
    """

    def __init__(self, config: ConversionConfig):
        self._config = config

    def get_outcome(self, value: Value, target: Target, rules: NestedRules) -> Outcome:
        try:
            return self(value, target, rules)
        except ConversionError as exc:
            LOGGER.debug('Conversion failed: %s', exc)
            return Failure(exc)

    def __call__(self, value: Value, target: Target, rules: NestedRules) -> Outcome:
        kind = get_value_kind(value, self._config)
        if kind is ValueKind.SEQUENCE:
            return self._convert_sequence(value, target, rules)
        if kind is ValueKind.RECORD:
            return self._convert_record(value, target, rules)
        if kind is ValueKind.MAPPING:
            return self._convert_mapping(value, target, rules)
        return Unchanged(value)

    def _convert_sequence(self, seq, target, rules):
        items = []
        changed = False
        for index, item in enumerate(seq):
            with ConversionError.sublocation(index):
                outcome = self(item, target, rules)
            changed = changed or isinstance(outcome, Success)
            items.append(outcome.value)
        if changed:
            return Success(type(seq)(items))
        return Unchanged(seq)

    def _convert_record(self, record, target, rules):
        if rules.should_skip(record):
            return Unchanged(record)
        if target is SAME_TYPE:
            target = type(record)
        if type(record) is target and not rules.has_field_rules:
            return Unchanged(record)
        if target is None:
            fields = record_to_mapping(record, self._config.meta_keys)
            _, result = self._convert_fields(fields, rules)
            return Success(result)
        schema = describe_record_type(target)
        changed, field_values = self._convert_fields(
            self._get_field_values_for_record(record_field_values(record), schema),
            rules)
        if type(record) is target and not changed:
            return Unchanged(record)
        return Success(schema.construct(field_values))

    def _convert_mapping(self, mapping, target, rules):
        if target is None or target is SAME_TYPE:
            changed, result = self._convert_fields(mapping, rules)
            if changed:
                return Success(result)
            return Unchanged(mapping)
        schema = describe_record_type(target)
        _, field_values = self._convert_fields(
            self._get_field_values_for_record(mapping, schema),
            rules)
        return Success(schema.construct(field_values))

    def _get_field_values_for_record(self, mapping: Mapping, schema: RecordSchema) -> dict:
        # Meta keys, keys that are neither symbolic nor resolvable
        # textual ones, and keys not declared by the record type
        # are dropped.
        field_values = {}
        for key, val in mapping.items():
            if self._config.is_meta_key(key):
                continue
            resolved_key = resolve_key(key)
            if resolved_key is None or resolved_key not in schema:
                continue
            field_values[resolved_key] = val
        return field_values

    def _convert_fields(self, mapping: Mapping, rules: NestedRules) -> tuple[bool, dict]:
        changed = False
        result = {}
        for key, val in mapping.items():
            if self._config.is_meta_key(key):
                changed = True
                continue
            outcome = self._convert_field(key, val, rules)
            changed = changed or isinstance(outcome, Success)
            result[key] = outcome.value
        return changed, result

    def _convert_field(self, key: Key, value: Value, rules: NestedRules) -> Outcome:
        child_rules = rules.get_child_rules(key)
        if child_rules is None:
            return Unchanged(value)
        with ConversionError.sublocation(key):
            return self(value, child_rules.target, child_rules)
