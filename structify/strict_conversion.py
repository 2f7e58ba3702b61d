# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
The strict conversion engine (see: `strict()`).
"""

from collections.abc import Mapping
from typing import Optional

from structify.config import (
    ConversionConfig,
    ensure_config,
)
from structify.conversion import Converter
from structify.exceptions import (
    InvalidKeysError,
    MissingKeysError,
    UnknownKeysError,
    UnresolvableKeysError,
)
from structify.nested_config import NestedRules
from structify.outcomes import Outcome
from structify.records import RecordSchema
from structify.symbols import (
    Symbol,
    resolve_key,
)
from structify.typing_helpers import (
    NestedConfig,
    Target,
    Value,
)


def strict(value: Value,
           target: Target = None,
           nested_config: Optional[NestedConfig] = None,
           *,
           config: Optional[ConversionConfig] = None) -> Outcome:
    """
    Like `structify.convert()`, but each mapping converted to a record
    must have exactly the keys the record type can accept; otherwise
    the outcome is a `Failure` whose `error` is one of (checked in this
    order):

    * `InvalidKeysError` -- some keys are neither `str` nor `Symbol`;
    * `UnresolvableKeysError` -- some textual keys are not known
      symbols;
    * `UnknownKeysError` -- some keys are not fields of the record
      type;
    * `MissingKeysError` -- some *required* fields (mandatory on
      construction, with no non-`None` default) are absent.

    The `error` can also be a `NotARecordTypeError` or a
    `RecordConstructionError` (as with `structify.convert()`).

    >>> from structify.records import Record, Field
    >>> class Account(Record):
    ...     login = Field(required=True)
    ...     role = Field(default='user', required=True)
    ...     note = Field()
    ...
    >>> class Session(Record):
    ...     token = Field()
    ...
    >>> strict({'login': 'bob'}, Account)
    Success(Account(login='bob', role='user', note=None))
    >>> print(strict({'login': 'bob', 'note': None, 'token': 'abc'}, Account).error)
    unknown keys (Account): 'token'
    >>> print(strict({'login': 'bob', 'no such field!': 'abc'}, Account).error)
    unresolvable keys (Account): 'no such field!'
    >>> print(strict({'note': 'no login'}, Account).error)
    missing keys (Account): 'login'
    >>> print(strict({'login': 'bob', 1: 'one', (2,): 'two'}, Account).error)
    invalid keys (Account): 1, (2,)

    >>> outcome = strict({'accounts': [{'login': 'bob'}, {}]}, None, {'accounts': Account})
    >>> print(outcome.error)
    [accounts.1] missing keys (Account): 'login'
    """
    config = ensure_config(config)
    rules = NestedRules.from_config(nested_config)
    converter = StrictConverter(config)
    return converter.get_outcome(value, target, rules)


def strict_unwrap(value: Value,
                  target: Target = None,
                  nested_config: Optional[NestedConfig] = None,
                  *,
                  config: Optional[ConversionConfig] = None) -> Value:
    """
    Like `strict()` but return the converted value itself (if the
    outcome is `Success` or `Unchanged`), or raise the error (a
    `ConversionError` instance, if the outcome is `Failure`).
    """
    return strict(value, target, nested_config, config=config).unwrap()


class StrictConverter(Converter):

    """
    The engine behind `strict()`: a `structify.conversion.Converter`
    that validates the keys of each mapping before converting its
    values and constructing a record from it.
    """

    def _get_field_values_for_record(self, mapping: Mapping, schema: RecordSchema) -> dict:
        target = schema.record_type
        symbolic_keys = []
        textual_keys = []
        invalid_keys = []
        for key in mapping:
            if self._config.is_meta_key(key):
                continue
            if isinstance(key, Symbol):
                symbolic_keys.append(key)
            elif isinstance(key, str):
                textual_keys.append(key)
            else:
                invalid_keys.append(key)
        if invalid_keys:
            raise InvalidKeysError(invalid_keys, target)

        unresolvable_keys = [key for key in textual_keys if resolve_key(key) is None]
        if unresolvable_keys:
            raise UnresolvableKeysError(unresolvable_keys, target)

        field_values = {}
        for key, val in mapping.items():
            if self._config.is_meta_key(key):
                continue
            field_values[resolve_key(key)] = val

        unknown_keys = [key for key in field_values if key not in schema]
        if unknown_keys:
            raise UnknownKeysError(unknown_keys, target)

        missing_keys = list(schema.iter_missing_required(field_values))
        if missing_keys:
            raise MissingKeysError(missing_keys, target)

        return field_values
