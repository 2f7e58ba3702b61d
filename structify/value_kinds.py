# Copyright (c) 2025-2026 NASK. All rights reserved.

import enum
from collections.abc import Mapping

from structify.config import ConversionConfig
from structify.const import SEQUENCE_TYPES
from structify.records import is_record


class ValueKind(enum.Enum):

    """
    The variants of values the conversion engines dispatch on.

    >>> import datetime
    >>> from structify.config import get_default_config
    >>> cfg = get_default_config()
    >>> get_value_kind(datetime.date(2025, 1, 1), cfg)
    <ValueKind.PASS_THROUGH: 'pass-through'>
    >>> get_value_kind([1, 2], cfg), get_value_kind((1, 2), cfg)
    (<ValueKind.SEQUENCE: 'sequence'>, <ValueKind.SEQUENCE: 'sequence'>)
    >>> get_value_kind({'a': 1}, cfg)
    <ValueKind.MAPPING: 'mapping'>
    >>> get_value_kind(None, cfg), get_value_kind('abc', cfg)
    (<ValueKind.SCALAR: 'scalar'>, <ValueKind.SCALAR: 'scalar'>)
    """

    PASS_THROUGH = 'pass-through'
    SEQUENCE = 'sequence'
    RECORD = 'record'
    MAPPING = 'mapping'
    SCALAR = 'scalar'


def get_value_kind(value, config: ConversionConfig) -> ValueKind:
    # (pass-through types are checked first: some of them
    # are tuples or mappings)
    if config.is_pass_through(value):
        return ValueKind.PASS_THROUGH
    if type(value) in SEQUENCE_TYPES:
        return ValueKind.SEQUENCE
    if is_record(value):
        return ValueKind.RECORD
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    return ValueKind.SCALAR
