# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
Recursive stripping of record types (see: `destructure()`).
"""

from typing import Optional

from structify.config import (
    ConversionConfig,
    ensure_config,
)
from structify.records import record_to_mapping
from structify.typing_helpers import Value
from structify.value_kinds import (
    ValueKind,
    get_value_kind,
)


def destructure(value: Value, *, config: Optional[ConversionConfig] = None) -> Value:
    """
    Turn the given value into plain data, recursively: records become
    `dict`s (meta keys dropped), meta keys are dropped from mappings,
    lists and tuples are processed element-wise (`None` elements are
    preserved); pass-through and scalar values are returned intact.

    >>> import datetime
    >>> from structify.records import Record, Field
    >>> class Event(Record):
    ...     name = Field()
    ...     when = Field()
    ...     tags = Field(default_factory=list)
    ...
    >>> ev = Event(name='deploy', when=datetime.date(2025, 3, 1), tags=['x', None])
    >>> destructure([ev, None, {'__type__': 'Event', 'nested': ev}]) == [
    ...     {'name': 'deploy', 'when': datetime.date(2025, 3, 1), 'tags': ['x', None]},
    ...     None,
    ...     {'nested': {'name': 'deploy', 'when': datetime.date(2025, 3, 1), 'tags': ['x', None]}},
    ... ]
    True
    """
    return _destructure(value, ensure_config(config))


def _destructure(value, config):
    kind = get_value_kind(value, config)
    if kind is ValueKind.SEQUENCE:
        return type(value)(_destructure(item, config) for item in value)
    if kind is ValueKind.RECORD:
        value = record_to_mapping(value, config.meta_keys)
        kind = ValueKind.MAPPING
    if kind is ValueKind.MAPPING:
        return {key: _destructure(val, config)
                for key, val in value.items()
                if not config.is_meta_key(key)}
    return value
