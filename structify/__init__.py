# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
Recursive, configuration-driven conversion between records (instances
of `Record` subclasses or dataclasses), plain mappings and lists/tuples
of them.

Conversion functions (all accepting the `value`, `target` and
`nested_config` arguments, and the keyword-only `config` one):

* `coerce()` -- lossy: never fails because of the data;
* `convert()` / `convert_unwrap()` -- lossless: return an outcome
  (`Success`, `Unchanged` or `Failure`) / the value itself;
* `strict()` / `strict_unwrap()` -- like the above, plus validation of
  the keys of each mapping converted to a record.

And `destructure()` -- turning records into plain `dict`s, recursively.
"""


from structify.coercion import coerce
from structify.config import (
    ConversionConfig,
    get_default_config,
)
from structify.const import (
    PASS_THROUGH_TYPES,
    SAME_TYPE,
    SKIP_KEY,
    SKIP_RECURSIVE_KEY,
    TO_KEY,
)
from structify.conversion import (
    convert,
    convert_unwrap,
)
from structify.destructuring import destructure
from structify.exceptions import (
    ConversionError,
    InvalidKeysError,
    KeyValidationError,
    MissingKeysError,
    NestedConfigError,
    NotARecordTypeError,
    RecordConstructionError,
    StructifyError,
    UnknownKeysError,
    UnresolvableKeysError,
)
from structify.outcomes import (
    Failure,
    Outcome,
    Success,
    Unchanged,
)
from structify.records import (
    Field,
    Record,
    RecordSchema,
    describe_record_type,
)
from structify.strict_conversion import (
    strict,
    strict_unwrap,
)
from structify.symbols import (
    Symbol,
    symbol,
)


__all__ = [
    'coerce',
    'convert',
    'convert_unwrap',
    'strict',
    'strict_unwrap',
    'destructure',

    'Record',
    'Field',
    'RecordSchema',
    'describe_record_type',

    'Outcome',
    'Success',
    'Unchanged',
    'Failure',

    'ConversionConfig',
    'get_default_config',

    'Symbol',
    'symbol',

    'TO_KEY',
    'SKIP_KEY',
    'SKIP_RECURSIVE_KEY',
    'SAME_TYPE',
    'PASS_THROUGH_TYPES',

    'StructifyError',
    'NestedConfigError',
    'ConversionError',
    'NotARecordTypeError',
    'RecordConstructionError',
    'KeyValidationError',
    'InvalidKeysError',
    'UnresolvableKeysError',
    'UnknownKeysError',
    'MissingKeysError',
]
