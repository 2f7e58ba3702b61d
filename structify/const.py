# Copyright (c) 2025-2026 NASK. All rights reserved.

import datetime
import inspect
import io
import os
import pathlib
import re
import time
import types
import urllib.parse
import uuid

from packaging.specifiers import SpecifierSet
from packaging.version import Version


#
# Reserved keys of nested conversion configurations

TO_KEY = '__to__'
SKIP_KEY = '__skip__'
SKIP_RECURSIVE_KEY = '__skip_recursive__'


#
# Meta keys (stripped from mappings and records when flattening them)

TYPE_TAG_META_KEY = '__type__'

# (added to the effective meta keys only if SQLAlchemy is installed;
# see: `structify.config.detect_meta_keys()`)
SQLALCHEMY_STATE_META_KEY = '_sa_instance_state'
SQLALCHEMY_DIST_NAME = 'sqlalchemy'

BASIC_META_KEYS = frozenset({TYPE_TAG_META_KEY})


#
# Value types which are never restructured

PASS_THROUGH_TYPES = (
    # calendar-related
    datetime.date,          # (`datetime.datetime` included, as a subclass)
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,

    # generic sets and ranges
    set,
    frozenset,
    range,

    # identifiers and patterns
    uuid.UUID,
    re.Pattern,
    re.Match,
    urllib.parse.SplitResult,
    urllib.parse.ParseResult,

    # version identifiers
    Version,
    SpecifierSet,

    # file-handle-like
    io.IOBase,
    os.stat_result,
    os.DirEntry,
    time.struct_time,
    pathlib.PurePath,

    # introspection-only
    types.MappingProxyType,
    inspect.Signature,
)

# (exact types; e.g., named tuples are *not* treated as sequences)
SEQUENCE_TYPES = (list, tuple)


class _SameTypeMarker:

    """
    The type of the `SAME_TYPE` target marker: the type of the value
    being converted is to be kept (a record stays a record of its own
    type, a mapping stays a mapping); only the children may change.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return 'SAME_TYPE'

    def __reduce__(self):
        return 'SAME_TYPE'


SAME_TYPE = _SameTypeMarker()
