# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
Configuration of the conversion engines.

Each public conversion function accepts the keyword-only `config`
argument: a `ConversionConfig` instance or `None` (meaning: the
default configuration, see `get_default_config()`). The chosen
configuration is passed down through the whole recursion.

>>> cfg = ConversionConfig(meta_keys={'__type__', 'internal'})
>>> sorted(cfg.meta_keys)
['__type__', 'internal']
>>> cfg.is_meta_key('internal'), cfg.is_meta_key('name')
(True, False)

>>> import datetime
>>> cfg.is_pass_through(datetime.date(2020, 1, 1))
True
>>> cfg.is_pass_through({'a': 1})
False

>>> class Money:
...     pass
>>> cfg.is_pass_through(Money())
False
>>> ConversionConfig(extra_pass_through_types=[Money]).is_pass_through(Money())
True
"""

import importlib.util
from collections.abc import Iterable
from typing import Optional

from structify.class_helpers import attr_repr
from structify.const import (
    BASIC_META_KEYS,
    PASS_THROUGH_TYPES,
    SQLALCHEMY_DIST_NAME,
    SQLALCHEMY_STATE_META_KEY,
)
from structify.log_helpers import get_logger


LOGGER = get_logger(__name__)


def detect_meta_keys() -> frozenset[str]:
    """
    Determine the meta keys appropriate for the current environment:
    the type tag key and, if SQLAlchemy is installed, the key of the
    SQLAlchemy's instance state attribute.
    """
    meta_keys = set(BASIC_META_KEYS)
    if importlib.util.find_spec(SQLALCHEMY_DIST_NAME) is not None:
        meta_keys.add(SQLALCHEMY_STATE_META_KEY)
    return frozenset(meta_keys)


class ConversionConfig:

    """
    An immutable set of settings used by the conversion engines.

    Kwargs (all optional):
        `meta_keys`:
            Keys (attribute names) to be stripped from mappings and
            records when they are flattened. Default: the result of
            `detect_meta_keys()`.
        `extra_pass_through_types`:
            Types whose instances, in addition to the instances of the
            `structify.const.PASS_THROUGH_TYPES`, are never
            restructured.
    """

    def __init__(self, *,
                 meta_keys: Optional[Iterable[str]] = None,
                 extra_pass_through_types: Iterable[type] = ()):
        if meta_keys is None:
            meta_keys = detect_meta_keys()
        extra_pass_through_types = tuple(extra_pass_through_types)
        for tp in extra_pass_through_types:
            if not isinstance(tp, type):
                raise TypeError(f'{tp!r} is not a type')
        self._meta_keys = frozenset(meta_keys)
        self._pass_through_types = PASS_THROUGH_TYPES + extra_pass_through_types

    __repr__ = attr_repr('meta_keys', 'pass_through_types')

    @property
    def meta_keys(self) -> frozenset[str]:
        return self._meta_keys

    @property
    def pass_through_types(self) -> tuple[type, ...]:
        return self._pass_through_types

    def is_meta_key(self, key) -> bool:
        return key in self._meta_keys

    def is_pass_through(self, value) -> bool:
        return isinstance(value, self._pass_through_types)


# (computed once, at import time)
_DEFAULT_CONFIG = ConversionConfig()
LOGGER.debug('default meta keys: %a', sorted(_DEFAULT_CONFIG.meta_keys))


def get_default_config() -> ConversionConfig:
    return _DEFAULT_CONFIG


def ensure_config(config: Optional[ConversionConfig]) -> ConversionConfig:
    if config is None:
        return _DEFAULT_CONFIG
    if not isinstance(config, ConversionConfig):
        raise TypeError(f'`config` should be a {ConversionConfig.__qualname__} '
                        f'or None (got: {config!r})')
    return config
