# Copyright (c) 2025-2026 NASK. All rights reserved.

import collections.abc as collections_abc
import datetime
import inspect
import io
import os
import pathlib
import re
import time
import types
import unittest.mock as mock
import urllib.parse
import uuid

from packaging.specifiers import SpecifierSet
from packaging.version import Version
from unittest_expander import (
    param,
    paramseq,
)

from structify.outcomes import (
    Failure,
    Success,
    Unchanged,
)


pass_through_values = paramseq(
    param(datetime.date(2025, 1, 1)).label('date'),
    param(datetime.time(12, 30)).label('time'),
    param(datetime.datetime(2025, 1, 1, 12, 30)).label('naive datetime'),
    param(datetime.datetime(2025, 1, 1, tzinfo=datetime.timezone.utc)).label('datetime'),
    param(datetime.timedelta(days=3)).label('timedelta'),
    param(datetime.timezone.utc).label('tzinfo'),
    param({1, 2, 3}).label('set'),
    param(frozenset({'a'})).label('frozenset'),
    param(range(1, 10, 2)).label('range'),
    param(uuid.UUID('12345678-1234-5678-1234-567812345678')).label('UUID'),
    param(re.compile('foo', re.I)).label('regex'),
    param(re.match('f(o+)', 'foo')).label('regex match'),
    param(urllib.parse.urlsplit('https://example.com/a?b=c')).label('URI (split)'),
    param(urllib.parse.urlparse('https://example.com/a;x?b=c')).label('URI (parsed)'),
    param(Version('1.2.3')).label('version'),
    param(SpecifierSet('>=1.0,<2')).label('version requirement'),
    param(io.BytesIO(b'abc')).label('file-like'),
    param(os.stat(os.curdir)).label('stat result'),
    param(time.gmtime(0)).label('struct_time'),
    param(pathlib.PurePosixPath('/etc/hosts')).label('path'),
    param(types.MappingProxyType({'a': 1})).label('mapping proxy'),
    param(inspect.signature(len)).label('signature'),
)


class TestCaseMixin(object):

    def assertEqualIncludingTypes(self, first, second, msg=None):
        self.assertEqual(first, second, msg=msg)
        if first is not mock.ANY and second is not mock.ANY:
            self.assertIs(type(first), type(second),
                          'type of {!a} ({}) is not type of {!a} ({})'
                          .format(first, type(first), second, type(second)))
        if (isinstance(first, collections_abc.Sequence)
              and not isinstance(first, (bytes, bytearray, str))):
            for val1, val2 in zip(first, second):
                self.assertEqualIncludingTypes(val1, val2)
        elif isinstance(first, collections_abc.Mapping):
            for key in first:
                self.assertEqualIncludingTypes(first[key], second[key])

    def assertSuccess(self, outcome, expected_value):
        self.assertIsInstance(outcome, Success)
        self.assertEqualIncludingTypes(outcome.value, expected_value)

    def assertUnchanged(self, outcome, expected_value):
        self.assertIsInstance(outcome, Unchanged)
        self.assertIs(outcome.value, expected_value)

    def assertFailure(self, outcome, expected_error_class, **expected_error_attrs):
        self.assertIsInstance(outcome, Failure)
        self.assertIs(type(outcome.error), expected_error_class)
        for name, expected in expected_error_attrs.items():
            self.assertEqual(getattr(outcome.error, name), expected)
        return outcome.error
