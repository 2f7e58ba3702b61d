# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
Record types used by the tests.
"""

import dataclasses
from typing import Optional

from structify.records import (
    Field,
    Record,
)
from structify.symbols import symbol


# a key that is known in the key-space but is not a
# field of any of the record types defined below
EXTRA = symbol('extra')

# a key that is surely not known in the key-space
UNKNOWN_TEXT_KEY = 'no-such-symbol-hopefully!'


class A(Record):
    foo = Field()
    bar = Field(default=False)


class B(Record):
    a = Field(default_factory=A)
    foo = Field(default='bar')


class RequiredFields(Record):
    required_field = Field(required=True)
    another_required = Field(required=True)
    optional = Field(default='default')


class DefaultedEnforced(Record):
    required_with_default = Field(default='safe_default', required=True)
    required_no_default = Field(required=True)
    optional = Field(default='opt')


class User(Record):
    name = Field()
    email = Field()
    age = Field()


class Address(Record):
    street = Field()
    city = Field()
    country = Field()


class Company(Record):
    name = Field()
    users = Field(default_factory=list)
    address = Field()


@dataclasses.dataclass
class Point:
    x: int
    y: int = 0
    label: Optional[str] = None


@dataclasses.dataclass
class PositiveAmount:
    amount: int = 0

    def __post_init__(self):
        if self.amount is None or self.amount < 0:
            raise ValueError(f'amount must be a non-negative integer (got: {self.amount!r})')


@dataclasses.dataclass
class LineItem:
    sku: Optional[str] = None


# (`total` is an `init=False` field: it is not a part of the schema,
# but it is an instance attribute)
@dataclasses.dataclass
class Order:
    qty: int
    price: int
    items: list = dataclasses.field(default_factory=list)
    total: int = dataclasses.field(init=False)

    def __post_init__(self):
        self.total = self.qty * self.price


class NotARecord:

    def __init__(self, foo=None):
        self.foo = foo
