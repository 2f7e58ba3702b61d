# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
Record types and their schema descriptors.

A *record* is an instance of a `Record` subclass or of a dataclass.
Every record type is described by a `RecordSchema` (see:
`describe_record_type()`) which tells the conversion engines what
fields the type declares, which of them are mandatory on construction,
what their defaults are, and how to construct an instance.

>>> class User(Record):
...     name = Field(required=True)
...     email = Field()
...     active = Field(default=True)
...
>>> User(name='Alice')
User(name='Alice', email=None, active=True)
>>> User(name='Alice') == User(name='Alice', active=True)
True

>>> schema = describe_record_type(User)
>>> schema.all_fields
('name', 'email', 'active')
>>> schema.mandatory_fields
('name',)
>>> schema.get_defaults()
{'name': None, 'email': None, 'active': True}
>>> schema.construct({'email': 'alice@example.com', 'spam': 42})
User(name=None, email='alice@example.com', active=True)

>>> User(email='alice@example.com')
Traceback (most recent call last):
  ...
TypeError: User() missing required field(s): 'name'
>>> User(name='Alice', spam=42)
Traceback (most recent call last):
  ...
TypeError: User() got unexpected field(s): 'spam'
"""

import dataclasses
from collections.abc import (
    Container,
    Iterator,
    Mapping,
)
from typing import (
    Any,
    Callable,
    ClassVar,
    Optional,
)

from structify.class_helpers import (
    attr_repr,
    type_name,
)
from structify.exceptions import (
    NotARecordTypeError,
    RecordConstructionError,
)
from structify.symbols import (
    GLOBAL_SYMBOL_TABLE,
    Symbol,
)


class Field:

    """
    A field declaration, to be placed in the body of a `Record`
    subclass.

    Args/kwargs:
        `default` (optional; default: `None`):
            The value the field takes when not supplied.

    Kwargs:
        `default_factory` (optional; default: `None`):
            A callable that makes the default value (when specified,
            `default` must not be specified).
        `required` (optional; default: `False`):
            Whether the field is *mandatory on construction*, i.e.,
            whether `Record.__init__()` requires a value for it. Note
            that the strict conversion engine reports a *required*
            field as missing only if its default is `None`; otherwise
            the default is just used.
    """

    def __init__(self,
                 default: Any = None,
                 *,
                 default_factory: Optional[Callable[[], Any]] = None,
                 required: bool = False):
        if default is not None and default_factory is not None:
            raise TypeError('cannot specify both `default` and `default_factory`')
        self.default = default
        self.default_factory = default_factory
        self.required = required

    __repr__ = attr_repr('default', 'default_factory', 'required')

    def get_default(self) -> Any:
        if self.default_factory is not None:
            return self.default_factory()
        return self.default


class RecordSchema:

    """
    The descriptor of a record type: its declared fields (in the
    declaration order), the mandatory ones and the defaults, as well as
    the means to construct instances.

    Field names are kept as `Symbol` objects (interned in the global
    symbol table when the schema is created).
    """

    def __init__(self, record_type: type, fields: Mapping[str, Field]):
        self.record_type = record_type
        self._fields: dict[Symbol, Field] = {
            GLOBAL_SYMBOL_TABLE.intern(name): field
            for name, field in fields.items()}
        self._names: dict[str, Symbol] = {name: name for name in self._fields}

    __repr__ = attr_repr('record_type', 'all_fields')

    @property
    def all_fields(self) -> tuple[Symbol, ...]:
        return tuple(self._fields)

    @property
    def mandatory_fields(self) -> tuple[Symbol, ...]:
        return tuple(name for name, field in self._fields.items() if field.required)

    @property
    def required_fields(self) -> tuple[Symbol, ...]:
        """The mandatory fields whose default is `None`."""
        return tuple(name for name, field in self._fields.items()
                     if field.required and field.get_default() is None)

    def __contains__(self, name) -> bool:
        return name in self._fields

    def get_field(self, name: str) -> Field:
        return self._fields[name]

    def get_defaults(self) -> dict[Symbol, Any]:
        return {name: field.get_default() for name, field in self._fields.items()}

    def canonical_name(self, name: str) -> Optional[Symbol]:
        return self._names.get(name)

    def iter_missing_required(self, present_keys: Container) -> Iterator[Symbol]:
        for name in self.required_fields:
            if name not in present_keys:
                yield name

    def construct(self, field_values: Mapping) -> Any:
        """
        Make an instance of the record type from the given field values.

        Fields absent from `field_values` take their defaults; items
        whose keys are not declared fields are ignored. Any exception
        raised by the record type's constructor is re-raised as a
        `RecordConstructionError`.
        """
        kwargs = {
            str(name): (field_values[name] if name in field_values
                        else field.get_default())
            for name, field in self._fields.items()}
        try:
            return self.record_type(**kwargs)
        except Exception as exc:
            raise RecordConstructionError(self.record_type, exc) from exc


class Record:

    """
    The base class for record types declared with `Field` attributes.

    Fields are collected along the MRO when a subclass is created (the
    fields of base classes go first; a field declared again in a
    subclass overrides the base one but keeps its position).

    >>> class Base(Record):
    ...     a = Field()
    ...     b = Field(default=1)
    >>> class Derived(Base):
    ...     c = Field(default_factory=list)
    ...     b = Field(default=2)
    >>> Derived()
    Derived(a=None, b=2, c=[])
    >>> Derived(a='x', c=[1]).c
    [1]
    """

    __record_schema__: ClassVar[RecordSchema]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        fields = {}
        for base in reversed(cls.__mro__):
            for name, obj in vars(base).items():
                if isinstance(obj, Field):
                    fields[name] = obj
        cls.__record_schema__ = RecordSchema(cls, fields)

    def __init__(self, **field_values):
        schema = self.__record_schema__
        illegal_names = [name for name in field_values if name not in schema]
        if illegal_names:
            raise TypeError(f'{type_name(self)}() got unexpected field(s): '
                            f'{_listing(illegal_names)}')
        missing_names = [name for name in schema.mandatory_fields
                         if name not in field_values]
        if missing_names:
            raise TypeError(f'{type_name(self)}() missing required field(s): '
                            f'{_listing(missing_names)}')
        vars(self).update(
            (name, (field_values[name] if name in field_values
                    else schema.get_field(name).get_default()))
            for name in schema.all_fields)

    def _get_field_values(self):
        return {name: getattr(self, name) for name in self.__record_schema__.all_fields}

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._get_field_values() == other._get_field_values()

    __hash__ = None

    def __repr__(self):
        listing = ', '.join(f'{name}={value!r}'
                            for name, value in self._get_field_values().items())
        return f'{type(self).__qualname__}({listing})'


Record.__record_schema__ = RecordSchema(Record, {})


def _listing(names):
    return ', '.join(map(repr, names))


def _make_dataclass_schema(cls: type) -> RecordSchema:
    fields = {}
    for dc_field in dataclasses.fields(cls):
        if not dc_field.init:
            continue
        if dc_field.default is not dataclasses.MISSING:
            fields[dc_field.name] = Field(default=dc_field.default)
        elif dc_field.default_factory is not dataclasses.MISSING:
            fields[dc_field.name] = Field(default_factory=dc_field.default_factory)
        else:
            fields[dc_field.name] = Field(required=True)
    return RecordSchema(cls, fields)


def describe_record_type(target: Any) -> RecordSchema:
    """
    Get the `RecordSchema` of the given record type (a `Record`
    subclass or a dataclass).

    Raises `NotARecordTypeError` if `target` is not a record type.

    >>> import dataclasses
    >>> @dataclasses.dataclass
    ... class Point:
    ...     x: int
    ...     y: int = 0
    >>> schema = describe_record_type(Point)
    >>> schema.all_fields, schema.required_fields
    (('x', 'y'), ('x',))
    >>> schema.construct({'x': 5})
    Point(x=5, y=0)

    >>> describe_record_type(dict)
    Traceback (most recent call last):
      ...
    structify.exceptions.NotARecordTypeError: dict does not define a record type
    """
    if isinstance(target, type):
        if issubclass(target, Record):
            return target.__record_schema__
        if dataclasses.is_dataclass(target):
            return _make_dataclass_schema(target)
    raise NotARecordTypeError(target)


def is_record(value: Any) -> bool:
    return isinstance(value, Record) or (
        dataclasses.is_dataclass(value) and not isinstance(value, type))


def record_to_mapping(record: Any, meta_keys: Container = frozenset()) -> dict:
    """
    Get the attributes of the given record as a `dict` (not recursively),
    omitting any keys contained in `meta_keys`.

    Declared field names are given as `Symbol` objects. Any other
    instance attributes (e.g., ORM-internal ones) are included as well,
    unless they are meta keys.
    """
    schema = describe_record_type(type(record))
    try:
        attrs = vars(record)
    except TypeError:
        # (e.g., a dataclass with `__slots__`)
        attrs = record_field_values(record)
    result = {}
    for key, value in attrs.items():
        if key in meta_keys:
            continue
        result[schema.canonical_name(key) or key] = value
    return result


def record_field_values(record: Any) -> dict:
    """
    Get the values of the fields declared by the given record's type,
    as a `dict` keyed by `Symbol` objects (in the declaration order).

    Unlike `record_to_mapping()`, omits any undeclared instance
    attributes (e.g., a dataclass's `init=False` fields).

    >>> import dataclasses
    >>> @dataclasses.dataclass
    ... class Line:
    ...     qty: int
    ...     price: int
    ...     total: int = dataclasses.field(init=False)
    ...     def __post_init__(self):
    ...         self.total = self.qty * self.price
    ...
    >>> line = Line(2, 3)
    >>> record_field_values(line)
    {'qty': 2, 'price': 3}
    >>> record_to_mapping(line)
    {'qty': 2, 'price': 3, 'total': 6}
    """
    schema = describe_record_type(type(record))
    return {name: getattr(record, name) for name in schema.all_fields}
