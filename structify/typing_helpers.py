# Copyright (c) 2025-2026 NASK. All rights reserved.

from collections.abc import (
    Hashable,
    Iterable,
    Mapping,
)
from typing import (
    Any,
    Optional,
    TypeVar,
    Union,
)


HashableT = TypeVar('HashableT', bound=Hashable)

# (any object that can be a conversion input or output)
Value = Any

# (a record type, `None` -- meaning "a plain mapping" -- or the
# `structify.const.SAME_TYPE` marker)
Target = Optional[Union[type, Any]]

Key = Hashable

NestedConfigRule = Union['NestedConfig', type, None]
NestedConfig = Union[
    Mapping[Key, NestedConfigRule],
    Iterable[tuple[Key, NestedConfigRule]],
]
