"""Fixed-arity immutable tuples: Tuple1 .. Tuple10.

Unlike Option/Either/Result/Try, ``Tuple`` is an open base: any subclass
reports its arity from its own field count, so callers can add wider tuples
without touching this module.

Example:
    ```python
    from sumkit.tuples import Tuple3, tuple_of

    t = tuple_of(1, 'a', 2.0)   # Tuple3(item1=1, item2='a', item3=2.0)
    t.arity()                   # 3
    n, s, f = t                 # positional destructuring

    match t:
        case Tuple3(n, s, f):
            ...
    ```
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, overload

import msgspec

from sumkit.errors import InvalidArgumentError

__all__ = [
    'Tuple',
    'Tuple1',
    'Tuple2',
    'Tuple3',
    'Tuple4',
    'Tuple5',
    'Tuple6',
    'Tuple7',
    'Tuple8',
    'Tuple9',
    'Tuple10',
    'tuple_of',
]


class Tuple(msgspec.Struct, frozen=True):
    """Base for fixed-arity tuples; subclasses declare one field per slot."""

    def arity(self) -> int:
        """Return the number of slots."""
        return len(self.__struct_fields__)

    def to_tuple(self) -> tuple[Any, ...]:
        """Return the slots as a plain tuple, in order."""
        return tuple(getattr(self, name) for name in self.__struct_fields__)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.to_tuple())

    def __len__(self) -> int:
        return self.arity()

    def __getitem__(self, index: int) -> Any:
        return self.to_tuple()[index]


class Tuple1[T1](Tuple, frozen=True):
    item1: T1


class Tuple2[T1, T2](Tuple, frozen=True):
    item1: T1
    item2: T2


class Tuple3[T1, T2, T3](Tuple, frozen=True):
    item1: T1
    item2: T2
    item3: T3


class Tuple4[T1, T2, T3, T4](Tuple, frozen=True):
    item1: T1
    item2: T2
    item3: T3
    item4: T4


class Tuple5[T1, T2, T3, T4, T5](Tuple, frozen=True):
    item1: T1
    item2: T2
    item3: T3
    item4: T4
    item5: T5


class Tuple6[T1, T2, T3, T4, T5, T6](Tuple, frozen=True):
    item1: T1
    item2: T2
    item3: T3
    item4: T4
    item5: T5
    item6: T6


class Tuple7[T1, T2, T3, T4, T5, T6, T7](Tuple, frozen=True):
    item1: T1
    item2: T2
    item3: T3
    item4: T4
    item5: T5
    item6: T6
    item7: T7


class Tuple8[T1, T2, T3, T4, T5, T6, T7, T8](Tuple, frozen=True):
    item1: T1
    item2: T2
    item3: T3
    item4: T4
    item5: T5
    item6: T6
    item7: T7
    item8: T8


class Tuple9[T1, T2, T3, T4, T5, T6, T7, T8, T9](Tuple, frozen=True):
    item1: T1
    item2: T2
    item3: T3
    item4: T4
    item5: T5
    item6: T6
    item7: T7
    item8: T8
    item9: T9


class Tuple10[T1, T2, T3, T4, T5, T6, T7, T8, T9, T10](Tuple, frozen=True):
    item1: T1
    item2: T2
    item3: T3
    item4: T4
    item5: T5
    item6: T6
    item7: T7
    item8: T8
    item9: T9
    item10: T10


_BY_ARITY: dict[int, type[Tuple]] = {
    1: Tuple1,
    2: Tuple2,
    3: Tuple3,
    4: Tuple4,
    5: Tuple5,
    6: Tuple6,
    7: Tuple7,
    8: Tuple8,
    9: Tuple9,
    10: Tuple10,
}


# fmt: off
@overload
def tuple_of[T1](a: T1, /) -> Tuple1[T1]: ...
@overload
def tuple_of[T1, T2](a: T1, b: T2, /) -> Tuple2[T1, T2]: ...
@overload
def tuple_of[T1, T2, T3](a: T1, b: T2, c: T3, /) -> Tuple3[T1, T2, T3]: ...
@overload
def tuple_of[T1, T2, T3, T4](a: T1, b: T2, c: T3, d: T4, /) -> Tuple4[T1, T2, T3, T4]: ...
@overload
def tuple_of[T1, T2, T3, T4, T5](
    a: T1, b: T2, c: T3, d: T4, e: T5, /
) -> Tuple5[T1, T2, T3, T4, T5]: ...
@overload
def tuple_of[T1, T2, T3, T4, T5, T6](
    a: T1, b: T2, c: T3, d: T4, e: T5, f: T6, /
) -> Tuple6[T1, T2, T3, T4, T5, T6]: ...
@overload
def tuple_of[T1, T2, T3, T4, T5, T6, T7](
    a: T1, b: T2, c: T3, d: T4, e: T5, f: T6, g: T7, /
) -> Tuple7[T1, T2, T3, T4, T5, T6, T7]: ...
@overload
def tuple_of[T1, T2, T3, T4, T5, T6, T7, T8](
    a: T1, b: T2, c: T3, d: T4, e: T5, f: T6, g: T7, h: T8, /
) -> Tuple8[T1, T2, T3, T4, T5, T6, T7, T8]: ...
@overload
def tuple_of[T1, T2, T3, T4, T5, T6, T7, T8, T9](
    a: T1, b: T2, c: T3, d: T4, e: T5, f: T6, g: T7, h: T8, i: T9, /
) -> Tuple9[T1, T2, T3, T4, T5, T6, T7, T8, T9]: ...
@overload
def tuple_of[T1, T2, T3, T4, T5, T6, T7, T8, T9, T10](
    a: T1, b: T2, c: T3, d: T4, e: T5, f: T6, g: T7, h: T8, i: T9, j: T10, /
) -> Tuple10[T1, T2, T3, T4, T5, T6, T7, T8, T9, T10]: ...
# fmt: on


def tuple_of(*items: Any) -> Tuple:
    """Build the TupleN whose arity matches the number of arguments.

    Raises:
        InvalidArgumentError: If called with no arguments or more than ten.
    """
    cls = _BY_ARITY.get(len(items))
    if cls is None:
        raise InvalidArgumentError('items', f'must hold 1 to 10 values, got {len(items)}')
    return cls(*items)
