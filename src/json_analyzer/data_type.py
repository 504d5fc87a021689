"""Structural data types inferred from JSON documents.

`DataType` is a closed family of frozen dataclasses. Equality is structural,
and ordering is total: the variant rank first, then the payload compared
lexicographically. Both properties are needed because data types are stored
inside `Variant.options` and `Object.fields`, which are kept in canonical
order so that equal shapes built through different merge orders compare
equal.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import total_ordering
from typing import TypeAlias

from json_analyzer.invariants import never

SortKey: TypeAlias = tuple[object, ...]


@total_ordering
class DataType:
    """Base class of the inferred type family. Not instantiated directly."""

    __slots__ = ()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DataType):
            return NotImplemented
        return sort_key(self) < sort_key(other)

    @property
    def is_composite(self) -> bool:
        return isinstance(self, (Object, Variant))


@dataclass(frozen=True, eq=True)
class Null(DataType):
    """Data that is always null; usually seen as a `Variant` member marking optionality."""


@dataclass(frozen=True, eq=True)
class String(DataType):
    pass


@dataclass(frozen=True, eq=True)
class Int(DataType):
    """A number that has always been observed without a fractional part."""


@dataclass(frozen=True, eq=True)
class Float(DataType):
    """A number that was fractional at least once."""


@dataclass(frozen=True, eq=True)
class Bool(DataType):
    pass


@dataclass(frozen=True, eq=True)
class Object(DataType):
    """A record with named members, kept in canonical (by name) order.

    Accepts either a mapping or an iterable of `(name, type)` pairs.
    """

    fields: tuple[tuple[str, DataType], ...] = ()

    def __post_init__(self) -> None:
        raw = self.fields
        pairs = list(raw.items()) if isinstance(raw, Mapping) else list(raw)
        names = [name for name, _ in pairs]
        if len(set(names)) != len(names):
            never("duplicate object field names", names=names)
        ordered = sorted(pairs, key=lambda item: item[0])
        object.__setattr__(self, "fields", tuple(ordered))

    def as_mapping(self) -> dict[str, DataType]:
        return dict(self.fields)

    def names(self) -> list[str]:
        return [name for name, _ in self.fields]


@dataclass(frozen=True, eq=True)
class Array(DataType):
    """A homogeneous sequence; `element` is the unified type of every item."""

    element: DataType


@dataclass(frozen=True, eq=True)
class Variant(DataType):
    """One of several shapes. The empty variant stands for "never observed".

    Construction flattens nested variants and deduplicates, so a variant never
    directly contains another variant.
    """

    options: tuple[DataType, ...] = ()

    def __post_init__(self) -> None:
        flat = _flatten_options(self.options)
        ordered = sorted(set(flat), key=sort_key)
        object.__setattr__(self, "options", tuple(ordered))

    @classmethod
    def of(cls, options: Iterable[DataType]) -> Variant:
        return cls(tuple(options))

    @property
    def is_empty(self) -> bool:
        return not self.options

    def __contains__(self, item: object) -> bool:
        return item in self.options


def _flatten_options(options: Iterable[DataType]) -> list[DataType]:
    flat: list[DataType] = []
    for option in options:
        if isinstance(option, Variant):
            flat.extend(option.options)
        elif isinstance(option, DataType):
            flat.append(option)
        else:
            never("variant option is not a data type", option_type=type(option).__name__)
    return flat


_RANKS: dict[type[DataType], int] = {
    Null: 0,
    String: 1,
    Int: 2,
    Float: 3,
    Bool: 4,
    Object: 5,
    Array: 6,
    Variant: 7,
}


def rank(node: DataType) -> int:
    node_rank = _RANKS.get(type(node))
    if node_rank is None:
        never("unknown data type", type_name=type(node).__name__)
    return node_rank


def sort_key(node: DataType) -> SortKey:
    """Total order key: rank, then payload compared lexicographically."""
    match node:
        case Object(fields=fields):
            return (rank(node), tuple((name, sort_key(value)) for name, value in fields))
        case Array(element=element):
            return (rank(node), sort_key(element))
        case Variant(options=options):
            return (rank(node), tuple(sort_key(option) for option in options))
        case _:
            return (rank(node),)


NULL = Null()
STRING = String()
INT = Int()
FLOAT = Float()
BOOL = Bool()
UNKNOWN = Variant()
