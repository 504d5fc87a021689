"""Type inference and unification over parsed JSON values."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from json_analyzer.data_type import (
    BOOL,
    FLOAT,
    INT,
    NULL,
    STRING,
    UNKNOWN,
    Array,
    DataType,
    Float,
    Int,
    Object,
    Variant,
)
from json_analyzer.invariants import never
from json_analyzer.json_types import JSONValue


def infer(value: JSONValue) -> DataType:
    """Create a data type that can represent the given value.

    Containers are walked with an explicit work stack, so the nesting depth
    of a parsed document does not consume interpreter frames here.
    """
    inferred: list[DataType] = []
    pending: list[tuple[JSONValue, bool]] = [(value, False)]
    while pending:
        node, members_done = pending.pop()
        match node:
            case Mapping() | list() | tuple() if not members_done:
                pending.append((node, True))
                members = list(node.values()) if isinstance(node, Mapping) else list(node)
                pending.extend((member, False) for member in reversed(members))
            case Mapping() as fields:
                names = [str(name) for name in fields]
                inferred.append(Object(dict(zip(names, _take(inferred, len(names))))))
            case list() | tuple() as elements:
                inferred.append(Array(_fold(_take(inferred, len(elements)))))
            case _:
                inferred.append(_infer_scalar(node))
    return inferred[0]


def _infer_scalar(value: JSONValue) -> DataType:
    match value:
        case None:
            return NULL
        case bool():
            return BOOL
        case str():
            return STRING
        case int():
            return INT
        case float() as number:
            return INT if number.is_integer() else FLOAT
        case _:
            never("infer() received non-JSON value", value_type=type(value).__name__)


def _take(stack: list[DataType], count: int) -> list[DataType]:
    if count == 0:
        return []
    taken = stack[-count:]
    del stack[-count:]
    return taken


def infer_all(values: Iterable[JSONValue]) -> DataType:
    """Infer a single data type covering every value, in the given order."""
    return _fold([infer(value) for value in values])


def unify(left: DataType, right: DataType) -> DataType:
    """Return a data type that could represent either `left` or `right`.

    Rules, checked in order:

    1. equal operands unify to themselves;
    2. a variant absorbs the other operand (the empty variant is the identity,
       and two variants are merged option by option);
    3. `Int` and `Float` widen to `Float`;
    4. objects merge field by field, and a field missing on one side is
       unified with `Null`;
    5. anything else becomes a two-option variant.
    """
    if left == right:
        return left
    match (left, right):
        case (Variant(), _):
            return _unify_variant(left, right)
        case (_, Variant()):
            return _unify_variant(right, left)
        case (Int(), Float()) | (Float(), Int()):
            return FLOAT
        case (Object(), Object()):
            return _unify_objects(left, right)
        case _:
            return Variant((left, right))


def _fold(types: Iterable[DataType]) -> DataType:
    merged = UNKNOWN
    for item in types:
        merged = unify(merged, item)
    return merged


def _unify_variant(variant: Variant, other: DataType) -> DataType:
    if variant.is_empty:
        return other
    if isinstance(other, Variant):
        merged = variant
        for option in other.options:
            merged = _absorb(merged, option)
        return merged
    return _absorb(variant, other)


def _absorb(variant: Variant, option: DataType) -> Variant:
    if option in variant.options:
        return variant
    return Variant(variant.options + (option,))


def _unify_objects(left: Object, right: Object) -> Object:
    left_fields = left.as_mapping()
    right_fields = right.as_mapping()
    merged: dict[str, DataType] = {}
    for name in left_fields.keys() | right_fields.keys():
        merged[name] = unify(
            left_fields.get(name, NULL),
            right_fields.get(name, NULL),
        )
    return Object(merged)
