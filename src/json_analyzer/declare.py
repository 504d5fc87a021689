"""Declaration emission for inferred data types.

Every composite node (`Object` or `Variant`) gets exactly one declaration and a
fresh sequential name. Names are assigned in pre-order (a parent is numbered
before its children), while declarations are appended in post-order: a
composite's body is rendered after its children have been declared, so every
child declaration precedes its parent and the root composite comes last.
"""

from __future__ import annotations

import json
import keyword
from dataclasses import dataclass, field
from typing import Protocol

from json_analyzer.data_type import (
    Array,
    Bool,
    DataType,
    Float,
    Int,
    Null,
    Object,
    String,
    Variant,
)
from json_analyzer.invariants import never

DEFAULT_DIALECT = "rust"
DEFAULT_NAME_PREFIX = "Type"


class Dialect(Protocol):
    name: str

    def primitive(self, node: DataType) -> str:
        """Return the type name used for a primitive node."""

    def sequence(self, element: str) -> str:
        """Return the reference for a sequence of `element`."""

    def record(self, name: str, members: list[tuple[str, str]]) -> str:
        """Render a record declaration with `(member, type reference)` pairs."""

    def union(self, name: str, options: list[str]) -> str:
        """Render a tagged union declaration over option references."""


@dataclass(frozen=True)
class RustDialect:
    name: str = "rust"

    def primitive(self, node: DataType) -> str:
        match node:
            case Null():
                return "()"
            case String():
                return "String"
            case Int():
                return "i32"
            case Float():
                return "f64"
            case Bool():
                return "bool"
            case _:
                never("not a primitive data type", type_name=type(node).__name__)

    def sequence(self, element: str) -> str:
        return f"Vec<{element}>"

    def record(self, name: str, members: list[tuple[str, str]]) -> str:
        lines = [f"struct {name} {{"]
        lines.extend(f"    pub {member}: {type_name}," for member, type_name in members)
        lines.append("}")
        return "\n".join(lines)

    def union(self, name: str, options: list[str]) -> str:
        lines = [f"enum {name} {{"]
        lines.extend(
            f"    Option{index}({type_name}),"
            for index, type_name in enumerate(options)
        )
        lines.append("}")
        return "\n".join(lines)


@dataclass(frozen=True)
class PythonDialect:
    name: str = "python"

    def primitive(self, node: DataType) -> str:
        match node:
            case Null():
                return "None"
            case String():
                return "str"
            case Int():
                return "int"
            case Float():
                return "float"
            case Bool():
                return "bool"
            case _:
                never("not a primitive data type", type_name=type(node).__name__)

    def sequence(self, element: str) -> str:
        return f"list[{element}]"

    def record(self, name: str, members: list[tuple[str, str]]) -> str:
        if all(_is_python_identifier(member) for member, _ in members):
            lines = [f"class {name}(TypedDict):"]
            lines.extend(f"    {member}: {type_name}" for member, type_name in members)
            if not members:
                lines.append("    pass")
            return "\n".join(lines)
        # Keys that are not identifiers need the functional form.
        body = ", ".join(
            f"{json.dumps(member)}: {type_name}" for member, type_name in members
        )
        return f"{name} = TypedDict({json.dumps(name)}, {{{body}}})"

    def union(self, name: str, options: list[str]) -> str:
        if not options:
            return f"{name} = Never"
        return f"{name} = Union[{', '.join(options)}]"


def _is_python_identifier(value: str) -> bool:
    return value.isidentifier() and not keyword.iskeyword(value)


DIALECTS: dict[str, Dialect] = {
    "rust": RustDialect(),
    "python": PythonDialect(),
}


def resolve_dialect(name: str) -> Dialect:
    dialect = DIALECTS.get(name.strip().lower())
    if dialect is None:
        raise ValueError(
            f"unknown dialect {name!r}; expected one of: {', '.join(sorted(DIALECTS))}"
        )
    return dialect


@dataclass
class EmissionContext:
    """Naming state and collected output for a single `declare()` run."""

    dialect: Dialect
    name_prefix: str = DEFAULT_NAME_PREFIX
    next_index: int = 0
    declarations: list[str] = field(default_factory=list)

    def fresh_name(self) -> str:
        name = f"{self.name_prefix}{self.next_index}"
        self.next_index += 1
        return name


@dataclass(frozen=True)
class Declarations:
    root: str
    declarations: tuple[str, ...]

    def render(self) -> str:
        return "\n\n".join(self.declarations)


def declare(
    data_type: DataType,
    *,
    dialect: str = DEFAULT_DIALECT,
    name_prefix: str = DEFAULT_NAME_PREFIX,
) -> Declarations:
    """Emit declarations for `data_type` and return them with the root reference."""
    context = EmissionContext(dialect=resolve_dialect(dialect), name_prefix=name_prefix)
    root = declare_into(data_type, context)
    return Declarations(root=root, declarations=tuple(context.declarations))


def declare_into(data_type: DataType, context: EmissionContext) -> str:
    """Declare `data_type` within an existing context and return its reference."""
    match data_type:
        case Null() | String() | Int() | Float() | Bool():
            return context.dialect.primitive(data_type)
        case Array(element=element):
            return context.dialect.sequence(declare_into(element, context))
        case Object(fields=fields):
            name = context.fresh_name()
            members = [
                (member, declare_into(member_type, context))
                for member, member_type in fields
            ]
            context.declarations.append(context.dialect.record(name, members))
            return name
        case Variant(options=options):
            name = context.fresh_name()
            references = [declare_into(option, context) for option in options]
            context.declarations.append(context.dialect.union(name, references))
            return name
        case _:
            never("declare() received unknown data type", type_name=type(data_type).__name__)
