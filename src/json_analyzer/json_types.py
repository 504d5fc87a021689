"""JSON-like value types accepted at the parser boundary.

These aliases intentionally avoid `object`/`Any` so the inference surface stays
auditable: a value handed to `infer()` is expected to come out of a JSON
parser, and its value space is declared as such.
"""

from __future__ import annotations

from typing import TypeAlias


JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]
JSONObject: TypeAlias = dict[str, JSONValue]
JSONArray: TypeAlias = list[JSONValue]
