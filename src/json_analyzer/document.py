"""Reading and parsing JSON documents at the input boundary."""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

from json_analyzer.exceptions import DocumentParseError, DocumentReadError
from json_analyzer.json_types import JSONValue


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"invalid JSON literal {name!r}")


def parse_document(text: str, *, path: Path) -> JSONValue:
    """Parse strict JSON text; `NaN` and `Infinity` literals are rejected."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise DocumentParseError(path, str(exc)) from exc
    except RecursionError as exc:
        raise DocumentParseError(path, "document is nested too deeply") from exc


def load_document(path: Path) -> JSONValue:
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise DocumentReadError(path, exc) from exc
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DocumentParseError(path, f"file is not valid UTF-8: {exc}") from exc
    return parse_document(text, path=path)
