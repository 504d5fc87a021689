from __future__ import annotations

from pathlib import Path

import pytest

from json_analyzer import json_types
from json_analyzer.document import load_document, parse_document
from json_analyzer.exceptions import (
    DocumentParseError,
    DocumentReadError,
    JsonAnalyzerError,
)


def test_load_document_parses_json(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text('{"a": [1, 2.5], "b": null}', encoding="utf-8")
    assert load_document(path) == {"a": [1, 2.5], "b": None}


def test_load_document_reports_missing_file(tmp_path: Path) -> None:
    path = tmp_path / "missing.json"
    with pytest.raises(DocumentReadError) as excinfo:
        load_document(path)
    assert excinfo.value.path == path
    assert str(path) in str(excinfo.value)
    assert str(excinfo.value).startswith("failed to read file")
    assert isinstance(excinfo.value, JsonAnalyzerError)


def test_load_document_reports_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text('{"a": ', encoding="utf-8")
    with pytest.raises(DocumentParseError) as excinfo:
        load_document(path)
    assert str(excinfo.value).startswith("unable to parse JSON file:")


def test_load_document_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "latin1.json"
    path.write_bytes(b'"caf\xe9"')
    with pytest.raises(DocumentParseError, match="UTF-8"):
        load_document(path)


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity", "[1, NaN]"])
def test_parse_document_rejects_non_standard_constants(literal: str) -> None:
    with pytest.raises(DocumentParseError, match="invalid JSON literal"):
        parse_document(literal, path=Path("inline.json"))


def test_parse_document_reports_excessive_nesting() -> None:
    with pytest.raises(DocumentParseError, match="nested too deeply"):
        parse_document("[" * 100_000 + "]" * 100_000, path=Path("deep.json"))


def test_json_types_module_is_documented() -> None:
    assert json_types.__doc__ is not None
    assert json_types.__doc__.startswith("JSON-like value types")
