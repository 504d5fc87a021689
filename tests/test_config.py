from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from json_analyzer import config
from json_analyzer.schema import EmitOptionsDTO


def test_load_config_missing_file_is_empty(tmp_path: Path) -> None:
    assert config.load_config(root=tmp_path) == {}
    assert config.emit_defaults(config_path=tmp_path / "absent.toml") == {}


def test_load_config_invalid_toml_is_empty(tmp_path: Path) -> None:
    path = tmp_path / config.DEFAULT_CONFIG_NAME
    path.write_text("[emit\ndialect = ", encoding="utf-8")
    assert config.load_config(root=tmp_path) == {}


def test_load_config_directory_path_is_empty(tmp_path: Path) -> None:
    assert config.load_config(config_path=tmp_path) == {}


def test_emit_defaults_reads_section(tmp_path: Path) -> None:
    (tmp_path / config.DEFAULT_CONFIG_NAME).write_text(
        '[emit]\ndialect = "python"\nname_prefix = "Data"\n',
        encoding="utf-8",
    )
    assert config.emit_defaults(root=tmp_path) == {
        "dialect": "python",
        "name_prefix": "Data",
    }


def test_emit_defaults_ignores_non_table_section(tmp_path: Path) -> None:
    path = tmp_path / "custom.toml"
    path.write_text('emit = "python"\n', encoding="utf-8")
    assert config.emit_defaults(config_path=path) == {}


def test_merge_payload_skips_none_overrides() -> None:
    merged = config.merge_payload(
        {"dialect": None, "name_prefix": "Cli"},
        {"dialect": "python", "name_prefix": "Data"},
    )
    assert merged == {"dialect": "python", "name_prefix": "Cli"}


def test_emit_options_defaults() -> None:
    options = EmitOptionsDTO.model_validate({})
    assert options.dialect == "rust"
    assert options.name_prefix == "Type"


def test_emit_options_normalizes_dialect() -> None:
    assert EmitOptionsDTO.model_validate({"dialect": " RUST "}).dialect == "rust"


@pytest.mark.parametrize(
    "payload",
    [
        {"dialect": "cobol"},
        {"name_prefix": "not an identifier"},
        {"name_prefix": "1Type"},
        {"unexpected": True},
    ],
)
def test_emit_options_rejects_invalid_payloads(payload: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        EmitOptionsDTO.model_validate(payload)
