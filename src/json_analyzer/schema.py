from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, field_validator

from json_analyzer.declare import DEFAULT_DIALECT, DEFAULT_NAME_PREFIX, Declarations


class EmitOptionsDTO(BaseModel):
    model_config = ConfigDict(extra="forbid")

    dialect: Literal["rust", "python"] = DEFAULT_DIALECT
    name_prefix: str = DEFAULT_NAME_PREFIX

    @field_validator("dialect", mode="before")
    @classmethod
    def _normalize_dialect(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("name_prefix")
    @classmethod
    def _check_name_prefix(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError("name_prefix must be a valid identifier")
        return value


class DeclarationsResponseDTO(BaseModel):
    root: str
    declarations: List[str]

    @classmethod
    def from_declarations(cls, result: Declarations) -> DeclarationsResponseDTO:
        return cls(root=result.root, declarations=list(result.declarations))
