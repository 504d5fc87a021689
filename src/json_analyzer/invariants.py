"""Invariant markers for json-analyzer."""

from __future__ import annotations

from typing import NoReturn

from json_analyzer.exceptions import NeverThrown


def never(reason: str = "", **env: object) -> NoReturn:
    """Mark a code path as intentionally unreachable.

    The optional env payload is carried on the raised exception as metadata
    for diagnostics; it is not evaluated.
    """
    raise NeverThrown(reason or "never() marker reached", env=env)


