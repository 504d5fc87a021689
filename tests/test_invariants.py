from __future__ import annotations

import pytest

from json_analyzer.exceptions import NeverRaise, NeverThrown
from json_analyzer.invariants import never


def test_never_raises_with_reason_and_env() -> None:
    with pytest.raises(NeverThrown) as excinfo:
        never("unreachable branch", type_name="Widget", depth=3)
    assert str(excinfo.value) == "unreachable branch"
    assert excinfo.value.reason == "unreachable branch"
    assert excinfo.value.env == {"type_name": "Widget", "depth": 3}
    assert isinstance(excinfo.value, NeverRaise)
    assert isinstance(excinfo.value, RuntimeError)


def test_never_has_default_reason() -> None:
    with pytest.raises(NeverThrown, match="never\\(\\) marker reached"):
        never()
