"""Exception types for json-analyzer."""

from __future__ import annotations

from pathlib import Path


class NeverRaise(RuntimeError):
    """Sentinel exception that should be statically unreachable.

    Raising this exception signals that a code path expected to be impossible
    (an unknown data type variant, a non-JSON value handed to inference) was
    reached anyway.
    """

    def __init__(self, message: str, *, env: dict[str, object] | None = None):
        super().__init__(message)
        self.reason = message
        self.env = dict(env or {})


class NeverThrown(NeverRaise):
    """Alias for NeverRaise used by the explicit never() marker."""


class JsonAnalyzerError(Exception):
    """Base class for errors reported at the input boundary."""


class DocumentReadError(JsonAnalyzerError):
    def __init__(self, path: Path, cause: OSError):
        super().__init__(f"failed to read file {str(path)!r}: {cause}")
        self.path = path
        self.cause = cause


class DocumentParseError(JsonAnalyzerError):
    def __init__(self, path: Path, diagnostic: str):
        super().__init__(f"unable to parse JSON file: {diagnostic}")
        self.path = path
        self.diagnostic = diagnostic


class DocumentDepthError(JsonAnalyzerError):
    def __init__(self, depth_hint: str = ""):
        message = "document is nested too deeply to analyze"
        super().__init__(f"{message}: {depth_hint}" if depth_hint else message)
