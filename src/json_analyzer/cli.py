from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from json_analyzer.config import emit_defaults, merge_payload
from json_analyzer.declare import Declarations, declare
from json_analyzer.document import load_document
from json_analyzer.exceptions import DocumentDepthError, JsonAnalyzerError
from json_analyzer.inference import infer
from json_analyzer.json_types import JSONValue
from json_analyzer.schema import DeclarationsResponseDTO, EmitOptionsDTO

app = typer.Typer(add_completion=False)

_STDOUT_ALIAS = "-"


def resolve_emit_options(
    *,
    dialect: str | None,
    name_prefix: str | None,
    config: Path | None,
    root: Path | None = None,
) -> EmitOptionsDTO:
    defaults = emit_defaults(root=root, config_path=config)
    payload = merge_payload(
        {"dialect": dialect, "name_prefix": name_prefix},
        defaults,
    )
    try:
        return EmitOptionsDTO.model_validate(payload)
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid emit options: {exc}") from exc


def analyze_value(value: JSONValue, options: EmitOptionsDTO) -> Declarations:
    try:
        return declare(
            infer(value),
            dialect=options.dialect,
            name_prefix=options.name_prefix,
        )
    except RecursionError as exc:
        raise DocumentDepthError(str(exc)) from exc


def render_result(result: Declarations, *, as_json: bool) -> str:
    if as_json:
        normalized = DeclarationsResponseDTO.from_declarations(result).model_dump()
        return json.dumps(normalized, indent=2, sort_keys=True)
    if not result.declarations:
        # A primitive or array-of-primitive root has nothing to declare.
        return result.root
    return result.render()


def _write_output(output_path: Path | None, text: str) -> None:
    if output_path is None or str(output_path) == _STDOUT_ALIAS:
        typer.echo(text)
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text + "\n", encoding="utf-8")


@app.command()
def analyze(
    file: Path = typer.Argument(..., help="The JSON file to analyze."),
    dialect: Optional[str] = typer.Option(
        None, "--dialect", help="Declaration syntax: rust (default) or python."
    ),
    name_prefix: Optional[str] = typer.Option(
        None, "--name-prefix", help="Prefix for generated declaration names."
    ),
    config: Optional[Path] = typer.Option(None, "--config"),
    as_json: bool = typer.Option(
        False, "--json", help="Emit the root reference and declarations as JSON."
    ),
    output_path: Optional[Path] = typer.Option(None, "--output", "-o"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Generate data structure declarations from a JSON file."""
    options = resolve_emit_options(
        dialect=dialect,
        name_prefix=name_prefix,
        config=config,
    )
    try:
        result = analyze_value(load_document(file), options)
    except JsonAnalyzerError as exc:
        typer.secho(str(exc), err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc
    if verbose:
        typer.echo(
            f"{len(result.declarations)} declaration(s), root: {result.root}",
            err=True,
        )
    _write_output(output_path, render_result(result, as_json=as_json))


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
