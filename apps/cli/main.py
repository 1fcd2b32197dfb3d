"""Typer CLI entrypoint for tailwind-to-css."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, cast

import typer

from apps.cli.format_human import render_not_found_report
from apps.cli.io import dump_json, read_input, write_text_atomic
from core.cheatsheet.arbitrary import ARBITRARY_PROPERTIES
from core.cheatsheet.loader import default_cheatsheet, load_cheatsheet
from core.cheatsheet.models import BREAKPOINT_KEYS, PSEUDO_KEYS, LookupTable
from core.convert.assembler import ConversionResult
from core.convert.engine import convert
from core.serialize.css_object import css_to_object_literal
from core.utils.errors import UnknownBreakpointError

app = typer.Typer(help="Tailwind class to CSS converter", rich_markup_mode=None)
OutputFormat = Literal["css", "json", "jss"]

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_FOUND = 2
EXIT_JSS_FAILED = 3


@app.callback()
def cli_callback() -> None:
    """CLI root callback to keep `twcss convert` as explicit command form."""


@app.command("convert")
def convert_command(
    classes: Annotated[str | None, typer.Argument(help="Space separated class names.")] = None,
    input_path: Annotated[
        Path | None,
        typer.Option("--input", exists=True, dir_okay=False, file_okay=True),
    ] = None,
    cheatsheet: Annotated[
        Path | None,
        typer.Option("--cheatsheet", help="Alternative cheatsheet YAML."),
    ] = None,
    output_format: Annotated[str, typer.Option("--format")] = "css",
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write primary output to this file."),
    ] = None,
    strict: Annotated[
        bool, typer.Option("--strict", help="Exit 2 when any class is not found.")
    ] = False,
) -> None:
    """Convert utility classes to CSS, JSON or a JSS object literal."""

    normalized_format = output_format.lower().strip()
    if normalized_format not in {"css", "json", "jss"}:
        typer.echo("ERROR: --format must be one of: css, json, jss.", err=True)
        raise typer.Exit(code=EXIT_ERROR)
    format_typed = cast(OutputFormat, normalized_format)

    try:
        table = _load_table(cheatsheet)
        text = read_input(classes, input_path)
        result = convert(text, table)
    except (ValueError, OSError, UnknownBreakpointError) as exc:
        typer.echo(f"ERROR: {type(exc).__name__}: {exc}", err=True)
        raise typer.Exit(code=EXIT_ERROR) from exc

    exit_code = EXIT_OK
    jss: str | None = None
    if format_typed in {"json", "jss"}:
        jss = css_to_object_literal(result.result_css)
        if jss is None:
            typer.echo("ERROR: generated CSS could not be converted to JSS", err=True)
            exit_code = EXIT_JSS_FAILED

    primary = _render_primary(result, format_typed, jss)
    if out is not None:
        try:
            write_text_atomic(out, primary)
        except OSError as exc:
            typer.echo(f"ERROR: write output failed: {exc}", err=True)
            raise typer.Exit(code=EXIT_ERROR) from exc
        typer.echo(f"INFO: wrote {format_typed} output to {out}", err=True)
    else:
        typer.echo(primary)

    if format_typed == "css":
        typer.echo(render_not_found_report(result), err=True)

    if exit_code == EXIT_OK and strict and result.not_found:
        exit_code = EXIT_NOT_FOUND

    raise typer.Exit(code=exit_code)


@app.command("classes")
def classes_command() -> None:
    """List modifier keys and arbitrary value aliases."""

    typer.echo(f"breakpoints: {', '.join(BREAKPOINT_KEYS)}")
    typer.echo(f"pseudo: {', '.join(PSEUDO_KEYS)}")
    typer.echo("arbitrary:")
    for alias in sorted(ARBITRARY_PROPERTIES):
        typer.echo(f"  {alias}-[<value>] -> {ARBITRARY_PROPERTIES[alias]}")


def _load_table(path: Path | None) -> LookupTable:
    if path is None:
        return default_cheatsheet()
    return load_cheatsheet(path)


def _render_primary(result: ConversionResult, output_format: OutputFormat, jss: str | None) -> str:
    if output_format == "css":
        return result.result_css
    if output_format == "jss":
        return jss or ""
    payload = result.to_payload()
    payload["jss"] = jss
    return dump_json(payload)


def main() -> None:
    """Console script entrypoint."""

    app()


if __name__ == "__main__":
    main()
