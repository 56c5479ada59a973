"""Command-line interface for localerr."""

from __future__ import annotations

import importlib.metadata
import json
import logging
from pathlib import Path
from typing import Any

import typer
import yaml
from rich.console import Console
from rich.table import Table

from localerr.config import ConfigError, LocalerrConfig, load_config, serialize_config
from localerr.errors import ERROR_KINDS, LocalizedError, error_class_for
from localerr.message import TemplatedMessage
from localerr.rendering import RenderError, build_renderer

app = typer.Typer(help="localerr CLI.")
console = Console()


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(importlib.metadata.version("localerr"))
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(None, "--version", callback=_version_callback, is_eager=True),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


def _print_error(code: str, message: str) -> None:
    typer.echo(f"{code}: {message}", err=True)


def _load_config_or_exit(config_path: Path | None, overrides: dict[str, Any] | None = None) -> LocalerrConfig:
    try:
        return load_config(config_path, overrides)
    except ConfigError as exc:
        _print_error(exc.code, str(exc))
        raise typer.Exit(code=1) from exc


def _emit(payload: Any, output_format: str) -> None:
    output_format_normalized = output_format.lower()
    if output_format_normalized == "yaml":
        output = yaml.safe_dump(payload, sort_keys=False)
    elif output_format_normalized == "json":
        output = json.dumps(payload, indent=2)
    else:
        raise typer.BadParameter("Format must be 'yaml' or 'json'.")
    typer.echo(output)


def _parse_context(items: list[str] | None) -> dict[str, str] | None:
    if not items:
        return None
    context: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Context entries must look like KEY=VALUE, got {item!r}.")
        context[key] = value
    return context


def _jsonable_solution(solution: dict[str, Any]) -> dict[str, Any]:
    return {
        key: value.to_dict() if isinstance(value, TemplatedMessage) else value
        for key, value in solution.items()
    }


def _parse_code(code: str | None) -> str | int | None:
    if code is None:
        return None
    try:
        return int(code)
    except ValueError:
        return code


@app.command()
def render(
    template: str = typer.Argument(..., help="Message template, e.g. 'User {0} not found'."),
    arguments: list[str] | None = typer.Argument(None, help="Positional placeholder arguments."),
    kind: str = typer.Option(LocalizedError.error_kind, "--kind", "-k"),
    status_code: int | None = typer.Option(None, "--status-code"),
    code: str | None = typer.Option(None, "--code"),
    context: list[str] | None = typer.Option(None, "--context", help="KEY=VALUE, repeatable."),
    engine: str | None = typer.Option(None, "--engine", help="placeholder or jinja."),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        dir_okay=False,
        resolve_path=True,
    ),
    output_format: str = typer.Option("yaml", "--format", "-f"),
) -> None:
    """Build an error and print its structured form and solution payload."""
    overrides = {"render": {"engine": engine}} if engine else None
    config = _load_config_or_exit(config_path, overrides)
    try:
        error_class = error_class_for(kind)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    error = error_class.make(
        TemplatedMessage(template, arguments or ()),
        status_code=status_code,
        code=_parse_code(code),
        context=_parse_context(context),
        renderer=build_renderer(config.render),
    )
    try:
        payload = {
            "error": error.to_dict(),
            "solution": _jsonable_solution(error.solution(config.docs)),
        }
    except RenderError as exc:
        _print_error(exc.code, str(exc))
        raise typer.Exit(code=1) from exc
    _emit(payload, output_format)


@app.command("kinds")
def list_kinds(
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        dir_okay=False,
        resolve_path=True,
    ),
    output_format: str = typer.Option("table", "--format", "-f"),
) -> None:
    """List the known error kinds and their defaults."""
    config = _load_config_or_exit(config_path)
    kinds = [
        {
            "kind": error_kind,
            "class": error_class.__name__,
            "default_status": error_class.default_status,
            "link": config.docs.link_for(error_kind),
        }
        for error_kind, error_class in ERROR_KINDS.items()
    ]

    if output_format.lower() == "json":
        typer.echo(json.dumps(kinds, indent=2))
        return
    if output_format.lower() != "table":
        raise typer.BadParameter("Format must be 'table' or 'json'.")

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Kind", style="cyan")
    table.add_column("Class")
    table.add_column("Status", justify="center")
    table.add_column("Docs")
    for entry in kinds:
        table.add_row(entry["kind"], entry["class"], str(entry["default_status"]), entry["link"])
    console.print(table)


@app.command()
def config(
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        dir_okay=False,
        resolve_path=True,
    ),
    output_format: str = typer.Option("yaml", "--format", "-f"),
    docs_base_url: str | None = typer.Option(None, "--docs-base-url"),
    engine: str | None = typer.Option(None, "--engine"),
    strict: bool | None = typer.Option(None, "--strict/--no-strict"),
) -> None:
    """Show current configuration."""
    overrides: dict[str, Any] = {}
    if docs_base_url is not None:
        overrides.setdefault("docs", {})["base_url"] = docs_base_url
    if engine is not None:
        overrides.setdefault("render", {})["engine"] = engine
    if strict is not None:
        overrides.setdefault("render", {})["strict"] = strict
    config_data = _load_config_or_exit(config_path, overrides)
    _emit(serialize_config(config_data), output_format)


if __name__ == "__main__":
    app()
