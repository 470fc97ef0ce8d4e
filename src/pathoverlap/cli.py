from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from pathoverlap.config import OverlapConfig
from pathoverlap.domain.errors import PathOverlapError
from pathoverlap.domain.models import MethodScope, ParamRule
from pathoverlap.orchestrator.pipeline import run_check, run_scan
from pathoverlap.report.console import render_check, render_scan
from pathoverlap.sources.provider import provider_for


app = typer.Typer(no_args_is_help=True, add_completion=False)

console = Console()
err_console = Console(stderr=True)

EXIT_OVERLAP = 1
EXIT_ERROR = 2


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _check_format(format: str) -> str:
    fmt = format.lower().strip()
    if fmt not in ("table", "json"):
        raise typer.BadParameter("format must be one of: table, json")
    return fmt


def _require_source(url: Optional[str], file: Optional[str]) -> None:
    if not url and not file:
        raise typer.BadParameter("one of --url or --file is required")


def _fail(e: PathOverlapError) -> None:
    err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
    raise typer.Exit(code=EXIT_ERROR)


@app.command()
def check(
    path: str = typer.Argument(..., help="Candidate path to check, e.g. /users/me"),
    method: Optional[str] = typer.Option(None, "--method", "-m", help="HTTP method of the candidate route"),
    url: Optional[str] = typer.Option(None, "--url", "-u", help="URL of the Swagger/OpenAPI document"),
    file: Optional[str] = typer.Option(None, "--file", "-f", help="Local JSON/YAML Swagger/OpenAPI document"),
    download: bool = typer.Option(False, "--download", "-d", help="Save a document fetched from --url to download/swagger.json"),
    save_tree: bool = typer.Option(False, "--save-tree", "-s", help="Save the endpoint tree to output/endpoints.json"),
    symmetric: bool = typer.Option(False, "--symmetric", help="Let {params} in the candidate match literals too"),
    fold_method_case: bool = typer.Option(False, "--fold-method-case", help="Match declared methods case-insensitively"),
    config: Optional[str] = typer.Option(None, "--config", help="YAML settings file"),
    format: str = typer.Option("table", help="Output format: table|json"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Check whether one route overlaps a route already declared in the document."""
    _setup_logging(verbose)
    fmt = _check_format(format)
    _require_source(url, file)
    if not path.strip():
        raise typer.BadParameter("path must not be empty")

    try:
        cfg = OverlapConfig.load(config).with_overrides(
            single_rule=ParamRule.SYMMETRIC if symmetric else None,
            fold_method_case=True if fold_method_case else None,
        )
        result = run_check(
            provider_for(url=url, file_path=file, timeout=cfg.timeout),
            path,
            method,
            config=cfg,
            base_dir=Path("."),
            save_document=download,
            save_tree=save_tree,
        )
    except PathOverlapError as e:
        _fail(e)

    render_check(console, result, format=fmt)
    if result.overlaps:
        raise typer.Exit(code=EXIT_OVERLAP)


@app.command()
def scan(
    url: Optional[str] = typer.Option(None, "--url", "-u", help="URL of the Swagger/OpenAPI document"),
    file: Optional[str] = typer.Option(None, "--file", "-f", help="Local JSON/YAML Swagger/OpenAPI document"),
    download: bool = typer.Option(False, "--download", "-d", help="Save a document fetched from --url to download/swagger.json"),
    save_tree: bool = typer.Option(False, "--save-tree", "-s", help="Save the endpoint tree to output/endpoints.json"),
    method_scope: Optional[MethodScope] = typer.Option(
        None, "--method-scope", help="any: report shape overlaps; shared: only when a method is shared"
    ),
    asymmetric: bool = typer.Option(False, "--asymmetric", help="Only the later route's {params} act as wildcards"),
    config: Optional[str] = typer.Option(None, "--config", help="YAML settings file"),
    format: str = typer.Option("table", help="Output format: table|json"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Report every pair of declared routes that could match the same request path."""
    _setup_logging(verbose)
    fmt = _check_format(format)
    _require_source(url, file)

    try:
        cfg = OverlapConfig.load(config).with_overrides(
            scan_rule=ParamRule.EXISTING if asymmetric else None,
            method_scope=method_scope,
        )
        result = run_scan(
            provider_for(url=url, file_path=file, timeout=cfg.timeout),
            config=cfg,
            base_dir=Path("."),
            save_document=download,
            save_tree=save_tree,
        )
    except PathOverlapError as e:
        _fail(e)

    render_scan(console, result, format=fmt)
    if result.overlaps:
        raise typer.Exit(code=EXIT_OVERLAP)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
