from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pathoverlap.orchestrator.pipeline import CheckResult, ScanResult


def render_check(console: Console, result: CheckResult, format: str = "table") -> None:
    if format == "json":
        payload = {
            "source": result.source,
            "path": result.path,
            "method": result.method,
            "overlaps": result.overlaps,
            "overlapping_path": result.overlapping_path,
            "endpoints_indexed": result.endpoints_indexed,
            "saved": result.saved,
        }
        console.print_json(data=payload)
        return

    # paths contain "{...}" and sometimes "[...]"; keep rich from reading them as markup
    path = escape(result.path)
    method = escape(result.method or "")
    if result.overlapping_path is not None:
        console.print(
            f"[red]Path '{path}' with method '{method}' overlaps with "
            f"'{escape(result.overlapping_path)}'[/red]"
        )
    else:
        console.print(f"[green]Path '{path}' with method '{method}' does not overlap.[/green]")

    _render_saved(console, result.saved)


def render_scan(console: Console, result: ScanResult, format: str = "table") -> None:
    if format == "json":
        payload = {
            "source": result.source,
            "endpoints_indexed": result.endpoints_indexed,
            "overlaps": [o.as_dict() for o in result.overlaps],
            "saved": result.saved,
        }
        console.print_json(data=payload)
        return

    if not result.overlaps:
        console.print("[green]No internal overlapping endpoints found.[/green]")
        _render_saved(console, result.saved)
        return

    console.print("[red]Overlapping endpoints found:[/red]")
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", no_wrap=True, justify="right")
    table.add_column("PATH")
    table.add_column("OVERLAPS WITH")
    for n, o in enumerate(result.overlaps, start=1):
        table.add_row(str(n), escape(o.path1), escape(o.path2), style="yellow")
    console.print(table)
    console.print(f"{len(result.overlaps)} overlapping pair(s) across {result.endpoints_indexed} paths")

    _render_saved(console, result.saved)


def _render_saved(console: Console, saved: list[str]) -> None:
    for p in saved:
        console.print(f"[bold green]Wrote[/bold green] {escape(p)}")
