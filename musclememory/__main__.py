"""CLI for the musclememory verification engine.

Usage:
    python -m musclememory levels                          # Show the curriculum
    python -m musclememory endpoint GET /health            # Check one endpoint
    python -m musclememory level l1-crud                   # Run a level's checks
    python -m musclememory all                             # Speed run (smoke suite)
    python -m musclememory progress                        # Level status + best time
    python -m musclememory results                         # List stored runs
    python -m musclememory report                          # Generate RESULTS.md
    python -m musclememory note <timestamp> <text>         # Annotate a run
"""

from __future__ import annotations

import asyncio
import json
from typing import List, Optional

import typer
from rich.console import Console

from musclememory import settings
from musclememory.engine import VerificationEngine
from musclememory.levels import list_levels, load_level
from musclememory.models import EndpointSpec, HttpMethod
from musclememory.report import (
    generate_report,
    list_all_results,
    render_endpoint_result,
    render_full_result,
    render_level_result,
    render_levels,
    render_progress,
)
from musclememory.storage import load_progress, save_note, save_result

app = typer.Typer(
    name="musclememory",
    help="Verify a learner-built backend against the Backend Muscle Memory levels",
    no_args_is_help=True,
)
console = Console(stderr=True)

_METHODS = ", ".join(m.value for m in HttpMethod)


def _engine(timeout_ms: Optional[int]) -> VerificationEngine:
    ms = timeout_ms if timeout_ms and timeout_ms > 0 else settings.timeout_ms()
    return VerificationEngine(timeout_s=ms / 1000)


def _base_url(url: Optional[str]) -> str:
    base = (url or settings.backend_url()).rstrip("/")
    if not base.startswith(("http://", "https://")):
        console.print(f"[red]Invalid backend URL: {base}[/red] (expected http:// or https://)")
        raise typer.Exit(1)
    return base


def _parse_headers(raw: List[str]) -> Optional[dict[str, str]]:
    if not raw:
        return None
    headers: dict[str, str] = {}
    for item in raw:
        name, sep, value = item.partition(":")
        if not sep or not name.strip():
            console.print(f"[red]Invalid header: {item}[/red] (expected 'Name: value')")
            raise typer.Exit(1)
        headers[name.strip()] = value.strip()
    return headers


def _parse_body(raw: Optional[str]) -> Optional[dict]:
    if raw is None:
        return None
    try:
        body = json.loads(raw)
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON body:[/red] {e}")
        raise typer.Exit(1)
    if not isinstance(body, dict):
        console.print("[red]JSON body must be an object[/red]")
        raise typer.Exit(1)
    return body


@app.command("levels")
def cmd_levels() -> None:
    """Show the curriculum levels."""
    levels = list_levels()
    if not levels:
        console.print("[yellow]No levels found.[/yellow]")
        raise typer.Exit(1)
    render_levels(levels, console)


@app.command("endpoint")
def cmd_endpoint(
    method: str = typer.Argument(help=f"HTTP method: {_METHODS}"),
    path: str = typer.Argument(help="Path starting with '/', e.g. /health"),
    url: Optional[str] = typer.Option(None, "--url", "-u", help="Backend base URL (default: $BMM_BACKEND_URL)"),
    expect: Optional[int] = typer.Option(None, "--expect", "-e", help="Expected status (default 200)"),
    body: Optional[str] = typer.Option(None, "--body", "-b", help="JSON object sent as request body"),
    header: List[str] = typer.Option([], "--header", "-H", help="Extra header 'Name: value' (repeatable)"),
    timeout_ms: Optional[int] = typer.Option(None, "--timeout-ms", help="Per-request deadline"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON on stdout"),
    no_save: bool = typer.Option(False, "--no-save", help="Don't store this run"),
) -> None:
    """Verify a single endpoint."""
    try:
        m = HttpMethod(method.upper())
    except ValueError:
        console.print(f"[red]Invalid method: {method}[/red]. Choose: {_METHODS}")
        raise typer.Exit(1)
    if not path.startswith("/"):
        console.print(f"[red]Invalid path: {path}[/red] (must start with '/')")
        raise typer.Exit(1)

    base = _base_url(url)
    spec = EndpointSpec(
        method=m,
        path=path,
        expected_status=expect,
        body=_parse_body(body),
        headers=_parse_headers(header),
    )
    result = asyncio.run(_engine(timeout_ms).verify_endpoint(spec, base))

    if not no_save:
        save_result(result, base)
    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        render_endpoint_result(result, console)
    if not result.success:
        raise typer.Exit(1)


@app.command("level")
def cmd_level(
    level_id: str = typer.Argument(help="Level ID (e.g., 'l1-crud')"),
    url: Optional[str] = typer.Option(None, "--url", "-u", help="Backend base URL (default: $BMM_BACKEND_URL)"),
    timeout_ms: Optional[int] = typer.Option(None, "--timeout-ms", help="Per-request deadline"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON on stdout"),
    no_save: bool = typer.Option(False, "--no-save", help="Don't store this run"),
) -> None:
    """Run every check of one level, in order."""
    level = load_level(level_id)
    if not level:
        console.print(f"[red]Error:[/red] Unknown level: {level_id}")
        raise typer.Exit(1)

    base = _base_url(url)
    console.print(f"\n[bold]Verifying:[/bold] {level.id} ({level.title}) against {base}")
    result = asyncio.run(_engine(timeout_ms).verify_level(level.to_level_spec(), base))

    if not no_save:
        save_result(result, base)
    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        render_level_result(result, console)
    if not result.passed:
        raise typer.Exit(1)


@app.command("all")
def cmd_all(
    url: Optional[str] = typer.Option(None, "--url", "-u", help="Backend base URL (default: $BMM_BACKEND_URL)"),
    timeout_ms: Optional[int] = typer.Option(None, "--timeout-ms", help="Per-request deadline"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON on stdout"),
    no_save: bool = typer.Option(False, "--no-save", help="Don't store this run"),
) -> None:
    """Speed run: the fixed smoke suite across l0-server, l1-crud, l2-database."""
    base = _base_url(url)
    console.print(f"\n[bold]Speed run[/bold] against {base}")
    result = asyncio.run(_engine(timeout_ms).verify_all(base))

    if not no_save:
        record = save_result(result, base)
        console.print(f"  [dim]Saved run {record.timestamp}[/dim]")
    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        render_full_result(result, console)
    if not result.passed:
        raise typer.Exit(1)


@app.command("progress")
def cmd_progress() -> None:
    """Show level status and best speed-run time."""
    render_progress(load_progress(), console)


@app.command("results")
def cmd_results() -> None:
    """List all stored runs."""
    list_all_results(console)


@app.command("report")
def cmd_report() -> None:
    """Generate RESULTS.md with full history and notes."""
    path = generate_report()
    console.print(f"Report written to {path}")


@app.command("note")
def cmd_note(
    timestamp: str = typer.Argument(help="Run timestamp (e.g., '20260223T024533Z')"),
    text: str = typer.Argument(help="Note text to attach to the run"),
) -> None:
    """Annotate a run with a note (appears in report)."""
    save_note(timestamp, text)
    console.print(f"Note saved for {timestamp}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
