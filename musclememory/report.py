"""musclememory report — renders Rich tables and generates the markdown history.

Tables for single-endpoint, level and speed-run results, the level catalogue
and curriculum progress. Also generates a persistent RESULTS.md with the full
run history and notes.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from musclememory.levels import LevelInfo
from musclememory.models import EndpointResult, FullVerificationResult, LevelResult
from musclememory.settings import results_root
from musclememory.storage import KINDS, Progress, load_notes, load_records

_STATUS_STYLES = {
    "completed": "green",
    "available": "cyan",
    "locked": "dim",
}


def _fmt_ms(ms: Optional[int]) -> str:
    """Format a duration in ms, switching to seconds past 1s."""
    if ms is None:
        return "--"
    if ms >= 1000:
        return f"{ms / 1000:.2f}s"
    return f"{ms}ms"


def _verdict(passed: bool) -> str:
    return "[green]pass[/green]" if passed else "[red]fail[/red]"


def _status_cell(r: EndpointResult) -> str:
    if r.actual_status == 0:
        return f"[red]--[/red]/{r.expected_status}"
    color = "green" if r.actual_status == r.expected_status else "red"
    return f"[{color}]{r.actual_status}[/{color}]/{r.expected_status}"


def _results_table(title: str, results: list[EndpointResult]) -> Table:
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Check", min_width=20)
    table.add_column("Status", justify="right")
    table.add_column("Time", justify="right")
    table.add_column("Result")
    table.add_column("Message")

    for i, r in enumerate(results, 1):
        table.add_row(
            str(i),
            f"{r.method} {r.path}",
            _status_cell(r),
            _fmt_ms(r.response_time_ms),
            _verdict(r.success),
            r.message,
        )
    return table


def render_endpoint_result(result: EndpointResult, console: Console) -> None:
    console.print()
    console.print(_results_table("Endpoint check", [result]))
    if result.details:
        console.print(f"  [dim]details:[/dim] {result.details}")
    console.print()


def render_level_result(result: LevelResult, console: Console) -> None:
    """Render one level's checks plus its pass/fail summary."""
    console.print()
    console.print(_results_table(f"Level: {result.level_id}", result.results))
    for r in result.results:
        if r.details:
            console.print(f"  [dim]{r.method} {r.path}:[/dim] {r.details}")
    console.print(
        f"  {_verdict(result.passed)}  {result.passed_count} passed, "
        f"{result.failed_count} failed in {_fmt_ms(result.total_time_ms)}"
    )
    console.print()


def render_full_result(result: FullVerificationResult, console: Console) -> None:
    """Render the speed-run summary table followed by each level."""
    table = Table(title="Speed run", show_header=True, header_style="bold")
    table.add_column("Level", min_width=16)
    table.add_column("Passed", justify="right")
    table.add_column("Failed", justify="right")
    table.add_column("Time", justify="right")
    table.add_column("Verdict")

    for lr in result.level_results:
        table.add_row(
            lr.level_id,
            str(lr.passed_count),
            str(lr.failed_count),
            _fmt_ms(lr.total_time_ms),
            _verdict(lr.passed),
        )
    table.add_row(
        "[bold]total[/bold]",
        str(result.passed_count),
        str(result.failed_count),
        _fmt_ms(result.total_time_ms),
        _verdict(result.passed),
    )

    console.print()
    console.print(table)
    for lr in result.level_results:
        if not lr.passed:
            render_level_result(lr, console)
    console.print()


def render_levels(levels: list[LevelInfo], console: Console) -> None:
    table = Table(title="Levels", show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("ID", style="green", min_width=14)
    table.add_column("Title", min_width=20)
    table.add_column("Difficulty")
    table.add_column("Checks", justify="right")
    table.add_column("Estimate", justify="right")

    for level in levels:
        table.add_row(
            str(level.number),
            level.id,
            level.title,
            level.difficulty,
            str(len(level.checks)),
            level.estimated_time,
        )

    console.print()
    console.print(table)
    console.print()


def render_progress(progress: Progress, console: Console) -> None:
    table = Table(title="Progress", show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Level", min_width=14)
    table.add_column("Title", min_width=20)
    table.add_column("Status")
    table.add_column("Last run", style="dim")

    for lp in progress.levels:
        style = _STATUS_STYLES.get(lp.status, "white")
        table.add_row(
            str(lp.level.number),
            lp.level.id,
            lp.level.title,
            f"[{style}]{lp.status}[/{style}]",
            lp.last_run or "--",
        )

    console.print()
    console.print(table)
    console.print(
        f"  {progress.total_completed}/{len(progress.levels)} levels completed "
        f"({progress.completion_percentage}%)"
    )
    console.print(f"  Best speed run: {_fmt_ms(progress.best_speedrun_ms)}")
    console.print()


def list_all_results(console: Console, root: Optional[Path] = None) -> None:
    """List all stored runs grouped by kind."""
    records = load_records(root=root)
    if not records:
        console.print("[yellow]No results yet. Run a verification first.[/yellow]")
        return

    for kind in KINDS:
        of_kind = [r for r in records if r.kind == kind]
        if not of_kind:
            continue
        console.print(f"\n[bold]{kind}[/bold]")
        for r in reversed(of_kind):
            verdict = "pass" if r.passed else "fail"
            tests = f"{r.passed_count}/{r.passed_count + r.failed_count}"
            console.print(
                f"  {r.target:18s} {r.timestamp}  "
                f"{verdict:5s} {tests:6s} {_fmt_ms(r.total_time_ms):>8s}"
            )


# ---------------------------------------------------------------------------
# Markdown report generation
# ---------------------------------------------------------------------------

def _report_path(root: Optional[Path] = None) -> Path:
    """Path to the generated RESULTS.md."""
    return (root or results_root()) / "RESULTS.md"


def generate_report(root: Optional[Path] = None) -> Path:
    """Generate RESULTS.md with the full run history per kind.

    Returns the path to the generated file.
    """
    records = load_records(root=root)
    notes = load_notes(root)

    lines: list[str] = []
    lines.append("# Verification Results")
    lines.append("")
    lines.append(f"*Generated {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M UTC')}*")
    lines.append("")

    if not records:
        lines.append("No results yet.")
    for kind in KINDS:
        of_kind = [r for r in records if r.kind == kind]
        if not of_kind:
            continue
        lines.append(f"## {kind}")
        lines.append("")
        lines.append("| # | Timestamp | Target | Backend | Verdict | Checks | Time | Notes |")
        lines.append("|---|-----------|--------|---------|---------|--------|------|-------|")
        for i, r in enumerate(of_kind, 1):
            verdict = "pass" if r.passed else "fail"
            checks = f"{r.passed_count}/{r.passed_count + r.failed_count}"
            lines.append(
                f"| {i} | `{r.timestamp}` | {r.target} | {r.base_url} | **{verdict}** "
                f"| {checks} | {_fmt_ms(r.total_time_ms)} | {notes.get(r.timestamp, '')} |"
            )
        lines.append("")

    out = _report_path(root)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return out
