#!/usr/bin/env python3
"""
Command-line interface for the analysis history log.

The history (FITCHECK_HISTORY_FILE, JSON Lines) holds one record per saved
score. Records are addressed by index, 0 being the oldest.

Commands:
    list    - List all saved analyses
    stats   - Dashboard statistics (total, average score, high-fit count, recent)
    show    - Full report for one analysis
    delete  - Remove one analysis
    clear   - Remove all analyses
"""

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from fitcheck.contexts.targeting.result import ScoreResult
from fitcheck.utils.analysis_history import (
    clear_history,
    delete_analysis,
    history_stats,
    load_history,
)
from fitcheck.utils.report_formatter import format_history_table, format_score_report
from fitcheck.utils.timestamp import format_timestamp

load_dotenv()

app = typer.Typer(
    add_completion=False,
    help="Inspect and manage the analysis history",
    invoke_without_command=True,
)

HistoryOption = Annotated[
    Optional[Path],
    typer.Option("--file", "-f", help="History file (defaults to FITCHECK_HISTORY_FILE)"),
]


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("list")
def list_command(
    relative: Annotated[bool, typer.Option("--relative", "-r", help="Show relative times")] = False,
    history_file: HistoryOption = None,
):
    """List all saved analyses, oldest first."""
    records = load_history(history_file)
    if not records:
        typer.echo("No analysis history. Score a resume with --save to start one.")
        return
    typer.echo(format_history_table(records, relative=relative))


@app.command("stats")
def stats_command(history_file: HistoryOption = None):
    """Show dashboard statistics."""
    stats = history_stats(load_history(history_file))

    typer.secho("Dashboard", bold=True)
    typer.echo(f"  Total analyses: {stats.total_analyses}")
    typer.echo(f"  Average score:  {stats.average_score}/100")
    typer.echo(f"  High fit:       {stats.high_fit_count}")

    if stats.recent_analyses:
        typer.echo("\nRecent analyses:")
        for record in stats.recent_analyses:
            when = format_timestamp(record.get("timestamp", ""), relative=True)
            typer.echo(
                f"  {record.get('overall', '?'):>3}/100  {record.get('job_title', '')}"
                f" ({record.get('fit_level', '')}, {when})"
            )


@app.command("show")
def show_command(
    index: Annotated[int, typer.Argument(help="Analysis index (0 = oldest)")],
    history_file: HistoryOption = None,
):
    """Show the full report for one analysis."""
    records = load_history(history_file)
    if not 0 <= index < len(records):
        typer.secho(
            f"No analysis at index {index} (history has {len(records)} entries)",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    record = records[index]
    company = record.get("job_company")
    typer.echo(f"{record.get('job_title', '')}" + (f" at {company}" if company else ""))
    typer.echo(format_score_report(ScoreResult.from_dict(record)))


@app.command("delete")
def delete_command(
    index: Annotated[int, typer.Argument(help="Analysis index (0 = oldest)")],
    history_file: HistoryOption = None,
):
    """Remove one analysis."""
    try:
        removed = delete_analysis(index, history_file)
    except IndexError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Deleted analysis {index}: {removed.get('job_title', '')} ({removed.get('overall')}/100)")


@app.command("clear")
def clear_command(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
    history_file: HistoryOption = None,
):
    """Remove all analyses."""
    if not yes:
        typer.confirm("Delete the entire analysis history?", abort=True)
    count = clear_history(history_file)
    typer.echo(f"Cleared {count} analyses")


if __name__ == "__main__":
    app()
