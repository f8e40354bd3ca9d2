#!/usr/bin/env python3
"""
Score a resume against a role or a job profile.

Usage:
    # List available targets
    python scripts/score_resume.py roles
    python scripts/score_resume.py jobs

    # Role-weighted score
    python scripts/score_resume.py role resume.yaml frontend-developer

    # Requirement-weighted score, saved to the analysis history
    python scripts/score_resume.py job resume.yaml frontend-dev --save

    # Raw JSON record instead of the text report
    python scripts/score_resume.py job resume.yaml data-scientist --json
"""

import json
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from fitcheck.contexts.intake import (
    InvalidProfileError,
    ProfileRegistry,
    Resume,
    UnknownTargetError,
)
from fitcheck.contexts.targeting import compute_score
from fitcheck.contexts.targeting.logger import setup_targeting_logger
from fitcheck.utils.analysis_history import append_analysis
from fitcheck.utils.logger import LOGS_PATH
from fitcheck.utils.report_formatter import Column, TableFormatter, format_score_report
from fitcheck.utils.timestamp import now

load_dotenv()

app = typer.Typer(
    help="Score a resume against a role or a job profile",
    add_completion=False,
)

RolesOption = Annotated[
    Optional[Path],
    typer.Option("--roles", help="Role table YAML (defaults to FITCHECK_ROLE_PROFILES)"),
]
JobsOption = Annotated[
    Optional[Path],
    typer.Option("--jobs", help="Job profile table YAML (defaults to FITCHECK_JOB_PROFILES)"),
]
ResumeArgument = Annotated[
    Path,
    typer.Argument(help="Resume file (YAML or JSON)", exists=True, dir_okay=False),
]


def _fail(message: str) -> None:
    typer.secho(f"ERROR: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _load_registry(roles: Optional[Path], jobs: Optional[Path]) -> ProfileRegistry:
    try:
        return ProfileRegistry.from_files(roles_path=roles, job_profiles_path=jobs)
    except (InvalidProfileError, FileNotFoundError) as e:
        _fail(str(e))


def _load_resume(resume_file: Path) -> Resume:
    try:
        return Resume.from_file(resume_file)
    except ValueError as e:
        _fail(str(e))


def _emit(result, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        typer.echo(format_score_report(result))


def _require_name(resume: Resume, resume_file: Path) -> None:
    # A resume without a profile name has not been parsed yet: no score, nothing saved
    if not resume.has_name():
        _fail(f"Resume has no profile name, not scoring it yet: {resume_file}")


@app.command("roles")
def roles_command(roles: RolesOption = None, jobs: JobsOption = None):
    """List role keys available for role-weighted scoring."""
    registry = _load_registry(roles, jobs)
    table = TableFormatter([Column("Key", 24), Column("Title", 28), Column("Weights", 26)])
    table.add_table_header()
    for role in registry.list_roles():
        weights = " ".join(f"{c}={w}" for c, w in role.weights.items())
        table.add_row([role.key, role.title, weights])
    typer.echo(table.render())


@app.command("jobs")
def jobs_command(roles: RolesOption = None, jobs: JobsOption = None):
    """List job profiles available for requirement-weighted scoring."""
    registry = _load_registry(roles, jobs)
    table = TableFormatter(
        [Column("Id", 18), Column("Title", 26), Column("Company", 18), Column("Reqs", 5, ">")]
    )
    table.add_table_header()
    for profile in registry.list_job_profiles():
        table.add_row([profile.id, profile.title, profile.company, len(profile.requirements)])
    typer.echo(table.render())


@app.command("role")
def role_command(
    resume_file: ResumeArgument,
    role_key: Annotated[str, typer.Argument(help="Role key (e.g., frontend-developer)")],
    save: Annotated[bool, typer.Option("--save", help="Append the result to the history")] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print the raw JSON record")] = False,
    roles: RolesOption = None,
    jobs: JobsOption = None,
):
    """Role-weighted score (fixed categories and weights)."""
    setup_targeting_logger(LOGS_PATH / f"score_{now()}", target=role_key, console_level="WARNING")
    registry = _load_registry(roles, jobs)

    try:
        role = registry.get_role(role_key)
    except UnknownTargetError as e:
        _fail(str(e))

    resume = _load_resume(resume_file)
    _require_name(resume, resume_file)
    result = compute_score(resume, role)
    _emit(result, as_json)

    if save:
        append_analysis(result, job_title=role.title)
        typer.secho("Saved to analysis history", fg=typer.colors.GREEN, err=True)


@app.command("job")
def job_command(
    resume_file: ResumeArgument,
    profile_id: Annotated[str, typer.Argument(help="Job profile id (e.g., frontend-dev)")],
    save: Annotated[bool, typer.Option("--save", help="Append the result to the history")] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print the raw JSON record")] = False,
    roles: RolesOption = None,
    jobs: JobsOption = None,
):
    """Requirement-weighted score with gap analysis and feedback."""
    setup_targeting_logger(LOGS_PATH / f"score_{now()}", target=profile_id, console_level="WARNING")
    registry = _load_registry(roles, jobs)

    try:
        profile = registry.get_job_profile(profile_id)
    except UnknownTargetError as e:
        _fail(str(e))

    resume = _load_resume(resume_file)
    _require_name(resume, resume_file)
    result = compute_score(resume, profile)
    _emit(result, as_json)

    if save:
        append_analysis(result, job_title=profile.title, job_company=profile.company)
        typer.secho("Saved to analysis history", fg=typer.colors.GREEN, err=True)


if __name__ == "__main__":
    app()
