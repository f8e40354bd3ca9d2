"""
Analysis history log.

Append-only JSON Lines log of score results (one record per line), plus the
dashboard statistics computed from it. Each record is a ScoreResult.to_dict()
with the job title and company it was scored against.

The log is caller-managed: appending does not validate earlier records or
bound the file size.

Usage:
    from fitcheck.utils.analysis_history import append_analysis, history_stats, load_history

    append_analysis(result, job_title="Frontend Developer", job_company="Tech Corp")
    stats = history_stats(load_history())
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from loguru import logger

from fitcheck.utils.numeric import round_half_up

load_dotenv()
HISTORY_FILE = Path(os.getenv("FITCHECK_HISTORY_FILE", "outs/logs/analysis_history.jsonl"))

RECENT_ANALYSES_COUNT = 5
HIGH_FIT = "High"


@dataclass
class DashboardStats:
    """
    Summary of the analysis history.

    Attributes:
        total_analyses: Number of records
        average_score: Rounded mean of overall scores (0 when empty)
        high_fit_count: Records whose fit level is High
        recent_analyses: Up to five most recent records, newest first
    """

    total_analyses: int = 0
    average_score: int = 0
    high_fit_count: int = 0
    recent_analyses: List[Dict[str, Any]] = field(default_factory=list)


def _resolve(history_file: Optional[Path]) -> Path:
    return Path(history_file) if history_file is not None else HISTORY_FILE


def append_analysis(
    result,
    job_title: str,
    job_company: str = "",
    history_file: Optional[Path] = None,
) -> Dict[str, Any]:
    """
    Append a result record to the history log.

    Args:
        result: ScoreResult to record
        job_title: Title of the role / job the resume was scored against
        job_company: Hiring company ("" for generic roles)
        history_file: Optional log path (defaults to HISTORY_FILE)

    Returns:
        The record that was written
    """
    path = _resolve(history_file)
    path.parent.mkdir(parents=True, exist_ok=True)

    record = {**result.to_dict(), "job_title": job_title, "job_company": job_company}

    with open(path, "a", encoding="utf-8") as f:
        f.write(json.dumps(record) + "\n")

    logger.debug(f"Appended analysis for '{job_title}' to {path}")
    return record


def load_history(history_file: Optional[Path] = None) -> List[Dict[str, Any]]:
    """
    Read all records, oldest first.

    Lines that are not JSON objects are skipped with a warning.
    """
    path = _resolve(history_file)
    if not path.exists():
        return []

    records = []
    with open(path, "r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError:
                record = None
            if not isinstance(record, dict):
                logger.warning(f"Skipping malformed history line {line_number} in {path}")
                continue
            records.append(record)
    return records


def _write_history(records: List[Dict[str, Any]], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for record in records:
            f.write(json.dumps(record) + "\n")


def delete_analysis(index: int, history_file: Optional[Path] = None) -> Dict[str, Any]:
    """
    Remove one record by its position (0 = oldest).

    Returns:
        The removed record

    Raises:
        IndexError: If index is out of range
    """
    path = _resolve(history_file)
    records = load_history(path)
    if not 0 <= index < len(records):
        raise IndexError(f"No analysis at index {index} (history has {len(records)} entries)")

    removed = records.pop(index)
    _write_history(records, path)
    return removed


def clear_history(history_file: Optional[Path] = None) -> int:
    """
    Delete the history log.

    Returns:
        Number of records that were removed
    """
    path = _resolve(history_file)
    count = len(load_history(path))
    if path.exists():
        path.unlink()
    return count


def history_stats(records: List[Dict[str, Any]]) -> DashboardStats:
    """Compute dashboard statistics for a list of history records."""
    total = len(records)
    if total == 0:
        return DashboardStats()

    average = round_half_up(sum(r.get("overall", 0) for r in records) / total)
    high_fit = sum(1 for r in records if r.get("fit_level") == HIGH_FIT)
    recent = list(reversed(records[-RECENT_ANALYSES_COUNT:]))

    return DashboardStats(
        total_analyses=total,
        average_score=average,
        high_fit_count=high_fit,
        recent_analyses=recent,
    )
