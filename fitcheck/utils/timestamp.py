"""Timestamp helpers for result records, log directories, and history listings."""

from datetime import datetime


def now() -> str:
    """Compact local timestamp for directory names (e.g., "20251114_123456")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def now_exact() -> str:
    """ISO 8601 local timestamp with microseconds, used on every ScoreResult."""
    return datetime.now().isoformat()


def format_timestamp(iso_timestamp: str, relative: bool = False) -> str:
    """
    Format an ISO 8601 timestamp for display.

    Args:
        iso_timestamp: ISO 8601 formatted timestamp string
        relative: If True, show compact relative time (e.g., "2h ago")

    Returns:
        Human-readable timestamp, or the input unchanged if it does not parse

    Examples:
        format_timestamp("2025-11-13T18:45:40.572549")
        # "2025-11-13 18:45:40"
    """
    try:
        dt = datetime.fromisoformat(iso_timestamp)
    except (TypeError, ValueError):
        return iso_timestamp

    if relative:
        return _format_relative_time(dt)
    return dt.strftime("%Y-%m-%d %H:%M:%S")


def _format_relative_time(dt: datetime) -> str:
    """Compact relative time: "30s ago", "15m ago", "2h ago", "5d ago"."""
    diff = datetime.now() - dt

    if diff.total_seconds() < 0:
        diff = -diff
        suffix = "from now"
    else:
        suffix = "ago"

    seconds = int(diff.total_seconds())
    if seconds < 60:
        return f"{seconds}s {suffix}"
    if seconds < 3600:
        return f"{seconds // 60}m {suffix}"
    if seconds < 86400:
        return f"{seconds // 3600}h {suffix}"
    return f"{diff.days}d {suffix}"
