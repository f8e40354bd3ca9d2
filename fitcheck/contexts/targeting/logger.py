"""
Targeting context logger.

Provides logging interface for targeting context with automatic [target] prefix.
All targeting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from fitcheck.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[target]"


def setup_targeting_logger(
    log_dir: Optional[Path] = None, target: str = "", console_level: str = "INFO"
) -> Path:
    """
    Setup logger for targeting context.

    Args:
        log_dir: Directory for this scoring session (defaults to LOGS_PATH)
        target: Role key or job profile id for the provenance header
        console_level: Minimum level shown on the console

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="target",
        log_dir=log_dir,
        extra_provenance={"Target": target} if target else None,
        console_level=console_level,
    )


# Wrapper functions with automatic [target] prefix


def _log_info(message: str) -> None:
    """Log info message with [target] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_exception(message: str) -> None:
    """Log error message with [target] prefix and the active traceback."""
    logger.exception(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [target] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level targeting-specific logging helpers


def log_scoring_start(mode: str, target_id: str, corpus_length: int) -> None:
    """Log start of a scoring run."""
    _log_debug(f"Scoring resume against {mode} target '{target_id}'")
    _log_debug(f"  Corpus: {corpus_length} chars")


def log_scoring_result(result) -> None:
    """
    Log a finished ScoreResult.

    Args:
        result: ScoreResult from compute_score()
    """
    _log_info(
        f"{result.target_title}: {result.overall}/100 "
        f"(fit {result.fit_level.value}, completeness {result.accuracy}%)"
    )
    _log_debug(f"  Matched keywords: {len(result.matched_keywords)}")
    _log_debug(f"  Missing keywords: {len(result.missing_keywords)}")
    if result.gaps:
        for gap in result.gaps:
            _log_debug(f"  Gap [{gap.severity.value}] {gap.category}: {', '.join(gap.missing)}")
