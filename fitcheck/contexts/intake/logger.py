"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[intake]"


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_profiles_loaded(kind: str, count: int, source_path) -> None:
    """Log a profile table load."""
    _log_debug(f"Loaded {count} {kind} from {source_path}")
