"""
Authoring context logger.

Provides logging interface for authoring context with automatic [author] prefix.
All authoring modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[author]"


def _log_info(message: str) -> None:
    """Log info message with [author] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [author] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_step_change(old_step: int, new_step: int) -> None:
    """Log a step transition."""
    _log_debug(f"Step {old_step} -> {new_step}")


def log_step_blocked(step: int, reason: str) -> None:
    """Log a refused forward transition."""
    _log_debug(f"Step {step} blocked: {reason}")


def log_session_reset() -> None:
    """Log an explicit session reset."""
    _log_info("Session reset to defaults")
