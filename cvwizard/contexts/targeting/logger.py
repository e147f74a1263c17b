"""
Targeting context logger.

Provides logging interface for targeting context with automatic [target] prefix.
All targeting modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[target]"


def _log_debug(message: str) -> None:
    """Log debug message with [target] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_keyword_analysis(keyword_count: int, missing_count: int) -> None:
    """Log the outcome of a keyword gap analysis."""
    _log_debug(f"Keyword gap: {missing_count} of {keyword_count} keyword(s) missing")
