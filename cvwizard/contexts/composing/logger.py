"""
Composing context logger.

Provides logging interface for composing context with automatic [compose] prefix.
All composing modules should import from this module, not from utils.logger directly.
"""

from typing import List

from loguru import logger

CONTEXT_PREFIX = "[compose]"


def _log_debug(message: str) -> None:
    """Log debug message with [compose] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_composition(section_ids: List[str]) -> None:
    """Log which sections made it into a composition."""
    _log_debug(f"Composed {len(section_ids)} section(s): {', '.join(section_ids) or '(none)'}")
