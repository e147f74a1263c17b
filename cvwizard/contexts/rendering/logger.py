"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[render]"


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def log_render_start(output_path: Path) -> None:
    _log_info(f"Rendering resume to {output_path}")


def log_render_finished(output_path: Path) -> None:
    _log_success(f"Rendered {output_path}")


def log_render_failed(output_path: Path, error: Exception) -> None:
    _log_error(f"Rendering {output_path} failed: {error}")
