"""
Persistence context logger.

Provides logging interface for persistence context with automatic [persist] prefix.
All persistence modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[persist]"


def _log_info(message: str) -> None:
    """Log info message with [persist] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [persist] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [persist] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_autosave_written(path: Path) -> None:
    _log_debug(f"Autosaved to {path}")


def log_autosave_failed(key: str, error: Exception) -> None:
    _log_warning(f"Autosave '{key}' unavailable, continuing in memory: {error}")


def log_autosave_discarded(key: str, error: Exception) -> None:
    _log_warning(f"Ignoring malformed autosave '{key}': {error}")


def log_export(path: Path) -> None:
    _log_info(f"Exported resume data to {path}")


def log_import(path: Path) -> None:
    _log_info(f"Imported resume data from {path}")


def log_import_discarded(path: Path, error: Exception) -> None:
    _log_debug(f"Discarded import from {path}: {error}")
