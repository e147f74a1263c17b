"""
Shared utilities for CVWIZARD.

Common functionality used across contexts:
- Logger setup
- Configuration loading
"""

from cvwizard.utils.config import load_settings

__all__ = ["load_settings"]
