"""
Configuration loading for CVWIZARD.

Settings come from three layers, later layers overriding earlier ones:
1. Packaged defaults (cvwizard/config/defaults.yaml)
2. Optional override YAML (CVWIZARD_CONFIG_PATH)
3. Environment variables (CVWIZARD_AUTOSAVE_DEBOUNCE, CVWIZARD_STORAGE_DIR)

Usage:
    from cvwizard.utils.config import load_settings

    settings = load_settings()
    settings["autosave"]["debounce_seconds"]  # 1.0
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULTS_PATH = Path(__file__).resolve().parent.parent / "config" / "defaults.yaml"
DEFAULT_STORAGE_DIR = Path.home() / ".cvwizard"


def _environment_overrides() -> Dict[str, Any]:
    """Collect overrides set through environment variables."""
    overrides: Dict[str, Any] = {"storage": {}}

    debounce = os.getenv("CVWIZARD_AUTOSAVE_DEBOUNCE")
    if debounce:
        overrides["autosave"] = {"debounce_seconds": float(debounce)}

    overrides["storage"]["directory"] = os.getenv(
        "CVWIZARD_STORAGE_DIR", str(DEFAULT_STORAGE_DIR)
    )
    return overrides


@lru_cache(maxsize=None)
def load_settings(config_path: Path = None) -> Dict[str, Any]:
    """
    Load merged settings as a plain dict.

    Args:
        config_path: Optional override YAML (defaults to CVWIZARD_CONFIG_PATH, if set)

    Returns:
        Dict with presentation, contact, autosave, suggestions and storage keys

    Raises:
        FileNotFoundError: If an explicit override file does not exist
    """
    base = OmegaConf.load(DEFAULTS_PATH)
    layers = [base]

    if config_path is None and os.getenv("CVWIZARD_CONFIG_PATH"):
        config_path = Path(os.getenv("CVWIZARD_CONFIG_PATH"))

    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        layers.append(OmegaConf.load(config_path))

    layers.append(OmegaConf.create(_environment_overrides()))

    merged = OmegaConf.merge(*layers)
    return OmegaConf.to_container(merged, resolve=True)


def clear_settings_cache() -> None:
    """Forget cached settings so the next load re-reads files and environment."""
    load_settings.cache_clear()
