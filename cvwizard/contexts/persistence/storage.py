"""
Local key-value storage for snapshots.

Each key maps to one JSON file inside the storage directory
(CVWIZARD_STORAGE_DIR, default ~/.cvwizard). Writes go to a temp file first
and are moved into place, so a failed write never leaves a half-written
snapshot behind.

Usage:
    from cvwizard.contexts.persistence.storage import LocalStore, AUTOSAVE_KEY

    store = LocalStore()
    store.write(AUTOSAVE_KEY, '{"sectionOrder": [...]}')
    store.read(AUTOSAVE_KEY)
"""

import os
import re
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from cvwizard.utils.config import load_settings

# Well-known key under which the latest autosave snapshot lives
AUTOSAVE_KEY = "cvwizard-autosave"

VALID_KEY = re.compile(r"^[A-Za-z0-9._-]+$")


class LocalStore:
    """
    File-backed key-value store.

    Attributes:
        directory: Directory holding one <key>.json file per key
    """

    def __init__(self, directory: Path = None):
        if directory is None:
            directory = Path(load_settings()["storage"]["directory"]).expanduser()
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        """
        File path for a key.

        Raises:
            ValueError: If the key contains characters unsafe for a file name
        """
        if not VALID_KEY.match(key):
            raise ValueError(f"Invalid storage key: '{key}'")
        return self.directory / f"{key}.json"

    def read(self, key: str) -> Optional[str]:
        """Stored text for a key, or None when nothing is stored."""
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: str, text: str) -> Path:
        """
        Store text under a key, replacing any previous value.

        Raises:
            OSError: If the directory cannot be created or the file cannot be written
        """
        path = self.path_for(key)
        self.directory.mkdir(parents=True, exist_ok=True)

        temp_fd, temp_path = tempfile.mkstemp(suffix=".json", dir=self.directory, text=True)
        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                f.write(text)
            shutil.move(temp_path, path)
        except Exception:
            # Clean up temp file if write failed
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise

        return path

    def delete(self, key: str) -> bool:
        """Remove a key. Returns True if something was deleted."""
        path = self.path_for(key)
        if not path.exists():
            return False
        path.unlink()
        return True
