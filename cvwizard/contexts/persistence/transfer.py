"""
Explicit export and import of resume data files.

Export writes the full snapshot as JSON. Import reads a JSON file and merges it
into the session by presence of its top-level keys. A file that cannot be read
or does not hold a valid snapshot is discarded without changing the session.
"""

from pathlib import Path

from cvwizard.contexts.authoring.session import AuthoringSession
from cvwizard.contexts.persistence.exceptions import SnapshotFormatError
from cvwizard.contexts.persistence.logger import log_export, log_import, log_import_discarded
from cvwizard.contexts.persistence.snapshot import apply_snapshot, from_json, serialize_session, to_json

DEFAULT_EXPORT_NAME = "resume-data.json"


def export_to_file(session: AuthoringSession, path: Path) -> Path:
    """
    Write the session snapshot to a JSON file.

    Args:
        session: Session to export
        path: Target file, or a directory to receive DEFAULT_EXPORT_NAME

    Returns:
        Path of the written file

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(path)
    if path.is_dir():
        path = path / DEFAULT_EXPORT_NAME

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(serialize_session(session)), encoding="utf-8")
    log_export(path)
    return path


def import_from_file(session: AuthoringSession, path: Path) -> bool:
    """
    Merge a previously exported JSON file into the session.

    Returns:
        True if the file was applied, False if it was discarded
    """
    path = Path(path)

    try:
        snapshot = from_json(path.read_text(encoding="utf-8"))
        apply_snapshot(session, snapshot)
    except (OSError, UnicodeDecodeError, SnapshotFormatError) as e:
        log_import_discarded(path, e)
        return False

    log_import(path)
    return True
