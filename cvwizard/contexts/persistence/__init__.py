"""
Persistence Context

Responsibilities:
- Serializes the authoring state (document, section order, visibility) to JSON
- Debounced autosave to local storage under a fixed key
- Explicit export/import of resume data files

Owns: Snapshot format, local storage files, autosave scheduling
Never: Validates or edits resume content beyond restoring it
"""

from cvwizard.contexts.persistence.autosave import (
    AutosaveScheduler,
    VirtualClock,
    load_autosaved_session,
)
from cvwizard.contexts.persistence.exceptions import SnapshotFormatError
from cvwizard.contexts.persistence.snapshot import (
    apply_snapshot,
    deserialize_state,
    serialize_session,
    serialize_state,
)
from cvwizard.contexts.persistence.storage import AUTOSAVE_KEY, LocalStore
from cvwizard.contexts.persistence.transfer import export_to_file, import_from_file

__all__ = [
    "AUTOSAVE_KEY",
    "AutosaveScheduler",
    "LocalStore",
    "SnapshotFormatError",
    "VirtualClock",
    "apply_snapshot",
    "deserialize_state",
    "export_to_file",
    "import_from_file",
    "load_autosaved_session",
    "serialize_session",
    "serialize_state",
]
