"""
Snapshot serialization.

Converts the full authoring state (document, section order, section visibility)
to and from a JSON-compatible dict:

    {
        "document": {"firstName": ..., "education": [{"institution": ..., "id": ...}], ...},
        "sectionOrder": ["education", "experience", ...],
        "sectionVisibility": {"education": true, ...}
    }

Deserialization is strict: a malformed value raises SnapshotFormatError before
any session state is touched. Applying a snapshot merges by presence: each of
the three top-level keys that is present replaces the matching state, absent
keys leave it alone.
"""

import json
from typing import Any, Dict, Optional, Tuple

from cvwizard.contexts.authoring import entry_lists
from cvwizard.contexts.authoring.document import (
    ENTRY_TYPES,
    PRESENTATION_FIELDS,
    SCALAR_FIELDS,
    ResumeDocument,
)
from cvwizard.contexts.authoring.exceptions import InvalidFieldError
from cvwizard.contexts.authoring.resume_components import (
    editable_fields,
    record_from_dict,
    record_to_dict,
)
from cvwizard.contexts.authoring.session import AuthoringSession, normalize_section_order
from cvwizard.contexts.authoring.validators import canonical_field_name
from cvwizard.contexts.persistence.exceptions import SnapshotFormatError

DOCUMENT_KEY = "document"
ORDER_KEY = "sectionOrder"
VISIBILITY_KEY = "sectionVisibility"

# Fields that may legitimately be null in a snapshot
NULLABLE_FIELDS = {"profile_image", "url"}


def camel_case(name: str) -> str:
    """
    Convert a snake_case attribute name to its serialized camelCase key.

    Example:
        >>> camel_case("accent_color")
        'accentColor'
    """
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


# =============================================================================
# SERIALIZATION
# =============================================================================


def serialize_document(document: ResumeDocument) -> Dict[str, Any]:
    """Convert a ResumeDocument to a camelCase, JSON-compatible dict."""
    data: Dict[str, Any] = {}

    for name in SCALAR_FIELDS:
        data[camel_case(name)] = getattr(document, name)

    data["template"] = document.template.value
    data["font"] = document.font
    data["accentColor"] = document.accent_color

    for kind, record_type in ENTRY_TYPES.items():
        entries = document.entries(kind)
        if record_type is None:
            data[kind] = list(entries)
        else:
            data[kind] = [record_to_dict(entry) for entry in entries]

    return data


def serialize_state(
    document: ResumeDocument,
    section_order,
    section_visibility: Dict[str, bool],
) -> Dict[str, Any]:
    """
    Serialize the full authoring state.

    Returns:
        Dict with "document", "sectionOrder" and "sectionVisibility" keys
    """
    return {
        DOCUMENT_KEY: serialize_document(document),
        ORDER_KEY: list(section_order),
        VISIBILITY_KEY: dict(section_visibility),
    }


def serialize_session(session: AuthoringSession) -> Dict[str, Any]:
    return serialize_state(session.document, session.section_order, session.section_visibility)


def to_json(snapshot: Dict[str, Any]) -> str:
    return json.dumps(snapshot, indent=2, ensure_ascii=False)


# =============================================================================
# DESERIALIZATION
# =============================================================================


def _expect_string(value, key: str, nullable: bool = False):
    if value is None and nullable:
        return None
    if not isinstance(value, str):
        raise SnapshotFormatError(f"Expected string, got {type(value).__name__}", key)
    return value


def _deserialize_record(record_type: type, data, key: str):
    if not isinstance(data, dict):
        raise SnapshotFormatError(f"Expected object, got {type(data).__name__}", key)

    for name in editable_fields(record_type):
        if name in data:
            _expect_string(data[name], f"{key}.{name}", nullable=name in NULLABLE_FIELDS)
    if "id" in data:
        _expect_string(data["id"], f"{key}.id")

    return record_from_dict(record_type, data)


def _deserialize_entries(kind: str, value, key: str) -> tuple:
    if not isinstance(value, list):
        raise SnapshotFormatError(f"Expected list, got {type(value).__name__}", key)

    record_type = ENTRY_TYPES[kind]
    if record_type is None:
        values: tuple = ()
        for position, item in enumerate(value):
            values = entry_lists.add_unique(values, _expect_string(item, f"{key}[{position}]"))
        return values

    return tuple(
        _deserialize_record(record_type, item, f"{key}[{position}]") for position, item in enumerate(value)
    )


def deserialize_document(data) -> ResumeDocument:
    """
    Build a ResumeDocument from its serialized dict.

    Missing fields fall back to defaults; unknown keys are ignored.

    Raises:
        SnapshotFormatError: If any present value has the wrong type or an invalid choice
    """
    if not isinstance(data, dict):
        raise SnapshotFormatError(f"Expected object, got {type(data).__name__}", DOCUMENT_KEY)

    document = ResumeDocument()

    for raw_key, value in data.items():
        name = canonical_field_name(raw_key)
        key = f"{DOCUMENT_KEY}.{raw_key}"

        if name in ENTRY_TYPES:
            document = document.with_entries(name, _deserialize_entries(name, value, key))
        elif name in SCALAR_FIELDS or name in PRESENTATION_FIELDS:
            _expect_string(value, key, nullable=name in NULLABLE_FIELDS)
            try:
                document = document.with_field(name, value)
            except InvalidFieldError as e:
                raise SnapshotFormatError(str(e), key) from e

    return document


def deserialize_state(
    snapshot,
) -> Tuple[Optional[ResumeDocument], Optional[tuple], Optional[Dict[str, bool]]]:
    """
    Parse a snapshot dict into its three parts.

    Returns:
        (document, section_order, section_visibility); parts absent from the
        snapshot are None

    Raises:
        SnapshotFormatError: If the snapshot or any present part is malformed
    """
    if not isinstance(snapshot, dict):
        raise SnapshotFormatError(f"Snapshot must be an object, got {type(snapshot).__name__}")

    document = None
    if DOCUMENT_KEY in snapshot:
        document = deserialize_document(snapshot[DOCUMENT_KEY])

    order = None
    if ORDER_KEY in snapshot:
        raw_order = snapshot[ORDER_KEY]
        if not isinstance(raw_order, list):
            raise SnapshotFormatError("Section order must be a list", ORDER_KEY)
        try:
            order = normalize_section_order(raw_order)
        except (TypeError, ValueError) as e:
            raise SnapshotFormatError(str(e), ORDER_KEY) from e

    visibility = None
    if VISIBILITY_KEY in snapshot:
        raw_visibility = snapshot[VISIBILITY_KEY]
        if not isinstance(raw_visibility, dict):
            raise SnapshotFormatError("Section visibility must be an object", VISIBILITY_KEY)
        visibility = {}
        for section_id, flag in raw_visibility.items():
            if section_id not in ENTRY_TYPES:
                raise SnapshotFormatError(f"Unknown section: '{section_id}'", VISIBILITY_KEY)
            if not isinstance(flag, bool):
                raise SnapshotFormatError("Visibility flags must be booleans", f"{VISIBILITY_KEY}.{section_id}")
            visibility[section_id] = flag

    return document, order, visibility


def from_json(text: str) -> Dict[str, Any]:
    """
    Parse snapshot JSON text.

    Raises:
        SnapshotFormatError: If the text is not valid JSON
    """
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError, RecursionError) as e:
        raise SnapshotFormatError(f"Invalid JSON: {e}") from e


def apply_snapshot(session: AuthoringSession, snapshot) -> None:
    """
    Merge a snapshot into a session by presence of its top-level keys.

    The snapshot is fully parsed first, so a malformed snapshot leaves the
    session untouched.

    Raises:
        SnapshotFormatError: If the snapshot is malformed
    """
    document, order, visibility = deserialize_state(snapshot)
    session.restore(document=document, section_order=order, section_visibility=visibility)
