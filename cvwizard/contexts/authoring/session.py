"""
Authoring Session

Owns the current ResumeDocument together with the section order, section
visibility, validation error map and step gate. All edits go through the
session so that validation runs on every scalar write and observers
(autosave, keyword analysis) see every change.

Setters never refuse user input: the document always holds exactly what was
typed last, valid or not. Validation is advisory and only blocks the step gate.

Usage:
    from cvwizard.contexts.authoring.session import AuthoringSession

    session = AuthoringSession()
    session.set_field("first_name", "Jane")
    session.add_entry("education")
    session.update_entry("education", 0, "degree", "BSc Physics")
    session.next_step()
"""

from typing import Callable, Dict, Iterable, List, Optional, Set, Tuple

from cvwizard.contexts.authoring import entry_lists
from cvwizard.contexts.authoring.document import (
    PRESENTATION_FIELDS,
    SCALAR_FIELDS,
    SECTION_IDS,
    STRING_LIST_KINDS,
    ResumeDocument,
    check_entry_kind,
    new_entry,
)
from cvwizard.contexts.authoring.exceptions import (
    InvalidFieldError,
    UnknownEntryKindError,
    UnknownSectionError,
)
from cvwizard.contexts.authoring.logger import _log_debug, log_session_reset
from cvwizard.contexts.authoring.resume_components import LanguageEntry
from cvwizard.contexts.authoring.step_gate import StepGate
from cvwizard.contexts.authoring.suggestions import (
    get_suggestion,
    language_key,
    parse_language_suggestion,
)
from cvwizard.contexts.authoring.validators import VALIDATORS, canonical_field_name, validate

Observer = Callable[["AuthoringSession"], None]


def default_section_order() -> Tuple[str, ...]:
    return SECTION_IDS


def default_section_visibility() -> Dict[str, bool]:
    return {section_id: True for section_id in SECTION_IDS}


def check_section_id(section_id: str) -> str:
    if section_id not in SECTION_IDS:
        raise UnknownSectionError(section_id)
    return section_id


def normalize_section_order(order: Iterable[str]) -> Tuple[str, ...]:
    """
    Validate that `order` is a permutation of the seven section identifiers.

    Raises:
        ValueError: If identifiers are missing, duplicated or unknown
    """
    order = tuple(order)
    for section_id in order:
        check_section_id(section_id)
    if len(order) != len(SECTION_IDS) or set(order) != set(SECTION_IDS):
        raise ValueError(
            f"Section order must be a permutation of {', '.join(SECTION_IDS)}; got {list(order)}"
        )
    return order


class AuthoringSession:
    """
    Single authoring session.

    Attributes:
        document: Current ResumeDocument (replaced, never mutated)
        section_order: Permutation of the seven section identifiers
        section_visibility: Section identifier -> visible flag
        errors: Validation error map (field name -> message, "" for valid)
        gate: StepGate tracking the current wizard step
    """

    def __init__(
        self,
        document: Optional[ResumeDocument] = None,
        section_order: Optional[Iterable[str]] = None,
        section_visibility: Optional[Dict[str, bool]] = None,
    ):
        self.document = document if document is not None else ResumeDocument()
        self.section_order = (
            normalize_section_order(section_order) if section_order is not None else default_section_order()
        )
        self.section_visibility = default_section_visibility()
        if section_visibility:
            self.section_visibility.update(self._checked_visibility(section_visibility))
        self.errors: Dict[str, str] = {}
        self.gate = StepGate()
        self._observers: List[Observer] = []
        self._suggestions_open: Set[str] = set()
        self._revalidate_filled_fields()

    # =========================================================================
    # OBSERVERS
    # =========================================================================

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register a callback invoked with the session after every state change.

        Returns:
            Function that removes the observer again
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self)

    def _commit(self, document: ResumeDocument) -> None:
        if document == self.document:
            return
        self.document = document
        self._notify()

    # =========================================================================
    # SCALAR FIELDS
    # =========================================================================

    def set_field(self, name: str, value) -> None:
        """
        Write a scalar or presentation field and refresh its validation message.

        Args:
            name: Field name, snake_case or camelCase
            value: New value (never refused for scalar fields)

        Raises:
            InvalidFieldError: If the field is unknown, or a presentation value is
                outside its fixed choice set
        """
        name = canonical_field_name(name)
        if name not in SCALAR_FIELDS and name not in PRESENTATION_FIELDS:
            raise InvalidFieldError(name)

        updated = self.document.with_field(name, value)
        if name in VALIDATORS:
            self.errors[name] = validate(name, value)
        self._commit(updated)

    def error_for(self, name: str) -> str:
        return self.errors.get(canonical_field_name(name), "")

    def has_errors(self) -> bool:
        return any(self.errors.values())

    def _revalidate_filled_fields(self) -> None:
        """Recompute messages for validated fields that hold a value; untouched fields stay clean."""
        self.errors = {}
        for name in VALIDATORS:
            value = getattr(self.document, name)
            if value:
                self.errors[name] = validate(name, value)

    # =========================================================================
    # ENTRY LISTS
    # =========================================================================

    def add_entry(self, kind: str):
        """
        Append a default-initialized record to a structured entry list.

        Returns:
            The new record (its entry_id identifies it from now on)
        """
        record = new_entry(kind)
        self._commit(self.document.with_entries(kind, entry_lists.add(self.document.entries(kind), record)))
        return record

    def update_entry(self, kind: str, index: int, key: str, value) -> None:
        """Edit one field of the record at `index`; stale indices are ignored."""
        self._require_structured(kind)
        entries = entry_lists.update(self.document.entries(kind), index, key, value)
        self._commit(self.document.with_entries(kind, entries))

    def remove_entry(self, kind: str, index: int) -> None:
        """Delete the record (or string) at `index`; stale indices are ignored."""
        entries = entry_lists.remove(self.document.entries(kind), index)
        self._commit(self.document.with_entries(kind, entries))
        self._prune_side_tables()

    def move_entry(self, kind: str, index: int, direction: int) -> None:
        """Swap the entry at `index` with its neighbor; no-op at the list bounds."""
        entries = entry_lists.move(self.document.entries(kind), index, direction)
        self._commit(self.document.with_entries(kind, entries))

    def add_skill(self, skill: str) -> bool:
        """Add a skill unless blank or already present (ignoring case). Returns True if added."""
        return self._add_unique("skills", skill)

    def remove_skill(self, index: int) -> None:
        self.remove_entry("skills", index)

    def add_hobby(self, hobby: str) -> bool:
        """Add a hobby unless blank or already present (ignoring case). Returns True if added."""
        return self._add_unique("hobbies", hobby)

    def remove_hobby(self, index: int) -> None:
        self.remove_entry("hobbies", index)

    def _add_unique(self, kind: str, value: str) -> bool:
        before = self.document.entries(kind)
        after = entry_lists.add_unique(before, value)
        self._commit(self.document.with_entries(kind, after))
        return len(after) > len(before)

    def _require_structured(self, kind: str) -> None:
        check_entry_kind(kind)
        if kind in STRING_LIST_KINDS:
            raise UnknownEntryKindError(kind, [k for k in SECTION_IDS if k not in STRING_LIST_KINDS])

    # =========================================================================
    # SUGGESTIONS
    # =========================================================================

    def apply_summary_suggestion(self, index: int) -> None:
        self.set_field("summary", get_suggestion("summary", index))

    def add_skill_suggestion(self, index: int) -> bool:
        return self.add_skill(get_suggestion("skills", index))

    def add_hobby_suggestion(self, index: int) -> bool:
        return self.add_hobby(get_suggestion("hobbies", index))

    def add_language_suggestion(self, index: int) -> bool:
        """
        Add a suggested language with the default level.

        Skipped when a language with the same first word already exists.

        Returns:
            True if a language was added
        """
        language, level = parse_language_suggestion(get_suggestion("languages", index))
        existing = {language_key(entry.language) for entry in self.document.languages}
        if language_key(language) in existing:
            return False

        entries = entry_lists.add(self.document.languages, LanguageEntry(language=language, level=level))
        self._commit(self.document.with_entries("languages", entries))
        return True

    def toggle_description_suggestions(self, entry_id: str) -> bool:
        """
        Toggle the description suggestion panel of one experience entry.

        Returns:
            New open/closed state (False for unknown entries)
        """
        if entry_lists.index_of(self.document.experience, entry_id) is None:
            return False
        if entry_id in self._suggestions_open:
            self._suggestions_open.discard(entry_id)
            return False
        self._suggestions_open.add(entry_id)
        return True

    def suggestions_open(self, entry_id: str) -> bool:
        return entry_id in self._suggestions_open

    def apply_description_suggestion(self, entry_id: str, index: int) -> None:
        """Append a suggested phrase to an experience description and close its panel."""
        position = entry_lists.index_of(self.document.experience, entry_id)
        if position is None:
            return

        phrase = get_suggestion("experience_description", index)
        current = self.document.experience[position].description
        description = f"{current}\n{phrase}" if current.strip() else phrase
        self.update_entry("experience", position, "description", description)
        self._suggestions_open.discard(entry_id)

    def _prune_side_tables(self) -> None:
        live_ids = {entry.entry_id for entry in self.document.experience}
        self._suggestions_open &= live_ids

    # =========================================================================
    # SECTIONS
    # =========================================================================

    def move_section(self, section_id: str, direction: int) -> None:
        """Move a section one position up (-1) or down (+1) in the section order."""
        index = self.section_order.index(check_section_id(section_id))
        order = entry_lists.move(self.section_order, index, direction)
        if order != self.section_order:
            self.section_order = order
            self._notify()

    def set_section_order(self, order: Iterable[str]) -> None:
        order = normalize_section_order(order)
        if order != self.section_order:
            self.section_order = order
            self._notify()

    def set_section_visible(self, section_id: str, visible: bool) -> None:
        check_section_id(section_id)
        if self.section_visibility.get(section_id, True) != bool(visible):
            self.section_visibility[section_id] = bool(visible)
            self._notify()

    def is_section_visible(self, section_id: str) -> bool:
        return self.section_visibility.get(check_section_id(section_id), True)

    @staticmethod
    def _checked_visibility(visibility: Dict[str, bool]) -> Dict[str, bool]:
        return {check_section_id(section_id): bool(flag) for section_id, flag in visibility.items()}

    # =========================================================================
    # STEPS
    # =========================================================================

    @property
    def step(self) -> int:
        return int(self.gate.step)

    def can_advance(self) -> bool:
        return self.gate.can_advance(self.document, self.errors)

    def next_step(self) -> bool:
        return self.gate.next(self.document, self.errors)

    def previous_step(self) -> bool:
        return self.gate.back()

    # =========================================================================
    # WHOLE-STATE OPERATIONS
    # =========================================================================

    def restore(
        self,
        document: Optional[ResumeDocument] = None,
        section_order: Optional[Iterable[str]] = None,
        section_visibility: Optional[Dict[str, bool]] = None,
    ) -> None:
        """
        Overwrite parts of the state; arguments left as None are kept.

        Used by the persistence layer for partial merges.
        """
        if section_order is not None:
            section_order = normalize_section_order(section_order)
        if section_visibility is not None:
            section_visibility = self._checked_visibility(section_visibility)

        if document is not None:
            self.document = document
            self._revalidate_filled_fields()
            self._prune_side_tables()
        if section_order is not None:
            self.section_order = section_order
        if section_visibility is not None:
            self.section_visibility = {**default_section_visibility(), **section_visibility}

        _log_debug(
            "Restored "
            + ", ".join(
                name
                for name, part in (
                    ("document", document),
                    ("order", section_order),
                    ("visibility", section_visibility),
                )
                if part is not None
            )
        )
        self._notify()

    def reset(self) -> None:
        """Discard everything: document, order, visibility, errors, step and side tables."""
        self.document = ResumeDocument()
        self.section_order = default_section_order()
        self.section_visibility = default_section_visibility()
        self.errors = {}
        self.gate.reset()
        self._suggestions_open = set()
        log_session_reset()
        self._notify()
