"""
Section Composer

Derives the ordered, visibility-filtered sequence of renderable sections from a
document, a section order and a visibility map.

Rules:
- Summary always comes first, and only when the summary text is non-empty
- Remaining sections follow the section order
- Hidden sections are skipped
- Sections whose backing entry list is empty are skipped even when visible,
  so the output never contains a visually empty block
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from cvwizard.contexts.authoring.document import STRING_LIST_KINDS, ResumeDocument, check_entry_kind
from cvwizard.contexts.authoring.resume_components import record_to_dict
from cvwizard.contexts.composing.logger import log_composition
from cvwizard.contexts.composing.markdown_formatter import format_section_markdown

SUMMARY_SECTION_ID = "summary"

SECTION_TITLES = {
    "summary": "Summary",
    "education": "Education",
    "experience": "Experience",
    "projects": "Projects",
    "certifications": "Certifications",
    "skills": "Skills",
    "languages": "Languages",
    "hobbies": "Hobbies",
}


@dataclass
class ComposedSection:
    """
    One renderable block of the composed resume.

    Attributes:
        section_id: Section identifier ("summary" or one of the seven list sections)
        title: Display title
        data: Structured content ({"text": ...}, {"items": [...]} or {"entries": [...]})
    """

    section_id: str
    title: str
    data: Dict[str, Any] = field(default_factory=dict)
    _text_cache: Optional[str] = field(default=None, init=False, repr=False, compare=False)

    @property
    def text(self) -> str:
        """Lazy-evaluated markdown representation of the section."""
        if self._text_cache is None:
            self._text_cache = format_section_markdown(self.section_id, self.data, self.title)
        return self._text_cache


def section_data(document: ResumeDocument, section_id: str) -> Dict[str, Any]:
    """Structured content of one list-backed section."""
    entries = document.entries(section_id)
    if section_id in STRING_LIST_KINDS:
        return {"items": list(entries)}
    return {"entries": [record_to_dict(entry) for entry in entries]}


def compose_sections(
    document: ResumeDocument,
    section_order: Iterable[str],
    section_visibility: Optional[Dict[str, bool]] = None,
) -> List[ComposedSection]:
    """
    Build the renderable section sequence.

    Args:
        document: Current document
        section_order: Section identifiers in display order
        section_visibility: Section identifier -> visible flag (missing keys are visible)

    Returns:
        Ordered list of ComposedSection, never containing an empty section

    Raises:
        UnknownEntryKindError: If section_order names an unknown section
    """
    visibility = section_visibility or {}
    composed = []

    if document.summary:
        composed.append(
            ComposedSection(SUMMARY_SECTION_ID, SECTION_TITLES[SUMMARY_SECTION_ID], {"text": document.summary})
        )

    for section_id in section_order:
        check_entry_kind(section_id)
        if not visibility.get(section_id, True):
            continue
        if not document.entries(section_id):
            continue
        composed.append(ComposedSection(section_id, SECTION_TITLES[section_id], section_data(document, section_id)))

    log_composition([section.section_id for section in composed])
    return composed


def compose_session(session) -> List[ComposedSection]:
    """Compose sections from an AuthoringSession's current state."""
    return compose_sections(session.document, session.section_order, session.section_visibility)
