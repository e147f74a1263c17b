"""
Composing Context

Responsibilities:
- Derives the ordered, visibility-filtered section sequence of a resume
- Formats composed sections as markdown
- Renders the full markdown preview handed to the external render pipeline

Owns: Section composition rules, markdown/preview formatting
Never: Mutates the document or decides section order on its own
"""

from cvwizard.contexts.composing.composer import (
    SECTION_TITLES,
    ComposedSection,
    compose_session,
    compose_sections,
)
from cvwizard.contexts.composing.preview import PreviewRenderer, render_preview

__all__ = [
    "ComposedSection",
    "PreviewRenderer",
    "SECTION_TITLES",
    "compose_sections",
    "compose_session",
    "render_preview",
]
