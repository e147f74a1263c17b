"""
Preview rendering.

Renders the header and composed sections of a resume into one markdown document
using a Jinja2 template. The markdown preview is what gets handed to the
external render pipeline; styling is the renderer's business, so the front
matter only carries the presentation choices.
"""

from pathlib import Path
from typing import Any, Dict, List

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

from cvwizard.contexts.authoring.document import ResumeDocument
from cvwizard.contexts.composing.composer import ComposedSection, compose_sections

TEMPLATES_PATH = Path(__file__).resolve().parent / "templates"
PREVIEW_TEMPLATE = "preview.md.jinja"


class PreviewRenderer:
    """
    Loads and caches Jinja2 templates for resume previews.

    Templates live in cvwizard/contexts/composing/templates/.
    """

    def __init__(self, templates_path: Path = None):
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = templates_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,
        )

    def get_template(self, name: str = PREVIEW_TEMPLATE) -> Template:
        """
        Get a template by file name, loading and caching it if necessary.

        Raises:
            TemplateNotFound: If the template file doesn't exist
        """
        if name in self._cache:
            return self._cache[name]

        try:
            template = self.env.get_template(name)
        except TemplateNotFound as e:
            raise TemplateNotFound(f"Preview template not found at {self.templates_path / name}") from e

        self._cache[name] = template
        return template

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def render(self, document: ResumeDocument, sections: List[ComposedSection]) -> str:
        """
        Render a full markdown preview.

        Args:
            document: Document supplying header and presentation fields
            sections: Output of compose_sections()

        Returns:
            Markdown text with YAML front matter
        """
        return self.get_template().render(header_context(document, sections))


def header_context(document: ResumeDocument, sections: List[ComposedSection]) -> Dict[str, Any]:
    """Template variables for the preview header."""
    contact = []
    if document.email:
        contact.append(document.email)
    if document.phone:
        contact.append(f"{document.country_code} {document.phone}".strip())

    links = [link for link in (document.linkedin, document.website) if link]

    return {
        "template": document.template.value,
        "font": document.font,
        "accent_color": document.accent_color,
        "name": document.full_name,
        "title": document.title,
        "contact": contact,
        "links": links,
        "sections": sections,
    }


def render_preview(session, renderer: PreviewRenderer = None) -> str:
    """Compose an AuthoringSession's sections and render them to markdown."""
    renderer = renderer or PreviewRenderer()
    sections = compose_sections(session.document, session.section_order, session.section_visibility)
    return renderer.render(session.document, sections)
