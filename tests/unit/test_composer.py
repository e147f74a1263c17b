"""Unit tests for section composition and the markdown preview."""

import pytest

from cvwizard.contexts.authoring.document import SECTION_IDS, ResumeDocument
from cvwizard.contexts.authoring.exceptions import UnknownEntryKindError
from cvwizard.contexts.authoring.resume_components import (
    ExperienceEntry,
    LanguageEntry,
    ProjectEntry,
)
from cvwizard.contexts.composing.composer import compose_session, compose_sections
from cvwizard.contexts.composing.markdown_formatter import (
    format_languages_markdown,
    format_work_experience_markdown,
)
from cvwizard.contexts.composing.preview import PreviewRenderer, render_preview


def ids(sections):
    return [section.section_id for section in sections]


@pytest.mark.unit
class TestComposeSections:
    def test_summary_first_then_order(self, sample_document):
        sections = compose_sections(sample_document, SECTION_IDS)
        assert ids(sections) == ["summary", "education", "experience", "skills", "hobbies"]

    def test_empty_summary_omitted(self, sample_document):
        document = sample_document.with_field("summary", "")
        assert "summary" not in ids(compose_sections(document, SECTION_IDS))

    def test_empty_experience_never_composed(self):
        document = ResumeDocument(skills=("Python",))
        sections = compose_sections(document, SECTION_IDS, {"experience": True})
        assert ids(sections) == ["skills"]

    def test_hidden_sections_skipped(self, sample_document):
        sections = compose_sections(sample_document, SECTION_IDS, {"skills": False, "education": False})
        assert ids(sections) == ["summary", "experience", "hobbies"]

    def test_follows_custom_order(self, sample_document):
        order = ("hobbies", "skills", "experience", "education", "projects", "certifications", "languages")
        assert ids(compose_sections(sample_document, order))[1:] == ["hobbies", "skills", "experience", "education"]

    def test_summary_cannot_be_hidden_by_order(self, sample_document):
        sections = compose_sections(sample_document, ("skills",))
        assert ids(sections) == ["summary", "skills"]

    def test_unknown_section_in_order(self, sample_document):
        with pytest.raises(UnknownEntryKindError):
            compose_sections(sample_document, ("awards",))

    def test_section_data_shapes(self, sample_document):
        sections = {s.section_id: s for s in compose_sections(sample_document, SECTION_IDS)}
        assert sections["skills"].data == {"items": ["Python", "Docker"]}
        assert sections["education"].data["entries"][0]["institution"] == "TU Delft"
        assert sections["summary"].title == "Summary"

    def test_compose_session(self, filled_session):
        filled_session.set_section_visible("skills", False)
        assert ids(compose_session(filled_session)) == ["summary", "education", "experience"]


@pytest.mark.unit
class TestMarkdownFormatting:
    def test_experience_description_lines_become_bullets(self):
        entry = {"role": "Engineer", "company": "Acme", "period": "2021", "description": "APIs\n\nPipelines"}
        text = format_work_experience_markdown(entry)
        assert text.startswith("### Engineer, Acme")
        assert "*2021*" in text
        assert "- APIs\n- Pipelines" in text

    def test_languages_skip_blank_names(self):
        data = {"entries": [{"language": "English", "level": "Native"}, {"language": "", "level": "Fluent"}]}
        assert format_languages_markdown(data, "Languages") == "## Languages\n\nEnglish (Native)"

    def test_project_link(self):
        document = ResumeDocument(projects=(ProjectEntry(title="Wizard", url="https://cv.example.com"),))
        section = compose_sections(document, SECTION_IDS)[0]
        assert "[Wizard](https://cv.example.com)" in section.text


@pytest.mark.unit
class TestPreview:
    def test_header_and_sections(self, filled_session):
        filled_session.set_field("linkedin", "https://linkedin.com/in/jane")
        markdown = render_preview(filled_session)

        assert markdown.startswith("---\ntemplate: professional\n")
        assert "# Jane Doe" in markdown
        assert "**Engineer**" in markdown
        assert "jane@doe.com | +31 123 456 7890" in markdown
        assert "https://linkedin.com/in/jane" in markdown
        assert markdown.index("## Summary") < markdown.index("## Education") < markdown.index("## Skills")
        assert "- Built data pipelines" in markdown

    def test_presentation_choices_in_front_matter(self, filled_session):
        filled_session.set_field("template", "creative")
        filled_session.set_field("accent_color", "#ff0000")
        markdown = render_preview(filled_session)
        assert "template: creative" in markdown
        assert 'accent_color: "#ff0000"' in markdown

    def test_empty_document_renders(self):
        renderer = PreviewRenderer()
        markdown = renderer.render(ResumeDocument(), [])
        assert "## " not in markdown

    def test_template_cached(self):
        renderer = PreviewRenderer()
        assert renderer.get_template() is renderer.get_template()
        renderer.clear_cache()
        assert renderer._cache == {}

    def test_languages_section_rendered(self):
        document = ResumeDocument(languages=(LanguageEntry(language="Dutch", level="Native"),))
        markdown = PreviewRenderer().render(document, compose_sections(document, SECTION_IDS))
        assert "Dutch (Native)" in markdown

    def test_experience_without_role(self):
        document = ResumeDocument(experience=(ExperienceEntry(company="Acme"),))
        markdown = PreviewRenderer().render(document, compose_sections(document, SECTION_IDS))
        assert "### Acme" in markdown
