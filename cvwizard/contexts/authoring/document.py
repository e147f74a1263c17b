"""
Resume Document Structure

Defines the aggregate root of an authoring session: scalar identity/contact
fields, presentation choices, and the seven entry lists.

ResumeDocument is immutable. Every edit produces a new value through
dataclasses.replace, which keeps the session the single owner of the current
state and lets persistence and rendering observe it without co-owning it.
"""

import re
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Dict, Optional, Tuple

from cvwizard.contexts.authoring.exceptions import InvalidFieldError, UnknownEntryKindError
from cvwizard.contexts.authoring.resume_components import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    ProjectEntry,
)
from cvwizard.utils.config import load_settings


class Template(str, Enum):
    """Visual template identifiers understood by the external renderer."""

    PROFESSIONAL = "professional"
    CLASSIC = "classic"
    CREATIVE = "creative"
    MODERN = "modern"


# List-backed section identifiers, in default display order.
SECTION_IDS: Tuple[str, ...] = (
    "education",
    "experience",
    "projects",
    "certifications",
    "skills",
    "languages",
    "hobbies",
)

# Record type per entry list (None for flat string lists)
ENTRY_TYPES: Dict[str, Optional[type]] = {
    "education": EducationEntry,
    "experience": ExperienceEntry,
    "projects": ProjectEntry,
    "certifications": CertificationEntry,
    "skills": None,
    "languages": LanguageEntry,
    "hobbies": None,
}

STRING_LIST_KINDS = frozenset(kind for kind, record_type in ENTRY_TYPES.items() if record_type is None)

SCALAR_FIELDS: Tuple[str, ...] = (
    "first_name",
    "last_name",
    "title",
    "email",
    "country_code",
    "phone",
    "summary",
    "linkedin",
    "website",
    "profile_image",
)

PRESENTATION_FIELDS: Tuple[str, ...] = ("template", "font", "accent_color")

# Scalars that keep None as "absent"; the rest store None as ""
NULLABLE_SCALARS = frozenset({"profile_image"})

HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _default_country_code() -> str:
    return load_settings()["contact"]["country_code"]


def _default_template() -> Template:
    return Template(load_settings()["presentation"]["template"])


def _default_font() -> str:
    return load_settings()["presentation"]["font"]


def _default_accent_color() -> str:
    return load_settings()["presentation"]["accent_color"]


@dataclass(frozen=True)
class ResumeDocument:
    """
    Complete in-memory resume being authored.

    Attributes:
        first_name, last_name, title, email, country_code, phone, summary,
        linkedin, website: Identity and contact fields, stored exactly as typed
        profile_image: Optional image payload as text (data URL), None when absent
        template: Visual template identifier
        font: Font family name
        accent_color: Accent color as hex string
        education, experience, projects, certifications, languages: Tuples of records
        skills, hobbies: Tuples of strings, unique ignoring case
    """

    first_name: str = ""
    last_name: str = ""
    title: str = ""
    email: str = ""
    country_code: str = field(default_factory=_default_country_code)
    phone: str = ""
    summary: str = ""
    linkedin: str = ""
    website: str = ""
    profile_image: Optional[str] = None

    template: Template = field(default_factory=_default_template)
    font: str = field(default_factory=_default_font)
    accent_color: str = field(default_factory=_default_accent_color)

    education: Tuple[EducationEntry, ...] = ()
    experience: Tuple[ExperienceEntry, ...] = ()
    projects: Tuple[ProjectEntry, ...] = ()
    certifications: Tuple[CertificationEntry, ...] = ()
    skills: Tuple[str, ...] = ()
    languages: Tuple[LanguageEntry, ...] = ()
    hobbies: Tuple[str, ...] = ()

    @property
    def full_name(self) -> str:
        """First and last name joined, skipping blanks."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def entries(self, kind: str) -> tuple:
        """
        Get an entry list by section identifier.

        Raises:
            UnknownEntryKindError: If kind is not one of SECTION_IDS
        """
        check_entry_kind(kind)
        return getattr(self, kind)

    def with_entries(self, kind: str, entries: tuple) -> "ResumeDocument":
        """Return a copy with one entry list replaced."""
        check_entry_kind(kind)
        return replace(self, **{kind: tuple(entries)})

    def with_field(self, name: str, value) -> "ResumeDocument":
        """
        Return a copy with one scalar or presentation field replaced.

        Raises:
            InvalidFieldError: If the field does not exist, the template is unknown,
                or the accent color is not a hex color
        """
        if name in SCALAR_FIELDS:
            if value is None and name not in NULLABLE_SCALARS:
                value = ""
            return replace(self, **{name: value})

        if name == "template":
            try:
                value = Template(value)
            except ValueError:
                valid = ", ".join(t.value for t in Template)
                raise InvalidFieldError(
                    name, f"Unknown template: '{value}'. Available templates: {valid}", value
                ) from None
            return replace(self, template=value)

        if name == "accent_color":
            if not isinstance(value, str) or not HEX_COLOR.match(value):
                raise InvalidFieldError(name, f"Accent color must be a hex color, got '{value}'", value)
            return replace(self, accent_color=value)

        if name == "font":
            return replace(self, font=str(value))

        raise InvalidFieldError(name)


def check_entry_kind(kind: str) -> str:
    """Validate an entry kind / section identifier, returning it unchanged."""
    if kind not in ENTRY_TYPES:
        raise UnknownEntryKindError(kind, SECTION_IDS)
    return kind


def new_entry(kind: str):
    """
    Create a default-initialized record for a structured entry list.

    Raises:
        UnknownEntryKindError: If kind is unknown or is a flat string list
    """
    record_type = ENTRY_TYPES.get(kind)
    if record_type is None:
        raise UnknownEntryKindError(
            kind, [k for k, t in ENTRY_TYPES.items() if t is not None]
        )
    return record_type()


def document_field_names() -> Tuple[str, ...]:
    """All dataclass field names of ResumeDocument, in declaration order."""
    return tuple(f.name for f in fields(ResumeDocument))
