"""
Resume Component Data Structures

Defines the record types stored in the repeated entry lists of a resume:
education, experience, projects, certifications and languages.
Skills and hobbies are plain strings and have no record type.

Every record carries a stable entry_id assigned at creation. Side tables
(e.g. the per-experience "show suggestions" toggle) are keyed by entry_id
so that removing or moving entries never desynchronizes them.
"""

import uuid
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple


def new_entry_id() -> str:
    """Generate a stable synthetic identifier for a new entry."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class EducationEntry:
    """
    Education entry.

    Attributes:
        institution: School or university name
        degree: Degree or program (e.g., "BSc Computer Science")
        year: Year or year range (e.g., "2018-2022")
    """

    institution: str = ""
    degree: str = ""
    year: str = ""
    entry_id: str = field(default_factory=new_entry_id)


@dataclass(frozen=True)
class ExperienceEntry:
    """
    Work experience entry.

    Attributes:
        role: Job title
        company: Employer name
        period: Period of employment (e.g., "2021-2023")
        description: Responsibilities and achievements
    """

    role: str = ""
    company: str = ""
    period: str = ""
    description: str = ""
    entry_id: str = field(default_factory=new_entry_id)


@dataclass(frozen=True)
class ProjectEntry:
    """
    Project entry.

    Attributes:
        title: Project name
        description: Short description
        url: Optional link to the project
    """

    title: str = ""
    description: str = ""
    url: Optional[str] = None
    entry_id: str = field(default_factory=new_entry_id)


@dataclass(frozen=True)
class CertificationEntry:
    """
    Certification entry.

    Attributes:
        name: Certificate name
        issuer: Issuing organization
        year: Year obtained
    """

    name: str = ""
    issuer: str = ""
    year: str = ""
    entry_id: str = field(default_factory=new_entry_id)


@dataclass(frozen=True)
class LanguageEntry:
    """
    Spoken language entry.

    Attributes:
        language: Language name
        level: Proficiency level (e.g., "Fluent")
    """

    language: str = ""
    level: str = ""
    entry_id: str = field(default_factory=new_entry_id)


def editable_fields(record_type: type) -> Tuple[str, ...]:
    """Names of user-editable fields of a record type (everything but entry_id)."""
    return tuple(f.name for f in fields(record_type) if f.name != "entry_id")


def record_to_dict(record) -> Dict[str, Any]:
    """Convert a record to a field-named dict, entry_id serialized as "id"."""
    data = {name: getattr(record, name) for name in editable_fields(type(record))}
    data["id"] = record.entry_id
    return data


def record_from_dict(record_type: type, data: Dict[str, Any]):
    """
    Build a record from a field-named dict.

    Missing fields fall back to the record defaults; a missing "id" gets a
    fresh entry_id. Unknown keys are ignored.

    Raises:
        TypeError: If data is not a dict
    """
    if not isinstance(data, dict):
        raise TypeError(f"Expected dict for {record_type.__name__}, got {type(data).__name__}")

    kwargs = {name: data[name] for name in editable_fields(record_type) if name in data}
    if data.get("id"):
        kwargs["entry_id"] = str(data["id"])
    return record_type(**kwargs)
