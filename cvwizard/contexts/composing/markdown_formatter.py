"""
Markdown Utilities

Helper functions for formatting composed resume sections as markdown.
"""

from typing import Any, Dict, List


def format_summary_markdown(data: Dict[str, Any], section_name: str) -> str:
    return f"## {section_name}\n\n{data['text']}"


def format_education_markdown(data: Dict[str, Any], section_name: str) -> str:
    """
    Format education entries as markdown.

    Each entry renders as "**Degree**, Institution (Year)".
    """
    parts = [f"## {section_name}\n"]

    for entry in data["entries"]:
        line = f"**{entry['degree']}**, {entry['institution']}"
        if entry.get("year"):
            line += f" ({entry['year']})"
        parts.append(f"- {line}")

    return "\n".join(parts)


def format_work_experience_markdown(data: Dict[str, Any]) -> str:
    """
    Format single work experience entry as markdown.

    Role and company form the ### header, the period is italic, and each line
    of the description becomes a bullet.
    """
    parts = []

    header = ", ".join(part for part in (data.get("role"), data.get("company")) if part)
    parts.append(f"### {header or 'Untitled role'}\n")

    if data.get("period"):
        parts.append(f"*{data['period']}*")
        parts.append("")

    for line in (data.get("description") or "").splitlines():
        if line.strip():
            parts.append(f"- {line.strip()}")

    return "\n".join(parts)


def format_experience_markdown(data: Dict[str, Any], section_name: str) -> str:
    parts = [f"## {section_name}\n"]
    for entry in data["entries"]:
        parts.append(format_work_experience_markdown(entry))
    return "\n\n".join(parts)


def format_projects_markdown(data: Dict[str, Any], section_name: str) -> str:
    parts = [f"## {section_name}\n"]

    for entry in data["entries"]:
        title = entry.get("title") or "Untitled project"
        if entry.get("url"):
            title = f"[{title}]({entry['url']})"
        line = f"- **{title}**"
        if entry.get("description"):
            line += f": {entry['description']}"
        parts.append(line)

    return "\n".join(parts)


def format_certifications_markdown(data: Dict[str, Any], section_name: str) -> str:
    parts = [f"## {section_name}\n"]

    for entry in data["entries"]:
        line = f"- **{entry['name']}**"
        details = ", ".join(part for part in (entry.get("issuer"), entry.get("year")) if part)
        if details:
            line += f" ({details})"
        parts.append(line)

    return "\n".join(parts)


def format_inline_list_markdown(items: List[str], section_name: str) -> str:
    """Comma-separated list under a section header (skills, hobbies, languages)."""
    return f"## {section_name}\n\n{', '.join(items)}"


def format_languages_markdown(data: Dict[str, Any], section_name: str) -> str:
    """
    Languages render as "Language (Level)"; entries without a language name are omitted.

    Example:
        English (Native), French (Fluent), Dutch
    """
    items = []
    for entry in data["entries"]:
        if not entry.get("language"):
            continue
        if entry.get("level"):
            items.append(f"{entry['language']} ({entry['level']})")
        else:
            items.append(entry["language"])
    return format_inline_list_markdown(items, section_name)


def format_section_markdown(section_id: str, data: Dict[str, Any], section_name: str) -> str:
    """Dispatch to the formatter for a section identifier."""
    if section_id == "summary":
        return format_summary_markdown(data, section_name)
    elif section_id == "education":
        return format_education_markdown(data, section_name)
    elif section_id == "experience":
        return format_experience_markdown(data, section_name)
    elif section_id == "projects":
        return format_projects_markdown(data, section_name)
    elif section_id == "certifications":
        return format_certifications_markdown(data, section_name)
    elif section_id == "languages":
        return format_languages_markdown(data, section_name)
    elif section_id in ("skills", "hobbies"):
        return format_inline_list_markdown(data["items"], section_name)
    else:
        return f"## {section_name}\n\n(No content)"
