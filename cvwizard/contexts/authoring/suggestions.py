"""
Suggestion catalogues for quick-filling resume fields.

Catalogues are loaded from configuration (suggestions.* in defaults.yaml) so they
can be replaced without code changes.
"""

from typing import List, Tuple

from cvwizard.utils.config import load_settings


def get_suggestions(kind: str) -> List[str]:
    """
    Get a suggestion catalogue.

    Args:
        kind: One of "summary", "skills", "languages", "hobbies", "experience_description"

    Returns:
        List of suggestion strings (copy, safe to modify)

    Raises:
        KeyError: If no catalogue with that name is configured
    """
    catalogues = load_settings()["suggestions"]
    if kind not in catalogues:
        raise KeyError(f"No suggestion catalogue named '{kind}'")
    return list(catalogues[kind])


def get_suggestion(kind: str, index: int) -> str:
    """
    Get one suggestion by position.

    Raises:
        IndexError: If index is outside the catalogue
    """
    catalogue = get_suggestions(kind)
    if not 0 <= index < len(catalogue):
        raise IndexError(f"Suggestion {index} out of range for '{kind}' ({len(catalogue)} available)")
    return catalogue[index]


def default_language_level() -> str:
    return load_settings()["suggestions"]["default_language_level"]


def parse_language_suggestion(suggestion: str) -> Tuple[str, str]:
    """
    Split a language suggestion into (language, level).

    The display hint in parentheses is not a proficiency level, so every
    suggestion gets the configured default level.

    Example:
        >>> parse_language_suggestion("Chinese – Mandarin (conversational)")
        ('Chinese', 'Fluent')
    """
    language = suggestion.split(" – ")[0].split(" (")[0].strip()
    return language, default_language_level()


def language_key(name: str) -> str:
    """First word of a language name, lowercased, used for duplicate detection."""
    parts = name.strip().split()
    return parts[0].lower() if parts else ""
