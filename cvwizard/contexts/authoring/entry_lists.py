"""
Entry List Engine

Generic ordered-collection operations shared by all seven entry lists.
Lists are tuples; every operation returns a new tuple and never mutates its input.

Index-based operations that receive an out-of-range index return the input
unchanged. Indices always come from a live rendering of the list, so a stale
index is absorbed rather than reported.

Usage:
    from cvwizard.contexts.authoring import entry_lists
    from cvwizard.contexts.authoring.resume_components import EducationEntry

    education = entry_lists.add((), EducationEntry())
    education = entry_lists.update(education, 0, "degree", "BSc Physics")
    education = entry_lists.move(education, 0, -1)  # no-op at the top
"""

from dataclasses import fields, replace
from typing import Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

UP = -1
DOWN = 1


def _in_bounds(entries: Sequence, index: int) -> bool:
    return 0 <= index < len(entries)


def add(entries: Sequence[T], default: T) -> Tuple[T, ...]:
    """Append one default-initialized record."""
    return tuple(entries) + (default,)


def update(entries: Sequence[T], index: int, key: str, value) -> Tuple[T, ...]:
    """
    Replace field `key` of the record at `index`.

    Args:
        entries: Current list
        index: Position of the record to edit
        key: Field name on the record type
        value: New value

    Returns:
        New tuple with the edited record, or the input when index is out of range

    Raises:
        ValueError: If `key` is not an editable field of the record
    """
    entries = tuple(entries)
    if not _in_bounds(entries, index):
        return entries

    record = entries[index]
    field_names = {f.name for f in fields(record)} - {"entry_id"}
    if key not in field_names:
        raise ValueError(
            f"Unknown field '{key}' for {type(record).__name__}. "
            f"Available fields: {', '.join(sorted(field_names))}"
        )

    edited = replace(record, **{key: value})
    return entries[:index] + (edited,) + entries[index + 1 :]


def remove(entries: Sequence[T], index: int) -> Tuple[T, ...]:
    """Delete the record at `index`; later records shift down by one."""
    entries = tuple(entries)
    if not _in_bounds(entries, index):
        return entries
    return entries[:index] + entries[index + 1 :]


def move(entries: Sequence[T], index: int, direction: int) -> Tuple[T, ...]:
    """
    Swap the record at `index` with its neighbor in `direction`.

    Args:
        entries: Current list
        index: Position of the record to move
        direction: -1 (up) or +1 (down)

    Returns:
        New tuple with the two records swapped, or the input when the move
        would leave the list bounds

    Raises:
        ValueError: If direction is not -1 or +1
    """
    if direction not in (UP, DOWN):
        raise ValueError(f"Invalid move direction: {direction}. Must be -1 or +1")

    entries = tuple(entries)
    target = index + direction
    if not _in_bounds(entries, index) or not _in_bounds(entries, target):
        return entries

    reordered = list(entries)
    reordered[index], reordered[target] = reordered[target], reordered[index]
    return tuple(reordered)


def contains_casefold(values: Sequence[str], value: str) -> bool:
    """Check whether `value` is already present, ignoring case."""
    folded = value.casefold()
    return any(existing.casefold() == folded for existing in values)


def add_unique(values: Sequence[str], value: str) -> Tuple[str, ...]:
    """
    Append a trimmed string unless it is blank or a case-insensitive duplicate.

    Example:
        >>> add_unique(("Python",), "  python ")
        ('Python',)
        >>> add_unique(("Python",), "SQL")
        ('Python', 'SQL')
    """
    values = tuple(values)
    trimmed = (value or "").strip()
    if not trimmed or contains_casefold(values, trimmed):
        return values
    return values + (trimmed,)


def index_of(entries: Sequence, entry_id: str) -> Optional[int]:
    """Position of the record with `entry_id`, or None when absent."""
    for position, record in enumerate(entries):
        if getattr(record, "entry_id", None) == entry_id:
            return position
    return None
