"""
Predicate Set: one pure test per filterable attribute.

Every predicate is total: it never raises and always returns a bool.
Wildcard filter values ("" / "all" / 0 / None) always match.

The builders (search_predicate, categorical_predicate, ...) bind a filter
value to an entity accessor. They return None for a wildcard so the engine
can skip that predicate entirely.
"""

from collections.abc import Callable, Collection, Sequence
from enum import Enum
from typing import Any, TypeVar

from predictbase.models.filters import WILDCARDS

T = TypeVar("T")

Predicate = Callable[[T], bool]
Accessor = Callable[[T], Any]


def _plain(value: Any) -> Any:
    """Unwrap str-valued enums so they compare and hash like their value."""
    if isinstance(value, Enum):
        return value.value
    return value


def is_wildcard(selected: Any) -> bool:
    """True if a selector value imposes no restriction."""
    if selected is None:
        return True
    selected = _plain(selected)
    if isinstance(selected, str):
        return selected.strip().lower() in WILDCARDS
    if isinstance(selected, Collection):
        return len(selected) == 0
    return False


# =============================================================================
# MATCHERS
# =============================================================================


def matches_search(entity: T, term: str | None, fields: Sequence[Accessor]) -> bool:
    """
    Case-insensitive substring search over an entity's label fields.

    The entity matches if ANY field contains the term.
    Empty term always matches.
    """
    if not term:
        return True
    needle = term.lower()
    for field in fields:
        value = field(entity)
        if isinstance(value, str) and needle in value.lower():
            return True
    return False


def matches_categorical(value: Any, selected: Any, case_sensitive: bool = True) -> bool:
    """Exact match against a single selector. "" and "all" match everything."""
    if is_wildcard(selected):
        return True
    value, selected = _plain(value), _plain(selected)
    if not case_sensitive and isinstance(value, str) and isinstance(selected, str):
        return value.lower() == selected.lower()
    return bool(value == selected)


def matches_numeric_floor(value: float, threshold: float | None) -> bool:
    """value >= threshold. A threshold of 0 (or None) always matches."""
    if not threshold:
        return True
    if not isinstance(threshold, int | float) or not isinstance(value, int | float):
        # Non-numeric threshold or attribute cannot satisfy a floor
        return False
    return value >= threshold


def matches_enum(value: Any, selected: Any) -> bool:
    """
    Match against an enumerated selection (risk tier, status).

    selected may be one value or a collection of values; an empty
    selection matches all. Anything else is compared as a single value.
    """
    if is_wildcard(selected):
        return True
    value = _plain(value)
    selected = _plain(selected)
    if isinstance(selected, str) or not isinstance(selected, Collection):
        return bool(value == selected)
    return any(value == _plain(choice) for choice in selected)


# =============================================================================
# BUILDERS
# =============================================================================


def search_predicate(term: str | None, *fields: Accessor) -> Predicate | None:
    """Bind a search term to the label fields it should look in."""
    if not term:
        return None
    return lambda entity: matches_search(entity, term, fields)


def categorical_predicate(
    field: Accessor,
    selected: Any,
    case_sensitive: bool = True,
) -> Predicate | None:
    """Bind a categorical selector to an attribute."""
    if is_wildcard(selected):
        return None
    return lambda entity: matches_categorical(field(entity), selected, case_sensitive)


def numeric_floor_predicate(field: Accessor, threshold: float | None) -> Predicate | None:
    """Bind a minimum threshold to a numeric attribute."""
    if not threshold:
        return None
    return lambda entity: matches_numeric_floor(field(entity), threshold)


def enum_predicate(field: Accessor, selected: Any) -> Predicate | None:
    """Bind an enumerated selection to an attribute."""
    if is_wildcard(selected):
        return None
    return lambda entity: matches_enum(field(entity), selected)
