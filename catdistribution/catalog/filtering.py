"""
Free-text and age filtering over a cat collection.

Both filters are pure: they never touch the input sequence and always
return a new list in the input order. The text filter and the age
filter apply conjunctively.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from .schemas import Cat

AgeRange = Tuple[Optional[int], Optional[int]]

# Age groups offered by the list screen's quick-filter buttons.
AGE_GROUPS: Dict[str, AgeRange] = {
    "all": (None, None),
    "kittens": (0, 2),
    "adults": (3, 10),
    "seniors": (11, 35),
}


def _norm(s: Optional[str]) -> str:
    return (s or "").strip().lower()


def validate_age_range(age_range: Optional[AgeRange]) -> AgeRange:
    """Return ``age_range`` as a ``(min, max)`` pair or raise ``ValueError``.

    ``None`` and ``(None, None)`` both mean "no age restriction". A
    missing bound leaves that side of the range open.
    """
    if age_range is None:
        return (None, None)
    min_age, max_age = age_range
    if min_age is not None and min_age < 0:
        raise ValueError(f"Minimum age must be non-negative, got {min_age}")
    if max_age is not None and max_age < 0:
        raise ValueError(f"Maximum age must be non-negative, got {max_age}")
    if min_age is not None and max_age is not None and min_age > max_age:
        raise ValueError(f"Invalid age range: {min_age} > {max_age}")
    return (min_age, max_age)


def age_group(name: str) -> AgeRange:
    try:
        return AGE_GROUPS[_norm(name)]
    except KeyError:
        raise ValueError(
            f"Unknown age group {name!r}; expected one of {', '.join(AGE_GROUPS)}"
        )


def _matches_text(cat: Cat, term: str) -> bool:
    blob = " ".join([_norm(cat.name), _norm(cat.breed), _norm(cat.description)])
    return term in blob


def filter_cats(
    cats: Iterable[Cat],
    search_term: Optional[str] = None,
    age_range: Optional[AgeRange] = None,
) -> List[Cat]:
    """Narrow ``cats`` by search term and inclusive age range.

    Parameters
    ----------
    cats : Iterable[Cat]
        The collection to filter. It is not modified.
    search_term : Optional[str]
        Case-insensitive substring looked up in the name, breed and
        description. Empty or whitespace-only terms disable the text
        filter.
    age_range : Optional[AgeRange]
        Inclusive ``(min, max)`` bounds. ``None`` or ``(None, None)``
        disables the age filter.

    Returns
    -------
    List[Cat]
        The matching records in their original order.
    """
    min_age, max_age = validate_age_range(age_range)
    term = _norm(search_term)

    items = list(cats)
    if term:
        items = [c for c in items if _matches_text(c, term)]
    if min_age is not None:
        items = [c for c in items if c.age >= min_age]
    if max_age is not None:
        items = [c for c in items if c.age <= max_age]
    return items
