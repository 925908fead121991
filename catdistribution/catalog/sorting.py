"""Stable ordering of cat records by name or age."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional

from .schemas import Cat, SortConfig

_SORT_KEYS: Dict[str, Callable[[Cat], object]] = {
    "name": lambda c: (c.name or "").lower(),
    "age": lambda c: c.age,
}


def sort_cats(cats: Iterable[Cat], config: Optional[SortConfig] = None) -> List[Cat]:
    """Return ``cats`` ordered by ``config``.

    ``list.sort`` is stable and ``reverse=True`` keeps equal keys in
    their original relative order, so ties never move in either
    direction. Without a config the input order is returned unchanged.
    """
    items = list(cats)
    if config is None:
        return items
    key = _SORT_KEYS.get(config.field)
    if key is None:
        raise ValueError(f"Cannot sort by {config.field!r}")
    items.sort(key=key, reverse=config.direction == "desc")
    return items
