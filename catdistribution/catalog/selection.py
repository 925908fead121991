"""Single-record selection used by the delete and update actions."""

from __future__ import annotations

from typing import Optional

from .schemas import Cat


class SelectionState:
    """Holds at most one selected cat.

    Records are compared by ``name``, not by ``id``: two records sharing
    a name are indistinguishable here. The store rejects duplicate names
    so records created through it never collide. Callers clear the
    selection themselves after deleting or updating.
    """

    def __init__(self) -> None:
        self._selected: Optional[Cat] = None

    def select(self, cat: Optional[Cat]) -> None:
        self._selected = cat

    def current(self) -> Optional[Cat]:
        return self._selected

    def clear(self) -> None:
        self._selected = None

    def is_selected(self, cat: Cat) -> bool:
        return self._selected is not None and self._selected.name == cat.name
