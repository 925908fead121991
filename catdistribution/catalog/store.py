"""
In-memory data store for the cat catalog.

``CatStore`` owns the cat collection. Every read hands out a snapshot
list and every write goes through a lock, because FastAPI runs
synchronous routes in a thread pool and the generation driver appends
from its own thread. Names are unique (case-insensitive) since the
list screen selects and navigates by name.
"""

from __future__ import annotations

import json
import logging
import threading
import uuid
from pathlib import Path
from typing import Iterable, List, Optional

from .. import config
from .schemas import Cat, CreateCatRequest, UpdateCatRequest, check_name

logger = logging.getLogger(__name__)


def _norm(s: Optional[str]) -> str:
    return (s or "").strip().lower()


def load_sample_cats(path: Path = config.DATA_FILE) -> List[Cat]:
    """Load the bundled sample cats.

    Entries that fail validation are skipped with a warning. A missing
    or malformed file yields an empty list.
    """
    cats: List[Cat] = []
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Could not load sample cats from %s: %s", path, exc)
        return cats
    if not isinstance(raw, list):
        logger.warning("Expected a list of cats in %s, got %s", path, type(raw).__name__)
        return cats
    for entry in raw:
        try:
            if not isinstance(entry, dict):
                raise TypeError(f"expected an object, got {type(entry).__name__}")
            cats.append(
                Cat(
                    id=str(entry.get("id") or uuid.uuid4().hex),
                    name=str(entry.get("name") or ""),
                    age=int(entry.get("age") or 0),
                    breed=entry.get("breed") or "",
                    gender=entry.get("gender"),
                    weight=entry.get("weight"),
                    description=entry.get("description") or "",
                    image=entry.get("image") or "",
                )
            )
        except (TypeError, ValueError) as exc:
            logger.warning("Skipping malformed sample cat %r: %s", entry, exc)
    return cats


class CatStore:
    def __init__(self, cats: Iterable[Cat] = ()) -> None:
        self._lock = threading.Lock()
        self._cats: List[Cat] = []
        for cat in cats:
            self.append(cat)

    def __len__(self) -> int:
        with self._lock:
            return len(self._cats)

    def list(self) -> List[Cat]:
        with self._lock:
            return list(self._cats)

    def names(self) -> List[str]:
        with self._lock:
            return [c.name for c in self._cats]

    def _index(self, name: str) -> int:
        key = _norm(name)
        for i, cat in enumerate(self._cats):
            if _norm(cat.name) == key:
                return i
        return -1

    def get(self, name: str) -> Optional[Cat]:
        with self._lock:
            i = self._index(name)
            return self._cats[i] if i >= 0 else None

    def append(self, cat: Cat) -> Cat:
        check_name(cat.name)
        with self._lock:
            if self._index(cat.name) >= 0:
                raise ValueError(f"A cat named {cat.name!r} already exists")
            self._cats.append(cat)
        return cat

    def add(self, req: CreateCatRequest) -> Cat:
        cat = Cat(id=uuid.uuid4().hex, **req.model_dump())
        self.append(cat)
        logger.info("Added cat %s", cat.name)
        return cat

    def update(self, name: str, req: UpdateCatRequest) -> Cat:
        changes = req.model_dump(exclude_none=True)
        with self._lock:
            i = self._index(name)
            if i < 0:
                raise KeyError(name)
            new_name = changes.get("name")
            if new_name is not None:
                clash = self._index(new_name)
                if clash >= 0 and clash != i:
                    raise ValueError(f"A cat named {new_name!r} already exists")
            updated = self._cats[i].model_copy(update=changes)
            self._cats[i] = updated
        logger.info("Updated cat %s", name)
        return updated

    def delete(self, name: str) -> Cat:
        with self._lock:
            i = self._index(name)
            if i < 0:
                raise KeyError(name)
            removed = self._cats.pop(i)
        logger.info("Deleted cat %s", removed.name)
        return removed
