"""
Controller tying the catalog pipeline together.

The controller owns the list screen's UI state (search term, age range,
sort order, pagination, selection) and composes the pure stages on a
snapshot of the store:

    store.list() -> filter_cats -> sort_cats -> Paginator.apply -> view

Selection and generation run beside the pipeline. Every mutation is
recorded with the operation-log client when one is configured; a failed
log request is logged by the client and never blocks the mutation.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from .. import config
from ..models import OperationLogEntry
from ..oplog import OperationLogClient
from .filtering import AgeRange, age_group, filter_cats, validate_age_range
from .generation import GenerationDriver
from .generator import factory_for
from .pagination import Paginator
from .schemas import (
    Cat,
    CatalogView,
    CatCard,
    CreateCatRequest,
    FilterState,
    SortConfig,
    UpdateCatRequest,
)
from .selection import SelectionState
from .sorting import sort_cats
from .store import CatStore

logger = logging.getLogger(__name__)


class CatalogController:
    def __init__(
        self,
        store: CatStore,
        log_client: Optional[OperationLogClient] = None,
        factory: Optional[Callable[[], Cat]] = None,
        generation_interval_ms: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> None:
        settings = config.get_settings()
        self.store = store
        self.log_client = log_client
        self.factory = factory or factory_for(store.names)
        self.generation_interval_ms = (
            generation_interval_ms if generation_interval_ms is not None else settings.generation_interval_ms
        )
        self.driver = GenerationDriver()
        self.selection = SelectionState()
        self.paginator = Paginator(page_size if page_size is not None else settings.page_size)
        self.search_term = ""
        self.age_range: AgeRange = (None, None)
        self.sort_config: Optional[SortConfig] = None
        self._lock = threading.RLock()

    # -- filter / sort / pagination state ---------------------------------

    def set_search_term(self, term: Optional[str]) -> None:
        with self._lock:
            self.search_term = term or ""
            self.paginator.track_search_term(self.search_term)

    def filter_by_age(self, min_age: Optional[int], max_age: Optional[int]) -> None:
        with self._lock:
            self.age_range = validate_age_range((min_age, max_age))

    def filter_by_group(self, name: str) -> None:
        self.filter_by_age(*age_group(name))

    def set_sorting(self, field: Optional[str], direction: str = "asc") -> None:
        with self._lock:
            self.sort_config = SortConfig(field=field, direction=direction) if field else None

    def change_page(self, page: int) -> None:
        with self._lock:
            self.paginator.change_page(page)

    def set_direction(self, direction: str) -> None:
        """Change the direction of the active sort; no-op when unsorted."""
        with self._lock:
            if self.sort_config is not None:
                self.sort_config = SortConfig(field=self.sort_config.field, direction=direction)

    def change_page_size(self, page_size: int) -> None:
        if page_size not in config.PAGE_SIZE_OPTIONS:
            raise ValueError(
                f"Page size must be one of {', '.join(map(str, config.PAGE_SIZE_OPTIONS))}, got {page_size}"
            )
        with self._lock:
            self.paginator.change_page_size(page_size)

    def view(self) -> CatalogView:
        with self._lock:
            filtered = filter_cats(self.store.list(), self.search_term, self.age_range)
            ordered = sort_cats(filtered, self.sort_config)
            page = self.paginator.apply(ordered)
            min_age, max_age = self.age_range
            return CatalogView(
                page=page.page,
                page_size=page.page_size,
                total=page.total,
                total_pages=page.total_pages,
                items=[CatCard(cat=c, selected=self.selection.is_selected(c)) for c in page.items],
                filter=FilterState(search_term=self.search_term, min_age=min_age, max_age=max_age),
                sort=self.sort_config,
                selected=self.selection.current(),
                generating=self.driver.is_running,
            )

    # -- selection and mutations ------------------------------------------

    def select(self, name: Optional[str]) -> Optional[Cat]:
        """Select the cat called ``name``; ``None`` clears the selection."""
        if name is None:
            self.selection.clear()
            return None
        cat = self.store.get(name)
        if cat is None:
            raise KeyError(name)
        self.selection.select(cat)
        return cat

    def _require_selection(self) -> Cat:
        cat = self.selection.current()
        if cat is None:
            raise ValueError("No cat selected")
        return cat

    def delete_selected(self) -> Cat:
        cat = self._require_selection()
        removed = self.delete_cat(cat.name)
        self.selection.clear()
        return removed

    def update_target(self) -> str:
        """Return the update path for the selected cat and clear the selection."""
        cat = self._require_selection()
        self.selection.clear()
        return f"/update/{cat.name.lower()}"

    def add_cat(self, req: CreateCatRequest) -> Cat:
        cat = self.store.add(req)
        self._record("add", cat.name)
        return cat

    def update_cat(self, name: str, req: UpdateCatRequest) -> Cat:
        previous = self.store.get(name)
        cat = self.store.update(name, req)
        # Keep the selection pointing at the live record, renamed or not.
        if previous is not None and self.selection.is_selected(previous):
            self.selection.select(cat)
        self._record("update", cat.name)
        return cat

    def delete_cat(self, name: str) -> Cat:
        cat = self.store.delete(name)
        self._record("delete", cat.name)
        return cat

    def _record(self, action: str, cat_name: str) -> None:
        if self.log_client is None:
            return
        result = self.log_client.add_log(OperationLogEntry(action=action, cat_name=cat_name))
        if result is None:
            logger.warning("Operation %s on %s was not logged", action, cat_name)

    # -- generation ---------------------------------------------------------

    def _on_generated(self, cat: Cat) -> None:
        self.store.append(cat)

    def start_generating(self) -> bool:
        return self.driver.start(self.generation_interval_ms, self.factory, self._on_generated)

    def stop_generating(self) -> bool:
        return self.driver.stop()

    def toggle_generating(self) -> bool:
        """Flip the generation state and return whether it is now running."""
        if self.driver.is_running:
            self.stop_generating()
        else:
            self.start_generating()
        return self.driver.is_running

    def shutdown(self) -> None:
        self.driver.stop()
