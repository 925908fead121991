"""
Route definitions for the cat catalog.

Endpoints under /api/cats:
- GET    /                   : current page of the list with filters, sort and pagination
- GET    /statistics         : summary numbers over the whole collection
- GET    /operation-logs     : operation log entries from the remote service
- GET    /{name}             : one cat
- POST   /                   : add a cat
- PUT    /{name}             : update a cat
- DELETE /{name}             : delete a cat
- POST   /selection          : select a cat by name (null clears)
- DELETE /selected           : delete the selected cat
- POST   /selected/update    : navigation path for updating the selected cat
- POST   /generation/{action}: start, stop or toggle background generation

The routes hold no logic of their own; they forward to the
``CatalogController`` stored on ``app.state.controller``.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request
from typing_extensions import Literal

from ..models import OperationLogEntry
from .controller import CatalogController
from .schemas import (
    Cat,
    CatalogView,
    CatStatistics,
    CreateCatRequest,
    SortDirection,
    SortField,
    UpdateCatRequest,
)
from .statistics import compute_statistics

router = APIRouter(prefix="/api/cats", tags=["cats"])

AgeGroupName = Literal["all", "kittens", "adults", "seniors"]
GenerationAction = Literal["start", "stop", "toggle"]


def get_controller(request: Request) -> CatalogController:
    return request.app.state.controller


@router.get("/", response_model=CatalogView)
def list_cats(
    q: Optional[str] = Query(default=None, description="Search in name, breed and description"),
    min_age: Optional[int] = Query(default=None, ge=0, description="Minimum age (inclusive)"),
    max_age: Optional[int] = Query(default=None, ge=0, description="Maximum age (inclusive)"),
    group: Optional[AgeGroupName] = Query(default=None, description="Age group preset"),
    sort: Optional[SortField] = Query(default=None, description="Sort field"),
    direction: Optional[SortDirection] = Query(default=None, description="Sort direction"),
    page: Optional[int] = Query(default=None, ge=1, description="Page (1-indexed)"),
    page_size: Optional[int] = Query(default=None, ge=1, le=200, description="Page size"),
    controller: CatalogController = Depends(get_controller),
) -> CatalogView:
    """
    Return the current page of the list.

    Parameters that are given update the controller's state before the
    view is computed; omitted ones keep the previous state, so the
    screen behaves like a stateful list. A new search term or page size
    sends the list back to page 1.
    """
    try:
        if q is not None:
            controller.set_search_term(q)
        if group is not None:
            controller.filter_by_group(group)
        elif min_age is not None or max_age is not None:
            controller.filter_by_age(min_age, max_age)
        if sort is not None:
            controller.set_sorting(sort, direction or "asc")
        elif direction is not None:
            controller.set_direction(direction)
        if page_size is not None and page_size != controller.paginator.page_size:
            controller.change_page_size(page_size)
        if page is not None:
            controller.change_page(page)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return controller.view()


@router.get("/statistics", response_model=CatStatistics)
def cat_statistics(controller: CatalogController = Depends(get_controller)) -> CatStatistics:
    return compute_statistics(controller.store.list())


@router.get("/operation-logs", response_model=List[OperationLogEntry])
def operation_logs(controller: CatalogController = Depends(get_controller)):
    if controller.log_client is None:
        raise HTTPException(status_code=503, detail="Operation logging is not configured")
    logs = controller.log_client.fetch_logs()
    if logs is None:
        raise HTTPException(status_code=502, detail="Operation log service unavailable")
    return logs


@router.post("/selection", response_model=Optional[Cat])
def select_cat(
    name: Optional[str] = Body(default=None, embed=True),
    controller: CatalogController = Depends(get_controller),
):
    try:
        return controller.select(name)
    except KeyError:
        raise HTTPException(status_code=404, detail="Cat not found")


@router.delete("/selected", response_model=Cat)
def delete_selected(controller: CatalogController = Depends(get_controller)) -> Cat:
    try:
        return controller.delete_selected()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except KeyError:
        raise HTTPException(status_code=404, detail="Cat not found")


@router.post("/selected/update")
def update_selected(controller: CatalogController = Depends(get_controller)):
    try:
        return {"path": controller.update_target()}
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/generation/{action}")
def generation(action: GenerationAction, controller: CatalogController = Depends(get_controller)):
    if action == "start":
        controller.start_generating()
    elif action == "stop":
        controller.stop_generating()
    else:
        controller.toggle_generating()
    return {"generating": controller.driver.is_running}


@router.get("/{name}", response_model=Cat)
def get_cat(name: str, controller: CatalogController = Depends(get_controller)) -> Cat:
    cat = controller.store.get(name)
    if cat is None:
        raise HTTPException(status_code=404, detail="Cat not found")
    return cat


@router.post("/", response_model=Cat, status_code=201)
def add_cat(req: CreateCatRequest, controller: CatalogController = Depends(get_controller)) -> Cat:
    try:
        return controller.add_cat(req)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{name}", response_model=Cat)
def update_cat(
    name: str,
    req: UpdateCatRequest,
    controller: CatalogController = Depends(get_controller),
) -> Cat:
    try:
        return controller.update_cat(name, req)
    except KeyError:
        raise HTTPException(status_code=404, detail="Cat not found")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{name}", response_model=Cat)
def delete_cat(name: str, controller: CatalogController = Depends(get_controller)) -> Cat:
    try:
        return controller.delete_cat(name)
    except KeyError:
        raise HTTPException(status_code=404, detail="Cat not found")
