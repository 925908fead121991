# catdistribution/main.py
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from . import config
from .catalog import catalog_router
from .catalog.controller import CatalogController
from .catalog.store import CatStore, load_sample_cats
from .models import User
from .oplog import OperationLogClient


def build_controller() -> CatalogController:
    """Controller wired from ``config``: sample cats and, if a user is set, operation logging."""
    settings = config.get_settings()
    log_client = None
    if settings.user_id:
        log_client = OperationLogClient(User(id=settings.user_id, username=settings.username))
    return CatalogController(CatStore(load_sample_cats()), log_client=log_client)


def create_app(controller: Optional[CatalogController] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # Stop background generation when the app goes away.
        app.state.controller.shutdown()

    app = FastAPI(
        title="Cat Distribution System",
        description=(
            "Browse, filter, sort and paginate a catalog of cats, with "
            "optional background generation of new cats and remote "
            "operation logging."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.controller = controller or build_controller()

    @app.get("/")
    def health_check():
        return {"status": "ok", "cats": len(app.state.controller.store)}

    app.include_router(catalog_router)
    return app


app = create_app()
