from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from formbuilder import __version__
from formbuilder.config import Settings
from formbuilder.errors import install_error_handlers
from formbuilder.routes.forms import router as forms_router
from formbuilder.routes.submissions import router as submissions_router
from formbuilder.routes.system import router as system_router
from formbuilder.storage import init_storage


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    storage = init_storage(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        storage.close()

    app = FastAPI(
        title="formbuilder",
        version=__version__,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "forms", "description": "Form definitions and field schemas"},
            {"name": "submissions", "description": "Collected submissions"},
            {"name": "system", "description": "System"},
        ],
    )

    app.state.storage = storage
    app.state.settings = settings

    install_error_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(system_router)
    app.include_router(forms_router)
    app.include_router(submissions_router)

    return app
