"""
Main entrypoint for the User List API.

``create_app`` configures logging, CORS and the versioned routers and
registers a startup hook that loads the name list and builds the
alphabet index.  If the names file cannot be read the hook raises
``InitializationError`` and the server refuses to start; no request is
ever served against a partially loaded list.

Run with uvicorn, e.g.::

    uvicorn userlist_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import get_names_path, settings
from .core.logging_config import setup_logging
from .services.name_loader import NameSource
from .services.user_service import UserService


def create_app(source: Optional[NameSource] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    source : Optional[NameSource]
        Where to load names from: a path or an iterable of lines.
        Defaults to ``settings.names_file``.

    Returns
    -------
    FastAPI
        A configured application.  The query engine is available on
        ``app.state.user_service`` once startup has completed.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix="/api/v1")
    # Unversioned prefix for clients written against the first release,
    # which served everything from ``/api/users``.
    app.include_router(v1_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        names = source if source is not None else get_names_path()
        # Publish only the fully built engine.
        app.state.user_service = UserService.from_source(names)
        logging.getLogger(__name__).info(
            "User list ready: %d users", app.state.user_service.total_count()
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
