"""
Shared FastAPI dependencies.

The query engine is built in the application's startup hook and
published on ``app.state.user_service``.  Handlers receive it through
``get_user_service`` instead of importing a module‑level instance.
"""

from fastapi import HTTPException, Request, status

from ..services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    service = getattr(request.app.state, "user_service", None)
    if service is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="User data not loaded")
    return service
