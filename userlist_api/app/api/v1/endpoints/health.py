"""
Service health endpoint for API v1.

Unlike ``/users/health`` (plain text, kept for existing clients) this
route returns JSON suitable for load balancer and container probes.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from userlist_api.app.api.deps import get_user_service
from userlist_api.app.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def health(service: UserService = Depends(get_user_service)) -> Dict[str, Any]:
    return {"status": "ok", "totalUsers": service.total_count()}
