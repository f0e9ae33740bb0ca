"""
User list endpoints for API v1.

Read‑only routes over the name list loaded at startup: paginated
listing, the full list, filtering by first letter, substring search
and alphabet navigation data.  Paging query parameters carry no
``ge``/``le`` bounds; out‑of‑range values are normalised by
``PageRequest`` and never produce a 422.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from userlist_api.app.api.deps import get_user_service
from userlist_api.app.core.config import settings
from userlist_api.app.schemas.user import (
    AllUsersResponse,
    AlphabetBucket,
    AlphabetSummary,
    PageRequest,
    SearchRequest,
    UserPage,
)
from userlist_api.app.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=UserPage)
async def list_users(
    page: int = Query(0),
    size: int = Query(settings.default_page_size),
    service: UserService = Depends(get_user_service),
) -> UserPage:
    """Return one page of users, e.g. ``GET /api/users?page=0&size=50``."""
    return service.page(PageRequest(page=page, size=size))


@router.get("/all", response_model=AllUsersResponse)
async def list_all_users(service: UserService = Depends(get_user_service)) -> AllUsersResponse:
    """Return every user without pagination."""
    return service.all_users()


@router.get("/letter/{letter}", response_model=UserPage)
async def list_users_by_letter(
    letter: str,
    page: int = Query(0),
    size: int = Query(settings.default_page_size),
    service: UserService = Depends(get_user_service),
) -> UserPage:
    """Return one page of users whose name starts with ``letter``.

    Matching is case‑insensitive.  A letter with no users returns an
    empty page with ``totalCount`` 0 rather than 404.
    """
    return service.page_by_letter(letter, PageRequest(page=page, size=size))


@router.get("/search", response_model=UserPage)
async def search_users(
    q: Optional[str] = Query(None),
    page: int = Query(0),
    size: int = Query(settings.default_page_size),
    service: UserService = Depends(get_user_service),
) -> UserPage:
    """Case‑insensitive substring search.

    An empty or missing ``q`` returns the unfiltered listing.
    """
    return service.search(SearchRequest(query=q, page=page, size=size))


@router.get("/alphabet", response_model=AlphabetSummary)
async def get_alphabet(service: UserService = Depends(get_user_service)) -> AlphabetSummary:
    """Return the per‑letter counts and index ranges for A–Z."""
    return service.alphabet_summary()


@router.get("/alphabet/{letter}", response_model=AlphabetBucket)
async def get_alphabet_letter(
    letter: str,
    service: UserService = Depends(get_user_service),
) -> AlphabetBucket:
    """Return the bucket for a single letter.

    Returns HTTP 404 if no user name starts with that letter.
    """
    bucket = service.bucket_for(letter)
    if bucket is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Letter not found")
    return bucket


@router.get("/count", response_model=int)
async def count_users(service: UserService = Depends(get_user_service)) -> int:
    return service.total_count()


@router.get("/health", response_class=PlainTextResponse)
async def users_health(service: UserService = Depends(get_user_service)) -> str:
    return f"User API is running. Total users: {service.total_count()}"
