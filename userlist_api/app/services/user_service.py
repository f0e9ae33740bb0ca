"""
Query logic for the user list.

``UserService`` wraps an immutable ``(NameStore, AlphabetIndex)`` pair
and answers read‑only queries against it: plain pages, pages filtered
by first letter, substring search and the alphabet summary.  Nothing
is mutated after construction, so a single instance can be shared by
every request handler without locking.  To reload the data, build a
new service and swap the reference; never modify one in place.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..schemas.user import (
    AllUsersResponse,
    AlphabetBucket,
    AlphabetSummary,
    PageRequest,
    SearchRequest,
    UserPage,
    UserRead,
)
from . import alphabet_index, name_loader
from .alphabet_index import AlphabetIndex
from .name_loader import NameSource, NameStore

logger = logging.getLogger(__name__)

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def normalize_letter(letter: str) -> str:
    """Upper‑case the first character of ``letter``; extra characters are ignored."""
    return letter[:1].upper()


class UserService:
    """Read‑only queries over a loaded name list."""

    def __init__(self, store: NameStore, index: AlphabetIndex) -> None:
        self._store = store
        self._index = index

    @classmethod
    def from_source(cls, source: NameSource) -> "UserService":
        """Load names from ``source`` and build the alphabet index.

        Propagates ``InitializationError`` from the loader.
        """
        store = name_loader.load(source)
        return cls(store, alphabet_index.build(store))

    def _records(self, start: int, end: int) -> List[UserRead]:
        return [UserRead(name=self._store[i], index=i) for i in range(start, end)]

    def total_count(self) -> int:
        return self._store.total_count

    def page(self, request: PageRequest) -> UserPage:
        """Return one page of the full list."""
        page, size = request.page, request.size
        total = self._store.total_count
        logger.debug("page page=%d size=%d", page, size)

        start = page * size
        if start >= total:
            return UserPage.build([], total, page, size)
        end = min(start + size, total)
        return UserPage.build(self._records(start, end), total, page, size)

    def page_by_letter(self, letter: str, request: PageRequest) -> UserPage:
        """Return one page of the names starting with ``letter``.

        Unknown letters yield an empty page with ``totalCount`` 0.
        """
        page, size = request.page, request.size
        letter = normalize_letter(letter)
        logger.debug("page_by_letter letter=%s page=%d size=%d", letter, page, size)

        bucket = self._index.get(letter)
        if bucket is None:
            return UserPage.build([], 0, page, size)

        start = bucket.start_index + page * size
        if start > bucket.end_index:
            return UserPage.build([], bucket.count, page, size)
        end = min(start + size, bucket.end_index + 1)
        return UserPage.build(self._records(start, end), bucket.count, page, size)

    def search(self, request: SearchRequest) -> UserPage:
        """Case‑insensitive substring search, paginated over the matches.

        An empty query behaves exactly like ``page``.  This is a linear
        scan of the whole list on every call.
        """
        if not request.query:
            return self.page(request)

        page, size = request.page, request.size
        needle = request.query.lower()
        logger.debug("search query=%r page=%d size=%d", needle, page, size)

        # TODO: replace the linear scan with a trigram or prefix index once
        # the list grows past what a per-request scan can serve.
        matches = [
            UserRead(name=name, index=i)
            for i, name in enumerate(self._store)
            if needle in name.lower()
        ]

        start = page * size
        if start >= len(matches):
            return UserPage.build([], len(matches), page, size)
        end = min(start + size, len(matches))
        return UserPage.build(matches[start:end], len(matches), page, size)

    def all_users(self) -> AllUsersResponse:
        return AllUsersResponse(
            users=self._records(0, self._store.total_count),
            total_count=self._store.total_count,
        )

    def summary(self) -> List[AlphabetBucket]:
        """Buckets for A–Z in alphabetical order; letters without names are omitted."""
        return [self._index[c] for c in ALPHABET if c in self._index]

    def alphabet_summary(self) -> AlphabetSummary:
        buckets = self.summary()
        return AlphabetSummary(
            alphabet_info=buckets,
            total_letters=len(buckets),
            total_count=sum(bucket.count for bucket in buckets),
        )

    def bucket_for(self, letter: str) -> Optional[AlphabetBucket]:
        """Return the bucket for ``letter`` or ``None`` if no name starts with it."""
        return self._index.get(normalize_letter(letter))
