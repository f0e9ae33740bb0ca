"""
Alphabet index over a ``NameStore``.

A single pass groups consecutive names by their upper‑cased first
character into ``AlphabetBucket`` ranges.  The store must already be
grouped by leading letter: if a letter appears in two separate runs,
the later run silently replaces the earlier one.  No sorting or
validation is done here.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from ..schemas.user import AlphabetBucket
from .name_loader import NameStore

logger = logging.getLogger(__name__)

AlphabetIndex = Mapping[str, AlphabetBucket]


def build(store: NameStore) -> AlphabetIndex:
    """Return a read‑only mapping of letter to bucket."""
    buckets: Dict[str, AlphabetBucket] = {}
    current: Optional[str] = None
    start = 0
    run_length = 0

    for i, name in enumerate(store):
        letter = name[0].upper()
        if letter != current:
            if current is not None:
                buckets[current] = AlphabetBucket(
                    letter=current, count=run_length, start_index=start, end_index=i - 1
                )
            current = letter
            start = i
            run_length = 1
        else:
            run_length += 1

    if current is not None:
        buckets[current] = AlphabetBucket(
            letter=current, count=run_length, start_index=start, end_index=len(store) - 1
        )

    for bucket in buckets.values():
        logger.debug("Bucket %s: %d names [%d, %d]", bucket.letter, bucket.count, bucket.start_index, bucket.end_index)
    logger.info("Built alphabet index with %d letters", len(buckets))
    return MappingProxyType(buckets)
