"""
Loading of the name list.

The list is read once at application startup from a newline‑delimited
text source.  Blank lines are dropped, the remaining lines are
stripped, and their order is preserved exactly.  The result is a
``NameStore``: an immutable sequence whose positions never change for
the lifetime of the process.

The loader does not sort.  Callers are expected to supply a list that
is already grouped by leading letter; ``alphabet_index.build`` relies
on that.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union

logger = logging.getLogger(__name__)

NameSource = Union[str, os.PathLike, Iterable[str]]


class InitializationError(RuntimeError):
    """Raised when the name source cannot be read.  Fatal at startup."""


@dataclass(frozen=True)
class NameStore:
    """Ordered, read‑only list of names."""

    names: Tuple[str, ...]

    @property
    def total_count(self) -> int:
        return len(self.names)

    def __len__(self) -> int:
        return len(self.names)

    def __getitem__(self, index: int) -> str:
        return self.names[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)


def _clean(lines: Iterable[str]) -> Tuple[str, ...]:
    return tuple(line.strip() for line in lines if line.strip())


def load(source: NameSource) -> NameStore:
    """Build a ``NameStore`` from a file path or an iterable of lines.

    Raises
    ------
    InitializationError
        If ``source`` is a path that cannot be opened or decoded as
        UTF‑8.
    """
    if isinstance(source, (str, os.PathLike)):
        try:
            with open(source, encoding="utf-8") as fh:
                names = _clean(fh)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to read names from %s: %s", source, exc)
            raise InitializationError(f"Failed to initialize user data from {source}") from exc
        origin = os.fspath(source)
    else:
        names = _clean(source)
        origin = "<memory>"

    store = NameStore(names)
    logger.info("Loaded %d names from %s", store.total_count, origin)
    return store
