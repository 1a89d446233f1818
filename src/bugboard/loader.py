"""Collection loading with an explicit load state."""

from dataclasses import dataclass, field
from enum import Enum

import structlog

from bugboard.models import Bug
from bugboard.store import BugStore, StoreError

logger = structlog.get_logger()


class LoadState(str, Enum):
    """State of a collection load."""

    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass
class LoadResult:
    """Outcome of loading the bug collection.

    ``bugs`` is always usable: it is empty unless the load succeeded, so a
    failed load renders the same as an empty collection while ``error`` still
    records why.
    """

    state: LoadState = LoadState.LOADING
    bugs: list[Bug] = field(default_factory=list)
    error: str | None = None

    @classmethod
    def loaded(cls, bugs: list[Bug]) -> "LoadResult":
        return cls(state=LoadState.LOADED, bugs=bugs)

    @classmethod
    def failed(cls, reason: str) -> "LoadResult":
        return cls(state=LoadState.FAILED, error=reason)

    @property
    def is_loaded(self) -> bool:
        return self.state is LoadState.LOADED

    @property
    def is_failed(self) -> bool:
        return self.state is LoadState.FAILED


def load_all(store: BugStore) -> LoadResult:
    """Load the whole bug collection, most recent first.

    Store failures are logged and reported as a failed result instead of
    propagating. Nothing is retried or cached between calls.
    """
    try:
        bugs = store.fetch_all()
    except StoreError as e:
        logger.error("Error fetching bugs", error=str(e))
        return LoadResult.failed(str(e))

    logger.debug("Bugs loaded", count=len(bugs))
    return LoadResult.loaded(bugs)
