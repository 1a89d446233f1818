"""Shared fixtures and the in-memory store used across tests."""

from collections.abc import Callable

import pytest

from bugboard.models import Bug, BugDraft
from bugboard.store import BugStore, StoreError


class MemoryStore(BugStore):
    """In-memory store for testing."""

    def __init__(self, bugs: list[Bug] | None = None) -> None:
        """Initialize memory store with bugs ordered newest first."""
        self.bugs: list[Bug] = list(bugs or [])
        self.fail_fetch: str | None = None
        self.fail_insert: str | None = None
        self.fetch_count = 0
        self._next_id = len(self.bugs) + 1

    def fetch_all(self) -> list[Bug]:
        """Return a copy of all bugs."""
        self.fetch_count += 1
        if self.fail_fetch:
            raise StoreError(self.fail_fetch)
        return list(self.bugs)

    def insert(self, draft: BugDraft) -> Bug:
        """Insert a bug at the front of the collection."""
        if self.fail_insert:
            raise StoreError(self.fail_insert)
        timestamp = f"2024-03-{self._next_id:02d}T10:00:00+00:00"
        bug = Bug(
            id=str(self._next_id),
            title=draft.title,
            reporter_name=draft.reporter_name,
            priority=draft.priority,
            description=draft.description,
            tags=draft.tags,
            assignee_name=draft.assignee_name,
            created_at=timestamp,
            updated_at=timestamp,
        )
        self._next_id += 1
        self.bugs.insert(0, bug)
        return bug


@pytest.fixture
def make_bug() -> Callable[..., Bug]:
    """Create bugs with sensible defaults and unique IDs."""
    counter = iter(range(1, 10_000))

    def _make(**kwargs) -> Bug:
        number = next(counter)
        kwargs.setdefault("id", f"bug-{number}")
        kwargs.setdefault("title", f"Bug {number}")
        kwargs.setdefault("reporter_name", "Reporter")
        kwargs.setdefault("created_at", "2024-01-15T09:30:00+00:00")
        return Bug(**kwargs)

    return _make


@pytest.fixture
def sample_bugs(make_bug: Callable[..., Bug]) -> list[Bug]:
    """A small collection ordered newest first."""
    return [
        make_bug(title="Login fails", priority="Critical", status="Open", tags=["auth", "login"]),
        make_bug(
            title="Slow dashboard",
            description="Charts take 10s to LOAD",
            priority="High",
            status="In Progress",
            tags=["performance", "ui"],
        ),
        make_bug(title="Typo on footer", priority="Low", status="Resolved", tags=["ui"]),
        make_bug(title="Crash on export", description="Happens with empty data", priority="Critical", status="Testing"),
        make_bug(title="Button misaligned", priority="Medium", status="Closed", tags=["ui", "css"]),
        make_bug(title="Old report", priority="Medium", status="Open", tags=["auth"]),
    ]


@pytest.fixture
def memory_store(sample_bugs: list[Bug]) -> MemoryStore:
    """Memory store pre-filled with the sample bugs."""
    return MemoryStore(sample_bugs)
