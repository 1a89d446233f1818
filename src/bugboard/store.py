"""Store interface for bug persistence."""

from abc import ABC, abstractmethod

from bugboard.models import Bug, BugDraft


class StoreError(Exception):
    """Raised when a store cannot complete a query or insert."""


class BugStore(ABC):
    """Abstract base class for bug stores."""

    @abstractmethod
    def fetch_all(self) -> list[Bug]:
        """Fetch every bug, most recently created first."""
        pass

    @abstractmethod
    def insert(self, draft: BugDraft) -> Bug:
        """Persist a new bug and return it as stored."""
        pass
