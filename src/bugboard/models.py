"""Data models for bugboard."""

from dataclasses import dataclass
from typing import Any

PRIORITIES: tuple[str, ...] = ("Low", "Medium", "High", "Critical")
STATUSES: tuple[str, ...] = ("Open", "In Progress", "Testing", "Resolved", "Closed")

DEFAULT_PRIORITY = "Medium"
DEFAULT_STATUS = "Open"


def is_known_priority(value: str) -> bool:
    """Return True if value is one of the closed priority values."""
    return value in PRIORITIES


def is_known_status(value: str) -> bool:
    """Return True if value is one of the closed status values."""
    return value in STATUSES


@dataclass
class Bug:
    """Represents a persisted bug report.

    Priority and status are kept as the raw strings the store returned, so
    values outside the known sets still reach presentation.
    """

    id: str
    title: str
    reporter_name: str
    priority: str = DEFAULT_PRIORITY
    status: str = DEFAULT_STATUS
    description: str | None = None
    tags: list[str] | None = None
    assignee_name: str | None = None
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Bug":
        """Build a bug from a storage row without validating it."""
        tags = row.get("tags")
        return cls(
            id=str(row["id"]),
            title=row.get("title") or "",
            reporter_name=row.get("reporter_name") or "",
            priority=row.get("priority") or DEFAULT_PRIORITY,
            status=row.get("status") or DEFAULT_STATUS,
            description=row.get("description"),
            tags=list(tags) if tags else None,
            assignee_name=row.get("assignee_name"),
            created_at=row.get("created_at") or "",
            updated_at=row.get("updated_at") or "",
        )


@dataclass
class BugDraft:
    """Represents a bug report that has not been persisted yet."""

    title: str
    reporter_name: str
    priority: str = DEFAULT_PRIORITY
    description: str | None = None
    assignee_name: str | None = None
    tags: list[str] | None = None

    def to_row(self) -> dict[str, Any]:
        """Format the draft as an insert row."""
        return {
            "title": self.title,
            "description": self.description,
            "priority": self.priority,
            "assignee_name": self.assignee_name,
            "reporter_name": self.reporter_name,
            "tags": self.tags,
        }
