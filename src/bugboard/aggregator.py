"""Reporting functions over a bug collection.

All functions are pure and make a single pass over their input.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from bugboard.models import PRIORITIES, STATUSES, Bug

RECENT_LIMIT = 5
TOP_TAGS_LIMIT = 5


def count_by(bugs: Iterable[Bug], field_name: str, allowed_values: Iterable[str]) -> dict[str, int]:
    """Count bugs per value of a field.

    Every allowed value appears in the result, with zero when no bug has it.
    Values outside ``allowed_values`` are not counted.
    """
    counts = {value: 0 for value in allowed_values}
    for bug in bugs:
        value = getattr(bug, field_name)
        if value in counts:
            counts[value] += 1
    return counts


def recent_n(bugs: Sequence[Bug], n: int) -> list[Bug]:
    """Return the first n bugs in input order.

    Relies on the collection already being sorted newest first.
    """
    return list(bugs[: max(n, 0)])


def top_tags_by_frequency(bugs: Iterable[Bug], n: int) -> list[tuple[str, int]]:
    """Return the n most used tags with their counts.

    Ties keep the order in which the tags were first seen.
    """
    counts: dict[str, int] = {}
    for bug in bugs:
        for tag in bug.tags or []:
            counts[tag] = counts.get(tag, 0) + 1

    # sorted() is stable and dicts keep insertion order
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return ranked[: max(n, 0)]


def percentage_of(count: int, total: int) -> float:
    """Return count as a fraction of total, or 0.0 when total is 0."""
    if total == 0:
        return 0.0
    return count / total


@dataclass
class DashboardStats:
    """Summary statistics shown on the dashboard."""

    total: int = 0
    by_priority: dict[str, int] = field(default_factory=lambda: dict.fromkeys(PRIORITIES, 0))
    by_status: dict[str, int] = field(default_factory=lambda: dict.fromkeys(STATUSES, 0))
    recent: list[Bug] = field(default_factory=list)
    top_tags: list[tuple[str, int]] = field(default_factory=list)

    @property
    def critical(self) -> int:
        return self.by_priority["Critical"]

    @property
    def open(self) -> int:
        return self.by_status["Open"]

    @property
    def resolved(self) -> int:
        return self.by_status["Resolved"]


def summarize(bugs: Sequence[Bug]) -> DashboardStats:
    """Compute the dashboard statistics for a collection."""
    return DashboardStats(
        total=len(bugs),
        by_priority=count_by(bugs, "priority", PRIORITIES),
        by_status=count_by(bugs, "status", STATUSES),
        recent=recent_n(bugs, RECENT_LIMIT),
        top_tags=top_tags_by_frequency(bugs, TOP_TAGS_LIMIT),
    )
