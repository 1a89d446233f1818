"""Search and filter criteria for bug lists."""

from collections.abc import Iterable
from dataclasses import dataclass

from bugboard.models import Bug

ALL = "All"


@dataclass(frozen=True)
class FilterCriteria:
    """Criteria narrowing a displayed bug list.

    ``status`` and ``priority`` match exactly unless set to ``"All"``.
    """

    search_text: str = ""
    status: str = ALL
    priority: str = ALL


def matches(bug: Bug, criteria: FilterCriteria) -> bool:
    """Return True if the bug satisfies every criterion."""
    needle = criteria.search_text.lower()
    matches_search = needle in bug.title.lower() or (
        bug.description is not None and needle in bug.description.lower()
    )
    matches_status = criteria.status == ALL or bug.status == criteria.status
    matches_priority = criteria.priority == ALL or bug.priority == criteria.priority
    return matches_search and matches_status and matches_priority


def filter_bugs(bugs: Iterable[Bug], criteria: FilterCriteria) -> list[Bug]:
    """Return the bugs matching criteria, in their original order."""
    return [bug for bug in bugs if matches(bug, criteria)]
