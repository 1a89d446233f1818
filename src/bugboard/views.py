"""List and dashboard views over a bug store.

Each view loads its own snapshot of the collection when built; nothing is
shared or cached between views.
"""

from dataclasses import dataclass, field
from datetime import datetime

from bugboard.aggregator import DashboardStats, count_by, percentage_of, summarize
from bugboard.badges import priority_badge, status_badge
from bugboard.filters import FilterCriteria, filter_bugs
from bugboard.loader import LoadResult, load_all
from bugboard.models import PRIORITIES, Bug
from bugboard.store import BugStore

BAR_WIDTH = 20


@dataclass
class ListView:
    """Bug list with summary counts and the filtered entries."""

    result: LoadResult
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    bugs: list[Bug] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.result.bugs)

    @property
    def by_priority(self) -> dict[str, int]:
        return count_by(self.result.bugs, "priority", PRIORITIES)

    @property
    def open(self) -> int:
        return sum(1 for bug in self.result.bugs if bug.status == "Open")

    @property
    def empty_message(self) -> str:
        if self.total == 0:
            return "No bugs have been reported yet."
        return "Try adjusting your search or filter criteria."


@dataclass
class DashboardView:
    """Dashboard statistics for the whole collection."""

    result: LoadResult
    stats: DashboardStats = field(default_factory=DashboardStats)

    def priority_distribution(self) -> list[tuple[str, int, float]]:
        """Priority counts with their share of the total, most severe first."""
        counts = self.stats.by_priority
        return [
            (priority, counts[priority], percentage_of(counts[priority], self.stats.total))
            for priority in reversed(PRIORITIES)
        ]

    def status_distribution(self) -> list[tuple[str, int, float]]:
        """Status counts with their share of the total."""
        return [
            (status, count, percentage_of(count, self.stats.total)) for status, count in self.stats.by_status.items()
        ]

    def tag_ranking(self) -> list[tuple[str, int, float]]:
        """Top tags with their count relative to the most used tag."""
        if not self.stats.top_tags:
            return []
        top_count = self.stats.top_tags[0][1]
        return [(tag, count, percentage_of(count, top_count)) for tag, count in self.stats.top_tags]


def build_list_view(store: BugStore, criteria: FilterCriteria | None = None) -> ListView:
    """Load the collection and apply the filter criteria."""
    criteria = criteria or FilterCriteria()
    result = load_all(store)
    return ListView(result=result, criteria=criteria, bugs=filter_bugs(result.bugs, criteria))


def build_dashboard_view(store: BugStore) -> DashboardView:
    """Load the collection and compute the dashboard statistics."""
    result = load_all(store)
    return DashboardView(result=result, stats=summarize(result.bugs))


def format_date(value: str, with_time: bool = False) -> str:
    """Format a stored ISO timestamp for display, or return it unchanged."""
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return value
    if with_time:
        return f"{parsed:%b} {parsed.day}, {parsed:%I:%M %p}"
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def _bar(fraction: float, width: int = BAR_WIDTH) -> str:
    filled = round(fraction * width)
    return "█" * filled + "░" * (width - filled)


def render_bug(bug: Bug, color: bool = False) -> list[str]:
    """Render one list entry."""
    lines = [
        f"{priority_badge(bug.priority).render(color)} {status_badge(bug.status).render(color)} "
        f"{bug.title}  ({format_date(bug.created_at)})"
    ]
    if bug.description:
        lines.append(f"    {bug.description}")
    lines.append(f"    Reporter: {bug.reporter_name}")
    if bug.assignee_name:
        lines.append(f"    Assignee: {bug.assignee_name}")
    if bug.tags:
        lines.append(f"    Tags: {', '.join(bug.tags)}")
    return lines


def render_list(view: ListView, color: bool = False) -> str:
    """Render the list view as text."""
    counts = view.by_priority
    lines = [
        f"Total: {view.total}  Critical: {counts['Critical']}  High: {counts['High']}  "
        f"Medium: {counts['Medium']}  Low: {counts['Low']}  Open: {view.open}",
        "",
        f"Bugs ({len(view.bugs)})",
    ]
    if not view.bugs:
        lines.append(view.empty_message)
        return "\n".join(lines)

    for bug in view.bugs:
        lines.append("")
        lines.extend(render_bug(bug, color))
    return "\n".join(lines)


def render_dashboard(view: DashboardView, color: bool = False) -> str:
    """Render the dashboard view as text."""
    stats = view.stats
    lines = [
        f"Total Bugs: {stats.total}  Critical Priority: {stats.critical}  "
        f"Open Issues: {stats.open}  Resolved: {stats.resolved}",
        "",
        "Priority Distribution",
    ]
    for priority, count, fraction in view.priority_distribution():
        lines.append(f"  {priority:<12} {_bar(fraction)} {count}")

    lines.extend(["", "Status Distribution"])
    for status, count, fraction in view.status_distribution():
        lines.append(f"  {status:<12} {_bar(fraction)} {count}")

    lines.extend(["", "Recent Bugs"])
    if stats.recent:
        for bug in stats.recent:
            lines.append(
                f"  {priority_badge(bug.priority).render(color)} {status_badge(bug.status).render(color)} "
                f"{bug.title}  By {bug.reporter_name}  {format_date(bug.created_at, with_time=True)}"
            )
    else:
        lines.append("  No bugs reported yet")

    lines.extend(["", "Most Common Tags"])
    ranking = view.tag_ranking()
    if ranking:
        for rank, (tag, count, fraction) in enumerate(ranking, start=1):
            lines.append(f"  {rank}. {tag:<16} {_bar(fraction, BAR_WIDTH // 2)} {count}")
    else:
        lines.append("  No tags found")

    return "\n".join(lines)
