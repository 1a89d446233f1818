"""CLI for bugboard."""

import sys
from typing import Annotated, Literal

import structlog
from cyclopts import App, Parameter

from bugboard.config import get_store
from bugboard.config_commands import config_app
from bugboard.filters import ALL, FilterCriteria
from bugboard.loader import LoadResult
from bugboard.submission import BugForm, SubmissionError, submit
from bugboard.views import build_dashboard_view, build_list_view, render_dashboard, render_list

logger = structlog.get_logger()

PriorityChoice = Literal["Low", "Medium", "High", "Critical"]
PriorityFilter = Literal["All", "Critical", "High", "Medium", "Low"]
StatusFilter = Literal["All", "Open", "In Progress", "Testing", "Resolved", "Closed"]

app = App(
    help="bugboard - Log bugs and report on them",
)

app.command(config_app)


def configure_logging(log_level: str) -> None:
    """Configure structlog with the specified log level."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(min_level=log_level.lower()),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _use_color(no_color: bool) -> bool:
    return not no_color and sys.stdout.isatty()


def _warn_if_failed(result: LoadResult) -> None:
    if result.is_failed:
        print(f"Warning: could not load bugs ({result.error})", file=sys.stderr)


@app.command
def log(
    title: str,
    reporter: str,
    description: str = "",
    priority: PriorityChoice = "Medium",
    assignee: str = "",
    tags: str = "",
    no_color: bool = False,
) -> None:
    """Log a new bug, then show the bug list.

    Args:
        title: Brief description of the bug
        reporter: Your name
        description: Detailed description, steps to reproduce, etc.
        priority: Bug priority
        assignee: Who should handle this bug
        tags: Comma-separated tags, e.g. "frontend, ui"
        no_color: Disable coloured badges
    """
    store = get_store()
    form = BugForm(
        title=title,
        reporter_name=reporter,
        description=description,
        priority=priority,
        assignee_name=assignee,
        tags=tags,
    )

    try:
        bug = submit(store, form)
    except SubmissionError as e:
        print(f"Error creating bug: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Bug logged successfully! ({bug.id})\n")
    view = build_list_view(store)
    _warn_if_failed(view.result)
    print(render_list(view, color=_use_color(no_color)))


@app.command(name="list")
def list_bugs(
    search: str = "",
    status: StatusFilter = ALL,
    priority: PriorityFilter = ALL,
    no_color: bool = False,
) -> None:
    """List bugs, optionally narrowed by search text, status and priority.

    Args:
        search: Case-insensitive text to find in titles and descriptions
        status: Only show bugs with this status
        priority: Only show bugs with this priority
        no_color: Disable coloured badges
    """
    store = get_store()
    view = build_list_view(store, FilterCriteria(search_text=search, status=status, priority=priority))
    _warn_if_failed(view.result)
    print(render_list(view, color=_use_color(no_color)))


@app.command
def dashboard(no_color: bool = False) -> None:
    """Show bug counts by priority, status and tag.

    Args:
        no_color: Disable coloured badges
    """
    store = get_store()
    view = build_dashboard_view(store)
    _warn_if_failed(view.result)
    print(render_dashboard(view, color=_use_color(no_color)))


@app.meta.default
def main(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    log_level: Literal["debug", "info", "warning", "error", "critical"] = "critical",
) -> None:
    """Main entry point with global options."""
    configure_logging(log_level)
    app(tokens)


if __name__ == "__main__":
    app.meta()
