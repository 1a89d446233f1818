"""Bug submission flow."""

from dataclasses import dataclass

import structlog

from bugboard.models import DEFAULT_PRIORITY, Bug, BugDraft
from bugboard.store import BugStore, StoreError

logger = structlog.get_logger()


class SubmissionError(Exception):
    """Raised when the store rejects a submitted bug."""


@dataclass
class BugForm:
    """Raw values entered in the bug submission form."""

    title: str
    reporter_name: str
    description: str = ""
    priority: str = DEFAULT_PRIORITY
    assignee_name: str = ""
    tags: str = ""


def parse_tags(text: str) -> list[str] | None:
    """Parse a comma-separated tags string.

    Tags are trimmed, empty entries dropped and duplicates removed keeping the
    first occurrence. Returns None when no tag is left.
    """
    tags: list[str] = []
    for tag in text.split(","):
        tag = tag.strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags or None


def _optional(value: str) -> str | None:
    return value if value else None


def to_draft(form: BugForm) -> BugDraft:
    """Normalize form values into an insert payload."""
    return BugDraft(
        title=form.title,
        reporter_name=form.reporter_name,
        priority=form.priority or DEFAULT_PRIORITY,
        description=_optional(form.description),
        assignee_name=_optional(form.assignee_name),
        tags=parse_tags(form.tags),
    )


def submit(store: BugStore, form: BugForm) -> Bug:
    """Persist a bug from form values.

    Raises:
        SubmissionError: If the store rejects the insert, with the store's message
    """
    draft = to_draft(form)
    try:
        bug = store.insert(draft)
    except StoreError as e:
        logger.error("Error inserting bug", title=draft.title, error=str(e))
        raise SubmissionError(str(e)) from e

    logger.info("Bug created successfully", bug_id=bug.id)
    return bug
