"""Tests for data models."""

from bugboard.models import PRIORITIES, STATUSES, Bug, BugDraft, is_known_priority, is_known_status


def test_bug_creation() -> None:
    """Test bug creation with defaults."""
    bug = Bug(id="1", title="Test Bug", reporter_name="Alice")
    assert bug.priority == "Medium"
    assert bug.status == "Open"
    assert bug.description is None
    assert bug.tags is None
    assert bug.assignee_name is None


def test_bug_from_row() -> None:
    """Test building a bug from a storage row."""
    row = {
        "id": 42,
        "title": "Login fails",
        "description": None,
        "priority": "Critical",
        "status": "In Progress",
        "tags": ["auth", "login"],
        "assignee_name": "Bob",
        "reporter_name": "Alice",
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-02T00:00:00+00:00",
    }
    bug = Bug.from_row(row)
    assert bug.id == "42"
    assert bug.title == "Login fails"
    assert bug.description is None
    assert bug.priority == "Critical"
    assert bug.status == "In Progress"
    assert bug.tags == ["auth", "login"]
    assert bug.assignee_name == "Bob"
    assert bug.updated_at == "2024-01-02T00:00:00+00:00"


def test_bug_from_row_keeps_unknown_values() -> None:
    """Test that values outside the known sets are passed through."""
    bug = Bug.from_row({"id": "x", "title": "Odd", "reporter_name": "Eve", "status": "Blocked", "priority": "Urgent"})
    assert bug.status == "Blocked"
    assert bug.priority == "Urgent"
    assert not is_known_status(bug.status)
    assert not is_known_priority(bug.priority)


def test_bug_from_row_missing_optional_fields() -> None:
    """Test that missing fields fall back to defaults instead of failing."""
    bug = Bug.from_row({"id": "x"})
    assert bug.title == ""
    assert bug.priority == "Medium"
    assert bug.status == "Open"
    assert bug.tags is None


def test_bug_from_row_empty_tags_are_untagged() -> None:
    """Test that an empty tag list is read as untagged."""
    bug = Bug.from_row({"id": "x", "title": "t", "reporter_name": "r", "tags": []})
    assert bug.tags is None


def test_draft_to_row() -> None:
    """Test formatting a draft as an insert row."""
    draft = BugDraft(title="Login fails", reporter_name="Alice", priority="Critical", tags=["auth"])
    assert draft.to_row() == {
        "title": "Login fails",
        "description": None,
        "priority": "Critical",
        "assignee_name": None,
        "reporter_name": "Alice",
        "tags": ["auth"],
    }


def test_enumerations() -> None:
    """Test the closed priority and status sets."""
    assert PRIORITIES == ("Low", "Medium", "High", "Critical")
    assert STATUSES == ("Open", "In Progress", "Testing", "Resolved", "Closed")
    assert all(is_known_priority(p) for p in PRIORITIES)
    assert all(is_known_status(s) for s in STATUSES)
