"""Tests for Supabase store."""

from unittest.mock import MagicMock, Mock

import pytest

from bugboard.models import BugDraft
from bugboard.store import StoreError
from bugboard.stores.supabase import SupabaseStore


@pytest.fixture
def mock_supabase_client() -> Mock:
    """Create a mock Supabase client."""
    return MagicMock()


@pytest.fixture
def supabase_store(mock_supabase_client: Mock, monkeypatch: pytest.MonkeyPatch) -> SupabaseStore:
    """Create a Supabase store with mocked client."""
    with monkeypatch.context() as m:
        m.setattr("bugboard.stores.supabase.create_client", lambda url, key: mock_supabase_client)
        store = SupabaseStore(url="https://example.supabase.co", key="anon")

    return store


@pytest.fixture
def sample_row() -> dict:
    """Create a sample bugs table row."""
    return {
        "id": "7f1c",
        "title": "Login fails",
        "description": None,
        "priority": "Critical",
        "status": "Open",
        "tags": ["auth", "login"],
        "assignee_name": None,
        "reporter_name": "Alice",
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-01T00:00:00+00:00",
    }


def test_requires_url_and_key() -> None:
    """Test that both connection values are required."""
    with pytest.raises(ValueError, match="URL required"):
        SupabaseStore(url="", key="anon")
    with pytest.raises(ValueError, match="key required"):
        SupabaseStore(url="https://example.supabase.co", key="")


def test_fetch_all(supabase_store: SupabaseStore, mock_supabase_client: Mock, sample_row: dict) -> None:
    """Test fetching all rows newest first."""
    query = mock_supabase_client.table.return_value.select.return_value.order.return_value
    query.execute.return_value = Mock(data=[sample_row])

    bugs = supabase_store.fetch_all()

    assert len(bugs) == 1
    assert bugs[0].id == "7f1c"
    assert bugs[0].tags == ["auth", "login"]
    mock_supabase_client.table.assert_called_once_with("bugs")
    mock_supabase_client.table.return_value.select.assert_called_once_with("*")
    mock_supabase_client.table.return_value.select.return_value.order.assert_called_once_with(
        "created_at", desc=True
    )


def test_fetch_all_empty(supabase_store: SupabaseStore, mock_supabase_client: Mock) -> None:
    """Test that a missing payload is treated as no rows."""
    query = mock_supabase_client.table.return_value.select.return_value.order.return_value
    query.execute.return_value = Mock(data=None)
    assert supabase_store.fetch_all() == []


def test_fetch_all_failure(supabase_store: SupabaseStore, mock_supabase_client: Mock) -> None:
    """Test that client errors are wrapped in StoreError."""
    query = mock_supabase_client.table.return_value.select.return_value.order.return_value
    query.execute.side_effect = ConnectionError("connection refused")

    with pytest.raises(StoreError, match="connection refused"):
        supabase_store.fetch_all()


def test_insert(supabase_store: SupabaseStore, mock_supabase_client: Mock, sample_row: dict) -> None:
    """Test inserting a row."""
    insert = mock_supabase_client.table.return_value.insert
    insert.return_value.execute.return_value = Mock(data=[sample_row])

    draft = BugDraft(title="Login fails", reporter_name="Alice", priority="Critical", tags=["auth", "login"])
    bug = supabase_store.insert(draft)

    assert bug.id == "7f1c"
    assert bug.status == "Open"
    insert.assert_called_once_with(draft.to_row())


def test_insert_failure_keeps_message(supabase_store: SupabaseStore, mock_supabase_client: Mock) -> None:
    """Test that the API error message is surfaced."""

    class FakeAPIError(Exception):
        message = 'new row violates check constraint "bugs_priority_check"'

    insert = mock_supabase_client.table.return_value.insert
    insert.return_value.execute.side_effect = FakeAPIError({"message": "raw"})

    with pytest.raises(StoreError, match="bugs_priority_check"):
        supabase_store.insert(BugDraft(title="t", reporter_name="r", priority="Urgent"))


def test_insert_without_returned_rows(supabase_store: SupabaseStore, mock_supabase_client: Mock) -> None:
    """Test that an insert returning nothing is an error."""
    insert = mock_supabase_client.table.return_value.insert
    insert.return_value.execute.return_value = Mock(data=[])

    with pytest.raises(StoreError, match="no rows"):
        supabase_store.insert(BugDraft(title="t", reporter_name="r"))
