"""Supabase store implementation using supabase-py."""

import structlog
from supabase import Client, create_client

from bugboard.models import Bug, BugDraft
from bugboard.store import BugStore, StoreError

logger = structlog.get_logger()


class SupabaseStore(BugStore):
    """Supabase-based store using a single table of bug rows."""

    def __init__(self, url: str, key: str, table: str = "bugs") -> None:
        """Initialize Supabase store.

        Args:
            url: Supabase project URL
            key: Supabase anon (public) key
            table: Name of the bugs table
        """
        if not url:
            raise ValueError("Supabase URL required")
        if not key:
            raise ValueError("Supabase key required")

        self.url = url
        self.table = table

        logger.debug("Initializing Supabase store", url=url, table=table)
        self.client: Client = create_client(url, key)
        logger.info("Supabase store initialized", url=url, table=table)

    def fetch_all(self) -> list[Bug]:
        """Fetch all bug rows ordered by creation time, newest first."""
        logger.info("Fetching Supabase rows", table=self.table)
        try:
            response = self.client.table(self.table).select("*").order("created_at", desc=True).execute()
        except Exception as e:
            logger.error("Failed to fetch Supabase rows", table=self.table, error=str(e))
            raise StoreError(str(e)) from e

        bugs = [Bug.from_row(row) for row in response.data or []]
        logger.info("Fetched Supabase rows", count=len(bugs))
        return bugs

    def insert(self, draft: BugDraft) -> Bug:
        """Insert a bug row and return the stored representation."""
        logger.info("Inserting Supabase row", table=self.table, title=draft.title)
        try:
            response = self.client.table(self.table).insert(draft.to_row()).execute()
        except Exception as e:
            logger.error("Failed to insert Supabase row", table=self.table, error=str(e))
            raise StoreError(getattr(e, "message", None) or str(e)) from e

        if not response.data:
            raise StoreError("Insert returned no rows")

        bug = Bug.from_row(response.data[0])
        logger.info("Supabase row inserted", bug_id=bug.id)
        return bug
