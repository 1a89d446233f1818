"""Notion store implementation using notion-client."""

from typing import Any

import structlog
from notion_client import Client

from bugboard.models import DEFAULT_PRIORITY, DEFAULT_STATUS, Bug, BugDraft
from bugboard.store import BugStore, StoreError

logger = structlog.get_logger()


class NotionStore(BugStore):
    """Notion-based store using database pages as bugs.

    The database is expected to have these properties:
    Name (title), Description (rich text), Priority (select), Status (status
    or select, detected from the database schema), Tags (multi-select),
    Assignee and Reporter (rich text).
    """

    def __init__(self, token: str, database_id: str) -> None:
        """Initialize Notion store.

        Args:
            token: Notion integration token
            database_id: Notion database ID holding the bugs
        """
        self.token = token
        self.database_id = database_id

        if not self.token:
            raise ValueError("Notion token required")
        if not self.database_id:
            raise ValueError("Notion database_id required")

        logger.debug("Initializing Notion store", database_id=database_id)
        self.client = Client(auth=self.token)
        self._status_type: str | None = None
        logger.info("Notion store initialized", database_id=database_id)

    def _parse_properties(self, properties: dict[str, Any]) -> dict[str, Any]:
        """Parse Notion properties into simple values."""
        parsed: dict[str, Any] = {}
        for key, value in properties.items():
            prop_type = value.get("type")

            if prop_type == "title":
                title_array = value.get("title", [])
                parsed[key] = "".join([t.get("plain_text", "") for t in title_array])
            elif prop_type == "rich_text":
                text_array = value.get("rich_text", [])
                parsed[key] = "".join([t.get("plain_text", "") for t in text_array])
            elif prop_type in ("select", "status"):
                option = value.get(prop_type)
                parsed[key] = option.get("name") if option else None
            elif prop_type == "multi_select":
                multi_select = value.get("multi_select", [])
                parsed[key] = [item.get("name") for item in multi_select]
            else:
                parsed[key] = value

        return parsed

    def _page_to_bug(self, page: dict[str, Any]) -> Bug:
        """Convert Notion page to Bug."""
        logger.debug("Converting Notion page to bug", page_id=page["id"])
        properties = self._parse_properties(page.get("properties", {}))

        tags = properties.get("Tags")
        bug = Bug(
            id=page["id"],
            title=properties.get("Name") or "",
            reporter_name=properties.get("Reporter") or "",
            priority=properties.get("Priority") or DEFAULT_PRIORITY,
            status=properties.get("Status") or DEFAULT_STATUS,
            # Empty rich text in Notion means the field was never filled in
            description=properties.get("Description") or None,
            tags=tags if isinstance(tags, list) and tags else None,
            assignee_name=properties.get("Assignee") or None,
            created_at=page.get("created_time") or "",
            updated_at=page.get("last_edited_time") or "",
        )
        return bug

    def _status_property_type(self) -> str:
        """Return whether the database's Status column is a status or a select property.

        The schema is retrieved once and cached for the lifetime of the store.
        """
        if self._status_type is None:
            database = self.client.databases.retrieve(database_id=self.database_id)
            status_type = database.get("properties", {}).get("Status", {}).get("type")
            self._status_type = status_type if status_type in ("status", "select") else "status"
            logger.debug("Resolved Notion status property type", status_type=self._status_type)
        return self._status_type

    def _build_properties(self, draft: BugDraft, status_type: str = "status") -> dict[str, Any]:
        """Build Notion properties object for a new page."""
        properties: dict[str, Any] = {
            "Name": {"title": [{"text": {"content": draft.title}}]},
            "Priority": {"select": {"name": draft.priority}},
            "Status": {status_type: {"name": DEFAULT_STATUS}},
            "Reporter": {"rich_text": [{"text": {"content": draft.reporter_name}}]},
        }

        if draft.description is not None:
            properties["Description"] = {"rich_text": [{"text": {"content": draft.description}}]}

        if draft.assignee_name is not None:
            properties["Assignee"] = {"rich_text": [{"text": {"content": draft.assignee_name}}]}

        if draft.tags:
            properties["Tags"] = {"multi_select": [{"name": tag} for tag in draft.tags]}

        return properties

    def fetch_all(self) -> list[Bug]:
        """Query every page in the database, newest first."""
        logger.info("Querying Notion database", database_id=self.database_id)

        query_params: dict[str, Any] = {
            "database_id": self.database_id,
            "sorts": [{"timestamp": "created_time", "direction": "descending"}],
        }

        bugs = []
        try:
            while True:
                response = self.client.databases.query(**query_params)
                for page in response.get("results", []):
                    bugs.append(self._page_to_bug(page))
                if not response.get("has_more"):
                    break
                query_params["start_cursor"] = response["next_cursor"]
        except Exception as e:
            logger.error("Failed to query Notion database", database_id=self.database_id, error=str(e))
            raise StoreError(str(e)) from e

        logger.info("Queried Notion database", count=len(bugs))
        return bugs

    def insert(self, draft: BugDraft) -> Bug:
        """Create a new Notion page in the database."""
        logger.info("Creating Notion page", title=draft.title)

        try:
            properties = self._build_properties(draft, self._status_property_type())
            response = self.client.pages.create(parent={"database_id": self.database_id}, properties=properties)
        except Exception as e:
            logger.error("Failed to create Notion page", error=str(e))
            raise StoreError(str(e)) from e

        bug = self._page_to_bug(response)
        logger.info("Notion page created", bug_id=bug.id)
        return bug
