"""Store implementations."""

from bugboard.stores.github import GitHubStore
from bugboard.stores.notion import NotionStore
from bugboard.stores.supabase import SupabaseStore

__all__ = ["SupabaseStore", "NotionStore", "GitHubStore"]
