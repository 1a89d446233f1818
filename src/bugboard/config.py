"""Configuration management for bugboard using YAML files and environment variables."""

import os
from pathlib import Path
from typing import Any

import structlog
import yaml

from bugboard.store import BugStore
from bugboard.stores import GitHubStore, NotionStore, SupabaseStore

logger = structlog.get_logger()

CONFIG_DIR_NAME = ".bugboard"

# Environment variables override values from either config file
ENV_KEYS: dict[str, str] = {
    "store": "BUGBOARD_STORE",
    "supabase.url": "SUPABASE_URL",
    "supabase.key": "SUPABASE_ANON_KEY",
    "supabase.table": "BUGBOARD_TABLE",
    "notion.token": "NOTION_TOKEN",
    "notion.database_id": "NOTION_DATABASE_ID",
    "github.owner": "GITHUB_OWNER",
    "github.repository": "GITHUB_REPOSITORY",
    "github.token": "GITHUB_TOKEN",
}


class Config:
    """Configuration manager using YAML file storage.

    Local config lives in .bugboard/config.yaml under the current directory,
    global config in ~/.bugboard/config.yaml. Lookups check the environment
    first, then local config, then global config.
    """

    def __init__(self, use_global: bool = False, config_dir: Path | None = None) -> None:
        """Initialize configuration manager.

        Args:
            use_global: If True, use global config only. If False, use local config with global fallback.
            config_dir: Custom directory to store config file (overrides use_global)
        """
        if config_dir is not None:
            self.config_dir = Path(config_dir)
            self.is_global = use_global
        elif use_global:
            self.config_dir = Path.home() / CONFIG_DIR_NAME
            self.is_global = True
        else:
            self.config_dir = Path.cwd() / CONFIG_DIR_NAME
            self.is_global = False

        self.config_file = self.config_dir / "config.yaml"
        self._config: dict[str, Any] = self._load(self.config_file)

        self._global_config: dict[str, Any] = {}
        if not self.is_global:
            global_config_file = Path.home() / CONFIG_DIR_NAME / "config.yaml"
            if global_config_file != self.config_file:
                try:
                    self._global_config = self._load(global_config_file)
                except ValueError as e:
                    logger.warning("Failed to load global config", error=str(e))

        logger.debug("Config initialized", config_file=str(self.config_file), is_global=self.is_global)

    @staticmethod
    def _load(config_file: Path) -> dict[str, Any]:
        """Load configuration from a YAML file, or an empty dict if it is missing."""
        if not config_file.exists():
            logger.debug("Config file does not exist", config_file=str(config_file))
            return {}

        try:
            with open(config_file, "r") as f:
                config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error("Failed to load config", config_file=str(config_file), error=str(e))
            raise ValueError(f"Failed to load config from {config_file}: {e}") from e

        if not isinstance(config, dict):
            raise ValueError(f"Config file {config_file} must contain a mapping")
        logger.debug("Config loaded successfully", keys=list(config.keys()))
        return config

    def _save(self) -> None:
        """Save configuration to YAML file."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w") as f:
                yaml.safe_dump(self._config, f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            logger.error("Failed to save config", error=str(e))
            raise ValueError(f"Failed to save config to {self.config_file}: {e}") from e
        logger.debug("Config saved successfully")

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get a configuration value.

        Args:
            key: Configuration key
            default: Default value if key isn't set anywhere

        Returns:
            Configuration value or default
        """
        env_name = ENV_KEYS.get(key)
        if env_name and os.environ.get(env_name):
            logger.debug("Getting config value from environment", key=key, env=env_name)
            return os.environ[env_name]

        if key in self._config:
            logger.debug("Getting config value from file", key=key)
            return self._config[key]

        if not self.is_global and key in self._global_config:
            logger.debug("Getting config value from global", key=key)
            return self._global_config[key]

        logger.debug("Config value not found", key=key)
        return default

    def set(self, key: str, value: str) -> None:
        """Set a configuration value."""
        logger.debug("Setting config value", key=key)
        self._config[key] = value
        self._save()

    def unset(self, key: str) -> None:
        """Remove a configuration value."""
        logger.debug("Unsetting config value", key=key)
        if key in self._config:
            del self._config[key]
            self._save()

    def list(self) -> dict[str, str]:
        """List all file-based configuration settings.

        For local config, global settings are included and local ones take precedence.
        """
        if self.is_global:
            return self._config.copy()
        merged = self._global_config.copy()
        merged.update(self._config)
        return merged


def get_config(use_global: bool = False) -> Config:
    """Get a configuration instance.

    Args:
        use_global: If True, return global config. If False, return local config with global fallback.
    """
    return Config(use_global=use_global)


def get_store(config: Config | None = None) -> BugStore:
    """Build the configured bug store.

    Raises:
        ValueError: If the store type is unknown or its settings are missing
        StoreError: If the store cannot reach its backing service
    """
    config = config or get_config()
    store_type = config.get("store", "supabase")
    logger.debug("Selecting store", store=store_type)

    if store_type == "supabase":
        url = config.get("supabase.url")
        key = config.get("supabase.key")
        if not url or not key:
            raise ValueError(
                "Supabase URL and key not configured. Set SUPABASE_URL and SUPABASE_ANON_KEY, or use:\n"
                "  bugboard config set supabase.url <url>\n"
                "  bugboard config set supabase.key <anon-key>"
            )
        return SupabaseStore(url=url, key=key, table=config.get("supabase.table", "bugs"))
    elif store_type == "notion":
        token = config.get("notion.token")
        database_id = config.get("notion.database_id")
        if not token or not database_id:
            raise ValueError(
                "Notion token and database not configured. Set them using:\n"
                "  bugboard config set notion.token <token>\n"
                "  bugboard config set notion.database_id <database-id>"
            )
        return NotionStore(token=token, database_id=database_id)
    elif store_type == "github":
        owner = config.get("github.owner")
        repo = config.get("github.repository")
        if not owner or not repo:
            raise ValueError(
                "GitHub owner and repo not configured. Set them using:\n"
                "  bugboard config set github.owner <owner>\n"
                "  bugboard config set github.repository <repo>"
            )
        return GitHubStore(owner=owner, repo=repo, token=config.get("github.token"))
    else:
        raise ValueError(f"Unknown store: {store_type}")
