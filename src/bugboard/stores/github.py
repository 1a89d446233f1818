"""GitHub REST API store implementation using PyGithub."""

import structlog
from github import Auth, Github
from github.Issue import Issue
from github.Label import Label
from github.Repository import Repository

from bugboard.models import DEFAULT_PRIORITY, DEFAULT_STATUS, Bug, BugDraft
from bugboard.store import BugStore, StoreError

logger = structlog.get_logger()

# Label prefixes carrying bug fields; any other label is a tag
FIELD_LABELS = ("priority", "status", "reporter", "assignee")

# Prefix for tags that would otherwise read back as a field label
TAG_PREFIX = "tag"


class GitHubStore(BugStore):
    """GitHub-based store using issues as bugs.

    Bug fields without an issue counterpart are kept in ``key:value`` labels,
    e.g. ``priority:High`` or ``reporter:Alice``.
    """

    def __init__(self, owner: str, repo: str, token: str | None = None) -> None:
        """Initialize GitHub store.

        Args:
            owner: Repository owner
            repo: Repository name
            token: GitHub personal access token
        """
        self.owner = owner
        self.repo = repo
        self.token = token
        if not self.token:
            raise ValueError("GitHub token required")

        logger.debug("Initializing GitHub store", owner=owner, repo=repo)
        auth = Auth.Token(self.token)
        self.client = Github(auth=auth)
        try:
            self.repository: Repository = self.client.get_repo(f"{owner}/{repo}")
        except Exception as e:
            raise StoreError(f"Cannot access {owner}/{repo}: {e}") from e
        logger.info("GitHub store initialized", owner=owner, repo=repo)

    def _format_labels(self, draft: BugDraft) -> list[str]:
        """Format a draft's fields into GitHub label names."""
        label_names = [f"priority:{draft.priority}", f"status:{DEFAULT_STATUS}", f"reporter:{draft.reporter_name}"]
        if draft.assignee_name:
            label_names.append(f"assignee:{draft.assignee_name}")
        for tag in draft.tags or []:
            prefix, sep, _ = tag.partition(":")
            if sep and prefix in (*FIELD_LABELS, TAG_PREFIX):
                tag = f"{TAG_PREFIX}:{tag}"
            label_names.append(tag)
        return label_names

    def _ensure_labels_exist(self, label_names: list[str], created: list[Label]) -> None:
        """Ensure all labels exist in the repository, creating them if needed.

        Args:
            label_names: Labels the new issue will carry
            created: Receives each label that had to be created
        """
        existing_labels = {label.name for label in self.repository.get_labels()}
        for label_name in label_names:
            if label_name not in existing_labels:
                logger.debug("Creating label", label_name=label_name)
                created.append(self.repository.create_label(name=label_name, color="ededed"))

    def _remove_labels(self, labels: list[Label]) -> None:
        """Delete labels created for an issue that was never created."""
        if labels:
            logger.info("Removing unused labels", count=len(labels))
        for label in labels:
            try:
                label.delete()
            except Exception as e:
                logger.warning("Failed to remove unused label", label_name=label.name, error=str(e))

    def _issue_to_bug(self, issue: Issue) -> Bug:
        """Convert GitHub issue to Bug."""
        logger.debug("Converting GitHub issue to bug", issue_number=issue.number)
        fields: dict[str, str] = {}
        tags = []
        for label in issue.labels:
            name = label.name
            key, sep, value = name.partition(":")
            if sep and key == TAG_PREFIX:
                tags.append(value)
            elif sep and key in FIELD_LABELS:
                fields[key] = value
            else:
                tags.append(name)

        status = fields.get("status") or ("Closed" if issue.state == "closed" else "Open")

        bug = Bug(
            id=str(issue.number),
            title=issue.title,
            reporter_name=fields.get("reporter") or (issue.user.login if issue.user else ""),
            priority=fields.get("priority") or DEFAULT_PRIORITY,
            status=status,
            description=issue.body or None,
            tags=tags or None,
            assignee_name=fields.get("assignee") or (issue.assignee.login if issue.assignee else None),
            created_at=issue.created_at.isoformat(),
            updated_at=issue.updated_at.isoformat(),
        )
        return bug

    def fetch_all(self) -> list[Bug]:
        """List all GitHub issues, newest first."""
        logger.info("Listing GitHub issues", owner=self.owner, repo=self.repo)

        bugs = []
        try:
            issues = self.repository.get_issues(state="all", sort="created", direction="desc")
            for issue in issues:
                if issue.pull_request is not None:
                    continue
                bugs.append(self._issue_to_bug(issue))
        except Exception as e:
            logger.error("Failed to list GitHub issues", error=str(e))
            raise StoreError(str(e)) from e

        logger.info("Listed GitHub issues", count=len(bugs))
        return bugs

    def insert(self, draft: BugDraft) -> Bug:
        """Create a new GitHub issue."""
        logger.info("Creating GitHub issue", title=draft.title)

        label_names = self._format_labels(draft)
        created_labels: list[Label] = []
        try:
            self._ensure_labels_exist(label_names, created_labels)
            issue = self.repository.create_issue(
                title=draft.title,
                body=draft.description or "",
                labels=label_names,
            )
        except Exception as e:
            logger.error("Failed to create GitHub issue", error=str(e))
            self._remove_labels(created_labels)
            raise StoreError(str(e)) from e

        bug = self._issue_to_bug(issue)
        logger.info("GitHub issue created", bug_id=bug.id)
        return bug
