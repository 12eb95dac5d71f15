"""Data models for CodeCommit Nuker."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class ResourceType(Enum):
    """Types of CodeCommit resources managed by the nuker."""

    CODECOMMIT_REPOSITORY = "codecommit-repository"
    CODECOMMIT_APPROVAL_RULE_TEMPLATE = "codecommit-approval-rule-template"

    @property
    def label(self) -> str:
        """Human readable name used in logs and telemetry events."""
        return _LABELS[self]

    @property
    def plural(self) -> str:
        return _PLURALS[self]

    @property
    def config_key(self) -> str:
        """Key of this resource type in the JSON rules file."""
        return _CONFIG_KEYS[self]


_LABELS = {
    ResourceType.CODECOMMIT_REPOSITORY: "CodeCommit Repository",
    ResourceType.CODECOMMIT_APPROVAL_RULE_TEMPLATE: "CodeCommit Approval Rule Template",
}

_PLURALS = {
    ResourceType.CODECOMMIT_REPOSITORY: "CodeCommit Repositories",
    ResourceType.CODECOMMIT_APPROVAL_RULE_TEMPLATE: "CodeCommit Approval Rule Templates",
}

_CONFIG_KEYS = {
    ResourceType.CODECOMMIT_REPOSITORY: "CodeCommitRepository",
    ResourceType.CODECOMMIT_APPROVAL_RULE_TEMPLATE: "CodeCommitApprovalRuleTemplate",
}


@dataclass
class CodeCommitResource:
    """Metadata fetched for a single CodeCommit resource."""

    name: str
    resource_type: ResourceType
    region: str
    last_modified: datetime | None = None
    creation_time: datetime | None = None


@dataclass
class BatchResult:
    """Result of a deletion batch.

    Attributes:
        successful: Identifiers that were deleted
        failed: Identifiers whose deletion failed
        errors: Dict mapping identifier to error message
    """

    successful: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)


@dataclass
class NukeSummary:
    """Outcome of a run for one resource type."""

    resource_type: ResourceType
    found: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    dry_run: bool = False
    error: str | None = None

    def to_dict(self) -> dict:
        """Convert summary to a JSON serialisable dict."""
        return {
            "resource_type": self.resource_type.value,
            "found": len(self.found),
            "deleted": len(self.deleted),
            "failed": len(self.failed),
            "dry_run": self.dry_run,
            "error": self.error,
        }
