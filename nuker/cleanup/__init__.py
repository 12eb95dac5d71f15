"""Listing and deletion of CodeCommit resources."""

from nuker.cleanup.approval_rule_templates import ApprovalRuleTemplateNuker
from nuker.cleanup.base import ResourceNuker
from nuker.cleanup.batch_processor import BatchProcessor
from nuker.cleanup.repositories import RepositoryNuker
from nuker.models import ResourceType

NUKERS: dict[ResourceType, type[ResourceNuker]] = {
    ResourceType.CODECOMMIT_REPOSITORY: RepositoryNuker,
    ResourceType.CODECOMMIT_APPROVAL_RULE_TEMPLATE: ApprovalRuleTemplateNuker,
}

__all__ = [
    "ApprovalRuleTemplateNuker",
    "BatchProcessor",
    "NUKERS",
    "RepositoryNuker",
    "ResourceNuker",
]
