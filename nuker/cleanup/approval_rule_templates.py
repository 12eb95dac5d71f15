"""CodeCommit approval rule template listing and deletion.

botocore ships no paginator for ListApprovalRuleTemplates, so pages are
followed by hand through ``nextToken``.
"""

from collections.abc import Iterator
from typing import Optional

from nuker.cleanup.base import ResourceNuker
from nuker.errors import TooManyApprovalRuleTemplatesError
from nuker.models import CodeCommitResource, ResourceType


class ApprovalRuleTemplateNuker(ResourceNuker):
    """Nukes CodeCommit approval rule templates."""

    resource_type = ResourceType.CODECOMMIT_APPROVAL_RULE_TEMPLATE
    too_many_error = TooManyApprovalRuleTemplatesError

    def iter_names(self) -> Iterator[str]:
        kwargs = {}
        while True:
            response = self.retry_strategy.call(self.client.list_approval_rule_templates, **kwargs)
            yield from response.get("approvalRuleTemplateNames", [])
            next_token = response.get("nextToken")
            if not next_token:
                return
            kwargs["nextToken"] = next_token

    def get_resource(self, name: str) -> Optional[CodeCommitResource]:
        response = self.client.get_approval_rule_template(approvalRuleTemplateName=name)
        template = response.get("approvalRuleTemplate")
        if not template:
            return None
        return CodeCommitResource(
            name=template.get("approvalRuleTemplateName", name),
            resource_type=self.resource_type,
            region=self.region,
            last_modified=template.get("lastModifiedDate"),
            creation_time=template.get("creationDate"),
        )

    def delete_resource(self, name: str) -> None:
        self.client.delete_approval_rule_template(approvalRuleTemplateName=name)
