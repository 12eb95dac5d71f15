"""Pytest configuration and shared fixtures."""

import os
from datetime import UTC, datetime, timedelta

import pytest
from botocore.exceptions import ClientError

# Set AWS region for tests
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_REGION", "us-east-1")

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
OLD = NOW - timedelta(days=30)
RECENT = NOW + timedelta(hours=1)


def client_error(code: str, operation: str = "TestOperation") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


class FakeRepositoryPaginator:
    def __init__(self, client: "FakeCodeCommitClient"):
        self.client = client

    def paginate(self):
        if self.client.list_error:
            raise self.client.list_error
        names = sorted(self.client.repositories)
        size = self.client.page_size
        for i in range(0, len(names), size):
            yield {
                "repositories": [
                    {"repositoryName": n, "repositoryId": f"id-{n}"} for n in names[i : i + size]
                ]
            }


class FakeCodeCommitClient:
    """In-memory stand-in for a boto3 CodeCommit client."""

    def __init__(self, page_size: int = 2):
        self.page_size = page_size
        self.repositories: dict[str, dict] = {}
        self.templates: dict[str, dict] = {}
        self.fail_get: set[str] = set()
        self.fail_delete: set[str] = set()
        self.list_error: ClientError | None = None
        self.deleted: list[str] = []
        self.list_template_calls: list[dict] = []

    def add_repository(self, name: str, last_modified: datetime | None = OLD) -> None:
        metadata = {"repositoryName": name, "creationDate": OLD, "Arn": f"arn:{name}"}
        if last_modified is not None:
            metadata["lastModifiedDate"] = last_modified
        self.repositories[name] = metadata

    def add_template(self, name: str, last_modified: datetime | None = OLD) -> None:
        template = {"approvalRuleTemplateName": name, "creationDate": OLD}
        if last_modified is not None:
            template["lastModifiedDate"] = last_modified
        self.templates[name] = template

    # Repositories

    def get_paginator(self, operation_name: str):
        assert operation_name == "list_repositories"
        return FakeRepositoryPaginator(self)

    def get_repository(self, repositoryName: str):
        if repositoryName in self.fail_get:
            raise client_error("EncryptionKeyAccessDeniedException", "GetRepository")
        if repositoryName not in self.repositories:
            raise client_error("RepositoryDoesNotExistException", "GetRepository")
        return {"repositoryMetadata": dict(self.repositories[repositoryName])}

    def delete_repository(self, repositoryName: str):
        if repositoryName in self.fail_delete:
            raise client_error("EncryptionIntegrityChecksFailedException", "DeleteRepository")
        self.repositories.pop(repositoryName, None)
        self.deleted.append(repositoryName)
        return {"repositoryId": f"id-{repositoryName}"}

    # Approval rule templates

    def list_approval_rule_templates(self, nextToken: str | None = None):
        self.list_template_calls.append({"nextToken": nextToken})
        if self.list_error:
            raise self.list_error
        names = sorted(self.templates)
        start = int(nextToken) if nextToken else 0
        end = start + self.page_size
        response = {"approvalRuleTemplateNames": names[start:end]}
        if end < len(names):
            response["nextToken"] = str(end)
        return response

    def get_approval_rule_template(self, approvalRuleTemplateName: str):
        if approvalRuleTemplateName in self.fail_get:
            raise client_error("InvalidApprovalRuleTemplateNameException")
        if approvalRuleTemplateName not in self.templates:
            raise client_error("ApprovalRuleTemplateDoesNotExistException")
        return {"approvalRuleTemplate": dict(self.templates[approvalRuleTemplateName])}

    def delete_approval_rule_template(self, approvalRuleTemplateName: str):
        if approvalRuleTemplateName in self.fail_delete:
            raise client_error("ApprovalRuleTemplateInUseException")
        self.templates.pop(approvalRuleTemplateName, None)
        self.deleted.append(approvalRuleTemplateName)
        return {"approvalRuleTemplateId": f"id-{approvalRuleTemplateName}"}


@pytest.fixture
def codecommit() -> FakeCodeCommitClient:
    """Empty fake CodeCommit client."""
    return FakeCodeCommitClient()


@pytest.fixture
def no_sleep_retry():
    from nuker.utils.aws_client import RetryStrategy

    return RetryStrategy(max_retries=3, base_delay=0.01, sleep=lambda _: None)


@pytest.fixture(autouse=True)
def reset_nuker_logger():
    """configure_logging sets the package logger level; undo it between tests."""
    import logging

    yield
    logging.getLogger("nuker").setLevel(logging.NOTSET)
