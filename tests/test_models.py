"""Tests for data models and exceptions."""

from nuker.errors import (
    ConfigurationError,
    ListingError,
    NukeBatchError,
    NukerError,
    TooManyApprovalRuleTemplatesError,
    TooManyRepositoriesError,
)
from nuker.models import BatchResult, NukeSummary, ResourceType


class TestResourceType:
    def test_labels(self):
        assert ResourceType.CODECOMMIT_REPOSITORY.label == "CodeCommit Repository"
        assert ResourceType.CODECOMMIT_APPROVAL_RULE_TEMPLATE.plural == (
            "CodeCommit Approval Rule Templates"
        )

    def test_config_keys(self):
        assert [t.config_key for t in ResourceType] == [
            "CodeCommitRepository",
            "CodeCommitApprovalRuleTemplate",
        ]


class TestNukeSummary:
    def test_to_dict(self):
        summary = NukeSummary(
            resource_type=ResourceType.CODECOMMIT_REPOSITORY,
            found=["a", "b", "c"],
            deleted=["a", "b"],
            failed=["c"],
        )

        assert summary.to_dict() == {
            "resource_type": "codecommit-repository",
            "found": 3,
            "deleted": 2,
            "failed": 1,
            "dry_run": False,
            "error": None,
        }


class TestErrors:
    def test_hierarchy(self):
        for error_class in (
            ConfigurationError,
            ListingError,
            NukeBatchError,
            TooManyRepositoriesError,
            TooManyApprovalRuleTemplatesError,
        ):
            assert issubclass(error_class, NukerError)

    def test_too_many_messages(self):
        assert str(TooManyRepositoriesError(120, 100)) == (
            "Too many CodeCommit Repositories requested at once (120 > 100)."
        )

    def test_listing_error_messages(self):
        assert str(ListingError(ResourceType.CODECOMMIT_REPOSITORY)) == (
            "Failed to list CodeCommit Repositories"
        )
        assert str(ListingError(ResourceType.CODECOMMIT_APPROVAL_RULE_TEMPLATE, "t")) == (
            "Failed to fetch CodeCommit Approval Rule Template t"
        )

    def test_nuke_batch_error_lists_every_failure(self):
        result = BatchResult(successful=["ok"], failed=["a", "b"])
        error = NukeBatchError(
            ResourceType.CODECOMMIT_REPOSITORY,
            result,
            {"a": RuntimeError("first"), "b": RuntimeError("second")},
        )

        assert str(error).splitlines() == [
            "2 error(s) occurred nuking CodeCommit Repositories:",
            "\t* a: first",
            "\t* b: second",
        ]
        assert error.result is result

    def test_configuration_error_keeps_errors(self):
        error = ConfigurationError("bad", errors=["x"])
        assert error.message == "bad"
        assert error.errors == ["x"]
