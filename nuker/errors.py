"""Exceptions raised by CodeCommit Nuker."""

from typing import Dict, List, Optional

from nuker.models import BatchResult, ResourceType


class NukerError(Exception):
    """Base class for all nuker errors."""


class ConfigurationError(NukerError):
    """Exception raised for configuration validation errors."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.message = message
        self.errors = errors or []
        super().__init__(self.message)


class ListingError(NukerError):
    """Listing a resource type failed; the whole listing is aborted."""

    def __init__(self, resource_type: ResourceType, identifier: Optional[str] = None):
        self.resource_type = resource_type
        self.identifier = identifier
        if identifier:
            message = f"Failed to fetch {resource_type.label} {identifier}"
        else:
            message = f"Failed to list {resource_type.plural}"
        super().__init__(message)


class TooManyResourcesError(NukerError):
    """A deletion batch exceeded the per-call cap."""

    resource_type: ResourceType

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"Too many {self.resource_type.plural} requested at once "
            f"({count} > {limit})."
        )


class TooManyRepositoriesError(TooManyResourcesError):
    resource_type = ResourceType.CODECOMMIT_REPOSITORY


class TooManyApprovalRuleTemplatesError(TooManyResourcesError):
    resource_type = ResourceType.CODECOMMIT_APPROVAL_RULE_TEMPLATE


class NukeBatchError(NukerError):
    """One or more deletions in a batch failed.

    The batch is always processed to completion before this is raised, so
    ``result.successful`` lists everything that was actually deleted.
    """

    def __init__(
        self,
        resource_type: ResourceType,
        result: BatchResult,
        errors: Dict[str, Exception],
    ):
        self.resource_type = resource_type
        self.result = result
        self.errors = errors
        lines = [f"{len(errors)} error(s) occurred nuking {resource_type.plural}:"]
        lines.extend(f"\t* {name}: {err}" for name, err in errors.items())
        super().__init__("\n".join(lines))
