"""Base filter interface for resource filtering."""

from abc import ABC, abstractmethod

from nuker.models import CodeCommitResource


class ResourceFilter(ABC):
    """Abstract base class for resource filters."""

    @abstractmethod
    def matches(self, resource: CodeCommitResource) -> bool:
        """Return True if the resource passes this filter."""
        raise NotImplementedError

    def filter_resources(self, resources: list[CodeCommitResource]) -> list[CodeCommitResource]:
        """Keep the resources that pass this filter, preserving order."""
        return [resource for resource in resources if self.matches(resource)]
