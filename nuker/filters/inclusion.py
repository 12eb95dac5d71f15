"""Inclusion predicate combining the age cutoff and name rules.

A resource is selected for deletion only when it is at least as old as the
cutoff AND its name passes the include/exclude rules.
"""

from datetime import datetime
from typing import Optional

from nuker.filters.base import ResourceFilter
from nuker.filters.names import NameFilter
from nuker.filters.temporal import TemporalFilter
from nuker.models import CodeCommitResource
from nuker.utils.config import ResourceRule


class InclusionFilter(ResourceFilter):
    """Two-criteria filter: temporal cutoff plus name rules."""

    def __init__(self, temporal_filter: TemporalFilter, name_filter: NameFilter):
        self.temporal_filter = temporal_filter
        self.name_filter = name_filter

    @classmethod
    def from_rule(cls, exclude_after: datetime, rule: ResourceRule) -> "InclusionFilter":
        return cls(
            TemporalFilter(exclude_after),
            NameFilter(rule.include_names_regex, rule.exclude_names_regex),
        )

    def matches(self, resource: Optional[CodeCommitResource]) -> bool:
        if resource is None:
            return False
        if not self.temporal_filter.matches(resource):
            return False
        return self.name_filter.matches(resource)


def should_include(
    resource: Optional[CodeCommitResource],
    exclude_after: datetime,
    rule: ResourceRule,
) -> bool:
    """Decide whether a resource should be nuked.

    Args:
        resource: Fetched metadata, or None when the provider returned none
        exclude_after: Resources modified after this time are kept
        rule: Include/exclude name patterns for the resource type

    Returns:
        True if the resource is selected for deletion
    """
    return InclusionFilter.from_rule(exclude_after, rule).matches(resource)
