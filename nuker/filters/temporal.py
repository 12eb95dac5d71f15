"""Temporal filter for age-based resource selection.

Resources modified after the cutoff (``exclude_after``) are protected from
deletion. Resources without a last-modified timestamp are not protected by
this filter.
"""

from datetime import UTC, datetime

from nuker.filters.base import ResourceFilter
from nuker.models import CodeCommitResource


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class TemporalFilter(ResourceFilter):
    """Filter resources based on a last-modified cutoff."""

    def __init__(self, exclude_after: datetime):
        """
        Initialize temporal filter.

        Args:
            exclude_after: Resources modified strictly after this time are
                          excluded. Naive datetimes are treated as UTC.
        """
        self.exclude_after = _as_utc(exclude_after)

    def is_protected(self, last_modified: datetime | None) -> bool:
        """
        Check if a resource is newer than the cutoff.

        Args:
            last_modified: When the resource was last modified, if known

        Returns:
            True if the resource was modified after the cutoff
        """
        if last_modified is None:
            return False
        return _as_utc(last_modified) > self.exclude_after

    def matches(self, resource: CodeCommitResource) -> bool:
        return not self.is_protected(resource.last_modified)
