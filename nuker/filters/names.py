"""Name filter applying include/exclude regex rules."""

import re
from collections.abc import Iterable

from nuker.filters.base import ResourceFilter
from nuker.models import CodeCommitResource


class NameFilter(ResourceFilter):
    """Filter resources by name patterns.

    With no patterns at all every name is included. When include patterns
    are given a name must match at least one of them. A name matching any
    exclude pattern is always rejected.
    """

    def __init__(
        self,
        include_patterns: Iterable[str | re.Pattern] = (),
        exclude_patterns: Iterable[str | re.Pattern] = (),
    ):
        self.include_patterns = [re.compile(p) for p in include_patterns]
        self.exclude_patterns = [re.compile(p) for p in exclude_patterns]

    @staticmethod
    def _matches_any(name: str, patterns: list[re.Pattern]) -> bool:
        return any(pattern.search(name) for pattern in patterns)

    def should_include_name(self, name: str) -> bool:
        """Apply include/exclude rules to a resource name."""
        if self.include_patterns and not self._matches_any(name, self.include_patterns):
            return False
        return not self._matches_any(name, self.exclude_patterns)

    def matches(self, resource: CodeCommitResource) -> bool:
        return self.should_include_name(resource.name)
