"""Resource filtering modules for selecting CodeCommit resources to nuke.

- TemporalFilter: protects resources modified after the cutoff
- NameFilter: include/exclude name regex rules
- InclusionFilter: both criteria combined
"""

from nuker.filters.base import ResourceFilter
from nuker.filters.inclusion import InclusionFilter, should_include
from nuker.filters.names import NameFilter
from nuker.filters.temporal import TemporalFilter

__all__ = [
    "ResourceFilter",
    "TemporalFilter",
    "NameFilter",
    "InclusionFilter",
    "should_include",
]
