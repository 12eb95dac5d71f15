"""CodeCommit Nuker - one-shot cleanup of stale CodeCommit resources."""

__version__ = "1.0.0"

from nuker.models import (
    BatchResult,
    CodeCommitResource,
    NukeSummary,
    ResourceType,
)

__all__ = [
    "BatchResult",
    "CodeCommitResource",
    "NukeSummary",
    "ResourceType",
]
