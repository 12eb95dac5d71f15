"""CodeCommit repository listing and deletion."""

from collections.abc import Iterator
from typing import Optional

from nuker.cleanup.base import ResourceNuker
from nuker.errors import TooManyRepositoriesError
from nuker.models import CodeCommitResource, ResourceType


class RepositoryNuker(ResourceNuker):
    """Nukes CodeCommit repositories."""

    resource_type = ResourceType.CODECOMMIT_REPOSITORY
    too_many_error = TooManyRepositoriesError

    def iter_names(self) -> Iterator[str]:
        paginator = self.client.get_paginator("list_repositories")
        for page in paginator.paginate():
            for repository in page.get("repositories", []):
                yield repository["repositoryName"]

    def get_resource(self, name: str) -> Optional[CodeCommitResource]:
        response = self.client.get_repository(repositoryName=name)
        metadata = response.get("repositoryMetadata")
        if not metadata:
            return None
        return CodeCommitResource(
            name=metadata.get("repositoryName", name),
            resource_type=self.resource_type,
            region=self.region,
            last_modified=metadata.get("lastModifiedDate"),
            creation_time=metadata.get("creationDate"),
        )

    def delete_resource(self, name: str) -> None:
        self.client.delete_repository(repositoryName=name)
