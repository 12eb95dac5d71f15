"""Shared list/filter/nuke workflow for CodeCommit resource types.

Every resource type follows the same three steps:

1. ``iter_names`` pages through the listing API lazily.
2. ``list_all`` fetches metadata per name and keeps those passing the
   inclusion predicate. The first API error aborts the listing.
3. ``nuke_all`` deletes a caller supplied batch of at most 100 names,
   one by one, and raises a single aggregate error if any item failed.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from datetime import datetime
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from nuker.cleanup.batch_processor import BatchProcessor
from nuker.errors import ListingError, NukeBatchError, TooManyResourcesError
from nuker.filters.inclusion import InclusionFilter
from nuker.models import BatchResult, CodeCommitResource, ResourceType
from nuker.telemetry.events import EventSink, LoggingEventSink
from nuker.utils.aws_client import RetryStrategy
from nuker.utils.config import MAX_NUKE_BATCH_SIZE, NukerConfig, ResourceRule
from nuker.utils.logging import NukerLogger

AWS_ERRORS = (BotoCoreError, ClientError)


class ResourceNuker(ABC):
    """Lists, filters and deletes one CodeCommit resource type."""

    resource_type: ResourceType
    too_many_error: type[TooManyResourcesError]

    def __init__(
        self,
        codecommit_client: Any,
        region: str,
        rule: Optional[ResourceRule] = None,
        nuker_logger: Optional[NukerLogger] = None,
        events: Optional[EventSink] = None,
        retry_strategy: Optional[RetryStrategy] = None,
    ):
        """
        Initialize resource nuker.

        Args:
            codecommit_client: Boto3 CodeCommit client bound to ``region``
            region: AWS region, used in logs and telemetry
            rule: Include/exclude name patterns; None matches every name
            nuker_logger: Logging handle, defaults to one for ``region``
            events: Telemetry sink, defaults to logging events
            retry_strategy: Retries for throttled get/delete calls
        """
        self.client = codecommit_client
        self.region = region
        self.rule = rule or ResourceRule()
        self.log = nuker_logger or NukerLogger(region=region)
        self.events = events or LoggingEventSink()
        self.retry_strategy = retry_strategy or RetryStrategy()
        self.batch_processor = BatchProcessor(max_batch_size=MAX_NUKE_BATCH_SIZE)

    @classmethod
    def from_config(
        cls,
        codecommit_client: Any,
        config: NukerConfig,
        nuker_logger: Optional[NukerLogger] = None,
        events: Optional[EventSink] = None,
    ) -> "ResourceNuker":
        return cls(
            codecommit_client,
            config.region,
            rule=config.rule_for(cls.resource_type),
            nuker_logger=nuker_logger,
            events=events,
        )

    @abstractmethod
    def iter_names(self) -> Iterator[str]:
        """Yield every resource name in the region, page by page."""
        raise NotImplementedError

    @abstractmethod
    def get_resource(self, name: str) -> Optional[CodeCommitResource]:
        """Fetch metadata for a single resource."""
        raise NotImplementedError

    @abstractmethod
    def delete_resource(self, name: str) -> None:
        """Delete a single resource."""
        raise NotImplementedError

    def list_all(self, exclude_after: datetime) -> list[str]:
        """Return the names of all resources selected for deletion.

        Args:
            exclude_after: Resources modified after this time are kept

        Raises:
            ListingError: On the first listing or metadata fetch failure
        """
        self.log.log_list_start(self.resource_type)

        try:
            names = list(self.iter_names())
        except AWS_ERRORS as e:
            self.log.log_pagination_failed(self.resource_type, e)
            raise ListingError(self.resource_type) from e

        inclusion = InclusionFilter.from_rule(exclude_after, self.rule)
        selected = []
        for name in names:
            try:
                resource = self.retry_strategy.call(self.get_resource, name)
            except AWS_ERRORS as e:
                self.log.log_list_failed(self.resource_type, name, e)
                raise ListingError(self.resource_type, name) from e

            matched = inclusion.matches(resource)
            self.log.log_resource_filtered(self.resource_type, name, matched)
            if matched:
                selected.append(name)

        self.log.log_list_complete(self.resource_type, len(names), len(selected))
        return selected

    def nuke_all(self, identifiers: list[str]) -> BatchResult:
        """Delete a batch of resources.

        Args:
            identifiers: Names to delete, at most 100

        Returns:
            BatchResult listing the deleted names

        Raises:
            TooManyResourcesError: If the batch is over the cap; nothing is deleted
            NukeBatchError: If any deletion failed, after the whole batch ran
        """
        if not identifiers:
            self.log.log_nothing_to_nuke(self.resource_type)
            return BatchResult()

        if self.batch_processor.exceeds_limit(identifiers):
            limit = self.batch_processor.max_batch_size
            self.log.log_batch_rejected(self.resource_type, len(identifiers), limit)
            raise self.too_many_error(len(identifiers), limit)

        self.log.log_delete_start(self.resource_type, len(identifiers))

        result, exceptions = self.batch_processor.process_deletions(
            identifiers,
            lambda name: self.retry_strategy.call(self.delete_resource, name),
            on_item=self._record_outcome,
        )

        if exceptions:
            raise NukeBatchError(self.resource_type, result, exceptions)
        return result

    def _record_outcome(self, name: str, error: Optional[Exception]) -> None:
        properties = {"region": self.region, "resource_id": name}
        if error is None:
            self.events.track(f"Nuked {self.resource_type.label}", properties)
            self.log.log_delete_ok(self.resource_type, name)
        else:
            self.events.track(f"Error Nuking {self.resource_type.label}", properties)
            self.log.log_delete_failed(self.resource_type, name, error)
