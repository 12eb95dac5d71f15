"""Sequential batch processor for resource deletions.

Deletions run one at a time. A failing item is recorded and processing
moves on to the next identifier, so a batch always runs to completion.
Batches above the size cap are refused before anything is deleted.
"""

import logging
from collections.abc import Callable
from typing import Dict, List, Optional, Tuple

from nuker.models import BatchResult
from nuker.utils.config import MAX_NUKE_BATCH_SIZE

logger = logging.getLogger(__name__)

ItemCallback = Callable[[str, Optional[Exception]], None]


class BatchProcessor:
    """Process resource deletions sequentially, aggregating failures."""

    def __init__(self, max_batch_size: int = MAX_NUKE_BATCH_SIZE):
        """Initialize batch processor.

        Args:
            max_batch_size: Largest batch accepted by process_deletions.
        """
        if max_batch_size < 1:
            raise ValueError("max_batch_size must be a positive integer")
        self.max_batch_size = max_batch_size

    def exceeds_limit(self, resources: List[str]) -> bool:
        return len(resources) > self.max_batch_size

    def process_deletions(
        self,
        resources: List[str],
        delete_func: Callable[[str], None],
        on_item: Optional[ItemCallback] = None,
    ) -> Tuple[BatchResult, Dict[str, Exception]]:
        """Delete each resource in order.

        Args:
            resources: Identifiers to delete
            delete_func: Deletes one identifier, raising on failure
            on_item: Called after every item with the identifier and the
                exception it raised, or None on success

        Returns:
            The BatchResult and a dict mapping each failed identifier to
            its exception

        Raises:
            ValueError: If the batch is larger than max_batch_size
        """
        if self.exceeds_limit(resources):
            raise ValueError(
                f"Batch of {len(resources)} exceeds the limit of {self.max_batch_size}"
            )

        result = BatchResult()
        exceptions: Dict[str, Exception] = {}

        for resource_id in resources:
            error = self._safe_delete(delete_func, resource_id)
            if error is None:
                result.successful.append(resource_id)
            else:
                result.failed.append(resource_id)
                result.errors[resource_id] = str(error)
                exceptions[resource_id] = error
            if on_item is not None:
                on_item(resource_id, error)

        logger.debug(
            f"Batch complete: {len(result.successful)} succeeded, {len(result.failed)} failed"
        )
        return result, exceptions

    @staticmethod
    def _safe_delete(
        delete_func: Callable[[str], None], resource_id: str
    ) -> Optional[Exception]:
        try:
            delete_func(resource_id)
        except Exception as e:
            return e
        return None
