"""Lambda handler for CodeCommit Nuker.

Each invocation is a one-shot, stateless cleanup run in a single region:

1. Load configuration from environment variables
2. For every CodeCommit resource type, list the resources older than the
   cutoff whose names pass the include/exclude rules
3. Hand the identifiers to the nuker in batches of MAX_BATCH_SIZE
4. Return a per-type summary

In dry-run mode step 3 is replaced by a report of what would be deleted.
"""

import logging
from collections.abc import Iterable, Iterator
from datetime import datetime
from typing import Any

from nuker.cleanup import NUKERS
from nuker.errors import ConfigurationError, ListingError, NukeBatchError
from nuker.models import NukeSummary, ResourceType
from nuker.telemetry.events import EventSink, LoggingEventSink
from nuker.utils.aws_client import AWSClientManager
from nuker.utils.config import NukerConfig, clamp_batch_size, configure_logging
from nuker.utils.logging import NukerLogger

logger = logging.getLogger(__name__)


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """
    Lambda entry point for CodeCommit Nuker.

    Args:
        event: Lambda event (from EventBridge scheduler); ignored
        context: Lambda context object

    Returns:
        Execution result summary with status code and details
    """
    try:
        config = NukerConfig.from_environment(validate=False)
    except ConfigurationError as e:
        logger.error(f"Configuration errors: {e.message}")
        return {"statusCode": 400, "body": {"errors": e.errors or [e.message]}}

    configure_logging(config)

    logger.info("Starting CodeCommit Nuker execution")
    logger.debug(
        f"Configuration: region={config.region}, older_than={config.older_than_hours}h, "
        f"dry_run={config.dry_run}, max_batch_size={config.max_batch_size}"
    )

    errors = config.validate()
    if errors:
        logger.error(f"Configuration errors: {errors}")
        return {"statusCode": 400, "body": {"errors": errors}}

    client_manager = AWSClientManager(region=config.region, role_arn=config.role_arn or None)
    nuker_logger = NukerLogger(region=config.region, dry_run=config.dry_run)
    summaries = execute_nuker(config, client_manager, nuker_logger=nuker_logger)

    failed = any(s.error or s.failed for s in summaries)
    return {
        "statusCode": 500 if failed else 200,
        "body": {
            "region": config.region,
            "dry_run": config.dry_run,
            "results": [s.to_dict() for s in summaries],
            "log_summary": nuker_logger.get_summary(),
        },
    }


def execute_nuker(
    config: NukerConfig,
    client_manager: AWSClientManager,
    nuker_logger: NukerLogger | None = None,
    events: EventSink | None = None,
    resource_types: Iterable[ResourceType] | None = None,
    now: datetime | None = None,
) -> list[NukeSummary]:
    """
    List and nuke every configured resource type in the region.

    A listing failure for one resource type is recorded on its summary and
    the run moves on to the next type. Batches are clamped to the 1..100
    range accepted by the nukers whatever ``config.max_batch_size`` says.

    Args:
        config: Nuker configuration
        client_manager: AWS client manager bound to the target region
        nuker_logger: Logging handle shared by all resource types
        events: Telemetry sink shared by all resource types
        resource_types: Types to process; None means all of them
        now: Reference time for the age cutoff

    Returns:
        One summary per processed resource type
    """
    nuker_logger = nuker_logger or NukerLogger(region=config.region, dry_run=config.dry_run)
    events = events or LoggingEventSink()
    exclude_after = config.exclude_after(now)
    batch_size = clamp_batch_size(config.max_batch_size)
    if resource_types is None:
        resource_types = list(ResourceType)

    summaries = []
    for resource_type in resource_types:
        nuker = NUKERS[resource_type].from_config(
            client_manager.codecommit, config, nuker_logger=nuker_logger, events=events
        )
        summary = NukeSummary(resource_type=resource_type, dry_run=config.dry_run)
        summaries.append(summary)

        try:
            summary.found = nuker.list_all(exclude_after)
        except ListingError as e:
            logger.error(f"{e}: {e.__cause__}")
            summary.error = str(e)
            continue

        if config.dry_run:
            nuker_logger.log_dry_run(resource_type, summary.found)
            continue

        for batch in batched(summary.found, batch_size):
            try:
                result = nuker.nuke_all(batch)
            except NukeBatchError as e:
                result = e.result
            summary.deleted.extend(result.successful)
            summary.failed.extend(result.failed)

        logger.info(
            f"{resource_type.plural}: {len(summary.deleted)} deleted, "
            f"{len(summary.failed)} failed"
        )

    return summaries


def batched(items: list[str], size: int) -> Iterator[list[str]]:
    """Split items into consecutive chunks of at most ``size``."""
    for i in range(0, len(items), size):
        yield items[i : i + size]
