"""Structured logging for CodeCommit Nuker.

NukerLogger is handed explicitly to the listers and nukers rather than
reached through a module global. It formats every entry as a single line on
the wrapped stdlib logger and keeps the entries for the run summary.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from nuker.models import ResourceType


class LogLevel(Enum):
    """Log levels for nuker operations."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ActionType(Enum):
    """Types of actions that can be logged."""

    LIST = "LIST"
    FILTER = "FILTER"
    DELETE = "DELETE"
    SKIP = "SKIP"
    ERROR = "ERROR"


_LEVEL_METHODS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
}


@dataclass
class LogEntry:
    """Structured log entry."""

    timestamp: datetime
    level: LogLevel
    action: ActionType
    resource_type: str
    resource_id: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert log entry to dictionary for structured logging."""
        entry = {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level.value,
            "action": self.action.value,
            "resource_type": self.resource_type,
            "resource_id": self.resource_id,
            "message": self.message,
        }
        if self.details:
            entry["details"] = self.details
        return entry


class NukerLogger:
    """Logging handle for list and nuke operations in one region."""

    def __init__(
        self,
        region: str = "",
        dry_run: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize nuker logger.

        Args:
            region: AWS region for context
            dry_run: Whether operating in dry-run mode
            logger: Stdlib logger to write to, defaults to the "nuker" logger
        """
        self.region = region
        self.dry_run = dry_run
        self.logger = logger or logging.getLogger("nuker")
        self._log_entries: List[LogEntry] = []

    def _log(
        self,
        level: LogLevel,
        action: ActionType,
        resource_type: ResourceType,
        resource_id: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> LogEntry:
        entry = LogEntry(
            timestamp=datetime.now(timezone.utc),
            level=level,
            action=action,
            resource_type=resource_type.value,
            resource_id=resource_id,
            message=message,
            details=details or {},
        )
        self._log_entries.append(entry)

        prefix = "[DRY RUN] " if self.dry_run else ""
        log_message = f"{prefix}{message}"
        if entry.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in entry.details.items())
            log_message += f" ({detail_str})"

        self.logger.log(_LEVEL_METHODS[level], log_message)
        return entry

    # Listing

    def log_list_start(self, resource_type: ResourceType) -> None:
        self._log(
            LogLevel.DEBUG,
            ActionType.LIST,
            resource_type,
            "*",
            f"Listing {resource_type.plural} in region {self.region}",
        )

    def log_list_complete(
        self, resource_type: ResourceType, total_found: int, matching: int
    ) -> None:
        """Log completion of a listing with found/selected counts."""
        self._log(
            LogLevel.INFO,
            ActionType.LIST,
            resource_type,
            "*",
            f"Found {matching} of {total_found} {resource_type.plural} to nuke in {self.region}",
            details={"total_found": total_found, "matching": matching},
        )

    def log_resource_filtered(
        self,
        resource_type: ResourceType,
        resource_id: str,
        matched: bool,
    ) -> None:
        """Log the inclusion decision for a single resource at DEBUG level."""
        self._log(
            LogLevel.DEBUG,
            ActionType.FILTER,
            resource_type,
            resource_id,
            f"{resource_type.label} {resource_id} "
            f"{'selected for deletion' if matched else 'excluded'}",
        )

    def log_list_failed(
        self, resource_type: ResourceType, resource_id: str, error: Exception
    ) -> None:
        self._log(
            LogLevel.ERROR,
            ActionType.ERROR,
            resource_type,
            resource_id,
            f"Listing {resource_type.plural} aborted at {resource_id}: {error}",
        )

    def log_pagination_failed(self, resource_type: ResourceType, error: Exception) -> None:
        self._log(
            LogLevel.ERROR,
            ActionType.ERROR,
            resource_type,
            "*",
            f"Listing {resource_type.plural} in region {self.region} failed: {error}",
        )

    # Nuking

    def log_nothing_to_nuke(self, resource_type: ResourceType) -> None:
        self._log(
            LogLevel.DEBUG,
            ActionType.SKIP,
            resource_type,
            "*",
            f"No {resource_type.plural} to nuke in region {self.region}",
        )

    def log_batch_rejected(self, resource_type: ResourceType, count: int, limit: int) -> None:
        self._log(
            LogLevel.ERROR,
            ActionType.ERROR,
            resource_type,
            "*",
            f"Nuking too many {resource_type.plural} at once ({limit}): "
            "halting to avoid hitting AWS API rate limiting",
            details={"requested": count},
        )

    def log_delete_start(self, resource_type: ResourceType, count: int) -> None:
        self._log(
            LogLevel.DEBUG,
            ActionType.DELETE,
            resource_type,
            "*",
            f"Deleting {count} {resource_type.plural} in region {self.region}",
        )

    def log_delete_ok(self, resource_type: ResourceType, resource_id: str) -> None:
        self._log(
            LogLevel.INFO,
            ActionType.DELETE,
            resource_type,
            resource_id,
            f"[OK] {resource_type.label} {resource_id} was deleted in {self.region}",
        )

    def log_delete_failed(
        self, resource_type: ResourceType, resource_id: str, error: Exception
    ) -> None:
        self._log(
            LogLevel.ERROR,
            ActionType.ERROR,
            resource_type,
            resource_id,
            f"[Failed] {resource_type.label} {resource_id}: {error}",
        )

    def log_dry_run(self, resource_type: ResourceType, resource_ids: List[str]) -> None:
        self._log(
            LogLevel.INFO,
            ActionType.SKIP,
            resource_type,
            "*",
            f"Would nuke {len(resource_ids)} {resource_type.plural} in {self.region}",
            details={"identifiers": resource_ids},
        )

    # Reporting

    def get_entries(self) -> List[LogEntry]:
        """Get all log entries recorded so far."""
        return list(self._log_entries)

    def get_error_entries(self) -> List[LogEntry]:
        return [e for e in self._log_entries if e.level in (LogLevel.ERROR, LogLevel.CRITICAL)]

    def get_summary(self) -> Dict[str, Any]:
        """Count entries per action type."""
        actions: Dict[str, int] = {}
        for entry in self._log_entries:
            actions[entry.action.value] = actions.get(entry.action.value, 0) + 1
        return {
            "region": self.region,
            "dry_run": self.dry_run,
            "total_entries": len(self._log_entries),
            "errors": len(self.get_error_entries()),
            "actions": actions,
        }
