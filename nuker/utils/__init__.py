"""Utility modules for AWS client management, configuration and logging."""

from nuker.utils.aws_client import AWSClientManager, RetryStrategy
from nuker.utils.config import NukerConfig, ResourceRule, configure_logging
from nuker.utils.logging import ActionType, LogEntry, LogLevel, NukerLogger

__all__ = [
    "AWSClientManager",
    "RetryStrategy",
    "NukerConfig",
    "ResourceRule",
    "configure_logging",
    "ActionType",
    "LogEntry",
    "LogLevel",
    "NukerLogger",
]
