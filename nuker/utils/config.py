"""Configuration management for CodeCommit Nuker.

Configuration is read from environment variables, with per-resource-type
name rules loaded from an optional YAML file in the original tool's
config shape (JSON is accepted too, being valid YAML).

Key configuration options:
- AWS_REGION: Region to clean up
- OLDER_THAN_HOURS: Only resources last modified before now minus this age are nuked
- DRY_RUN: List matching resources without deleting them
- LOG_LEVEL: Configurable log level
- MAX_BATCH_SIZE: Number of identifiers handed to a single nuke call (1-100)
- ROLE_ARN: Optional role to assume before calling CodeCommit
- NUKER_CONFIG_FILE: YAML file with include/exclude name rules
"""

import logging
import os
import re
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any, Dict, List, Optional

import yaml

from nuker.errors import ConfigurationError
from nuker.models import ResourceType

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# Hard cap on identifiers per nuke call, to stay under CodeCommit API rate limits
MAX_NUKE_BATCH_SIZE = 100

_config_logger = logging.getLogger(__name__)


@dataclass
class ResourceRule:
    """Include/exclude name patterns for one resource type."""

    include_names_regex: List[str] = field(default_factory=list)
    exclude_names_regex: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], section: str = "") -> "ResourceRule":
        """Build a rule from the ``{"include": {...}, "exclude": {...}}`` shape.

        Raises:
            ConfigurationError: If the section, its include/exclude blocks or
                their ``names_regex`` entries have the wrong type.
        """
        if not isinstance(data, dict):
            raise ConfigurationError(f"{section}: rules must be a mapping")
        return cls(
            include_names_regex=_names_regex(data, "include", section),
            exclude_names_regex=_names_regex(data, "exclude", section),
        )

    def validate(self) -> List[str]:
        errors = []
        for pattern in self.include_names_regex + self.exclude_names_regex:
            try:
                re.compile(pattern)
            except re.error as e:
                errors.append(f"Invalid name regex '{pattern}': {e}")
        return errors


def _names_regex(data: Dict[str, Any], key: str, section: str) -> List[str]:
    block = data.get(key)
    if block is None:
        return []
    if not isinstance(block, dict):
        raise ConfigurationError(f"{section}.{key}: must be a mapping")
    patterns = block.get("names_regex")
    if patterns is None:
        return []
    if not isinstance(patterns, list) or not all(isinstance(p, str) for p in patterns):
        raise ConfigurationError(f"{section}.{key}.names_regex: must be a list of strings")
    return list(patterns)


@dataclass
class NukerConfig:
    """Configuration for a nuker run.

    Attributes:
        region: AWS region for operations.
        older_than_hours: Age a resource must have reached to be nuked.
            Zero means everything modified before the start of the run.
        dry_run: When True, matching resources are reported but not deleted.
        log_level: Log level for output.
        max_batch_size: Identifiers handed to each nuke call, at most 100.
        role_arn: Optional role to assume for the run.
        rules: Name rules keyed by resource type.
    """

    region: str = "us-east-1"
    older_than_hours: int = 0
    dry_run: bool = False
    log_level: str = "INFO"
    max_batch_size: int = MAX_NUKE_BATCH_SIZE
    role_arn: str = ""
    rules: Dict[ResourceType, ResourceRule] = field(default_factory=dict)

    @classmethod
    def from_environment(cls, validate: bool = True) -> "NukerConfig":
        """Create configuration from environment variables.

        Args:
            validate: If True, validates the configuration and raises
                ConfigurationError if invalid.

        Returns:
            NukerConfig instance populated from environment variables.

        Raises:
            ConfigurationError: If a value cannot be parsed, or validation is
                enabled and configuration is invalid.
        """
        config = cls()

        config.region = os.environ.get("AWS_REGION", "us-east-1")

        older_than = os.environ.get("OLDER_THAN_HOURS", "").strip()
        if older_than:
            try:
                config.older_than_hours = int(older_than)
            except ValueError:
                raise ConfigurationError(
                    f"Invalid OLDER_THAN_HOURS: '{older_than}' is not a valid integer"
                )

        dry_run_value = os.environ.get("DRY_RUN", "false").lower().strip()
        config.dry_run = dry_run_value in ("true", "1", "yes")

        log_level_value = os.environ.get("LOG_LEVEL", "INFO").upper().strip()
        if log_level_value in VALID_LOG_LEVELS:
            config.log_level = log_level_value
        else:
            _config_logger.warning(
                f"Invalid LOG_LEVEL '{log_level_value}', defaulting to INFO"
            )
            config.log_level = "INFO"

        batch_size_value = os.environ.get("MAX_BATCH_SIZE", str(MAX_NUKE_BATCH_SIZE)).strip()
        try:
            parsed_batch_size = int(batch_size_value)
        except ValueError:
            _config_logger.warning(
                f"Invalid MAX_BATCH_SIZE '{batch_size_value}' (not a valid integer), "
                f"defaulting to {MAX_NUKE_BATCH_SIZE}"
            )
            parsed_batch_size = MAX_NUKE_BATCH_SIZE
        config.max_batch_size = clamp_batch_size(parsed_batch_size)

        config.role_arn = os.environ.get("ROLE_ARN", "")

        config_file = os.environ.get("NUKER_CONFIG_FILE", "").strip()
        if config_file:
            config.rules = load_rules_file(config_file)

        if validate:
            errors = config.validate()
            if errors:
                raise ConfigurationError(
                    f"Configuration validation failed: {errors}", errors=errors
                )

        return config

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if self.older_than_hours < 0:
            errors.append("OLDER_THAN_HOURS must not be negative")

        if not 1 <= self.max_batch_size <= MAX_NUKE_BATCH_SIZE:
            errors.append(f"MAX_BATCH_SIZE must be between 1 and {MAX_NUKE_BATCH_SIZE}")

        if self.role_arn and not self.role_arn.startswith("arn:aws:iam::"):
            errors.append(f"Invalid role ARN: {self.role_arn}")

        for resource_type, rule in self.rules.items():
            errors.extend(f"{resource_type.config_key}: {e}" for e in rule.validate())

        return errors

    def rule_for(self, resource_type: ResourceType) -> ResourceRule:
        """Name rules for a resource type; an empty rule matches everything."""
        return self.rules.get(resource_type, ResourceRule())

    def exclude_after(self, now: Optional[datetime] = None) -> datetime:
        """Cutoff time: resources modified after it are kept."""
        now = now or datetime.now(UTC)
        return now - timedelta(hours=self.older_than_hours)

    def get_numeric_log_level(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)


def clamp_batch_size(batch_size: int) -> int:
    """Clamp a requested batch size into the 1..100 range, warning when changed."""
    if batch_size < 1:
        _config_logger.warning(
            f"Invalid MAX_BATCH_SIZE '{batch_size}' (must be positive), defaulting to 1"
        )
        return 1
    if batch_size > MAX_NUKE_BATCH_SIZE:
        _config_logger.warning(
            f"MAX_BATCH_SIZE '{batch_size}' exceeds {MAX_NUKE_BATCH_SIZE}, "
            f"using {MAX_NUKE_BATCH_SIZE}"
        )
        return MAX_NUKE_BATCH_SIZE
    return batch_size


def load_rules_file(path: str) -> Dict[ResourceType, ResourceRule]:
    """Load per-resource-type name rules from a YAML (or JSON) file.

    Raises:
        ConfigurationError: If the file cannot be read, does not parse, or
            does not have the expected shape.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot load config file '{path}': {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file '{path}' must contain a mapping")

    return rules_from_dict(data)


def rules_from_dict(data: Dict[str, Any]) -> Dict[ResourceType, ResourceRule]:
    rules = {}
    for resource_type in ResourceType:
        section = data.get(resource_type.config_key)
        if section is not None:
            rules[resource_type] = ResourceRule.from_dict(section, resource_type.config_key)
    return rules


def configure_logging(config: Optional["NukerConfig"] = None) -> logging.Logger:
    """Configure logging based on LOG_LEVEL environment variable or config.

    Args:
        config: Optional NukerConfig instance. If not provided, reads from environment.

    Returns:
        Configured logger instance for the nuker.
    """
    if config is None:
        log_level_str = os.environ.get("LOG_LEVEL", "INFO").upper().strip()
        if log_level_str not in VALID_LOG_LEVELS:
            logging.warning(f"Invalid LOG_LEVEL '{log_level_str}', defaulting to INFO")
            log_level_str = "INFO"
    else:
        log_level_str = config.log_level

    log_level = getattr(logging, log_level_str, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )

    nuker_logger = logging.getLogger("nuker")
    nuker_logger.setLevel(log_level)

    return nuker_logger
