"""AWS client management for CodeCommit Nuker."""

import logging
import random
import time
from collections.abc import Callable
from typing import Any, TypeVar

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryStrategy:
    """Retries throttled CodeCommit calls with exponential backoff and jitter."""

    RETRYABLE_ERROR_CODES = frozenset(
        {
            "Throttling",
            "ThrottlingException",
            "TooManyRequestsException",
            "RequestLimitExceeded",
            "ServiceUnavailable",
            "InternalError",
            "RequestTimeout",
        }
    )

    def __init__(
        self,
        max_retries: int = 3,
        base_delay: float = 1.0,
        max_delay: float = 30.0,
        jitter: bool = True,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.jitter = jitter
        self._sleep = sleep

    def call(self, operation: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Invoke operation, retrying retryable ClientErrors.

        Non-retryable errors, and the last retryable one once attempts are
        exhausted, propagate unchanged.
        """
        attempt = 0
        while True:
            try:
                return operation(*args, **kwargs)
            except ClientError as e:
                error_code = e.response.get("Error", {}).get("Code", "")
                if not self.is_retryable(error_code) or attempt >= self.max_retries:
                    raise
                delay = self.delay_for(attempt)
                logger.warning(
                    f"Retryable error {error_code}, attempt {attempt + 1}/{self.max_retries + 1}, "
                    f"waiting {delay:.2f}s"
                )
                self._sleep(delay)
                attempt += 1

    def is_retryable(self, error_code: str) -> bool:
        return error_code in self.RETRYABLE_ERROR_CODES

    def delay_for(self, attempt: int) -> float:
        """Backoff delay before the retry following ``attempt``."""
        delay: float = min(self.base_delay * (2**attempt), self.max_delay)
        if self.jitter:
            delay *= 0.5 + random.random() * 0.5
        return delay


class AWSClientManager:
    """Creates region-bound boto3 clients, optionally under an assumed role."""

    def __init__(
        self,
        region: str = "us-east-1",
        role_arn: str | None = None,
    ):
        self.region = region
        self.role_arn = role_arn
        self._session: boto3.Session | None = None
        self._clients: dict[str, Any] = {}

    def _get_session(self) -> boto3.Session:
        if self._session is not None:
            return self._session

        if self.role_arn:
            sts_client = boto3.client("sts", region_name=self.region)
            response = sts_client.assume_role(
                RoleArn=self.role_arn,
                RoleSessionName="CodeCommitNuker",
                DurationSeconds=3600,
            )
            credentials = response["Credentials"]
            self._session = boto3.Session(
                aws_access_key_id=credentials["AccessKeyId"],
                aws_secret_access_key=credentials["SecretAccessKey"],
                aws_session_token=credentials["SessionToken"],
                region_name=self.region,
            )
        else:
            self._session = boto3.Session(region_name=self.region)

        return self._session

    def get_client(self, service_name: str) -> Any:
        """Get (and cache) a boto3 client for the configured region."""
        if service_name not in self._clients:
            session = self._get_session()
            # RetryStrategy owns retries
            config = Config(retries={"max_attempts": 0})
            self._clients[service_name] = session.client(
                service_name,
                config=config,
                region_name=self.region,  # type: ignore[call-overload]
            )
        return self._clients[service_name]

    @property
    def codecommit(self) -> Any:
        """Get CodeCommit client."""
        return self.get_client("codecommit")

