from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from quokka_step.domain.exceptions import UpstreamClientError, UpstreamFetchError


T = TypeVar("T")
logger = logging.getLogger(__name__)


def is_retryable_error(exc: BaseException) -> bool:
    """Transport failures and 5xx responses are retryable; everything else is fatal."""
    if isinstance(exc, UpstreamClientError):
        return False
    if not isinstance(exc, UpstreamFetchError):
        return False
    status = exc.status_code
    if status is None:
        return True
    return 500 <= status < 600


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int
    delay_seconds: float
    is_retryable: Callable[[BaseException], bool] = is_retryable_error

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1.")
        if self.delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0.")


async def execute_with_retry(
    operation: Callable[[], Awaitable[T]],
    *,
    policy: RetryPolicy,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    label: str = "operation",
) -> T:
    for attempt in range(1, policy.max_attempts + 1):
        try:
            return await operation()
        except Exception as exc:
            if not policy.is_retryable(exc) or attempt == policy.max_attempts:
                raise
            logger.warning(
                "retry: %s attempt=%s/%s delay_seconds=%s error=%s",
                label,
                attempt,
                policy.max_attempts,
                policy.delay_seconds,
                exc,
            )
            await sleep(policy.delay_seconds)

    raise RuntimeError("execute_with_retry exhausted without result")  # pragma: no cover
