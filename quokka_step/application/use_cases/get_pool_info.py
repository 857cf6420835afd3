from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
import logging

from quokka_step.application.dto.pool_info import GetPoolInfoInput, PoolInfoSource
from quokka_step.application.ports.pool_metrics_cache_port import PoolMetricsCachePort
from quokka_step.application.ports.pool_metrics_port import PoolMetricsPort
from quokka_step.domain.entities.pool_metric import PoolMetric
from quokka_step.domain.exceptions import DomainError, PoolInfoInputError
from quokka_step.shared.retry import RetryPolicy, execute_with_retry


POOL_INFO_CACHE_TTL_SECONDS = 60.0
CACHE_KEY_PREFIXES: dict[str, str] = {
    "info": "pool-info-",
    "dynamic": "pool-dynamic-info-",
}
DEFAULT_RETRY_POLICIES: dict[str, RetryPolicy] = {
    "info": RetryPolicy(max_attempts=3, delay_seconds=1.5),
    "dynamic": RetryPolicy(max_attempts=3, delay_seconds=1.0),
}
logger = logging.getLogger(__name__)


def pool_info_cache_key(pool_id: str, source: PoolInfoSource = "info") -> str:
    return f"{CACHE_KEY_PREFIXES[source]}{pool_id}"


class GetPoolInfoUseCase:
    """Cache-fronted, retry-wrapped lookup of pool metrics.

    Concurrent misses on the same key share one in-flight fetch. Failures are
    never cached and propagate to every waiter.
    """

    def __init__(
        self,
        *,
        pool_metrics_port: PoolMetricsPort,
        cache: PoolMetricsCachePort,
        retry_policies: dict[str, RetryPolicy] | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._pool_metrics_port = pool_metrics_port
        self._cache = cache
        self._retry_policies = {**DEFAULT_RETRY_POLICIES, **(retry_policies or {})}
        self._sleep = sleep
        self._in_flight: dict[str, asyncio.Future[PoolMetric]] = {}

    async def execute(self, command: GetPoolInfoInput) -> PoolMetric:
        pool_id = (command.pool_id or "").strip()
        if not pool_id:
            raise PoolInfoInputError("pool_id is required.")
        if command.source not in CACHE_KEY_PREFIXES:
            raise PoolInfoInputError("source must be one of: info, dynamic.")

        key = pool_info_cache_key(pool_id, command.source)
        cached = self._cache.get(key)
        if cached is not None:
            logger.info("get_pool_info: cache_hit key=%s", key)
            return cached

        pending = self._in_flight.get(key)
        if pending is None:
            logger.info("get_pool_info: cache_miss key=%s", key)
            pending = asyncio.ensure_future(
                self._fetch_and_store(key=key, pool_id=pool_id, source=command.source)
            )
            self._in_flight[key] = pending
            pending.add_done_callback(lambda task: self._release(key, task))
        else:
            logger.info("get_pool_info: join_in_flight key=%s", key)

        return await asyncio.shield(pending)

    async def _fetch_and_store(self, *, key: str, pool_id: str, source: PoolInfoSource) -> PoolMetric:
        if source == "dynamic":
            fetch = self._pool_metrics_port.fetch_pool_dynamic_info
        else:
            fetch = self._pool_metrics_port.fetch_pool_info

        try:
            metric = await execute_with_retry(
                lambda: fetch(pool_id=pool_id),
                policy=self._retry_policies[source],
                sleep=self._sleep,
                label=f"get_pool_info source={source} pool_id={pool_id}",
            )
        except DomainError as exc:
            logger.error(
                "get_pool_info: fetch_failed pool_id=%s source=%s code=%s error=%s",
                pool_id,
                source,
                exc.code,
                exc,
            )
            raise

        self._cache.set(key, metric, POOL_INFO_CACHE_TTL_SECONDS)
        return metric

    def _release(self, key: str, task: asyncio.Future[PoolMetric]) -> None:
        if self._in_flight.get(key) is task:
            del self._in_flight[key]
        if not task.cancelled():
            # Marks the exception as retrieved when every waiter was cancelled.
            task.exception()
