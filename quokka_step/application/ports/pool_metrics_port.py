from __future__ import annotations

from typing import Protocol

from quokka_step.domain.entities.pool_metric import PoolMetric


class PoolMetricsPort(Protocol):
    async def fetch_pool_info(self, *, pool_id: str) -> PoolMetric:
        ...

    async def fetch_pool_dynamic_info(self, *, pool_id: str) -> PoolMetric:
        ...
