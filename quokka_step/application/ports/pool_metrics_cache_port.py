from __future__ import annotations

from typing import Protocol

from quokka_step.domain.entities.pool_metric import PoolMetric


class PoolMetricsCachePort(Protocol):
    def get(self, key: str) -> PoolMetric | None:
        ...

    def set(self, key: str, value: PoolMetric, ttl_seconds: float | None = None) -> None:
        ...
