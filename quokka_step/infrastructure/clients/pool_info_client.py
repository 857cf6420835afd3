from __future__ import annotations

from dataclasses import dataclass
import logging

import httpx

from quokka_step.application.ports.pool_metrics_port import PoolMetricsPort
from quokka_step.domain.entities.pool_metric import PoolMetric
from quokka_step.infrastructure.clients.http import request_json
from quokka_step.infrastructure.mappers.pool_metric_mapper import map_envelope_to_pool_metric


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PoolInfoClientSettings:
    base_url: str
    pool_info_path: str
    dynamic_info_url: str
    timeout_seconds: float


class PoolInfoClient(PoolMetricsPort):
    def __init__(
        self,
        settings: PoolInfoClientSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport

    @property
    def pool_info_url(self) -> str:
        base = self._settings.base_url.rstrip("/")
        path = self._settings.pool_info_path.strip("/")
        return f"{base}/{path}"

    @property
    def dynamic_info_url(self) -> str:
        return self._settings.dynamic_info_url.rstrip("/")

    async def fetch_pool_info(self, *, pool_id: str) -> PoolMetric:
        return await self._fetch(url=self.pool_info_url, pool_id=pool_id)

    async def fetch_pool_dynamic_info(self, *, pool_id: str) -> PoolMetric:
        return await self._fetch(url=self.dynamic_info_url, pool_id=pool_id)

    async def _fetch(self, *, url: str, pool_id: str) -> PoolMetric:
        logger.info("pool_info_client: request url=%s pool_id=%s", url, pool_id)
        body = await request_json(
            "GET",
            url,
            timeout_seconds=self._settings.timeout_seconds,
            transport=self._transport,
            params={"poolId": pool_id},
        )
        return map_envelope_to_pool_metric(body)
