from __future__ import annotations

from functools import lru_cache

from quokka_step.application.use_cases.generate_liquidity_config import GenerateLiquidityConfigUseCase
from quokka_step.application.use_cases.get_pool_info import (
    POOL_INFO_CACHE_TTL_SECONDS,
    GetPoolInfoUseCase,
)
from quokka_step.application.use_cases.get_pool_report import GetPoolReportUseCase
from quokka_step.infrastructure.cache.ttl_cache import TTLCache
from quokka_step.infrastructure.clients.llm_config_client import (
    LlmClientSettings,
    OpenAiLiquidityConfigGenerator,
)
from quokka_step.infrastructure.clients.pool_info_client import (
    PoolInfoClient,
    PoolInfoClientSettings,
)
from quokka_step.shared.config import get_settings


@lru_cache(maxsize=1)
def get_pool_metrics_cache() -> TTLCache:
    return TTLCache(POOL_INFO_CACHE_TTL_SECONDS)


@lru_cache(maxsize=1)
def _get_pool_info_client() -> PoolInfoClient:
    settings = get_settings()
    return PoolInfoClient(
        PoolInfoClientSettings(
            base_url=settings.base_url,
            pool_info_path=settings.pool_info_path,
            dynamic_info_url=settings.pool_dynamic_info_url,
            timeout_seconds=settings.pool_info_timeout_seconds,
        )
    )


@lru_cache(maxsize=1)
def _get_liquidity_config_generator() -> OpenAiLiquidityConfigGenerator:
    settings = get_settings()
    return OpenAiLiquidityConfigGenerator(
        LlmClientSettings(
            api_base=settings.llm_api_base,
            api_key=settings.llm_api_key,
            model=settings.llm_model,
            timeout_seconds=settings.llm_timeout_seconds,
        )
    )


@lru_cache(maxsize=1)
def get_pool_info_use_case() -> GetPoolInfoUseCase:
    return GetPoolInfoUseCase(
        pool_metrics_port=_get_pool_info_client(),
        cache=get_pool_metrics_cache(),
    )


def get_pool_report_use_case() -> GetPoolReportUseCase:
    return GetPoolReportUseCase(
        get_pool_info_use_case=get_pool_info_use_case(),
        default_pool_id=get_settings().default_pool_id,
    )


def get_generate_liquidity_config_use_case() -> GenerateLiquidityConfigUseCase:
    return GenerateLiquidityConfigUseCase(
        get_pool_report_use_case=get_pool_report_use_case(),
        generator_port=_get_liquidity_config_generator(),
    )
