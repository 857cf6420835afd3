from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


DEFAULT_POOL_ID = "GQsPr4RJk9AZkkfWHud7v4MtotcxhaYzZHdsPCg9vNvW"
DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_POOL_INFO_PATH = "pool-monitoring/info"
DEFAULT_DYNAMIC_INFO_PATH = "pool-monitoring/dynamic-info"


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _first_env(*names: str, default: str) -> str:
    for name in names:
        value = _env(name)
        if value:
            return value
    return default


@dataclass(frozen=True)
class Settings:
    base_url: str
    pool_info_path: str
    pool_dynamic_info_url: str
    default_pool_id: str
    pool_info_timeout_seconds: float
    pool_info_cache_sweep_seconds: float
    llm_api_base: str
    llm_api_key: str
    llm_model: str
    llm_timeout_seconds: float
    log_level: str


def get_settings() -> Settings:
    base_url = _first_env("BASE_URL", "QUOKKA_STEP_BASE_URL", default=DEFAULT_BASE_URL).rstrip("/")
    return Settings(
        base_url=base_url,
        pool_info_path=_first_env(
            "POOL_INFO_PATH",
            "QUOKKA_STEP_POOL_INFO",
            default=DEFAULT_POOL_INFO_PATH,
        ).strip("/"),
        pool_dynamic_info_url=_first_env(
            "POOL_DYNAMIC_INFO_URL",
            default=f"{base_url}/{DEFAULT_DYNAMIC_INFO_PATH}",
        ),
        default_pool_id=_first_env("POOL_ID", default=DEFAULT_POOL_ID),
        pool_info_timeout_seconds=float(_env("POOL_INFO_TIMEOUT_SECONDS", "10")),
        pool_info_cache_sweep_seconds=float(_env("POOL_INFO_CACHE_SWEEP_SECONDS", "60")),
        llm_api_base=_env("LLM_API_BASE", "https://api.openai.com/v1"),
        llm_api_key=_env("LLM_API_KEY", ""),
        llm_model=_env("LLM_MODEL", "gpt-4o-mini"),
        llm_timeout_seconds=float(_env("LLM_TIMEOUT_SECONDS", "30")),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )
