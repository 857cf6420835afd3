from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager, suppress
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quokka_step.api.deps import get_pool_metrics_cache
from quokka_step.api.routers.liquidity_config import router as liquidity_config_router
from quokka_step.api.routers.pool_info import router as pool_info_router
from quokka_step.infrastructure.cache.ttl_cache import run_periodic_sweep
from quokka_step.shared.config import get_settings
from quokka_step.shared.logging import setup_logging


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    settings = get_settings()
    sweeper = asyncio.create_task(
        run_periodic_sweep(get_pool_metrics_cache(), settings.pool_info_cache_sweep_seconds)
    )
    logger.info(
        "main: started base_url=%s pool_info_path=%s default_pool_id=%s",
        settings.base_url,
        settings.pool_info_path,
        settings.default_pool_id,
    )
    try:
        yield
    finally:
        sweeper.cancel()
        with suppress(asyncio.CancelledError):
            await sweeper


setup_logging(get_settings().log_level)

app = FastAPI(title="Quokka Step API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(pool_info_router)
app.include_router(liquidity_config_router)
