from __future__ import annotations

from dataclasses import dataclass

from quokka_step.application.dto.pool_info import GetPoolReportOutput
from quokka_step.domain.entities.liquidity_config import LiquidityConfig


@dataclass(frozen=True)
class GenerateLiquidityConfigInput:
    wallet_message: str
    pool_id: str | None = None


@dataclass(frozen=True)
class GenerateLiquidityConfigOutput:
    config: LiquidityConfig
    message: str
    pool_report: GetPoolReportOutput
