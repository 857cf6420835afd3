from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from quokka_step.api.schemas.pool_info import PoolReportResponse


class GenerateLiquidityConfigRequest(BaseModel):
    wallet_message: str = Field(
        ...,
        description="Free-text description of the wallet holdings, e.g. 'My wallet has 1200 TRUMP and 0.32 SOL.'",
    )
    pool_id: str | None = Field(None, description="Pool to configure; defaults to POOL_ID.")


class LiquidityConfigResponse(BaseModel):
    step_percentage: Decimal
    add_liquidity_amount: Decimal
    min_price: Decimal
    max_price: Decimal


class GenerateLiquidityConfigResponse(BaseModel):
    config: LiquidityConfigResponse
    message: str
    pool_report: PoolReportResponse
