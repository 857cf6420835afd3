from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from quokka_step.domain.entities.pool_metric import PoolMetric, PoolWindowStats, TokenInfo


class TokenInfoResponse(BaseModel):
    symbol: str
    mint: str
    decimals: int | None = None


class PoolWindowStatsResponse(BaseModel):
    volume: Decimal | None = None
    volume_fee: Decimal | None = None
    apr: Decimal | None = Field(None, description="APR in percent.")
    price_min: Decimal | None = None
    price_max: Decimal | None = None


class PoolMetricResponse(BaseModel):
    pool_id: str
    token_a: TokenInfoResponse
    token_b: TokenInfoResponse
    price: Decimal
    mint_amount_a: Decimal | None = None
    mint_amount_b: Decimal | None = None
    fee_rate: Decimal | None = Field(None, description="Fee rate as a fraction in [0, 1].")
    tvl: Decimal | None = None
    stats_24h: PoolWindowStatsResponse
    stats_7d: PoolWindowStatsResponse
    stats_30d: PoolWindowStatsResponse

    @classmethod
    def from_entity(cls, metric: PoolMetric) -> "PoolMetricResponse":
        return cls(
            pool_id=metric.pool_id,
            token_a=_token(metric.token_a),
            token_b=_token(metric.token_b),
            price=metric.price,
            mint_amount_a=metric.mint_amount_a,
            mint_amount_b=metric.mint_amount_b,
            fee_rate=metric.fee_rate,
            tvl=metric.tvl,
            stats_24h=_window(metric.stats_24h),
            stats_7d=_window(metric.stats_7d),
            stats_30d=_window(metric.stats_30d),
        )


class PoolReportResponse(BaseModel):
    pool_id: str
    available: bool
    report: str
    error_code: str | None = Field(None, description="Failure reason when the report is unavailable.")


def _token(token: TokenInfo) -> TokenInfoResponse:
    return TokenInfoResponse(symbol=token.symbol, mint=token.mint, decimals=token.decimals)


def _window(stats: PoolWindowStats) -> PoolWindowStatsResponse:
    return PoolWindowStatsResponse(
        volume=stats.volume,
        volume_fee=stats.volume_fee,
        apr=stats.apr,
        price_min=stats.price_min,
        price_max=stats.price_max,
    )
