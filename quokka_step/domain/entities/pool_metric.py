from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class TokenInfo:
    symbol: str
    mint: str
    decimals: int | None = None


@dataclass(frozen=True)
class PoolWindowStats:
    volume: Decimal | None = None
    volume_fee: Decimal | None = None
    apr: Decimal | None = None
    price_min: Decimal | None = None
    price_max: Decimal | None = None


@dataclass(frozen=True)
class PoolMetric:
    pool_id: str
    token_a: TokenInfo
    token_b: TokenInfo
    price: Decimal
    mint_amount_a: Decimal | None = None
    mint_amount_b: Decimal | None = None
    fee_rate: Decimal | None = None
    tvl: Decimal | None = None
    stats_24h: PoolWindowStats = PoolWindowStats()
    stats_7d: PoolWindowStats = PoolWindowStats()
    stats_30d: PoolWindowStats = PoolWindowStats()

    def windows(self) -> tuple[tuple[str, PoolWindowStats], ...]:
        return (
            ("24h", self.stats_24h),
            ("7d", self.stats_7d),
            ("30d", self.stats_30d),
        )
