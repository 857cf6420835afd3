from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class LiquidityConfig:
    step_percentage: Decimal
    add_liquidity_amount: Decimal
    min_price: Decimal
    max_price: Decimal
