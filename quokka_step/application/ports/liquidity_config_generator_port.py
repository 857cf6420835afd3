from __future__ import annotations

from typing import Protocol

from quokka_step.domain.entities.liquidity_config import LiquidityConfig


class LiquidityConfigGeneratorPort(Protocol):
    async def generate(self, *, prompt: str) -> LiquidityConfig:
        ...
