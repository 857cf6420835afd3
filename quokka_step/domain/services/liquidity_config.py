from __future__ import annotations

from quokka_step.domain.entities.liquidity_config import LiquidityConfig
from quokka_step.domain.exceptions import LiquidityConfigGenerationError
from quokka_step.domain.services.pool_report import format_decimal


def validate_liquidity_config(config: LiquidityConfig) -> LiquidityConfig:
    if config.step_percentage <= 0:
        raise LiquidityConfigGenerationError("stepPercentage must be > 0.")
    if config.add_liquidity_amount < 0:
        raise LiquidityConfigGenerationError("addLiquidityAmount must be >= 0.")
    if config.min_price < 0:
        raise LiquidityConfigGenerationError("minPrice must be >= 0.")
    if config.min_price > config.max_price:
        raise LiquidityConfigGenerationError("minPrice must not exceed maxPrice.")
    return config


def render_liquidity_config_message(config: LiquidityConfig) -> str:
    return (
        "Configuration generated for Raydium CLMM pool.\n\n"
        f"Step Percentage: {format_decimal(config.step_percentage)}%\n"
        f"Liquidity Amount: {format_decimal(config.add_liquidity_amount)}\n"
        f"Min Price: {format_decimal(config.min_price)}\n"
        f"Max Price: {format_decimal(config.max_price)}"
    )
