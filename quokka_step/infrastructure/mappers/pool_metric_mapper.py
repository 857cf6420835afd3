from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from quokka_step.domain.entities.pool_metric import PoolMetric, PoolWindowStats, TokenInfo
from quokka_step.domain.exceptions import PoolMetricValidationError
from quokka_step.domain.services.decimals import to_decimal, to_decimal_or_none
from quokka_step.domain.services.pool_metric import validate_pool_metric


REQUIRED_POOL_FIELDS = ("poolId", "tokenA", "tokenB", "price")


def map_envelope_to_pool_metric(body: Mapping[str, Any]) -> PoolMetric:
    data = body.get("data")
    if data is None:
        raise PoolMetricValidationError("Invalid response format: missing 'data' field.")
    if not isinstance(data, Mapping):
        raise PoolMetricValidationError("Invalid response format: 'data' must be an object.")
    return map_payload_to_pool_metric(data)


def map_payload_to_pool_metric(data: Mapping[str, Any]) -> PoolMetric:
    missing = [field for field in REQUIRED_POOL_FIELDS if data.get(field) in (None, "")]
    if missing:
        raise PoolMetricValidationError(
            f"Invalid pool data: missing required fields: {', '.join(missing)}."
        )

    try:
        metric = PoolMetric(
            pool_id=str(data["poolId"]),
            token_a=_map_token(data["tokenA"], field_name="tokenA"),
            token_b=_map_token(data["tokenB"], field_name="tokenB"),
            price=to_decimal(data["price"], field_name="price"),
            mint_amount_a=to_decimal_or_none(data.get("mintAmountA"), field_name="mintAmountA"),
            mint_amount_b=to_decimal_or_none(data.get("mintAmountB"), field_name="mintAmountB"),
            fee_rate=to_decimal_or_none(data.get("feeRate"), field_name="feeRate"),
            tvl=to_decimal_or_none(data.get("tvl"), field_name="tvl"),
            stats_24h=_map_window(data, "24h"),
            stats_7d=_map_window(data, "7d"),
            stats_30d=_map_window(data, "30d"),
        )
    except ValueError as exc:
        raise PoolMetricValidationError(f"Invalid pool data: {exc}") from exc

    return validate_pool_metric(metric)


def _map_token(raw: Any, *, field_name: str) -> TokenInfo:
    if not isinstance(raw, Mapping):
        raise ValueError(f"{field_name} must be an object.")
    symbol = raw.get("symbol")
    mint = raw.get("mint")
    if not symbol or not mint:
        raise ValueError(f"{field_name} requires symbol and mint.")
    decimals = raw.get("decimals")
    if decimals is not None and (isinstance(decimals, bool) or not isinstance(decimals, int)):
        raise ValueError(f"{field_name}.decimals must be an integer.")
    return TokenInfo(symbol=str(symbol), mint=str(mint), decimals=decimals)


def _map_window(data: Mapping[str, Any], window: str) -> PoolWindowStats:
    return PoolWindowStats(
        volume=to_decimal_or_none(data.get(f"volume{window}"), field_name=f"volume{window}"),
        volume_fee=to_decimal_or_none(data.get(f"volumeFee{window}"), field_name=f"volumeFee{window}"),
        apr=to_decimal_or_none(data.get(f"apr{window}"), field_name=f"apr{window}"),
        price_min=to_decimal_or_none(data.get(f"priceMin{window}"), field_name=f"priceMin{window}"),
        price_max=to_decimal_or_none(data.get(f"priceMax{window}"), field_name=f"priceMax{window}"),
    )
