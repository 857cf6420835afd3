from __future__ import annotations

from decimal import Decimal

import pytest

from quokka_step.domain.exceptions import PoolMetricValidationError
from quokka_step.infrastructure.mappers.pool_metric_mapper import map_envelope_to_pool_metric


def test_maps_flat_payload_into_windows(pool_payload):
    metric = map_envelope_to_pool_metric({"data": pool_payload})

    assert metric.pool_id == "P1"
    assert metric.token_a.symbol == "A"
    assert metric.token_a.mint == "mA"
    assert metric.token_b.decimals == 6
    assert metric.price == Decimal("1.5")
    assert metric.fee_rate == Decimal("0.0025")
    assert metric.stats_24h.volume == Decimal("50000")
    assert metric.stats_7d.apr == Decimal("10.5")
    assert metric.stats_30d.price_max == Decimal("2.1")


def test_optional_fields_default_to_none():
    metric = map_envelope_to_pool_metric(
        {
            "data": {
                "poolId": "P1",
                "tokenA": {"symbol": "A", "mint": "mA"},
                "tokenB": {"symbol": "B", "mint": "mB"},
                "price": "2.5",
            }
        }
    )

    assert metric.price == Decimal("2.5")
    assert metric.token_a.decimals is None
    assert metric.tvl is None
    assert metric.stats_24h.volume is None


def test_missing_data_field_is_a_validation_error():
    with pytest.raises(PoolMetricValidationError, match="missing 'data'"):
        map_envelope_to_pool_metric({"result": {}})


def test_missing_price_is_a_validation_error():
    with pytest.raises(PoolMetricValidationError, match="poolId, tokenB, price"):
        map_envelope_to_pool_metric({"data": {"tokenA": {"symbol": "A", "mint": "mA"}}})


@pytest.mark.parametrize(
    "overrides",
    [
        {"price": 0},
        {"price": -1},
        {"price": "abc"},
        {"feeRate": 1.5},
        {"tvl": -10},
        {"priceMin7d": 3, "priceMax7d": 2},
        {"tokenA": "A"},
        {"tokenB": {"symbol": "B"}},
        {"tokenA": {"symbol": "A", "mint": "mA", "decimals": "9"}},
        {"volume24h": True},
    ],
)
def test_invalid_values_are_validation_errors(pool_payload, overrides):
    pool_payload.update(overrides)

    with pytest.raises(PoolMetricValidationError):
        map_envelope_to_pool_metric({"data": pool_payload})
