from __future__ import annotations

from decimal import Decimal

from quokka_step.domain.entities.pool_metric import PoolMetric
from quokka_step.domain.exceptions import PoolMetricValidationError


def validate_pool_metric(metric: PoolMetric) -> PoolMetric:
    if not metric.pool_id:
        raise PoolMetricValidationError("poolId must not be empty.")
    if metric.price <= 0:
        raise PoolMetricValidationError("price must be positive.")
    if metric.fee_rate is not None and not (Decimal("0") <= metric.fee_rate <= Decimal("1")):
        raise PoolMetricValidationError("feeRate must be within [0, 1].")
    if metric.tvl is not None and metric.tvl < 0:
        raise PoolMetricValidationError("tvl must be non-negative.")
    for label, stats in metric.windows():
        if stats.price_min is None or stats.price_max is None:
            continue
        if stats.price_min > stats.price_max:
            raise PoolMetricValidationError(
                f"priceMin{label} must not exceed priceMax{label}."
            )
    return metric
