from __future__ import annotations

from decimal import Decimal, localcontext

from quokka_step.domain.entities.pool_metric import PoolMetric, PoolWindowStats


POOL_REPORT_UNAVAILABLE = "Unable to fetch pool dynamic information."
MISSING_VALUE = "n/a"


def format_decimal(value: Decimal | None) -> str:
    if value is None:
        return MISSING_VALUE
    with localcontext() as ctx:
        # Raw on-chain reserves can exceed the default 28 significant digits.
        ctx.prec = max(ctx.prec, len(value.as_tuple().digits))
        normalized = value.normalize()
    if normalized == 0:
        return "0"
    return format(normalized, "f")


def _usd(value: Decimal | None) -> str:
    if value is None:
        return MISSING_VALUE
    return f"${format_decimal(value)}"


def _pct(value: Decimal | None) -> str:
    if value is None:
        return MISSING_VALUE
    return f"{format_decimal(value)}%"


def _fee_rate_pct(fee_rate: Decimal | None) -> str:
    if fee_rate is None:
        return MISSING_VALUE
    return _pct(fee_rate * Decimal("100"))


def _format_window(label: str, stats: PoolWindowStats) -> str:
    return "\n".join(
        [
            f"{label} Stats:",
            f"- Volume: {_usd(stats.volume)}",
            f"- Volume Fee: {_usd(stats.volume_fee)}",
            f"- APR: {_pct(stats.apr)}",
            f"- Price Range: {_usd(stats.price_min)} ~ {_usd(stats.price_max)}",
        ]
    )


def format_pool_info(metric: PoolMetric) -> str:
    header = "\n".join(
        [
            "Pool Info:",
            f"- Pool ID: {metric.pool_id}",
            f"- Token A: {metric.token_a.symbol} ({metric.token_a.mint})",
            f"- Token B: {metric.token_b.symbol} ({metric.token_b.mint})",
            f"- Current Price: {_usd(metric.price)}",
            f"- Mint Amount A: {format_decimal(metric.mint_amount_a)}",
            f"- Mint Amount B: {format_decimal(metric.mint_amount_b)}",
            f"- Fee Rate: {_fee_rate_pct(metric.fee_rate)}",
            f"- TVL: {_usd(metric.tvl)}",
        ]
    )
    sections = [header]
    sections.extend(_format_window(label, stats) for label, stats in metric.windows())
    return "\n\n".join(sections)
