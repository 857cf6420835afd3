from __future__ import annotations

import pytest


class FakeClock:
    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingSleep:
    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def make_pool_payload(**overrides) -> dict:
    payload = {
        "poolId": "P1",
        "tokenA": {"symbol": "A", "mint": "mA", "decimals": 9},
        "tokenB": {"symbol": "B", "mint": "mB", "decimals": 6},
        "price": 1.5,
        "mintAmountA": 1000,
        "mintAmountB": 1500.25,
        "feeRate": 0.0025,
        "tvl": 3000.75,
        "volume24h": 50000,
        "volumeFee24h": 125,
        "apr24h": 12.34,
        "priceMin24h": 1.2,
        "priceMax24h": 1.8,
        "volume7d": 350000,
        "volumeFee7d": 875,
        "apr7d": 10.5,
        "priceMin7d": 1.1,
        "priceMax7d": 1.9,
        "volume30d": 1500000,
        "volumeFee30d": 3750,
        "apr30d": 9.75,
        "priceMin30d": 0.9,
        "priceMax30d": 2.1,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def pool_payload() -> dict:
    return make_pool_payload()
