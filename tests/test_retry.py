from __future__ import annotations

import pytest

from quokka_step.domain.exceptions import (
    PoolMetricValidationError,
    UpstreamClientError,
    UpstreamNetworkError,
)
from quokka_step.shared.retry import RetryPolicy, execute_with_retry, is_retryable_error


class ScriptedOperation:
    def __init__(self, outcomes: list):
        self._outcomes = outcomes
        self.calls = 0

    async def __call__(self):
        outcome = self._outcomes[min(self.calls, len(self._outcomes) - 1)]
        self.calls += 1
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.mark.asyncio
@pytest.mark.parametrize("attempts", [1, 2, 3, 5])
async def test_persistent_retryable_failure_runs_exactly_max_attempts(attempts, recording_sleep):
    errors = [UpstreamNetworkError(f"boom-{idx}") for idx in range(attempts)]
    operation = ScriptedOperation(errors)

    with pytest.raises(UpstreamNetworkError) as exc_info:
        await execute_with_retry(
            operation,
            policy=RetryPolicy(max_attempts=attempts, delay_seconds=1.5),
            sleep=recording_sleep,
        )

    assert operation.calls == attempts
    assert exc_info.value is errors[-1]
    assert recording_sleep.delays == [1.5] * (attempts - 1)


@pytest.mark.asyncio
async def test_returns_first_success_after_transient_failures(recording_sleep):
    operation = ScriptedOperation(
        [
            UpstreamNetworkError("down", status_code=503),
            UpstreamNetworkError("reset"),
            "ok",
        ]
    )

    result = await execute_with_retry(
        operation,
        policy=RetryPolicy(max_attempts=3, delay_seconds=1.0),
        sleep=recording_sleep,
    )

    assert result == "ok"
    assert operation.calls == 3
    assert recording_sleep.delays == [1.0, 1.0]


@pytest.mark.asyncio
async def test_404_short_circuits_after_one_attempt(recording_sleep):
    operation = ScriptedOperation([UpstreamClientError("not found", status_code=404), "unreachable"])

    with pytest.raises(UpstreamClientError):
        await execute_with_retry(
            operation,
            policy=RetryPolicy(max_attempts=5, delay_seconds=1.5),
            sleep=recording_sleep,
        )

    assert operation.calls == 1
    assert recording_sleep.delays == []


@pytest.mark.asyncio
async def test_validation_error_is_fatal(recording_sleep):
    operation = ScriptedOperation([PoolMetricValidationError("missing price")])

    with pytest.raises(PoolMetricValidationError):
        await execute_with_retry(
            operation,
            policy=RetryPolicy(max_attempts=3, delay_seconds=0),
            sleep=recording_sleep,
        )

    assert operation.calls == 1


@pytest.mark.asyncio
async def test_custom_classifier_controls_retry(recording_sleep):
    operation = ScriptedOperation([ValueError("bad json"), "ok"])

    result = await execute_with_retry(
        operation,
        policy=RetryPolicy(max_attempts=2, delay_seconds=0, is_retryable=lambda exc: True),
        sleep=recording_sleep,
    )

    assert result == "ok"
    assert operation.calls == 2


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (UpstreamNetworkError("transport"), True),
        (UpstreamNetworkError("server", status_code=500), True),
        (UpstreamNetworkError("gateway", status_code=599), True),
        (UpstreamNetworkError("odd", status_code=600), False),
        (UpstreamClientError("not found", status_code=404), False),
        (UpstreamClientError("malformed body"), False),
        (PoolMetricValidationError("missing"), False),
        (ValueError("other"), False),
    ],
)
def test_is_retryable_error_classification(error, expected):
    assert is_retryable_error(error) is expected


def test_retry_policy_rejects_invalid_bounds():
    with pytest.raises(ValueError):
        RetryPolicy(max_attempts=0, delay_seconds=1)
    with pytest.raises(ValueError):
        RetryPolicy(max_attempts=1, delay_seconds=-1)
