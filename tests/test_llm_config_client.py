from __future__ import annotations

from decimal import Decimal
import json

import httpx
import pytest

from quokka_step.domain.exceptions import LiquidityConfigGenerationError
from quokka_step.infrastructure.clients.llm_config_client import (
    LlmClientSettings,
    OpenAiLiquidityConfigGenerator,
    extract_json_object,
)


def _make_generator(handler, *, api_key: str = "sk-test", sleep=None) -> OpenAiLiquidityConfigGenerator:
    kwargs = {"sleep": sleep} if sleep is not None else {}
    return OpenAiLiquidityConfigGenerator(
        LlmClientSettings(
            api_base="http://llm.test/v1/",
            api_key=api_key,
            model="test-model",
            timeout_seconds=5,
        ),
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


def _completion(content: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


@pytest.mark.asyncio
async def test_generate_posts_prompt_and_parses_fenced_json():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json=_completion(
                'Here you go:\n```json\n{"stepPercentage": 5, "addLiquidityAmount": 60, '
                '"minPrice": 0.21, "maxPrice": 0.32}\n```'
            ),
        )

    config = await _make_generator(handler).generate(prompt="pool + wallet")

    assert config.step_percentage == Decimal("5")
    assert config.add_liquidity_amount == Decimal("60")
    assert config.min_price == Decimal("0.21")
    assert config.max_price == Decimal("0.32")

    request = seen[0]
    assert str(request.url) == "http://llm.test/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer sk-test"
    body = json.loads(request.content)
    assert body["model"] == "test-model"
    assert body["messages"][-1] == {"role": "user", "content": "pool + wallet"}


@pytest.mark.asyncio
async def test_missing_api_key_fails_without_request():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_completion("{}"))

    with pytest.raises(LiquidityConfigGenerationError, match="LLM_API_KEY"):
        await _make_generator(handler, api_key="").generate(prompt="p")

    assert seen == []


@pytest.mark.asyncio
async def test_server_errors_are_retried_then_reported(recording_sleep):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(500)

    with pytest.raises(LiquidityConfigGenerationError):
        await _make_generator(handler, sleep=recording_sleep).generate(prompt="p")

    assert len(seen) == 2
    assert recording_sleep.delays == [1.0]


@pytest.mark.asyncio
async def test_schema_mismatch_is_a_generation_error():
    handler = lambda request: httpx.Response(  # noqa: E731
        200,
        json=_completion('{"stepPercentage": null, "addLiquidityAmount": 5, "minPrice": 1, "maxPrice": 2}'),
    )

    with pytest.raises(LiquidityConfigGenerationError, match="schema"):
        await _make_generator(handler).generate(prompt="p")


@pytest.mark.asyncio
async def test_empty_choices_is_a_generation_error():
    handler = lambda request: httpx.Response(200, json={"choices": []})  # noqa: E731

    with pytest.raises(LiquidityConfigGenerationError, match="no choices"):
        await _make_generator(handler).generate(prompt="p")


def test_extract_json_object_accepts_bare_object():
    assert extract_json_object('{"a": 1}') == {"a": 1}


@pytest.mark.parametrize("content", ["no json here", "```json\n[1, 2]\n```", "{not json}"])
def test_extract_json_object_rejects_unusable_content(content):
    with pytest.raises(LiquidityConfigGenerationError):
        extract_json_object(content)
