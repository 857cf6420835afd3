from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
import json
import logging
import re
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from quokka_step.application.ports.liquidity_config_generator_port import LiquidityConfigGeneratorPort
from quokka_step.domain.entities.liquidity_config import LiquidityConfig
from quokka_step.domain.exceptions import LiquidityConfigGenerationError, UpstreamFetchError
from quokka_step.domain.services.decimals import to_decimal
from quokka_step.infrastructure.clients.http import request_json
from quokka_step.shared.retry import RetryPolicy, execute_with_retry


LLM_RETRY_POLICY = RetryPolicy(max_attempts=2, delay_seconds=1.0)
SYSTEM_MESSAGE = "You generate liquidity configurations and answer with a single JSON object."
FENCED_JSON_PATTERN = re.compile(r"```(?:json)?\s*(\{.*?\})\s*```", re.DOTALL)
logger = logging.getLogger(__name__)


class LiquidityConfigPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    step_percentage: float = Field(..., alias="stepPercentage", allow_inf_nan=False)
    add_liquidity_amount: float = Field(..., alias="addLiquidityAmount", allow_inf_nan=False)
    min_price: float = Field(..., alias="minPrice", allow_inf_nan=False)
    max_price: float = Field(..., alias="maxPrice", allow_inf_nan=False)


@dataclass(frozen=True)
class LlmClientSettings:
    api_base: str
    api_key: str
    model: str
    timeout_seconds: float
    temperature: float = 0.2


def extract_json_object(content: str) -> dict[str, Any]:
    match = FENCED_JSON_PATTERN.search(content)
    if match:
        candidate = match.group(1)
    else:
        start = content.find("{")
        end = content.rfind("}")
        if start == -1 or end <= start:
            raise LiquidityConfigGenerationError("Model response does not contain a JSON object.")
        candidate = content[start : end + 1]

    try:
        parsed = json.loads(candidate)
    except ValueError as exc:
        raise LiquidityConfigGenerationError("Model response JSON could not be decoded.") from exc
    if not isinstance(parsed, dict):
        raise LiquidityConfigGenerationError("Model response JSON must be an object.")
    return parsed


def map_payload_to_liquidity_config(payload: dict[str, Any]) -> LiquidityConfig:
    try:
        parsed = LiquidityConfigPayload.model_validate(payload)
    except ValidationError as exc:
        raise LiquidityConfigGenerationError(f"Model response does not match the config schema: {exc}") from exc
    return LiquidityConfig(
        step_percentage=to_decimal(parsed.step_percentage, field_name="stepPercentage"),
        add_liquidity_amount=to_decimal(parsed.add_liquidity_amount, field_name="addLiquidityAmount"),
        min_price=to_decimal(parsed.min_price, field_name="minPrice"),
        max_price=to_decimal(parsed.max_price, field_name="maxPrice"),
    )


class OpenAiLiquidityConfigGenerator(LiquidityConfigGeneratorPort):
    """Structured generation through an OpenAI-compatible chat completions endpoint."""

    def __init__(
        self,
        settings: LlmClientSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        retry_policy: RetryPolicy = LLM_RETRY_POLICY,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._settings = settings
        self._transport = transport
        self._retry_policy = retry_policy
        self._sleep = sleep

    async def generate(self, *, prompt: str) -> LiquidityConfig:
        if not self._settings.api_key:
            raise LiquidityConfigGenerationError("LLM_API_KEY is required.")

        url = f"{self._settings.api_base.rstrip('/')}/chat/completions"
        body = {
            "model": self._settings.model,
            "temperature": self._settings.temperature,
            "response_format": {"type": "json_object"},
            "messages": [
                {"role": "system", "content": SYSTEM_MESSAGE},
                {"role": "user", "content": prompt},
            ],
        }
        headers = {"Authorization": f"Bearer {self._settings.api_key}"}

        try:
            payload = await execute_with_retry(
                lambda: request_json(
                    "POST",
                    url,
                    timeout_seconds=self._settings.timeout_seconds,
                    transport=self._transport,
                    json=body,
                    headers=headers,
                ),
                policy=self._retry_policy,
                sleep=self._sleep,
                label=f"llm_config_client model={self._settings.model}",
            )
        except UpstreamFetchError as exc:
            logger.error(
                "llm_config_client: request_failed model=%s status=%s error=%s",
                self._settings.model,
                exc.status_code,
                exc,
            )
            raise LiquidityConfigGenerationError(f"Structured generation request failed: {exc}") from exc

        content = _first_choice_content(payload)
        logger.debug("llm_config_client: raw_content=%s", content)
        return map_payload_to_liquidity_config(extract_json_object(content))


def _first_choice_content(payload: dict[str, Any]) -> str:
    choices = payload.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        raise LiquidityConfigGenerationError("Model response has no choices.")
    message = choices[0].get("message") or {}
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str) or not content.strip():
        raise LiquidityConfigGenerationError("Model response has empty content.")
    return content
