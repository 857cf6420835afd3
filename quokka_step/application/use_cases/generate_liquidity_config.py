from __future__ import annotations

import logging

from quokka_step.application.dto.liquidity_config import (
    GenerateLiquidityConfigInput,
    GenerateLiquidityConfigOutput,
)
from quokka_step.application.dto.pool_info import GetPoolReportInput
from quokka_step.application.ports.liquidity_config_generator_port import LiquidityConfigGeneratorPort
from quokka_step.application.use_cases.get_pool_report import GetPoolReportUseCase
from quokka_step.domain.exceptions import LiquidityConfigInputError
from quokka_step.domain.services.liquidity_config import (
    render_liquidity_config_message,
    validate_liquidity_config,
)
from quokka_step.domain.services.liquidity_config_prompt import build_liquidity_config_prompt


logger = logging.getLogger(__name__)


class GenerateLiquidityConfigUseCase:
    def __init__(
        self,
        *,
        get_pool_report_use_case: GetPoolReportUseCase,
        generator_port: LiquidityConfigGeneratorPort,
    ):
        self._get_pool_report_use_case = get_pool_report_use_case
        self._generator_port = generator_port

    async def execute(self, command: GenerateLiquidityConfigInput) -> GenerateLiquidityConfigOutput:
        wallet_message = (command.wallet_message or "").strip()
        if not wallet_message:
            raise LiquidityConfigInputError("wallet_message is required.")

        pool_report = await self._get_pool_report_use_case.execute(
            GetPoolReportInput(pool_id=command.pool_id)
        )
        if not pool_report.available:
            logger.warning(
                "generate_liquidity_config: pool_report_unavailable pool_id=%s code=%s",
                pool_report.pool_id,
                pool_report.error_code,
            )

        prompt = build_liquidity_config_prompt(
            pool_info=pool_report.report,
            wallet_message=wallet_message,
        )
        config = validate_liquidity_config(await self._generator_port.generate(prompt=prompt))

        logger.info(
            "generate_liquidity_config: generated pool_id=%s step_percentage=%s add_liquidity_amount=%s min_price=%s max_price=%s",
            pool_report.pool_id,
            config.step_percentage,
            config.add_liquidity_amount,
            config.min_price,
            config.max_price,
        )
        return GenerateLiquidityConfigOutput(
            config=config,
            message=render_liquidity_config_message(config),
            pool_report=pool_report,
        )
