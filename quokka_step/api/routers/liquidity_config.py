from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from quokka_step.api.deps import get_generate_liquidity_config_use_case
from quokka_step.api.schemas.liquidity_config import (
    GenerateLiquidityConfigRequest,
    GenerateLiquidityConfigResponse,
    LiquidityConfigResponse,
)
from quokka_step.api.schemas.pool_info import PoolReportResponse
from quokka_step.application.dto.liquidity_config import GenerateLiquidityConfigInput
from quokka_step.application.use_cases.generate_liquidity_config import GenerateLiquidityConfigUseCase
from quokka_step.domain.exceptions import LiquidityConfigGenerationError, LiquidityConfigInputError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/v1/liquidity-config", response_model=GenerateLiquidityConfigResponse)
async def generate_liquidity_config(
    req: GenerateLiquidityConfigRequest,
    use_case: GenerateLiquidityConfigUseCase = Depends(get_generate_liquidity_config_use_case),
):
    try:
        result = await use_case.execute(
            GenerateLiquidityConfigInput(
                wallet_message=req.wallet_message,
                pool_id=req.pool_id,
            )
        )
    except LiquidityConfigInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except LiquidityConfigGenerationError as exc:
        logger.warning(
            "liquidity_config_router: generation_failed pool_id=%s detail=%s",
            req.pool_id,
            exc,
        )
        raise HTTPException(
            status_code=502,
            detail={"message": str(exc), "code": exc.code},
        ) from exc

    return GenerateLiquidityConfigResponse(
        config=LiquidityConfigResponse(
            step_percentage=result.config.step_percentage,
            add_liquidity_amount=result.config.add_liquidity_amount,
            min_price=result.config.min_price,
            max_price=result.config.max_price,
        ),
        message=result.message,
        pool_report=PoolReportResponse(
            pool_id=result.pool_report.pool_id,
            available=result.pool_report.available,
            report=result.pool_report.report,
            error_code=result.pool_report.error_code,
        ),
    )
