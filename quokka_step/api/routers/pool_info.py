from __future__ import annotations

import logging
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException

from quokka_step.api.deps import get_pool_info_use_case, get_pool_report_use_case
from quokka_step.api.schemas.pool_info import PoolMetricResponse, PoolReportResponse
from quokka_step.application.dto.pool_info import GetPoolInfoInput, GetPoolReportInput
from quokka_step.application.use_cases.get_pool_info import GetPoolInfoUseCase
from quokka_step.application.use_cases.get_pool_report import GetPoolReportUseCase
from quokka_step.domain.exceptions import (
    PoolInfoInputError,
    PoolMetricValidationError,
    UpstreamFetchError,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/v1/pools/{pool_id}/info", response_model=PoolMetricResponse)
async def get_pool_info(
    pool_id: str,
    source: Literal["info", "dynamic"] = "info",
    use_case: GetPoolInfoUseCase = Depends(get_pool_info_use_case),
):
    try:
        metric = await use_case.execute(GetPoolInfoInput(pool_id=pool_id, source=source))
    except PoolInfoInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except (UpstreamFetchError, PoolMetricValidationError) as exc:
        logger.warning(
            "pool_info_router: upstream_failed pool_id=%s source=%s code=%s detail=%s",
            pool_id,
            source,
            exc.code,
            exc,
        )
        raise HTTPException(
            status_code=502,
            detail={"message": str(exc), "code": exc.code},
        ) from exc

    return PoolMetricResponse.from_entity(metric)


@router.get("/v1/pool-report", response_model=PoolReportResponse)
async def get_pool_report(
    pool_id: str | None = None,
    source: Literal["info", "dynamic"] = "info",
    use_case: GetPoolReportUseCase = Depends(get_pool_report_use_case),
):
    result = await use_case.execute(GetPoolReportInput(pool_id=pool_id, source=source))
    return PoolReportResponse(
        pool_id=result.pool_id,
        available=result.available,
        report=result.report,
        error_code=result.error_code,
    )
