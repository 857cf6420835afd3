from __future__ import annotations

import logging

from quokka_step.application.dto.pool_info import (
    GetPoolInfoInput,
    GetPoolReportInput,
    GetPoolReportOutput,
)
from quokka_step.application.use_cases.get_pool_info import GetPoolInfoUseCase
from quokka_step.domain.exceptions import DomainError
from quokka_step.domain.services.pool_report import POOL_REPORT_UNAVAILABLE, format_pool_info


logger = logging.getLogger(__name__)


class GetPoolReportUseCase:
    """Formatted pool report that degrades to a fixed sentinel instead of raising."""

    def __init__(self, *, get_pool_info_use_case: GetPoolInfoUseCase, default_pool_id: str):
        self._get_pool_info_use_case = get_pool_info_use_case
        self._default_pool_id = default_pool_id

    async def execute(self, command: GetPoolReportInput) -> GetPoolReportOutput:
        pool_id = (command.pool_id or "").strip() or self._default_pool_id

        try:
            metric = await self._get_pool_info_use_case.execute(
                GetPoolInfoInput(pool_id=pool_id, source=command.source)
            )
        except DomainError as exc:
            logger.error(
                "get_pool_report: unavailable pool_id=%s source=%s code=%s error=%s",
                pool_id,
                command.source,
                exc.code,
                exc,
            )
            return self._unavailable(pool_id, exc.code)
        except Exception:
            logger.exception(
                "get_pool_report: unexpected_error pool_id=%s source=%s",
                pool_id,
                command.source,
            )
            return self._unavailable(pool_id, "unexpected")

        return GetPoolReportOutput(
            pool_id=pool_id,
            available=True,
            report=format_pool_info(metric),
        )

    @staticmethod
    def _unavailable(pool_id: str, error_code: str) -> GetPoolReportOutput:
        return GetPoolReportOutput(
            pool_id=pool_id,
            available=False,
            report=POOL_REPORT_UNAVAILABLE,
            error_code=error_code,
        )
