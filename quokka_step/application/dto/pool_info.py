from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


PoolInfoSource = Literal["info", "dynamic"]


@dataclass(frozen=True)
class GetPoolInfoInput:
    pool_id: str
    source: PoolInfoSource = "info"


@dataclass(frozen=True)
class GetPoolReportInput:
    pool_id: str | None = None
    source: PoolInfoSource = "info"


@dataclass(frozen=True)
class GetPoolReportOutput:
    pool_id: str
    available: bool
    report: str
    error_code: str | None = None
