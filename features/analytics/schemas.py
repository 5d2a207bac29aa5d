from typing import List, Optional
from ninja import Schema
from pydantic import Field

from core.models import (
    BusinessEntry,
    CostSlice,
    Insight,
    ProfitChartRow,
    ProfitLossSummary,
)


class EntriesRequest(Schema):
    entries: List[BusinessEntry] = Field(default_factory=list)


class ProfitLossReportSchema(Schema):
    summary: Optional[ProfitLossSummary] = None
    insights: List[Insight]
    chart: List[ProfitChartRow]
    breakdown: List[CostSlice]


class ProfitLossResponse(Schema):
    status: str
    message: str
    data: Optional[ProfitLossReportSchema] = None


class InsightListResponse(Schema):
    status: str
    message: str
    data: Optional[List[Insight]] = None
    count: Optional[int] = None
