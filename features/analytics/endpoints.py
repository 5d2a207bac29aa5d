"""Profit & loss and business insight endpoints."""

import logging

from ninja import Router

from core.utils.config import get_setting
from core.utils.responses import list_response, success_response
from .schemas import EntriesRequest, InsightListResponse, ProfitLossResponse
from .service import (
    business_insights,
    compute_profit_loss,
    cost_breakdown,
    profit_chart_rows,
    profit_insights,
)

logger = logging.getLogger(__name__)
router = Router()


@router.post("/profit-loss", response=ProfitLossResponse)
def profit_loss(request, payload: EntriesRequest):
    """Totals, margin, insight lines and chart data for the posted entries."""
    currency = get_setting().CURRENCY_SYMBOL
    summary = compute_profit_loss(payload.entries)
    if summary is None:
        logger.info("Profit & loss requested without entries")

    report = {
        "summary": summary,
        "insights": profit_insights(summary, currency),
        "chart": profit_chart_rows(payload.entries),
        "breakdown": cost_breakdown(summary),
    }
    return success_response(report)


@router.post("/insights", response=InsightListResponse)
def insights(request, payload: EntriesRequest):
    """Headline observations about the posted entries."""
    result = business_insights(payload.entries, get_setting().CURRENCY_SYMBOL)
    return list_response(result)
