"""Profit & loss and business insight computations over business entries."""

import logging
from typing import List, Optional, Sequence

from core.models import (
    BusinessEntry,
    CostSlice,
    Insight,
    ProfitChartRow,
    ProfitLossSummary,
)
from core.utils.config import get_setting
from core.utils.rounding import format_fixed

logger = logging.getLogger(__name__)

# Entries returning more than this share of the units sold get flagged
RETURN_RATE_LIMIT = 0.2
MARKETING_SHARE_LIMIT = 0.3


def _money(amount: float, currency: str) -> str:
    return f"{currency}{format_fixed(amount, 2, grouping=True)}"


# =============================================================================
# Profit & Loss
# =============================================================================


def compute_profit_loss(entries: Sequence[BusinessEntry]) -> Optional[ProfitLossSummary]:
    """
    Totals, net profit and margin across all entries.

    Returns:
        None when there are no entries to analyse.
    """
    if not entries:
        return None

    total_revenue = sum(e.revenue for e in entries)
    total_expenses = sum(e.cost for e in entries)
    total_marketing = sum(e.marketing_spend for e in entries)
    total_costs = total_expenses + total_marketing
    net_profit = total_revenue - total_costs
    profit_margin = (net_profit / total_revenue * 100) if total_revenue > 0 else 0.0

    return ProfitLossSummary(
        total_revenue=total_revenue,
        total_expenses=total_expenses,
        total_marketing=total_marketing,
        total_costs=total_costs,
        net_profit=net_profit,
        profit_margin=profit_margin,
        is_profitable=net_profit > 0,
    )


def profit_insights(
    summary: Optional[ProfitLossSummary], currency: Optional[str] = None
) -> List[Insight]:
    if summary is None:
        return []
    currency = currency if currency is not None else get_setting().CURRENCY_SYMBOL

    insights = []
    if summary.is_profitable:
        insights.append(
            Insight(
                type="success",
                text=(
                    "Great! Your business is profitable with a net profit of "
                    f"{_money(summary.net_profit, currency)}."
                ),
            )
        )
    else:
        insights.append(
            Insight(
                type="warning",
                text=(
                    "Your business is currently operating at a loss of "
                    f"{_money(abs(summary.net_profit), currency)}."
                ),
            )
        )

    margin = summary.profit_margin
    if margin > 20:
        insights.append(
            Insight(
                type="success", text=f"Excellent profit margin of {format_fixed(margin)}%!"
            )
        )
    elif margin > 10:
        insights.append(
            Insight(
                type="info",
                text=f"Good profit margin of {format_fixed(margin)}%. Consider optimizing costs.",
            )
        )
    elif margin > 0:
        insights.append(
            Insight(
                type="warning",
                text=(
                    f"Low profit margin of {format_fixed(margin)}%. "
                    "Focus on increasing revenue or reducing costs."
                ),
            )
        )

    if summary.total_marketing > summary.total_revenue * MARKETING_SHARE_LIMIT:
        if summary.total_revenue > 0:
            share = summary.total_marketing / summary.total_revenue * 100
            insights.append(
                Insight(
                    type="info",
                    text=(
                        f"Marketing spend is {format_fixed(share)}% of revenue. "
                        "Consider optimizing marketing ROI."
                    ),
                )
            )
        else:
            logger.info("Marketing spend recorded without any revenue")

    return insights


def profit_chart_rows(entries: Sequence[BusinessEntry]) -> List[ProfitChartRow]:
    return [
        ProfitChartRow(
            product=e.product_name,
            revenue=e.revenue,
            expenses=e.cost,
            profit=e.profit,
        )
        for e in entries
    ]


def cost_breakdown(summary: Optional[ProfitLossSummary]) -> List[CostSlice]:
    """Net profit against total costs, without empty slices."""
    if summary is None:
        return []
    slices = [
        CostSlice(name="Net Profit", value=max(0.0, summary.net_profit)),
        CostSlice(name="Total Costs", value=summary.total_costs),
    ]
    return [s for s in slices if s.value > 0]


# =============================================================================
# Business Insights
# =============================================================================


def business_insights(
    entries: Sequence[BusinessEntry], currency: Optional[str] = None
) -> List[Insight]:
    """Headline observations about the recorded sales."""
    if not entries:
        return []
    currency = currency if currency is not None else get_setting().CURRENCY_SYMBOL

    total_revenue = sum(e.revenue for e in entries)
    total_marketing = sum(e.marketing_spend for e in entries)
    avg_rating = sum(e.rating or 0 for e in entries) / len(entries)
    top = max(entries, key=lambda e: e.sales)
    high_returns = [e for e in entries if e.units_returned > RETURN_RATE_LIMIT * e.sales]
    top_category = entries[0].category

    insights = [
        Insight(
            type="insight",
            text=f"Your total revenue is {_money(total_revenue, currency)}.",
        )
    ]
    if total_marketing > 0:
        insights.append(
            Insight(
                type="metric",
                text=f"Your marketing ROI is {format_fixed(total_revenue / total_marketing, 2)}.",
            )
        )
    insights.append(
        Insight(
            type="rating",
            text=f"Your average customer rating is {format_fixed(avg_rating)}.",
        )
    )
    insights.append(
        Insight(
            type="product",
            text=(
                f"Top selling product: {top.product_name or 'Unnamed product'} "
                f"({top.sales} units)."
            ),
        )
    )
    if high_returns:
        insights.append(
            Insight(
                type="warning",
                text="High return rate detected for some products. Consider reviewing quality.",
            )
        )
    else:
        insights.append(Insight(type="success", text="No major return issues detected."))
    if top_category:
        insights.append(
            Insight(
                type="strategy",
                text=f"Consider focusing more on the '{top_category}' category for higher sales.",
            )
        )
    return insights
