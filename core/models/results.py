"""Computed view models. Nothing here is persisted."""

from typing import List, Optional, Union

from pydantic import BaseModel

from .goal import BadgeTier, GoalPriority, GoalStatus, GoalType, Urgency


class Insight(BaseModel):
    type: str
    text: str


# =============================================================================
# Goals
# =============================================================================


class GoalEvaluation(BaseModel):
    goal_id: Union[int, str]
    title: str
    type: GoalType
    target: float
    progress_percent: int
    status: GoalStatus
    badge_tier: BadgeTier
    priority: GoalPriority
    priority_tone: str
    days_remaining: int
    time_remaining_percent: int
    urgency_score: float
    urgency: Urgency


class GoalSummary(BaseModel):
    goal_count: int
    average_progress: float
    completed_count: int
    overdue_count: int
    insights: List[Insight]


class GoalChartRow(BaseModel):
    goal: str
    target: float
    progress: int
    status: GoalStatus


# =============================================================================
# Profit & Loss
# =============================================================================


class ProfitLossSummary(BaseModel):
    total_revenue: float
    total_expenses: float
    total_marketing: float
    total_costs: float
    net_profit: float
    profit_margin: float
    is_profitable: bool


class ProfitChartRow(BaseModel):
    product: Optional[str] = None
    revenue: float
    expenses: float
    profit: float


class CostSlice(BaseModel):
    name: str
    value: float
