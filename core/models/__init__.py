"""Core records package."""

from .entry import BusinessEntry
from .goal import BadgeTier, Goal, GoalPriority, GoalStatus, GoalType, Urgency
from .results import (
    CostSlice,
    GoalChartRow,
    GoalEvaluation,
    GoalSummary,
    Insight,
    ProfitChartRow,
    ProfitLossSummary,
)

__all__ = [
    "BusinessEntry",
    "Goal",
    "GoalType",
    "GoalPriority",
    "GoalStatus",
    "BadgeTier",
    "Urgency",
    "Insight",
    "GoalEvaluation",
    "GoalSummary",
    "GoalChartRow",
    "ProfitLossSummary",
    "ProfitChartRow",
    "CostSlice",
]
