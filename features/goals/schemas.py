from typing import List, Optional
from datetime import datetime
from ninja import Schema
from pydantic import Field

from core.models import (
    BadgeTier,
    BusinessEntry,
    Goal,
    GoalChartRow,
    GoalEvaluation,
    GoalSummary,
)


class GoalEvaluationRequest(Schema):
    goals: List[Goal]
    entries: List[BusinessEntry] = Field(default_factory=list)
    now: Optional[datetime] = None  # Clock override; server time when omitted


class BadgeSchema(Schema):
    percent: int
    badge_tier: BadgeTier


class GoalEvaluationListResponse(Schema):
    status: str
    message: str
    data: Optional[List[GoalEvaluation]] = None
    count: Optional[int] = None


class GoalSummaryResponse(Schema):
    status: str
    message: str
    data: Optional[GoalSummary] = None


class GoalChartResponse(Schema):
    status: str
    message: str
    data: Optional[List[GoalChartRow]] = None
    count: Optional[int] = None


class BadgeResponse(Schema):
    status: str
    message: str
    data: Optional[BadgeSchema] = None
