"""Goal evaluation endpoints for the dashboard front end.

The caller posts goals and entries it has already fetched; nothing is read
from or written to storage here.
"""

import logging

from ninja import Router, Query

from core.exceptions import EvaluationError
from core.utils.config import get_setting
from core.utils.responses import error_response, list_response, success_response
from .schemas import (
    BadgeResponse,
    GoalChartResponse,
    GoalEvaluationListResponse,
    GoalEvaluationRequest,
    GoalSummaryResponse,
)
from .service import (
    build_goal_summary,
    compute_badge,
    evaluate_goals,
    goal_chart_rows,
)

logger = logging.getLogger(__name__)
router = Router()


@router.post("/evaluate", response=GoalEvaluationListResponse)
def evaluate(request, payload: GoalEvaluationRequest):
    """Progress, status, badge and urgency for every posted goal."""
    try:
        evaluations = evaluate_goals(
            payload.goals, payload.entries, payload.now, get_setting()
        )
    except EvaluationError as e:
        logger.exception("Failed to evaluate goals")
        return error_response(f"Failed to evaluate goals: {e}")
    return list_response(evaluations)


@router.post("/summary", response=GoalSummaryResponse)
def summary(request, payload: GoalEvaluationRequest):
    """Average progress, completed/overdue counts and insight lines."""
    try:
        result = build_goal_summary(
            payload.goals, payload.entries, payload.now, get_setting()
        )
    except EvaluationError as e:
        logger.exception("Failed to summarize goals")
        return error_response(f"Failed to summarize goals: {e}")
    return success_response(result)


@router.post("/chart", response=GoalChartResponse)
def chart(request, payload: GoalEvaluationRequest):
    """Per-goal rows for the progress bar chart."""
    try:
        rows = goal_chart_rows(
            payload.goals, payload.entries, payload.now, get_setting()
        )
    except EvaluationError as e:
        logger.exception("Failed to build goal chart")
        return error_response(f"Failed to build goal chart: {e}")
    return list_response(rows)


@router.get("/badge", response=BadgeResponse)
def badge(request, percent: int = Query(...)):
    """Achievement tier for a progress percent."""
    return success_response({"percent": percent, "badge_tier": compute_badge(percent)})
