"""
Goal progress, status and badge evaluation.

Every function here is a pure computation over records the caller has
already fetched. Time-sensitive functions take ``now`` explicitly; when it is
omitted the system clock is read.
"""

import logging
import math
from datetime import datetime
from numbers import Real
from typing import List, Optional, Sequence

from core.exceptions import InvalidRecordError, UnknownGoalTypeError
from core.models import (
    BadgeTier,
    BusinessEntry,
    Goal,
    GoalChartRow,
    GoalEvaluation,
    GoalPriority,
    GoalStatus,
    GoalSummary,
    GoalType,
    Insight,
    Urgency,
)
from core.utils.clock import as_utc, resolve_now
from core.utils.config import Settings, get_setting
from core.utils.rounding import format_fixed, round_half_up, round_to

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400

# Checked top-down, first match wins
BADGE_THRESHOLDS = (
    (100, BadgeTier.GOAL_MASTER),
    (90, BadgeTier.ALMOST_THERE),
    (75, BadgeTier.ON_FIRE),
    (50, BadgeTier.HALFWAY_HERO),
    (25, BadgeTier.GETTING_STARTED),
)

PRIORITY_TONES = {
    GoalPriority.HIGH: "warning",
    GoalPriority.MEDIUM: "caution",
    GoalPriority.LOW: "accent",
}


def _number(value, field: str):
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidRecordError(f"Expected a number for '{field}', got {value!r}")
    return value


def _goal_type(goal: Goal) -> GoalType:
    try:
        return GoalType(goal.type)
    except ValueError:
        raise UnknownGoalTypeError(goal.type) from None


# =============================================================================
# Metrics
# =============================================================================


def entries_in_window(goal: Goal, entries: Sequence[BusinessEntry]) -> List[BusinessEntry]:
    """Keep the entries recorded on or after the goal was created."""
    start = as_utc(goal.created_at)
    return [e for e in entries if as_utc(e.date) >= start]


def _average_rating(entries: Sequence[BusinessEntry], rated_only: bool) -> float:
    rated = [e for e in entries if e.rating is not None]
    if rated_only:
        entries = rated
    if not entries:
        return 0.0
    if len(rated) < len(entries):
        logger.warning(
            "%s of %s entries have no rating; they count as 0 in the average",
            len(entries) - len(rated),
            len(entries),
        )
    total = sum(_number(e.rating, "rating") for e in rated)
    return total / len(entries)


def compute_metric(
    goal: Goal, entries: Sequence[BusinessEntry], settings: Optional[Settings] = None
) -> float:
    """
    Compute the raw metric a goal is measured by.

    ``entries`` should already be limited to the goal window.

    Raises:
        UnknownGoalTypeError: the goal type is not a recognised one.
        InvalidRecordError: a numeric field holds a non-number.
    """
    goal_type = _goal_type(goal)

    if goal_type == GoalType.REVENUE:
        return sum(_number(e.price, "price") * _number(e.sales, "sales") for e in entries)
    elif goal_type == GoalType.SALES:
        return sum(_number(e.sales, "sales") for e in entries)
    elif goal_type == GoalType.CUSTOMERS:
        # Distinct regions stand in for unique customer reach
        return len({e.region for e in entries})
    elif goal_type == GoalType.RATING:
        settings = settings or get_setting()
        return _average_rating(entries, settings.RATING_AVERAGE_RATED_ONLY)
    raise UnknownGoalTypeError(goal.type)


def compute_progress(
    goal: Goal, entries: Sequence[BusinessEntry], settings: Optional[Settings] = None
) -> int:
    """
    Percentage of the goal target reached, clamped to 0-100.

    No entries means no demonstrated progress, so the result is 0 rather
    than an error. A non-positive target also yields 0.
    """
    if not entries:
        return 0

    window = entries_in_window(goal, entries)
    metric = compute_metric(goal, window, settings)

    target = _number(goal.target, "target")
    if target <= 0:
        return 0

    percent = round_half_up(metric / target * 100)
    return max(0, min(100, percent))


# =============================================================================
# Classification
# =============================================================================


def status_for_progress(goal: Goal, percent: int, now: Optional[datetime] = None) -> GoalStatus:
    """Map an already computed progress percent and the clock to a status."""
    # Completion wins over lateness: a goal finished late is still completed
    if percent >= 100:
        return GoalStatus.COMPLETED
    if resolve_now(now) > as_utc(goal.deadline):
        return GoalStatus.OVERDUE
    if percent >= 75:
        return GoalStatus.ON_TRACK
    if percent >= 50:
        return GoalStatus.IN_PROGRESS
    return GoalStatus.AT_RISK


def compute_status(
    goal: Goal,
    entries: Sequence[BusinessEntry],
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
) -> GoalStatus:
    """Recompute a goal's lifecycle status from its data and the clock."""
    percent = compute_progress(goal, entries, settings)
    return status_for_progress(goal, percent, now)


def compute_badge(percent: int) -> BadgeTier:
    """Achievement tier for a progress percent."""
    for threshold, tier in BADGE_THRESHOLDS:
        if percent >= threshold:
            return tier
    return BadgeTier.JUST_BEGINNING


def priority_tone(priority: GoalPriority) -> str:
    return PRIORITY_TONES[GoalPriority(priority)]


def _days_left(goal: Goal, now: Optional[datetime]) -> float:
    delta = as_utc(goal.deadline) - resolve_now(now)
    return delta.total_seconds() / SECONDS_PER_DAY


def days_remaining(goal: Goal, now: Optional[datetime] = None) -> int:
    """Whole days until the deadline; negative once it has passed."""
    return math.floor(_days_left(goal, now))


def time_remaining_percent(goal: Goal, now: Optional[datetime] = None) -> int:
    """Share of the goal window that still lies ahead, 0-100."""
    deadline = as_utc(goal.deadline)
    window = (deadline - as_utc(goal.created_at)).total_seconds()
    if window <= 0:
        return 0
    remaining = (deadline - resolve_now(now)).total_seconds()
    return max(0, min(100, round_half_up(remaining / window * 100)))


def urgency_score(
    goal: Goal, now: Optional[datetime] = None, window_days: int = 14
) -> float:
    """
    Deadline pressure between 0.0 and 1.0.

    Full pressure once the deadline has passed, rising linearly inside the
    urgency window, none before it.
    """
    days_left = _days_left(goal, now)
    if days_left <= 0:
        return 1.0
    if window_days > 0 and days_left <= window_days:
        return round(1.0 - (days_left / window_days), 4)
    return 0.0


def classify_urgency(
    goal: Goal, now: Optional[datetime] = None, window_days: int = 14
) -> Urgency:
    days_left = _days_left(goal, now)
    if days_left <= 0:
        return Urgency.OVERDUE
    if days_left <= window_days:
        return Urgency.DUE_SOON
    if days_left <= window_days * 2:
        return Urgency.UPCOMING
    return Urgency.LATER


# =============================================================================
# Evaluation & Aggregation
# =============================================================================


def evaluate_goal(
    goal: Goal,
    entries: Sequence[BusinessEntry],
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
) -> GoalEvaluation:
    """
    Build the full view model for one goal.

    Progress is computed once and reused for status and badge.
    """
    settings = settings or get_setting()
    now = resolve_now(now)

    percent = compute_progress(goal, entries, settings)
    status = status_for_progress(goal, percent, now)
    window_days = settings.URGENCY_WINDOW_DAYS

    evaluation = GoalEvaluation(
        goal_id=goal.id,
        title=goal.title,
        type=_goal_type(goal),
        target=goal.target,
        progress_percent=percent,
        status=status,
        badge_tier=compute_badge(percent),
        priority=goal.priority,
        priority_tone=priority_tone(goal.priority),
        days_remaining=days_remaining(goal, now),
        time_remaining_percent=time_remaining_percent(goal, now),
        urgency_score=urgency_score(goal, now, window_days),
        urgency=classify_urgency(goal, now, window_days),
    )
    logger.debug(
        "Evaluated goal %s: %s%% %s", goal.id, percent, status.value
    )
    return evaluation


def evaluate_goals(
    goals: Sequence[Goal],
    entries: Sequence[BusinessEntry],
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
) -> List[GoalEvaluation]:
    """Evaluate each goal independently, keeping the input order."""
    settings = settings or get_setting()
    now = resolve_now(now)
    return [evaluate_goal(goal, entries, now, settings) for goal in goals]


def _plural(count: int) -> str:
    return "s" if count > 1 else ""


def _goal_insights(
    goal_count: int, average: float, completed: int, overdue: int
) -> List[Insight]:
    insights = [
        Insight(
            type="overview",
            text=(
                f"You have {goal_count} active goals with "
                f"{format_fixed(average)}% average progress."
            ),
        )
    ]
    if completed > 0:
        insights.append(
            Insight(
                type="success",
                text=f"Congratulations! You've completed {completed} goal{_plural(completed)}!",
            )
        )
    if overdue > 0:
        insights.append(
            Insight(
                type="warning",
                text=(
                    f"You have {overdue} overdue goal{_plural(overdue)}. "
                    "Consider adjusting targets."
                ),
            )
        )
    if average > 75:
        insights.append(
            Insight(
                type="motivation",
                text=(
                    "Amazing progress! You're on fire with "
                    f"{format_fixed(average)}% average completion."
                ),
            )
        )
    return insights


def build_goal_summary(
    goals: Sequence[Goal],
    entries: Sequence[BusinessEntry],
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
) -> GoalSummary:
    """
    Aggregate figures and insight lines across a goal collection.

    Returns:
        GoalSummary with an empty insight list when there are no goals.
    """
    if not goals:
        return GoalSummary(
            goal_count=0,
            average_progress=0.0,
            completed_count=0,
            overdue_count=0,
            insights=[],
        )

    evaluations = evaluate_goals(goals, entries, now, settings)
    average = sum(e.progress_percent for e in evaluations) / len(evaluations)
    completed = sum(1 for e in evaluations if e.status == GoalStatus.COMPLETED)
    overdue = sum(1 for e in evaluations if e.status == GoalStatus.OVERDUE)

    return GoalSummary(
        goal_count=len(evaluations),
        average_progress=round_to(average, 1),
        completed_count=completed,
        overdue_count=overdue,
        insights=_goal_insights(len(evaluations), average, completed, overdue),
    )


def summarize_goals(
    goals: Sequence[Goal],
    entries: Sequence[BusinessEntry],
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
) -> List[Insight]:
    """Insight lines for a goal collection, in their fixed order."""
    return build_goal_summary(goals, entries, now, settings).insights


def goal_chart_rows(
    goals: Sequence[Goal],
    entries: Sequence[BusinessEntry],
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
) -> List[GoalChartRow]:
    """One bar per goal: title, target, progress and status."""
    settings = settings or get_setting()
    now = resolve_now(now)
    rows = []
    for goal in goals:
        percent = compute_progress(goal, entries, settings)
        rows.append(
            GoalChartRow(
                goal=goal.title,
                target=goal.target,
                progress=percent,
                status=status_for_progress(goal, percent, now),
            )
        )
    return rows
