"""Goal record and the enumerations derived from it."""

from datetime import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.utils.clock import as_utc


class GoalType(str, Enum):
    REVENUE = "revenue"
    SALES = "sales"
    CUSTOMERS = "customers"
    RATING = "rating"


class GoalPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class GoalStatus(str, Enum):
    COMPLETED = "completed"
    OVERDUE = "overdue"
    ON_TRACK = "on-track"
    IN_PROGRESS = "in-progress"
    AT_RISK = "at-risk"


class BadgeTier(str, Enum):
    GOAL_MASTER = "Goal Master"
    ALMOST_THERE = "Almost There"
    ON_FIRE = "On Fire"
    HALFWAY_HERO = "Halfway Hero"
    GETTING_STARTED = "Getting Started"
    JUST_BEGINNING = "Just Beginning"


class Urgency(str, Enum):
    OVERDUE = "overdue"
    DUE_SOON = "due-soon"
    UPCOMING = "upcoming"
    LATER = "later"


class Goal(BaseModel):
    """
    A declared business goal.

    ``created_at`` opens the measurement window and ``deadline`` closes it.
    The deadline is expected to fall after the creation time but this is
    not enforced here.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Union[int, str]
    title: str = ""
    type: GoalType
    target: float
    created_at: datetime = Field(alias="createdAt")
    deadline: datetime
    priority: GoalPriority = GoalPriority.MEDIUM
    description: Optional[str] = None

    @field_validator("created_at", "deadline", mode="before")
    @classmethod
    def _accept_plain_dates(cls, value):
        if isinstance(value, datetime) or not hasattr(value, "isoformat"):
            return value
        return as_utc(value)

    @field_validator("created_at", "deadline")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        return as_utc(value)
