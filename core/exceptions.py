"""Custom exceptions for the evaluation engine."""


class EvaluationError(Exception):
    """Raised when a computation receives input that breaks its contract."""
    pass


class UnknownGoalTypeError(EvaluationError, ValueError):
    """Raised when a goal type is not one of revenue, sales, customers or rating."""

    def __init__(self, goal_type):
        self.goal_type = goal_type
        super().__init__(f"Unknown goal type: {goal_type!r}")


class InvalidRecordError(EvaluationError, ValueError):
    """Raised when a non-numeric or non-temporal value reaches the arithmetic."""
    pass
