import datetime
from collections import defaultdict
from typing import Iterable

from analytics.math_tools import MathTools
from localization import translator
from models import Goal, GoalDirection, GoalType, ProgressAdvice, directional_progress
from settings_schema import DEFAULT_THRESHOLDS, EngineThresholds


class ProgressAggregator:
    """Normalize goal metrics into 0-1 progress and combine them."""

    STARTER_GOALS = (
        (GoalType.WEIGHT, 5.0, "kg"),
        (GoalType.STEPS, 10000.0, "steps"),
        (GoalType.CALORIES, 300.0, "kcal"),
        (GoalType.EXERCISE, 30.0, "min"),
        (GoalType.WATER, 2000.0, "ml"),
        (GoalType.SLEEP, 7.0, "h"),
    )
    STARTER_DEADLINE_DAYS = 60

    def __init__(self, thresholds: EngineThresholds | None = None) -> None:
        self.thresholds = (thresholds or DEFAULT_THRESHOLDS).progress

    @staticmethod
    def goal_progress(
        current: float,
        initial: float,
        target: float,
        direction: GoalDirection | str = GoalDirection.INCREASE,
    ) -> float:
        """Return the fraction of the distance from ``initial`` to ``target`` covered."""
        return directional_progress(current, initial, target, direction)

    @staticmethod
    def ratio_progress(value: float, target: float) -> float:
        """Return ``min(value / target, 1)``, 0 for a non-positive target."""
        if not target > 0:
            return 0.0
        return MathTools.unit_score(MathTools.safe_ratio(value, target))

    @staticmethod
    def combine(progresses: Iterable[float]) -> float:
        return MathTools.unit_score(MathTools.mean(progresses))

    def overall_progress(self, goals: Iterable[Goal]) -> float:
        """Unweighted mean of the per-category mean progress."""
        by_type: dict[GoalType, list[float]] = defaultdict(list)
        for goal in goals:
            by_type[goal.goal_type].append(goal.progress)
        return self.combine(MathTools.mean(values) for values in by_type.values())

    @staticmethod
    def completed_goals(goals: Iterable[Goal]) -> list[Goal]:
        return [g for g in goals if g.is_completed]

    def completion_ratio(self, goals: Iterable[Goal]) -> float:
        goals = list(goals)
        return MathTools.safe_ratio(len(self.completed_goals(goals)), len(goals))

    @staticmethod
    def update_goal(goal: Goal, current_value: float) -> Goal:
        return goal.with_current(current_value)

    def default_goals(self, deadline: datetime.date | None = None) -> list[Goal]:
        """Return the six starter goals, one per goal type."""
        if deadline is None:
            deadline = datetime.date.today() + datetime.timedelta(
                days=self.STARTER_DEADLINE_DAYS
            )
        return [
            Goal(
                title=translator.describe(goal_type),
                goal_type=goal_type,
                current_value=0.0,
                target_value=target,
                unit=unit,
                deadline=deadline,
            )
            for goal_type, target, unit in self.STARTER_GOALS
        ]

    def advice(self, progress: float) -> ProgressAdvice:
        t = self.thresholds
        progress = MathTools.finite_or_zero(progress)
        if progress < t.behind:
            return ProgressAdvice.BEHIND
        if progress < t.on_track:
            return ProgressAdvice.ON_TRACK
        return ProgressAdvice.NEARLY_THERE
