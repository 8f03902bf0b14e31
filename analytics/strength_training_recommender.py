import datetime
import math
from typing import Iterable

from analytics.math_tools import MathTools
from models import (
    ActivityType,
    MuscleGainPrediction,
    TrainingAdvice,
    WorkoutRecord,
    WorkoutSummary,
)
from settings_schema import DEFAULT_THRESHOLDS, EngineThresholds


class StrengthTrainingRecommender:
    """Training frequency, muscle gain forecast and session advice."""

    STRENGTH_TYPES = frozenset({ActivityType.TRADITIONAL_STRENGTH})

    def __init__(self, thresholds: EngineThresholds | None = None) -> None:
        self.thresholds = (thresholds or DEFAULT_THRESHOLDS).training

    def recommend_frequency(
        self, current_frequency: int, efficiency: float, body_fat_percent: float | None = None
    ) -> int:
        """Return the recommended weekly strength sessions.

        ``body_fat_percent`` is accepted for interface stability but does not
        change the recommendation.
        """
        t = self.thresholds
        efficiency = MathTools.finite_or_zero(efficiency)
        if efficiency < t.low_efficiency:
            return max(t.boost_floor, current_frequency + 1)
        if efficiency > t.high_efficiency:
            return current_frequency
        return max(t.keep_floor, current_frequency)

    def predict(self, efficiency: float) -> MuscleGainPrediction:
        t = self.thresholds
        score = MathTools.finite_or_zero(efficiency)
        if score >= t.excellent_score:
            return MuscleGainPrediction.EXCELLENT
        if score >= t.high_score:
            return MuscleGainPrediction.HIGH
        if score >= t.moderate_score:
            return MuscleGainPrediction.MODERATE
        return MuscleGainPrediction.LOW

    @staticmethod
    def time_to_goal_months(current: float, target: float, monthly_gain_kg: float) -> int:
        """Return whole months needed to close ``target - current``.

        Returns 0 when the monthly gain is not positive, meaning the goal is
        unreachable under this model, and when the target is already met.
        """
        if not monthly_gain_kg > 0:
            return 0
        months = (target - current) / monthly_gain_kg
        if not math.isfinite(months):
            return 0
        return max(0, int(math.ceil(months)))

    def advice(
        self,
        frequency: int,
        duration_seconds: float,
        efficiency: float,
        body_fat_percent: float,
    ) -> list[TrainingAdvice]:
        """Return advice in check order; several items may apply at once."""
        t = self.thresholds
        advice: list[TrainingAdvice] = []
        if frequency < t.min_sessions:
            advice.append(TrainingAdvice.INCREASE_FREQUENCY)
        elif frequency > t.max_sessions:
            advice.append(TrainingAdvice.REDUCE_FOR_RECOVERY)
        if duration_seconds < t.min_duration_seconds:
            advice.append(TrainingAdvice.EXTEND_SESSION)
        elif duration_seconds > t.max_duration_seconds:
            advice.append(TrainingAdvice.SHORTEN_SESSION)
        if body_fat_percent > t.high_body_fat:
            advice.append(TrainingAdvice.REDUCE_BODY_FAT_FIRST)
        if efficiency < t.advice_low_efficiency:
            advice.append(TrainingAdvice.RAISE_INTENSITY)
        elif efficiency > t.advice_high_efficiency:
            advice.append(TrainingAdvice.MAINTAIN_PACE)
        return advice

    def _strength_only(self, workouts: Iterable[WorkoutRecord]) -> list[WorkoutRecord]:
        return [w for w in workouts if w.activity_type in self.STRENGTH_TYPES]

    def weekly_frequency(
        self, workouts: Iterable[WorkoutRecord], now: datetime.datetime
    ) -> int:
        """Count strength sessions started within the trailing window."""
        since = now - datetime.timedelta(days=self.thresholds.window_days)
        return sum(1 for w in self._strength_only(workouts) if w.start >= since)

    def average_duration(self, workouts: Iterable[WorkoutRecord]) -> float:
        strength = self._strength_only(workouts)
        return MathTools.mean(w.duration_seconds for w in strength)

    def summarize(
        self, workouts: Iterable[WorkoutRecord], now: datetime.datetime
    ) -> WorkoutSummary:
        workouts = list(workouts)
        return WorkoutSummary(
            weekly_sessions=self.weekly_frequency(workouts, now),
            average_duration_seconds=self.average_duration(workouts),
        )

    def muscle_gain_potential(
        self,
        frequency: int,
        duration_seconds: float,
        body_fat_percent: float,
        nutrition_quality: float,
    ) -> float:
        """Return a 0-1 potential from training habits and nutrition quality."""
        t = self.thresholds
        frequency_score = MathTools.unit_score(
            MathTools.safe_ratio(frequency, t.potential_session_target)
        )
        duration_score = MathTools.unit_score(
            MathTools.safe_ratio(duration_seconds, t.reference_duration_seconds)
        )
        body_fat_score = MathTools.unit_score(
            1.0 - MathTools.safe_ratio(body_fat_percent, t.potential_body_fat_ceiling, 1.0)
        )
        nutrition_score = MathTools.unit_score(nutrition_quality)
        total = (
            frequency_score * t.potential_frequency_weight
            + duration_score * t.potential_duration_weight
            + body_fat_score * t.potential_body_fat_weight
            + nutrition_score * t.potential_nutrition_weight
        )
        return MathTools.unit_score(total)
