import datetime
import logging
from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from analytics.math_tools import MathTools
from models import (
    BodyCompositionSample,
    FitnessDataPoint,
    NutritionSample,
    TrendAnalysisResult,
    WorkoutSample,
)
from settings_schema import DEFAULT_THRESHOLDS, EngineThresholds

logger = logging.getLogger(__name__)


def _local(value: datetime.date | datetime.datetime) -> pd.Timestamp:
    """Drop the zone of an aware value, keeping its wall-clock time."""
    stamp = pd.Timestamp(value)
    if stamp.tzinfo is not None:
        stamp = stamp.tz_localize(None)
    return stamp


def _day(value: datetime.date | datetime.datetime) -> pd.Timestamp:
    return _local(value).normalize()


class TrendAnalyzer:
    """Rebuild a daily series from raw samples and score it over a window.

    Every day of the window produces a point. Days without a nutrition sample
    assume the default intake and days without a body-composition sample the
    default body fat. ``skip_empty_days`` drops days that have no sample of
    any kind.
    """

    def __init__(self, thresholds: EngineThresholds | None = None) -> None:
        self.thresholds = (thresholds or DEFAULT_THRESHOLDS).trend

    def workout_intensity(self, duration_seconds: float, calories_burned: float) -> float:
        """Return ``min(kcal per hour / max kcal per hour, 1)`` or 0 for no duration."""
        if not duration_seconds > 0:
            return 0.0
        hours = duration_seconds / 3600.0
        return MathTools.unit_score(
            MathTools.safe_ratio(calories_burned, hours * self.thresholds.max_calories_per_hour)
        )

    def muscle_gain_efficiency(
        self, calories_in: float, calories_out: float, intensity: float
    ) -> float:
        t = self.thresholds
        surplus = calories_in - calories_out
        surplus_score = MathTools.anchored_score(
            surplus, t.muscle_surplus_anchor, t.muscle_surplus_anchor
        )
        intensity_score = MathTools.anchored_score(
            intensity, t.muscle_intensity_anchor, t.muscle_intensity_anchor
        )
        return MathTools.finite_or_zero(
            surplus_score * t.muscle_surplus_weight
            + intensity_score * t.muscle_intensity_weight
        )

    def fat_loss_efficiency(
        self, calories_in: float, calories_out: float, intensity: float
    ) -> float:
        t = self.thresholds
        deficit = calories_out - calories_in
        deficit_score = MathTools.anchored_score(
            deficit, t.fat_deficit_anchor, t.fat_deficit_anchor
        )
        intensity_score = MathTools.anchored_score(
            intensity, t.fat_intensity_anchor, t.fat_intensity_anchor
        )
        return MathTools.finite_or_zero(
            deficit_score * t.fat_deficit_weight + intensity_score * t.fat_intensity_weight
        )

    def _by_day(
        self, rows: list[tuple], columns: list[str], index: pd.DatetimeIndex, how: dict
    ) -> pd.DataFrame:
        if not rows:
            return pd.DataFrame(np.nan, index=index, columns=columns[1:])
        frame = pd.DataFrame(rows, columns=columns)
        grouped = frame.groupby("day").agg(how)
        return grouped.reindex(index)

    def daily_frame(
        self,
        workouts: Iterable[WorkoutSample],
        nutrition: Iterable[NutritionSample],
        body: Iterable[BodyCompositionSample],
        end_date: datetime.date | datetime.datetime,
        days: int | None = None,
    ) -> pd.DataFrame:
        """Return one row per day of the window; missing sources are NaN."""
        days = self.thresholds.window_days if days is None else days
        if days <= 0:
            raise ValueError("days must be positive")
        index = pd.date_range(end=_day(end_date), periods=days, freq="D")

        workout_rows = [
            (
                _day(w.date),
                float(w.calories_burned),
                self.workout_intensity(w.duration_seconds, w.calories_burned),
            )
            for w in workouts
        ]
        nutrition_rows = [(_day(n.date), float(n.calories)) for n in nutrition]
        body_rows = [(_day(b.date), float(b.body_fat_percent)) for b in body]

        frame = pd.concat(
            [
                self._by_day(
                    workout_rows,
                    ["day", "calories_out", "workout_intensity"],
                    index,
                    {"calories_out": "sum", "workout_intensity": "mean"},
                ),
                self._by_day(
                    nutrition_rows, ["day", "calories_in"], index, {"calories_in": "first"}
                ),
                self._by_day(
                    body_rows, ["day", "body_fat_percent"], index, {"body_fat_percent": "first"}
                ),
            ],
            axis=1,
        )
        return frame[["calories_in", "calories_out", "body_fat_percent", "workout_intensity"]]

    def data_points(
        self,
        workouts: Iterable[WorkoutSample],
        nutrition: Iterable[NutritionSample],
        body: Iterable[BodyCompositionSample],
        end_date: datetime.date | datetime.datetime,
        days: int | None = None,
        skip_empty_days: bool = False,
    ) -> list[FitnessDataPoint]:
        """Return the scored daily points of the window, oldest first."""
        t = self.thresholds
        frame = self.daily_frame(workouts, nutrition, body, end_date, days)
        if skip_empty_days:
            frame = frame[frame.notna().any(axis=1)]
        frame = frame.fillna(
            {
                "calories_in": t.default_intake_kcal,
                "calories_out": 0.0,
                "body_fat_percent": t.default_body_fat,
                "workout_intensity": 0.0,
            }
        )
        points: list[FitnessDataPoint] = []
        for day, row in frame.iterrows():
            calories_in = float(row["calories_in"])
            calories_out = float(row["calories_out"])
            intensity = float(row["workout_intensity"])
            points.append(
                FitnessDataPoint(
                    date=day.date(),
                    calories_in=calories_in,
                    calories_out=calories_out,
                    body_fat_percent=float(row["body_fat_percent"]),
                    workout_intensity=intensity,
                    muscle_gain_efficiency=self.muscle_gain_efficiency(
                        calories_in, calories_out, intensity
                    ),
                    fat_loss_efficiency=self.fat_loss_efficiency(
                        calories_in, calories_out, intensity
                    ),
                )
            )
        return points

    def summarize(
        self, points: Sequence[FitnessDataPoint], body_weight_kg: float | None = None
    ) -> TrendAnalysisResult:
        """Aggregate scored points into recommendations and monthly forecasts.

        The optimal surplus and intensity come from the best muscle-gain days;
        ties keep chronological order. An empty series yields all zeros.
        """
        t = self.thresholds
        if not points:
            return TrendAnalysisResult()
        ranked = sorted(points, key=lambda p: p.muscle_gain_efficiency, reverse=True)
        top = ranked[: t.top_days]
        muscle = MathTools.mean(p.muscle_gain_efficiency for p in points)
        fat = MathTools.mean(p.fat_loss_efficiency for p in points)
        weight = t.default_body_weight_kg if body_weight_kg is None else body_weight_kg
        return TrendAnalysisResult(
            optimal_calorie_surplus=MathTools.mean(p.calorie_surplus for p in top),
            optimal_workout_intensity=MathTools.mean(p.workout_intensity for p in top),
            recommended_protein_g=MathTools.finite_or_zero(weight * t.protein_per_kg),
            monthly_muscle_gain_kg=MathTools.finite_or_zero(muscle * t.monthly_gain_baseline_kg),
            monthly_fat_loss_kg=MathTools.finite_or_zero(fat * t.monthly_loss_baseline_kg),
            efficiency_score=MathTools.finite_or_zero((muscle + fat) / 2.0),
            points=tuple(points),
        )

    def analyze(
        self,
        workouts: Iterable[WorkoutSample],
        nutrition: Iterable[NutritionSample],
        body: Iterable[BodyCompositionSample],
        end_date: datetime.date | datetime.datetime,
        days: int | None = None,
        body_weight_kg: float | None = None,
        skip_empty_days: bool = False,
    ) -> TrendAnalysisResult:
        """Score the window ending at ``end_date``.

        Without an explicit ``body_weight_kg`` the most recent body-composition
        weight on or before ``end_date`` is used, falling back to the default
        body weight.
        """
        body = list(body)
        if body_weight_kg is None:
            last_day = _day(end_date)
            past = [b for b in body if _day(b.date) <= last_day]
            if past:
                body_weight_kg = max(past, key=lambda b: _local(b.date)).weight_kg
        points = self.data_points(
            workouts, nutrition, body, end_date, days, skip_empty_days
        )
        logger.debug("trend window of %d points ending %s", len(points), end_date)
        return self.summarize(points, body_weight_kg)

    @staticmethod
    def window_averages(
        points: Iterable[FitnessDataPoint], days: int, end_date: datetime.date
    ) -> dict[str, float]:
        """Average the points dated within the ``days`` ending at ``end_date``."""
        if isinstance(end_date, datetime.datetime):
            end_date = end_date.date()
        start = end_date - datetime.timedelta(days=days)
        window = [p for p in points if start < p.date <= end_date]
        return {
            "days": float(len(window)),
            "calories_in": MathTools.mean(p.calories_in for p in window),
            "calories_out": MathTools.mean(p.calories_out for p in window),
            "calorie_surplus": MathTools.mean(p.calorie_surplus for p in window),
            "workout_intensity": MathTools.mean(p.workout_intensity for p in window),
            "muscle_gain_efficiency": MathTools.mean(p.muscle_gain_efficiency for p in window),
            "fat_loss_efficiency": MathTools.mean(p.fat_loss_efficiency for p in window),
        }
