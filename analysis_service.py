from __future__ import annotations
import dataclasses
import datetime
import logging
from typing import Dict, Iterable, List, Optional

from analytics import (
    CalorieBalanceClassifier,
    MacroNutrientAnalyzer,
    MetabolicRateEstimator,
    MuscleGainScorer,
    ProgressAggregator,
    StrengthTrainingRecommender,
    TrendAnalyzer,
)
from localization import translator
from models import (
    ActivityLevel,
    BodyCompositionSample,
    BodyProfile,
    DailyEnergyRecord,
    Goal,
    NutritionSample,
    WorkoutRecord,
    WorkoutSample,
)
from settings_schema import DEFAULT_THRESHOLDS, EngineThresholds

logger = logging.getLogger(__name__)


def label(member) -> Dict[str, str]:
    return {"value": member.value, "message": translator.describe(member)}


def label_as(member, prefix: str) -> Dict[str, str]:
    return {"value": member.value, "message": translator.describe(member, prefix)}


class AnalysisService:
    """Compose the analytics components into coaching reports."""

    def __init__(self, thresholds: EngineThresholds | None = None) -> None:
        self.thresholds = thresholds or DEFAULT_THRESHOLDS
        self.metabolic = MetabolicRateEstimator(self.thresholds)
        self.calories = CalorieBalanceClassifier(self.thresholds)
        self.scorer = MuscleGainScorer(self.thresholds)
        self.training = StrengthTrainingRecommender(self.thresholds)
        self.macros = MacroNutrientAnalyzer(self.thresholds)
        self.trends = TrendAnalyzer(self.thresholds)
        self.progress = ProgressAggregator(self.thresholds)

    def analyze(
        self,
        profile: BodyProfile,
        activity_level: ActivityLevel | str,
        day: DailyEnergyRecord,
        weekly_balances: Optional[Iterable[float]] = None,
        workouts: Iterable[WorkoutRecord] = (),
        current_muscle_mass: float = 0.0,
        target_muscle_mass: float = 0.0,
        now: Optional[datetime.datetime] = None,
    ) -> Dict[str, object]:
        """Return the full coaching report for one day.

        Efficiency is scored before the calorie range is classified since the
        classifier's optimal branch depends on it. ``weekly_balances`` defaults
        to the day's own balance.
        """
        now = now or datetime.datetime.now()
        bf = profile.body_fat_percent
        bmr, tdee = self.metabolic.estimate_from_profile(profile, activity_level)
        balance = self.calories.daily_balance(day.calories_consumed, day.calories_burned, bmr)
        balances = [balance] if weekly_balances is None else list(weekly_balances)
        summary = self.training.summarize(workouts, now)
        efficiency = self.scorer.breakdown(
            balance, day.protein_g, bf, summary.weekly_sessions
        )
        calorie_range = self.calories.classify(balance, bf, efficiency.total)
        prediction = self.training.predict(efficiency.total)
        window_min, window_max = self.calories.optimal_window(
            tdee, bf, summary.weekly_sessions
        )
        macros = self.macros.analyze(day.protein_g, day.carbs_g, day.fat_g)
        bmi = self.metabolic.body_mass_index(profile.weight_kg, profile.height_cm)
        logger.debug(
            "analysis for %s: balance=%.1f efficiency=%.3f range=%s",
            day.date,
            balance,
            efficiency.total,
            calorie_range.value,
        )
        return {
            "date": day.date.isoformat(),
            "bmr": round(bmr, 2),
            "tdee": round(tdee, 2),
            "bmi": bmi,
            "bmi_category": label(self.metabolic.classify_bmi(bmi)),
            "body_fat_category": label(self.metabolic.classify_body_fat(bf)),
            "calorie_targets": {
                "muscle_gain": round(self.metabolic.muscle_gain_calories(tdee, bf), 2),
                "fat_loss": round(self.metabolic.fat_loss_calories(tdee, bf), 2),
                "maintenance": round(self.metabolic.maintenance_calories(tdee), 2),
                "optimal_min": round(window_min, 2),
                "optimal_max": round(window_max, 2),
            },
            "daily_balance": round(balance, 2),
            "weekly_balance": round(self.calories.weekly_balance(balances), 2),
            "weekly_trend": label(self.calories.weekly_trend(balances)),
            "efficiency": dataclasses.asdict(efficiency),
            "calorie_range": label(calorie_range),
            "calorie_advice": label(self.calories.advice(calorie_range, bf, efficiency.total)),
            "weekly_sessions": summary.weekly_sessions,
            "average_duration_seconds": round(summary.average_duration_seconds, 2),
            "recommended_frequency": self.training.recommend_frequency(
                summary.weekly_sessions, efficiency.total, bf
            ),
            "prediction": label(prediction),
            "monthly_gain_kg": prediction.monthly_gain_kg,
            "months_to_goal": self.training.time_to_goal_months(
                current_muscle_mass, target_muscle_mass, prediction.monthly_gain_kg
            ),
            "training_advice": [
                label(a)
                for a in self.training.advice(
                    summary.weekly_sessions,
                    summary.average_duration_seconds,
                    efficiency.total,
                    bf,
                )
            ],
            "macros": self.macro_report(macros),
        }

    @staticmethod
    def macro_report(macros) -> Dict[str, object]:
        return {
            "total_calories": round(macros.total_calories, 2),
            "protein_percentage": round(macros.protein_percentage, 4),
            "carbs_percentage": round(macros.carbs_percentage, 4),
            "fat_percentage": round(macros.fat_percentage, 4),
            "protein": label_as(macros.protein_level, "protein"),
            "carbs": label_as(macros.carbs_level, "carbs"),
            "fat": label_as(macros.fat_level, "fat"),
        }

    def nutrition_report(self, day: NutritionSample) -> Dict[str, object]:
        """Return macro split, progress toward daily targets and warnings."""
        macros = self.macros.analyze(day.protein_g, day.carbs_g, day.fat_g)
        progress = self.macros.nutrition_progress(
            day.calories, day.protein_g, day.carbs_g, day.fat_g, day.water_ml
        )
        return {
            "date": day.date.isoformat(),
            "macros": self.macro_report(macros),
            "progress": dataclasses.asdict(progress),
            "advice": [
                label(a)
                for a in self.macros.nutrition_advice(day.calories, day.protein_g, day.water_ml)
            ],
        }

    def trend_report(
        self,
        workouts: Iterable[WorkoutSample],
        nutrition: Iterable[NutritionSample],
        body: Iterable[BodyCompositionSample],
        end_date: datetime.date,
        days: Optional[int] = None,
        body_weight_kg: Optional[float] = None,
        skip_empty_days: bool = False,
    ) -> Dict[str, object]:
        result = self.trends.analyze(
            workouts,
            nutrition,
            body,
            end_date,
            days=days,
            body_weight_kg=body_weight_kg,
            skip_empty_days=skip_empty_days,
        )
        window = days or self.thresholds.trend.window_days
        return {
            "optimal_calorie_surplus": round(result.optimal_calorie_surplus, 2),
            "optimal_workout_intensity": round(result.optimal_workout_intensity, 4),
            "recommended_protein_g": round(result.recommended_protein_g, 2),
            "monthly_muscle_gain_kg": round(result.monthly_muscle_gain_kg, 4),
            "monthly_fat_loss_kg": round(result.monthly_fat_loss_kg, 4),
            "efficiency_score": round(result.efficiency_score, 4),
            "last_7_days": self.trends.window_averages(result.points, 7, end_date),
            "window": self.trends.window_averages(result.points, window, end_date),
            "points": [
                dict(dataclasses.asdict(p), date=p.date.isoformat()) for p in result.points
            ],
        }

    def goals_report(self, goals: Iterable[Goal]) -> Dict[str, object]:
        goals = list(goals)
        overall = self.progress.overall_progress(goals)
        items: List[Dict[str, object]] = []
        for goal in goals:
            items.append(
                {
                    "title": goal.title,
                    "type": goal.goal_type.value,
                    "current": goal.current_value,
                    "target": goal.target_value,
                    "unit": goal.unit,
                    "progress": round(goal.progress, 4),
                    "completed": goal.is_completed,
                    "advice": label(self.progress.advice(goal.progress)),
                }
            )
        return {
            "overall_progress": round(overall, 4),
            "completion_ratio": round(self.progress.completion_ratio(goals), 4),
            "advice": label(self.progress.advice(overall)),
            "goals": items,
        }
