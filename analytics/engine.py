"""Plain function entry points over the analytics components.

Each call builds a short-lived component around ``thresholds`` (the defaults
when omitted). Units are kg, cm, kcal and seconds; scores are fractions.
"""

from analytics.calorie_balance_classifier import CalorieBalanceClassifier
from analytics.macro_nutrient_analyzer import MacroNutrientAnalyzer
from analytics.metabolic_rate_estimator import MetabolicRateEstimator
from analytics.muscle_gain_scorer import MuscleGainScorer
from analytics.progress_aggregator import ProgressAggregator
from analytics.strength_training_recommender import StrengthTrainingRecommender
from models import (
    ActivityLevel,
    CalorieRange,
    GoalDirection,
    MacroAnalysis,
    MuscleGainPrediction,
    Sex,
)
from settings_schema import EngineThresholds


def estimate_bmr(weight: float, height: float, age: int, sex: Sex | str) -> float:
    return MetabolicRateEstimator.estimate_bmr(weight, height, age, sex)


def estimate_tdee(bmr: float, activity_level: ActivityLevel | str) -> float:
    return MetabolicRateEstimator.estimate_tdee(bmr, activity_level)


def classify_calorie_range(
    daily_balance: float,
    body_fat_percent: float,
    muscle_gain_efficiency: float,
    thresholds: EngineThresholds | None = None,
) -> CalorieRange:
    return CalorieBalanceClassifier(thresholds).classify(
        daily_balance, body_fat_percent, muscle_gain_efficiency
    )


def score_muscle_gain_efficiency(
    daily_balance: float,
    protein_grams: float,
    body_fat_percent: float,
    weekly_sessions: float,
    thresholds: EngineThresholds | None = None,
) -> float:
    return MuscleGainScorer(thresholds).score(
        daily_balance, protein_grams, body_fat_percent, weekly_sessions
    )


def recommend_frequency(
    current_frequency: int,
    efficiency: float,
    body_fat_percent: float | None = None,
    thresholds: EngineThresholds | None = None,
) -> int:
    return StrengthTrainingRecommender(thresholds).recommend_frequency(
        current_frequency, efficiency, body_fat_percent
    )


def predict_muscle_gain(
    efficiency: float, thresholds: EngineThresholds | None = None
) -> MuscleGainPrediction:
    """Return the prediction; ``.monthly_gain_kg`` gives its kg per month."""
    return StrengthTrainingRecommender(thresholds).predict(efficiency)


def time_to_goal_months(current: float, target: float, monthly_gain_kg: float) -> int:
    return StrengthTrainingRecommender.time_to_goal_months(current, target, monthly_gain_kg)


def analyze_macros(
    protein_g: float,
    carbs_g: float,
    fat_g: float,
    thresholds: EngineThresholds | None = None,
) -> MacroAnalysis:
    return MacroNutrientAnalyzer(thresholds).analyze(protein_g, carbs_g, fat_g)


def compute_goal_progress(
    current: float,
    initial: float,
    target: float,
    direction: GoalDirection | str = GoalDirection.INCREASE,
) -> float:
    return ProgressAggregator.goal_progress(current, initial, target, direction)
