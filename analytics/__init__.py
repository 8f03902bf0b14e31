from .math_tools import MathTools
from .metabolic_rate_estimator import MetabolicRateEstimator
from .calorie_balance_classifier import CalorieBalanceClassifier
from .muscle_gain_scorer import MuscleGainScorer
from .strength_training_recommender import StrengthTrainingRecommender
from .macro_nutrient_analyzer import MacroNutrientAnalyzer
from .trend_analyzer import TrendAnalyzer
from .progress_aggregator import ProgressAggregator

__all__ = [
    "MathTools",
    "MetabolicRateEstimator",
    "CalorieBalanceClassifier",
    "MuscleGainScorer",
    "StrengthTrainingRecommender",
    "MacroNutrientAnalyzer",
    "TrendAnalyzer",
    "ProgressAggregator",
]
