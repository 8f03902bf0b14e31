from __future__ import annotations
import datetime
import math
from dataclasses import dataclass, field, replace
from enum import Enum


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Activity level with its TDEE multiplier."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    VERY_ACTIVE = "very_active"
    EXTREME = "extreme"

    @property
    def multiplier(self) -> float:
        return ACTIVITY_MULTIPLIERS[self]


ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTREME: 1.9,
}


class CalorieRange(str, Enum):
    DEFICIT = "deficit"
    MAINTENANCE = "maintenance"
    SURPLUS = "surplus"
    OPTIMAL_MUSCLE_GAIN = "optimal_muscle_gain"


class MuscleGainPrediction(str, Enum):
    """Predicted muscle gain category bound to a monthly gain in kg."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    EXCELLENT = "excellent"

    @property
    def monthly_gain_kg(self) -> float:
        return MONTHLY_GAIN_KG[self]


MONTHLY_GAIN_KG: dict[MuscleGainPrediction, float] = {
    MuscleGainPrediction.LOW: 0.2,
    MuscleGainPrediction.MODERATE: 0.5,
    MuscleGainPrediction.HIGH: 0.8,
    MuscleGainPrediction.EXCELLENT: 1.2,
}


class ActivityType(str, Enum):
    TRADITIONAL_STRENGTH = "traditional_strength"
    FUNCTIONAL_STRENGTH = "functional_strength"
    CORE_TRAINING = "core_training"
    RUNNING = "running"
    CYCLING = "cycling"
    WALKING = "walking"
    OTHER = "other"


class TrainingAdvice(str, Enum):
    INCREASE_FREQUENCY = "increase_frequency"
    REDUCE_FOR_RECOVERY = "reduce_for_recovery"
    EXTEND_SESSION = "extend_session"
    SHORTEN_SESSION = "shorten_session"
    REDUCE_BODY_FAT_FIRST = "reduce_body_fat_first"
    RAISE_INTENSITY = "raise_intensity"
    MAINTAIN_PACE = "maintain_pace"


class CalorieAdvice(str, Enum):
    KEEP_CUTTING = "keep_cutting"
    LIGHT_CUT = "light_cut"
    RAISE_INTENSITY = "raise_intensity"
    IMPROVE_PROTEIN_AND_FREQUENCY = "improve_protein_and_frequency"
    LEAN_SURPLUS = "lean_surplus"
    EXCESS_SURPLUS = "excess_surplus"
    IDEAL_BALANCE = "ideal_balance"


class WeeklyCalorieTrend(str, Enum):
    INSUFFICIENT_DATA = "insufficient_data"
    SURPLUS = "surplus"
    DEFICIT = "deficit"
    BALANCED_SURPLUS = "balanced_surplus"
    SHORTFALL = "shortfall"


class NutrientLevel(str, Enum):
    LOW = "low"
    ADEQUATE = "adequate"
    HIGH = "high"


class NutritionAdvice(str, Enum):
    CALORIES_LOW = "calories_low"
    CALORIES_HIGH = "calories_high"
    PROTEIN_LOW = "protein_low"
    WATER_LOW = "water_low"


class BmiCategory(str, Enum):
    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"


class BodyFatCategory(str, Enum):
    VERY_LOW = "very_low"
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    VERY_HIGH = "very_high"


class GoalType(str, Enum):
    WEIGHT = "weight"
    STEPS = "steps"
    CALORIES = "calories"
    EXERCISE = "exercise"
    WATER = "water"
    SLEEP = "sleep"


class GoalDirection(str, Enum):
    INCREASE = "increase"
    DECREASE = "decrease"


def directional_progress(
    current: float, initial: float, target: float, direction: GoalDirection | str
) -> float:
    """Fraction of the way from ``initial`` to ``target``, clamped to [0, 1].

    A goal that requires no change (``target == initial``) reports 0.
    """
    direction = GoalDirection(direction)
    if target == initial:
        return 0.0
    if direction is GoalDirection.DECREASE:
        ratio = (initial - current) / (initial - target)
    else:
        ratio = (current - initial) / (target - initial)
    if not math.isfinite(ratio):
        return 1.0 if ratio > 0 else 0.0
    return min(max(ratio, 0.0), 1.0)



class ProgressAdvice(str, Enum):
    BEHIND = "behind"
    ON_TRACK = "on_track"
    NEARLY_THERE = "nearly_there"


@dataclass(frozen=True)
class BodyProfile:
    weight_kg: float
    height_cm: float
    age: int
    sex: Sex
    body_fat_percent: float = 20.0


@dataclass(frozen=True)
class DailyEnergyRecord:
    """Aggregated energy and macro totals for one calendar day."""

    date: datetime.date
    calories_consumed: float
    calories_burned: float
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0


@dataclass(frozen=True)
class WorkoutRecord:
    start: datetime.datetime
    duration_seconds: float
    calories_burned: float = 0.0
    activity_type: ActivityType = ActivityType.TRADITIONAL_STRENGTH


@dataclass(frozen=True)
class WorkoutSummary:
    weekly_sessions: int
    average_duration_seconds: float


@dataclass(frozen=True)
class EfficiencyBreakdown:
    calorie_fit: float
    protein: float
    workout: float
    body_fat: float
    total: float


@dataclass(frozen=True)
class MacroAnalysis:
    total_calories: float
    protein_percentage: float
    carbs_percentage: float
    fat_percentage: float
    protein_level: NutrientLevel
    carbs_level: NutrientLevel
    fat_level: NutrientLevel


@dataclass(frozen=True)
class NutritionProgress:
    calories: float
    protein: float
    carbs: float
    fat: float
    water: float


@dataclass(frozen=True)
class Goal:
    """A goal snapshot; progress is measured from ``initial_value``."""

    title: str
    goal_type: GoalType
    current_value: float
    target_value: float
    unit: str
    initial_value: float = 0.0
    direction: GoalDirection = GoalDirection.INCREASE
    deadline: datetime.date | None = None

    @property
    def is_completed(self) -> bool:
        return self.current_value >= self.target_value

    @property
    def progress(self) -> float:
        return directional_progress(
            self.current_value, self.initial_value, self.target_value, self.direction
        )

    def with_current(self, current_value: float) -> "Goal":
        return replace(self, current_value=current_value)


@dataclass(frozen=True)
class WorkoutSample:
    date: datetime.datetime
    duration_seconds: float
    calories_burned: float
    workout_type: str = "strength"


@dataclass(frozen=True)
class NutritionSample:
    date: datetime.datetime
    calories: float
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    water_ml: float = 0.0


@dataclass(frozen=True)
class BodyCompositionSample:
    date: datetime.datetime
    weight_kg: float
    body_fat_percent: float
    muscle_mass_kg: float = 0.0


@dataclass(frozen=True)
class FitnessDataPoint:
    date: datetime.date
    calories_in: float
    calories_out: float
    body_fat_percent: float
    workout_intensity: float
    muscle_gain_efficiency: float
    fat_loss_efficiency: float

    @property
    def calorie_surplus(self) -> float:
        return self.calories_in - self.calories_out


@dataclass(frozen=True)
class TrendAnalysisResult:
    optimal_calorie_surplus: float = 0.0
    optimal_workout_intensity: float = 0.0
    recommended_protein_g: float = 0.0
    monthly_muscle_gain_kg: float = 0.0
    monthly_fat_loss_kg: float = 0.0
    efficiency_score: float = 0.0
    points: tuple[FitnessDataPoint, ...] = field(default_factory=tuple)
