import dataclasses
import datetime
import logging
import math
from typing import List, Optional

from fastapi import APIRouter, Body, FastAPI, HTTPException
from pydantic import BaseModel, Field

from analysis_service import AnalysisService, label
from config import APP_VERSION, load_thresholds
from models import (
    ActivityLevel,
    ActivityType,
    BodyCompositionSample,
    BodyProfile,
    DailyEnergyRecord,
    Goal,
    GoalDirection,
    GoalType,
    NutritionSample,
    Sex,
    WorkoutRecord,
    WorkoutSample,
)
from settings_schema import EngineThresholds

logger = logging.getLogger(__name__)


def _require_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise HTTPException(status_code=400, detail=f"{name} must be a finite number")


class ProfileIn(BaseModel):
    weight_kg: float = Field(gt=0)
    height_cm: float = Field(gt=0)
    age: int = Field(ge=0)
    sex: str
    body_fat_percent: float = 20.0

    def to_model(self) -> BodyProfile:
        return BodyProfile(
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            age=self.age,
            sex=Sex(self.sex),
            body_fat_percent=self.body_fat_percent,
        )


class DayIn(BaseModel):
    date: datetime.date
    calories_consumed: float
    calories_burned: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0

    def to_model(self) -> DailyEnergyRecord:
        return DailyEnergyRecord(**self.model_dump())


class WorkoutIn(BaseModel):
    start: datetime.datetime
    duration_seconds: float = Field(ge=0)
    calories_burned: float = 0.0
    activity_type: str = ActivityType.TRADITIONAL_STRENGTH.value

    def to_model(self) -> WorkoutRecord:
        return WorkoutRecord(
            start=self.start,
            duration_seconds=self.duration_seconds,
            calories_burned=self.calories_burned,
            activity_type=ActivityType(self.activity_type),
        )


class AnalysisIn(BaseModel):
    profile: ProfileIn
    activity_level: str
    day: DayIn
    weekly_balances: Optional[List[float]] = None
    workouts: List[WorkoutIn] = []
    current_muscle_mass: float = 0.0
    target_muscle_mass: float = 0.0
    now: Optional[datetime.datetime] = None


class WorkoutSampleIn(BaseModel):
    date: datetime.datetime
    duration_seconds: float = Field(ge=0)
    calories_burned: float = 0.0
    workout_type: str = "strength"


class NutritionSampleIn(BaseModel):
    date: datetime.datetime
    calories: float
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    water_ml: float = 0.0


class BodySampleIn(BaseModel):
    date: datetime.datetime
    weight_kg: float
    body_fat_percent: float
    muscle_mass_kg: float = 0.0


class TrendIn(BaseModel):
    end_date: datetime.date
    days: Optional[int] = Field(default=None, gt=0)
    body_weight_kg: Optional[float] = None
    skip_empty_days: bool = False
    workouts: List[WorkoutSampleIn] = []
    nutrition: List[NutritionSampleIn] = []
    body: List[BodySampleIn] = []


class GoalIn(BaseModel):
    title: str
    goal_type: str
    current_value: float
    target_value: float
    unit: str = ""
    initial_value: float = 0.0
    direction: str = GoalDirection.INCREASE.value
    deadline: Optional[datetime.date] = None

    def to_model(self) -> Goal:
        return Goal(
            title=self.title,
            goal_type=GoalType(self.goal_type),
            current_value=self.current_value,
            target_value=self.target_value,
            unit=self.unit,
            initial_value=self.initial_value,
            direction=GoalDirection(self.direction),
            deadline=self.deadline,
        )


class FitnessAPI:
    """FastAPI application exposing the fitness analytics."""

    def __init__(
        self,
        thresholds: EngineThresholds | None = None,
        config_path: str | None = None,
    ) -> None:
        self.thresholds = thresholds or load_thresholds(config_path)
        self.service = AnalysisService(self.thresholds)
        self.app = FastAPI(
            title="Fitness Analytics API",
            description="REST API for calorie, training and goal analytics",
            version=APP_VERSION,
        )
        self._setup_routes()

    def _setup_routes(self) -> None:
        metabolic_router = APIRouter(prefix="/metabolic", tags=["Metabolic"])
        calories_router = APIRouter(prefix="/calories", tags=["Calories"])
        training_router = APIRouter(prefix="/training", tags=["Training"])
        nutrition_router = APIRouter(prefix="/nutrition", tags=["Nutrition"])
        goals_router = APIRouter(prefix="/goals", tags=["Goals"])
        svc = self.service

        @self.app.get("/health", summary="Health check")
        def health():
            return {"status": "ok", "version": APP_VERSION}

        @metabolic_router.get("/bmr")
        def bmr(weight: float, height: float, age: int, sex: str):
            _require_finite(weight=weight, height=height)
            try:
                value = svc.metabolic.estimate_bmr(weight, height, age, sex)
            except ValueError as e:
                raise HTTPException(status_code=400, detail=str(e))
            return {"bmr": round(value, 2)}

        @metabolic_router.get("/tdee")
        def tdee(bmr: float, activity_level: str):
            _require_finite(bmr=bmr)
            try:
                value = svc.metabolic.estimate_tdee(bmr, activity_level)
            except ValueError as e:
                raise HTTPException(status_code=400, detail=str(e))
            return {"tdee": round(value, 2), "activity_level": activity_level}

        @calories_router.get("/balance")
        def balance(consumed: float, burned: float, bmr: float):
            _require_finite(consumed=consumed, burned=burned, bmr=bmr)
            return {"balance": round(svc.calories.daily_balance(consumed, burned, bmr), 2)}

        @calories_router.post("/weekly")
        def weekly(balances: List[float] = Body(...)):
            return {
                "weekly_balance": round(svc.calories.weekly_balance(balances), 2),
                "trend": label(svc.calories.weekly_trend(balances)),
            }

        @calories_router.get("/range")
        def calorie_range(balance: float, body_fat: float, efficiency: float):
            result = svc.calories.classify(balance, body_fat, efficiency)
            advice = svc.calories.advice(result, body_fat, efficiency)
            return {"range": label(result), "advice": label(advice)}

        @self.app.get("/efficiency")
        def efficiency(balance: float, protein: float, body_fat: float, sessions: float):
            breakdown = svc.scorer.breakdown(balance, protein, body_fat, sessions)
            return dataclasses.asdict(breakdown)

        @training_router.get("/frequency")
        def frequency(current: int, efficiency: float, body_fat: Optional[float] = None):
            return {
                "frequency": svc.training.recommend_frequency(current, efficiency, body_fat)
            }

        @training_router.get("/prediction")
        def prediction(efficiency: float):
            result = svc.training.predict(efficiency)
            return {"prediction": label(result), "monthly_gain_kg": result.monthly_gain_kg}

        @training_router.get("/time_to_goal")
        def time_to_goal(current: float, target: float, monthly_gain: float):
            return {
                "months": svc.training.time_to_goal_months(current, target, monthly_gain)
            }

        @nutrition_router.get("/macros")
        def macros(protein: float, carbs: float, fat: float):
            _require_finite(protein=protein, carbs=carbs, fat=fat)
            return svc.macro_report(svc.macros.analyze(protein, carbs, fat))

        @nutrition_router.post("/report")
        def nutrition_report(day: NutritionSampleIn):
            return svc.nutrition_report(NutritionSample(**day.model_dump()))

        @goals_router.get("/progress")
        def goal_progress(
            current: float,
            target: float,
            initial: float = 0.0,
            direction: str = GoalDirection.INCREASE.value,
        ):
            try:
                value = svc.progress.goal_progress(current, initial, target, direction)
            except ValueError as e:
                raise HTTPException(status_code=400, detail=str(e))
            return {"progress": value, "advice": label(svc.progress.advice(value))}

        @goals_router.get("/defaults")
        def default_goals(deadline: Optional[datetime.date] = None):
            goals = svc.progress.default_goals(deadline)
            return svc.goals_report(goals)

        @goals_router.post("/report")
        def goals_report(goals: List[GoalIn]):
            try:
                items = [g.to_model() for g in goals]
            except ValueError as e:
                raise HTTPException(status_code=400, detail=str(e))
            return svc.goals_report(items)

        @self.app.post("/analysis")
        def analysis(payload: AnalysisIn):
            try:
                return svc.analyze(
                    payload.profile.to_model(),
                    ActivityLevel(payload.activity_level),
                    payload.day.to_model(),
                    payload.weekly_balances,
                    [w.to_model() for w in payload.workouts],
                    payload.current_muscle_mass,
                    payload.target_muscle_mass,
                    payload.now,
                )
            except ValueError as e:
                raise HTTPException(status_code=400, detail=str(e))

        @self.app.post("/trend")
        def trend(payload: TrendIn):
            logger.debug("trend request ending %s", payload.end_date)
            return svc.trend_report(
                [WorkoutSample(**w.model_dump()) for w in payload.workouts],
                [NutritionSample(**n.model_dump()) for n in payload.nutrition],
                [BodyCompositionSample(**b.model_dump()) for b in payload.body],
                payload.end_date,
                days=payload.days,
                body_weight_kg=payload.body_weight_kg,
                skip_empty_days=payload.skip_empty_days,
            )

        self.app.include_router(metabolic_router)
        self.app.include_router(calories_router)
        self.app.include_router(training_router)
        self.app.include_router(nutrition_router)
        self.app.include_router(goals_router)


api = FitnessAPI()
app = api.app

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app)
