import os
import sys
import datetime
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from analysis_service import AnalysisService
from models import (
    ActivityType,
    BodyCompositionSample,
    BodyProfile,
    DailyEnergyRecord,
    NutritionSample,
    Sex,
    WorkoutRecord,
    WorkoutSample,
)


class AnalysisServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.service = AnalysisService()
        self.now = datetime.datetime(2024, 5, 10, 20, 0)
        self.profile = BodyProfile(
            weight_kg=70, height_cm=170, age=30, sex=Sex.MALE, body_fat_percent=12
        )
        self.day = DailyEnergyRecord(
            date=datetime.date(2024, 5, 10),
            calories_consumed=3200,
            calories_burned=300,
            protein_g=150,
            carbs_g=300,
            fat_g=80,
        )
        self.workouts = [
            WorkoutRecord(self.now - datetime.timedelta(days=d), 3600) for d in (1, 2, 4, 6)
        ]
        self.workouts.append(
            WorkoutRecord(self.now - datetime.timedelta(days=1), 1800, 300, ActivityType.RUNNING)
        )
        self.workouts.append(WorkoutRecord(self.now - datetime.timedelta(days=10), 3600))

    def test_analyze_pipeline(self) -> None:
        report = self.service.analyze(
            self.profile,
            "moderate",
            self.day,
            workouts=self.workouts,
            current_muscle_mass=30,
            target_muscle_mass=32,
            now=self.now,
        )
        self.assertEqual(report["date"], "2024-05-10")
        self.assertEqual(report["bmr"], 1617.5)
        self.assertAlmostEqual(report["tdee"], 2507.125, places=1)
        self.assertEqual(report["daily_balance"], 1282.5)
        self.assertEqual(report["weekly_balance"], 1282.5)
        self.assertEqual(report["weekly_trend"]["value"], "insufficient_data")
        self.assertEqual(report["weekly_sessions"], 4)
        self.assertEqual(report["average_duration_seconds"], 3600)
        self.assertEqual(report["efficiency"]["calorie_fit"], 0.0)
        self.assertAlmostEqual(report["efficiency"]["total"], 0.62)
        self.assertEqual(report["calorie_range"]["value"], "surplus")
        self.assertEqual(report["calorie_range"]["message"], "Calorie surplus")
        self.assertEqual(report["calorie_advice"]["value"], "lean_surplus")
        self.assertEqual(report["prediction"]["value"], "high")
        self.assertEqual(report["monthly_gain_kg"], 0.8)
        self.assertEqual(report["months_to_goal"], 3)
        self.assertEqual(report["recommended_frequency"], 4)
        self.assertEqual(report["training_advice"], [])
        self.assertEqual(report["bmi_category"]["value"], "normal")
        self.assertEqual(report["body_fat_category"]["value"], "low")
        self.assertEqual(report["macros"]["total_calories"], 2520)
        self.assertEqual(report["macros"]["protein"]["value"], "high")
        self.assertEqual(report["macros"]["carbs"]["value"], "adequate")

    def test_efficiency_gates_optimal_range(self) -> None:
        day = DailyEnergyRecord(
            date=datetime.date(2024, 5, 10),
            calories_consumed=2217.5,
            calories_burned=300,
            protein_g=150,
        )
        report = self.service.analyze(
            self.profile, "sedentary", day, workouts=self.workouts, now=self.now
        )
        # balance of 300 hits the bulk anchor so efficiency clears the gate
        self.assertEqual(report["daily_balance"], 300)
        self.assertGreater(report["efficiency"]["total"], 0.7)
        self.assertEqual(report["calorie_range"]["value"], "optimal_muscle_gain")
        self.assertEqual(report["calorie_advice"]["value"], "ideal_balance")

    def test_weekly_balances(self) -> None:
        report = self.service.analyze(
            self.profile,
            "moderate",
            self.day,
            weekly_balances=[400] * 7,
            now=self.now,
        )
        self.assertEqual(report["weekly_balance"], 2800)
        self.assertEqual(report["weekly_trend"]["value"], "surplus")
        self.assertEqual(report["weekly_sessions"], 0)

    def test_unknown_activity_level(self) -> None:
        with self.assertRaises(ValueError):
            self.service.analyze(self.profile, "couch", self.day, now=self.now)

    def test_nutrition_report(self) -> None:
        report = self.service.nutrition_report(
            NutritionSample(datetime.datetime(2024, 5, 10, 12), 1500, 90, 200, 50, 1500)
        )
        self.assertEqual(
            [a["value"] for a in report["advice"]],
            ["calories_low", "protein_low", "water_low"],
        )
        self.assertAlmostEqual(report["progress"]["calories"], 0.75)

    def test_trend_report(self) -> None:
        report = self.service.trend_report(
            [WorkoutSample(datetime.datetime(2024, 3, 10, 10), 3600, 560)],
            [NutritionSample(datetime.datetime(2024, 3, 10, 20), 2600)],
            [BodyCompositionSample(datetime.datetime(2024, 3, 10, 7), 75.0, 16.0)],
            datetime.date(2024, 3, 10),
            days=14,
        )
        self.assertEqual(len(report["points"]), 14)
        self.assertEqual(report["points"][-1]["date"], "2024-03-10")
        self.assertEqual(report["recommended_protein_g"], 150.0)
        self.assertEqual(report["last_7_days"]["days"], 7.0)
        self.assertEqual(report["window"]["days"], 14.0)

    def test_goals_report(self) -> None:
        goals = self.service.progress.default_goals(datetime.date(2024, 7, 1))
        goals[1] = goals[1].with_current(10000)
        report = self.service.goals_report(goals)
        self.assertEqual(len(report["goals"]), 6)
        self.assertAlmostEqual(report["overall_progress"], round(1 / 6, 4))
        self.assertAlmostEqual(report["completion_ratio"], round(1 / 6, 4))
        self.assertEqual(report["advice"]["value"], "behind")
        self.assertTrue(report["goals"][1]["completed"])


if __name__ == "__main__":
    unittest.main()
