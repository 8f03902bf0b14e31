import os
import sys
import math
import unittest
from concurrent.futures import ThreadPoolExecutor

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from analytics import engine
from models import CalorieRange, MuscleGainPrediction
from settings_schema import CalorieThresholds, EngineThresholds


class EngineTestCase(unittest.TestCase):
    def test_metabolic(self) -> None:
        bmr = engine.estimate_bmr(70, 170, 30, "male")
        self.assertAlmostEqual(bmr, 1617.5)
        self.assertAlmostEqual(engine.estimate_tdee(bmr, "sedentary"), 1941.0)

    def test_calorie_range(self) -> None:
        self.assertEqual(
            engine.classify_calorie_range(500, 18, 0.75), CalorieRange.OPTIMAL_MUSCLE_GAIN
        )
        self.assertEqual(engine.classify_calorie_range(501, 18, 0.75), CalorieRange.SURPLUS)
        wide = EngineThresholds(calorie=CalorieThresholds(optimal_max=600))
        self.assertEqual(
            engine.classify_calorie_range(550, 18, 0.75, thresholds=wide),
            CalorieRange.OPTIMAL_MUSCLE_GAIN,
        )

    def test_efficiency_and_training(self) -> None:
        score = engine.score_muscle_gain_efficiency(300, 1200, 15, 4)
        self.assertAlmostEqual(score, 0.9)
        self.assertEqual(engine.recommend_frequency(2, 0.2, 22), 3)
        prediction = engine.predict_muscle_gain(score)
        self.assertEqual(prediction, MuscleGainPrediction.EXCELLENT)
        self.assertEqual(engine.time_to_goal_months(45, 50, 0.5), 10)
        self.assertEqual(
            engine.time_to_goal_months(45, 50, prediction.monthly_gain_kg), 5
        )

    def test_macros_and_goals(self) -> None:
        macros = engine.analyze_macros(25, 50, 10)
        self.assertEqual(macros.total_calories, 390)
        self.assertAlmostEqual(engine.compute_goal_progress(2.5, 0, 5), 0.5)
        self.assertAlmostEqual(engine.compute_goal_progress(75, 80, 70, "decrease"), 0.5)

    def test_results_are_finite(self) -> None:
        for balance in (math.nan, math.inf, -math.inf):
            score = engine.score_muscle_gain_efficiency(balance, 100, 20, 3)
            self.assertTrue(math.isfinite(score))
            self.assertIsInstance(engine.classify_calorie_range(balance, 20, score), CalorieRange)

    def test_concurrent_calls_match_sequential(self) -> None:
        inputs = [(b, p, bf, s) for b in range(-600, 900, 150) for p in (40, 120) for bf in (12, 28) for s in (1, 5)]

        def run(args):
            balance, protein, body_fat, sessions = args
            score = engine.score_muscle_gain_efficiency(balance, protein, body_fat, sessions)
            return (
                score,
                engine.classify_calorie_range(balance, body_fat, score),
                engine.recommend_frequency(sessions, score, body_fat),
                engine.predict_muscle_gain(score),
            )

        expected = [run(args) for args in inputs]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(run, inputs))
        self.assertEqual(results, expected)


if __name__ == "__main__":
    unittest.main()
