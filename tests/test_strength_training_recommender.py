import os
import sys
import math
import datetime
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from analytics import StrengthTrainingRecommender
from models import ActivityType, MuscleGainPrediction, TrainingAdvice, WorkoutRecord


class StrengthTrainingRecommenderTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.recommender = StrengthTrainingRecommender()
        self.now = datetime.datetime(2024, 5, 10, 12, 0)

    def _workout(self, days_ago: float, duration: float = 3600, kind=ActivityType.TRADITIONAL_STRENGTH):
        return WorkoutRecord(
            start=self.now - datetime.timedelta(days=days_ago),
            duration_seconds=duration,
            activity_type=kind,
        )

    def test_recommend_frequency(self) -> None:
        r = self.recommender
        self.assertEqual(r.recommend_frequency(1, 0.2), 3)
        self.assertEqual(r.recommend_frequency(4, 0.2), 5)
        self.assertEqual(r.recommend_frequency(4, 0.8), 4)
        self.assertEqual(r.recommend_frequency(1, 0.5), 2)
        self.assertEqual(r.recommend_frequency(3, 0.5), 3)
        self.assertEqual(r.recommend_frequency(1, 0.3), 2)
        self.assertEqual(r.recommend_frequency(1, 0.7, body_fat_percent=30), 2)

    def test_predict(self) -> None:
        r = self.recommender
        self.assertEqual(r.predict(0.85), MuscleGainPrediction.EXCELLENT)
        self.assertEqual(r.predict(0.8), MuscleGainPrediction.EXCELLENT)
        self.assertEqual(r.predict(0.6), MuscleGainPrediction.HIGH)
        self.assertEqual(r.predict(0.4), MuscleGainPrediction.MODERATE)
        self.assertEqual(r.predict(0.39), MuscleGainPrediction.LOW)
        self.assertEqual(r.predict(math.nan), MuscleGainPrediction.LOW)
        self.assertEqual(MuscleGainPrediction.LOW.monthly_gain_kg, 0.2)
        self.assertEqual(MuscleGainPrediction.MODERATE.monthly_gain_kg, 0.5)
        self.assertEqual(MuscleGainPrediction.HIGH.monthly_gain_kg, 0.8)
        self.assertEqual(MuscleGainPrediction.EXCELLENT.monthly_gain_kg, 1.2)

    def test_time_to_goal(self) -> None:
        r = self.recommender
        self.assertEqual(r.time_to_goal_months(45, 50, 0.5), 10)
        self.assertEqual(r.time_to_goal_months(45, 50, 0.8), 7)
        self.assertEqual(r.time_to_goal_months(50, 45, 0.5), 0)
        self.assertEqual(r.time_to_goal_months(45, 50, 0), 0)
        self.assertEqual(r.time_to_goal_months(45, 50, -1), 0)
        self.assertEqual(r.time_to_goal_months(45, 50, math.nan), 0)
        self.assertEqual(r.time_to_goal_months(45, math.inf, 0.5), 0)

    def test_advice_order(self) -> None:
        self.assertEqual(
            self.recommender.advice(2, 1200, 0.3, 28),
            [
                TrainingAdvice.INCREASE_FREQUENCY,
                TrainingAdvice.EXTEND_SESSION,
                TrainingAdvice.REDUCE_BODY_FAT_FIRST,
                TrainingAdvice.RAISE_INTENSITY,
            ],
        )
        self.assertEqual(
            self.recommender.advice(6, 6000, 0.8, 15),
            [
                TrainingAdvice.REDUCE_FOR_RECOVERY,
                TrainingAdvice.SHORTEN_SESSION,
                TrainingAdvice.MAINTAIN_PACE,
            ],
        )
        self.assertEqual(self.recommender.advice(4, 3600, 0.5, 20), [])

    def test_weekly_frequency_counts_strength_only(self) -> None:
        workouts = [
            self._workout(1),
            self._workout(3),
            self._workout(7),
            self._workout(8),
            self._workout(1, kind=ActivityType.RUNNING),
        ]
        self.assertEqual(self.recommender.weekly_frequency(workouts, self.now), 3)

    def test_summarize(self) -> None:
        workouts = [
            self._workout(1, 1800),
            self._workout(2, 5400),
            self._workout(2, 600, kind=ActivityType.WALKING),
        ]
        summary = self.recommender.summarize(iter(workouts), self.now)
        self.assertEqual(summary.weekly_sessions, 2)
        self.assertAlmostEqual(summary.average_duration_seconds, 3600)
        empty = self.recommender.summarize([], self.now)
        self.assertEqual(empty.weekly_sessions, 0)
        self.assertEqual(empty.average_duration_seconds, 0.0)

    def test_muscle_gain_potential(self) -> None:
        self.assertAlmostEqual(
            self.recommender.muscle_gain_potential(4, 3600, 15, 1.0), 0.9
        )
        self.assertEqual(self.recommender.muscle_gain_potential(0, 0, 40, 0.0), 0.0)


if __name__ == "__main__":
    unittest.main()
