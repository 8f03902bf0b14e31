import os
import sys
import datetime
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from analytics import MacroNutrientAnalyzer
from models import DailyEnergyRecord, NutrientLevel, NutritionAdvice


class MacroNutrientAnalyzerTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.analyzer = MacroNutrientAnalyzer()

    def test_percentages(self) -> None:
        result = self.analyzer.analyze(25, 50, 10)
        self.assertEqual(result.total_calories, 390)
        self.assertAlmostEqual(result.protein_percentage, 0.2564, places=4)
        self.assertAlmostEqual(result.carbs_percentage, 0.5128, places=4)
        self.assertAlmostEqual(result.fat_percentage, 0.2308, places=4)
        self.assertAlmostEqual(
            result.protein_percentage + result.carbs_percentage + result.fat_percentage,
            1.0,
        )

    def test_zero_macros(self) -> None:
        result = self.analyzer.analyze(0, 0, 0)
        self.assertEqual(result.total_calories, 0)
        self.assertEqual(result.protein_percentage, 0.0)
        self.assertEqual(result.carbs_percentage, 0.0)
        self.assertEqual(result.fat_percentage, 0.0)

    def test_levels(self) -> None:
        self.assertEqual(self.analyzer.protein_level(59), NutrientLevel.LOW)
        self.assertEqual(self.analyzer.protein_level(120), NutrientLevel.ADEQUATE)
        self.assertEqual(self.analyzer.protein_level(121), NutrientLevel.HIGH)
        self.assertEqual(self.analyzer.carbs_level(300), NutrientLevel.ADEQUATE)
        self.assertEqual(self.analyzer.carbs_level(301), NutrientLevel.HIGH)
        self.assertEqual(self.analyzer.fat_level(29), NutrientLevel.LOW)
        self.assertEqual(self.analyzer.fat_level(80), NutrientLevel.ADEQUATE)

    def test_derived_calories_independent_of_logged_intake(self) -> None:
        day = DailyEnergyRecord(
            date=datetime.date(2024, 5, 10),
            calories_consumed=2000,
            calories_burned=0,
            protein_g=25,
            carbs_g=50,
            fat_g=10,
        )
        result = self.analyzer.analyze(day.protein_g, day.carbs_g, day.fat_g)
        self.assertEqual(result.total_calories, 390)
        self.assertEqual(day.calories_consumed, 2000)

    def test_nutrition_progress(self) -> None:
        progress = self.analyzer.nutrition_progress(1000, 60, 125, 33.5, 1000)
        self.assertAlmostEqual(progress.calories, 0.5)
        self.assertAlmostEqual(progress.protein, 0.5)
        self.assertAlmostEqual(progress.carbs, 0.5)
        self.assertAlmostEqual(progress.fat, 0.5)
        self.assertAlmostEqual(progress.water, 0.5)
        capped = self.analyzer.nutrition_progress(4000, 240, 500, 134)
        self.assertEqual(capped.calories, 1.0)
        self.assertEqual(capped.water, 0.0)

    def test_nutrition_advice(self) -> None:
        self.assertEqual(
            self.analyzer.nutrition_advice(1500, 90, 1500),
            [
                NutritionAdvice.CALORIES_LOW,
                NutritionAdvice.PROTEIN_LOW,
                NutritionAdvice.WATER_LOW,
            ],
        )
        self.assertEqual(
            self.analyzer.nutrition_advice(2500, 120, 2000),
            [NutritionAdvice.CALORIES_HIGH],
        )
        self.assertEqual(self.analyzer.nutrition_advice(2000, 120, 2000), [])


if __name__ == "__main__":
    unittest.main()
