import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from localization import Translator, translator
from models import (
    ActivityLevel,
    BmiCategory,
    BodyFatCategory,
    CalorieAdvice,
    CalorieRange,
    GoalType,
    MuscleGainPrediction,
    NutrientLevel,
    NutritionAdvice,
    ProgressAdvice,
    Sex,
    TrainingAdvice,
    WeeklyCalorieTrend,
)


class TranslatorTestCase(unittest.TestCase):
    def tearDown(self) -> None:
        translator.set_language("en")

    def test_gettext(self) -> None:
        t = Translator()
        self.assertEqual(t.gettext("calorie_range.surplus"), "Calorie surplus")
        t.set_language("ja")
        self.assertEqual(t.gettext("calorie_range.surplus"), "カロリー過多")

    def test_fallbacks(self) -> None:
        t = Translator()
        t.set_language("ja")
        del t.translations["ja"]["progress_advice.on_track"]
        self.assertEqual(
            t.gettext("progress_advice.on_track"), "On track. Keep going."
        )
        t.set_language("fr")
        self.assertEqual(t.gettext("sex.male"), "Male")
        self.assertEqual(t.gettext("missing.key"), "missing.key")

    def test_describe(self) -> None:
        self.assertEqual(
            translator.describe(CalorieRange.OPTIMAL_MUSCLE_GAIN), "Optimal for muscle gain"
        )
        self.assertEqual(
            translator.describe(NutrientLevel.ADEQUATE, "fat"), "Fat intake is appropriate."
        )
        translator.set_language("ja")
        self.assertEqual(translator.describe(MuscleGainPrediction.HIGH), "素晴らしい進捗です")

    def test_every_result_has_english_text(self) -> None:
        catalog = Translator().translations["en"]
        enums = [
            Sex,
            ActivityLevel,
            CalorieRange,
            MuscleGainPrediction,
            TrainingAdvice,
            CalorieAdvice,
            WeeklyCalorieTrend,
            NutritionAdvice,
            BmiCategory,
            BodyFatCategory,
            ProgressAdvice,
            GoalType,
        ]
        for enum in enums:
            for member in enum:
                self.assertNotEqual(translator.describe(member), "")
                key = translator.describe(member)
                self.assertIn(key, catalog.values(), f"{enum.__name__}.{member.value}")
        for prefix in ("protein", "carbs", "fat"):
            for level in NutrientLevel:
                self.assertIn(f"{prefix}.{level.value}", catalog)


if __name__ == "__main__":
    unittest.main()
