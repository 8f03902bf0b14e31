from analytics.math_tools import MathTools
from models import MacroAnalysis, NutrientLevel, NutritionAdvice, NutritionProgress
from settings_schema import DEFAULT_THRESHOLDS, EngineThresholds


class MacroNutrientAnalyzer:
    """Macro-nutrient calorie split and per-nutrient intake bands.

    Calories here are derived from the macros themselves and are kept apart
    from the logged consumed-calorie figure used for energy balance.
    """

    def __init__(self, thresholds: EngineThresholds | None = None) -> None:
        self.thresholds = (thresholds or DEFAULT_THRESHOLDS).macros

    def derived_calories(self, protein_g: float, carbs_g: float, fat_g: float) -> float:
        t = self.thresholds
        return (
            protein_g * t.protein_kcal_per_g
            + carbs_g * t.carbs_kcal_per_g
            + fat_g * t.fat_kcal_per_g
        )

    @staticmethod
    def _band(grams: float, low: float, high: float) -> NutrientLevel:
        if grams < low:
            return NutrientLevel.LOW
        if grams > high:
            return NutrientLevel.HIGH
        return NutrientLevel.ADEQUATE

    def protein_level(self, protein_g: float) -> NutrientLevel:
        return self._band(protein_g, self.thresholds.protein_low_g, self.thresholds.protein_high_g)

    def carbs_level(self, carbs_g: float) -> NutrientLevel:
        return self._band(carbs_g, self.thresholds.carbs_low_g, self.thresholds.carbs_high_g)

    def fat_level(self, fat_g: float) -> NutrientLevel:
        return self._band(fat_g, self.thresholds.fat_low_g, self.thresholds.fat_high_g)

    def analyze(self, protein_g: float, carbs_g: float, fat_g: float) -> MacroAnalysis:
        """Return the percentage split (fractions) and intake level of each macro."""
        t = self.thresholds
        total = MathTools.finite_or_zero(self.derived_calories(protein_g, carbs_g, fat_g))
        if total > 0:
            protein_pct = MathTools.unit_score(protein_g * t.protein_kcal_per_g / total)
            carbs_pct = MathTools.unit_score(carbs_g * t.carbs_kcal_per_g / total)
            fat_pct = MathTools.unit_score(fat_g * t.fat_kcal_per_g / total)
        else:
            protein_pct = carbs_pct = fat_pct = 0.0
        return MacroAnalysis(
            total_calories=total,
            protein_percentage=protein_pct,
            carbs_percentage=carbs_pct,
            fat_percentage=fat_pct,
            protein_level=self.protein_level(protein_g),
            carbs_level=self.carbs_level(carbs_g),
            fat_level=self.fat_level(fat_g),
        )

    def _ratio(self, value: float, target: float) -> float:
        return MathTools.safe_ratio(value, target)

    def nutrition_progress(
        self,
        calories: float,
        protein_g: float,
        carbs_g: float,
        fat_g: float,
        water_ml: float = 0.0,
    ) -> NutritionProgress:
        """Return each intake as a fraction of its daily target, capped at 1."""
        t = self.thresholds
        return NutritionProgress(
            calories=MathTools.unit_score(self._ratio(calories, t.target_calories)),
            protein=MathTools.unit_score(self._ratio(protein_g, t.target_protein_g)),
            carbs=MathTools.unit_score(self._ratio(carbs_g, t.target_carbs_g)),
            fat=MathTools.unit_score(self._ratio(fat_g, t.target_fat_g)),
            water=MathTools.unit_score(self._ratio(water_ml, t.target_water_ml)),
        )

    def nutrition_advice(
        self, calories: float, protein_g: float, water_ml: float = 0.0
    ) -> list[NutritionAdvice]:
        """Return the day's intake warnings.

        The calorie check uses the uncapped ratio so that an excess can be
        reported.
        """
        t = self.thresholds
        advice: list[NutritionAdvice] = []
        calorie_ratio = self._ratio(calories, t.target_calories)
        if calorie_ratio < t.shortfall_ratio:
            advice.append(NutritionAdvice.CALORIES_LOW)
        elif calorie_ratio > t.excess_ratio:
            advice.append(NutritionAdvice.CALORIES_HIGH)
        if self._ratio(protein_g, t.target_protein_g) < t.shortfall_ratio:
            advice.append(NutritionAdvice.PROTEIN_LOW)
        if self._ratio(water_ml, t.target_water_ml) < t.shortfall_ratio:
            advice.append(NutritionAdvice.WATER_LOW)
        return advice
