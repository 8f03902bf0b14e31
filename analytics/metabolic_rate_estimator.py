from models import ActivityLevel, BmiCategory, BodyFatCategory, BodyProfile, Sex
from settings_schema import DEFAULT_THRESHOLDS, EngineThresholds


class MetabolicRateEstimator:
    """Basal and maintenance calorie baselines from body stats."""

    def __init__(self, thresholds: EngineThresholds | None = None) -> None:
        self.thresholds = (thresholds or DEFAULT_THRESHOLDS).metabolic

    @staticmethod
    def estimate_bmr(weight: float, height: float, age: int, sex: Sex | str) -> float:
        """Return basal metabolic rate in kcal/day using Mifflin-St Jeor.

        ``weight`` is in kg and ``height`` in cm. Non-finite inputs are not
        guarded; callers validate that the body stats are positive.
        """
        sex = Sex(sex)
        base = (10 * weight) + (6.25 * height) - (5 * float(age))
        if sex is Sex.MALE:
            return base + 5
        return base - 161

    @staticmethod
    def estimate_tdee(bmr: float, activity_level: ActivityLevel | str) -> float:
        """Return total daily energy expenditure for ``activity_level``."""
        return bmr * ActivityLevel(activity_level).multiplier

    def estimate_from_profile(
        self, profile: BodyProfile, activity_level: ActivityLevel | str
    ) -> tuple[float, float]:
        """Return ``(bmr, tdee)`` for a body profile."""
        bmr = self.estimate_bmr(profile.weight_kg, profile.height_cm, profile.age, profile.sex)
        return bmr, self.estimate_tdee(bmr, activity_level)

    def muscle_gain_calories(self, tdee: float, body_fat_percent: float) -> float:
        """Daily intake target for gaining muscle.

        Above the body-fat threshold a light deficit is used instead of a surplus.
        """
        t = self.thresholds
        if body_fat_percent > t.gain_body_fat:
            return tdee - t.gain_cut_deficit
        return tdee + t.gain_surplus

    def fat_loss_calories(self, tdee: float, body_fat_percent: float) -> float:
        t = self.thresholds
        if body_fat_percent > t.fat_loss_body_fat:
            return tdee - t.aggressive_deficit
        return tdee - t.moderate_deficit

    def maintenance_calories(self, tdee: float) -> float:
        return tdee + self.thresholds.maintenance_surplus

    @staticmethod
    def body_mass_index(weight: float, height_cm: float) -> float:
        if height_cm <= 0:
            return 0.0
        height_m = height_cm / 100.0
        return round(weight / (height_m**2), 2)

    @staticmethod
    def classify_bmi(bmi: float) -> BmiCategory:
        if bmi < 18.5:
            return BmiCategory.UNDERWEIGHT
        if bmi < 25:
            return BmiCategory.NORMAL
        if bmi < 30:
            return BmiCategory.OVERWEIGHT
        return BmiCategory.OBESE

    @staticmethod
    def classify_body_fat(body_fat_percent: float) -> BodyFatCategory:
        # general thresholds, not adjusted for age or sex
        if body_fat_percent < 10:
            return BodyFatCategory.VERY_LOW
        if body_fat_percent < 15:
            return BodyFatCategory.LOW
        if body_fat_percent < 20:
            return BodyFatCategory.NORMAL
        if body_fat_percent < 25:
            return BodyFatCategory.HIGH
        return BodyFatCategory.VERY_HIGH
