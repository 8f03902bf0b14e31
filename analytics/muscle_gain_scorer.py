from analytics.math_tools import MathTools
from models import EfficiencyBreakdown
from settings_schema import DEFAULT_THRESHOLDS, EngineThresholds


class MuscleGainScorer:
    """Composite 0-1 muscle-gain efficiency from four weighted sub-scores.

    The composite feeds the optimal-range branch of the calorie classifier
    and the strength recommender, so pipelines compute it before classifying.
    """

    def __init__(self, thresholds: EngineThresholds | None = None) -> None:
        self.thresholds = (thresholds or DEFAULT_THRESHOLDS).efficiency

    def calorie_fit_score(self, daily_balance: float, body_fat_percent: float) -> float:
        """Reward a balance near the cut anchor (high body fat) or bulk anchor."""
        t = self.thresholds
        anchor = t.cut_anchor if body_fat_percent > t.body_fat_cut else t.bulk_anchor
        return MathTools.anchored_score(daily_balance, anchor, t.balance_span)

    def protein_score(self, protein_grams: float) -> float:
        target = self.thresholds.protein_target_g
        if target == 0:
            return 0.0
        return MathTools.unit_score(protein_grams / target)

    def workout_score(self, weekly_sessions: float) -> float:
        target = self.thresholds.session_target
        if target == 0:
            return 0.0
        return MathTools.unit_score(weekly_sessions / target)

    def body_fat_score(self, body_fat_percent: float) -> float:
        ceiling = self.thresholds.body_fat_ceiling
        if ceiling == 0:
            return 0.0
        return MathTools.unit_score(1.0 - body_fat_percent / ceiling)

    def breakdown(
        self,
        daily_balance: float,
        protein_grams: float,
        body_fat_percent: float,
        weekly_sessions: float,
    ) -> EfficiencyBreakdown:
        t = self.thresholds
        calorie = self.calorie_fit_score(daily_balance, body_fat_percent)
        protein = self.protein_score(protein_grams)
        workout = self.workout_score(weekly_sessions)
        body_fat = self.body_fat_score(body_fat_percent)
        total = (
            calorie * t.calorie_weight
            + protein * t.protein_weight
            + workout * t.workout_weight
            + body_fat * t.body_fat_weight
        )
        return EfficiencyBreakdown(
            calorie_fit=calorie,
            protein=protein,
            workout=workout,
            body_fat=body_fat,
            total=MathTools.unit_score(total),
        )

    def score(
        self,
        daily_balance: float,
        protein_grams: float,
        body_fat_percent: float,
        weekly_sessions: float,
    ) -> float:
        """Return the composite efficiency in [0, 1]."""
        return self.breakdown(
            daily_balance, protein_grams, body_fat_percent, weekly_sessions
        ).total
