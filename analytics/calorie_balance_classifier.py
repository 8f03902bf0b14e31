from typing import Iterable

from analytics.math_tools import MathTools
from models import CalorieAdvice, CalorieRange, WeeklyCalorieTrend
from settings_schema import DEFAULT_THRESHOLDS, EngineThresholds


class CalorieBalanceClassifier:
    """Daily and weekly energy balance and its qualitative range."""

    def __init__(self, thresholds: EngineThresholds | None = None) -> None:
        self.thresholds = (thresholds or DEFAULT_THRESHOLDS).calorie

    @staticmethod
    def daily_balance(consumed: float, burned: float, bmr: float) -> float:
        """Return ``consumed - (burned + bmr)``; positive means surplus."""
        return MathTools.finite_or_zero(consumed - (burned + bmr))

    @staticmethod
    def weekly_balance(daily_balances: Iterable[float]) -> float:
        """Return the plain sum of the daily balances."""
        return MathTools.finite_or_zero(sum(daily_balances))

    def classify(
        self,
        daily_balance: float,
        body_fat_percent: float,
        muscle_gain_efficiency: float,
    ) -> CalorieRange:
        """Return the calorie range for a balance.

        Branches are checked in order and the first match wins: high body fat
        first, then high muscle-gain efficiency, then the default bands.
        """
        t = self.thresholds
        balance = MathTools.finite_or_zero(daily_balance)
        if body_fat_percent > t.high_body_fat:
            if balance < t.high_body_fat_deficit:
                return CalorieRange.DEFICIT
            if balance > t.high_body_fat_surplus:
                return CalorieRange.SURPLUS
            return CalorieRange.MAINTENANCE
        if muscle_gain_efficiency > t.efficiency_gate:
            if t.optimal_min <= balance <= t.optimal_max:
                return CalorieRange.OPTIMAL_MUSCLE_GAIN
            if balance > t.optimal_max:
                return CalorieRange.SURPLUS
            return CalorieRange.MAINTENANCE
        if balance < t.default_deficit:
            return CalorieRange.DEFICIT
        if balance > t.default_surplus:
            return CalorieRange.SURPLUS
        return CalorieRange.MAINTENANCE

    def advice(
        self,
        calorie_range: CalorieRange,
        body_fat_percent: float,
        muscle_gain_efficiency: float,
    ) -> CalorieAdvice:
        t = self.thresholds
        calorie_range = CalorieRange(calorie_range)
        if calorie_range is CalorieRange.DEFICIT:
            if body_fat_percent > t.high_body_fat:
                return CalorieAdvice.KEEP_CUTTING
            return CalorieAdvice.LIGHT_CUT
        if calorie_range is CalorieRange.MAINTENANCE:
            if muscle_gain_efficiency > t.advice_efficiency:
                return CalorieAdvice.RAISE_INTENSITY
            return CalorieAdvice.IMPROVE_PROTEIN_AND_FREQUENCY
        if calorie_range is CalorieRange.SURPLUS:
            if body_fat_percent < t.lean_body_fat:
                return CalorieAdvice.LEAN_SURPLUS
            return CalorieAdvice.EXCESS_SURPLUS
        return CalorieAdvice.IDEAL_BALANCE

    def optimal_window(
        self, tdee: float, body_fat_percent: float, weekly_sessions: int
    ) -> tuple[float, float]:
        """Return the ``(min, max)`` daily intake window in kcal."""
        t = self.thresholds
        if body_fat_percent > t.window_body_fat:
            low, high = t.cut_window
        elif weekly_sessions >= t.window_sessions:
            low, high = t.bulk_window
        else:
            low, high = t.default_window
        return tdee + low, tdee + high

    def weekly_trend(self, daily_balances: Iterable[float]) -> WeeklyCalorieTrend:
        t = self.thresholds
        balances = [MathTools.finite_or_zero(b) for b in daily_balances]
        if len(balances) < t.trend_days:
            return WeeklyCalorieTrend.INSUFFICIENT_DATA
        average = MathTools.mean(balances)
        positive = sum(1 for b in balances if b > 0)
        negative = sum(1 for b in balances if b < 0)
        if average > t.trend_band:
            return WeeklyCalorieTrend.SURPLUS
        if average < -t.trend_band:
            return WeeklyCalorieTrend.DEFICIT
        if positive > negative:
            return WeeklyCalorieTrend.BALANCED_SURPLUS
        return WeeklyCalorieTrend.SHORTFALL
