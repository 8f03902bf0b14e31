from pydantic import BaseModel, ConfigDict, ValidationError


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class MetabolicThresholds(_Frozen):
    gain_body_fat: float = 20.0
    gain_cut_deficit: float = 200.0
    gain_surplus: float = 300.0
    fat_loss_body_fat: float = 25.0
    aggressive_deficit: float = 500.0
    moderate_deficit: float = 300.0
    maintenance_surplus: float = 100.0


class CalorieThresholds(_Frozen):
    high_body_fat: float = 25.0
    high_body_fat_deficit: float = -300.0
    high_body_fat_surplus: float = 100.0
    efficiency_gate: float = 0.7
    optimal_min: float = 200.0
    optimal_max: float = 500.0
    default_deficit: float = -200.0
    default_surplus: float = 300.0
    advice_efficiency: float = 0.6
    lean_body_fat: float = 15.0
    trend_days: int = 7
    trend_band: float = 300.0
    window_body_fat: float = 20.0
    window_sessions: int = 4
    cut_window: tuple[float, float] = (-300.0, -100.0)
    bulk_window: tuple[float, float] = (200.0, 400.0)
    default_window: tuple[float, float] = (-100.0, 200.0)


class EfficiencyThresholds(_Frozen):
    body_fat_cut: float = 20.0
    cut_anchor: float = -200.0
    bulk_anchor: float = 300.0
    balance_span: float = 500.0
    protein_target_g: float = 120.0
    session_target: float = 4.0
    body_fat_ceiling: float = 30.0
    calorie_weight: float = 0.3
    protein_weight: float = 0.3
    workout_weight: float = 0.2
    body_fat_weight: float = 0.2


class TrainingThresholds(_Frozen):
    low_efficiency: float = 0.3
    high_efficiency: float = 0.7
    boost_floor: int = 3
    keep_floor: int = 2
    excellent_score: float = 0.8
    high_score: float = 0.6
    moderate_score: float = 0.4
    min_sessions: int = 3
    max_sessions: int = 5
    min_duration_seconds: float = 1800.0
    max_duration_seconds: float = 5400.0
    high_body_fat: float = 25.0
    advice_low_efficiency: float = 0.4
    advice_high_efficiency: float = 0.7
    window_days: int = 7
    reference_duration_seconds: float = 3600.0
    potential_session_target: float = 4.0
    potential_body_fat_ceiling: float = 30.0
    potential_frequency_weight: float = 0.3
    potential_duration_weight: float = 0.2
    potential_body_fat_weight: float = 0.2
    potential_nutrition_weight: float = 0.3


class MacroThresholds(_Frozen):
    protein_kcal_per_g: float = 4.0
    carbs_kcal_per_g: float = 4.0
    fat_kcal_per_g: float = 9.0
    protein_low_g: float = 60.0
    protein_high_g: float = 120.0
    carbs_low_g: float = 100.0
    carbs_high_g: float = 300.0
    fat_low_g: float = 30.0
    fat_high_g: float = 80.0
    target_calories: float = 2000.0
    target_protein_g: float = 120.0
    target_carbs_g: float = 250.0
    target_fat_g: float = 67.0
    target_water_ml: float = 2000.0
    shortfall_ratio: float = 0.8
    excess_ratio: float = 1.2


class TrendThresholds(_Frozen):
    window_days: int = 30
    default_intake_kcal: float = 2000.0
    default_body_fat: float = 20.0
    max_calories_per_hour: float = 800.0
    muscle_surplus_anchor: float = 350.0
    muscle_intensity_anchor: float = 0.7
    muscle_surplus_weight: float = 0.6
    muscle_intensity_weight: float = 0.4
    fat_deficit_anchor: float = 500.0
    fat_intensity_anchor: float = 0.65
    fat_deficit_weight: float = 0.7
    fat_intensity_weight: float = 0.3
    top_days: int = 5
    monthly_gain_baseline_kg: float = 0.5
    monthly_loss_baseline_kg: float = 0.8
    protein_per_kg: float = 2.0
    default_body_weight_kg: float = 70.0


class ProgressThresholds(_Frozen):
    behind: float = 0.3
    on_track: float = 0.7


class EngineThresholds(_Frozen):
    """Every tunable number the coaching formulas use."""

    metabolic: MetabolicThresholds = MetabolicThresholds()
    calorie: CalorieThresholds = CalorieThresholds()
    efficiency: EfficiencyThresholds = EfficiencyThresholds()
    training: TrainingThresholds = TrainingThresholds()
    macros: MacroThresholds = MacroThresholds()
    trend: TrendThresholds = TrendThresholds()
    progress: ProgressThresholds = ProgressThresholds()


DEFAULT_THRESHOLDS = EngineThresholds()


def validate_settings(data: dict) -> EngineThresholds:
    try:
        return EngineThresholds(**data)
    except ValidationError as e:
        raise ValueError(str(e))
