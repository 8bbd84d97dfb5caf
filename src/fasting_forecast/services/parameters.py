"""Simulation constants derived from an input profile."""

from fasting_forecast.domain.forecast import InputProfile, SimulationParameters

LB_TO_KG = 0.453592
HOURS_PER_DAY = 24

_INSULIN_SENSITIVITY_HOURS = {"low": 4, "normal": 0, "high": -4}
_FASTING_EXPERIENCE_HOURS = {"beginner": 6, "intermediate": 2, "advanced": -6}

HIGH_BODY_FAT_PERCENT = 25
LOW_BODY_FAT_PERCENT = 15


def resolve_parameters(profile: InputProfile) -> SimulationParameters:
    """Compute BMR, TDEE and the personalized ketosis timing offset."""
    weight_kg = to_kilograms(profile.weight, profile.weight_unit)
    fat_mass_kg = weight_kg * profile.body_fat / 100
    ffm_kg = weight_kg - fat_mass_kg
    bmr = katch_mcardle_bmr(ffm_kg)
    tdee = (
        profile.tdee_override
        if profile.tdee_override is not None
        else bmr * profile.activity_level
    )
    return SimulationParameters(
        weight_kg=weight_kg,
        fat_mass_kg=fat_mass_kg,
        ffm_kg=ffm_kg,
        bmr=bmr,
        tdee=tdee,
        hourly_tdee=tdee / HOURS_PER_DAY,
        ketosis_timing_adjustment_hours=ketosis_timing_adjustment(profile),
    )


def to_kilograms(weight: float, unit: str) -> float:
    """Convert a weight to kilograms."""
    if unit == "lb":
        return weight * LB_TO_KG
    return weight


def katch_mcardle_bmr(ffm_kg: float) -> float:
    """Return resting expenditure in kcal/day from lean mass."""
    return 370 + 21.6 * ffm_kg


def ketosis_timing_adjustment(profile: InputProfile) -> int:
    """Return hours added to every phase threshold (negative is faster)."""
    body_fat = (
        profile.body_fat_percentage
        if profile.body_fat_percentage is not None
        else profile.body_fat
    )
    adjustment = _INSULIN_SENSITIVITY_HOURS[profile.insulin_sensitivity]
    adjustment += _FASTING_EXPERIENCE_HOURS[profile.fasting_experience]
    if body_fat > HIGH_BODY_FAT_PERCENT:
        adjustment -= 2
    elif body_fat < LOW_BODY_FAT_PERCENT:
        adjustment += 2
    return adjustment
