"""Split hourly energy expenditure between lean and fat tissue."""

from fasting_forecast.domain.forecast import HourDelta, OxidationMode, PhaseResult
from fasting_forecast.services.parameters import HOURS_PER_DAY

FAT_KCAL_PER_KG = 7700
FFM_KCAL_PER_KG = 1000
FAT_OXIDATION_CAP_KCAL_PER_KG_FAT_PER_DAY = 69
ADVANCED_MODE_MAX_BODY_FAT = 10


def oxidation_mode(body_fat: float) -> OxidationMode:
    """Return the oxidation mode for a body-fat percentage."""
    if body_fat <= ADVANCED_MODE_MAX_BODY_FAT:
        return OxidationMode.ADVANCED
    return OxidationMode.DEFAULT


def hourly_fat_oxidation_cap(fat_mass: float) -> float:
    """Return the most energy (kcal) fat can supply in one hour."""
    return FAT_OXIDATION_CAP_KCAL_PER_KG_FAT_PER_DAY / HOURS_PER_DAY * fat_mass


def partition_energy(
    hourly_tdee: float,
    phase: PhaseResult,
    fat_mass: float,
    mode: OxidationMode,
) -> HourDelta:
    """Return fat and lean mass lost during one fasting hour.

    Lean loss covers the phase's protein requirement, scaled by the phase's
    preservation factor. The rest of the hour's expenditure comes from fat;
    in advanced mode fat supply is capped and the shortfall is taken from
    lean mass instead.
    """
    ffm_kcal = phase.protein_maintenance_kcal_per_day / HOURS_PER_DAY
    ffm_loss = ffm_kcal / FFM_KCAL_PER_KG * phase.ffm_preservation_factor
    remaining_kcal = hourly_tdee - ffm_loss * FFM_KCAL_PER_KG
    if remaining_kcal <= 0:
        return HourDelta(fat_loss_kg=0.0, ffm_loss_kg=ffm_loss)

    if mode is OxidationMode.DEFAULT:
        return HourDelta(
            fat_loss_kg=remaining_kcal / FAT_KCAL_PER_KG, ffm_loss_kg=ffm_loss
        )

    fat_kcal = min(hourly_fat_oxidation_cap(fat_mass), remaining_kcal)
    shortfall_kcal = remaining_kcal - fat_kcal
    return HourDelta(
        fat_loss_kg=fat_kcal / FAT_KCAL_PER_KG,
        ffm_loss_kg=ffm_loss + shortfall_kcal / FFM_KCAL_PER_KG,
    )
