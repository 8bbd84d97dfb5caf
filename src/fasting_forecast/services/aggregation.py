"""Apply weekly losses to body composition and build forecast records."""

from fasting_forecast.domain.forecast import (
    BodyComposition,
    ForecastSummary,
    InitialStats,
    SimulationParameters,
    WeeklyResult,
    WeekTotals,
)
from fasting_forecast.services.phases import describe_phase


def initial_composition(
    params: SimulationParameters, body_fat: float
) -> BodyComposition:
    """Return the starting composition."""
    return BodyComposition(
        fat_mass=params.fat_mass_kg,
        ffm=params.ffm_kg,
        weight=params.weight_kg,
        body_fat=body_fat,
    )


def initial_stats(params: SimulationParameters, body_fat: float) -> InitialStats:
    """Return the starting stats reported alongside a forecast."""
    return InitialStats(
        weight=params.weight_kg,
        body_fat=body_fat,
        fat_mass=params.fat_mass_kg,
        fat_free_mass=params.ffm_kg,
        bmr=params.bmr,
        daily_tdee=params.tdee,
    )


def apply_week(composition: BodyComposition, totals: WeekTotals) -> BodyComposition:
    """Subtract a week's losses, clamping to physically valid values."""
    fat_mass = max(composition.fat_mass - totals.fat_loss_kg, 0.0)
    ffm = max(composition.ffm - totals.ffm_loss_kg, 0.0)
    weight = max(fat_mass + ffm, 0.0)
    body_fat = fat_mass / weight * 100 if weight > 0 else 0.0
    return BodyComposition(
        fat_mass=fat_mass,
        ffm=ffm,
        weight=weight,
        body_fat=min(max(body_fat, 0.0), 100.0),
    )


def build_weekly_result(
    week: int,
    previous: BodyComposition,
    current: BodyComposition,
    totals: WeekTotals,
) -> WeeklyResult:
    """Return the record for a finished week."""
    descriptor = describe_phase(totals.dominant_phase)
    fat_loss = previous.fat_mass - current.fat_mass
    ffm_loss = previous.ffm - current.ffm
    return WeeklyResult(
        week=week,
        weight=current.weight,
        body_fat=current.body_fat,
        fat_mass=current.fat_mass,
        fat_free_mass=current.ffm,
        weekly_fat_loss=fat_loss,
        weekly_ffm_loss=ffm_loss,
        total_weight_loss=fat_loss + ffm_loss,
        ketosis_phase=totals.dominant_phase,
        protein_maintenance=descriptor.protein_kcal_per_day,
        ffm_preservation=descriptor.preservation_fraction * 100,
    )


def summarize(
    initial: BodyComposition, final: BodyComposition, total_weeks: int
) -> ForecastSummary:
    """Return totals lost over the whole forecast."""
    return ForecastSummary(
        total_weeks=total_weeks,
        final_weight=final.weight,
        final_body_fat=final.body_fat,
        total_fat_lost=initial.fat_mass - final.fat_mass,
        total_ffm_lost=initial.ffm - final.ffm,
        total_weight_lost=initial.weight - final.weight,
    )
