"""Pydantic models for the forecast endpoint."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from fasting_forecast.domain.forecast import ForecastResult, InputProfile


class CalculateRequest(BaseModel):
    """Forecast request payload."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    weight: float
    weight_unit: Literal["kg", "lb"] = "kg"
    body_fat: float
    activity_level: float
    tdee_override: float | None = None
    fasting_blocks: list[int]
    ketosis_states: list[bool] | None = None
    weeks: int | None = None
    insulin_sensitivity: Literal["low", "normal", "high"] | None = None
    fasting_experience: Literal["beginner", "intermediate", "advanced"] | None = None
    body_fat_percentage: float | None = None

    def to_profile(self, default_weeks: int) -> InputProfile:
        """Convert the payload into an input profile, filling defaults."""
        ketosis_states = (
            self.ketosis_states
            if self.ketosis_states is not None
            else [False] * len(self.fasting_blocks)
        )
        return InputProfile(
            weight=self.weight,
            weight_unit=self.weight_unit,
            body_fat=self.body_fat,
            activity_level=self.activity_level,
            tdee_override=self.tdee_override,
            fasting_blocks=tuple(self.fasting_blocks),
            ketosis_states=tuple(ketosis_states),
            weeks=self.weeks if self.weeks is not None else default_weeks,
            insulin_sensitivity=self.insulin_sensitivity or "normal",
            fasting_experience=self.fasting_experience or "beginner",
            body_fat_percentage=self.body_fat_percentage,
        )


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InitialStatsPayload(_CamelModel):
    """Starting stats in the response."""

    weight: float
    body_fat: float
    fat_mass: float
    fat_free_mass: float
    bmr: float
    daily_tdee: float = Field(alias="dailyTDEE")


class WeeklyResultPayload(_CamelModel):
    """One simulated week in the response."""

    week: int
    weight: float
    body_fat: float
    fat_mass: float
    fat_free_mass: float
    weekly_fat_loss: float
    weekly_ffm_loss: float = Field(alias="weeklyFFMLoss")
    total_weight_loss: float
    ketosis_phase: str
    protein_maintenance: float
    ffm_preservation: float


class SummaryPayload(_CamelModel):
    """Forecast totals in the response."""

    total_weeks: int
    final_weight: float
    final_body_fat: float
    total_fat_lost: float
    total_ffm_lost: float = Field(alias="totalFFMLost")
    total_weight_lost: float


class CalculateResponse(_CamelModel):
    """Forecast response payload."""

    initial_stats: InitialStatsPayload
    weekly_results: list[WeeklyResultPayload]
    summary: SummaryPayload

    @classmethod
    def from_result(cls, result: ForecastResult) -> "CalculateResponse":
        """Build the response from a forecast result."""
        stats = result.initial_stats
        summary = result.summary
        return cls(
            initial_stats=InitialStatsPayload(
                weight=stats.weight,
                body_fat=stats.body_fat,
                fat_mass=stats.fat_mass,
                fat_free_mass=stats.fat_free_mass,
                bmr=stats.bmr,
                daily_tdee=stats.daily_tdee,
            ),
            weekly_results=[
                WeeklyResultPayload(
                    week=week.week,
                    weight=week.weight,
                    body_fat=week.body_fat,
                    fat_mass=week.fat_mass,
                    fat_free_mass=week.fat_free_mass,
                    weekly_fat_loss=week.weekly_fat_loss,
                    weekly_ffm_loss=week.weekly_ffm_loss,
                    total_weight_loss=week.total_weight_loss,
                    ketosis_phase=week.ketosis_phase.value,
                    protein_maintenance=week.protein_maintenance,
                    ffm_preservation=week.ffm_preservation,
                )
                for week in result.weekly_results
            ],
            summary=SummaryPayload(
                total_weeks=summary.total_weeks,
                final_weight=summary.final_weight,
                final_body_fat=summary.final_body_fat,
                total_fat_lost=summary.total_fat_lost,
                total_ffm_lost=summary.total_ffm_lost,
                total_weight_lost=summary.total_weight_lost,
            ),
        )
