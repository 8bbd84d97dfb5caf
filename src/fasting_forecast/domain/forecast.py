"""Domain models for body-composition forecasts."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from fasting_forecast.domain.phases import PHASE_TABLE, KetosisPhase

WeightUnit = Literal["kg", "lb"]
InsulinSensitivity = Literal["low", "normal", "high"]
FastingExperience = Literal["beginner", "intermediate", "advanced"]


class InvalidProfileError(ValueError):
    """Raised when a forecast request cannot be simulated."""


class UnknownPhaseError(RuntimeError):
    """Raised when a phase is missing from the phase table."""


class OxidationMode(str, Enum):
    """How fat oxidation is limited for a simulated week."""

    DEFAULT = "default"
    ADVANCED = "advanced"


@dataclass(frozen=True)
class InputProfile:
    """Starting body composition, fasting pattern and personalization."""

    weight: float
    body_fat: float
    activity_level: float
    fasting_blocks: tuple[int, ...]
    ketosis_states: tuple[bool, ...]
    weight_unit: WeightUnit = "kg"
    weeks: int = 12
    tdee_override: float | None = None
    insulin_sensitivity: InsulinSensitivity = "normal"
    fasting_experience: FastingExperience = "beginner"
    body_fat_percentage: float | None = None


@dataclass(frozen=True)
class SimulationParameters:
    """Constants derived once per forecast."""

    weight_kg: float
    fat_mass_kg: float
    ffm_kg: float
    bmr: float
    tdee: float
    hourly_tdee: float
    ketosis_timing_adjustment_hours: float


@dataclass(frozen=True)
class FastingSchedule:
    """Alternating fasting/feeding blocks, starting with a fast."""

    blocks: tuple[int, ...]
    ketosis_states: tuple[bool, ...]


@dataclass(frozen=True)
class BodyComposition:
    """Body composition at a week boundary."""

    fat_mass: float
    ffm: float
    weight: float
    body_fat: float


@dataclass(frozen=True)
class PhaseResult:
    """Classifier output for one fasting hour."""

    phase: KetosisPhase
    protein_maintenance_kcal_per_day: float
    ffm_preservation_factor: float


@dataclass(frozen=True)
class HourDelta:
    """Tissue lost during one fasting hour."""

    fat_loss_kg: float
    ffm_loss_kg: float


def _empty_phase_hours() -> tuple[int, ...]:
    return tuple(0 for _ in PHASE_TABLE)


@dataclass(frozen=True)
class SimulationState:
    """Hour-by-hour state of the weekly driver."""

    cumulative_fasting_hours: float = 0
    current_block_index: int | None = None
    hours_into_block: int = 0
    fat_loss_kg: float = 0.0
    ffm_loss_kg: float = 0.0
    phase_hours: tuple[int, ...] = field(default_factory=_empty_phase_hours)

    @property
    def is_fasting(self) -> bool:
        """Return true while a fasting block is active."""
        return self.current_block_index is not None


@dataclass(frozen=True)
class WeekTotals:
    """Losses accumulated over one simulated week."""

    fat_loss_kg: float
    ffm_loss_kg: float
    dominant_phase: KetosisPhase
    phase_hours: tuple[int, ...]


@dataclass(frozen=True)
class WeeklyResult:
    """Body composition at the end of a simulated week."""

    week: int
    weight: float
    body_fat: float
    fat_mass: float
    fat_free_mass: float
    weekly_fat_loss: float
    weekly_ffm_loss: float
    total_weight_loss: float
    ketosis_phase: KetosisPhase
    protein_maintenance: float
    ffm_preservation: float


@dataclass(frozen=True)
class InitialStats:
    """Starting body composition and energy expenditure."""

    weight: float
    body_fat: float
    fat_mass: float
    fat_free_mass: float
    bmr: float
    daily_tdee: float


@dataclass(frozen=True)
class ForecastSummary:
    """Totals over the whole forecast."""

    total_weeks: int
    final_weight: float
    final_body_fat: float
    total_fat_lost: float
    total_ffm_lost: float
    total_weight_lost: float


@dataclass(frozen=True)
class ForecastResult:
    """Complete forecast output."""

    initial_stats: InitialStats
    weekly_results: list[WeeklyResult]
    summary: ForecastSummary
