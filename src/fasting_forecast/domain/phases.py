"""Ketosis phase table used by the simulation."""

from dataclasses import dataclass
from enum import Enum


class KetosisPhase(str, Enum):
    """Metabolic stage reached during a fast."""

    GLYCOGEN_DEPLETION = "glycogenDepletion"
    EARLY_KETOSIS = "earlyKetosis"
    FULL_KETOSIS = "fullKetosis"
    OPTIMAL_KETOSIS = "optimalKetosis"


@dataclass(frozen=True)
class PhaseDescriptor:
    """Entry thresholds and protein-sparing values for a phase.

    ``lower_bound_hours`` is the unadjusted number of cumulative fasting hours
    at which the phase begins; personalization shifts it but never below
    ``min_lower_bound_hours``.
    """

    phase: KetosisPhase
    lower_bound_hours: float
    min_lower_bound_hours: float
    protein_kcal_per_day: float
    preservation_fraction: float


PHASE_TABLE: tuple[PhaseDescriptor, ...] = (
    PhaseDescriptor(
        phase=KetosisPhase.GLYCOGEN_DEPLETION,
        lower_bound_hours=0,
        min_lower_bound_hours=0,
        protein_kcal_per_day=160,
        preservation_fraction=0.0,
    ),
    PhaseDescriptor(
        phase=KetosisPhase.EARLY_KETOSIS,
        lower_bound_hours=16,
        min_lower_bound_hours=8,
        protein_kcal_per_day=120,
        preservation_fraction=0.15,
    ),
    PhaseDescriptor(
        phase=KetosisPhase.FULL_KETOSIS,
        lower_bound_hours=24,
        min_lower_bound_hours=16,
        protein_kcal_per_day=50,
        preservation_fraction=0.30,
    ),
    PhaseDescriptor(
        phase=KetosisPhase.OPTIMAL_KETOSIS,
        lower_bound_hours=48,
        min_lower_bound_hours=32,
        protein_kcal_per_day=40,
        preservation_fraction=0.40,
    ),
)

# Hours at which the optimal phase finishes blending in its values.
OPTIMAL_HORIZON_HOURS = 72
MIN_OPTIMAL_HORIZON_HOURS = 56

# Cumulative hours assigned on the first hour of a block that starts keto-adapted.
FULL_KETOSIS_SHORTCUT_HOURS = 48
