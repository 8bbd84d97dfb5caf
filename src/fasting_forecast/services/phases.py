"""Ketosis phase classification with smooth transitions between phases."""

from collections.abc import Callable, Sequence

from fasting_forecast.domain.forecast import PhaseResult, UnknownPhaseError
from fasting_forecast.domain.phases import (
    MIN_OPTIMAL_HORIZON_HOURS,
    OPTIMAL_HORIZON_HOURS,
    PHASE_TABLE,
    KetosisPhase,
    PhaseDescriptor,
)


def adjusted_bounds(
    adjustment_hours: float, table: Sequence[PhaseDescriptor] = PHASE_TABLE
) -> tuple[float, ...]:
    """Return each phase's adjusted lower bound followed by the final horizon.

    The first phase always starts at hour zero.
    """
    bounds = [0.0]
    for descriptor in table[1:]:
        bounds.append(
            max(
                descriptor.min_lower_bound_hours,
                descriptor.lower_bound_hours + adjustment_hours,
            )
        )
    bounds.append(
        max(MIN_OPTIMAL_HORIZON_HOURS, OPTIMAL_HORIZON_HOURS + adjustment_hours)
    )
    return tuple(bounds)


def phase_progress(hours: float, start: float, end: float) -> float:
    """Return how far ``hours`` is through ``[start, end]``, clamped to 0..1."""
    if hours <= start:
        return 0.0
    if hours >= end:
        return 1.0
    return (hours - start) / (end - start)


def interpolate_phase_value(
    index: int,
    progress: float,
    value: Callable[[PhaseDescriptor], float],
    table: Sequence[PhaseDescriptor] = PHASE_TABLE,
) -> float:
    """Blend a per-phase value from the previous phase into phase ``index``."""
    current = value(table[index])
    if index == 0:
        return current
    previous = value(table[index - 1])
    return previous + (current - previous) * progress


def classify_hour(
    cumulative_hours: float,
    adjustment_hours: float,
    table: Sequence[PhaseDescriptor] = PHASE_TABLE,
) -> PhaseResult:
    """Classify a fasting hour and return its interpolated phase values."""
    bounds = adjusted_bounds(adjustment_hours, table)
    index = 0
    for position, lower_bound in enumerate(bounds[: len(table)]):
        if cumulative_hours >= lower_bound:
            index = position
    progress = phase_progress(cumulative_hours, bounds[index], bounds[index + 1])
    protein = interpolate_phase_value(
        index, progress, lambda d: d.protein_kcal_per_day, table
    )
    preservation = interpolate_phase_value(
        index, progress, lambda d: d.preservation_fraction, table
    )
    return PhaseResult(
        phase=table[index].phase,
        protein_maintenance_kcal_per_day=protein,
        ffm_preservation_factor=1.0 - preservation,
    )


def phase_index(
    phase: KetosisPhase, table: Sequence[PhaseDescriptor] = PHASE_TABLE
) -> int:
    """Return the table position of ``phase``."""
    for position, descriptor in enumerate(table):
        if descriptor.phase == phase:
            return position
    raise UnknownPhaseError(f"Unknown ketosis phase: {phase!r}")


def describe_phase(
    phase: KetosisPhase, table: Sequence[PhaseDescriptor] = PHASE_TABLE
) -> PhaseDescriptor:
    """Return the base descriptor for ``phase``."""
    return table[phase_index(phase, table)]
