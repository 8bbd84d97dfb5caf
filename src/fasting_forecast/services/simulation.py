"""Hour-by-hour weekly simulation driver."""

from dataclasses import replace

from fasting_forecast.domain.forecast import (
    BodyComposition,
    FastingSchedule,
    HourDelta,
    OxidationMode,
    PhaseResult,
    SimulationParameters,
    SimulationState,
    WeekTotals,
)
from fasting_forecast.domain.phases import (
    FULL_KETOSIS_SHORTCUT_HOURS,
    PHASE_TABLE,
    KetosisPhase,
)
from fasting_forecast.services.partition import oxidation_mode, partition_energy
from fasting_forecast.services.phases import classify_hour, phase_index

HOURS_PER_WEEK = 168


def start_week() -> SimulationState:
    """Return the state at hour zero of a week."""
    return SimulationState()


def locate_block(hour: int, blocks: tuple[int, ...]) -> int | None:
    """Return the index of the block covering ``hour``, if any."""
    block_start = 0
    for index, length in enumerate(blocks):
        if block_start <= hour < block_start + length:
            return index
        block_start += length
    return None


def is_fasting_block(index: int) -> bool:
    """Blocks alternate fasting/feeding, starting with a fast."""
    return index % 2 == 0


def enter_hour(
    state: SimulationState, hour: int, schedule: FastingSchedule
) -> SimulationState:
    """Update block tracking and cumulative fasting hours for ``hour``."""
    index = locate_block(hour, schedule.blocks)
    if index is None or not is_fasting_block(index):
        # Cumulative hours survive the feeding window; the next block decides.
        return replace(state, current_block_index=None, hours_into_block=0)

    pre_adapted = schedule.ketosis_states[index]
    cumulative = state.cumulative_fasting_hours
    hours_into_block = state.hours_into_block
    if index != state.current_block_index:
        hours_into_block = 0
        if not pre_adapted:
            cumulative = 0

    hours_into_block += 1
    if pre_adapted and hours_into_block == 1:
        cumulative = FULL_KETOSIS_SHORTCUT_HOURS
    else:
        cumulative += 1

    return replace(
        state,
        current_block_index=index,
        hours_into_block=hours_into_block,
        cumulative_fasting_hours=cumulative,
    )


def classify_state(
    state: SimulationState, params: SimulationParameters
) -> PhaseResult:
    """Classify the current fasting hour."""
    return classify_hour(
        state.cumulative_fasting_hours, params.ketosis_timing_adjustment_hours
    )


def record_hour(
    state: SimulationState, phase: PhaseResult, delta: HourDelta
) -> SimulationState:
    """Accumulate one fasting hour's losses and phase tally."""
    phase_hours = list(state.phase_hours)
    phase_hours[phase_index(phase.phase)] += 1
    return replace(
        state,
        fat_loss_kg=state.fat_loss_kg + delta.fat_loss_kg,
        ffm_loss_kg=state.ffm_loss_kg + delta.ffm_loss_kg,
        phase_hours=tuple(phase_hours),
    )


def advance_hour(  # noqa: PLR0913
    state: SimulationState,
    hour: int,
    schedule: FastingSchedule,
    params: SimulationParameters,
    fat_mass: float,
    mode: OxidationMode,
) -> SimulationState:
    """Run one simulated hour and return the next state."""
    state = enter_hour(state, hour, schedule)
    if not state.is_fasting:
        return state
    phase = classify_state(state, params)
    delta = partition_energy(params.hourly_tdee, phase, fat_mass, mode)
    return record_hour(state, phase, delta)


def dominant_phase(phase_hours: tuple[int, ...]) -> KetosisPhase:
    """Return the phase with the most hours, earliest phase on ties."""
    position = max(range(len(phase_hours)), key=phase_hours.__getitem__)
    return PHASE_TABLE[position].phase


def simulate_week(
    params: SimulationParameters,
    schedule: FastingSchedule,
    composition: BodyComposition,
) -> WeekTotals:
    """Simulate 168 hours starting from ``composition``.

    Fat mass and oxidation mode are fixed from the week's starting
    composition for every hour of the week.
    """
    mode = oxidation_mode(composition.body_fat)
    state = start_week()
    for hour in range(HOURS_PER_WEEK):
        state = advance_hour(
            state, hour, schedule, params, composition.fat_mass, mode
        )
    return WeekTotals(
        fat_loss_kg=state.fat_loss_kg,
        ffm_loss_kg=state.ffm_loss_kg,
        dominant_phase=dominant_phase(state.phase_hours),
        phase_hours=state.phase_hours,
    )
