"""Forecast service running the weekly body-composition simulation."""

import logging
import math
from dataclasses import dataclass

from fasting_forecast.domain.forecast import (
    FastingSchedule,
    ForecastResult,
    InputProfile,
    InvalidProfileError,
)
from fasting_forecast.services.aggregation import (
    apply_week,
    build_weekly_result,
    initial_composition,
    initial_stats,
    summarize,
)
from fasting_forecast.services.parameters import resolve_parameters
from fasting_forecast.services.simulation import HOURS_PER_WEEK, simulate_week

_WEIGHT_UNITS = {"kg", "lb"}
_INSULIN_SENSITIVITIES = {"low", "normal", "high"}
_FASTING_EXPERIENCES = {"beginner", "intermediate", "advanced"}

_logger = logging.getLogger(__name__)


@dataclass
class ForecastService:
    """Service that forecasts body composition under a fasting schedule."""

    max_weeks: int = 520

    def forecast(self, profile: InputProfile) -> ForecastResult:
        """Validate ``profile`` and simulate it week by week."""
        self.validate(profile)
        params = resolve_parameters(profile)
        schedule = FastingSchedule(
            blocks=tuple(profile.fasting_blocks),
            ketosis_states=tuple(profile.ketosis_states),
        )
        start = initial_composition(params, profile.body_fat)
        composition = start
        weekly_results = []
        for week in range(1, profile.weeks + 1):
            totals = simulate_week(params, schedule, composition)
            previous = composition
            composition = apply_week(previous, totals)
            weekly_results.append(
                build_weekly_result(week, previous, composition, totals)
            )

        summary = summarize(start, composition, len(weekly_results))
        _logger.info(
            "Forecast complete: weeks=%s start_kg=%.2f final_kg=%.2f adjustment_h=%s",
            summary.total_weeks,
            params.weight_kg,
            summary.final_weight,
            params.ketosis_timing_adjustment_hours,
        )
        return ForecastResult(
            initial_stats=initial_stats(params, profile.body_fat),
            weekly_results=weekly_results,
            summary=summary,
        )

    def validate(self, profile: InputProfile) -> None:  # noqa: PLR0912
        """Raise InvalidProfileError when ``profile`` cannot be simulated."""
        if not _is_positive(profile.weight):
            raise InvalidProfileError("weight must be a positive finite number")
        if profile.weight_unit not in _WEIGHT_UNITS:
            raise InvalidProfileError(
                f"weightUnit must be 'kg' or 'lb', got {profile.weight_unit!r}"
            )
        body_fat = profile.body_fat
        if not (math.isfinite(body_fat) and 0 < body_fat <= 100):  # noqa: PLR2004
            raise InvalidProfileError("bodyFat must be within (0, 100]")
        if not _is_positive(profile.activity_level):
            raise InvalidProfileError("activityLevel must be a positive finite number")
        if profile.tdee_override is not None and not _is_positive(
            profile.tdee_override
        ):
            raise InvalidProfileError(
                "tdeeOverride must be a positive finite number when provided"
            )
        if any(length < 0 for length in profile.fasting_blocks):
            raise InvalidProfileError("fastingBlocks must not contain negative hours")
        if len(profile.ketosis_states) != len(profile.fasting_blocks):
            raise InvalidProfileError(
                "ketosisStates must have one entry per fasting block "
                f"({len(profile.ketosis_states)} != {len(profile.fasting_blocks)})"
            )
        if profile.weeks < 1:
            raise InvalidProfileError("weeks must be at least 1")
        if profile.weeks > self.max_weeks:
            raise InvalidProfileError(f"weeks must be at most {self.max_weeks}")
        if profile.insulin_sensitivity not in _INSULIN_SENSITIVITIES:
            raise InvalidProfileError(
                f"Unknown insulinSensitivity: {profile.insulin_sensitivity!r}"
            )
        if profile.fasting_experience not in _FASTING_EXPERIENCES:
            raise InvalidProfileError(
                f"Unknown fastingExperience: {profile.fasting_experience!r}"
            )

        total_hours = sum(profile.fasting_blocks)
        if total_hours != HOURS_PER_WEEK:
            _logger.warning(
                "Fasting blocks cover %s hours instead of %s",
                total_hours,
                HOURS_PER_WEEK,
            )


def _is_positive(value: float) -> bool:
    """Return true for finite numbers above zero."""
    return math.isfinite(value) and value > 0
