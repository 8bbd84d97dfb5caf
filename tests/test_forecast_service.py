"""Tests for the forecast service."""

import math

import pytest

from fasting_forecast.domain.forecast import InvalidProfileError
from fasting_forecast.services.forecast import ForecastService
from fasting_forecast.services.partition import FAT_KCAL_PER_KG
from fasting_forecast.services.simulation import HOURS_PER_WEEK


def test_sixteen_eight_example_loses_weight_in_one_week(
    forecast_service: ForecastService, profile_factory
) -> None:
    profile = profile_factory(
        weight=200,
        weight_unit="lb",
        body_fat=25,
        activity_level=1.4,
        fasting_blocks=(16, 8, 16, 8, 16, 8, 16, 8, 16, 8, 16, 8, 16, 24),
        weeks=1,
    )

    result = forecast_service.forecast(profile)

    assert len(result.weekly_results) == 1
    assert result.weekly_results[0].weight < 200 * 0.453592
    assert result.summary.total_weeks == 1
    assert result.initial_stats.weight == pytest.approx(200 * 0.453592)


@pytest.mark.parametrize(
    "overrides",
    [
        {},
        {"weeks": 8, "fasting_blocks": (72, 96)},
        {"weeks": 5, "body_fat": 9, "fasting_blocks": (36, 12, 36, 84)},
        {"weeks": 3, "tdee_override": 3200, "fasting_experience": "advanced"},
    ],
)
def test_weight_lost_equals_fat_plus_lean_lost(
    forecast_service: ForecastService, profile_factory, overrides: dict
) -> None:
    result = forecast_service.forecast(profile_factory(**overrides))
    summary = result.summary

    assert summary.total_weight_lost == pytest.approx(
        summary.total_fat_lost + summary.total_ffm_lost
    )
    assert sum(week.total_weight_loss for week in result.weekly_results) == (
        pytest.approx(summary.total_weight_lost)
    )


def test_schedule_without_fasting_hours_loses_nothing(
    forecast_service: ForecastService, profile_factory
) -> None:
    profile = profile_factory(fasting_blocks=(0, 168), weeks=3)

    result = forecast_service.forecast(profile)

    for week in result.weekly_results:
        assert week.weekly_fat_loss == 0
        assert week.weekly_ffm_loss == 0
    assert result.summary.final_weight == pytest.approx(90, rel=1e-12)


def test_empty_schedule_loses_nothing(
    forecast_service: ForecastService, profile_factory
) -> None:
    profile = profile_factory(fasting_blocks=(), ketosis_states=(), weeks=2)

    result = forecast_service.forecast(profile)

    assert len(result.weekly_results) == 2
    for week in result.weekly_results:
        assert week.weekly_fat_loss == 0
        assert week.weekly_ffm_loss == 0
    assert result.summary.final_weight == pytest.approx(
        result.initial_stats.weight, rel=1e-12
    )
    assert result.summary.total_weight_lost == pytest.approx(0, abs=1e-12)


def test_low_body_fat_caps_weekly_fat_loss(
    forecast_service: ForecastService, profile_factory
) -> None:
    profile = profile_factory(
        weight=70, body_fat=8, activity_level=1.5, fasting_blocks=(168,), weeks=4
    )

    result = forecast_service.forecast(profile)

    previous_fat = result.initial_stats.fat_mass
    previous_body_fat = result.initial_stats.body_fat
    for week in result.weekly_results:
        if previous_body_fat <= 10:
            cap = HOURS_PER_WEEK * (69 / 24) * previous_fat / FAT_KCAL_PER_KG
            assert week.weekly_fat_loss <= cap + 1e-9
        previous_fat = week.fat_mass
        previous_body_fat = week.body_fat
    first = result.weekly_results[0]
    assert first.weekly_ffm_loss > HOURS_PER_WEEK * 160 / 24 / 1000


def test_exhausted_tissue_is_clamped(
    forecast_service: ForecastService, profile_factory
) -> None:
    profile = profile_factory(
        weight=40, body_fat=5, tdee_override=5000, fasting_blocks=(168,), weeks=30
    )

    result = forecast_service.forecast(profile)

    for week in result.weekly_results:
        assert week.fat_mass >= 0
        assert week.fat_free_mass >= 0
        assert week.weight >= 0
        assert 0 <= week.body_fat <= 100
        assert not math.isnan(week.body_fat)
    assert result.summary.final_weight == 0
    assert result.summary.final_body_fat == 0


def test_identical_inputs_give_identical_forecasts(
    forecast_service: ForecastService, profile_factory
) -> None:
    profile = profile_factory(
        weeks=6,
        ketosis_states=(True,) + (False,) * 13,
        insulin_sensitivity="high",
    )

    assert forecast_service.forecast(profile) == forecast_service.forecast(profile)


def test_pre_adapted_blocks_preserve_more_lean_mass(
    forecast_service: ForecastService, profile_factory
) -> None:
    blocks = (16, 8, 16, 8, 16, 8, 16, 8, 16, 8, 16, 8, 16, 8)
    fresh = forecast_service.forecast(profile_factory(fasting_blocks=blocks))
    adapted = forecast_service.forecast(
        profile_factory(
            fasting_blocks=blocks,
            ketosis_states=tuple(index % 2 == 0 for index in range(len(blocks))),
        )
    )

    assert adapted.summary.total_ffm_lost < fresh.summary.total_ffm_lost
    assert adapted.weekly_results[0].ketosis_phase.value in {
        "fullKetosis",
        "optimalKetosis",
    }


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"weight": 0}, "weight"),
        ({"weight_unit": "stone"}, "weightUnit"),
        ({"body_fat": 0}, "bodyFat"),
        ({"body_fat": 101}, "bodyFat"),
        ({"activity_level": -1}, "activityLevel"),
        ({"tdee_override": 0}, "tdeeOverride"),
        ({"weight": float("nan")}, "weight"),
        ({"weight": float("inf")}, "weight"),
        ({"body_fat": float("nan")}, "bodyFat"),
        ({"activity_level": float("nan")}, "activityLevel"),
        ({"activity_level": float("inf")}, "activityLevel"),
        ({"tdee_override": float("nan")}, "tdeeOverride"),
        ({"tdee_override": float("inf")}, "tdeeOverride"),
        ({"fasting_blocks": (16, -8)}, "negative"),
        ({"ketosis_states": (False,)}, "ketosisStates"),
        ({"weeks": 0}, "weeks"),
        ({"weeks": 53}, "at most 52"),
        ({"insulin_sensitivity": "extreme"}, "insulinSensitivity"),
        ({"fasting_experience": "expert"}, "fastingExperience"),
    ],
)
def test_invalid_profiles_are_rejected(
    forecast_service: ForecastService, profile_factory, overrides: dict, message: str
) -> None:
    with pytest.raises(InvalidProfileError, match=message):
        forecast_service.forecast(profile_factory(**overrides))
