"""Shared test fixtures."""

from collections.abc import Callable

import pytest

from fasting_forecast.config import Settings
from fasting_forecast.containers import AppContainer
from fasting_forecast.domain.forecast import InputProfile
from fasting_forecast.services.forecast import ForecastService

SIXTEEN_EIGHT_BLOCKS = (16, 8, 16, 8, 16, 8, 16, 8, 16, 8, 16, 8, 16, 24)


def make_profile(**overrides: object) -> InputProfile:
    """Build a valid input profile for tests."""
    values: dict[str, object] = {
        "weight": 90.0,
        "weight_unit": "kg",
        "body_fat": 20.0,
        "activity_level": 1.4,
        "fasting_blocks": SIXTEEN_EIGHT_BLOCKS,
        "weeks": 1,
    }
    values.update(overrides)
    blocks = tuple(values["fasting_blocks"])  # type: ignore[arg-type]
    values["fasting_blocks"] = blocks
    values.setdefault("ketosis_states", tuple(False for _ in blocks))
    return InputProfile(**values)  # type: ignore[arg-type]


@pytest.fixture
def profile_factory() -> Callable[..., InputProfile]:
    return make_profile


@pytest.fixture
def settings() -> Settings:
    return Settings(default_weeks=12, max_weeks=52, environment="test")


@pytest.fixture
def forecast_service(settings: Settings) -> ForecastService:
    return ForecastService(max_weeks=settings.max_weeks)


@pytest.fixture
def container(settings: Settings, forecast_service: ForecastService) -> AppContainer:
    return AppContainer(settings=settings, forecast_service=forecast_service)
