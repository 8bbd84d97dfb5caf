"""Dependency container wiring for the application."""

from dataclasses import dataclass

from fasting_forecast.config import Settings
from fasting_forecast.services.forecast import ForecastService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    forecast_service: ForecastService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    forecast_service = ForecastService(max_weeks=resolved_settings.max_weeks)
    return AppContainer(
        settings=resolved_settings,
        forecast_service=forecast_service,
    )
