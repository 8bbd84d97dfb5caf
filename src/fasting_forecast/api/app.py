"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Request, status

from fasting_forecast.api.forecast_models import CalculateRequest, CalculateResponse
from fasting_forecast.app_logging import configure_logging
from fasting_forecast.containers import AppContainer
from fasting_forecast.domain.forecast import InvalidProfileError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/calculate", response_model=CalculateResponse)
    def calculate(payload: CalculateRequest, request: Request) -> CalculateResponse:
        """Forecast weekly body composition for a fasting schedule."""
        state_container: AppContainer = request.app.state.container
        profile = payload.to_profile(state_container.settings.default_weeks)
        try:
            result = state_container.forecast_service.forecast(profile)
        except InvalidProfileError as exc:
            logger.info("Rejected forecast request: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        return CalculateResponse.from_result(result)

    return app
