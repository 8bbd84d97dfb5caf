"""ASGI entrypoint for the fasting forecast API."""

from fasting_forecast.api.app import create_app
from fasting_forecast.containers import build_container

app = create_app(build_container())
