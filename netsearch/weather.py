"""Multi-day forecast lookup by weather city code."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

import httpx
from loguru import logger

from netsearch.errors import InvalidResponseShape, WeatherError

if TYPE_CHECKING:
    from netsearch.config.schema import WeatherConfig


@dataclass(frozen=True, slots=True)
class ForecastEntry:
    """One day of forecast, field names as served by the API."""

    date: str = ""
    high: str = ""
    low: str = ""
    ymd: str = ""
    week: str = ""
    sunrise: str = ""
    sunset: str = ""
    aqi: str = ""
    fx: str = ""
    fl: str = ""
    type: str = ""
    notice: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ForecastEntry":
        if not isinstance(data, dict):
            raise InvalidResponseShape("forecast entry must be an object")
        return cls(**{f.name: _text(data.get(f.name)) for f in fields(cls)})


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def format_forecast_entry(entry: ForecastEntry) -> str:
    """Render one forecast day as a single line."""
    return (
        f"Date: {entry.date}, High: {entry.high}, Low: {entry.low}, "
        f"Full date: {entry.ymd}, Weekday: {entry.week}, Sunrise: {entry.sunrise}, "
        f"Sunset: {entry.sunset}, AQI: {entry.aqi}, Wind direction: {entry.fx}, "
        f"Wind force: {entry.fl}, Weather: {entry.type}, Notice: {entry.notice}"
    )


def parse_forecast(payload: Any) -> list[ForecastEntry]:
    """Extract ``data.forecast`` from a response envelope."""
    data = payload.get("data") if isinstance(payload, dict) else None
    forecast = data.get("forecast") if isinstance(data, dict) else None
    if not isinstance(forecast, list):
        raise InvalidResponseShape("response has no data.forecast list")
    return [ForecastEntry.from_dict(item) for item in forecast]


class WeatherClient:
    """Client for the city forecast endpoint.

    The endpoint allows one request per 3 seconds and 300 per minute per
    caller IP; exceeding either gets the caller blocked. Callers are
    responsible for spacing requests.
    """

    def __init__(self, config: WeatherConfig):
        self.config = config

    def build_url(self, city_code: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/api/weather/city/{city_code}"

    async def forecast(self, city_code: str) -> str:
        """Fetch the forecast for ``city_code`` as one space-joined paragraph."""
        logger.info("Fetching weather forecast for city code {}", city_code)
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(self.build_url(city_code), timeout=self.config.timeout_s)
                response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise WeatherError(f"forecast request failed: {e}") from e

        entries = parse_forecast(payload)
        return " ".join(format_forecast_entry(entry) for entry in entries)
