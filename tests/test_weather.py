import httpx
import pytest

from netsearch.config.schema import WeatherConfig
from netsearch.errors import InvalidResponseShape, WeatherError
from netsearch.weather import ForecastEntry, WeatherClient, format_forecast_entry, parse_forecast

FIELD_LABELS = [
    "Date:",
    "High:",
    "Low:",
    "Full date:",
    "Weekday:",
    "Sunrise:",
    "Sunset:",
    "AQI:",
    "Wind direction:",
    "Wind force:",
    "Weather:",
    "Notice:",
]


class FakeResponse:
    def __init__(self, payload, error: Exception | None = None):
        self._payload = payload
        self._error = error

    def raise_for_status(self) -> None:
        if self._error:
            raise self._error

    def json(self):
        return self._payload


def _day(n: int) -> dict:
    return {
        "date": f"0{n}",
        "high": f"high {20 + n}℃",
        "low": f"low {10 + n}℃",
        "ymd": f"2024-05-0{n}",
        "week": f"week{n}",
        "sunrise": "05:00",
        "sunset": "19:00",
        "aqi": 40 + n,
        "fx": "north",
        "fl": "level 2",
        "type": "sunny",
        "notice": f"notice {n}",
    }


def _stub_client(monkeypatch, response: FakeResponse, calls: dict) -> None:
    class StubClient:
        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc, tb):
            return False

        async def get(self, url, timeout=None):
            calls["url"] = url
            calls["timeout"] = timeout
            return response

    monkeypatch.setattr("netsearch.weather.httpx.AsyncClient", StubClient)


@pytest.mark.asyncio
async def test_forecast_joins_entries_with_single_space(monkeypatch) -> None:
    calls: dict = {}
    _stub_client(monkeypatch, FakeResponse({"data": {"forecast": [_day(1), _day(2)]}}), calls)

    text = await WeatherClient(WeatherConfig()).forecast("101010100")

    first = format_forecast_entry(ForecastEntry.from_dict(_day(1)))
    second = format_forecast_entry(ForecastEntry.from_dict(_day(2)))
    assert text == f"{first} {second}"
    assert "\n" not in text
    assert text.count("Notice:") == 2
    assert calls["url"] == "http://t.weather.itboy.net/api/weather/city/101010100"
    assert calls["timeout"] == 10.0


def test_forecast_entry_lists_fields_in_order() -> None:
    line = format_forecast_entry(ForecastEntry.from_dict(_day(3)))

    positions = [line.index(label) for label in FIELD_LABELS]
    assert positions == sorted(positions)
    assert line.startswith("Date: 03, High: high 23℃, Low: low 13℃")
    assert "AQI: 43" in line
    assert line.endswith("Notice: notice 3")


def test_forecast_entry_tolerates_missing_fields() -> None:
    entry = ForecastEntry.from_dict({"date": "05", "aqi": None})

    assert entry.date == "05"
    assert entry.aqi == ""
    assert entry.notice == ""


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"data": None},
        {"data": {}},
        {"data": {"forecast": None}},
        {"status": 403, "message": "blocked"},
        [],
    ],
)
def test_parse_forecast_rejects_unexpected_shape(payload) -> None:
    with pytest.raises(InvalidResponseShape):
        parse_forecast(payload)


@pytest.mark.asyncio
async def test_forecast_missing_envelope_raises(monkeypatch) -> None:
    _stub_client(monkeypatch, FakeResponse({"message": "city not found"}), {})

    with pytest.raises(InvalidResponseShape):
        await WeatherClient(WeatherConfig()).forecast("000")


@pytest.mark.asyncio
async def test_forecast_http_error_raises_weather_error(monkeypatch) -> None:
    _stub_client(monkeypatch, FakeResponse({}, error=httpx.HTTPError("503 Service Unavailable")), {})

    with pytest.raises(WeatherError) as exc_info:
        await WeatherClient(WeatherConfig()).forecast("101010100")

    assert not isinstance(exc_info.value, InvalidResponseShape)


def test_build_url_uses_configured_base() -> None:
    client = WeatherClient(WeatherConfig(base_url="http://weather.internal/"))

    assert client.build_url("101020100") == "http://weather.internal/api/weather/city/101020100"
