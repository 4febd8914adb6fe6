"""Intent routing between the weather branch and general web search."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from netsearch.gazetteer import CITY_CODES, CityEntry, lookup_city


@dataclass(frozen=True, slots=True)
class WeatherIntent:
    """Query names a known city; answer it from the forecast API."""

    city_name: str
    city_code: str


@dataclass(frozen=True, slots=True)
class GeneralIntent:
    """Query goes through the web search cascade."""


Intent = WeatherIntent | GeneralIntent


def classify(query: str, gazetteer: Sequence[CityEntry] = CITY_CODES) -> Intent:
    """Classify ``query`` by gazetteer match alone.

    Any query containing a gazetteer city name is a weather query, with or
    without a weather keyword. Queries that mention weather for an unknown
    city fall through to general search.
    """
    entry = lookup_city(query, gazetteer)
    if entry is None:
        return GeneralIntent()
    name, code = entry
    return WeatherIntent(city_name=name, city_code=code)
