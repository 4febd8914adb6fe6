"""Query handling: intent routing, search cascade and answer rendering."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from loguru import logger

from netsearch.cascade import Fetcher, SearchCascade, Searcher, enrich
from netsearch.config.loader import load_config
from netsearch.config.schema import NetSearchConfig
from netsearch.errors import WeatherError
from netsearch.fetcher import ContentFetcher
from netsearch.formatter import format_search_bundle, format_weather
from netsearch.gazetteer import CITY_CODES, CityEntry
from netsearch.outcome import Outcome
from netsearch.providers import build_providers
from netsearch.providers.models import SearchBundle
from netsearch.router import WeatherIntent, classify
from netsearch.weather import WeatherClient


class Forecaster(Protocol):
    async def forecast(self, city_code: str) -> str: ...


class NetSearchService:
    """
    Answers a free-text query with a citation-ready text block.

    It:
    1. Routes queries naming a known city to the forecast API
    2. Otherwise cascades through web search providers
    3. Optionally enriches each result with page content
    4. Renders everything as instructions for a downstream model

    Without an explicit config, the config file and environment are read
    once here via ``load_config``. Collaborators default to the real
    browser/HTTP implementations and can be replaced for testing.
    """

    def __init__(
        self,
        config: NetSearchConfig | None = None,
        *,
        providers: Sequence[Searcher] | None = None,
        fetcher: Fetcher | None = None,
        weather: Forecaster | None = None,
        gazetteer: Sequence[CityEntry] = CITY_CODES,
    ):
        self.config = config if config is not None else load_config()
        self.cascade = SearchCascade(
            providers if providers is not None else build_providers(self.config)
        )
        self.fetcher = fetcher or ContentFetcher(self.config.browser, self.config.fetch)
        self.weather = weather or WeatherClient(self.config.weather)
        self.gazetteer = gazetteer

    async def handle(self, query: str) -> str:
        """Return the rendered answer for ``query``, or ``query`` itself on failure."""
        logger.info("Starting web search for: {}", query)
        logger.info("Quick search enabled: {}", self.config.quick_search)

        intent = classify(query, self.gazetteer)
        if isinstance(intent, WeatherIntent):
            logger.info("Weather query detected for {} ({})", intent.city_name, intent.city_code)
            weather = await self._lookup_weather(intent.city_code)
            if weather.ok:
                return format_weather(weather.value)
            logger.warning("Weather lookup failed, falling back to web search: {}", weather.error)

        searched = await self._search(query)
        if not searched.ok:
            logger.error("Search for {!r} failed, returning the query unchanged: {}", query, searched.error)
            return query

        bundle = searched.value
        logger.info("Received {} search results for: {}", len(bundle.results), query)
        if not bundle.results:
            logger.info("No search results for {!r}, returning the query unchanged", query)
            return query
        return format_search_bundle(bundle)

    async def _lookup_weather(self, city_code: str) -> Outcome[str]:
        try:
            return Outcome.success(await self.weather.forecast(city_code))
        except WeatherError as e:
            return Outcome.failure("weather", str(e))
        except Exception as e:
            return Outcome.failure("weather", f"{type(e).__name__}: {e}")

    async def _search(self, query: str) -> Outcome[SearchBundle]:
        try:
            found = await self.cascade.run(query)
            bundle = await enrich(
                found.results,
                self.fetcher,
                quick_search=self.config.quick_search,
                concurrency=self.config.fetch.concurrency,
            )
        except Exception as e:
            return Outcome.failure("cascade", f"{type(e).__name__}: {e}")
        return Outcome.success(bundle)
