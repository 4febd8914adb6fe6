import pytest

from netsearch.config.schema import NetSearchConfig
from netsearch.errors import InvalidResponseShape
from netsearch.fetcher import FETCH_FAILED
from netsearch.formatter import SEARCH_INSTRUCTIONS, WEATHER_INSTRUCTIONS
from netsearch.providers.models import RawSearchResult
from netsearch.service import NetSearchService


class StubProvider:
    def __init__(self, name: str, count: int):
        self.name = name
        self.count = count
        self.calls = 0

    async def search(self, query: str) -> list[RawSearchResult]:
        self.calls += 1
        return [
            RawSearchResult(
                href=f"https://{self.name}.example/{i}",
                title=f"{self.name} {i}",
                abstract=f"{self.name} abstract {i}",
            )
            for i in range(self.count)
        ]


class SpyFetcher:
    def __init__(self, failing: set[str] | None = None, error: Exception | None = None):
        self.failing = failing or set()
        self.error = error
        self.calls: list[str] = []

    async def fetch(self, href: str) -> str:
        self.calls.append(href)
        if self.error:
            raise self.error
        if href in self.failing:
            return FETCH_FAILED
        return f"page text for {href}"


class StubWeather:
    def __init__(self, text: str = "", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[str] = []

    async def forecast(self, city_code: str) -> str:
        self.calls.append(city_code)
        if self.error:
            raise self.error
        return self.text


def _service(counts=(2, 2, 0, 5), *, quick=False, fetcher=None, weather=None):
    providers = [StubProvider(name, n) for name, n in zip(("bing", "sogou", "duckduckgo", "google"), counts)]
    service = NetSearchService(
        NetSearchConfig(quick_search=quick),
        providers=providers,
        fetcher=fetcher or SpyFetcher(),
        weather=weather or StubWeather(error=AssertionError("weather should not be called")),
    )
    return service, providers


@pytest.mark.asyncio
async def test_weather_query_returns_forecast_without_searching() -> None:
    weather = StubWeather(text="Date: 01, High: 20")
    service, providers = _service(weather=weather)

    text = await service.handle("北京明天天气")

    assert text == f"{WEATHER_INSTRUCTIONS}\nDate: 01, High: 20"
    assert weather.calls == ["101010100"]
    assert all(p.calls == 0 for p in providers)


@pytest.mark.asyncio
async def test_weather_failure_falls_through_to_web_search() -> None:
    weather = StubWeather(error=InvalidResponseShape("response has no data.forecast list"))
    service, providers = _service(weather=weather)

    text = await service.handle("上海天气")

    assert weather.calls == ["101020100"]
    assert text.startswith(SEARCH_INSTRUCTIONS)
    assert providers[0].calls == 1


@pytest.mark.asyncio
async def test_unexpected_weather_error_also_falls_through() -> None:
    service, _ = _service(weather=StubWeather(error=KeyError("data")))

    text = await service.handle("广州天气")

    assert text.startswith(SEARCH_INSTRUCTIONS)


@pytest.mark.asyncio
async def test_weather_keyword_with_unknown_city_uses_web_search() -> None:
    weather = StubWeather(text="unused")
    service, _ = _service(weather=weather)

    text = await service.handle("亚特兰蒂斯天气")

    assert weather.calls == []
    assert text.startswith(SEARCH_INSTRUCTIONS)


@pytest.mark.asyncio
async def test_general_search_renders_results_in_cascade_order() -> None:
    fetcher = SpyFetcher()
    service, providers = _service(counts=(2, 2, 0, 5), fetcher=fetcher)

    text = await service.handle("python packaging")

    assert [p.calls for p in providers] == [1, 1, 0, 0]
    links = [line for line in text.splitlines() if line.startswith("Link: ")]
    assert links == [
        "Link: https://bing.example/0",
        "Link: https://bing.example/1",
        "Link: https://sogou.example/0",
        "Link: https://sogou.example/1",
    ]
    assert "Content: page text for https://sogou.example/1" in text
    assert len(fetcher.calls) == 4


@pytest.mark.asyncio
async def test_no_results_returns_query_unchanged() -> None:
    fetcher = SpyFetcher()
    service, providers = _service(counts=(0, 0, 0, 0), fetcher=fetcher)

    assert await service.handle("obscure query") == "obscure query"
    assert [p.calls for p in providers] == [1, 1, 1, 1]
    assert fetcher.calls == []


@pytest.mark.asyncio
async def test_quick_search_never_calls_fetcher() -> None:
    fetcher = SpyFetcher()
    service, _ = _service(counts=(3, 0, 0, 0), quick=True, fetcher=fetcher)

    text = await service.handle("quick question")

    assert fetcher.calls == []
    contents = [line for line in text.splitlines() if line.startswith("Content:")]
    assert contents == ["Content: "] * 3


@pytest.mark.asyncio
async def test_failed_fetch_is_marked_in_output() -> None:
    fetcher = SpyFetcher(failing={"https://bing.example/1"})
    service, _ = _service(counts=(3, 0, 0, 0), fetcher=fetcher)

    text = await service.handle("q")

    assert f"Content: {FETCH_FAILED}" in text
    assert text.count("Link: ") == 3


@pytest.mark.asyncio
async def test_unexpected_search_failure_returns_query_unchanged() -> None:
    service, _ = _service(counts=(3, 0, 0, 0), fetcher=SpyFetcher(error=RuntimeError("driver crashed")))

    assert await service.handle("what happened") == "what happened"


@pytest.mark.asyncio
async def test_no_providers_returns_query_unchanged() -> None:
    service = NetSearchService(NetSearchConfig(), providers=[], fetcher=SpyFetcher(), weather=StubWeather())

    assert await service.handle("anything") == "anything"


@pytest.mark.asyncio
async def test_handle_is_deterministic_for_identical_input() -> None:
    service, _ = _service(counts=(2, 2, 0, 5))

    first = await service.handle("same query")
    second = await service.handle("same query")

    assert first == second
    assert first.encode("utf-8") == second.encode("utf-8")


def test_service_builds_default_collaborators_from_config() -> None:
    config = NetSearchConfig(provider_base_urls={"duckduckgo": "https://ddg.example"})

    service = NetSearchService(config)

    assert [p.name for p in service.cascade.providers] == ["bing", "sogou", "duckduckgo", "google"]
    assert service.cascade.providers[2].base_url == "https://ddg.example"
    assert service.fetcher.config.timeout_ms == 60000
    assert service.weather.config.base_url == "http://t.weather.itboy.net"
