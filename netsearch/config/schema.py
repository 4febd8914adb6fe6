"""Configuration schema for netsearch."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Base(BaseModel):
    """Base model accepting both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BrowserConfig(Base):
    """Headless browser used for result pages and content extraction."""

    browser: Literal["chromium", "firefox"] = "chromium"
    headless: bool = True
    launch_args: list[str] = Field(
        default_factory=lambda: ["--no-sandbox", "--disable-setuid-sandbox"]
    )
    auto_install_browsers: bool = True


class FetchConfig(Base):
    """Content enrichment settings."""

    timeout_ms: int = Field(default=60000, ge=1000)
    max_chars: int = Field(default=1000, ge=1)
    concurrency: int = Field(default=0, ge=0)  # 0 = one task per result, no cap
    # False refuses links to literal private IPs and localhost names. Hostnames
    # are not resolved, so this is a convenience filter, not SSRF protection.
    allow_private_network: bool = True


class WeatherConfig(Base):
    """Forecast API settings.

    The public endpoint bans callers that query more than once per 3 seconds
    or more than 300 times per minute. Nothing here enforces that.
    """

    base_url: str = "http://t.weather.itboy.net"
    timeout_s: float = 10.0


class NetSearchConfig(Base):
    """Root configuration, passed to NetSearchService at construction."""

    quick_search: bool = False
    provider_base_urls: dict[str, str] = Field(default_factory=dict)
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    weather: WeatherConfig = Field(default_factory=WeatherConfig)
