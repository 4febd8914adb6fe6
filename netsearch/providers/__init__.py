"""Web search providers, in cascade priority order."""

from __future__ import annotations

from typing import TYPE_CHECKING

from netsearch.browser import PageFactory, open_page
from netsearch.providers.base import MAX_RESULTS_PER_PROVIDER, ResultSelectors, SearchProvider
from netsearch.providers.bing import BingProvider
from netsearch.providers.duckduckgo import DuckDuckGoProvider
from netsearch.providers.google import GoogleProvider
from netsearch.providers.models import EnrichedSearchResult, RawSearchResult, SearchBundle
from netsearch.providers.sogou import SogouProvider

if TYPE_CHECKING:
    from netsearch.config.schema import NetSearchConfig

PROVIDER_ORDER: tuple[type[SearchProvider], ...] = (
    BingProvider,
    SogouProvider,
    DuckDuckGoProvider,
    GoogleProvider,
)


def build_providers(
    config: NetSearchConfig,
    *,
    page_factory: PageFactory = open_page,
) -> list[SearchProvider]:
    """Instantiate every provider in priority order with configured base URLs."""
    return [
        provider_cls(
            config.browser,
            base_url=config.provider_base_urls.get(provider_cls.name) or None,
            page_factory=page_factory,
        )
        for provider_cls in PROVIDER_ORDER
    ]


__all__ = [
    "MAX_RESULTS_PER_PROVIDER",
    "PROVIDER_ORDER",
    "BingProvider",
    "DuckDuckGoProvider",
    "EnrichedSearchResult",
    "GoogleProvider",
    "RawSearchResult",
    "ResultSelectors",
    "SearchBundle",
    "SearchProvider",
    "SogouProvider",
    "build_providers",
]
