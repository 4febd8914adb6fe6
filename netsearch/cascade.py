"""Provider cascade and result enrichment."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from loguru import logger

from netsearch.errors import CascadeError, ProviderError
from netsearch.providers.models import EnrichedSearchResult, RawSearchResult, SearchBundle

MIN_RESULTS = 3


class Searcher(Protocol):
    name: str

    async def search(self, query: str) -> list[RawSearchResult]: ...


class Fetcher(Protocol):
    async def fetch(self, href: str) -> str: ...


@dataclass(slots=True)
class CascadeResult:
    """Results gathered by the cascade and the providers that produced them."""

    results: list[RawSearchResult] = field(default_factory=list)
    consulted: list[str] = field(default_factory=list)

    @property
    def quorum_met(self) -> bool:
        return len(self.results) >= MIN_RESULTS


class SearchCascade:
    """Ask providers one at a time, in order, until enough results arrive.

    A provider that fails contributes nothing and the next one is tried.
    Surplus results from the provider that reaches the quorum are kept.
    """

    def __init__(self, providers: Sequence[Searcher]):
        self.providers = list(providers)

    async def run(self, query: str) -> CascadeResult:
        if not self.providers:
            raise CascadeError("no search providers configured")

        state = CascadeResult()
        for index, provider in enumerate(self.providers):
            state.consulted.append(provider.name)
            try:
                found = await provider.search(query)
            except ProviderError as e:
                logger.warning("{}", e)
                found = []
            except Exception as e:
                logger.warning("{} search failed unexpectedly: {}", provider.name, e)
                found = []
            state.results.extend(found)

            if state.quorum_met:
                break
            if index + 1 < len(self.providers):
                logger.info(
                    "{} results after {}, below {}; trying {}",
                    len(state.results),
                    provider.name,
                    MIN_RESULTS,
                    self.providers[index + 1].name,
                )

        if not state.quorum_met:
            logger.info("Providers exhausted with {} results", len(state.results))
        return state


async def enrich(
    results: Sequence[RawSearchResult],
    fetcher: Fetcher,
    *,
    quick_search: bool = False,
    concurrency: int = 0,
) -> SearchBundle:
    """Attach page content to each result, preserving input order.

    In quick mode the fetcher is not called and content stays empty.
    ``concurrency`` caps simultaneous fetches; 0 means no cap.
    """
    if quick_search:
        return SearchBundle(results=[EnrichedSearchResult.from_raw(r) for r in results])

    semaphore = asyncio.Semaphore(concurrency) if concurrency > 0 else None

    async def fetch_one(result: RawSearchResult) -> EnrichedSearchResult:
        if semaphore is None:
            content = await fetcher.fetch(result.href)
        else:
            async with semaphore:
                content = await fetcher.fetch(result.href)
        return EnrichedSearchResult.from_raw(result, content)

    enriched = await asyncio.gather(*(fetch_one(r) for r in results))
    return SearchBundle(results=list(enriched))
