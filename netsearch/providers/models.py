"""Shared search result models."""

from dataclasses import dataclass, field


@dataclass(slots=True)
class RawSearchResult:
    """One entry scraped from a provider results page."""

    href: str
    title: str
    abstract: str = ""


@dataclass(slots=True)
class EnrichedSearchResult:
    """Search result with the fetched page content attached."""

    href: str
    title: str
    abstract: str = ""
    content: str = ""

    @classmethod
    def from_raw(cls, raw: RawSearchResult, content: str = "") -> "EnrichedSearchResult":
        return cls(href=raw.href, title=raw.title, abstract=raw.abstract, content=content)


@dataclass(slots=True)
class SearchBundle:
    """Enriched results in cascade order, which is also citation order."""

    results: list[EnrichedSearchResult] = field(default_factory=list)
