"""Browser-driven search provider base class."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar
from urllib.parse import quote, urljoin

from loguru import logger

from netsearch.browser import PageFactory, open_page
from netsearch.errors import ProviderError
from netsearch.providers.models import RawSearchResult

if TYPE_CHECKING:
    from netsearch.config.schema import BrowserConfig

MAX_RESULTS_PER_PROVIDER = 5

# Runs inside the results page. Every field is optional: a missing node
# yields an empty string and the entry is kept.
_EXTRACT_SCRIPT = """
(sel) => {
  const items = Array.from(document.querySelectorAll(sel.item)).slice(0, sel.limit);
  return items.map((item) => {
    const link = item.querySelector(sel.link);
    const href = link ? link.getAttribute('href') || '' : '';
    let title = '';
    if (link) {
      const titleNode = sel.title ? link.querySelector(sel.title) : link;
      title = titleNode ? titleNode.textContent || '' : '';
    }
    let abstract = '';
    if (sel.joinAbstract) {
      abstract = Array.from(item.querySelectorAll(sel.abstract))
        .map((node) => node.textContent || '')
        .join('');
    } else {
      const node = item.querySelector(sel.abstract);
      abstract = node ? node.textContent || '' : '';
    }
    return { href, title, abstract };
  });
}
"""


@dataclass(frozen=True, slots=True)
class ResultSelectors:
    """Where a provider keeps its results and their fields.

    ``title`` is looked up inside the link element; ``None`` means the link
    text itself is the title.
    """

    container: str
    item: str
    link: str
    abstract: str
    title: str | None = None
    join_abstract: bool = False

    def to_script_arg(self, limit: int) -> dict[str, Any]:
        return {
            "item": self.item,
            "link": self.link,
            "title": self.title,
            "abstract": self.abstract,
            "joinAbstract": self.join_abstract,
            "limit": limit,
        }


class SearchProvider:
    """One web search engine scraped through a headless browser.

    Subclasses set ``name``, ``default_base_url``, ``selectors`` and
    implement ``build_url``. The markup of each results page is an external
    contract owned by the engine, so selectors live with their provider.
    """

    name: ClassVar[str]
    default_base_url: ClassVar[str]
    selectors: ClassVar[ResultSelectors]

    def __init__(
        self,
        browser_config: BrowserConfig,
        *,
        base_url: str | None = None,
        page_factory: PageFactory = open_page,
        max_results: int = MAX_RESULTS_PER_PROVIDER,
    ):
        self.browser_config = browser_config
        self.base_url = (base_url or self.default_base_url).rstrip("/")
        self.page_factory = page_factory
        self.max_results = max_results

    def build_url(self, query: str) -> str:
        raise NotImplementedError

    async def search(self, query: str) -> list[RawSearchResult]:
        """Scrape up to ``max_results`` entries for ``query``."""
        logger.info("Searching {} for: {}", self.name, query)
        url = self.build_url(query)
        try:
            async with self.page_factory(self.browser_config) as page:
                await page.goto(url)
                await page.wait_for_selector(self.selectors.container)
                items = await page.evaluate(
                    _EXTRACT_SCRIPT,
                    self.selectors.to_script_arg(self.max_results),
                )
        except Exception as e:
            raise ProviderError(self.name, str(e)) from e

        results = [self._to_result(item) for item in (items or [])[: self.max_results]]
        logger.info("{} returned {} results", self.name, len(results))
        for result in results:
            logger.debug(
                "{} result: title={!r} href={} abstract={!r}",
                self.name,
                result.title,
                result.href,
                result.abstract,
            )
        return results

    def _to_result(self, item: dict[str, Any]) -> RawSearchResult:
        href = (item.get("href") or "").strip()
        if href:
            href = urljoin(self.base_url + "/", href)
        return RawSearchResult(
            href=href,
            title=(item.get("title") or "").strip(),
            abstract=(item.get("abstract") or "").strip(),
        )


def encode_query(query: str) -> str:
    """Percent-encode a query the way encodeURIComponent does."""
    return quote(query, safe="-_.!~*'()")
