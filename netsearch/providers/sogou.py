"""Sogou results page adapter."""

from netsearch.providers.base import ResultSelectors, SearchProvider, encode_query


class SogouProvider(SearchProvider):
    """Secondary provider: Sogou web search.

    Result links are relative redirect paths (``/link?url=...``); they are
    resolved against the base URL.
    """

    name = "sogou"
    default_base_url = "https://www.sogou.com"
    selectors = ResultSelectors(
        container=".results",
        item=".results > .vrwrap, .results > .rb",
        link="h3 a",
        abstract=".space-txt, .str-text-info, .str_info",
    )

    def build_url(self, query: str) -> str:
        return f"{self.base_url}/web?query={encode_query(query)}"
