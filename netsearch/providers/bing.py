"""Bing results page adapter."""

from netsearch.providers.base import ResultSelectors, SearchProvider, encode_query


class BingProvider(SearchProvider):
    """Primary provider: Bing (China edition)."""

    name = "bing"
    default_base_url = "https://cn.bing.com"
    selectors = ResultSelectors(
        container="#b_results",
        item="#b_results > .b_algo",
        link="a",
        abstract=".b_caption > p",
    )

    def build_url(self, query: str) -> str:
        return f"{self.base_url}/search?form=QBRE&q={encode_query(query)}&cc=CN"
