"""DuckDuckGo results page adapter."""

from netsearch.providers.base import ResultSelectors, SearchProvider, encode_query


class DuckDuckGoProvider(SearchProvider):
    """Tertiary provider: DuckDuckGo, Hong Kong traditional Chinese region."""

    name = "duckduckgo"
    default_base_url = "https://duckduckgo.com"
    selectors = ResultSelectors(
        container="#react-layout ol",
        item="#react-layout ol li",
        link="div:nth-child(2) > a",
        abstract="div:nth-child(3) > div",
    )

    def build_url(self, query: str) -> str:
        return f"{self.base_url}/?q={encode_query(query)}&kl=hk-tzh&ia=web"
