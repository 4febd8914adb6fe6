"""Google results page adapter."""

from netsearch.providers.base import ResultSelectors, SearchProvider, encode_query


class GoogleProvider(SearchProvider):
    """Quaternary provider: Google (Hong Kong endpoint, US English results).

    Snippets are split across several spans, so all matches are joined.
    """

    name = "google"
    default_base_url = "https://www.google.com.hk"
    selectors = ResultSelectors(
        container="#search > div > div",
        item="#search > div > div > *",
        link="a",
        title="h3",
        abstract="div > div > div > div > div > div > span",
        join_abstract=True,
    )

    def build_url(self, query: str) -> str:
        q = encode_query(query)
        return f"{self.base_url}/search?q={q}&oq={q}&hl=en&gl=us&sourceid=chrome&ie=UTF-8"
