"""Rendering of instruction-bearing answers for the downstream model."""

from netsearch.providers.models import EnrichedSearchResult, SearchBundle

WEATHER_INSTRUCTIONS = (
    "Your task is to answer the user's question more precisely, in more detail "
    "and more concretely using the search results below. "
    "Reply in the same language the user asked in. Search results:"
)

SEARCH_INSTRUCTIONS = (
    "Your task is to answer the user's question more precisely, in more detail "
    "and more concretely using the search results below. Wherever you cite a "
    "result, mark it with a link in the format [[index](link)]. "
    "Reply in the same language the user asked in. Search results:"
)


def format_weather(forecast: str) -> str:
    return f"{WEATHER_INSTRUCTIONS}\n{forecast}"


def format_result(result: EnrichedSearchResult) -> str:
    return f"Link: {result.href}\nAbstract: {result.abstract}\nContent: {result.content}"


def format_search_bundle(bundle: SearchBundle) -> str:
    """Render results in bundle order, which fixes their citation indices."""
    blocks = "\n\n".join(format_result(r) for r in bundle.results)
    return f"{SEARCH_INSTRUCTIONS}\n{blocks}"
