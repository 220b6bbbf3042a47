"""Fallback web search URLs for unknown or hidden commands."""

from bunnyhop.constants import DEFAULT_SEARCH_ENGINE, SEARCH_ENGINE_TEMPLATES
from bunnyhop.url_encoding import encode_url


def get_search_url(query: str, engine: str | None = None) -> str:
    """Build the search URL for the query on the given engine.

    Args:
        query: Entire query text, including any unrecognised command token
        engine: Engine id ("google", "ddg"/"duckduckgo", "bing"); anything
            else, or None, falls back to Google

    Returns:
        Search URL with the query percent-encoded
    """
    template = SEARCH_ENGINE_TEMPLATES.get(
        engine or DEFAULT_SEARCH_ENGINE,
        SEARCH_ENGINE_TEMPLATES[DEFAULT_SEARCH_ENGINE],
    )
    return template.format(encode_url(query))
