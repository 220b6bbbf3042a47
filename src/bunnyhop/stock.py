"""Stock quote lookup with per-query provider overrides.

The stock command fans out to several quote sites. A query may name the
provider inline ("stock finviz META"); otherwise the configured provider is
used, and the first entry of PROVIDERS when nothing usable is configured.
"""

import logging
from types import MappingProxyType

from bunnyhop.constants import TICKER_PREFIX
from bunnyhop.logging_utils import log_event
from bunnyhop.models import Config, StockProvider
from bunnyhop.query import get_command_args
from bunnyhop.url_encoding import encode_url

STOCK_ALIASES = ("stock", "stocks", "finance")

# First entry is the built-in default.
PROVIDERS: tuple[StockProvider, ...] = (
    StockProvider(
        aliases=("yahoo",),
        homepage_url="https://finance.yahoo.com/",
        ticker_url_template="https://finance.yahoo.com/quote/{}/",
        needs_percent_encoding=True,
    ),
    StockProvider(
        aliases=("finviz",),
        homepage_url="https://finviz.com/",
        ticker_url_template="https://finviz.com/quote.ashx?t={}",
        needs_percent_encoding=False,
    ),
    StockProvider(
        aliases=("tradingview", "tv"),
        homepage_url="https://www.tradingview.com/",
        ticker_url_template="https://www.tradingview.com/symbols/{}/",
        needs_percent_encoding=False,
    ),
    StockProvider(
        aliases=("google", "gf"),
        homepage_url="https://www.google.com/finance/",
        ticker_url_template="https://www.google.com/finance/quote/{}",
        needs_percent_encoding=False,
    ),
    StockProvider(
        aliases=("investing", "inv"),
        homepage_url="https://www.investing.com/",
        ticker_url_template="https://www.investing.com/search/?q={}",
        needs_percent_encoding=True,
    ),
)


def _build_provider_lookup(providers: tuple[StockProvider, ...]) -> MappingProxyType:
    lookup: dict[str, StockProvider] = {}
    for provider in providers:
        for alias in provider.aliases:
            if alias in lookup:
                raise ValueError(f"Duplicate stock provider alias: {alias}")
            lookup[alias] = provider
    return MappingProxyType(lookup)


PROVIDER_LOOKUP = _build_provider_lookup(PROVIDERS)
DEFAULT_PROVIDER = PROVIDERS[0]


def find_provider(name: str) -> StockProvider | None:
    """Look up a provider by alias, ignoring case."""
    return PROVIDER_LOOKUP.get(name.lower())


def get_provider(name: str | None) -> StockProvider:
    """Return the named provider, or the default when the name is unknown."""
    if not name:
        return DEFAULT_PROVIDER

    provider = find_provider(name)
    if provider is None:
        log_event(
            "stock_provider_unknown",
            level=logging.WARNING,
            provider=name,
            fallback=DEFAULT_PROVIDER.name,
        )
        return DEFAULT_PROVIDER
    return provider


def configured_provider(config: Config | None) -> StockProvider:
    """Provider selected by configuration, or the built-in default."""
    return get_provider(config.stock_provider if config is not None else None)


def parse_provider_and_ticker(query: str) -> tuple[StockProvider | None, str]:
    """Split an optional leading provider token from the ticker payload.

    Returns:
        (provider, payload). provider is None when the query does not start
        with a known provider followed by at least one more word; in that case
        the whole query is the payload, so "stock foo bar" looks up "foo bar".
    """
    parts = query.split(maxsplit=1)
    if len(parts) < 2:
        return None, query

    provider = find_provider(parts[0])
    if provider is None:
        return None, query

    return provider, parts[1].strip()


def build_url_for_provider(ticker: str, provider: StockProvider) -> str:
    """Substitute the ticker into the provider's template."""
    payload = encode_url(ticker) if provider.needs_percent_encoding else ticker
    return provider.ticker_url_template.format(payload)


def stock(args: str, config: Config | None = None) -> str:
    """Handler for the stock/stocks/finance command."""
    query = get_command_args(args, STOCK_ALIASES)
    default = configured_provider(config)

    if not query:
        return default.homepage_url

    override, ticker = parse_provider_and_ticker(query)
    return build_url_for_provider(ticker, override or default)


def process_ticker(token: str, config: Config | None = None) -> str:
    """Handler for "$TICKER" tokens; a bare prefix returns the homepage."""
    provider = configured_provider(config)
    ticker = token[len(TICKER_PREFIX):] if token.startswith(TICKER_PREFIX) else token

    if not ticker:
        return provider.homepage_url

    return build_url_for_provider(ticker, provider)
