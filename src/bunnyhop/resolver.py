"""Resolution of a typed command into its target URL."""

from bunnyhop.constants import TICKER_PREFIX
from bunnyhop.filtering import is_allowed
from bunnyhop.models import Config, Resolution, ResolutionRoute
from bunnyhop.query import get_command_from_query_string
from bunnyhop.registry import CommandRegistry, default_registry
from bunnyhop.search import get_search_url
from bunnyhop.stock import process_ticker


def _is_prefix_command(raw_token: str) -> bool:
    # A lone "$" is ordinary search text.
    return raw_token.startswith(TICKER_PREFIX) and len(raw_token) > len(TICKER_PREFIX)


def fallback_url(full_query: str, config: Config | None = None) -> str:
    """Search URL used for unknown commands and commands hidden by the filter."""
    engine = config.default_search if config is not None else None
    return get_search_url(full_query, engine)


class Resolver:
    """Turns (command token, full query, optional config) into a URL.

    Stages, in order:
        1. "$TICKER" prefix commands, which skip the allow/block filter
        2. exact alias lookup in the registry
        3. the config's allow/block filter, when a config is supplied
        4. fallback web search over the full query

    Unknown and filtered-out commands both end in the fallback search and
    produce identical URLs.
    """

    def __init__(self, registry: CommandRegistry) -> None:
        self.registry = registry

    def resolve_with_route(
        self,
        raw_token: str,
        full_query: str,
        config: Config | None = None,
    ) -> Resolution:
        """Resolve and report which stage produced the URL."""
        if _is_prefix_command(raw_token):
            return Resolution(
                url=process_ticker(raw_token, config),
                route=ResolutionRoute.PREFIX,
            )

        descriptor = self.registry.lookup_handler(raw_token)
        if descriptor is None:
            return Resolution(
                url=fallback_url(full_query, config),
                route=ResolutionRoute.FALLBACK,
            )

        if config is not None and not is_allowed(
            descriptor.canonical_name,
            descriptor.aliases,
            config.command_filter,
        ):
            return Resolution(
                url=fallback_url(full_query, config),
                route=ResolutionRoute.BLOCKED,
                canonical_name=descriptor.canonical_name,
            )

        return Resolution(
            url=descriptor.invoke(full_query, config),
            route=ResolutionRoute.COMMAND,
            canonical_name=descriptor.canonical_name,
        )

    def resolve(self, raw_token: str, full_query: str, config: Config | None = None) -> str:
        return self.resolve_with_route(raw_token, full_query, config).url

    def resolve_query(self, query: str, config: Config | None = None) -> Resolution:
        """Split the command token off a whole query line and resolve it."""
        return self.resolve_with_route(get_command_from_query_string(query), query, config)


def resolve_command(raw_token: str, full_query: str, config: Config | None = None) -> str:
    """Resolve against the process-wide registry."""
    return Resolver(default_registry()).resolve(raw_token, full_query, config)
