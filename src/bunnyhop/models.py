"""Typed domain models for bunnyhop."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping

from bunnyhop.constants import DEFAULT_SEARCH_ENGINE, DEFAULT_STOCK_PROVIDER

CommandHandler = Callable[..., str]


@dataclass(frozen=True)
class CommandFilter:
    """Allow/block lists keyed by canonical name or any alias."""

    allowed_commands: frozenset[str] = frozenset()
    blocked_commands: frozenset[str] = frozenset()

    @classmethod
    def from_lists(
        cls,
        allowed: Iterable[str] | None = None,
        blocked: Iterable[str] | None = None,
    ) -> "CommandFilter":
        return cls(
            allowed_commands=frozenset(entry.strip() for entry in allowed or ()),
            blocked_commands=frozenset(entry.strip() for entry in blocked or ()),
        )

    @property
    def is_empty(self) -> bool:
        return not self.allowed_commands and not self.blocked_commands


@dataclass(frozen=True)
class Config:
    """In-memory configuration model."""

    default_search: str = DEFAULT_SEARCH_ENGINE
    stock_provider: str = DEFAULT_STOCK_PROVIDER
    command_filter: CommandFilter = field(default_factory=CommandFilter)
    aliases: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    browser: str | None = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Config":
        """Create config model from a validated dict payload."""
        browser = payload.get("browser")
        return cls(
            default_search=str(payload.get("default_search") or DEFAULT_SEARCH_ENGINE),
            stock_provider=str(payload.get("stock_provider") or DEFAULT_STOCK_PROVIDER),
            command_filter=CommandFilter.from_lists(
                payload.get("allowed_commands"),
                payload.get("blocked_commands"),
            ),
            aliases=MappingProxyType(dict(payload.get("aliases") or {})),
            browser=None if browser is None else str(browser),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize config model to dict payload."""
        return {
            "default_search": self.default_search,
            "stock_provider": self.stock_provider,
            "allowed_commands": sorted(self.command_filter.allowed_commands),
            "blocked_commands": sorted(self.command_filter.blocked_commands),
            "aliases": dict(self.aliases),
            "browser": self.browser,
        }


@dataclass(frozen=True)
class CommandDescriptor:
    """One command: its aliases, canonical identity and URL builder."""

    aliases: tuple[str, ...]
    canonical_name: str
    handler: CommandHandler
    description: str = ""
    example: str = ""
    takes_config: bool = False

    @property
    def primary_alias(self) -> str:
        return self.aliases[0]

    def invoke(self, args: str, config: Config | None = None) -> str:
        """Run the handler on the full query text."""
        if self.takes_config:
            return self.handler(args, config)
        return self.handler(args)


@dataclass(frozen=True)
class StockProvider:
    """One stock quote backend."""

    aliases: tuple[str, ...]
    homepage_url: str
    ticker_url_template: str
    needs_percent_encoding: bool

    @property
    def name(self) -> str:
        return self.aliases[0]


class ResolutionRoute(str, Enum):
    """Which branch of the resolver produced a URL."""

    PREFIX = "prefix"
    COMMAND = "command"
    FALLBACK = "fallback"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class Resolution:
    """Resolved URL plus the branch that produced it."""

    url: str
    route: ResolutionRoute
    canonical_name: str | None = None


@dataclass
class CommandDocEntry:
    """Metadata for a single command in the listing."""

    command: str
    aliases: str
    description: str
    example: str
