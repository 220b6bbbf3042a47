"""Command registry: alias -> descriptor bindings and the derived alias index."""

import threading
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Sequence

from bunnyhop.commands import DESCRIPTORS
from bunnyhop.errors import RegistrationError
from bunnyhop.models import CommandDescriptor


def validate_descriptors(descriptors: Sequence[CommandDescriptor]) -> None:
    """Check the descriptor list before anything is registered.

    Enumerates every alias of every descriptor and raises RegistrationError on:
    empty aliases or canonical names, a canonical name used twice, an alias
    claimed by two different commands, or a canonical name that is also an
    alias of a different command (filter entries must stay unambiguous).

    Raises:
        RegistrationError: If any invariant is violated
    """
    owners: dict[str, str] = {}
    canonical_names: set[str] = set()

    for descriptor in descriptors:
        canonical = descriptor.canonical_name
        if not canonical:
            raise RegistrationError("Command descriptor has an empty canonical name")
        if canonical in canonical_names:
            raise RegistrationError(f"Duplicate canonical command name: {canonical}")
        canonical_names.add(canonical)

        if not descriptor.aliases:
            raise RegistrationError(f"Command '{canonical}' has no aliases")

        seen_here: set[str] = set()
        for alias in descriptor.aliases:
            if not alias or alias != alias.strip() or len(alias.split()) != 1:
                raise RegistrationError(
                    f"Command '{canonical}' has an invalid alias: {alias!r}"
                )
            if alias in seen_here:
                raise RegistrationError(f"Command '{canonical}' lists alias '{alias}' twice")
            seen_here.add(alias)

            owner = owners.get(alias)
            if owner is not None:
                raise RegistrationError(
                    f"Alias '{alias}' is bound to both '{owner}' and '{canonical}'"
                )
            owners[alias] = canonical

    for canonical in canonical_names:
        owner = owners.get(canonical)
        if owner is not None and owner != canonical:
            raise RegistrationError(
                f"Canonical name '{canonical}' is an alias of '{owner}'"
            )


def _register(
    descriptor: CommandDescriptor,
    by_alias: dict[str, CommandDescriptor],
    canonical_by_alias: dict[str, str],
    aliases_by_canonical: dict[str, tuple[str, ...]],
) -> None:
    """Add every alias of one descriptor to the tables under construction."""
    aliases_by_canonical[descriptor.canonical_name] = descriptor.aliases
    for alias in descriptor.aliases:
        by_alias[alias] = descriptor
        canonical_by_alias[alias] = descriptor.canonical_name


class CommandRegistry:
    """Immutable lookup tables built once from an explicit descriptor list."""

    def __init__(self, descriptors: Iterable[CommandDescriptor]) -> None:
        ordered = tuple(descriptors)
        validate_descriptors(ordered)

        by_alias: dict[str, CommandDescriptor] = {}
        canonical_by_alias: dict[str, str] = {}
        aliases_by_canonical: dict[str, tuple[str, ...]] = {}
        for descriptor in ordered:
            _register(descriptor, by_alias, canonical_by_alias, aliases_by_canonical)

        self._descriptors = ordered
        self._by_alias: Mapping[str, CommandDescriptor] = MappingProxyType(by_alias)
        self._canonical_by_alias: Mapping[str, str] = MappingProxyType(canonical_by_alias)
        self._aliases_by_canonical: Mapping[str, tuple[str, ...]] = MappingProxyType(
            aliases_by_canonical
        )

    @classmethod
    def from_descriptors(cls, descriptors: Iterable[CommandDescriptor]) -> "CommandRegistry":
        return cls(descriptors)

    @property
    def descriptors(self) -> tuple[CommandDescriptor, ...]:
        """Descriptors in registration order."""
        return self._descriptors

    def lookup_handler(self, alias: str) -> CommandDescriptor | None:
        """Return the descriptor bound to an alias (exact, case-sensitive)."""
        return self._by_alias.get(alias)

    def lookup_canonical(self, alias: str) -> str | None:
        return self._canonical_by_alias.get(alias)

    def aliases_for(self, canonical_name: str) -> tuple[str, ...] | None:
        return self._aliases_by_canonical.get(canonical_name)

    def get_descriptor(self, canonical_name: str) -> CommandDescriptor | None:
        aliases = self.aliases_for(canonical_name)
        if aliases is None:
            return None
        return self._by_alias[aliases[0]]

    def all_aliases(self) -> list[str]:
        """Every registered alias, in registration order."""
        return [alias for descriptor in self._descriptors for alias in descriptor.aliases]

    def canonical_names(self) -> list[str]:
        return [descriptor.canonical_name for descriptor in self._descriptors]

    def __contains__(self, alias: object) -> bool:
        return alias in self._by_alias

    def __iter__(self) -> Iterator[CommandDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)


_default_registry: CommandRegistry | None = None
_default_registry_lock = threading.Lock()


def default_registry() -> CommandRegistry:
    """Return the process-wide registry, building it on first use.

    Concurrent first callers block on the lock; exactly one builds, and every
    caller receives the same instance.
    """
    global _default_registry

    registry = _default_registry
    if registry is not None:
        return registry

    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = CommandRegistry(DESCRIPTORS)
        return _default_registry
