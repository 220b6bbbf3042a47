"""Allow/block policy applied to commands by canonical identity."""

from typing import Iterable

from bunnyhop.models import CommandDescriptor, CommandFilter


def _mentions(entries: frozenset[str], canonical_name: str, aliases: Iterable[str]) -> bool:
    if canonical_name in entries:
        return True
    return any(alias in entries for alias in aliases)


def is_allowed(
    canonical_name: str,
    aliases: Iterable[str],
    command_filter: CommandFilter | None,
) -> bool:
    """Decide whether a command is visible under the filter.

    A non-empty allow-list wins outright: the command is permitted only when
    its canonical name or one of its aliases is listed, and the block-list is
    ignored. Otherwise a listed canonical name or alias in the block-list hides
    the command. With both lists empty everything is permitted.
    """
    if command_filter is None:
        return True

    alias_list = tuple(aliases)
    if command_filter.allowed_commands:
        return _mentions(command_filter.allowed_commands, canonical_name, alias_list)

    if command_filter.blocked_commands:
        return not _mentions(command_filter.blocked_commands, canonical_name, alias_list)

    return True


def filter_descriptors(
    descriptors: Iterable[CommandDescriptor],
    command_filter: CommandFilter | None,
) -> list[CommandDescriptor]:
    """Return the descriptors permitted by the filter, in input order."""
    return [
        descriptor
        for descriptor in descriptors
        if is_allowed(descriptor.canonical_name, descriptor.aliases, command_filter)
    ]
