"""Command listing rendered from registry metadata."""

from bunnyhop.constants import TICKER_PREFIX
from bunnyhop.filtering import filter_descriptors
from bunnyhop.models import CommandDocEntry, Config
from bunnyhop.registry import CommandRegistry

NO_ALIASES = "-"
_HEADERS = CommandDocEntry(
    command="Command",
    aliases="Aliases",
    description="Description",
    example="Example",
)
_TICKER_ENTRY = CommandDocEntry(
    command=f"{TICKER_PREFIX}<ticker>",
    aliases=NO_ALIASES,
    description="Stock quote on the configured provider",
    example=f"{TICKER_PREFIX}META",
)


def command_doc_entries(
    registry: CommandRegistry,
    config: Config | None = None,
) -> list[CommandDocEntry]:
    """Return the commands visible under the config's filter, sorted by primary alias."""
    command_filter = config.command_filter if config is not None else None
    visible = filter_descriptors(registry.descriptors, command_filter)
    visible.sort(key=lambda d: d.primary_alias.lower())

    entries = [
        CommandDocEntry(
            command=descriptor.primary_alias,
            aliases=", ".join(descriptor.aliases[1:]) or NO_ALIASES,
            description=descriptor.description,
            example=descriptor.example,
        )
        for descriptor in visible
    ]
    # Prefix commands are never filtered.
    entries.append(_TICKER_ENTRY)
    return entries


def render_command_table(entries: list[CommandDocEntry]) -> str:
    """Render entries as aligned text columns with a header row."""
    rows = [_HEADERS, *entries]
    command_width = max(len(row.command) for row in rows)
    aliases_width = max(len(row.aliases) for row in rows)
    description_width = max(len(row.description) for row in rows)

    lines = []
    for row in rows:
        lines.append(
            "  ".join(
                (
                    row.command.ljust(command_width),
                    row.aliases.ljust(aliases_width),
                    row.description.ljust(description_width),
                    row.example,
                )
            ).rstrip()
        )
        if row is _HEADERS:
            lines.append(
                "  ".join(
                    (
                        "-" * command_width,
                        "-" * aliases_width,
                        "-" * description_width,
                        "-" * len(_HEADERS.example),
                    )
                )
            )

    lines.append("")
    lines.append("Tip: 'bunnyhop <command>' opens the URL in your browser")
    lines.append("     Use --dry-run to print the URL without opening it")
    return "\n".join(lines)
