"""Splitting raw query text into a command token and its arguments."""

from typing import Iterable


def get_command_from_query_string(query: str) -> str:
    """Return the first whitespace-delimited token of the query, or ``""``."""
    parts = query.split(maxsplit=1)
    return parts[0] if parts else ""


def get_command_args(full_query: str, aliases: Iterable[str]) -> str:
    """Strip a leading alias token from the query.

    Examples:
        ("gh", ["gh"]) -> ""
        ("gh facebook/react", ["gh"]) -> "facebook/react"
        ("react hooks", ["gh"]) -> "react hooks"

    Matching is case-sensitive: "GH react" is returned unchanged for ["gh"].
    """
    stripped = full_query.lstrip()
    first_token = get_command_from_query_string(stripped)
    if not first_token:
        return full_query

    for alias in aliases:
        if first_token == alias:
            return stripped[len(alias):].lstrip()

    return full_query
