"""Interactive loop: type a command, get its URL."""

import logging
import os
import traceback

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from bunnyhop.config import expand_alias
from bunnyhop.constants import DEBUG_ENV_VAR
from bunnyhop.errors import AppError
from bunnyhop.listing import command_doc_entries, render_command_table
from bunnyhop.logging_utils import log_event, summarize_text
from bunnyhop.models import Config, Resolution
from bunnyhop.query import get_command_args, get_command_from_query_string
from bunnyhop.resolver import Resolver

EXIT_COMMANDS = frozenset(("exit", "quit"))
LIST_COMMAND = ":list"


def _report_unexpected_error(error: Exception) -> None:
    """Print an unexpected exception with optional debug traceback."""
    print(f"ERROR: {error}")
    if os.getenv(DEBUG_ENV_VAR):
        print("Debug traceback:")
        traceback.print_exc()


def resolve_line(resolver: Resolver, line: str, config: Config | None) -> Resolution:
    """Expand user aliases, resolve one query line and log the outcome."""
    query = expand_alias(config, line.strip())
    command = get_command_from_query_string(query)
    resolution = resolver.resolve_with_route(command, query, config)
    log_event(
        "command_resolve",
        level=logging.INFO,
        command=command,
        args_summary=summarize_text(get_command_args(query, (command,))),
        route=resolution.route.value,
        canonical_name=resolution.canonical_name,
        url=resolution.url,
    )
    return resolution


def handle_line(resolver: Resolver, line: str, config: Config | None) -> str | None:
    """Return the text to print for one REPL line, or None to exit."""
    stripped = line.strip()
    if stripped in EXIT_COMMANDS:
        return None
    if stripped == LIST_COMMAND:
        return render_command_table(command_doc_entries(resolver.registry, config))
    return resolve_line(resolver, stripped, config).url


def repl(resolver: Resolver, config: Config | None, session: PromptSession | None = None) -> None:
    """Run the REPL loop."""
    if session is None:
        session = PromptSession(history=InMemoryHistory())

    print(f"Type a command to see its URL, '{LIST_COMMAND}' for all commands,")
    print("'exit' or 'quit' to exit, or Ctrl-D")

    while True:
        print()
        line = ""
        try:
            line = session.prompt("> ")

            if not line.strip():
                continue

            output = handle_line(resolver, line, config)
            if output is None:
                print("Exiting.")
                break

            print(output)

        except EOFError:
            print()
            break

        except KeyboardInterrupt:
            print()
            continue

        except AppError as e:
            print(f"ERROR: {e}")

        except Exception as e:
            log_event(
                "command_error",
                level=logging.ERROR,
                command=get_command_from_query_string(line),
                args_summary=summarize_text(line),
                error_type=type(e).__name__,
                error=str(e),
            )
            _report_unexpected_error(e)
