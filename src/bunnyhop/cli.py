"""Command-line entry point for bunnyhop."""

import argparse
import logging
import sys
import webbrowser
from pathlib import Path

from bunnyhop import config, listing, stock
from bunnyhop.errors import AppError, UsageError
from bunnyhop.logging_utils import build_run_log_path, log_event, setup_logging
from bunnyhop.models import Config
from bunnyhop.registry import default_registry
from bunnyhop.repl import repl, resolve_line
from bunnyhop.resolver import Resolver

LIST_WORD = "list"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bunnyhop",
        description="bunnyhop - open URLs from short typed commands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bunnyhop gh facebook/react
  bunnyhop stock finviz META
  bunnyhop -n '$AAPL'
  bunnyhop --list

  # Start the interactive prompt
  bunnyhop
        """,
    )
    parser.add_argument(
        "command",
        nargs="*",
        help="Command to resolve (e.g. 'ig reels', 'gh facebook/react')",
    )
    parser.add_argument(
        "-n", "--dry-run",
        action="store_true",
        help="Print the URL without opening a browser",
    )
    parser.add_argument(
        "-l", "--list",
        action="store_true",
        help="List all available commands",
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to config JSON file (default: ~/.config/bunnyhop/config.json)",
    )
    parser.add_argument(
        "--log",
        help="Log file path, or an existing directory to create a run log in",
    )
    return parser


def _resolve_log_path(log_arg: str | None) -> str | None:
    if not log_arg:
        return None
    mapped = config.map_path(log_arg)
    if Path(mapped).is_dir():
        return build_run_log_path(mapped)
    return mapped


def open_url(url: str, app_config: Config) -> None:
    """Open a URL in the configured browser, or the system default."""
    try:
        if app_config.browser:
            opened = webbrowser.get(app_config.browser).open(url)
        else:
            opened = webbrowser.open(url)
    except webbrowser.Error as e:
        raise AppError(f"Failed to open browser '{app_config.browser}': {e}. URL printed above.") from e

    log_event(
        "browser_open",
        level=logging.INFO,
        browser=app_config.browser,
        url=url,
        opened=opened,
    )
    if not opened:
        raise AppError("Failed to open browser. URL printed above.")


def warn_unknown_stock_provider(app_config: Config) -> None:
    """Tell the user on stderr when the configured stock provider doesn't exist."""
    name = app_config.stock_provider
    if stock.find_provider(name) is not None:
        return
    fallback = stock.DEFAULT_PROVIDER.name
    print(f"Warning: Unknown stock provider '{name}', using {fallback} as fallback", file=sys.stderr)
    log_event("stock_provider_unknown", level=logging.WARNING, provider=name, fallback=fallback)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the bunnyhop CLI."""
    args = build_parser().parse_args(argv)
    words: list[str] = args.command
    mode = "list" if args.list else ("resolve" if words else "repl")

    try:
        setup_logging(_resolve_log_path(args.log))
        app_config = config.load_config(args.config)
    except FileNotFoundError:
        print(f"Error: Config not found: {args.config}")
        sys.exit(1)
    except AppError as e:
        print(f"Error: {e}")
        sys.exit(1)

    log_event(
        "app_start",
        level=logging.INFO,
        mode=mode,
        config_file=args.config,
        log_file=args.log,
        default_search=app_config.default_search,
        stock_provider=app_config.stock_provider,
        allowed_count=len(app_config.command_filter.allowed_commands),
        blocked_count=len(app_config.command_filter.blocked_commands),
    )
    warn_unknown_stock_provider(app_config)

    resolver = Resolver(default_registry())

    try:
        if args.dry_run and not words and not args.list:
            raise UsageError("--dry-run needs a command to resolve")
        if args.list or (words and words[0] == LIST_WORD):
            entries = listing.command_doc_entries(resolver.registry, app_config)
            print(listing.render_command_table(entries))
        elif not words:
            repl(resolver, app_config)
        else:
            resolution = resolve_line(resolver, " ".join(words), app_config)
            print(resolution.url)
            if not args.dry_run:
                open_url(resolution.url, app_config)
    except AppError as e:
        print(f"Error: {e}")
        log_event(
            "app_stop",
            level=logging.ERROR,
            reason="error",
            error_type=type(e).__name__,
            error=str(e),
        )
        sys.exit(1)

    log_event("app_stop", level=logging.INFO, reason="normal")


if __name__ == "__main__":
    main()
