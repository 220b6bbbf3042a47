"""Entry point for running bunnyhop as a module."""

# main() in cli.py is the startup error boundary and repl() handles errors
# per line, so there is nothing to catch here.

from bunnyhop.cli import main

if __name__ == "__main__":
    main()
