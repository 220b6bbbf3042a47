"""Literal constants used by bunnyhop."""

APP_NAME = "bunnyhop"

TICKER_PREFIX = "$"

DEFAULT_SEARCH_ENGINE = "google"
SEARCH_ENGINE_TEMPLATES = {
    "google": "https://www.google.com/search?q={}",
    "ddg": "https://duckduckgo.com/?q={}",
    "duckduckgo": "https://duckduckgo.com/?q={}",
    "bing": "https://www.bing.com/search?q={}",
}

DEFAULT_STOCK_PROVIDER = "yahoo"

DEFAULT_CONFIG_PATH = "~/.config/bunnyhop/config.json"

DATETIME_FORMAT_FILENAME = "%Y-%m-%d_%H-%M-%S"
LOG_FILE_EXTENSION = ".log"

DEBUG_ENV_VAR = "BUNNYHOP_DEBUG"
