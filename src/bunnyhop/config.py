"""Config management: loading, validation, path mapping and user aliases."""

import json
import re
import unicodedata
from pathlib import Path
from typing import Any

from bunnyhop.constants import DEFAULT_CONFIG_PATH
from bunnyhop.errors import ConfigError
from bunnyhop.models import Config

_KNOWN_FIELDS = frozenset(
    (
        "default_search",
        "stock_provider",
        "allowed_commands",
        "blocked_commands",
        "aliases",
        "browser",
    )
)
_WINDOWS_DRIVE_RELATIVE_RE = re.compile(r"^[A-Za-z]:[^/\\]")


def _normalize_path_text(path: str) -> str:
    normalized = unicodedata.normalize("NFC", path)
    if "\0" in normalized:
        raise ConfigError("Path cannot contain NUL bytes")
    return normalized


def _runtime_app_root() -> Path:
    return Path(__file__).resolve().parent


def map_path(path: str) -> str:
    """Resolve a path string to an absolute path string.

    ~ or ~/...  -> user home directory
    @ or @/...  -> runtime app root (package directory)
    Absolute    -> used as-is
    Relative    -> resolved against the current directory
    """
    normalized = _normalize_path_text(path)

    if _WINDOWS_DRIVE_RELATIVE_RE.match(normalized):
        raise ConfigError(
            f"Invalid path: {path}. Windows drive paths must be fully qualified "
            "(e.g. 'C:\\\\folder', not 'C:folder')."
        )

    if normalized.startswith("@"):
        suffix = re.sub(r"[\\/]+", "/", normalized[1:]).lstrip("/")
        result = (_runtime_app_root() / suffix) if suffix else _runtime_app_root()
        return str(result.resolve())

    candidate = Path(re.sub(r"[\\/]+", "/", normalized)).expanduser()
    return str(candidate.resolve())


def _require_string_list(config: dict[str, Any], field_name: str) -> None:
    value = config.get(field_name)
    if value is None:
        return
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{field_name} must be a list of strings")
    if any(not v.strip() for v in value):
        raise ConfigError(f"{field_name} cannot contain empty entries")


def _require_optional_string(config: dict[str, Any], field_name: str) -> None:
    if field_name in config and config[field_name] is not None:
        if not isinstance(config[field_name], str) or not config[field_name]:
            raise ConfigError(f"{field_name} must be a non-empty string")


def validate_config(config: dict[str, Any]) -> None:
    """Validate config structure.

    Args:
        config: Config dictionary to validate

    Raises:
        ConfigError: If config is invalid
    """
    if not isinstance(config, dict):
        raise ConfigError("Config must be a JSON object")

    unknown = sorted(set(config) - _KNOWN_FIELDS)
    if unknown:
        raise ConfigError(f"Unknown config fields: {', '.join(unknown)}")

    _require_optional_string(config, "default_search")
    _require_optional_string(config, "stock_provider")
    _require_optional_string(config, "browser")
    _require_string_list(config, "allowed_commands")
    _require_string_list(config, "blocked_commands")

    aliases = config.get("aliases")
    if aliases is not None:
        if not isinstance(aliases, dict):
            raise ConfigError("aliases must be a JSON object")
        for name, expansion in aliases.items():
            if not name.strip() or len(name.split()) != 1:
                raise ConfigError(f"Invalid alias name: {name!r}")
            if not isinstance(expansion, str) or not expansion.strip():
                raise ConfigError(f"Alias '{name}' must map to a non-empty string")


def default_config_path() -> str:
    return map_path(DEFAULT_CONFIG_PATH)


def load_config(path: str | None = None) -> Config:
    """Load and validate config from a JSON file.

    Args:
        path: Explicit config path; None uses the default location

    Returns:
        Config model. A missing file at the default location yields defaults.

    Raises:
        FileNotFoundError: If an explicit config path doesn't exist
        ConfigError: If the config path/data is invalid or the JSON is malformed
    """
    config_path = Path(map_path(path)) if path is not None else Path(default_config_path())

    if not config_path.exists():
        if path is None:
            return Config()
        raise FileNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config {config_path}: {e}") from e

    validate_config(raw)
    return Config.from_dict(raw)


def expand_alias(config: Config | None, query: str) -> str:
    """Replace a query that exactly matches a user alias with its expansion."""
    if config is None:
        return query
    return config.aliases.get(query.strip(), query)
