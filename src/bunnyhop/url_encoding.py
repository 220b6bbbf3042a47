"""Percent-encoding helpers shared by the URL builders."""

from urllib.parse import quote

_PATH_SAFE_CHARS = "/@"


def encode_url(text: str) -> str:
    """Percent-encode every byte of the UTF-8 text that is not ASCII alphanumeric.

    This is stricter than ``urllib.parse.quote``: ``.``, ``-``, ``_`` and ``~``
    are encoded too, so tickers such as ``BRK.B`` survive as a single opaque
    value (``BRK%2EB``).
    """
    parts = []
    for byte in text.encode("utf-8"):
        char = chr(byte)
        if byte < 128 and char.isalnum():
            parts.append(char)
        else:
            parts.append(f"%{byte:02X}")
    return "".join(parts)


def build_search_url(base_url: str, param: str, query: str) -> str:
    """Build ``base?param=<encoded query>``."""
    return f"{base_url}?{param}={encode_url(query)}"


def build_search_url_with_separator(
    base_url: str,
    param: str,
    query: str,
    separator: str,
) -> str:
    """Build a search URL whose parameters follow ``separator`` (e.g. a ``#`` fragment)."""
    return f"{base_url}{separator}{param}={encode_url(query)}"


def build_path_url(base_url: str, path: str) -> str:
    """Append a path to a base URL, keeping ``/`` and ``@`` as structure."""
    return f"{base_url}/{quote(path, safe=_PATH_SAFE_CHARS)}"
