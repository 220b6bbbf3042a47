"""Tests for search module."""

import pytest

from bunnyhop.search import get_search_url


class TestGetSearchUrl:
    """Test get_search_url function."""

    def test_default_is_google(self):
        """Test default is google."""
        assert get_search_url("rust async") == "https://www.google.com/search?q=rust%20async"

    @pytest.mark.parametrize(
        "engine, expected",
        [
            ("google", "https://www.google.com/search?q=hello%20world"),
            ("ddg", "https://duckduckgo.com/?q=hello%20world"),
            ("duckduckgo", "https://duckduckgo.com/?q=hello%20world"),
            ("bing", "https://www.bing.com/search?q=hello%20world"),
        ],
    )
    def test_known_engines(self, engine, expected):
        """Test known engines."""
        assert get_search_url("hello world", engine) == expected

    def test_unknown_engine_falls_back_to_google(self):
        """Test unknown engine falls back to google."""
        assert get_search_url("x", "altavista") == "https://www.google.com/search?q=x"

    def test_empty_engine_falls_back_to_google(self):
        """Test empty engine falls back to google."""
        assert get_search_url("x", "") == "https://www.google.com/search?q=x"

    def test_query_fully_encoded(self):
        """Test that the whole query, command word included, is encoded."""
        assert get_search_url("foo&bar=1") == "https://www.google.com/search?q=foo%26bar%3D1"
