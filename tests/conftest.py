"""Pytest configuration and fixtures for bunnyhop tests."""

import json
import logging
import tempfile
from pathlib import Path

import pytest

from bunnyhop.models import CommandFilter, Config
from bunnyhop.registry import default_registry
from bunnyhop.resolver import Resolver


@pytest.fixture(autouse=True)
def reset_logging_disable():
    """Undo the global logging.disable() that setup_logging() applies."""
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture
def temp_dir():
    """Create temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def resolver(registry):
    return Resolver(registry)


@pytest.fixture
def blocking_config():
    """Config that hides reddit and github by different names."""
    return Config(command_filter=CommandFilter.from_lists(blocked=["reddit", "gh"]))


@pytest.fixture
def allow_only_config():
    """Config whose allow-list permits only github and youtube."""
    return Config(
        command_filter=CommandFilter.from_lists(
            allowed=["github", "yt"],
            blocked=["github"],
        )
    )


@pytest.fixture
def sample_config_file(temp_dir):
    """Create a sample config JSON file for testing."""
    payload = {
        "default_search": "ddg",
        "stock_provider": "finviz",
        "blocked_commands": ["reddit"],
        "aliases": {"work": "gh mycompany/repo"},
    }

    config_path = temp_dir / "config.json"
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)

    return config_path
