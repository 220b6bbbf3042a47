"""Tests for CLI bootstrap and startup wiring."""

import json
import logging
import sys

import pytest

from bunnyhop import cli


class FakeController:
    """Stand-in for a webbrowser controller."""

    def __init__(self, result=True):
        self.result = result
        self.opened = []

    def open(self, url):
        self.opened.append(url)
        return self.result


@pytest.fixture(autouse=True)
def no_user_config(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.config/bunnyhop/config.json."""
    monkeypatch.setattr(cli.config, "default_config_path", lambda: str(tmp_path / "absent.json"))


@pytest.fixture
def browser(monkeypatch):
    controller = FakeController()
    monkeypatch.setattr(cli.webbrowser, "open", controller.open)
    return controller


@pytest.fixture
def restore_root_handlers():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def _write_config(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


class TestMain:
    """Test CLI main entry point."""

    def test_dry_run_prints_url_only(self, monkeypatch, capsys, browser):
        """Test that --dry-run prints the URL and never opens a browser."""
        monkeypatch.setattr(sys, "argv", ["bunnyhop", "--dry-run", "gh", "facebook/react"])

        cli.main()

        assert capsys.readouterr().out.strip() == "https://github.com/facebook/react"
        assert browser.opened == []

    def test_short_dry_run_flag(self, capsys, browser):
        """Test short dry run flag."""
        cli.main(["-n", "$AAPL"])

        assert capsys.readouterr().out.strip() == "https://finance.yahoo.com/quote/AAPL/"
        assert browser.opened == []

    def test_opens_default_browser(self, capsys, browser):
        """Test opens default browser."""
        cli.main(["r", "r/rust"])

        assert capsys.readouterr().out.strip() == "https://reddit.com/r/rust"
        assert browser.opened == ["https://reddit.com/r/rust"]

    def test_unknown_command_searches(self, capsys, browser):
        """Test unknown command searches."""
        cli.main(["-n", "hello", "world"])
        assert capsys.readouterr().out.strip() == "https://www.google.com/search?q=hello%20world"

    def test_configured_browser(self, tmp_path, monkeypatch, capsys):
        """Test configured browser."""
        controller = FakeController()
        requested = []

        def fake_get(name):
            requested.append(name)
            return controller

        monkeypatch.setattr(cli.webbrowser, "get", fake_get)
        config_path = _write_config(tmp_path / "c.json", {"browser": "firefox"})

        cli.main(["--config", config_path, "yt"])

        assert requested == ["firefox"]
        assert controller.opened == ["https://youtube.com/"]

    def test_browser_error_exits(self, tmp_path, monkeypatch, capsys):
        """Test browser error exits."""
        def failing_get(name):
            raise cli.webbrowser.Error("could not locate runnable browser")

        monkeypatch.setattr(cli.webbrowser, "get", failing_get)
        config_path = _write_config(tmp_path / "c.json", {"browser": "nosuchbrowser"})

        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--config", config_path, "gh"])

        assert exc_info.value.code == 1
        output = capsys.readouterr().out
        assert "https://github.com" in output
        assert "Error: Failed to open browser 'nosuchbrowser'" in output

    def test_browser_refusal_exits(self, monkeypatch, capsys):
        """Test browser refusal exits."""
        monkeypatch.setattr(cli.webbrowser, "open", FakeController(result=False).open)

        with pytest.raises(SystemExit) as exc_info:
            cli.main(["gh"])

        assert exc_info.value.code == 1
        assert "Error: Failed to open browser" in capsys.readouterr().out

    def test_config_applies_filter_and_aliases(self, tmp_path, capsys, browser):
        """Test config applies filter and aliases."""
        config_path = _write_config(
            tmp_path / "c.json",
            {"blocked_commands": ["reddit"], "default_search": "bing", "aliases": {"work": "gh acme/app"}},
        )

        cli.main(["-n", "--config", config_path, "r", "rust"])
        cli.main(["-n", "--config", config_path, "work"])

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "https://www.bing.com/search?q=r%20rust",
            "https://github.com/acme/app",
        ]

    def test_missing_config_exits(self, tmp_path, capsys):
        """Test that an explicit config path that doesn't exist is an error."""
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--config", str(tmp_path / "missing.json"), "gh"])

        assert exc_info.value.code == 1
        assert "Error: Config not found" in capsys.readouterr().out

    def test_invalid_config_exits(self, tmp_path, capsys):
        """Test invalid config exits."""
        config_path = _write_config(tmp_path / "c.json", {"colour": "blue"})

        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--config", config_path, "gh"])

        assert exc_info.value.code == 1
        assert "Error: Unknown config fields: colour" in capsys.readouterr().out

    @pytest.mark.parametrize("argv", [["--list"], ["-l"], ["list"]])
    def test_list(self, argv, capsys, browser):
        """Test list."""
        cli.main(argv)

        output = capsys.readouterr().out
        assert output.startswith("Command")
        assert "gh facebook/react" in output
        assert browser.opened == []

    def test_list_respects_filter(self, tmp_path, capsys):
        """Test list respects filter."""
        config_path = _write_config(tmp_path / "c.json", {"allowed_commands": ["github"]})

        cli.main(["--list", "--config", config_path])

        output = capsys.readouterr().out
        assert "gh facebook/react" in output
        assert "r r/rust" not in output

    def test_dry_run_without_command_exits(self, capsys):
        """Test dry run without command exits."""
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--dry-run"])

        assert exc_info.value.code == 1
        assert "Error: --dry-run needs a command" in capsys.readouterr().out

    def test_unknown_stock_provider_warns_on_stderr(self, tmp_path, capsys):
        """Test that a mistyped stock_provider is reported while lookups fall back to Yahoo."""
        config_path = _write_config(tmp_path / "c.json", {"stock_provider": "finvz"})

        cli.main(["-n", "--config", config_path, "$AAPL"])

        captured = capsys.readouterr()
        assert "Warning: Unknown stock provider 'finvz', using yahoo as fallback" in captured.err
        assert captured.out.strip() == "https://finance.yahoo.com/quote/AAPL/"

    def test_known_stock_provider_no_warning(self, tmp_path, capsys):
        """Test that a valid stock_provider prints no warning."""
        config_path = _write_config(tmp_path / "c.json", {"stock_provider": "TV"})

        cli.main(["-n", "--config", config_path, "$AAPL"])

        captured = capsys.readouterr()
        assert captured.err == ""
        assert captured.out.strip() == "https://www.tradingview.com/symbols/AAPL/"

    def test_no_arguments_starts_repl(self, monkeypatch):
        """Test no arguments starts repl."""
        calls = []
        monkeypatch.setattr(cli, "repl", lambda resolver, config: calls.append((resolver, config)))

        cli.main([])

        assert len(calls) == 1
        resolver, config = calls[0]
        assert "gh" in resolver.registry

    def test_log_directory_creates_run_log(self, tmp_path, capsys, restore_root_handlers):
        """Test log directory creates run log."""
        logs_dir = tmp_path / "logs"
        logs_dir.mkdir()

        cli.main(["-n", "--log", str(logs_dir), "gh", "facebook/react"])

        log_files = list(logs_dir.glob("bunnyhop_*.log"))
        assert len(log_files) == 1
        content = log_files[0].read_text(encoding="utf-8")
        assert "=== app_start ===" in content
        assert "=== command_resolve ===" in content
        assert "route: command" in content
        assert "canonical_name: github" in content
        assert "=== app_stop ===" in content
