"""
Tests for the command-line entry point.
"""

import logging
from unittest.mock import MagicMock, patch

from file_navigator import cli_browser


class TestCliBrowser:
    """Test cases for cli_browser.main."""

    def test_runs_session_at_root(self, temp_directory):
        session = MagicMock()
        with patch.object(
            cli_browser.container, "get_browse_session_use_case", return_value=session
        ), patch("logging.basicConfig") as basic_config:
            exit_code = cli_browser.main(["--root", temp_directory])

        assert exit_code == 0
        session.run.assert_called_once_with(temp_directory)
        assert basic_config.call_args.kwargs["level"] == logging.WARNING

    def test_invalid_root(self, capsys):
        exit_code = cli_browser.main(["--root", "/nonexistent/root"])

        assert exit_code == 2
        assert "Root directory does not exist" in capsys.readouterr().err

    def test_invalid_log_level(self, temp_directory, capsys):
        exit_code = cli_browser.main(["--root", temp_directory, "--log-level", "loud"])

        assert exit_code == 2
        assert "Unknown log level" in capsys.readouterr().err

    def test_no_color_replaces_console(self, temp_directory):
        session = MagicMock()
        with patch.object(
            cli_browser.container, "get_browse_session_use_case", return_value=session
        ), patch.object(cli_browser.container, "set_console") as set_console, patch(
            "logging.basicConfig"
        ):
            cli_browser.main(["--root", temp_directory, "--no-color"])

        set_console.assert_called_once()
