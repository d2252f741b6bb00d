"""Tests for CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from wordfinder.cli import _setup_logging, app
from wordfinder.models import SearchReport


runner = CliRunner()


class TestSetupLogging:
    """Tests for _setup_logging helper."""

    def test_setup_logging_verbose(self) -> None:
        """Verbose mode sets DEBUG level."""
        with patch("wordfinder.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=True)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.DEBUG

    def test_setup_logging_normal(self) -> None:
        """Normal mode sets INFO level."""
        with patch("wordfinder.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=False)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.INFO


class TestSearchCommand:
    """Tests for the search command."""

    def test_search_finds_occurrences(self, tmp_path: Path) -> None:
        root = tmp_path / "docs"
        root.mkdir()
        (root / "a.txt").write_text("vamshi Vamshi")
        (root / "b.txt").write_text("VAMSHI")
        logs = tmp_path / "logs"

        result = runner.invoke(app, ["search", str(root), "vamshi", str(logs)])

        assert result.exit_code == 0
        assert "Found 3 occurrences" in result.stdout
        assert (logs / "logfile_1.txt").exists()

    def test_search_no_occurrences(self, tmp_path: Path) -> None:
        root = tmp_path / "docs"
        root.mkdir()
        (root / "a.txt").write_text("nothing")

        result = runner.invoke(app, ["search", str(root), "vamshi", str(tmp_path / "logs")])

        assert result.exit_code == 0
        assert "No occurrences found" in result.stdout

    def test_search_not_a_directory(self, tmp_path: Path) -> None:
        """Reports bad input without creating logs."""
        logs = tmp_path / "logs"

        result = runner.invoke(app, ["search", str(tmp_path / "missing"), "vamshi", str(logs)])

        assert result.exit_code == 0
        assert "not a directory" in result.stdout
        assert not logs.exists()

    @patch("wordfinder.cli.SearchDispatcher")
    def test_search_not_a_directory_from_report(
        self, mock_dispatcher_class: MagicMock, tmp_path: Path
    ) -> None:
        """The directory check is left to the dispatcher."""
        mock_dispatcher = MagicMock()
        mock_dispatcher.run.return_value = SearchReport(not_directory=True)
        mock_dispatcher_class.return_value = mock_dispatcher

        result = runner.invoke(app, ["search", str(tmp_path / "missing"), "cat", str(tmp_path / "logs")])

        assert result.exit_code == 0
        assert mock_dispatcher.run.called
        assert "not a directory" in result.stdout
        assert "Scanned" not in result.stdout

    def test_search_blank_word(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["search", str(tmp_path), " ", str(tmp_path / "logs")])

        assert result.exit_code != 0

    def test_search_invalid_workers(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["search", str(tmp_path), "cat", str(tmp_path / "logs"), "--workers", "0"]
        )

        assert result.exit_code != 0

    @patch("wordfinder.cli.SearchDispatcher")
    def test_search_options_forwarded(self, mock_dispatcher_class: MagicMock, tmp_path: Path) -> None:
        """Worker count, timeout and strategy reach the dispatcher config."""
        mock_dispatcher = MagicMock()
        mock_dispatcher.run.return_value = SearchReport(total=1, matched=1, timed_out=True)
        mock_dispatcher_class.return_value = mock_dispatcher

        result = runner.invoke(
            app,
            [
                "search", str(tmp_path), "cat", str(tmp_path / "logs"),
                "-w", "4", "--timeout", "1.5", "--strategy", "remainder", "-v",
            ],
        )

        assert result.exit_code == 0
        config = mock_dispatcher_class.call_args[0][0]
        assert config.worker_count == 4
        assert config.shutdown_timeout == 1.5
        assert config.strategy == "remainder"
        request = mock_dispatcher.run.call_args[0][0]
        assert request.word == "cat"
        assert "partial" in result.stdout


class TestReportCommand:
    """Tests for the report command."""

    def test_report_totals(self, tmp_path: Path) -> None:
        (tmp_path / "logfile_1.txt").write_text("/a.txt: 2 occurrences\n")
        (tmp_path / "logfile_2.txt").write_text("/b.txt: 3 occurrences\n")

        result = runner.invoke(app, ["report", str(tmp_path)])

        assert result.exit_code == 0
        assert "Total: 5 occurrences in 2 file(s)" in result.stdout

    def test_report_empty(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["report", str(tmp_path)])

        assert result.exit_code == 0
        assert "No log entries found" in result.stdout

    def test_report_after_search(self, tmp_path: Path) -> None:
        root = tmp_path / "docs"
        (root / "sub").mkdir(parents=True)
        (root / "a.txt").write_text("cat")
        (root / "sub" / "b.txt").write_text("cat cat")
        logs = tmp_path / "logs"

        runner.invoke(app, ["search", str(root), "cat", str(logs)])
        result = runner.invoke(app, ["report", str(logs)])

        assert result.exit_code == 0
        assert "Total: 3 occurrences in 2 file(s)" in result.stdout
