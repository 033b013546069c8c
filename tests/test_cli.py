"""End-to-end tests for the CLI (cli/app.py).

Real files under ``tmp_path``; output captured with ``capsys``.

Coverage:
* ``main`` prints matching lines verbatim and returns SUCCESS.
* ``IGNORE_CASE`` switches matching mode.
* ``cli`` maps usage and I/O errors to exit code 1 with a diagnostic.
* Unexpected errors and Ctrl+C map to their own exit codes.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from minigrep.cli import exit_codes
from minigrep.cli.app import cli, configure_logging, main
from minigrep.core.settings import Settings
from minigrep.exceptions import IoError, UsageError


# ---------------------------------------------------------------------------
# main — success paths
# ---------------------------------------------------------------------------

class TestMain:
    def test_prints_matching_lines(
        self, poem_file: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(["minigrep", "duct", str(poem_file)])
        captured = capsys.readouterr()
        assert code == exit_codes.SUCCESS
        assert captured.out == "safe, fast, productive.\n"
        assert captured.err == ""

    def test_ignore_case_from_environment(
        self,
        trust_file: Path,
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("IGNORE_CASE", "")
        code = main(["minigrep", "rUsT", str(trust_file)])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == "Rust:\nTrust me.\n"

    def test_no_match_is_success(
        self, poem_file: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(["minigrep", "zzz", str(poem_file)])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == ""

    def test_lines_printed_verbatim(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = tmp_path / "markup.txt"
        path.write_text("[bold]tag[/bold]  \r\nplain\n", encoding="utf-8")
        main(["minigrep", "tag", str(path)])
        assert capsys.readouterr().out == "[bold]tag[/bold]  \n"

    def test_defaults_to_sys_argv(
        self,
        poem_file: Path,
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr("sys.argv", ["minigrep", "Pick", str(poem_file)])
        assert main() == exit_codes.SUCCESS
        assert capsys.readouterr().out == "Pick three.\n"

    def test_usage_error_raised(self) -> None:
        with pytest.raises(UsageError):
            main(["minigrep", "duct"])

    def test_io_error_raised(self, tmp_path: Path) -> None:
        with pytest.raises(IoError):
            main(["minigrep", "duct", str(tmp_path / "absent.txt")])


# ---------------------------------------------------------------------------
# cli — error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def test_success_exit_code(
        self, poem_file: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli(["minigrep", "duct", str(poem_file)])
        assert exc_info.value.code == exit_codes.SUCCESS
        assert capsys.readouterr().out == "safe, fast, productive.\n"

    def test_usage_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli(["minigrep", "duct"])
        captured = capsys.readouterr()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert captured.out == ""
        assert "Problem parsing arguments" in captured.err
        assert "Usage: minigrep <pattern> <file_path>" in captured.err

    def test_io_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli(["minigrep", "duct", str(tmp_path / "absent.txt")])
        captured = capsys.readouterr()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert captured.out == ""
        assert "Application error" in captured.err
        assert "Hint" in captured.err

    def test_invalid_text_is_io_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = tmp_path / "binary.bin"
        path.write_bytes(b"duct\n\xff\xfe")
        with pytest.raises(SystemExit) as exc_info:
            cli(["minigrep", "duct", str(path)])
        captured = capsys.readouterr()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert captured.out == ""

    def test_keyboard_interrupt(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from minigrep.cli import app as app_module

        def _interrupt(argv: list[str], settings: object) -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr(app_module, "_handle_search", _interrupt)
        with pytest.raises(SystemExit) as exc_info:
            cli(["minigrep", "a", "b"])
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT
        assert "Aborted by user" in capsys.readouterr().err

    def test_unexpected_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from minigrep.cli import app as app_module

        def _bug(argv: list[str], settings: object) -> int:
            raise RuntimeError("kaboom")

        monkeypatch.setattr(app_module, "_handle_search", _bug)
        with pytest.raises(SystemExit) as exc_info:
            cli(["minigrep", "a", "b"])
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: kaboom" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Line endings, closed pipes, literal diagnostics
# ---------------------------------------------------------------------------

class TestEdgeCases:
    def test_carriage_return_at_end_of_file_kept(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = tmp_path / "cr.txt"
        path.write_bytes(b"foo\nbaz\r")
        assert main(["minigrep", "baz", str(path)]) == exit_codes.SUCCESS
        assert capsys.readouterr().out == "baz\r\n"

    def test_crlf_terminator_removed(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"foo\r\nbaz\r\n")
        main(["minigrep", "baz", str(path)])
        assert capsys.readouterr().out == "baz\n"

    def test_broken_pipe_exits_quietly(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from minigrep.cli import app as app_module

        def _closed(argv: list[str], settings: object) -> int:
            raise BrokenPipeError

        monkeypatch.setattr(app_module, "_handle_search", _closed)
        silenced: list[bool] = []
        monkeypatch.setattr(app_module, "_silence_stdout", lambda: silenced.append(True))
        with pytest.raises(SystemExit) as exc_info:
            cli(["minigrep", "a", "b"])
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert capsys.readouterr().err == ""
        assert silenced == [True]

    def test_bracketed_path_rendered_literally(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        missing = tmp_path / "[yellow]notes[/yellow].txt"
        with pytest.raises(SystemExit):
            cli(["minigrep", "x", str(missing)])
        assert "[yellow]notes[/yellow].txt" in capsys.readouterr().err

    def test_invalid_log_level_exits_one(
        self,
        poem_file: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("MINIGREP_LOG_LEVEL", "chatty")
        with pytest.raises(SystemExit) as exc_info:
            cli(["minigrep", "duct", str(poem_file)])
        captured = capsys.readouterr()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert captured.out == ""
        assert "MINIGREP_LOG_LEVEL" in captured.err


# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

class TestConfigureLogging:
    def test_default_level_is_warning(self) -> None:
        configure_logging(Settings())
        assert logging.getLogger("minigrep").level == logging.WARNING

    def test_level_from_settings(self) -> None:
        configure_logging(Settings(MINIGREP_LOG_LEVEL="debug"))
        assert logging.getLogger("minigrep").level == logging.DEBUG
        configure_logging(Settings())

    def test_handler_attached_once(self) -> None:
        configure_logging(Settings())
        configure_logging(Settings())
        assert len(logging.getLogger("minigrep").handlers) == 1
