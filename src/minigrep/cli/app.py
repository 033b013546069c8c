"""CLI application entry point for minigrep.

This module is the **sole error boundary** for the entire application.
It catches :class:`~minigrep.exceptions.MinigrepError`,
``KeyboardInterrupt``, a closed stdout pipe and any unexpected
``Exception``, renders a message on stderr, and returns well-defined
exit codes.

Architecture notes
------------------
* No search logic lives here — work is delegated to ``core`` and
  ``infra``.
* Matching lines go to stdout with plain ``print``; diagnostics go to
  stderr through the Rich console proxy.
* This module is the only place that translates between domain errors
  and the OS process exit code.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence

from minigrep.cli import exit_codes
from minigrep.cli.console import console, get_log_handler
from minigrep.core.settings import Settings, load_settings
from minigrep.exceptions import IoError, MinigrepError, UsageError


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def configure_logging(settings: Settings) -> None:
    """Attach a stderr handler to the ``minigrep`` logger.

    The level comes from ``settings.log_level`` (``MINIGREP_LOG_LEVEL``).
    """
    package_logger = logging.getLogger("minigrep")
    package_logger.setLevel(settings.log_level_numeric())
    if not package_logger.handlers:
        package_logger.addHandler(get_log_handler())


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_search(argv: Sequence[str], settings: Settings) -> int:
    """Resolve the request, run the search, and print matching lines.

    Nothing is printed until the search has finished, so a failed read
    produces no partial output.
    """
    from minigrep.core.config import resolve_request
    from minigrep.core.search import SearchEngine
    from minigrep.infra.file_source import FileTextSource

    request = resolve_request(argv, settings)
    result = SearchEngine(FileTextSource()).run(request)

    for line in result:
        print(line)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the minigrep CLI.

    Parameters
    ----------
    argv:
        Full argument vector, program token first.  When ``None``
        (default), ``sys.argv`` is used.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    ConfigurationError
        When an environment variable holds an unsupported value.
    UsageError
        On a malformed command line.
    IoError
        When the target file cannot be read.
    """
    tokens = list(sys.argv if argv is None else argv)
    settings = load_settings()
    configure_logging(settings)
    return _handle_search(tokens, settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _report(label: str, exc: MinigrepError) -> None:
    console.print_message(f"{label}:", str(exc))
    if exc.hint:
        console.print_message("Hint:", exc.hint, style="yellow")


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush cannot fail."""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        # Not backed by a file descriptor; nothing left to flush.
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)


def cli(argv: Sequence[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except UsageError as exc:
        _report("Problem parsing arguments", exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except IoError as exc:
        _report("Application error", exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except MinigrepError as exc:
        _report("Error", exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except BrokenPipeError:
        # Reader went away (``minigrep x f | head -1``); stay quiet.
        _silence_stdout()
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print_message("Aborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print_message(
            "Unexpected error.",
            f"Please report this issue.\n  {type(exc).__name__}: {exc}",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
