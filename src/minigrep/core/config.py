"""Configuration resolver — process arguments and environment to a request.

The resolver only reads the values it is handed.  It performs no file
checks; whether ``target_path`` exists is the search engine's concern.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import PurePath

from minigrep.core.models import SearchRequest
from minigrep.core.settings import IGNORE_CASE_VAR, Settings, load_settings
from minigrep.exceptions import UsageError

logger = logging.getLogger(__name__)

DEFAULT_PROGRAM_NAME: str = "minigrep"

_EXPECTED_PAYLOAD: int = 2


def program_name(token: str | None) -> str:
    """Return the display name for the program-identifying *token*."""
    if not token:
        return DEFAULT_PROGRAM_NAME
    name = PurePath(token).name
    # ``python -m minigrep`` reports the package's __main__ module.
    if not name or name == "__main__.py":
        return DEFAULT_PROGRAM_NAME
    return name


def usage_text(prog: str) -> str:
    """Build the usage message shown on argument errors and ``--help``."""
    return (
        f"Usage: {prog} <pattern> <file_path>\n"
        f"Set the environment variable {IGNORE_CASE_VAR} to search "
        "case-insensitively."
    )


def resolve_request(
    argv: Sequence[str],
    settings: Settings | None = None,
) -> SearchRequest:
    """Turn raw process inputs into a :class:`SearchRequest`.

    Parameters
    ----------
    argv:
        Full argument vector.  The first token names the program and is
        not part of the payload; exactly two payload tokens must follow
        (pattern, then file path).
    settings:
        Environment-derived configuration.  Loaded from the process
        environment when omitted.

    Raises
    ------
    UsageError
        If the payload count is not exactly two, or either token is empty.
    ConfigurationError
        If *settings* is omitted and the environment holds invalid values.
    """
    tokens = list(argv)
    prog = program_name(tokens[0] if tokens else None)
    usage = usage_text(prog)
    payload = tokens[1:]

    if not tokens:
        raise UsageError("Unable to determine the program name.", usage=usage)
    if not payload:
        raise UsageError("Search pattern argument not found.", usage=usage)
    if len(payload) == 1:
        raise UsageError("File path argument not found.", usage=usage)
    if len(payload) > _EXPECTED_PAYLOAD:
        raise UsageError(
            f"Expected {_EXPECTED_PAYLOAD} arguments, got {len(payload)}.",
            usage=usage,
            hint="Quote the pattern if it contains spaces.",
        )

    pattern, target_path = payload
    if not pattern:
        raise UsageError("Search pattern must not be empty.", usage=usage)
    if not target_path:
        raise UsageError("File path must not be empty.", usage=usage)

    if settings is None:
        settings = load_settings()

    request = SearchRequest(
        pattern=pattern,
        target_path=target_path,
        case_sensitive=settings.case_sensitive,
    )
    logger.debug("Resolved request: %r", request)
    return request
