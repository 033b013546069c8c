"""Line search — pure matching functions and the search engine.

Every function above :class:`SearchEngine` is a **pure** transformation:
no I/O, no side effects, fully deterministic.

Pipeline order (enforced by :meth:`SearchEngine.run`):

1. **Load** — read the whole target through a :class:`TextSource`.
2. **Split** — break the content into lines.
3. **Filter** — keep lines containing the pattern.
"""

from __future__ import annotations

import logging

from minigrep.core.models import MatchResult, SearchRequest
from minigrep.core.protocols import TextSource
from minigrep.exceptions import IoError, MinigrepError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# 1. Split
# ---------------------------------------------------------------------------

def split_lines(contents: str) -> list[str]:
    """Split *contents* on ``\\n``, dropping one ``\\r`` before each ``\\n``.

    A final line break does not produce an empty trailing line, and empty
    content has no lines.  Unlike :meth:`str.splitlines`, form feeds,
    vertical tabs and Unicode separators stay inside their line.
    """
    segments = contents.split("\n")
    # The last segment was not followed by "\n", so its "\r" is content.
    tail = segments.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in segments]
    if tail:
        lines.append(tail)
    return lines


# ---------------------------------------------------------------------------
# 2. Match predicates
# ---------------------------------------------------------------------------

def lower(text: str) -> str:
    """Lower-case *text* one character at a time.

    Mapping each character independently skips context rules such as
    the Greek final sigma, so ``lower(a) in lower(b)`` holds whenever
    ``a in b``.
    """
    return "".join(ch.lower() for ch in text)


def search(pattern: str, contents: str) -> list[str]:
    """Return lines of *contents* containing *pattern*, case-sensitively."""
    return [line for line in split_lines(contents) if pattern in line]


def search_case_insensitive(pattern: str, contents: str) -> list[str]:
    """Return lines of *contents* containing *pattern*, ignoring case.

    Lines are returned in their original, untransformed form.
    """
    needle = lower(pattern)
    return [line for line in split_lines(contents) if needle in lower(line)]


# ---------------------------------------------------------------------------
# 3. Engine
# ---------------------------------------------------------------------------

class SearchEngine:
    """Runs a :class:`SearchRequest` against text loaded from a source.

    Parameters
    ----------
    source:
        Any object satisfying the :class:`TextSource` protocol.
    """

    def __init__(self, source: TextSource) -> None:
        self._source: TextSource = source

    def run(self, request: SearchRequest) -> MatchResult:
        """Execute *request* and return the matching lines.

        The whole file is read before any filtering happens, so a failed
        read never yields a partial result.

        Raises
        ------
        IoError
            If the target cannot be read as text.
        """
        contents = self._load(request.target_path)
        if request.case_sensitive:
            lines = search(request.pattern, contents)
        else:
            lines = search_case_insensitive(request.pattern, contents)
        logger.debug(
            "%d matching line(s) in %s", len(lines), request.target_path,
        )
        return MatchResult(lines=tuple(lines))

    def _load(self, path: str) -> str:
        """Call the source and ensure only our exceptions escape."""
        try:
            contents = self._source.read_text(path)
        except MinigrepError:
            # Already one of ours — let it propagate unchanged.
            raise
        except (OSError, UnicodeError) as exc:
            raise IoError(f"Cannot read {path}: {exc}") from exc
        logger.debug("Loaded %d character(s) from %s", len(contents), path)
        return contents
