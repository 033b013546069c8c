"""Domain models for minigrep.

Both models are **frozen** dataclasses — immutable value objects created
once per invocation and consumed once.  They carry no I/O and no
dependencies on external packages.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from minigrep.exceptions import UsageError


# ---------------------------------------------------------------------------
# Search request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SearchRequest:
    """A validated description of one search."""

    pattern: str
    """Literal substring to look for.  Never empty."""

    target_path: str
    """Path of the text file to search.  Never empty."""

    case_sensitive: bool = True
    """``False`` when matching should ignore case."""

    def __post_init__(self) -> None:
        if not self.pattern:
            raise UsageError("Search pattern must not be empty.")
        if not self.target_path:
            raise UsageError("File path must not be empty.")


# ---------------------------------------------------------------------------
# Search result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MatchResult:
    """Immutable, ordered collection of matching lines.

    Lines appear in source-file order, untransformed, one entry per
    physical line.
    """

    lines: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.lines)

    def __bool__(self) -> bool:
        return len(self.lines) > 0

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)
