"""Core layer — pure argument resolution and line matching.

Rules
-----
* No ``print()`` calls.
* No filesystem access; text arrives through :class:`TextSource`.
* No imports from ``cli`` or ``infra``.
"""

from minigrep.core.config import resolve_request
from minigrep.core.models import MatchResult, SearchRequest
from minigrep.core.protocols import TextSource
from minigrep.core.search import (
    SearchEngine,
    search,
    search_case_insensitive,
    split_lines,
)
from minigrep.core.settings import Settings, load_settings

__all__: list[str] = [
    "MatchResult",
    "SearchEngine",
    "SearchRequest",
    "Settings",
    "TextSource",
    "load_settings",
    "resolve_request",
    "search",
    "search_case_insensitive",
    "split_lines",
]
