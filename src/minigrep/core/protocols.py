"""Protocols (interfaces) consumed by the core layer.

Core code depends only on these protocols, never on concrete
filesystem adapters.
"""

from __future__ import annotations

from typing import Protocol


class TextSource(Protocol):
    """Contract for loading the full text of a search target.

    Any object that implements :meth:`read_text` with the correct
    signature satisfies this protocol structurally.
    """

    def read_text(self, path: str) -> str:
        """Return the entire content of *path* as text.

        Line terminators must be returned untranslated; splitting is the
        search engine's job.

        Raises
        ------
        IoError
            When *path* is missing, unreadable, or not valid text.
        """
        ...  # pragma: no cover
