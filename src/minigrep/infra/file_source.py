"""Filesystem-backed implementation of :class:`~minigrep.core.protocols.TextSource`.

This module is the **only** place in the codebase that opens files.
``OSError`` and ``UnicodeDecodeError`` are caught here and re-raised as
:class:`~minigrep.exceptions.IoError`; nothing raw escapes the
infrastructure boundary.
"""

from __future__ import annotations

from pathlib import Path

from minigrep.exceptions import IoError


class FileTextSource:
    """Concrete :class:`TextSource` reading whole files from disk.

    Usage::

        source = FileTextSource()
        text = source.read_text("poem.txt")

    Newline translation is disabled so ``\\r\\n`` and lone ``\\r`` reach
    the splitter untouched.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding: str = encoding

    def read_text(self, path: str) -> str:
        """Return the full text content of *path*.

        Raises
        ------
        IoError
            When the file is missing, is a directory, cannot be read, or
            is not valid text in the configured encoding.
        """
        target = Path(path)
        try:
            with target.open(encoding=self._encoding, newline="") as handle:
                return handle.read()
        except FileNotFoundError as exc:
            raise IoError(
                f"No such file: {path}",
                hint="Check the file path argument.",
            ) from exc
        except IsADirectoryError as exc:
            raise IoError(
                f"Is a directory: {path}",
                hint="Directories are not searched; pass a single file.",
            ) from exc
        except PermissionError as exc:
            raise IoError(f"Permission denied: {path}") from exc
        except UnicodeDecodeError as exc:
            raise IoError(
                f"{path} is not valid {self._encoding} text "
                f"(byte offset {exc.start})",
            ) from exc
        except OSError as exc:
            raise IoError(f"Cannot read {path}: {exc.strerror or exc}") from exc
