"""Infrastructure layer — filesystem access.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
* Every raw ``OSError`` / decode error is re-raised as
  :class:`~minigrep.exceptions.IoError`.
"""

from minigrep.infra.file_source import FileTextSource

__all__: list[str] = ["FileTextSource"]
