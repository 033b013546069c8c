"""minigrep — search a text file for lines containing a literal pattern.

Built as a small layered tool: a pure core, a filesystem adapter, and a
CLI error boundary.
"""

from minigrep.version import __version__

__all__: list[str] = ["__version__"]
