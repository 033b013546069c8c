"""Allow ``python -m minigrep`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m minigrep`` behaves identically to the ``minigrep`` console
script.
"""

from __future__ import annotations

from minigrep.cli.app import cli

if __name__ == "__main__":
    cli()
