"""Allow ``python -m checkin_kit`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m checkin_kit`` behaves identically to the ``checkin-kit``
console script.
"""

from __future__ import annotations

from checkin_kit.cli.app import cli

if __name__ == "__main__":
    cli()
