"""Allow ``python -m zkcli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m zkcli`` behaves identically to the ``zkcli`` console
script.
"""

from __future__ import annotations

from zkcli.cli.app import cli

if __name__ == "__main__":
    cli()
