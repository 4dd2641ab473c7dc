"""Allow ``python -m ibc_xfer`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m ibc_xfer`` behaves identically to the ``ibc-xfer`` console
script.
"""

from __future__ import annotations

from ibc_xfer.cli.app import cli

if __name__ == "__main__":
    cli()
