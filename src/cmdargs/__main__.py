"""Allow ``python -m cmdargs`` invocation.

Delegates to the demo program's error-boundary entry point so that
``python -m cmdargs`` behaves identically to the ``cmdargs-demo``
console script.
"""

from __future__ import annotations

from cmdargs.cli.app import cli

if __name__ == "__main__":
    cli()
