"""``python -m ip_inspect`` — same behaviour as the ``ip-inspect`` script."""

from __future__ import annotations

from ip_inspect.cli.app import cli

if __name__ == "__main__":
    cli()
