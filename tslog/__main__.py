"""Entry point for `python -m tslog`.

Usage:
    python -m tslog add mystopwatch
    python -m tslog show -diff-prev
"""

from __future__ import annotations

from tslog.cli import cli

cli(prog_name="tslog")
