"""tslog command-line interface.

Exposes:
    cli -- Click group entry point (registered as ``tslog`` script).
"""

from tslog.cli.main import cli

__all__ = ["cli"]
