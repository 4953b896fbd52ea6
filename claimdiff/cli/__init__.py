"""claimdiff command-line interface.

Exposes:
    cli -- Click group entry point (registered as ``claimdiff`` script).
"""

from claimdiff.cli.main import cli

__all__ = ["cli"]
