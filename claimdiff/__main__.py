"""Entry point for `python -m claimdiff`.

Usage:
    python -m claimdiff compare -1 claim1.json -2 claim2.json
"""

from __future__ import annotations

from claimdiff.cli.main import cli

cli(prog_name="claimdiff")
