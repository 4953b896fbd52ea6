"""Click commands for claimdiff.

Flags and environment configuration are folded into a CompareConfig that is
passed down explicitly; no command keeps module-level state.
"""

from __future__ import annotations

import io
import sys

import click

from claimdiff import __version__
from claimdiff.compare.engine import compare_claims
from claimdiff.config import OUTPUT_FORMATS, load_config, validate_log_level
from claimdiff.errors import ClaimDiffError
from claimdiff.loader import load_claim
from claimdiff.models.config import CompareConfig
from claimdiff.observability.logging import get_logger, setup_logging
from claimdiff.render import write_report

_logger = get_logger("cli")

_COMPARE_HELP = """Compare two claim files.

Shows, per section, the differences between two claim files: claim
versions, test case results, and cluster nodes (roles and per-node CNI
networks and plugins). Useful when test case results differ between two
runs, as configuration differences in the cluster nodes may explain them.

Entries present and identical in both claim files are not shown.
"""


def run_compare(config: CompareConfig) -> str:
    """Load both claims, compare them and return the rendered report.

    Raises ClaimDiffError if either claim cannot be loaded or compared;
    nothing is compared unless both files load.
    """
    claim1 = load_claim(config.claim1_path)
    claim2 = load_claim(config.claim2_path)
    comparison = compare_claims(claim1, claim2)

    sink = io.StringIO()
    write_report(comparison, sink, output_format=config.output_format, json_indent=config.json_indent)
    return sink.getvalue()


@click.group()
@click.version_option(__version__, prog_name="claimdiff")
def cli() -> None:
    """Tools for working with compliance suite claim files."""


@cli.command("compare", help=_COMPARE_HELP)
@click.option(
    "--claim1",
    "-1",
    "claim1_path",
    required=True,
    type=click.Path(dir_okay=False),
    help="Existing claim1 file. First file to compare.",
)
@click.option(
    "--claim2",
    "-2",
    "claim2_path",
    required=True,
    type=click.Path(dir_okay=False),
    help="Existing claim2 file. Second file to compare.",
)
@click.option(
    "--output",
    "-o",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default=None,
    help="Report format. Defaults to CLAIMDIFF_OUTPUT_FORMAT or text.",
)
@click.option("--log-level", default=None, help="Log level (debug, info, warning, error).")
def compare(claim1_path: str, claim2_path: str, output_format: str | None, log_level: str | None) -> None:
    try:
        settings = load_config()
        level = validate_log_level(log_level) if log_level else settings.log.level
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    setup_logging(level)
    config = CompareConfig(
        claim1_path=claim1_path,
        claim2_path=claim2_path,
        output_format=(output_format or settings.output.format).lower(),
        json_indent=settings.output.json_indent,
    )

    try:
        report = run_compare(config)
    except ClaimDiffError as exc:
        _logger.error("compare_failed", error=str(exc))
        click.echo(f"Error comparing claim files: {exc}", err=True)
        sys.exit(1)

    click.echo(report, nl=False)
