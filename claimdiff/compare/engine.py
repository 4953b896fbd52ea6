"""Top-level comparison of two claim documents."""

from __future__ import annotations

from claimdiff.compare.configurations import diff_configurations
from claimdiff.compare.nodes import diff_node_inventory, diff_nodes
from claimdiff.compare.testcases import diff_test_cases
from claimdiff.compare.tree import compare_trees
from claimdiff.models.claim import ClaimDocument
from claimdiff.models.reports import ClaimComparison
from claimdiff.observability.logging import get_logger

_logger = get_logger("compare.engine")

VERSIONS_SECTION = "VERSIONS"


def compare_claims(claim1: ClaimDocument, claim2: ClaimDocument) -> ClaimComparison:
    """Run every section comparison on two parsed claims.

    Pure: neither document is modified and nothing is shared between calls.
    """
    comparison = ClaimComparison(
        versions=compare_trees(VERSIONS_SECTION, claim1.versions, claim2.versions),
        test_cases=diff_test_cases(claim1.results_by_suite, claim2.results_by_suite),
        configurations=diff_configurations(claim1, claim2),
        nodes=diff_nodes(claim1, claim2),
        node_inventory=diff_node_inventory(claim1, claim2),
    )
    _logger.debug(
        "claims_compared",
        differing_test_cases=comparison.test_cases.differing_count,
        differing_nodes=len(comparison.nodes.node_diffs),
        differing_versions=len(comparison.versions.fields),
    )
    return comparison
