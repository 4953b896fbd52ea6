"""Claim comparison engines.

Submodules:
    reconcile      -- key set reconciliation (only-in-A, only-in-B, union).
    fields         -- field-by-field diff of open records.
    cnis           -- CNI network and plugin diff engines.
    configurations -- suite configuration diff and abnormal event counts.
    nodes          -- cluster nodes diff engine, role summary and node inventory.
    testcases      -- test case results diff engine.
    tree           -- leaf-level diff of arbitrary JSON subtrees.
    engine         -- runs every section comparison on two claims.
"""

from claimdiff.compare.cnis import diff_networks, diff_plugins
from claimdiff.compare.configurations import diff_configurations
from claimdiff.compare.engine import compare_claims
from claimdiff.compare.fields import diff_fields
from claimdiff.compare.nodes import diff_node_inventory, diff_nodes, roles_summary
from claimdiff.compare.reconcile import reconcile, union
from claimdiff.compare.testcases import diff_test_cases
from claimdiff.compare.tree import compare_trees

__all__ = [
    "compare_claims",
    "compare_trees",
    "diff_configurations",
    "diff_fields",
    "diff_networks",
    "diff_node_inventory",
    "diff_nodes",
    "diff_plugins",
    "diff_test_cases",
    "reconcile",
    "roles_summary",
    "union",
]
