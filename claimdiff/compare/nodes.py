"""Cluster nodes diff engine.

Produces a role summary per claim plus one NodeDiffReport per node that is
missing from a claim or whose CNI configuration differs. Nodes present and
identical in both claims are left out of the report.

The node inventory diff compares the raw node sections (labels and
annotations, CSI drivers, hardware info) leaf by leaf.
"""

from __future__ import annotations

from collections.abc import Mapping

from claimdiff.compare.cnis import diff_networks
from claimdiff.compare.reconcile import union
from claimdiff.compare.tree import compare_trees
from claimdiff.models.claim import ClaimDocument, NodeDescriptor
from claimdiff.models.reports import (
    DIFFERENT_CNIS,
    NOT_FOUND_IN_CLAIM1,
    NOT_FOUND_IN_CLAIM2,
    DiffReport,
    NodeDiffReport,
    NodeInventoryDiffReport,
    RolesSummary,
)
from claimdiff.observability.logging import get_logger

_logger = get_logger("compare.nodes")

# Only these parts of each Node object are compared in the inventory.
NODE_SUMMARY_FILTERS = ("labels", "annotations")


def roles_summary(node_summaries: Mapping[str, NodeDescriptor]) -> RolesSummary:
    """Count master-only, worker-only and master+worker nodes.

    Nodes with neither role label are not counted.
    """
    masters = workers = master_workers = 0
    for node in node_summaries.values():
        if node.is_master and node.is_worker:
            master_workers += 1
        elif node.is_master:
            masters += 1
        elif node.is_worker:
            workers += 1
    return RolesSummary(master_nodes=masters, worker_nodes=workers, master_worker_nodes=master_workers)


def diff_nodes(claim_a: ClaimDocument, claim_b: ClaimDocument) -> DiffReport:
    """Compare the cluster nodes of two claims."""
    node_diffs = []
    names = union(claim_a.node_summaries, claim_b.node_summaries)

    for name in names:
        if name not in claim_a.node_summaries:
            node_diffs.append(NodeDiffReport(node_name=name, differences=(NOT_FOUND_IN_CLAIM1,)))
            continue
        if name not in claim_b.node_summaries:
            node_diffs.append(NodeDiffReport(node_name=name, differences=(NOT_FOUND_IN_CLAIM2,)))
            continue

        network_diffs = diff_networks(
            claim_a.cni_networks_by_node.get(name, ()),
            claim_b.cni_networks_by_node.get(name, ()),
        )
        if network_diffs:
            node_diffs.append(
                NodeDiffReport(
                    node_name=name,
                    differences=(DIFFERENT_CNIS,),
                    cni_network_diffs=tuple(network_diffs),
                )
            )

    _logger.debug("nodes_compared", nodes=len(names), differing=len(node_diffs))
    return DiffReport(
        claim1_summary=roles_summary(claim_a.node_summaries),
        claim2_summary=roles_summary(claim_b.node_summaries),
        node_diffs=tuple(node_diffs),
    )


def diff_node_inventory(claim_a: ClaimDocument, claim_b: ClaimDocument) -> NodeInventoryDiffReport:
    """Compare node labels and annotations, CSI drivers and hardware info leaf by leaf."""
    return NodeInventoryDiffReport(
        nodes=compare_trees("Nodes", claim_a.node_summary_tree, claim_b.node_summary_tree, NODE_SUMMARY_FILTERS),
        csi=compare_trees("CSIs", claim_a.csi_driver, claim_b.csi_driver),
        hardware=compare_trees("Hardware", claim_a.nodes_hw_info, claim_b.nodes_hw_info),
    )
